import numpy

# slack allowed when comparing separations computed in floating point
_TOLERANCE = 1e-9

def distances_to(point, points):
    """Return the Euclidean distance from 'point' to each of the given points.

    Parameters:
    point: array of shape (m) for a single point in m dimensions
    points: array of shape (n,m) consisting of n points in m dimensions"""
    points = numpy.asarray(points, dtype=float).reshape(-1, len(point))
    return numpy.sqrt(((points - point)**2).sum(axis=1))

def closest_point(point, points):
    """Find the closest position in array 'points' to the provided 'point'.

    Returns (index, distance), or None if 'points' is empty. Ties go to the
    lowest index."""
    distances = distances_to(point, points)
    if len(distances) == 0:
        return None
    i = int(numpy.argmin(distances))
    return i, float(distances[i])

def clamp(value, low, high):
    """Clamp a scalar into [low, high]. If the range is empty (low > high), the
    midpoint of the range is returned."""
    if low > high:
        return (low + high) / 2
    return min(max(value, low), high)

def is_separated(position, positions, separation):
    """Return True if 'position' is at least 'separation' away from every value
    in 'positions' (and, for zero separation, distinct from all of them).
    A small tolerance absorbs floating-point error in positions that were
    themselves computed as a neighbor +/- separation."""
    positions = numpy.asarray(positions, dtype=float)
    gaps = numpy.absolute(positions - position)
    return bool(numpy.all((gaps >= separation - _TOLERANCE) & (gaps > 0)))

def nearest_separated_position(position, positions, separation, low, high):
    """Find the value in [low, high] closest to 'position' that is at least
    'separation' away from every value in 'positions'.

    The candidates are the position itself and each existing position offset
    by +/- separation (or by one floating-point step, for zero separation).
    Among valid candidates the closest wins, and ties go to the larger value.

    Returns the new position, or None if no valid position exists in range."""
    positions = numpy.asarray(positions, dtype=float)
    if separation > 0:
        below, above = positions - separation, positions + separation
    else:
        below, above = numpy.nextafter(positions, -numpy.inf), numpy.nextafter(positions, numpy.inf)
    candidates = numpy.concatenate([[position], below, above])
    candidates = candidates[(candidates >= low) & (candidates <= high)]
    best = None
    for candidate in candidates:
        if not is_separated(candidate, positions, separation):
            continue
        key = (abs(candidate - position), -candidate)
        if best is None or key < best[0]:
            best = key, float(candidate)
    return None if best is None else best[1]
