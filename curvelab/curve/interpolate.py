import numpy
from scipy import interpolate

from .. import errors

def natural_spline(xs, ys):
    """Fit a natural cubic spline through the given samples.

    The natural spline has zero second derivative at both ends, which gives a
    C2-smooth curve through every sample. It may overshoot between samples.

    Parameters:
    xs: strictly increasing array of n sample positions, n >= 2
    ys: array of n sample values

    Returns an Interpolant."""
    xs, ys = _check_samples(xs, ys)
    if len(xs) == 2:
        # a natural spline through two points is the straight line between them
        slope = (ys[1] - ys[0]) / (xs[1] - xs[0])
        ppoly = interpolate.CubicHermiteSpline(xs, ys, [slope, slope])
    else:
        ppoly = interpolate.CubicSpline(xs, ys, bc_type='natural')
    return Interpolant(xs, ys, ppoly, 'natural')


def monotonic_spline(xs, ys):
    """Fit a monotonic cubic spline through the given samples.

    The spline is a piecewise cubic Hermite interpolant whose tangents are
    limited per Fritsch & Carlson (1980) so that the curve never leaves the
    range of values spanned by each pair of consecutive samples.

    Parameters:
    xs: strictly increasing array of n sample positions, n >= 2
    ys: array of n sample values

    Returns an Interpolant."""
    xs, ys = _check_samples(xs, ys)
    tangents = fritsch_carlson_tangents(xs, ys)
    ppoly = interpolate.CubicHermiteSpline(xs, ys, tangents)
    return Interpolant(xs, ys, ppoly, 'monotonic')


def fritsch_carlson_tangents(xs, ys):
    """Return the derivative at each sample for a monotonic Hermite spline.

    Tangents start as the mean of the adjacent secant slopes (one-sided at the
    ends), are zeroed at local extrema and across flat segments, and are then
    scaled down wherever they would let the cubic overshoot."""
    xs = numpy.asarray(xs, dtype=float)
    ys = numpy.asarray(ys, dtype=float)
    secants = numpy.diff(ys) / numpy.diff(xs)
    tangents = numpy.empty_like(xs)
    tangents[0] = secants[0]
    tangents[-1] = secants[-1]
    tangents[1:-1] = (secants[:-1] + secants[1:]) / 2
    # a sign change (or a flat neighbor) means a local extremum: flatten it
    tangents[1:-1][secants[:-1] * secants[1:] <= 0] = 0
    for k, secant in enumerate(secants):
        if secant == 0:
            tangents[k] = tangents[k+1] = 0
            continue
        alpha = tangents[k] / secant
        beta = tangents[k+1] / secant
        magnitude = alpha**2 + beta**2
        if magnitude > 9:
            tau = 3 / numpy.sqrt(magnitude)
            tangents[k] = tau * alpha * secant
            tangents[k+1] = tau * beta * secant
    return tangents


SPLINE_TYPES = {
    'natural': natural_spline,
    'monotonic': monotonic_spline
}

def get_builder(spline_type):
    """Return the spline-building function registered under the given name."""
    try:
        return SPLINE_TYPES[spline_type]
    except KeyError:
        raise ValueError('Unknown spline type "{}": must be one of {}.'.format(spline_type, ', '.join(sorted(SPLINE_TYPES))))


def build(xs, ys, spline_type='natural'):
    """Build an interpolant of the named type ('natural' or 'monotonic') through
    the samples xs, ys. See natural_spline() and monotonic_spline()."""
    return get_builder(spline_type)(xs, ys)


class Interpolant:
    """A cubic interpolant through a fixed set of samples.

    Evaluate with interpolant.evaluate(x) or simply interpolant(x), where x is a
    scalar or an array of positions within [xs[0], xs[-1]]. Outside that range
    the result is the polynomial extrapolation of the end segment, which callers
    should not rely on.

    The sample arrays are copies, so an Interpolant never changes after
    construction."""
    def __init__(self, xs, ys, ppoly, spline_type):
        xs.flags.writeable = False
        ys.flags.writeable = False
        self.xs = xs
        self.ys = ys
        self.spline_type = spline_type
        self._ppoly = ppoly

    def __repr__(self):
        return '{}({} spline, {} samples)'.format(type(self).__name__, self.spline_type, len(self.xs))

    def evaluate(self, x):
        values = self._ppoly(x)
        if numpy.ndim(values) == 0:
            return float(values)
        return values

    __call__ = evaluate

    def derivative(self, x, order=1):
        """Evaluate the given derivative of the interpolant at x."""
        values = self._ppoly(x, nu=order)
        if numpy.ndim(values) == 0:
            return float(values)
        return values


def _check_samples(xs, ys):
    xs = numpy.array(xs, dtype=float)
    ys = numpy.array(ys, dtype=float)
    if xs.ndim != 1 or ys.ndim != 1:
        raise ValueError('Sample positions and values must be one-dimensional.')
    if len(xs) != len(ys):
        raise ValueError('Lengths of the sample positions and values must be equal')
    if len(xs) < 2:
        raise errors.InsufficientPoints('At least two samples are required to build a spline, got {}.'.format(len(xs)))
    if not numpy.all(numpy.diff(xs) > 0):
        raise ValueError('Sample positions must be strictly increasing.')
    return xs, ys
