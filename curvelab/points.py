"""Control points for a one-dimensional curve y(x), and the ordered collection
that owns them.

A PointCollection keeps its points sorted by x, with no two points closer than
a given radius along x (the radius of the markers a user drags around), and
every point at least that radius inside the collection boundaries. Points are
addressed by position: any structural change (add or remove) can shift the
index of the other points, so callers must refresh any index they hold.

Example:
    points = PointCollection(width=300, height=200)
    i = points.add((150, 100), radius=10)
    i = points.move(i, 170, 60, radius=10)
    points.x_series(), points.y_series()  # array([170.]), array([60.])
"""

import collections
import logging
import math

import numpy

from .curve import geometry
from . import errors

logger = logging.getLogger(__name__)

AXES = ('x', 'y')
LIMITS = ('min', 'max')

Nearest = collections.namedtuple('Nearest', ('index', 'distance'))


class ControlPoint:
    """A single control point of the curve.

    Attributes:
        x, y: position in the pixel-like coordinate space of the collection.
        x_locked, y_locked: if True, moves leave that coordinate unchanged.
        value: (x, y) position rescaled into the collection's base range
            (e.g. 0-255); kept up to date by the collection.
    """
    def __init__(self, x, y, x_locked=False, y_locked=False):
        self.x = float(x)
        self.y = float(y)
        self.x_locked = bool(x_locked)
        self.y_locked = bool(y_locked)
        self.value = (0, 0)

    def __repr__(self):
        locks = ''.join(axis for axis, locked in zip(AXES, (self.x_locked, self.y_locked)) if locked)
        locks = ', locked={!r}'.format(locks) if locks else ''
        return 'ControlPoint(x={:g}, y={:g}{})'.format(self.x, self.y, locks)

    @property
    def locked(self):
        """True if neither coordinate may be moved."""
        return self.x_locked and self.y_locked


class PointCollection:
    def __init__(self, width, height, base_value=255):
        """Create an empty collection of points bounded by [0, width] in x and
        [0, height] in y.

        Parameters:
            width, height: extent of the coordinate space.
            base_value: maximum of the range that point positions are rescaled
                into for display (see ControlPoint.value).
        """
        self.boundaries = {
            'x': {'min': 0.0, 'max': float(width)},
            'y': {'min': 0.0, 'max': float(height)}
        }
        self.base_value = base_value
        self._points = []

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._points)

    def set_boundary(self, limit, axis, value):
        """Set the 'min' or 'max' limit of the 'x' or 'y' axis.

        Existing points are not moved: the new boundary applies to subsequent
        add and move operations."""
        self._check_boundary_key(limit, axis)
        self.boundaries[axis][limit] = float(value)

    def get_boundary(self, limit, axis):
        self._check_boundary_key(limit, axis)
        return self.boundaries[axis][limit]

    def get_point(self, index):
        """Return the ControlPoint at the given position, or None if there is
        no such point."""
        if 0 <= index < len(self._points):
            return self._points[index]
        return None

    def x_series(self):
        """Return a read-only array of the point x-positions, in increasing order."""
        return self._series('x')

    def y_series(self):
        """Return a read-only array of the point y-positions, ordered by x."""
        return self._series('y')

    def coordinates(self):
        """Return an array of shape (n, 2) with the x, y position of each point."""
        return numpy.array([(point.x, point.y) for point in self._points], dtype=float).reshape(-1, 2)

    def add(self, point, radius=0):
        """Add a point, keeping the collection sorted by x.

        The point is clamped into the boundaries minus 'radius'. If it lies
        within 'radius' along x of an existing point, it is pushed aside to the
        closest position that is 'radius' away from all the others.

        Parameters:
            point: (x, y) or (x, y, x_locked, y_locked)
            radius: minimum distance from the boundaries and, along x, from
                the other points.

        Returns: the index of the new point.

        Raises PlacementConflict (leaving the collection unchanged) if there is
        no room for the point inside the boundaries.
        """
        _check_radius(radius)
        x, y, x_locked, y_locked = _unpack(point)
        x = self._clamp('x', x, radius)
        y = self._clamp('y', y, radius)
        xs = self.x_series()
        if len(xs) > 0 and not geometry.is_separated(x, xs, radius):
            low, high = self._limits('x', radius)
            new_x = geometry.nearest_separated_position(x, xs, radius, low, high)
            if new_x is None:
                logger.warning('No room to add a point near x=%g with radius %g', x, radius)
                raise errors.PlacementConflict('Cannot place a point near x={:g}: no position at least {:g} from '
                    'the other points fits within the boundaries.'.format(x, radius))
            logger.debug('Point pushed aside from x=%g to x=%g', x, new_x)
            x = new_x
        index = int(numpy.searchsorted(xs, x))
        new_point = ControlPoint(x, y, x_locked, y_locked)
        self._update_value(new_point, radius)
        self._points.insert(index, new_point)
        logger.debug('Added %r at index %d', new_point, index)
        return index

    def remove(self, index):
        """Remove and return the point at the given index. The points after it
        shift down by one position."""
        self._checked_point(index)
        removed = self._points.pop(index)
        logger.debug('Removed %r from index %d', removed, index)
        return removed

    def move(self, index, target_x, target_y, radius=0):
        """Move the point at 'index' toward (target_x, target_y).

        Locked coordinates are left alone, and a point locked in both x and y
        does not move at all. The target is clamped into the boundaries minus
        'radius', and x is further clamped to stay at least 'radius' away from
        the neighboring points: points never pass through one another, so the
        index of the point is unchanged.

        If there is no room for the point at this radius between its neighbors
        and the boundaries (only possible when the points were placed with a
        smaller radius), its x position is left as it was.

        Returns: the index of the moved point.
        """
        _check_radius(radius)
        point = self._checked_point(index)
        if point.locked:
            logger.debug('Point %d is locked; not moving it', index)
            return index
        x, y = point.x, point.y
        if not point.x_locked:
            low, high = self._limits('x', radius)
            if index > 0:
                low = max(low, _offset(self._points[index-1].x, radius, numpy.inf))
            if index < len(self._points) - 1:
                high = min(high, _offset(self._points[index+1].x, radius, -numpy.inf))
            if low <= high:
                x = min(max(float(target_x), low), high)
        if not point.y_locked:
            y = self._clamp('y', target_y, radius)
        point.x = float(x)
        point.y = float(y)
        self._update_value(point, radius)
        logger.debug('Moved point %d to (%g, %g)', index, point.x, point.y)
        return index

    def nearest(self, query):
        """Find the point closest to the (x, y) position 'query'.

        Returns Nearest(index, distance), or None if the collection is empty."""
        closest = geometry.closest_point(numpy.asarray(query, dtype=float), self.coordinates())
        if closest is None:
            return None
        return Nearest(*closest)

    def point_within(self, query, radius):
        """Return the index of the point closest to 'query' if it is no farther
        than 'radius' away (i.e. if 'query' is over that point's marker), else None."""
        closest = self.nearest(query)
        if closest is None or closest.distance > radius:
            return None
        return closest.index

    def clear(self):
        self._points.clear()

    def _series(self, axis):
        series = numpy.array([getattr(point, axis) for point in self._points], dtype=float)
        series.flags.writeable = False
        return series

    def _checked_point(self, index):
        point = self.get_point(index)
        if point is None:
            raise errors.IndexOutOfRange('No control point at index {} (collection has {} points).'.format(index, len(self._points)))
        return point

    def _limits(self, axis, radius):
        bounds = self.boundaries[axis]
        return bounds['min'] + radius, bounds['max'] - radius

    def _clamp(self, axis, value, radius):
        low, high = self._limits(axis, radius)
        return geometry.clamp(float(value), low, high)

    def _rescale(self, axis, coordinate, radius):
        low, high = self._limits(axis, radius)
        span = high - low
        if span <= 0:
            return 0
        # round half up, so the middle of a 0-255 range maps to 128
        return int(math.floor((coordinate - low) / span * self.base_value + 0.5))

    def _update_value(self, point, radius):
        point.value = (self._rescale('x', point.x, radius), self._rescale('y', point.y, radius))

    @staticmethod
    def _check_boundary_key(limit, axis):
        if limit not in LIMITS:
            raise ValueError('Boundary limit must be one of {}, not "{}".'.format(LIMITS, limit))
        if axis not in AXES:
            raise ValueError('Boundary axis must be one of {}, not "{}".'.format(AXES, axis))


def _unpack(point):
    if isinstance(point, ControlPoint):
        return point.x, point.y, point.x_locked, point.y_locked
    if len(point) == 2:
        x, y = point
        return x, y, False, False
    if len(point) == 4:
        return tuple(point)
    raise ValueError('A point must be given as (x, y) or (x, y, x_locked, y_locked).')

def _check_radius(radius):
    if radius < 0:
        raise ValueError('Radius must be non-negative, not {}.'.format(radius))

def _offset(position, radius, direction):
    # with zero radius the neighbor itself is off-limits: step to the next float
    if radius == 0:
        return numpy.nextafter(position, direction)
    return position + radius if direction > 0 else position - radius
