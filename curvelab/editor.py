"""Editing session for a single curve, in normalized coordinates.

A CurveEditor is what a presentation layer (a canvas widget, a web front end, a
script) talks to. Points are added and moved in normalized [0, 1] x [0, 1]
coordinates; internally they live in a width x height pixel space, kept
'radius' (the size of the on-screen markers) away from the edges and from one
another.

Observers can be registered for the 'point_added', 'point_moved' and
'point_removed' events. Each callback is called as callback(editor, index)
once the corresponding operation has completed; failed operations notify
no-one. Callbacks must not modify the editor.

Example:
    editor = CurveEditor(width=256, height=256, spline_type='monotonic')
    editor.connect('point_added', lambda editor, index: redraw())
    editor.add(0.25, 0.1)
    editor.add(0.75, 0.9)
    series = editor.sample()
    editor.value_at(0.5)
"""

import logging

import numpy

from . import points
from . import sampler

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = 10
DEFAULT_BASE_VALUE = 255
DEFAULT_SPLINE_TYPE = 'natural'

EVENTS = ('point_added', 'point_moved', 'point_removed')


class CurveEditor:
    def __init__(self, width, height, radius=DEFAULT_RADIUS, spline_type=DEFAULT_SPLINE_TYPE, base_value=DEFAULT_BASE_VALUE):
        """Parameters:
            width, height: size in pixels of the editing area.
            radius: radius in pixels of the control-point markers, used as the
                minimum distance between points and from the edges.
            spline_type: 'natural' or 'monotonic'.
            base_value: maximum of the range in which point values are
                reported (see points.ControlPoint.value).
        """
        self.width = width
        self.height = height
        self.radius = radius
        self.points = points.PointCollection(width, height, base_value)
        self.sampler = sampler.CurveSampler(self.points, spline_type)
        self._observers = {event: [] for event in EVENTS}
        self._series = sampler.SampledSeries(numpy.zeros(int(width)), numpy.zeros(int(width)))

    def __len__(self):
        return len(self.points)

    @property
    def spline_type(self):
        return self.sampler.spline_type

    def set_spline_type(self, spline_type):
        """Use a 'natural' or 'monotonic' spline for subsequent sampling."""
        self.sampler.set_spline_type(spline_type)
        logger.debug('Spline type set to %s', spline_type)

    def set_radius(self, radius):
        """Change the marker radius used for subsequent add and move operations."""
        if radius < 0:
            raise ValueError('Radius must be non-negative, not {}.'.format(radius))
        self.radius = radius

    def connect(self, event, callback):
        """Call callback(editor, index) after each operation of the given type:
        one of 'point_added', 'point_moved' or 'point_removed'."""
        self._check_event(event)
        self._observers[event].append(callback)

    def disconnect(self, event, callback):
        self._check_event(event)
        try:
            self._observers[event].remove(callback)
        except ValueError:
            raise ValueError('Callback {!r} is not connected to "{}".'.format(callback, event))

    def add(self, x, y, x_locked=False, y_locked=False):
        """Add a point at normalized position (x, y), optionally locking either
        coordinate against future moves.

        Returns the index of the new point, which may have been pushed aside
        from (x, y) to keep clear of the others. Raises errors.PlacementConflict
        if there is no room for it."""
        index = self.points.add((x * self.width, y * self.height, x_locked, y_locked), self.radius)
        self._notify('point_added', index)
        return index

    def move(self, index, x, y):
        """Move the point at 'index' toward normalized position (x, y), subject
        to its locks, the boundaries, and its neighbors. Returns its index."""
        index = self.points.move(index, x * self.width, y * self.height, self.radius)
        self._notify('point_moved', index)
        return index

    def remove(self, index):
        """Remove and return the point at 'index'."""
        removed = self.points.remove(index)
        self._notify('point_removed', index)
        return removed

    def get_point(self, index):
        return self.points.get_point(index)

    def nearest(self, x_px, y_px):
        """Return points.Nearest(index, distance) for the point closest to the
        pixel position (x_px, y_px), or None if there are no points."""
        return self.points.nearest((x_px, y_px))

    def point_at(self, x_px, y_px):
        """Return the index of the point whose marker covers the pixel position
        (x_px, y_px), or None."""
        return self.points.point_within((x_px, y_px), self.radius)

    def control_points(self):
        """Return an array of shape (n, 4) with normalized x, y and the x, y
        locks (as 0 or 1) of each point, in order."""
        return numpy.array([(point.x / self.width, point.y / self.height, point.x_locked, point.y_locked)
            for point in self.points], dtype=float).reshape(-1, 4)

    def sample(self, domain_size=None):
        """Sample the curve once per horizontal pixel (or at domain_size
        positions). See sampler.CurveSampler.sample().

        The result is also kept as the current interpolated series."""
        self._series = self.sampler.sample(self.width, self.height, domain_size)
        return self._series

    def x_series_interpolated(self):
        """Return the normalized positions from the most recent sample()."""
        return self._series.x_series

    def y_series_interpolated(self):
        """Return the normalized curve values from the most recent sample()."""
        return self._series.y_series

    def value_at(self, x):
        """Return the normalized curve value at normalized position x."""
        return self.sampler.value_at(x, self.width, self.height)

    def values_at(self, xs):
        """Return the normalized curve values at an array of normalized positions."""
        return self.sampler.values_at(xs, self.width, self.height)

    def _notify(self, event, index):
        for callback in list(self._observers[event]):
            callback(self, index)

    @staticmethod
    def _check_event(event):
        if event not in EVENTS:
            raise ValueError('Unknown event "{}": must be one of {}.'.format(event, ', '.join(EVENTS)))
