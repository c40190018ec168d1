"""Sample the curve through a PointCollection at a fixed resolution.

Outside the span of the control points the curve is flat, holding the y value
of the first (or last) point; between them it follows a natural or monotonic
cubic spline through the points. Sampled values are clamped to the height of
the coordinate space, and then normalized to [0, 1].

The spline is rebuilt from the current points on every request, which is
cheap for the tens of points a user places by hand.
"""

import collections

import numpy

from .curve import interpolate

SampledSeries = collections.namedtuple('SampledSeries', ('x_series', 'y_series'))


class CurveSampler:
    def __init__(self, points, spline_type='natural'):
        """Parameters:
            points: the PointCollection to sample.
            spline_type: 'natural' or 'monotonic' (see curve.interpolate).
        """
        self.points = points
        self.set_spline_type(spline_type)

    def set_spline_type(self, spline_type):
        interpolate.get_builder(spline_type) # raises ValueError if unknown
        self.spline_type = spline_type

    def sample(self, width, height, domain_size=None):
        """Evaluate the curve at each integer position 0, 1, ... domain_size-1.

        Parameters:
            width, height: extent of the coordinate space of the points; used
                to normalize the output.
            domain_size: number of samples to produce. If None, one sample per
                unit of width.

        Returns: SampledSeries(x_series, y_series), two arrays of length
            domain_size with the normalized sample positions (i / width) and
            curve values. If there are no points, y_series is all NaN.
        """
        if domain_size is None:
            domain_size = int(width)
        positions = numpy.arange(domain_size, dtype=float)
        return SampledSeries(positions / width, self._evaluate(positions, height))

    def value_at(self, x, width, height):
        """Return the normalized curve value at a single normalized position x,
        following the same rules as sample(). NaN if there are no points."""
        return float(self.values_at([x], width, height)[0])

    def values_at(self, xs, width, height):
        """Return the normalized curve values at an array of normalized
        positions, of the same shape, building the spline only once."""
        xs = numpy.asarray(xs, dtype=float)
        values = self._evaluate(xs.ravel() * width, height)
        return values.reshape(xs.shape)

    def interpolant(self):
        """Return the spline through the current points, or None if there are
        fewer than two points."""
        xs = self.points.x_series()
        if len(xs) < 2:
            return None
        return interpolate.build(xs, self.points.y_series(), self.spline_type)

    def _evaluate(self, positions, height):
        ys = self.points.y_series()
        if len(ys) == 0:
            return numpy.full(len(positions), numpy.nan)
        if len(ys) == 1:
            values = numpy.full(len(positions), ys[0])
        else:
            xs = self.points.x_series()
            values = numpy.empty(len(positions), dtype=float)
            before = positions < xs[0]
            after = positions > xs[-1]
            inside = ~(before | after)
            values[before] = ys[0]
            values[after] = ys[-1]
            if inside.any():
                values[inside] = self.interpolant().evaluate(positions[inside])
        values.clip(0, height, out=values)
        return values / height
