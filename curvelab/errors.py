class CurveError(Exception):
    """Base class for errors raised by curvelab."""

class IndexOutOfRange(CurveError, IndexError):
    """A control-point index does not refer to a point in the collection."""

class PlacementConflict(CurveError, ValueError):
    """A point cannot be placed at least the required separation away from
    its neighbors without leaving the boundaries."""

class InsufficientPoints(CurveError, ValueError):
    """Too few samples to build a spline (at least two are needed)."""
