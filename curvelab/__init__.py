'''
# curvelab

Python modules for sculpting a one-dimensional curve y(x) from draggable control
points, and reading it back as a densely sampled series or a lookup table.

Curve
-----
Functions for fitting and querying one-dimensional curves through control points.
 - curve.geometry: basic algorithms for points in the plane (clamping, nearest-neighbor search, separation).
 - curve.interpolate: natural and monotonic (Fritsch-Carlson) cubic spline interpolants, using scipy.interpolate.

Editing
-------
 - points: control points and the ordered, bounded collection that owns them (add, move, remove, nearest-point queries).
 - sampler: sample the curve through a point collection at a fixed resolution, with flat extrapolation past the end points.
 - editor: an editing session in normalized coordinates, with observer callbacks for point changes.
 - transfer: use the curve as a transfer function: build lookup tables and map arrays through it.
 - errors: exception classes.
 - logging_config: optional console/file logging setup for applications.

'''
