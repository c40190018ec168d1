'''
Curve
-----
Functions for fitting and querying one-dimensional curves y(x) through a set of control points.
 - curve.geometry: basic algorithms for points in the plane (clamping, nearest-neighbor search, separation).
 - curve.interpolate: natural and monotonic cubic spline interpolants (using scipy.interpolate).
 '''
