import numpy

def lookup_table(editor, size=256, output_max=255, dtype=numpy.uint8):
    """Tabulate the curve of a CurveEditor as a lookup table.

    Parameters:
        editor: CurveEditor whose curve to tabulate.
        size: number of table entries; entry i holds the curve value at
            normalized position i / (size - 1).
        output_max: table value corresponding to a normalized curve value of 1.
        dtype: dtype of the table. Integer tables are rounded to the nearest
            integer.

    Returns: array of shape (size,). If the curve has no points the identity
    mapping is returned.
    """
    table = _curve_values(editor, numpy.linspace(0, 1, size)) * output_max
    if numpy.issubdtype(dtype, numpy.integer):
        table = numpy.round(table)
    return table.astype(dtype)

def apply(editor, array, input_max=255, output_max=None):
    """Map the values of an array (e.g. an image) through the curve.

    Input values are clipped to [0, input_max] and scaled to the curve's
    normalized x range; the curve values are scaled back to [0, output_max]
    (by default, the same as input_max). The curve is evaluated at every
    input value, so the result does not depend on the scale of the input.

    Returns a float32 array of the same shape as the input."""
    if output_max is None:
        output_max = input_max
    array = numpy.asarray(array, dtype=float)
    positions = (array / input_max).clip(0, 1)
    return (_curve_values(editor, positions) * output_max).astype(numpy.float32)

def _curve_values(editor, positions):
    if len(editor) == 0:
        return positions
    return editor.values_at(positions).clip(0, 1)
