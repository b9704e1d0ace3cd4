# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import numpy as np

from pyorth.core.defaults import defaults


def _format_element(e, compact_print):
    if not compact_print:
        return repr(float(e))
    if e == 0 or 1e-2 <= abs(e) < 1e15:
        return f'{e:.2f}'
    return f'{e:.2e}'


@defaults('width', 'compact_print')
def format_array(array, width=26, compact_print=False):
    """Creates a column-aligned string representation of a |NumPy array|.

    One-dimensional arrays are rendered as a single row, two-dimensional
    arrays with one line per row. Each entry is left-justified in a column
    of `width` characters.

    Parameters
    ----------
    array
        The one- or two-dimensional |NumPy array| to be formatted.
    width
        Width of each column. Entries longer than `width` are separated
        by two spaces.
    compact_print
        If `True`, print entries with two significant decimals instead of
        their full `repr`.

    Returns
    -------
    The string representation.
    """
    array = np.asarray(array)
    if array.ndim == 1:
        array = array[np.newaxis, :]
    assert array.ndim == 2

    lines = []
    for row in array:
        cells = [_format_element(e, compact_print) for e in row]
        cells = [c.ljust(max(width, len(c) + 2)) for c in cells]
        lines.append(''.join(cells).rstrip())
    return '\n'.join(lines)
