# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

from itertools import zip_longest
from shutil import get_terminal_size
from textwrap import wrap

import numpy as np


def _wrap_entry(entry, width):
    # make wrap break lines on '.' instead of '-', mainly for defaults paths
    if '°' in entry:
        raise ValueError
    entry = entry.replace('-', '°').replace('.', '-')
    lines = wrap(entry, width, subsequent_indent='  ', break_on_hyphens=True)
    return [l.replace('-', '.').replace('°', '-') for l in lines] or ['']


def format_table(rows, width='AUTO', title=None):
    """Format a list of rows as a text table.

    The first row is treated as header and separated from the remaining
    rows by a line of dashes. If the table does not fit into `width`
    characters, the widest column is wrapped.

    Parameters
    ----------
    rows
        List of rows, each a list of cells. Cells are converted with `str`.
    width
        Maximum width of the table. If `'AUTO'`, the width of the terminal
        is used.
    title
        If not `None`, a centered title printed above the table.
    """
    rows = [[str(c) for c in r] for r in rows]
    if width == 'AUTO':
        width = get_terminal_size()[0] - 1
    column_widths = [max(map(len, c)) for c in zip(*rows)]
    if sum(column_widths) + 2*(len(column_widths) - 1) > width:
        largest_column = int(np.argmax(column_widths))
        column_widths[largest_column] = 0
        min_width = max(column_widths)
        column_widths[largest_column] = max(min_width, width - 2*(len(column_widths) - 1) - sum(column_widths))
    total_width = sum(column_widths) + 2*(len(column_widths) - 1)

    wrapped_rows = []
    for row in rows:
        cols = [_wrap_entry(c, width=cw) for c, cw in zip(row, column_widths)]
        for r in zip_longest(*cols, fillvalue=''):
            wrapped_rows.append(r)
    rows = wrapped_rows

    rows.insert(1, ['-' * cw for cw in column_widths])

    if title is not None:
        separator = '=' * len(title)
        title = (f'{title:^{total_width}}\n'
                 f'{separator:^{total_width}}\n\n')
    else:
        title = ''

    return title + '\n'.join('  '.join(f'{c:<{cw}}' for c, cw in zip(r, column_widths))
                             for r in rows)
