# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import itertools

import numpy as np

from pyorth.tools.floatcmp import float_cmp, float_cmp_all
from pyorth.tools.io import file_owned_by_current_user
from pyorth.tools.pprint import format_array
from pyorth.tools.table import format_table
from pyorthtests.base import runmodule


def test_float_cmp():
    tol_range = [0.0, 1e-8, 1]
    nan = float('nan')
    inf = float('inf')
    for (rtol, atol) in itertools.product(tol_range, tol_range):
        msg = f'rtol: {rtol} | atol {atol}'
        assert float_cmp(0., 0., rtol, atol), msg
        assert float_cmp(-0., -0., rtol, atol), msg
        assert float_cmp(-1., -1., rtol, atol), msg
        assert float_cmp(0., -0., rtol, atol), msg
        assert not float_cmp(2., -2., rtol, atol), msg
        assert not float_cmp(nan, nan, rtol, atol), msg
        assert not float_cmp(inf, inf, rtol, atol), msg


def test_float_cmp_all():
    assert float_cmp_all(np.array([1., 2.]), np.array([1., 2. + 1e-15]))
    assert not float_cmp_all(np.array([1., 2.]), np.array([1., 2.1]))
    assert float_cmp_all(np.array([1., 2.]), np.array([1., 2.1]), rtol=0.1)


def test_format_table():
    lines = format_table([['a', 'bb'], ['ccc', 'd']], width=80).splitlines()
    assert [l.rstrip() for l in lines] == ['a    bb', '---  --', 'ccc  d']


def test_format_table_title():
    lines = format_table([['k', 'defect'], [1, 2.5]], width=80, title='T').splitlines()
    assert lines[0].strip() == 'T'
    assert lines[1].strip() == '='
    assert lines[2] == ''
    assert lines[3].split() == ['k', 'defect']
    assert lines[5].split() == ['1', '2.5']


def test_format_table_wraps_widest_column():
    text = format_table([['name', 'value'], ['pyorth.tools.pprint.format_array.width', '26']], width=20)
    for line in text.splitlines():
        assert len(line.rstrip()) <= 20
    assert 'pyorth' in text


def test_format_array():
    assert format_array(np.array([1., -0.5])) == '1.0' + ' ' * 23 + '-0.5'
    assert format_array(np.array([0.5, 1.]), width=4) == '0.5  1.0'
    lines = format_array(np.eye(2)).splitlines()
    assert [l.split() for l in lines] == [['1.0', '0.0'], ['0.0', '1.0']]


def test_format_array_compact():
    assert format_array(np.array([[1e-20, 0.5], [0., -2.]]), width=0, compact_print=True).splitlines()         == ['1.00e-20  0.50', '0.00  -2.00']


def test_file_owned_by_current_user(tmp_path):
    path = tmp_path / 'pyorth_defaults.py'
    path.write_text('d = {}\n')
    assert file_owned_by_current_user(str(path))


if __name__ == "__main__":
    runmodule(filename=__file__)
