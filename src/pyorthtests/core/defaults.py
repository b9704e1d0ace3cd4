# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import pytest

from pyorth.algorithms.gram_schmidt import modified_gram_schmidt
from pyorth.core.defaults import (defaults, defaults_changes, get_defaults, load_defaults_from_file, print_defaults,
                                  set_defaults, write_defaults_to_file)
from pyorth.core.exceptions import AccuracyError
from pyorth.la.vector import Vector
from pyorthtests.base import runmodule


@defaults('c', 'd')
def func(a, b, c=2, d=3, e=4):
    return a, b, c, d, e


def test_defaults():
    assert func(0, 1) == (0, 1, 2, 3, 4)
    assert func(0, 1, None, d=None) == (0, 1, 2, 3, 4)
    assert func(0, 1, 5, d=None) == (0, 1, 5, 3, 4)
    with pytest.raises(TypeError):
        assert func(0, c=2, d=3)
    changes = defaults_changes()
    set_defaults({__name__ + '.func.c': 42})
    assert defaults_changes() == changes + 1
    assert func(0, 1) == (0, 1, 42, 3, 4)
    assert func(0, 1, None, d=None) == (0, 1, 42, 3, 4)
    assert func(0, 1, 5, d=None) == (0, 1, 5, 3, 4)
    assert get_defaults(code=False, file=False)[__name__ + '.func.c'] == 42
    set_defaults({__name__ + '.func.c': 43})
    assert func(0, 1) == (0, 1, 43, 3, 4)
    set_defaults({__name__ + '.func.c': 2})


def test_set_unknown_default():
    with pytest.raises(KeyError):
        set_defaults({__name__ + '.func.e': 1})


def test_invalid_decoration():
    with pytest.raises(ValueError):
        @defaults('b')
        def no_default(a, b):
            pass


def test_gram_schmidt_defaults():
    path = 'pyorth.algorithms.gram_schmidt.modified_gram_schmidt.check'
    assert get_defaults()[path] is False
    vectors = [Vector([1., 0.]), Vector([1., 1e-3])]
    set_defaults({path: True, 'pyorth.algorithms.gram_schmidt.modified_gram_schmidt.check_tol': 0.})
    try:
        with pytest.raises(AccuracyError):
            modified_gram_schmidt(vectors)
    finally:
        set_defaults({path: False, 'pyorth.algorithms.gram_schmidt.modified_gram_schmidt.check_tol': 1e-3})
    modified_gram_schmidt(vectors)


def test_print_defaults(capsys):
    print_defaults()
    assert 'gram_schmidt' in capsys.readouterr().out


def test_write_defaults_to_file(tmp_path):
    filename = str(tmp_path / 'defaults.py')
    write_defaults_to_file(filename)
    with open(filename) as f:
        assert 'modified_gram_schmidt.check_tol' in f.read()


def test_load_defaults_from_file(tmp_path):
    filename = str(tmp_path / 'defaults.py')
    with open(filename, 'wt') as f:
        f.write("d = {'" + __name__ + ".func.d': 7}\n")
    load_defaults_from_file(filename)
    try:
        assert func(0, 1) == (0, 1, 2, 7, 4)
        assert get_defaults(user=False, code=False) == {__name__ + '.func.d': 7}
    finally:
        set_defaults({__name__ + '.func.d': 3})


if __name__ == "__main__":
    runmodule(filename=__file__)
