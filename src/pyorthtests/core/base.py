# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import inspect

import pytest

from pyorth.core.base import BasicObject, ImmutableObject
from pyorth.core.exceptions import ConstError
from pyorth.la.matrix import Matrix
from pyorth.la.vector import Vector
from pyorthtests.base import runmodule


class Counter(BasicObject):

    def __init__(self, start=0):
        self.value = start


class Point(ImmutableObject):

    def __init__(self, x, y=0):
        self.x = x
        self.y = y
        self._cache = None


def test_class_logger():
    assert Counter._logger.name == __name__ + '.Counter'
    assert Vector._logger.name == 'pyorth.la.vector.Vector'


def test_name():
    c = Counter()
    assert c.name == 'Counter'
    c.name = 'my counter'
    assert c.name == 'my counter'
    c.value = 3


def test_locked():
    p = Point(1)
    with pytest.raises(ConstError):
        p.x = 2
    with pytest.raises(ConstError):
        p.z = 2
    p._cache = 42
    assert p.x == 1


def test_with():
    p = Point(1, 2)
    q = p.with_(y=3)
    assert (q.x, q.y) == (1, 3)
    assert (p.x, p.y) == (1, 2)


def test_signature():
    assert list(inspect.signature(Point).parameters) == ['x', 'y']
    assert list(inspect.signature(Matrix).parameters) == ['columns']


def test_matrix_with():
    M = Matrix.identity(2)
    N = M.with_(columns=[Vector([1., 2.])])
    assert N.shape == (2, 1)
    assert M.shape == (2, 2)
    with pytest.raises(ConstError):
        M.row_count = 3


if __name__ == "__main__":
    runmodule(filename=__file__)
