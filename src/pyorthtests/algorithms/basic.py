# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

from hypothesis import given

from pyorth.algorithms.basic import almost_equal
from pyorth.la.matrix import Matrix
from pyorth.la.vector import Vector
from pyorthtests.base import runmodule
import pyorthtests.strategies as pyst


@given(pyst.vectors())
def test_almost_equal_reflexive(v):
    assert almost_equal(v, v)
    assert almost_equal(v, v.copy(), rtol=0, atol=0)


def test_almost_equal():
    v = Vector([1., 1.])
    w = Vector([1., 1. + 1e-10])
    assert not almost_equal(v, w)
    assert almost_equal(v, w, atol=1e-9)
    assert almost_equal(v, w, rtol=1e-9)
    A = Matrix.identity(2)
    assert almost_equal(A, A.scale(1 + 1e-15))
    assert not almost_equal(A, A.scale(2.))


if __name__ == "__main__":
    runmodule(filename=__file__)
