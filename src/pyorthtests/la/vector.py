# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import numpy as np
import pytest
from hypothesis import assume, given

from pyorth.algorithms.basic import almost_equal
from pyorth.core.exceptions import ConstError, DegenerateVectorError, DimensionMismatchError
from pyorth.la.vector import Vector
from pyorth.tools.floatcmp import float_cmp
from pyorthtests.base import runmodule
import pyorthtests.strategies as pyst


def test_construction():
    v = Vector([1., 2., 3.])
    assert v.dim == len(v) == 3
    assert v.entries == (1., 2., 3.)
    assert Vector().dim == 0
    assert Vector([]).dim == 0
    assert Vector.zeros(4).entries == (0., 0., 0., 0.)
    assert Vector.zeros(0).dim == 0
    assert Vector.unit(3, 1).entries == (0., 1., 0.)
    assert Vector(np.arange(3)).entries == (0., 1., 2.)


def test_construction_invalid():
    with pytest.raises(ValueError):
        Vector(3.)
    with pytest.raises(ValueError):
        Vector([[1., 2.], [3., 4.]])
    with pytest.raises(ValueError):
        Vector.zeros(-1)
    with pytest.raises(IndexError):
        Vector.unit(3, 3)


def test_construction_copies_entries():
    entries = np.array([1., 2.])
    v = Vector(entries)
    entries[0] = 42.
    assert v.get(0) == 1.
    v.to_numpy()[1] = 42.
    assert v.get(1) == 2.


def test_get_set():
    v = Vector.zeros(3)
    v.set(2, 5.)
    assert v.get(2) == v[2] == 5.
    assert list(v) == [0., 0., 5.]


@pytest.mark.parametrize('index', [-1, 3, 10])
def test_index_out_of_range(index):
    v = Vector([1., 2., 3.])
    with pytest.raises(IndexError):
        v.get(index)
    with pytest.raises(IndexError):
        v[index]
    with pytest.raises(IndexError):
        v.set(index, 1.)
    assert v.entries == (1., 2., 3.)


def test_locked():
    v = Vector([1., 2.])
    with pytest.raises(ConstError):
        v.dim = 3
    w = v.with_(entries=[3., 4., 5.])
    assert w.dim == 3
    assert v.entries == (1., 2.)


def test_inner_dimension_mismatch():
    v = Vector([1., 2., 3.])
    w = Vector([1., 2., 3., 4.])
    with pytest.raises(DimensionMismatchError) as excinfo:
        v.inner(w)
    assert excinfo.value.expected == 3
    assert excinfo.value.got == 4
    with pytest.raises(ValueError):
        w.inner(v)


def test_add_dimension_mismatch():
    v = Vector([1., 2., 3.])
    w = Vector([1., 2.])
    with pytest.raises(DimensionMismatchError):
        v.add(w)
    with pytest.raises(DimensionMismatchError):
        v - w


def test_arithmetic():
    v = Vector([1., 2.])
    w = Vector([3., -1.])
    assert v.inner(w) == 1.
    assert (v + w).entries == (4., 1.)
    assert (v - w).entries == (-2., 3.)
    assert (-v).entries == (-1., -2.)
    assert (2 * v).entries == v.scale(2).entries == (v * 2).entries == (2., 4.)
    assert (np.float64(2.) * v).entries == (2., 4.)
    assert v.entries == (1., 2.)
    assert Vector([3., 4.]).norm() == 5.
    assert np.allclose(Vector([3., 4.]).normalize().to_numpy(), [0.6, 0.8])


@given(pyst.vector_pairs())
def test_inner_symmetric(vectors):
    v, w = vectors
    assert float_cmp(v.inner(w), w.inner(v))
    assert np.isclose(v.inner(w), np.dot(v.to_numpy(), w.to_numpy()))


@given(pyst.vectors(), pyst.hy_scalars)
def test_scale(v, s):
    assert np.allclose(v.scale(s).to_numpy(), s * v.to_numpy())


@given(pyst.vectors())
def test_norm(v):
    assert v.norm() >= 0
    assert np.isclose(v.norm(), np.linalg.norm(v.to_numpy()))


@given(pyst.vectors())
def test_normalize(v):
    assume(v.norm() > 1e-8)
    u = v.normalize()
    assert float_cmp(u.norm(), 1.)
    assert almost_equal(u.normalize(), u, rtol=1e-13)
    assert almost_equal(u.scale(v.norm()), v, rtol=1e-13)


def test_normalize_zero_vector():
    with pytest.raises(DegenerateVectorError):
        Vector.zeros(3).normalize()
    with pytest.raises(DegenerateVectorError):
        Vector().normalize()


def test_norm_of_tiny_and_huge_vectors():
    assert Vector([1e-170, 0.]).norm() == 1e-170
    assert np.allclose(Vector([1e-170, 0.]).normalize().to_numpy(), [1., 0.])
    assert np.isclose(Vector([3e-200, 4e-200]).norm(), 5e-200, rtol=1e-14, atol=0)
    assert np.isclose(Vector([3e200, 4e200]).norm(), 5e200, rtol=1e-14, atol=0)


def test_str():
    s = str(Vector([1., -0.5]))
    assert s.split() == ['1.0', '-0.5']
    assert repr(Vector([1., 2.])) == 'Vector([1.0, 2.0])'


if __name__ == "__main__":
    runmodule(filename=__file__)
