# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as hyst

from pyorth.core.exceptions import DimensionMismatchError
from pyorth.la.matrix import Matrix
from pyorth.la.vector import Vector
from pyorthtests.base import runmodule
import pyorthtests.strategies as pyst


def test_construction():
    M = Matrix([Vector([1., 2., 3.]), Vector([4., 5., 6.])])
    assert M.shape == (3, 2)
    assert M.row_count == 3
    assert M.column_count == 2
    assert np.array_equal(M.to_numpy(), [[1., 4.], [2., 5.], [3., 6.]])
    N = Matrix.from_columns(Vector([1., 2., 3.]), Vector([4., 5., 6.]))
    assert np.array_equal(M.to_numpy(), N.to_numpy())
    assert np.array_equal(Matrix.from_numpy(M.to_numpy()).to_numpy(), M.to_numpy())


def test_construction_without_columns():
    with pytest.raises(ValueError):
        Matrix([])
    with pytest.raises(ValueError):
        Matrix.from_columns()


def test_construction_with_empty_columns():
    with pytest.raises(ValueError):
        Matrix([Vector()])
    with pytest.raises(ValueError):
        Matrix.from_columns(Vector(), Vector())
    with pytest.raises(ValueError):
        Matrix.from_numpy(np.zeros((0, 2)))


def test_construction_with_differing_dimensions():
    with pytest.raises(DimensionMismatchError):
        Matrix([Vector([1., 2., 3.]), Vector([1., 2.])])


def test_columns_are_copied():
    c = Vector([1., 2.])
    M = Matrix([c])
    c.set(0, 42.)
    assert M.entry_at(0, 0) == 1.


@pytest.mark.parametrize('n', [1, 2, 5])
def test_identity(n):
    I = Matrix.identity(n)
    assert I.shape == (n, n)
    assert np.array_equal(I.to_numpy(), np.eye(n))
    for i in range(n):
        assert I.column_at(i).entries == Vector.unit(n, i).entries


def test_access():
    M = Matrix.from_numpy([[1., 2., 3.], [4., 5., 6.]])
    assert M.row_at(1).entries == (4., 5., 6.)
    assert M.column_at(2).entries == (3., 6.)
    assert M.entry_at(0, 1) == 2.
    for i, j in [(2, 0), (-1, 0)]:
        with pytest.raises(IndexError):
            M.row_at(i)
        with pytest.raises(IndexError):
            M.entry_at(i, j)
    for j in (3, -1):
        with pytest.raises(IndexError):
            M.column_at(j)
        with pytest.raises(IndexError):
            M.entry_at(0, j)


@given(pyst.matrices())
def test_double_transpose(M):
    assert np.array_equal(M.transpose().transpose().to_numpy(), M.to_numpy())


@given(pyst.matrices())
def test_transpose(M):
    T = M.T
    assert T.shape == (M.column_count, M.row_count)
    for i in range(M.row_count):
        assert T.column_at(i).entries == M.row_at(i).entries


@given(pyst.hy_dims, pyst.hy_dims, pyst.hy_dims, pyst.hy_dims)
def test_multiply_dimension_contract(m, n, p, q):
    A = Matrix.from_numpy(np.ones((m, n)))
    B = Matrix.from_numpy(np.ones((p, q)))
    if n != p:
        with pytest.raises(DimensionMismatchError):
            A.multiply_right(B)
    else:
        assert A.multiply_right(B).shape == (m, q)


@given(hyst.tuples(pyst.hy_dims, pyst.hy_dims, pyst.hy_dims).flatmap(
    lambda s: hyst.tuples(pyst.matrices(shape=(s[0], s[1])), pyst.matrices(shape=(s[1], s[2])))))
def test_multiply(matrices):
    A, B = matrices
    C = A @ B
    assert np.allclose(C.to_numpy(), A.to_numpy() @ B.to_numpy())
    for i in range(A.row_count):
        for j in range(B.column_count):
            assert C.entry_at(i, j) == A.row_at(i).inner(B.column_at(j))


def test_add_and_scale():
    A = Matrix.from_numpy([[1., 2.], [3., 4.]])
    B = Matrix.identity(2)
    assert np.array_equal((A + B).to_numpy(), [[2., 2.], [3., 5.]])
    assert np.array_equal((A - B).to_numpy(), [[0., 2.], [3., 3.]])
    assert np.array_equal(A.scale(2.).to_numpy(), [[2., 4.], [6., 8.]])
    assert np.array_equal((-A).to_numpy(), (A * -1).to_numpy())
    assert np.array_equal((3 * A).to_numpy(), (A * 3).to_numpy())
    with pytest.raises(DimensionMismatchError):
        A.add(Matrix.identity(3))
    with pytest.raises(DimensionMismatchError):
        A + Matrix.from_numpy(np.ones((2, 3)))


def test_norms():
    A = Matrix.from_numpy([[3., 0.], [-4., 0.]])
    assert A.norm() == 5.
    assert A.sup_norm() == 4.


def test_str():
    lines = str(Matrix.identity(2)).splitlines()
    assert [l.split() for l in lines] == [['1.0', '0.0'], ['0.0', '1.0']]


if __name__ == "__main__":
    runmodule(filename=__file__)
