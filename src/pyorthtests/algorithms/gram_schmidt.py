# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import numpy as np
import pytest
from hypothesis import given

from pyorth.algorithms.basic import almost_equal
from pyorth.algorithms.gram_schmidt import classical_gram_schmidt, modified_gram_schmidt, orthonormality_defect
from pyorth.core.exceptions import AccuracyError, DegenerateVectorError, DimensionMismatchError
from pyorth.core.logger import log_levels
from pyorth.la.matrix import Matrix
from pyorth.la.vector import Vector
from pyorthtests.base import runmodule
import pyorthtests.strategies as pyst

ALGORITHMS = [classical_gram_schmidt, modified_gram_schmidt]


def perturbed_vectors(k):
    return [Vector([k, 0., 0., 0., 1.]),
            Vector([0., k, 0., 0., 1.]),
            Vector([0., 0., k, 0., 1.]),
            Vector([0., 0., 0., k, 1.])]


@pytest.mark.parametrize('algorithm', ALGORITHMS)
@given(pyst.well_conditioned_vectors())
def test_orthonormal(algorithm, vectors):
    originals = [v.copy() for v in vectors]
    Q = algorithm(vectors)
    assert len(Q) == len(vectors)
    for i, q in enumerate(Q):
        assert q.dim == vectors[0].dim
        assert abs(q.norm() - 1) < 1e-9
        for p in Q[:i]:
            assert abs(p.inner(q)) < 1e-9
    for v, w in zip(vectors, originals):
        assert v.entries == w.entries


@pytest.mark.parametrize('algorithm', ALGORITHMS)
@given(pyst.well_conditioned_vectors())
def test_span_preserved(algorithm, vectors):
    Q, R = algorithm(vectors, return_R=True)
    n = len(vectors)
    assert R.shape == (n, n)
    R = R.to_numpy()
    assert np.all(np.tril(R, -1) == 0)
    assert np.all(np.diag(R) > 0)
    A = Matrix(vectors)
    assert almost_equal(Matrix(Q) @ Matrix.from_numpy(R), A, rtol=1e-12, atol=1e-12)
    # each input vector is a combination of the first i+1 basis vectors
    for i, a in enumerate(vectors):
        combination = Vector.zeros(a.dim)
        for j in range(i + 1):
            combination = combination + R[j, i] * Q[j]
        assert almost_equal(combination, a, rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize('algorithm', ALGORITHMS)
def test_two_dimensional_example(algorithm):
    Q = algorithm([Vector([1., 0.]), Vector([1., 1.])])
    assert len(Q) == 2
    assert np.allclose(Q[0].to_numpy(), [1., 0.])
    assert np.allclose(Q[1].to_numpy(), [0., 1.])


@pytest.mark.parametrize('algorithm', ALGORITHMS)
def test_single_vector(algorithm):
    Q = algorithm([Vector([0., 3., 4.])])
    assert len(Q) == 1
    assert np.allclose(Q[0].to_numpy(), [0., 0.6, 0.8])


@pytest.mark.parametrize('algorithm', ALGORITHMS)
def test_matrix_input(algorithm):
    A = Matrix.from_numpy([[2., 1.], [0., 1.], [0., 1.]])
    Q = algorithm(A)
    assert np.allclose(Q[0].to_numpy(), [1., 0., 0.])
    assert np.allclose(Q[1].to_numpy(), [0., 1., 1.] / np.sqrt(2))


@pytest.mark.parametrize('algorithm', ALGORITHMS)
def test_order_dependence(algorithm):
    a, b = Vector([1., 0.]), Vector([1., 1.])
    Q1 = algorithm([a, b])
    Q2 = algorithm([b, a])
    assert not np.allclose(Q1[0].to_numpy(), Q2[0].to_numpy())
    assert np.allclose(Q2[0].to_numpy(), np.array([1., 1.]) / np.sqrt(2))


@pytest.mark.parametrize('k', [1e-1, 1e-5, 1e-10])
def test_ill_conditioned(k):
    vectors = perturbed_vectors(k)
    Q_cgs = classical_gram_schmidt(vectors)
    Q_mgs = modified_gram_schmidt(vectors)

    for Q in (Q_cgs, Q_mgs):
        assert len(Q) == 4
        assert all(q.dim == 5 for q in Q)
        assert all(abs(q.norm() - 1) < 1e-12 for q in Q)

    defect_cgs = orthonormality_defect(Q_cgs)
    defect_mgs = orthonormality_defect(Q_mgs)
    assert defect_mgs.shape == defect_cgs.shape == (4, 4)
    assert defect_mgs.sup_norm() < 1e-8
    assert defect_mgs.norm() <= defect_cgs.norm()


def test_classical_loses_orthogonality():
    defect = orthonormality_defect(classical_gram_schmidt(perturbed_vectors(1e-10)))
    assert defect.sup_norm() > 0.1


def test_check():
    vectors = perturbed_vectors(1e-10)
    with pytest.raises(AccuracyError):
        classical_gram_schmidt(vectors, check=True)
    modified_gram_schmidt(vectors, check=True)
    classical_gram_schmidt(perturbed_vectors(1e-1), check=True, check_tol=1e-10)


@pytest.mark.parametrize('algorithm', ALGORITHMS)
def test_linearly_dependent(algorithm):
    with pytest.raises(DegenerateVectorError):
        algorithm([Vector([1., 0.]), Vector([2., 0.])])
    with pytest.raises(DegenerateVectorError):
        algorithm([Vector([0., 0.]), Vector([1., 0.])])


@pytest.mark.parametrize('algorithm', ALGORITHMS)
def test_dimension_mismatch(algorithm):
    with pytest.raises(DimensionMismatchError):
        algorithm([Vector([1., 0.]), Vector([1., 1., 1.])])
    with pytest.raises(DimensionMismatchError):
        algorithm([Vector([1., 0., 0.]), Vector([0., 1., 0.]), Vector([1., 1.])])


@pytest.mark.parametrize('algorithm', ALGORITHMS)
def test_empty_input(algorithm):
    with pytest.raises(ValueError):
        algorithm([])


@pytest.mark.parametrize('algorithm', ALGORITHMS)
def test_cancellation_logged(algorithm, capsys):
    name = f'pyorth.algorithms.gram_schmidt.{algorithm.__name__}'
    with log_levels({name: 'INFO'}):
        algorithm(perturbed_vectors(1e-10))
    assert 'reduced from' in capsys.readouterr().err
    with log_levels({name: 'WARNING'}):
        algorithm(perturbed_vectors(1e-10))
    assert 'reduced from' not in capsys.readouterr().err


def test_orthonormality_defect():
    assert orthonormality_defect(Matrix.identity(3)).norm() == 0
    defect = orthonormality_defect([Vector([2., 0.]), Vector([0., 1.])])
    assert np.array_equal(defect.to_numpy(), [[-3., 0.], [0., 0.]])


if __name__ == "__main__":
    runmodule(filename=__file__)
