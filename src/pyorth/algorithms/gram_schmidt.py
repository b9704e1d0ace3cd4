# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import numpy as np

from pyorth.core.defaults import defaults
from pyorth.core.exceptions import AccuracyError
from pyorth.core.logger import getLogger
from pyorth.la.matrix import Matrix
from pyorth.la.vector import Vector


@defaults('check', 'check_tol', 'cancellation_threshold')
def classical_gram_schmidt(vectors, return_R=False, check=False, check_tol=1e-3, cancellation_threshold=1e-1):
    """Orthonormalize a sequence of |Vectors| using the classical Gram-Schmidt algorithm.

    The `i`-th vector is orthogonalized by subtracting its projections onto all
    previously computed basis vectors, where all projection coefficients are
    computed with the original vector. For ill-conditioned input the resulting
    basis can be far from orthogonal, see :func:`modified_gram_schmidt`.

    Parameters
    ----------
    vectors
        Non-empty sequence of linearly independent |Vectors| of equal dimension
        or a |Matrix| whose columns are to be orthonormalized.
    return_R
        If `True`, the R matrix from QR decomposition is returned.
    check
        If `True`, check if the resulting vectors are really orthonormal.
    check_tol
        Tolerance for the check.
    cancellation_threshold
        An info message is logged for each vector whose norm is reduced
        below `cancellation_threshold` times its original norm during
        orthogonalization.

    Returns
    -------
    Q
        List of the orthonormalized |Vectors|.
    R
        The upper-triangular |Matrix| with `A = Q R` (if `return_R` is `True`).

    Raises
    ------
    DimensionMismatchError
        If the vectors do not have equal dimensions.
    DegenerateVectorError
        If the vectors are linearly dependent.
    """
    logger = getLogger('pyorth.algorithms.gram_schmidt.classical_gram_schmidt')

    A = _as_list(vectors)
    n = len(A)
    logger.debug(f'Orthonormalizing {n} vectors in R^{A[0].dim}')

    R = np.zeros((n, n))
    R[0, 0] = A[0].norm()
    Q = [A[0].normalize()]
    for i in range(1, n):
        a = A[i]
        contribution = Vector.zeros(A[0].dim)
        for j in range(i):
            p = a.inner(Q[j])
            R[j, i] = p
            contribution = contribution.add(Q[j].scale(p))
        v = a.add(contribution.scale(-1.))
        R[i, i] = _log_cancellation(logger, i, a, v, cancellation_threshold)
        Q.append(v.normalize())

    if check:
        _check_orthonormality(Q, check_tol)

    return (Q, Matrix.from_numpy(R)) if return_R else Q


@defaults('check', 'check_tol', 'cancellation_threshold')
def modified_gram_schmidt(vectors, return_R=False, check=False, check_tol=1e-3, cancellation_threshold=1e-1):
    """Orthonormalize a sequence of |Vectors| using the modified Gram-Schmidt algorithm.

    As soon as a new basis vector has been computed, its component is removed
    from all remaining vectors. Compared to :func:`classical_gram_schmidt`,
    the result is considerably closer to orthonormal for ill-conditioned input.

    Parameters
    ----------
    vectors
        Non-empty sequence of linearly independent |Vectors| of equal dimension
        or a |Matrix| whose columns are to be orthonormalized.
    return_R
        If `True`, the R matrix from QR decomposition is returned.
    check
        If `True`, check if the resulting vectors are really orthonormal.
    check_tol
        Tolerance for the check.
    cancellation_threshold
        An info message is logged for each vector whose norm is reduced
        below `cancellation_threshold` times its original norm during
        orthogonalization.

    Returns
    -------
    Q
        List of the orthonormalized |Vectors|.
    R
        The upper-triangular |Matrix| with `A = Q R` (if `return_R` is `True`).

    Raises
    ------
    DimensionMismatchError
        If the vectors do not have equal dimensions.
    DegenerateVectorError
        If the vectors are linearly dependent.
    """
    logger = getLogger('pyorth.algorithms.gram_schmidt.modified_gram_schmidt')

    A = _as_list(vectors)
    n = len(A)
    logger.debug(f'Orthonormalizing {n} vectors in R^{A[0].dim}')

    # working vectors, deflated against each new basis vector
    V = list(A)

    R = np.zeros((n, n))
    R[0, 0] = V[0].norm()
    Q = [V[0].normalize()]
    for i in range(1, n):
        q = Q[i-1]
        for j in range(i, n):
            p = V[j].inner(q)
            R[i-1, j] = p
            V[j] = V[j].add(q.scale(-p))
        R[i, i] = _log_cancellation(logger, i, A[i], V[i], cancellation_threshold)
        Q.append(V[i].normalize())

    if check:
        _check_orthonormality(Q, check_tol)

    return (Q, Matrix.from_numpy(R)) if return_R else Q


def orthonormality_defect(vectors):
    """Compute `I - Q^T Q`.

    Parameters
    ----------
    vectors
        Non-empty sequence of |Vectors| of equal dimension or a |Matrix| `Q`.

    Returns
    -------
    The square |Matrix| `I - Q^T Q`, which vanishes iff the columns of `Q`
    are orthonormal.
    """
    Q = vectors if isinstance(vectors, Matrix) else Matrix(vectors)
    return Matrix.identity(Q.column_count) - Q.T @ Q


def _as_list(vectors):
    A = list(vectors.columns) if isinstance(vectors, Matrix) else list(vectors)
    if not A:
        raise ValueError('No vectors given')
    return A


def _log_cancellation(logger, i, original, orthogonalized, cancellation_threshold):
    initial_norm = original.norm()
    norm = orthogonalized.norm()
    if norm < cancellation_threshold * initial_norm:
        logger.info(f'Norm of vector {i} reduced from {initial_norm:.3e} to {norm:.3e} by orthogonalization')
    return norm


def _check_orthonormality(Q, check_tol):
    err = orthonormality_defect(Q).sup_norm()
    if err >= check_tol:
        raise AccuracyError(f'result not orthogonal (max err={err})')
