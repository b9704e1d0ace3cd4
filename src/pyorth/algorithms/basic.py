# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

"""Comparison of |Vectors| and |Matrices| up to a tolerance."""

from pyorth.core.defaults import defaults


@defaults('rtol', 'atol')
def almost_equal(U, V, rtol=1e-14, atol=1e-14):
    """Compare U and V for almost equality.

    `U` and `V` are considered almost equal iff

       ||U - V|| <= atol + ||V|| * rtol,

    where `||.||` is the Euclidean norm for |Vectors| and the Frobenius norm
    for |Matrices|.

    Parameters
    ----------
    U, V
        |Vectors| or |Matrices| to be compared. Both need to have the same
        dimensions.
    rtol
        The relative tolerance.
    atol
        The absolute tolerance.
    """
    return (U - V).norm() <= atol + V.norm() * rtol
