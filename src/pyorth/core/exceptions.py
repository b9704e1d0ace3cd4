# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)


class ConstError(Exception):
    """I get thrown when you try to add a new member to a locked class instance."""


class AccuracyError(Exception):
    """Is raised if the result of a computation is inaccurate."""


class LinAlgError(Exception):
    """Is raised if a linear algebra operation fails."""


class DimensionMismatchError(ValueError):
    """Is raised if the operands of an operation have incompatible dimensions."""

    def __init__(self, msg, expected=None, got=None):
        super().__init__(msg)
        self.expected = expected
        self.got = got


class DegenerateVectorError(LinAlgError):
    """Is raised when a vector of zero norm is to be normalized.

    During Gram-Schmidt orthogonalization this happens if the given
    vectors are linearly dependent.
    """
