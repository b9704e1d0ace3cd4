# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

from numbers import Number

import numpy as np

from pyorth.core.base import ImmutableObject
from pyorth.core.exceptions import DimensionMismatchError
from pyorth.la.vector import Vector
from pyorth.tools.pprint import format_array


class Matrix(ImmutableObject):
    """Real matrix stored as a tuple of column |Vectors|.

    Rows are not stored but assembled on demand by :meth:`row_at`.
    All operations return new matrices.

    Parameters
    ----------
    columns
        Non-empty sequence of |Vectors| of equal dimension. The vectors are
        copied.

    Attributes
    ----------
    columns
        Tuple of the column |Vectors|.
    row_count
        The number of rows, i.e. the dimension of each column.
    column_count
        The number of columns.
    """

    __array_ufunc__ = None

    def __init__(self, columns):
        columns = tuple(columns)
        if not columns:
            raise ValueError('No columns given to matrix')
        row_count = columns[0].dim
        if row_count == 0:
            raise ValueError('Matrix columns must have positive dimension')
        for j, c in enumerate(columns):
            if c.dim != row_count:
                raise DimensionMismatchError(f'Column {j} has dimension {c.dim}, expected {row_count}',
                                             expected=row_count, got=c.dim)
        self.columns = tuple(c.copy() for c in columns)
        self.row_count = row_count
        self.column_count = len(columns)

    @classmethod
    def from_columns(cls, *columns):
        """Create a matrix from the given column |Vectors|."""
        return cls(columns)

    @classmethod
    def identity(cls, n):
        """The `n x n` identity matrix."""
        return cls(Vector.unit(n, i) for i in range(n))

    @classmethod
    def from_numpy(cls, array):
        """Create a matrix from a two-dimensional |NumPy array|."""
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            raise ValueError(f'Expected two-dimensional array (got shape {array.shape})')
        return cls(Vector(c) for c in array.T)

    @property
    def shape(self):
        return self.row_count, self.column_count

    def row_at(self, i):
        """Return row `i` as a new |Vector| of dimension `column_count`."""
        if not (0 <= i < self.row_count):
            raise IndexError(f'Row index {i} out of range for matrix with {self.row_count} rows')
        return Vector([c.get(i) for c in self.columns])

    def column_at(self, j):
        """Return the stored column |Vector| `j`. It must not be modified."""
        if not (0 <= j < self.column_count):
            raise IndexError(f'Column index {j} out of range for matrix with {self.column_count} columns')
        return self.columns[j]

    def entry_at(self, row, col):
        return self.column_at(col).get(row)

    def multiply_right(self, other):
        """Return the matrix product `self @ other`."""
        if self.column_count != other.row_count:
            raise DimensionMismatchError(f'Cannot multiply {self.row_count}x{self.column_count} matrix '
                                         f'with {other.row_count}x{other.column_count} matrix',
                                         expected=self.column_count, got=other.row_count)
        rows = [self.row_at(i) for i in range(self.row_count)]
        return Matrix(Vector([r.inner(c) for r in rows]) for c in other.columns)

    def add(self, other):
        """Return the entrywise sum with `other`."""
        if self.shape != other.shape:
            raise DimensionMismatchError(f'Cannot add {self.row_count}x{self.column_count} matrix '
                                         f'and {other.row_count}x{other.column_count} matrix',
                                         expected=self.shape, got=other.shape)
        return Matrix(c.add(d) for c, d in zip(self.columns, other.columns))

    def scale(self, s):
        """Return the matrix with every entry multiplied by `s`."""
        return Matrix(c.scale(s) for c in self.columns)

    def transpose(self):
        return Matrix(self.row_at(i) for i in range(self.row_count))

    @property
    def T(self):
        return self.transpose()

    def norm(self):
        """Frobenius norm."""
        return float(np.sqrt(sum(c.inner(c) for c in self.columns)))

    def sup_norm(self):
        """Maximum absolute value of all entries."""
        return float(max(np.max(np.abs(c.to_numpy()), initial=0.) for c in self.columns))

    def to_numpy(self):
        """Return the entries as a two-dimensional |NumPy array|."""
        return np.column_stack([c.to_numpy() for c in self.columns])

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply_right(other)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other.scale(-1.))

    def __neg__(self):
        return self.scale(-1.)

    def __mul__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __str__(self):
        return format_array(self.to_numpy())

    def __repr__(self):
        return f'Matrix({self.row_count}x{self.column_count}, columns={list(self.columns)!r})'
