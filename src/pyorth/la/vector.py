# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

from numbers import Number

import numpy as np

from pyorth.core.base import ImmutableObject
from pyorth.core.exceptions import DegenerateVectorError, DimensionMismatchError
from pyorth.tools.pprint import format_array


class Vector(ImmutableObject):
    """Vector of fixed dimension with real entries.

    The entries are stored in a private |NumPy array| owned by the vector.
    Its length is fixed at construction. All arithmetic operations return
    new vectors; the only in-place operation is :meth:`set`.

    Parameters
    ----------
    entries
        One-dimensional sequence of real numbers. If empty, a vector of
        dimension 0 is created.

    Attributes
    ----------
    dim
        The dimension of the vector.
    """

    # let NumPy scalars defer to __rmul__
    __array_ufunc__ = None

    def __init__(self, entries=()):
        array = np.array(entries, dtype=np.float64)
        if array.ndim != 1:
            raise ValueError(f'Vector entries have to be a one-dimensional sequence (got shape {array.shape})')
        self._array = array
        self.dim = len(array)

    @classmethod
    def zeros(cls, dim):
        """The zero vector of dimension `dim`."""
        if dim < 0:
            raise ValueError(f'Invalid dimension {dim}')
        return cls(np.zeros(dim))

    @classmethod
    def unit(cls, dim, index):
        """The standard basis vector of dimension `dim` with a 1 at `index`."""
        v = cls.zeros(dim)
        v.set(index, 1.)
        return v

    @property
    def entries(self):
        return tuple(float(e) for e in self._array)

    def _check_index(self, i):
        if not (0 <= i < self.dim):
            raise IndexError(f'Index {i} out of range for vector of dimension {self.dim}')

    def _check_dim(self, other, operation):
        if other.dim != self.dim:
            raise DimensionMismatchError(f'Cannot {operation} a vector in R^{self.dim} and a vector in R^{other.dim}',
                                         expected=self.dim, got=other.dim)

    def get(self, i):
        """Return the entry at (0-based) index `i`."""
        self._check_index(i)
        return float(self._array[i])

    def set(self, i, value):
        """Set the entry at (0-based) index `i` to `value` in-place."""
        self._check_index(i)
        self._array[i] = value

    def inner(self, other):
        """Euclidean inner product with `other`."""
        self._check_dim(other, 'multiply')
        return float(np.dot(self._array, other._array))

    def scale(self, s):
        """Return a new vector with every entry multiplied by `s`."""
        return Vector(self._array * s)

    def add(self, other):
        """Return the entrywise sum with `other`."""
        self._check_dim(other, 'add')
        return Vector(self._array + other._array)

    def norm(self):
        """Euclidean norm `sqrt(<self, self>)`.

        The entries are scaled by their largest absolute value first, so that
        the norm of a vector with tiny or huge entries does not under- or overflow.
        """
        scale = float(np.max(np.abs(self._array), initial=0.))
        if scale == 0 or not np.isfinite(scale):
            return scale
        scaled = self._array / scale
        return scale * float(np.sqrt(np.dot(scaled, scaled)))

    def normalize(self):
        """Return the unit vector pointing in the direction of this vector.

        Raises
        ------
        DegenerateVectorError
            If the vector has norm zero.
        """
        norm = self.norm()
        if norm == 0:
            raise DegenerateVectorError(f'Cannot normalize vector of norm zero in R^{self.dim}')
        return self.scale(1 / norm)

    def copy(self):
        return Vector(self._array)

    def to_numpy(self):
        """Return a copy of the entries as a |NumPy array|."""
        return self._array.copy()

    def __len__(self):
        return self.dim

    def __getitem__(self, i):
        return self.get(i)

    def __iter__(self):
        return iter(self.entries)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
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
        return format_array(self._array)

    def __repr__(self):
        return f'Vector({list(self.entries)})'
