# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

from hypothesis import strategies as hyst
from hypothesis.extra import numpy as hynp
import numpy as np

from pyorth.la.matrix import Matrix
from pyorth.la.vector import Vector

MAX_DIM = 8
MAX_ARRAY_ELEMENT_ABSVALUE = 1

hy_dims = hyst.integers(min_value=1, max_value=MAX_DIM)
hy_float_array_elements = hyst.floats(allow_nan=False, allow_infinity=False, allow_subnormal=False,
                                      min_value=-MAX_ARRAY_ELEMENT_ABSVALUE, max_value=MAX_ARRAY_ELEMENT_ABSVALUE)
hy_scalars = hyst.floats(allow_nan=False, allow_infinity=False, min_value=-1e3, max_value=1e3)


@hyst.composite
def vectors(draw, dim=None):
    dim = draw(hy_dims) if dim is None else dim
    return Vector(draw(hynp.arrays(np.float64, dim, elements=hy_float_array_elements)))


@hyst.composite
def vector_pairs(draw):
    dim = draw(hy_dims)
    return draw(vectors(dim)), draw(vectors(dim))


@hyst.composite
def matrices(draw, shape=None):
    shape = (draw(hy_dims), draw(hy_dims)) if shape is None else shape
    return Matrix.from_numpy(draw(hynp.arrays(np.float64, shape, elements=hy_float_array_elements)))


@hyst.composite
def well_conditioned_vectors(draw):
    """Lists of linearly independent vectors with condition number at most 3.

    The vectors are `2 * dim * e_i + p_i`, where the entries of the
    perturbations `p_i` are bounded by one in absolute value.
    """
    dim = draw(hy_dims)
    count = draw(hyst.integers(min_value=1, max_value=dim))
    perturbations = draw(hynp.arrays(np.float64, (count, dim), elements=hy_float_array_elements))
    return [Vector.unit(dim, i).scale(2 * dim).add(Vector(p)) for i, p in enumerate(perturbations)]
