#!/usr/bin/env python
# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

"""Compares classical and modified Gram-Schmidt on nearly linearly dependent vectors.

For each `k`, the vectors (k,0,0,0,1), (0,k,0,0,1), (0,0,k,0,1), (0,0,0,k,1)
are orthonormalized with both algorithms and `I - Q^T Q` is printed.
The smaller `k`, the worse the conditioning of the input.
"""

from typing import List

from typer import Option, run as typer_run

from pyorth.algorithms.gram_schmidt import classical_gram_schmidt, modified_gram_schmidt, orthonormality_defect
from pyorth.la.vector import Vector
from pyorth.tools.pprint import format_array
from pyorth.tools.table import format_table


def perturbed_vectors(k, count=4):
    """Vectors `k e_i + e_count` in R^(count+1) for i = 0, ..., count-1."""
    vectors = []
    for i in range(count):
        v = Vector.unit(count + 1, count)
        v.set(i, k)
        vectors.append(v)
    return vectors


def main(
    ks: List[float] = Option([1e-1, 1e-5, 1e-10], '--k', help='Perturbation parameters (may be repeated).'),
    compact: bool = Option(False, help='Print entries with two decimals only.'),
):
    """Prints the orthonormality defect of classical and modified Gram-Schmidt."""
    summary = [['k', '|I - QtQ| (classical)', '|I - QtQ| (modified)']]
    for k in ks:
        vectors = perturbed_vectors(k)
        defects = []
        for title, algorithm in (('Classical', classical_gram_schmidt), ('Modified', modified_gram_schmidt)):
            defect = orthonormality_defect(algorithm(vectors))
            print(f'{title} Gram-Schmidt for k = {k}')
            print(format_array(defect.to_numpy(), compact_print=compact or None))
            print()
            defects.append(defect.norm())
        summary.append([f'{k:.0e}'] + [f'{d:.3e}' for d in defects])
        print()

    print(format_table(summary, title='Frobenius norm of I - QtQ'))


def run():
    typer_run(main)


if __name__ == '__main__':
    run()
