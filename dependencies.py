#!/usr/bin/env python3
# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

# DO NOT use any python features here that require 3.6 or newer

install_requires = ['numpy>=1.20', 'typer>=0.4']
tests_require = ['pytest>=7.0', 'hypothesis>=6.50']
ci_requires = tests_require + ['pytest-cov']


def extras():
    return {
        'tests': tests_require,
        'ci': ci_requires,
    }


if __name__ == '__main__':
    print('\n'.join(install_requires + tests_require))
