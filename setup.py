#!/usr/bin/env python
# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

# DO NOT use any python features here that require 3.6 or newer

import os
import re
import sys

from setuptools import setup, find_packages

sys.path.insert(0, os.path.dirname(__file__))
import dependencies  # noqa

install_requires = dependencies.install_requires


def _version():
    with open(os.path.join(os.path.dirname(__file__), 'src', 'pyorth', '__init__.py')) as f:
        return re.search(r"^__version__ = '([^']+)'", f.read(), re.M).group(1)


def setup_package():
    setup(
        name='pyorth',
        version=_version(),
        author='pyOrth developers',
        package_dir={'': 'src'},
        packages=find_packages('src'),
        entry_points={
            'console_scripts': [
                'pyorth-gram-schmidt = pyorthdemos.gram_schmidt:run',
            ],
        },
        description='Classical and modified Gram-Schmidt orthonormalization',
        python_requires='>=3.8',
        long_description=open('README.md').read(),
        long_description_content_type='text/markdown',
        install_requires=install_requires,
        extras_require=dependencies.extras(),
        classifiers=['Development Status :: 4 - Beta',
                     'License :: OSI Approved :: BSD License',
                     'Programming Language :: Python :: 3',
                     'Intended Audience :: Science/Research',
                     'Topic :: Scientific/Engineering :: Mathematics'],
        license='BSD 2-Clause',
        zip_safe=False,
    )


if __name__ == '__main__':
    setup_package()
