# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

__version__ = '2025.1.0'

import os

from pyorth.core.defaults import load_defaults_from_file

if 'PYORTH_DEFAULTS' in os.environ:
    filename = os.environ['PYORTH_DEFAULTS']
    if filename in ('', 'NONE'):
        print('Not loading any pyOrth defaults from config file')
    else:
        for fn in filename.split(':'):
            if not os.path.exists(fn):
                raise OSError('Cannot load pyOrth defaults from file ' + fn)
            print('Loading pyOrth defaults from file ' + fn + ' (set by PYORTH_DEFAULTS)')
            load_defaults_from_file(fn)
else:
    filename = os.path.join(os.getcwd(), 'pyorth_defaults.py')
    if os.path.exists(filename):
        from pyorth.tools.io import file_owned_by_current_user
        if not file_owned_by_current_user(filename):
            raise OSError('Cannot load pyOrth defaults from config file ' + filename
                          + ': not owned by user running Python interpreter')
        print('Loading pyOrth defaults from file ' + filename)
        load_defaults_from_file(filename)

from pyorth.core.logger import set_log_format, set_log_levels

set_log_levels()
set_log_format()
