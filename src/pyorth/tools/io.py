# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import os


def file_owned_by_current_user(filename):
    """Whether `filename` is owned by the user running the interpreter (POSIX only)."""
    return os.stat(filename).st_uid == os.getuid()
