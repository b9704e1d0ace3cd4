# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)
