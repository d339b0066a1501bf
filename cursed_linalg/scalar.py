# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Construction of matrix elements from 64-bit floating-point values.
"""

import math

import numpy as np

from .error import CannotConvertElementError


def from_float(value: float, dtype):
    """
    Convert a float64 value into a scalar of the matrix element type `dtype`.

    Narrowing is allowed to lose precision (and to underflow to zero), but
    not to overflow: a finite value which does not fit raises.

    Raises
    ------
    CannotConvertElementError : if `dtype` cannot represent `value`.
    """
    dtype = np.dtype(dtype)
    try:
        with np.errstate(over="ignore", invalid="ignore"):
            converted = dtype.type(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise CannotConvertElementError("float64", dtype.name) from e

    if math.isfinite(value) and not np.all(np.isfinite(converted)):
        raise CannotConvertElementError("float64", dtype.name)
    return converted
