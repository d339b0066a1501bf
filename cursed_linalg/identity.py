# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .utils import as_field


def eye(size: int, dtype=float) -> np.ndarray:
    """Return the size-by-size identity; size 0 gives an empty matrix."""
    return np.eye(size, dtype=dtype)


def eye_like(A: np.ndarray) -> np.ndarray:
    """
    Identity of order min(rows, cols) in the field dtype of A.

    Squareness of A is not checked here.
    """
    A = as_field(A)
    return eye(min(A.shape), dtype=A.dtype)
