# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .identity import eye_like
from .inv import inv
from .utils import as_field, require_square

logger = logging.getLogger(__name__)


def matrix_power(A: np.ndarray, k: int) -> np.ndarray:
    """
    Compute A^k for any integer k by binary exponentiation.

    Parameters
    ----------
    A : (n,n) ndarray
        Square matrix, real or complex.
    k : int
        Integer power (can be negative or zero).

    Returns
    -------
    Ak : (n,n) ndarray
        A raised to the k-th power; A^0 is the identity.

    Raises
    ------
    NotSquareError : if A is rectangular, whatever the exponent.
    SingularError  : if k < 0 and A cannot be inverted.
    """
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise TypeError("k must be an integer")
    A = as_field(A)
    require_square(A)

    k = int(k)
    if k < 0:
        # invert once (will raise if singular), then raise to -k
        logger.debug(f"matrix_power(): inverting for exponent {k}")
        A = inv(A)
        k = -k

    result = eye_like(A)
    base = A
    while k:
        if k & 1:
            result = result @ base
        k >>= 1
        if k:
            base = base @ base
    return result
