# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
LU factorization with partial pivoting, over real or complex matrices.
"""

import logging
from typing import List, Tuple

import numpy as np

from .error import SingularError
from .utils import (
    as_field,
    lower_triangular,
    permutation_sign,
    require_square,
    scale_tol,
    swap_index_axis,
    upper_triangular,
)

logger = logging.getLogger(__name__)


class LUDecomposition:
    """
    Packed LU factors of a square matrix A, such that A[perm] = L @ U.

    The strictly-lower part of the packed matrix holds the multipliers of
    the unit lower-triangular L; the rest holds U.

    Attributes:
        perm: Final row order, row i of L @ U is original row perm[i].
    """

    def __init__(self, lu: np.ndarray, perm: List[int]) -> None:
        self._lu = lu
        self.perm = perm

    @property
    def order(self) -> int:
        return self._lu.shape[0]

    @property
    def l(self) -> np.ndarray:  # noqa: E743
        """Unit lower-triangular factor."""
        L = lower_triangular(self._lu)
        np.fill_diagonal(L, 1)
        return L

    @property
    def u(self) -> np.ndarray:
        """Upper-triangular factor, diagonal included."""
        return upper_triangular(self._lu) + np.diag(np.diagonal(self._lu))

    def det(self):
        """Determinant of the factored matrix."""
        return permutation_sign(self.perm) * np.prod(np.diagonal(self._lu))

    def solve(self, rhs: np.ndarray) -> np.ndarray:
        """
        Solve A X = rhs.

        Parameters
        ----------
        rhs : (n,) or (n, k) ndarray

        Returns
        -------
        x : (n,) or (n, k) ndarray
            Solution(s), in the common dtype of A and rhs.
        """
        rhs = np.asarray(rhs)
        n = self.order
        if rhs.ndim not in (1, 2) or rhs.shape[0] != n:
            raise ValueError(
                f"right-hand side of shape {rhs.shape} does not match order {n}"
            )

        vector = rhs.ndim == 1
        dtype = np.result_type(self._lu.dtype, rhs.dtype)
        x = rhs[self.perm].astype(dtype, copy=True)
        if vector:
            # (n,)  →  (n,1)
            x = x[:, None]

        # forward substitution through the unit lower factor
        for i in range(n):
            x[i] -= self._lu[i, :i] @ x[:i]

        # back substitution through the upper factor
        for i in reversed(range(n)):
            x[i] = (x[i] - self._lu[i, i + 1 :] @ x[i + 1 :]) / self._lu[i, i]

        return x.ravel() if vector else x


def _eliminate(A: np.ndarray) -> Tuple[LUDecomposition, bool]:
    """
    Gaussian elimination with partial pivoting on a copy of A.

    Columns whose best pivot is numerically zero are skipped, so the
    factors are only meaningful when the returned flag is False.
    """
    LU = as_field(A).copy()
    n = require_square(LU)
    pivot_tol = scale_tol(LU)

    perm = list(range(n))  # Identity Permutation
    singular = False

    for col in range(n):
        # Pick the largest magnitude in the column, at or below the
        # diagonal, for a more stable elimination.
        col_slice = np.abs(LU[col:, col])
        max_idx = int(col_slice.argmax())

        if col_slice[max_idx] <= pivot_tol:  # column is numerically zero
            singular = True
            continue

        pivot_row = col + max_idx
        if pivot_row != col:
            swap_index_axis(LU, 0, col, pivot_row)
            perm[col], perm[pivot_row] = perm[pivot_row], perm[col]

        factors = LU[col + 1 :, col] / LU[col, col]
        LU[col + 1 :, col] = factors
        LU[col + 1 :, col + 1 :] -= factors[:, None] * LU[col, col + 1 :]

    return LUDecomposition(LU, perm), singular


def lu_factor(A: np.ndarray) -> LUDecomposition:
    """
    Factor a square matrix as A[perm] = L @ U.

    Raises
    ------
    NotSquareError : if A is rectangular.
    SingularError  : if a pivot is numerically zero.
    """
    lu, singular = _eliminate(A)
    if singular:
        d = lu.det()
        logger.debug(f"lu_factor(): negligible pivot, det ≈ {d}")
        raise SingularError(d)
    logger.debug(f"lu_factor(): factored matrix of order {lu.order}")
    return lu


def det(A: np.ndarray):
    """
    Calculate the determinant of n-by-n matrix A using elimination.

    Singular matrices do not raise; their (near-zero) estimate is returned.
    """
    lu, _singular = _eliminate(A)
    return lu.det()
