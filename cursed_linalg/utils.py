# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .error import LinalgError, NotSquareError

EPS: float = 1e-12


def scale_tol(A: np.ndarray) -> float:
    """
    Return a pivot tolerance relative to the matrix magnitude.

    An empty or all-zero matrix gets a zero tolerance, so only exact
    zeros count as negligible there.
    """
    if A.size == 0:
        return 0.0
    return EPS * float(np.linalg.norm(A, ord=np.inf))


def permutation_sign(perm: list[int]) -> float:
    """Return +1 or –1 depending on permutation parity."""
    visited = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if not visited[i]:
            cycles += 1
            j = i
            while not visited[j]:
                visited[j] = True
                j = perm[j]
    swaps = len(perm) - cycles  # n − #cycles
    return -1.0 if swaps & 1 else 1.0


def as_field(A) -> np.ndarray:
    """
    View `A` as a matrix over a field.

    Real and complex floating dtypes are kept as they are; integer and
    boolean matrices are promoted to float64. The input may be returned
    unchanged, so callers that mutate must copy first.
    """
    A = np.asarray(A)
    if not np.issubdtype(A.dtype, np.inexact):
        return A.astype(float)
    return A


def require_square(A: np.ndarray) -> int:
    """
    Return the common dimension of a square matrix.

    Raises
    ------
    LinalgError    : if `A` is not two-dimensional.
    NotSquareError : if `A` has a different number of rows and columns.
    """
    if np.ndim(A) != 2:
        raise LinalgError(f"expected a 2-D matrix, but got shape {np.shape(A)}")
    rows, cols = np.shape(A)
    if rows != cols:
        raise NotSquareError(rows, cols)
    return rows


def lower_triangular(A: np.ndarray) -> np.ndarray:
    """Copy of `A` with every entry above the diagonal set to zero."""
    return np.tril(A)


def upper_triangular(A: np.ndarray) -> np.ndarray:
    """Copy of `A` with every entry on or below the diagonal set to zero."""
    return np.triu(A, k=1)


def swap_index_axis(A: np.ndarray, axis: int, idx_source: int, idx_dest: int):
    """
    Swap two rows (axis=0) or columns (axis=1) of `A` in place.

    Only one of the two slices is copied to scratch storage.
    """
    if idx_source == idx_dest:
        return
    lanes = np.moveaxis(A, axis, 0)  # view, writes land in A
    scratch = lanes[idx_source].copy()
    lanes[idx_source] = lanes[idx_dest]
    lanes[idx_dest] = scratch
