# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Errors raised by the linear-algebra operations in this package.
"""

import numpy as np


class LinalgError(ValueError):
    """Base class for every error raised by cursed_linalg."""


class NotSquareError(LinalgError):
    """
    An algorithm requires a square matrix, but a rectangular one was given.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(f"expected square matrix, but got shape {rows} × {cols}")


class SingularError(LinalgError, np.linalg.LinAlgError):
    """
    The matrix is singular (or very poorly conditioned) and has no inverse.

    Attributes
    ----------
    det : float | complex
        Determinant estimate of the matrix which caused this error.
    """

    def __init__(self, det) -> None:
        self.det = det
        super().__init__(
            "expected invertible matrix, but got a singular or very poorly "
            f"conditioned matrix (det = {det})"
        )


class CannotConvertElementError(LinalgError):
    """
    A value could not be represented in the element type of a matrix.
    """

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(
            f"could not convert value of type `{source}` into element type `{target}`"
        )
