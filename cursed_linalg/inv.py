# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .decompositions import lu_factor
from .identity import eye
from .utils import as_field, require_square


def inv(A: np.ndarray) -> np.ndarray:
    """
    Inverse of a square matrix, by solving A X = I against its LU factors.

    Raises
    ------
    NotSquareError : if A is rectangular (checked before factoring).
    SingularError  : if the factorization finds a negligible pivot.
    """
    A = as_field(A)
    require_square(A)
    lu = lu_factor(A)
    # Solve A X = I, so X = A^{-1}
    return lu.solve(eye(lu.order, dtype=A.dtype))
