# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
cursed_linalg
=============

Dense matrix algebra over real or complex NumPy arrays: inverses, integer
matrix powers and the matrix exponential by diagonal Padé approximation.

Public API
~~~~~~~~~~
- Matrix functions
    - `inv`, `matrix_power`, `expm`
    - `pade_coefficient`, `pade_numerator`, `pade_denominator`
- Decompositions
    - `lu_factor`, `LUDecomposition`, `det`
- Matrix utilities
    - `eye`, `eye_like`, `require_square`,
      `lower_triangular`, `upper_triangular`
- Errors
    - `LinalgError`, `NotSquareError`, `SingularError`,
      `CannotConvertElementError`

Example
-------
>>> import numpy as np, cursed_linalg as cl
>>> X = np.array([[0.0, 1.0], [1.0, 0.0]])
>>> np.allclose(cl.matrix_power(X, 2), np.eye(2))
True
"""

from importlib.metadata import version as _pkg_version

from .decompositions import LUDecomposition, det, lu_factor
from .error import (
    CannotConvertElementError,
    LinalgError,
    NotSquareError,
    SingularError,
)
from .expm import (
    PADE_ORDER,
    expm,
    pade_coefficient,
    pade_denominator,
    pade_numerator,
)
from .identity import eye, eye_like
from .inv import inv
from .power import matrix_power
from .scalar import from_float
from .utils import lower_triangular, require_square, upper_triangular

__all__ = [
    "inv",
    "matrix_power",
    "expm",
    "PADE_ORDER",
    "pade_coefficient",
    "pade_numerator",
    "pade_denominator",
    "lu_factor",
    "LUDecomposition",
    "det",
    "eye",
    "eye_like",
    "from_float",
    "require_square",
    "lower_triangular",
    "upper_triangular",
    "LinalgError",
    "NotSquareError",
    "SingularError",
    "CannotConvertElementError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show cursed-linalg”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version("cursed-linalg")
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
