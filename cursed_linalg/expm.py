# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix exponential by diagonal Padé approximation.

We use the notation of Moler & Van Loan, "Nineteen Dubious Ways to Compute
the Exponential of a Matrix, Twenty-Five Years Later":

    e^A ≈ R_pq(A) = [D_pq(A)]^{-1} N_pq(A)

    N_pq(A) = Σ_{j=0}^{p} [(p + q - j)! p!] / [(p + q)! j! (p - j)!] A^j
    D_pq(A) = Σ_{j=0}^{q} [(p + q - j)! q!] / [(p + q)! j! (q - j)!] (-A)^j

No scaling and squaring is applied before the series are evaluated, so the
approximation degrades quickly once ||A|| grows past a few units.
"""

import logging
import math

import numpy as np

from .identity import eye
from .inv import inv
from .power import matrix_power
from .scalar import from_float
from .utils import as_field, require_square

logger = logging.getLogger(__name__)

PADE_ORDER: int = 16
# Beyond this infinity norm the [16/16] approximant error, which grows like
# ||A||^(p+q+1), is no longer below float64 round-off.
PADE_NORM_WARNING: float = 8.0


def _log_factorial(n: int) -> float:
    return math.lgamma(n + 1)


def pade_coefficient(j: int, p: int, q: int) -> float:
    """
    Coefficient of A^j in N_pq, i.e. (p+q-j)! p! / ((p+q)! j! (p-j)!).

    The factorials are combined in log space so that large orders do not
    overflow. The coefficient of (-A)^j in D_pq is pade_coefficient(j, q, p).
    """
    if p < 0 or q < 0:
        raise ValueError("Padé orders must be non-negative")
    if not 0 <= j <= p:
        raise ValueError(f"term index {j} outside 0..{p}")
    log_c = (
        _log_factorial(p + q - j)
        + _log_factorial(p)
        - _log_factorial(p + q)
        - _log_factorial(j)
        - _log_factorial(p - j)
    )
    return math.exp(log_c)


def _pade_series(A: np.ndarray, degree: int, p: int, q: int) -> np.ndarray:
    # Σ_{j=0}^{degree} pade_coefficient(j, p, q) A^j, the j = 0 term is I
    series = eye(A.shape[0], dtype=A.dtype)
    for j in range(1, degree + 1):
        c = from_float(pade_coefficient(j, p, q), A.dtype)
        series = series + c * matrix_power(A, j)
    return series


def pade_numerator(A: np.ndarray, p: int = PADE_ORDER, q: int = PADE_ORDER):
    """N_pq(A), the numerator series of the Padé approximant."""
    A = as_field(A)
    require_square(A)
    return _pade_series(A, p, p, q)


def pade_denominator(A: np.ndarray, p: int = PADE_ORDER, q: int = PADE_ORDER):
    """D_pq(A), the denominator series, evaluated at -A."""
    A = as_field(A)
    require_square(A)
    return _pade_series(-A, q, q, p)


def expm(A: np.ndarray, p: int = PADE_ORDER, q: int = PADE_ORDER) -> np.ndarray:
    """
    Matrix exponential e^A through the [p/q] Padé approximant.

    Parameters
    ----------
    A : (n,n) ndarray
        Square matrix, real or complex.
    p, q : int
        Numerator and denominator degrees (16 by default).

    Returns
    -------
    E : (n,n) ndarray
        D_pq(A)^{-1} N_pq(A).

    Raises
    ------
    NotSquareError, SingularError, CannotConvertElementError
        Passed through from the power, inverse and coefficient steps.
    """
    if p < 0 or q < 0:
        raise ValueError("Padé orders must be non-negative")
    A = as_field(A)
    require_square(A)

    norm = float(np.linalg.norm(A, ord=np.inf)) if A.size else 0.0
    if norm > PADE_NORM_WARNING:
        logger.warning(
            f"expm(): ||A||_inf = {norm:.3g} without scaling and squaring, "
            f"the [{p}/{q}] Padé approximant is likely inaccurate"
        )
    logger.debug(f"expm(): order {A.shape[0]}, Padé degrees p={p}, q={q}")

    N = pade_numerator(A, p, q)
    D = pade_denominator(A, p, q)
    return inv(D) @ N
