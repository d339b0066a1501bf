# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from cursed_linalg.decompositions import det, lu_factor
from cursed_linalg.error import NotSquareError, SingularError

TEST_ITERATIONS = 20
logger = logging.getLogger(__name__)


def test_lu_factors_reconstruct_matrix():
    for _ in range(TEST_ITERATIONS):
        A = np.random.randn(8, 8)
        lu = lu_factor(A)
        logger.debug(f"\nL:\n{lu.l}\nU:\n{lu.u}\nperm: {lu.perm}")

        assert lu.order == 8
        np.testing.assert_allclose(lu.l @ lu.u, A[lu.perm], atol=1e-10)
        np.testing.assert_array_equal(np.diag(lu.l), np.ones(8))
        np.testing.assert_array_equal(np.tril(lu.u, k=-1), np.zeros((8, 8)))


def test_lu_solve_vector_and_matrix():
    n = 50
    A = np.random.randn(n, n)
    lu = lu_factor(A)

    x0 = np.random.randn(n)
    x = lu.solve(A @ x0)
    assert x.shape == (n,)
    np.testing.assert_allclose(x, x0, rtol=1e-7, atol=1e-9)

    X0 = np.random.randn(n, 3)
    X = lu.solve(A @ X0)
    assert X.shape == (n, 3)
    np.testing.assert_allclose(X, X0, rtol=1e-7, atol=1e-9)


def test_lu_solve_complex():
    rng = np.random.default_rng(3)
    A = rng.normal(size=(6, 6)) + 1j * rng.normal(size=(6, 6))
    b = rng.normal(size=6) + 1j * rng.normal(size=6)
    x = lu_factor(A).solve(b)
    np.testing.assert_allclose(x, np.linalg.solve(A, b), rtol=1e-9, atol=1e-12)


def test_lu_solve_rejects_wrong_shape():
    lu = lu_factor(np.eye(3))
    with pytest.raises(ValueError):
        lu.solve(np.ones(4))


def test_lu_does_not_modify_input():
    A = np.random.randn(5, 5)
    A_copy = A.copy()
    lu_factor(A)
    np.testing.assert_array_equal(A, A_copy)


def test_lu_singular_raises_with_determinant():
    A = np.array([[1.0, 2.0], [2.0, 4.0]])
    with pytest.raises(SingularError) as excinfo:
        lu_factor(A)
    assert abs(excinfo.value.det) < 1e-12
    # also usable from code written against numpy
    assert isinstance(excinfo.value, np.linalg.LinAlgError)


def test_lu_not_square_raises():
    with pytest.raises(NotSquareError):
        lu_factor(np.zeros((3, 2)))


def test_determinants():
    A = np.random.randn(30, 30)
    assert np.isclose(det(A), np.linalg.det(A), rtol=1e-8)

    Z = np.array([[0, 1j], [3j, 4]])
    assert np.isclose(det(Z), np.linalg.det(Z))


def test_determinant_of_singular_matrix_is_zero():
    A = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
    assert abs(det(A)) < 1e-10


def test_determinant_of_small_magnitude_matrix():
    A = 1e-13 * np.array([[1.0, 2.0], [3.0, 1.0]])
    assert np.isclose(det(A), np.linalg.det(A), rtol=1e-10, atol=0)
    assert np.isclose(det(A), -5e-26, rtol=1e-10, atol=0)
