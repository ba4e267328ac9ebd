# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
import itertools

import numpy as np

import su3fusion as su3


def first_irreps(n: int = 12):
    return list(itertools.islice(su3.SU3.iterator(), n))


def test_rep():
    for r in first_irreps():
        A = r.A
        assert A.shape == (r.lie_dim, r.lie_dim, r.lie_dim)
        assert r.lie_dim == 8
        X = r.X
        H = r.H
        assert X.shape == (8, r.dim, r.dim)
        assert H.shape == (0, r.dim, r.dim)


def test_is_scalar():
    for r in first_irreps():
        assert r.is_scalar() == su3.Rep.is_scalar(r)


def test_dim():
    # the dimension of the kernel of the contraction matches the closed formula
    for r in first_irreps(20):
        assert r.dim == su3.Rep.dim.fget(r)


def test_generators_anti_hermitian():
    for r in first_irreps():
        X = r.X
        np.testing.assert_allclose(X, -np.conj(np.swapaxes(X, 1, 2)), atol=1e-12)
        np.testing.assert_allclose(np.einsum("aii->a", X), 0.0, atol=1e-12)


def test_casimir():
    for r in first_irreps():
        C = r.casimir_matrix()
        # the Killing form of su(3) is -3 delta
        np.testing.assert_allclose(r.killing_form(), -3 * np.eye(8), atol=1e-12)
        np.testing.assert_allclose(
            C, float(r.quadratic_casimir()) / 3 * np.eye(r.dim), atol=1e-10
        )


def test_exp_map():
    rng = np.random.default_rng(0)
    for r in first_irreps(8):
        U = r.exp_map(rng.normal(size=8), np.array([]))
        np.testing.assert_allclose(U @ np.conj(U.T), np.eye(r.dim), atol=1e-10)
        np.testing.assert_allclose(np.linalg.det(U), 1.0, atol=1e-10)

        # the isospin T_3 has half-integer eigenvalues
        alpha = np.zeros(8)
        alpha[2] = 4 * np.pi
        np.testing.assert_allclose(
            r.exp_map(alpha, np.array([])), np.eye(r.dim), atol=1e-10
        )


def test_fundamental():
    X = su3.SU3(1, 0).X
    np.testing.assert_allclose(X, -0.5j * su3.representation.irrep_su3.GELL_MANN)
