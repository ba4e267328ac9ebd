# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-FileCopyrightText: Copyright (c) 2023 lie-nn
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import numpy as np
import scipy.linalg


class Rep:
    r"""Abstract Class, matrix representation of a compact Lie group.

    A subclass describes its group through the structure constants of the
    Lie algebra and its representation through the generator matrices.
    Everything else (dimension, group elements, Casimir) is derived here.
    """

    @property
    def lie_dim(self) -> int:
        """Dimension of the Lie algebra, 8 for SU(3)."""
        return self.algebra().shape[0]

    @property
    def dim(self) -> int:
        """Dimension of the representation, read off the generator matrices."""
        return self.continuous_generators().shape[1]

    def algebra(self) -> np.ndarray:
        r"""
        Structure constants of the Lie algebra.

        .. math::

            [X_a, X_b] = A_{abc} X_c

        Returns:
            np.ndarray: An array of shape ``(lie_dim, lie_dim, lie_dim)``.
        """
        raise NotImplementedError  # pragma: no cover

    @property
    def A(self) -> np.ndarray:
        """Structure constants, ``(lie_dim, lie_dim, lie_dim)``"""
        return self.algebra()

    def continuous_generators(self) -> np.ndarray:
        r"""
        Anti-hermitian generators of the representation.

        .. math::

            \rho(\alpha) = \exp\left(\alpha_a X_a\right)

        Returns:
            np.ndarray: An array of shape ``(lie_dim, dim, dim)``.
        """
        raise NotImplementedError  # pragma: no cover

    @property
    def X(self) -> np.ndarray:
        """Continuous generators, ``(lie_dim, dim, dim)``"""
        return self.continuous_generators()

    def discrete_generators(self) -> np.ndarray:
        r"""Discrete generators of the representation

        .. math::

            \rho(n) = H^n

        Connected groups such as SU(3) have none.

        Returns:
            np.ndarray: An array of shape ``(len(H), dim, dim)``.
        """
        raise NotImplementedError  # pragma: no cover

    @property
    def H(self) -> np.ndarray:
        """Discrete generators, ``(len(H), dim, dim)``"""
        return self.discrete_generators()

    def killing_form(self) -> np.ndarray:
        r"""
        Killing form of the Lie algebra.

        .. math::

            K_{ab} = A_{acd} A_{bdc}

        Returns:
            np.ndarray: An array of shape ``(lie_dim, lie_dim)``.
        """
        A = self.algebra()
        return np.einsum("acd,bdc->ab", A, A)

    def casimir_matrix(self) -> np.ndarray:
        r"""
        Quadratic Casimir element evaluated in the representation.

        .. math::

            C = (K^{-1})_{ab} X_a X_b

        For an irreducible representation this is a multiple of the identity.

        Returns:
            np.ndarray: An array of shape ``(dim, dim)``.
        """
        K_inv = np.linalg.inv(self.killing_form())
        X = self.continuous_generators()
        return np.einsum("ab,aij,bjk->ik", K_inv, X, X)

    def exp_map(
        self, continuous_params: np.ndarray, discrete_params: np.ndarray
    ) -> np.ndarray:
        """
        Exponential map of the representation.

        Args:
            continuous_params (np.ndarray): An array of shape ``(lie_dim,)``.
            discrete_params (np.ndarray): An array of shape ``(len(H),)``.

        Returns:
            np.ndarray: An array of shape ``(dim, dim)``.
        """
        output = scipy.linalg.expm(
            np.einsum("a,aij->ij", continuous_params, self.continuous_generators())
        )
        for k, h in reversed(list(zip(discrete_params, self.discrete_generators()))):
            output = np.linalg.matrix_power(h, k) @ output
        return output

    def __repr__(self) -> str:
        return f"Rep(dim={self.dim}, lie_dim={self.lie_dim}, len(H)={len(self.H)})"

    def is_scalar(self) -> bool:
        """Check if the group acts as the identity"""
        return bool(np.all(self.X == 0.0) and np.all(self.H == np.eye(self.dim)))

    def is_trivial(self) -> bool:
        """Check if the representation is the one-dimensional trivial one"""
        return self.dim == 1 and self.is_scalar()
