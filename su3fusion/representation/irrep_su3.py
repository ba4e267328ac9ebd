# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import functools
import itertools
import numbers
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import *

import numpy as np
import scipy.linalg

import su3fusion as su3
from su3fusion.representation import Irrep


class ValidationError(ValueError):
    """Raised when two integers do not describe a valid two-row Young tableau."""


# Gell-Mann matrices, normalized as Tr(l_a l_b) = 2 delta_ab
GELL_MANN = np.array(
    [
        [[0, 1, 0], [1, 0, 0], [0, 0, 0]],
        [[0, -1j, 0], [1j, 0, 0], [0, 0, 0]],
        [[1, 0, 0], [0, -1, 0], [0, 0, 0]],
        [[0, 0, 1], [0, 0, 0], [1, 0, 0]],
        [[0, 0, -1j], [0, 0, 0], [1j, 0, 0]],
        [[0, 0, 0], [0, 0, 1], [0, 1, 0]],
        [[0, 0, 0], [0, 0, -1j], [0, 1j, 0]],
        np.array([[1, 0, 0], [0, 1, 0], [0, 0, -2]]) / np.sqrt(3),
    ],
    dtype=np.complex128,
)


@dataclass(frozen=True)
class SU3(Irrep):
    r"""Subclass of :class:`Irrep`, irreducible representations of :math:`SU(3)`.

    An irrep is labeled by its Young tableau ``[row1, row2]`` with
    ``row1 >= row2 >= 0``. The highest weight ``(row1 - row2, row2)`` is the
    other label found in the literature.

    The irrep ``[row1, row2]`` can be understood as the Hilbert space of two
    species of bosons, ``row1 - row2`` quarks and ``row2`` antiquarks, from
    which every quark-antiquark singlet has been removed. One antiquark is
    the antisymmetric product of two quarks, hence the second row.

    Examples:
        >>> su3.SU3(2, 1)
        [2, 1]
        >>> su3.SU3(2, 1).dim
        8
        >>> su3.SU3(1, 0).dual()
        [1, 1]
        >>> su3.SU3(1, 2)
        Traceback (most recent call last):
        ...
        su3fusion.representation.irrep_su3.ValidationError: Invalid Young tableau [1, 2], expected row1 >= row2 >= 0
    """

    row1: int
    row2: int

    def __post_init__(rep):
        for name in ("row1", "row2"):
            value = getattr(rep, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValidationError(
                    f"Invalid Young tableau, {name}={value!r} is not an integer"
                )
            object.__setattr__(rep, name, int(value))

        if not rep.row1 >= rep.row2 >= 0:
            raise ValidationError(
                f"Invalid Young tableau [{rep.row1}, {rep.row2}], expected row1 >= row2 >= 0"
            )

    @classmethod
    def regexp_pattern(cls) -> re.Pattern:
        return re.compile(r"\[\s*(\d+)\s*,\s*(\d+)\s*\]|\(\s*(\d+)\s*,\s*(\d+)\s*\)")

    @classmethod
    def from_string(cls, s: str) -> SU3:
        """Parse ``[row1, row2]`` (Young tableau) or ``(p,q)`` (highest weight)."""
        m = cls.regexp_pattern().fullmatch(s.strip())
        if m is None:
            raise ValueError(
                f"Invalid SU3 string: {s!r}, expected '[row1, row2]' or '(p,q)'"
            )
        if m.group(1) is not None:
            return cls(int(m.group(1)), int(m.group(2)))
        p, q = int(m.group(3)), int(m.group(4))
        return cls(p + q, q)

    def __repr__(rep: SU3) -> str:
        notation = su3.IrrepNotation.as_notation(None)
        if notation == su3.IrrepNotation.weight:
            p, q = rep.highest_weight
            return f"({p},{q})"
        return f"[{rep.row1}, {rep.row2}]"

    @property
    def nboxes(rep: SU3) -> int:
        """Number of boxes in the Young tableau."""
        return rep.row1 + rep.row2

    @property
    def highest_weight(rep: SU3) -> tuple[int, int]:
        """Dynkin labels ``(p, q)`` of the highest weight."""
        return (rep.row1 - rep.row2, rep.row2)

    @property
    def dim(rep: SU3) -> int:
        # hook length formula for two rows and three colors
        return (rep.row1 - rep.row2 + 1) * (rep.row2 + 1) * (rep.row1 + 2) // 2

    def dual(rep: SU3) -> SU3:
        """Conjugate irrep, obtained by exchanging quarks and antiquarks.

        Sometimes called charge conjugation or electron-hole symmetry.
        It is an involution; ``[0, 0]`` and ``[2, 1]`` are fixed points.
        """
        return SU3(rep.row1, rep.row1 - rep.row2)

    def quadratic_casimir(rep: SU3) -> Fraction:
        r"""Eigenvalue of :math:`\sum_a T_a T_a` with :math:`T_a = \lambda_a / 2`."""
        p, q = rep.highest_weight
        return Fraction(p * p + q * q + p * q + 3 * p + 3 * q, 3)

    def is_scalar(rep: SU3) -> bool:
        return rep.row1 == 0

    def sort_key(rep: SU3) -> tuple[int, int, int]:
        # row1 is fixed by nboxes and row2, the key is injective
        return (rep.dim, rep.nboxes, rep.row2)

    def __mul__(rep1: SU3, rep2: SU3) -> list[SU3]:
        rep2 = rep1._from(rep2)
        return [ir for _, ir in su3.fuse(rep1, rep2)]

    @classmethod
    def iterator(cls) -> Iterator[SU3]:
        for d in itertools.count(1):
            # [row1, 0] is the smallest irrep with row1 boxes in the first row
            row1s = itertools.takewhile(
                lambda row1: (row1 + 1) * (row1 + 2) <= 2 * d, itertools.count()
            )
            candidates = (cls(row1, row2) for row1 in row1s for row2 in range(row1 + 1))
            same_dim = [rep for rep in candidates if rep.dim == d]
            yield from sorted(same_dim)

    def algebra(rep=None) -> np.ndarray:
        # [l_a, l_b] = 2i f_abc l_c
        L = GELL_MANN
        comm = np.einsum("aij,bjk->abik", L, L) - np.einsum("bij,ajk->abik", L, L)
        f = np.einsum("abik,cki->abc", comm, L) / 4j
        return np.real(f)

    def continuous_generators(rep: SU3) -> np.ndarray:
        p, q = rep.highest_weight
        return _generators(p, q).copy()

    def discrete_generators(rep: SU3) -> np.ndarray:
        return np.zeros((0, rep.dim, rep.dim))

    def young_diagram(rep: SU3) -> str:
        """Young tableau drawn with box-drawing characters.

        Examples:
            >>> print(su3.SU3(2, 1).young_diagram())
            ┌─┬─┐
            ├─┼─┘
            └─┘
        """
        r1, r2 = rep.row1, rep.row2
        if r1 == 0:
            return "●"

        lines = ["┌─" + "┬─" * (r1 - 1) + "┐"]
        if r2 == 0:
            lines.append("└─" + "┴─" * (r1 - 1) + "┘")
            return "\n".join(lines)

        lines.append(
            "├─"
            + "┼─" * (r2 - 1 + (r1 > r2))
            + "┴─" * max(0, r1 - r2 - 1)
            + ("┤" if r1 == r2 else "┘")
        )
        lines.append("└─" + "┴─" * (r2 - 1) + "┘")
        return "\n".join(lines)


def _occupations(n: int) -> list[tuple[int, int, int]]:
    # Fock basis of Sym^n(C^3), highest weight first
    return [
        (n1, n2, n - n1 - n2) for n1 in range(n, -1, -1) for n2 in range(n - n1, -1, -1)
    ]


def _hopping(n: int) -> np.ndarray:
    """Matrices of a_i^+ a_j on Sym^n(C^3), shape (3, 3, D, D)."""
    basis = _occupations(n)
    index = {s: k for k, s in enumerate(basis)}
    E = np.zeros((3, 3, len(basis), len(basis)))
    for k, s in enumerate(basis):
        for i, j in itertools.product(range(3), repeat=2):
            if s[j] == 0:
                continue
            t = list(s)
            t[j] -= 1
            t[i] += 1
            E[i, j, index[tuple(t)], k] = np.sqrt(s[j] * t[i])
    return E


def _annihilation(n: int) -> np.ndarray:
    """Matrices of a_i from Sym^n(C^3) to Sym^(n-1)(C^3), shape (3, D', D)."""
    basis = _occupations(n)
    index = {s: k for k, s in enumerate(_occupations(n - 1))}
    a = np.zeros((3, len(index), len(basis)))
    for k, s in enumerate(basis):
        for i in range(3):
            if s[i] == 0:
                continue
            t = list(s)
            t[i] -= 1
            a[i, index[tuple(t)], k] = np.sqrt(s[i])
    return a


@functools.lru_cache(maxsize=None)
def _generators(p: int, q: int) -> np.ndarray:
    Ep, Eq = _hopping(p), _hopping(q)
    Dp, Dq = Ep.shape[2], Eq.shape[2]

    # antiquarks carry the dual representation E_ij -> -E_ji
    E = np.einsum("ijuv,xy->ijuxvy", Ep, np.eye(Dq)) - np.einsum(
        "uv,jixy->ijuxvy", np.eye(Dp), Eq
    )
    E = E.reshape(3, 3, Dp * Dq, Dp * Dq)

    if p > 0 and q > 0:
        # the irrep is the traceless part, the kernel of sum_k a_k b_k
        ap, aq = _annihilation(p), _annihilation(q)
        contraction = np.einsum("kuv,kxy->uxvy", ap, aq).reshape(
            ap.shape[1] * aq.shape[1], Dp * Dq
        )
        Q = scipy.linalg.null_space(contraction)
    else:
        Q = np.eye(Dp * Dq)

    E = np.einsum("vu,ijvw,wx->ijux", Q, E, Q)
    return np.einsum("aij,ijuv->auv", -0.5j * GELL_MANN, E)


def construct_irrep(row1: int, row2: int) -> SU3:
    """Build the irrep ``[row1, row2]``, raising :class:`ValidationError` when invalid."""
    return SU3(row1, row2)


def nboxes(rep: SU3) -> int:
    """Number of boxes, ``row1 + row2``."""
    return rep.nboxes


def highest_weight(rep: SU3) -> tuple[int, int]:
    """Highest weight ``(row1 - row2, row2)``."""
    return rep.highest_weight


def dimension(rep: SU3) -> int:
    """Dimension ``(row1 - row2 + 1)(row2 + 1)(row1 + 2) / 2``."""
    return rep.dim


def dual(rep: SU3) -> SU3:
    """Conjugate irrep ``[row1, row1 - row2]``."""
    return rep.dual()
