# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import dataclasses
import itertools
import re
from typing import *

import numpy as np
import scipy.linalg

from su3fusion.representation import Rep


# This class is inspired from https://github.com/lie-nn/lie-nn/blob/70adebce44e3197ee17f780585c6570d836fc2fe/lie_nn/_src/irrep.py
@dataclasses.dataclass(frozen=True)
class Irrep(Rep):
    r"""
    Subclass of :class:`Rep` for an irreducible representation of a Lie group.

    It extends the base class by adding:

    - A regular expression pattern for parsing the string representation.
    - The selection rule for the tensor product of two irreps.
    - A total order used to sort the irreps in a canonical way.
    - A Clebsch-Gordan method computing the intertwiners numerically.
    """

    @classmethod
    def regexp_pattern(cls) -> re.Pattern:
        """Regular expression pattern for parsing the string representation."""
        raise NotImplementedError  # pragma: no cover

    @classmethod
    def from_string(cls, string: str) -> Irrep:
        """Create an instance from the string representation."""
        raise NotImplementedError  # pragma: no cover

    @classmethod
    def _from(cls, *args) -> Irrep:
        if len(args) == 1:
            arg = args[0]
            if isinstance(arg, cls):
                return arg
            if isinstance(arg, str):
                return cls.from_string(arg)
            if isinstance(arg, Iterable):
                return cls(*iter(arg))
        return cls(*args)

    def __repr__(rep: Irrep) -> str:
        raise NotImplementedError  # pragma: no cover

    def __mul__(rep1: Irrep, rep2: Irrep) -> Sequence[Irrep]:
        """Selection rule for the tensor product of two irreps."""
        raise NotImplementedError  # pragma: no cover

    def sort_key(rep: Irrep) -> tuple:
        """Key of the canonical order, the dimension comes first."""
        raise NotImplementedError  # pragma: no cover

    def __lt__(rep1: Irrep, rep2: Irrep) -> bool:
        rep2 = rep1._from(rep2)
        return rep1.sort_key() < rep2.sort_key()

    @classmethod
    def iterator(cls) -> Iterator[Irrep]:
        r"""
        Iterator over all irreps of the Lie group.

        - the first element is the trivial irrep
        - the elements follow the order defined by ``__lt__``
        """
        raise NotImplementedError  # pragma: no cover

    @classmethod
    def clebsch_gordan(cls, rep1: Irrep, rep2: Irrep, rep3: Irrep) -> np.ndarray:
        """
        Clebsch-Gordan coefficients tensor.

        The shape is ``(number_of_paths, rep1.dim, rep2.dim, rep3.dim)`` and rep3 is the output irrep.

        See also:
            :func:`clebsch_gordan`.
        """
        rep1, rep2, rep3 = cls._from(rep1), cls._from(rep2), cls._from(rep3)
        return _intertwiners(rep1.X, rep2.X, rep3.X)

    @classmethod
    def trivial(cls) -> Irrep:
        """Return the trivial irrep, the first element of the iterator."""
        rep: Irrep = next(cls.iterator())
        assert rep.is_trivial(), "problem with the iterator"
        return rep


def _intertwiners(X1: np.ndarray, X2: np.ndarray, X3: np.ndarray) -> np.ndarray:
    # C_ljk X1_li + C_ilk X2_lj = X3_kl C_ijl for every generator
    d1, d2, d3 = X1.shape[1], X2.shape[1], X3.shape[1]
    I1, I2, I3 = np.eye(d1), np.eye(d2), np.eye(d3)

    blocks = [
        np.kron(np.kron(x1.T, I2), I3)
        + np.kron(np.kron(I1, x2.T), I3)
        - np.kron(np.kron(I1, I2), x3)
        for x1, x2, x3 in zip(X1, X2, X3)
    ]
    null = scipy.linalg.null_space(np.concatenate(blocks, axis=0))
    return null.T.reshape(-1, d1, d2, d3)


def clebsch_gordan(rep1: Irrep, rep2: Irrep, rep3: Irrep) -> np.ndarray:
    r"""
    Compute the Clebsch-Gordan coefficients.

    The coefficients span the space of equivariant maps from the tensor product
    of ``rep1`` and ``rep2`` onto ``rep3``. They satisfy

    .. math::

        C_{ljk} X^1_{li} + C_{ilk} X^2_{lj} = X^3_{kl} C_{ijl}

    The solutions are orthonormal when flattened; their number is the
    multiplicity of ``rep3`` in the fusion of ``rep1`` with ``rep2``.

    Args:
        rep1 (Irrep): The first irreducible representation (input).
        rep2 (Irrep): The second irreducible representation (input).
        rep3 (Irrep): The third irreducible representation (output).

    Returns:
        np.ndarray: An array of shape ``(num_solutions, dim1, dim2, dim3)``.

    Examples:
        >>> C = clebsch_gordan(su3.SU3(1, 0), su3.SU3(1, 1), su3.SU3(2, 1))
        >>> C.shape
        (1, 3, 3, 8)

        If there is no solution, the output is an empty array.

        >>> C = clebsch_gordan(su3.SU3(1, 0), su3.SU3(1, 0), su3.SU3(1, 0))
        >>> C.shape
        (0, 3, 3, 3)
    """
    return rep1.clebsch_gordan(rep1, rep2, rep3)


def selection_rule_product(
    irs1: Union[Irrep, Sequence[Irrep], None],
    irs2: Union[Irrep, Sequence[Irrep], None],
) -> Optional[FrozenSet[Irrep]]:
    """Irreps appearing in at least one product of an element of ``irs1`` with one of ``irs2``."""
    if irs1 is None or irs2 is None:
        return None

    if isinstance(irs1, Irrep):
        irs1 = [irs1]
    if isinstance(irs2, Irrep):
        irs2 = [irs2]
    irs1, irs2 = list(irs1), list(irs2)
    assert all(isinstance(x, Irrep) for x in irs1)
    assert all(isinstance(x, Irrep) for x in irs2)

    out = set()
    for ir1, ir2 in itertools.product(irs1, irs2):
        out = out.union(ir1 * ir2)
    return frozenset(out)


def selection_rule_power(
    irrep_class: Type[Irrep], irs: Union[Irrep, Sequence[Irrep]], n: int
) -> FrozenSet[Irrep]:
    """Irreps appearing in the ``n``-fold tensor power of ``irs``."""
    if isinstance(irs, Irrep):
        irs = [irs]
    irs = list(irs)
    assert all(isinstance(x, Irrep) for x in irs)

    out = frozenset([irrep_class.trivial()])
    for _ in range(n):
        out = selection_rule_product(out, irs)
    return out
