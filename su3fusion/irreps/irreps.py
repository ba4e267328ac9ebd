# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import dataclasses
import itertools
from typing import *

import su3fusion as su3


@dataclasses.dataclass(frozen=True)
class MulIrrep:
    mul: int
    ir: su3.SU3

    def __repr__(self):
        if self.mul == 1:
            return f"{self.ir}"
        return f"{self.mul}x{self.ir}"

    def __iter__(self):
        return iter((self.mul, self.ir))


# This class is inspired from https://github.com/e3nn/e3nn-jax/blob/245e17eb23deaccad9f2c9cfd40fe40515e3c074/e3nn_jax/_src/irreps.py
@dataclasses.dataclass(init=False, frozen=True)
class Irreps:
    """
    Direct sum of SU(3) irreducible representations with multiplicities.

    This is the type returned by :func:`fuse`.

    Args:
        input (Union[str, SU3, Sequence[Union[MulIrrep, SU3, tuple[int, SU3]]]]): List of
            tuples ``(multiplicity, irrep)`` or string representation.

    Examples:
        >>> Irreps("2x[2, 1] + [0, 0]")
        2x[2, 1]+[0, 0]
        >>> Irreps([(1, su3.SU3(0, 0)), (2, su3.SU3(2, 1))]).dim
        17
    """

    _mulirreps: tuple[MulIrrep, ...]

    def __init__(self, input: Union[Irreps, str, su3.SU3, Sequence[Any]] = ()):
        mulreps = []

        if isinstance(input, Irreps):
            mulreps = input._mulirreps

        elif isinstance(input, su3.SU3):
            mulreps = [MulIrrep(mul=1, ir=input)]

        elif isinstance(input, str):
            for mul_rep_str in [] if input.strip() == "" else input.split("+"):
                if "x" in mul_rep_str:
                    mul, rep_str = mul_rep_str.split("x", 1)
                    try:
                        mul = int(mul)
                    except ValueError:
                        raise ValueError(
                            f"Invalid multiplicity: {mul.strip()!r} in {mul_rep_str.strip()!r}"
                        )
                    rep_str = rep_str.strip()
                else:
                    mul = 1
                    rep_str = mul_rep_str.strip()

                if not su3.SU3.regexp_pattern().fullmatch(rep_str):
                    raise ValueError(
                        f"Invalid representation string: {rep_str}, expected pattern: {su3.SU3.regexp_pattern().pattern}"
                    )

                mulreps.append(MulIrrep(mul=mul, ir=su3.SU3.from_string(rep_str)))

        else:
            for x in input:
                if isinstance(x, MulIrrep):
                    mulreps.append(x)
                elif isinstance(x, su3.SU3):
                    mulreps.append(MulIrrep(mul=1, ir=x))
                else:
                    try:
                        mul, ir = x
                    except (TypeError, ValueError):
                        raise ValueError(
                            f"Invalid representation: {x}, expected (mul, irrep)"
                        )

                    if isinstance(mul, bool) or not isinstance(mul, int):
                        raise ValueError(f"Invalid multiplicity: {mul}, expected int")

                    mulreps.append(MulIrrep(mul=mul, ir=su3.SU3._from(ir)))

        object.__setattr__(self, "_mulirreps", tuple(mulreps))

    def __len__(self):
        """Number of ``mul, irrep`` entries."""
        return len(self._mulirreps)

    def __iter__(self):
        return iter(self._mulirreps)

    def __getitem__(self, index: Union[int, slice]) -> Union[MulIrrep, Irreps]:
        x = self._mulirreps[index]

        if isinstance(index, slice):
            return Irreps(x)
        return x

    def __contains__(self, rep: Union[str, su3.SU3]) -> bool:
        """
        Check if the irrep appears in the direct sum.

        Examples:
            >>> "[2, 1]" in Irreps("[0, 0] + 0x[2, 1]")
            True
        """
        # This function does not check the multiplicity of the representation!
        rep = su3.SU3._from(rep)
        return any(mulrep.ir == rep for mulrep in self)

    def __repr__(self):
        return "+".join(f"{mulrep}" for mulrep in self)

    def count(self, rep: Union[str, su3.SU3]) -> int:
        """
        Count the total multiplicity of an irrep.

        Examples:
            >>> Irreps("[0, 0] + 2x[2, 1] + [2, 1]").count("[2, 1]")
            3
        """
        rep = su3.SU3._from(rep)
        return sum(mul for mul, r in self if r == rep)

    @property
    def dim(self) -> int:
        """Total dimension, ``sum(mul * ir.dim)``."""
        return sum(mul * rep.dim for mul, rep in self)

    @property
    def num_irreps(self) -> int:
        """Number of irreps counted with multiplicity."""
        return sum(mul for mul, _ in self)

    @property
    def muls(self) -> list[int]:
        """List of multiplicities."""
        return [mul for mul, _ in self]

    def __add__(self, other):
        """Concatenate two direct sums."""
        other = Irreps(other)
        return Irreps(self._mulirreps + other._mulirreps)

    def __radd__(self, other):
        return Irreps(other) + self

    def __mul__(self, other):
        """Multiply all multiplicities by an integer."""
        if isinstance(other, int):
            return Irreps([MulIrrep(mul * other, rep) for mul, rep in self])
        return NotImplemented  # pragma: no cover

    def __rmul__(self, other):
        return self * other

    def __eq__(self, other):
        """
        Check if two direct sums are written identically.

        The order matters, use :meth:`regroup` first to compare contents.
        """
        try:
            other = Irreps(other)
        except (ValueError, TypeError):
            return False
        return self._mulirreps == other._mulirreps

    def dual(self) -> Irreps:
        """Conjugate every irrep, keeping the multiplicities and the order."""
        return Irreps([(mul, rep.dual()) for mul, rep in self])

    def merge_consecutive(self) -> Irreps:
        """
        Merge consecutive ``mul, irrep`` entries with the same irrep.

        Examples:
            >>> Irreps("[1, 0] + [1, 0] + [0, 0] + [1, 0]").merge_consecutive()
            2x[1, 0]+[0, 0]+[1, 0]
        """
        out = []
        for mul, rep in self:
            if out and out[-1][1] == rep:
                out[-1] = (out[-1][0] + mul, rep)
            else:
                out.append((mul, rep))
        return Irreps(out)

    def remove_zero_multiplicities(self) -> Irreps:
        """Remove the entries with zero multiplicity."""
        return Irreps([(mul, rep) for mul, rep in self if mul != 0])

    def simplify(self) -> Irreps:
        """
        Remove zero multiplicities and merge consecutive entries.

        Examples:
            >>> Irreps("[1, 0] + 0x[2, 1] + [1, 0]").simplify()
            2x[1, 0]
        """
        return self.remove_zero_multiplicities().merge_consecutive()

    def sort(self) -> SortResult:
        """
        Sort the entries in the canonical order ``(dim, nboxes, row2)`` of the irreps.

        Returns:
            SortResult: The sorted direct sum and associated permutation.
        """

        def inverse(p):
            return tuple(p.index(i) for i in range(len(p)))

        out = sorted([(rep, i, mul) for i, (mul, rep) in enumerate(self)])
        inv = tuple(i for rep, i, mul in out)
        perm = inverse(inv)
        irreps = Irreps([(mul, rep) for rep, i, mul in out])
        return SortResult(irreps, perm, inv)

    def regroup(self) -> Irreps:
        """
        Sort and simplify, the canonical form of a direct sum.

        Examples:
            >>> Irreps("[2, 1] + [1, 0] + [0, 0] + [2, 1]").regroup()
            [0, 0]+[1, 0]+2x[2, 1]
        """
        return self.sort().irreps.simplify()

    def filter(
        self,
        *,
        keep: Union[str, Sequence[su3.SU3], Callable[[MulIrrep], bool], None] = None,
        drop: Union[str, Sequence[su3.SU3], Callable[[MulIrrep], bool], None] = None,
    ) -> Irreps:
        """
        Filter entries.

        Args:
            keep (Union[str, Sequence[SU3], Callable[[MulIrrep], bool]], optional): Irreps to keep.
            drop (Union[str, Sequence[SU3], Callable[[MulIrrep], bool]], optional): Irreps to drop.

        Raises:
            ValueError: If both ``keep`` and ``drop`` are defined or if neither is defined.

        Examples:
            >>> su3.fuse(su3.SU3(2, 1), su3.SU3(2, 1)).filter(keep=lambda mulir: mulir.ir.dim == 10)
            [3, 0]+[3, 3]
        """
        if keep is not None and drop is not None:
            raise ValueError("Only one of `keep` or `drop` must be defined.")
        if keep is None and drop is None:
            raise ValueError("One of `keep` or `drop` must be defined.")

        from .irrep_utils import into_list_of_irrep

        if keep is not None:
            if callable(keep):
                mask = [keep(mulrep) for mulrep in self]
            else:
                keep = into_list_of_irrep(keep)
                mask = [mulrep.ir in keep for mulrep in self]
        else:
            if callable(drop):
                mask = [not drop(mulrep) for mulrep in self]
            else:
                drop = into_list_of_irrep(drop)
                mask = [mulrep.ir not in drop for mulrep in self]

        return Irreps([mulrep for m, mulrep in zip(mask, self) if m])


class SortResult(NamedTuple):
    """
    Result of sorting irreducible representations.

    Attributes
    ----------
    irreps : Irreps
        The sorted Irreps object.
    perm : tuple[int, ...]
        The permutation applied to sort the irreps.
    inv : tuple[int, ...]
        The inverse of the permutation.
    """

    irreps: Irreps
    perm: tuple[int, ...]
    inv: tuple[int, ...]


def tensor_product(irreps1: Union[Irreps, str], irreps2: Union[Irreps, str]) -> Irreps:
    """
    Decompose the tensor product of two direct sums.

    The product is distributive: every pair of entries is fused and the
    multiplicities multiply.

    Args:
        irreps1 (Irreps): First factor.
        irreps2 (Irreps): Second factor.

    Returns:
        Irreps: The decomposition in canonical form, see :func:`fuse`.

    Examples:
        >>> tensor_product("[1, 0] + [1, 1]", "[1, 0]")
        [0, 0]+[1, 1]+[2, 0]+[2, 1]
    """
    irreps1, irreps2 = Irreps(irreps1), Irreps(irreps2)

    out = []
    for (mul1, ir1), (mul2, ir2) in itertools.product(irreps1, irreps2):
        for mul, ir in su3.fuse(ir1, ir2):
            out.append((mul * mul1 * mul2, ir))
    return Irreps(out).regroup()
