# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import collections
import logging
from typing import *

import su3fusion as su3
from su3fusion.representation.irrep_su3 import SU3

logger = logging.getLogger(__name__)


def littlewood_richardson(left: SU3, right: SU3) -> Iterator[SU3]:
    r"""
    Enumerate the Littlewood-Richardson tableaux of ``left`` times ``right``.

    The boxes of ``right`` are added to the tableau of ``left``: the ``a``
    boxes of its first row, then the ``b`` boxes of its second row, such that
    the result is a Young tableau and the labels read right to left, top to
    bottom form a lattice word. Columns of three boxes are then removed.
    See Di Francesco, Mathieu and Sénéchal, section 13.5.3.

    Each admissible filling yields one irrep, repeated irreps are expected.
    ``left`` must carry at least as many boxes as ``right``.

    Args:
        left (SU3): The tableau that is extended.
        right (SU3): The tableau whose boxes are distributed.

    Yields:
        SU3: One irrep per admissible filling.
    """
    if right.row1 == 0:
        yield left
        return

    # put a23 boxes on the 2nd or 3rd row
    a23max = min(
        2 * left.row1,  # row2a <= row1a
        right.row1,  # a2 + a3 <= number of a
    )
    for a23 in range(a23max + 1):
        a3min = max(
            0,
            left.row2 + 2 * a23 - left.row1 - right.row1,
            left.row2 - left.row1 + a23,  # no a below a: row2a <= row1
        )
        a3max = min(
            left.row2,  # row3a <= row2a
            a23,  # a3 <= a2 + a3
            right.row1 - right.row2,  # more a than b, right to left: b2 + b3 <= a1 + a2
        )
        for a3 in range(a3min, a3max + 1):
            row1a = left.row1 + right.row1 - a23
            row2a = left.row2 + a23 - a3

            # no b on the 1st row: row1ab = row1a
            b3min = max(
                0,
                row2a + right.row2 - row1a,  # row2ab <= row1ab
                right.row2 + a23 - right.row1,
            )
            b3max = min(
                right.row2,  # only right.row2 b boxes
                (row2a + right.row2 - a3) // 2,  # row3ab <= row2ab
                right.row1 - a3,  # more a than b, right to left: b2 <= a1
                row2a - a3,  # no b below b
            )
            for b3 in range(b3min, b3max + 1):
                row2ab = row2a + right.row2 - b3
                row3ab = a3 + b3
                yield SU3(row1a - row3ab, row2ab - row3ab)


def aggregate(irreps: Iterable[SU3]) -> su3.Irreps:
    """
    Count the repetitions of each irrep.

    Args:
        irreps (Iterable[SU3]): Irreps, possibly repeated.

    Returns:
        Irreps: The distinct irreps with their multiplicity, sorted by
        ``(dim, nboxes, row2)``.
    """
    counts = collections.Counter(irreps)
    return su3.Irreps([(counts[ir], ir) for ir in sorted(counts)])


def fuse(left: SU3, right: SU3) -> su3.Irreps:
    """
    Decompose the tensor product of two irreps into irreps.

    Args:
        left (SU3): First factor.
        right (SU3): Second factor.

    Returns:
        Irreps: The decomposition, one ``(mul, irrep)`` entry per distinct irrep,
        sorted by ``(dim, nboxes, row2)``. The total dimension is
        ``left.dim * right.dim``.

    Examples:
        >>> su3.fuse(su3.SU3(1, 0), su3.SU3(1, 1))
        [0, 0]+[2, 1]
        >>> su3.fuse(su3.SU3(2, 1), su3.SU3(2, 1))
        [0, 0]+2x[2, 1]+[3, 0]+[3, 3]+[4, 2]
    """
    if right.nboxes > left.nboxes:
        logger.debug(f"Swapping operands of {left} x {right}")
        left, right = right, left

    raw = list(littlewood_richardson(left, right))
    out = aggregate(raw)
    logger.debug(
        f"{left} x {right}: {len(raw)} tableaux, {len(out)} distinct irreps"
    )
    return out
