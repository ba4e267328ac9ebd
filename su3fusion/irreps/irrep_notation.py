# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from enum import Enum, auto
from typing import *

import su3fusion as su3


class IrrepNotation(Enum):
    """
    Enum for the possible ways of writing an SU(3) irrep.

    Attributes:
        young: Young tableau ``[row1, row2]``, the number of boxes in each row.
        weight: Highest weight ``(p,q)``, the Dynkin labels ``(row1 - row2, row2)``.

    Examples:
        >>> su3.young
        [row1, row2]

        >>> su3.weight
        (p,q)

    .. rubric:: Methods
    """

    young = auto()
    weight = auto()

    def label(self, ir: su3.SU3) -> tuple[int, int]:
        """The two integers written in this notation.

        Examples:
            >>> su3.young.label(su3.SU3(3, 1))
            (3, 1)

            >>> su3.weight.label(su3.SU3(3, 1))
            (2, 1)
        """
        if self == IrrepNotation.young:
            return (ir.row1, ir.row2)
        return ir.highest_weight

    def __repr__(self) -> str:
        if self == IrrepNotation.young:
            return "[row1, row2]"
        if self == IrrepNotation.weight:
            return "(p,q)"

    def __str__(self) -> str:
        return self.__repr__()

    @staticmethod
    def as_notation(notation: Union[str, IrrepNotation, None]) -> IrrepNotation:
        """Resolve a notation, ``None`` means the one of the current scope, Young by default."""
        if isinstance(notation, IrrepNotation):
            return notation
        if notation is None:
            notation = su3.get_notation_scope(raising=False)
            return IrrepNotation.young if notation is None else notation
        try:
            return IrrepNotation[notation]
        except KeyError:
            raise ValueError(f"Invalid notation {notation}")
