# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
from typing import *

from su3fusion.irreps.irrep_notation import IrrepNotation

_notation: Union[None, IrrepNotation] = None


def get_notation_scope(raising: bool = True) -> IrrepNotation:
    if raising and _notation is None:
        raise ValueError(
            "No notation set in the context. Please specify the notation explicitly or use ``with su3.assume(notation):``."
        )

    return _notation


def push_notation_scope(notation):
    global _notation
    old_notation = _notation
    _notation = notation
    return old_notation


def pop_notation_scope(old_notation):
    global _notation
    _notation = old_notation
