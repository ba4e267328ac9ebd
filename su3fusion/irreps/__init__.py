# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
from .irrep_notation import IrrepNotation

young = IrrepNotation.young
weight = IrrepNotation.weight

from .context_notation import get_notation_scope
from .context_decorator import assume
from .irreps import MulIrrep, Irreps, SortResult, tensor_product

__all__ = [
    "IrrepNotation",
    "young",
    "weight",
    "get_notation_scope",
    "assume",
    "MulIrrep",
    "Irreps",
    "SortResult",
    "tensor_product",
]
