# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
import importlib.resources

__version__ = (
    importlib.resources.files(__package__).joinpath("VERSION").read_text().strip()
)

from su3fusion.representation import (
    Rep,
    Irrep,
    clebsch_gordan,
    selection_rule_product,
    selection_rule_power,
    SU3,
    ValidationError,
    construct_irrep,
    nboxes,
    highest_weight,
    dimension,
    dual,
    littlewood_richardson,
    fuse,
)

from su3fusion.irreps import (
    IrrepNotation,
    young,
    weight,
    get_notation_scope,
    assume,
    MulIrrep,
    Irreps,
    tensor_product,
)

__all__ = [
    "Rep",
    "Irrep",
    "clebsch_gordan",
    "selection_rule_product",
    "selection_rule_power",
    "SU3",
    "ValidationError",
    "construct_irrep",
    "nboxes",
    "highest_weight",
    "dimension",
    "dual",
    "littlewood_richardson",
    "fuse",
    "IrrepNotation",
    "young",
    "weight",
    "get_notation_scope",
    "assume",
    "MulIrrep",
    "Irreps",
    "tensor_product",
]
