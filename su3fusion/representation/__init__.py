# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
from .rep import Rep
from .irrep import (
    Irrep,
    clebsch_gordan,
    selection_rule_product,
    selection_rule_power,
)
from .irrep_su3 import (
    SU3,
    ValidationError,
    construct_irrep,
    nboxes,
    highest_weight,
    dimension,
    dual,
)
from .fusion import littlewood_richardson, aggregate, fuse


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
    "aggregate",
    "fuse",
]
