# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
from typing import *

import su3fusion as su3
from su3fusion import irreps


def into_list_of_irrep(
    input: Union[
        str,
        su3.SU3,
        irreps.MulIrrep,
        Iterable[Union[str, su3.SU3, irreps.MulIrrep]],
    ],
) -> list[su3.SU3]:
    if isinstance(input, str):
        return [rep for _, rep in su3.Irreps(input)]
    if isinstance(input, su3.SU3):
        return [input]
    if isinstance(input, irreps.MulIrrep):
        return [input.ir]

    output = []
    for rep in input:
        if isinstance(rep, su3.SU3):
            output.append(rep)
        elif isinstance(rep, irreps.MulIrrep):
            output.append(rep.ir)
        else:
            output.append(su3.SU3._from(rep))
    return output
