# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
from functools import wraps
from typing import *

from su3fusion.irreps.context_notation import (
    pop_notation_scope,
    push_notation_scope,
)
from su3fusion.irreps.irrep_notation import IrrepNotation


class assume:
    """Context manager / decorator to assume the notation of the irreps for a block of code.

    Examples:
    ```
    with su3.assume(su3.weight):
        print(su3.fuse(su3.SU3(2, 1), su3.SU3(2, 1)))  # (0,0)+2x(1,1)+(3,0)+(0,3)+(2,2)
    ```

    ```
    @su3.assume("weight")
    def my_function():
        ...
    ```
    """

    def __init__(self, notation: Union[str, IrrepNotation, None] = None):
        if isinstance(notation, str):
            notation = IrrepNotation.as_notation(notation)
        self.notation = notation

    def __enter__(self):
        self.old_notation = push_notation_scope(self.notation)
        return self

    def __exit__(self, *exc):
        pop_notation_scope(self.old_notation)
        return False

    def __call__(self, func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            with self:
                return func(*args, **kwargs)

        return wrapper
