# This file is part of the kdfid project
#
# Copyright (c) 2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""Types used across multiple modules."""

from typing import Any
from typing import Callable

# from typing import TypeAlias
TypeAlias = Any

Password  : TypeAlias = bytes
Salt      : TypeAlias = bytes
DerivedKey: TypeAlias = bytes

PasswordReader: TypeAlias = Callable[[], Password]

KibiBytes : TypeAlias = int
Iterations: TypeAlias = int
Lanes     : TypeAlias = int
NumBytes  : TypeAlias = int
