# This file is part of the kdfid project
#
# Copyright (c) 2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Argon2 cost parameters and their defaults.

Values are only checked for their shape here (unsigned 32 bit ints,
which the cli already enforces). Whether they are acceptable to
Argon2 is decided by kdf.validate_kdf_params.
"""

import logging
from typing import Optional
from typing import NamedTuple

from . import common_types as ct

logger = logging.getLogger(__name__)

MAX_U32 = 2 ** 32 - 1

DEFAULT_MEM_KIB    = ct.KibiBytes(65536)
DEFAULT_ITERATIONS = ct.Iterations(3)
DEFAULT_LANES      = ct.Lanes(1)
DEFAULT_OUT_LEN    = ct.NumBytes(32)


class KDFParams(NamedTuple):
    mem_kib   : ct.KibiBytes
    iterations: ct.Iterations
    lanes     : ct.Lanes
    out_len   : ct.NumBytes


def init_kdf_params(
    mem_kib   : Optional[ct.KibiBytes ] = None,
    iterations: Optional[ct.Iterations] = None,
    lanes     : Optional[ct.Lanes     ] = None,
    out_len   : Optional[ct.NumBytes  ] = None,
) -> KDFParams:
    params = KDFParams(
        mem_kib=DEFAULT_MEM_KIB if mem_kib is None else mem_kib,
        iterations=DEFAULT_ITERATIONS if iterations is None else iterations,
        lanes=DEFAULT_LANES if lanes is None else lanes,
        out_len=DEFAULT_OUT_LEN if out_len is None else out_len,
    )

    for name, val in params._asdict().items():
        if not isinstance(val, int) or not 0 <= val <= MAX_U32:
            raise TypeError(f"Invalid value for {name}: {val!r} (expected u32)")

    logger.debug(f"kdf params: {format_params(params)}")
    return params


def format_params(params: KDFParams) -> str:
    return (
        f"mem_kib={params.mem_kib} iterations={params.iterations} "
        f"lanes={params.lanes} out_len={params.out_len}"
    )
