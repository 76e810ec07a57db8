# This file is part of the kdfid project
#
# Copyright (c) 2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Logic related to KDF derivation.

Thin wrapper around argon2-cffi (libargon2). Only Argon2id at
version 0x13 is supported. Associated data and the secret key
input of Argon2 are not exposed.
"""

import time
import typing as typ
import logging
from typing import List

import argon2

from . import errors
from . import parameters
from . import common_types as ct

logger = logging.getLogger(__name__)

ARGON2_TYPE    = argon2.low_level.Type.ID
ARGON2_VERSION = 0x13

ALGORITHM_LABEL = f"Argon2id v0x{ARGON2_VERSION:02x}"

# Bounds as defined by RFC 9106 / libargon2
MIN_LANES      = 1
MAX_LANES      = 2 ** 24 - 1
MIN_ITERATIONS = 1
MIN_MEM_KIB    = 8
MAX_MEM_KIB    = 2 ** 32 - 1
MIN_OUT_LEN    = 4
MAX_OUT_LEN    = 2 ** 32 - 1

# libargon2 reserves 8 blocks (of 1 KiB) per lane
MEM_KIB_PER_LANE = 8


def _param_errors(params: parameters.KDFParams) -> List[str]:
    errs = []
    if not MIN_LANES <= params.lanes <= MAX_LANES:
        errs.append(f"lanes must be in [{MIN_LANES}, {MAX_LANES}], got {params.lanes}")
    if params.iterations < MIN_ITERATIONS:
        errs.append(f"iterations must be >= {MIN_ITERATIONS}, got {params.iterations}")

    min_mem_kib = max(MIN_MEM_KIB, MEM_KIB_PER_LANE * params.lanes)
    if params.mem_kib < min_mem_kib:
        errs.append(
            f"mem_kib must be >= {min_mem_kib} for lanes={params.lanes}, got {params.mem_kib}"
        )
    elif params.mem_kib > MAX_MEM_KIB:
        errs.append(f"mem_kib must be <= {MAX_MEM_KIB}, got {params.mem_kib}")

    if not MIN_OUT_LEN <= params.out_len <= MAX_OUT_LEN:
        errs.append(f"out_len must be in [{MIN_OUT_LEN}, {MAX_OUT_LEN}], got {params.out_len}")
    return errs


def validate_kdf_params(params: parameters.KDFParams) -> parameters.KDFParams:
    errs = _param_errors(params)
    if errs:
        raise errors.InvalidKdfParameters("Invalid Argon2 parameters: " + "; ".join(errs))
    else:
        return params


def derive_key(
    password: ct.Password,
    salt    : ct.Salt,
    params  : parameters.KDFParams,
) -> ct.DerivedKey:
    """Derive params.out_len bytes from password and salt.

    This is deliberately slow and memory hard. Nothing is cached,
    every call does the full computation.
    """
    validate_kdf_params(params)

    tzero = time.time()
    try:
        result = argon2.low_level.hash_secret_raw(
            secret=password,
            salt=salt,
            time_cost=params.iterations,
            memory_cost=params.mem_kib,
            parallelism=params.lanes,
            hash_len=params.out_len,
            type=ARGON2_TYPE,
            version=ARGON2_VERSION,
        )
    except argon2.exceptions.HashingError as err:
        raise errors.DerivationFailure(f"Argon2 derivation failed: {err}") from err
    except MemoryError as err:
        errmsg = (
            f"Argon2 derivation failed: out of memory "
            f"(mem_kib={params.mem_kib}, out_len={params.out_len})"
        )
        raise errors.DerivationFailure(errmsg) from err

    duration = time.time() - tzero
    logger.info(f"{ALGORITHM_LABEL} derivation took {duration:.3f} sec")

    key = typ.cast(bytes, result)
    assert len(key) == params.out_len, len(key)
    return ct.DerivedKey(key)
