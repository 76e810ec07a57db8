# This file is part of the kdfid project
#
# Copyright (c) 2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Resolve the salt used for key derivation."""

import logging
from typing import Optional

from . import errors
from . import enc_util
from . import common_types as ct

logger = logging.getLogger(__name__)

# NOTE (mb 2022-10-09): Every key that was derived without --salt-hex
#   depends on this exact value. Changing it silently changes all of
#   those keys. A salt shared by all installations is a deliberate
#   trade-off: a password can be turned into the same key on any
#   machine without having to keep a salt file around.
DEFAULT_SALT = ct.Salt(b"argon2id-shared!")

assert len(DEFAULT_SALT) == 16


def resolve_salt(salt_hex: Optional[str] = None) -> ct.Salt:
    if salt_hex is None:
        logger.info("Using default salt")
        return DEFAULT_SALT

    if len(salt_hex) % 2 != 0:
        raise errors.InvalidSaltEncoding(f"Salt hex must have even length, got {len(salt_hex)}")

    try:
        salt = enc_util.hex2bytes(salt_hex)
    except ValueError as err:
        raise errors.InvalidSaltEncoding(f"Salt hex is not valid hex: {salt_hex!r}") from err

    if not salt:
        raise errors.EmptySalt("Salt cannot be empty")

    logger.info(f"Using salt of {len(salt)} bytes")
    return ct.Salt(salt)
