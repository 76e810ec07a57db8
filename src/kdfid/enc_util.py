# This file is part of the kdfid project
#
# Copyright (c) 2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Helper functions related to data/type encoding/decoding."""

import base64


def bytes2hex(data: bytes) -> str:
    """Convert bytes to a (lowercase) hex string."""
    return base64.b16encode(data).decode('ascii').lower()


def hex2bytes(hex_str: str) -> bytes:
    """Convert a hex string to bytes.

    Both upper and lower case digits are accepted. Unlike
    bytes.fromhex, whitespace is not. Raises ValueError for odd
    length input or for non-hex characters.
    """
    if len(hex_str) % 2 != 0:
        raise ValueError(f"Invalid hex string of odd length {len(hex_str)}")

    # NOTE: encoding to ascii raises UnicodeEncodeError and b16decode
    #   raises binascii.Error, both are subclasses of ValueError.
    return base64.b16decode(hex_str.encode('ascii'), casefold=True)


def bytes2base64(data: bytes) -> str:
    """Convert bytes to standard base64 (with padding)."""
    return base64.standard_b64encode(data).decode('ascii')


def base642bytes(b64_str: str) -> bytes:
    return base64.standard_b64decode(b64_str.encode('ascii'))
