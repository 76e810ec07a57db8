# This file is part of the kdfid project
#
# Copyright (c) 2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""kdfid: Argon2id key derivation.

A cli app and library to derive encryption keys from a password.
"""

__version__ = "2022.1009-beta"
