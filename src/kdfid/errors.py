# This file is part of the kdfid project
#
# Copyright (c) 2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""Exceptions raised while deriving a key.

Library functions raise these, only the cli catches them.
"""


class KDFError(Exception):
    pass


class InvalidSaltEncoding(KDFError, ValueError):
    pass


class EmptySalt(KDFError, ValueError):
    pass


class InvalidKdfParameters(KDFError, ValueError):
    pass


class DerivationFailure(KDFError):
    pass


class InputError(KDFError, IOError):
    pass
