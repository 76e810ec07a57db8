#!/usr/bin/env python
# This file is part of the kdfid project
#
# Copyright (c) 2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""
__main__ module for kdfid.

Enables use as module: $ python -m kdfid
"""


if __name__ == '__main__':
    from . import cli

    cli.cli()
