# This file is part of the kdfid project
#
# Copyright (c) 2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""CLI input/output reading/printing functions."""

import getpass
import warnings
from typing import List

import click

from . import kdf
from . import errors
from . import enc_util
from . import parameters
from . import common_types as ct

PASSWORD_PROMPT = "Enter password"


def _echo(msg: str = "") -> bool:
    """Write message to stdout.

    The boolean return value is only to pacify mypy.
    """
    click.echo(msg)
    return True


def _prompt(text: str, default: str = "") -> str:
    # NOTE: The prompt goes to stderr so that stdout only contains
    #   the result. With a default of "", an empty password is
    #   accepted rather than prompting again.
    with warnings.catch_warnings():
        # getpass only warns and then reads (echoed) input from stdin
        #   when it cannot disable echo on a terminal.
        warnings.simplefilter("error", getpass.GetPassWarning)
        result = click.prompt(
            text,
            default=default,
            hide_input=True,
            show_default=False,
            err=True,
        )
    assert isinstance(result, str)
    return result


def prompt_password() -> ct.Password:
    """Read a password from the terminal without echoing it."""
    try:
        password_text = _prompt(PASSWORD_PROMPT)
    except getpass.GetPassWarning as err:
        raise errors.InputError("No terminal available to read the password") from err
    except UnicodeDecodeError as err:
        raise errors.InputError("Password is not valid UTF-8") from err
    except click.Abort as err:
        raise errors.InputError("Unable to read password") from err

    return ct.Password(password_text.encode("utf-8"))


def format_result(
    params: parameters.KDFParams,
    salt  : ct.Salt,
    key   : ct.DerivedKey,
) -> List[str]:
    key_hex = enc_util.bytes2hex(key)
    return [
        f"Algorithm: {kdf.ALGORITHM_LABEL}",
        f"Params: {parameters.format_params(params)}",
        f"Salt (hex): {enc_util.bytes2hex(salt)}",
        f"Derived key (hex, {len(key_hex)} chars): {key_hex}",
        f"Derived key (base64): {enc_util.bytes2base64(key)}",
    ]


def show_result(lines: List[str]) -> None:
    _echo("\n".join(lines))
