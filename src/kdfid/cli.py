#!/usr/bin/env python3
# This file is part of the kdfid project
#
# Copyright (c) 2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""CLI/Imperative shell for kdfid."""

import sys
import logging
from typing import List
from typing import Optional
from typing import NamedTuple

import click

import kdfid

from . import kdf
from . import salt
from . import cli_io
from . import errors
from . import parameters
from . import common_types as ct

click.disable_unicode_literals_warning = True  # type: ignore[attr-defined]


logger = logging.getLogger("kdfid.cli")


class LogConfig(NamedTuple):
    fmt: str
    lvl: int


LOG_FORMAT_DEFAULT = "%(levelname)-7s - %(message)s"

LOG_FORMAT_VERBOSE = "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)-16s - %(message)s"


def _parse_logging_config(verbosity: int) -> LogConfig:
    if verbosity == 0:
        return LogConfig(LOG_FORMAT_DEFAULT, logging.WARNING)
    elif verbosity == 1:
        return LogConfig(LOG_FORMAT_VERBOSE, logging.INFO)
    else:
        assert verbosity >= 2
        return LogConfig(LOG_FORMAT_VERBOSE, logging.DEBUG)


def _configure_logging(verbosity: int = 0) -> None:
    # remove previous logging handlers
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)

    log_cfg = _parse_logging_config(verbosity)
    # NOTE: logging.basicConfig writes to stderr, stdout only has the result
    logging.basicConfig(level=log_cfg.lvl, format=log_cfg.fmt, datefmt="%Y-%m-%dT%H:%M:%S")


def derive_and_render(
    read_password: ct.PasswordReader,
    salt_hex     : Optional[str],
    params       : parameters.KDFParams,
) -> List[str]:
    """Derive a key and return the lines to be printed.

    Salt and parameters are validated before the password is read,
    so invalid arguments fail without prompting.
    """
    resolved_salt = salt.resolve_salt(salt_hex)
    kdf.validate_kdf_params(params)

    password = read_password()
    key      = kdf.derive_key(password, resolved_salt, params)
    return cli_io.format_result(params, resolved_salt, key)


_u32 = click.IntRange(min=0, max=parameters.MAX_U32)


_opt_mem_kib = click.option(
    '--mem-kib',
    type=_u32,
    default=parameters.DEFAULT_MEM_KIB,
    show_default=True,
    help="Argon2 memory cost (KiB)",
)

_opt_iterations = click.option(
    '--iterations',
    type=_u32,
    default=parameters.DEFAULT_ITERATIONS,
    show_default=True,
    help="Argon2 time cost (number of passes)",
)

_opt_lanes = click.option(
    '--lanes',
    type=_u32,
    default=parameters.DEFAULT_LANES,
    show_default=True,
    help="Argon2 degree of parallelism (lanes)",
)

_opt_out_len = click.option(
    '--out-len',
    type=_u32,
    default=parameters.DEFAULT_OUT_LEN,
    show_default=True,
    help="Length of the derived key (bytes)",
)

_opt_salt_hex = click.option(
    '--salt-hex',
    type=str,
    default=None,
    help="Salt as hex (if omitted, a fixed shared 16 byte salt is used)",
)

_opt_verbose = click.option(
    '-v',
    '--verbose',
    count=True,
    help="Control log level. -vv for debug level.",
)


@click.command(name="kdf-argon2id", context_settings={'help_option_names': ["-h", "--help"]})
@_opt_mem_kib
@_opt_iterations
@_opt_lanes
@_opt_out_len
@_opt_salt_hex
@_opt_verbose
@click.version_option(version=kdfid.__version__)
def cli(
    mem_kib   : ct.KibiBytes  = parameters.DEFAULT_MEM_KIB,
    iterations: ct.Iterations = parameters.DEFAULT_ITERATIONS,
    lanes     : ct.Lanes      = parameters.DEFAULT_LANES,
    out_len   : ct.NumBytes   = parameters.DEFAULT_OUT_LEN,
    salt_hex  : Optional[str] = None,
    verbose   : int           = 0,
) -> None:
    """Derive an encryption key from a human-memorable password using Argon2id."""
    _configure_logging(verbose)

    params = parameters.init_kdf_params(
        mem_kib=mem_kib,
        iterations=iterations,
        lanes=lanes,
        out_len=out_len,
    )

    try:
        lines = derive_and_render(cli_io.prompt_password, salt_hex, params)
    except errors.KDFError as err:
        logger.debug("Key derivation aborted", exc_info=True)
        click.echo(f"Error: {type(err).__name__}: {err}", err=True)
        sys.exit(1)

    cli_io.show_result(lines)


if __name__ == '__main__':
    cli()
