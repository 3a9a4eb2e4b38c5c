"""
clargs

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Checks a command line against a declaration file:

    clargs --config flags.yaml -- -k edammer -w knack -t
"""

import sys
from typing import Sequence

from rich.markup import escape

from clargs.argument import Argument
from clargs.arguments import Arguments
from clargs.config import load_config
from clargs.console import console
from clargs.display import render_errors, render_results, render_usage
from clargs.key import KeyEnum
from clargs.logger import logger
from clargs.utils import setup_logging

SEPARATOR = "--"


class CliKey(KeyEnum):
    CONFIG = ("c", "config")
    DEBUG = ("d", "debug")
    LOGFILE = ("l", "logfile")
    HELP = ("h", "help")


def get_cli_arguments() -> Arguments:
    return (
        Arguments.builder()
        .add(
            Argument.builder()
            .set_key(CliKey.CONFIG)
            .set_required(True)
            .set_value_required()
            .set_description("YAML or TOML file declaring the flags to check")
            .build()
        )
        .add(
            Argument.builder()
            .set_key(CliKey.DEBUG)
            .set_description("Log debug output to the console")
            .build()
        )
        .add(
            Argument.builder()
            .set_key(CliKey.LOGFILE)
            .set_value_required()
            .set_description("Also write logs to this file")
            .build()
        )
        .add(
            Argument.builder()
            .set_key(CliKey.HELP)
            .set_description("Show this message and exit")
            .build()
        )
        .build()
    )


def split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split `argv` at the first `--` into own options and the checked command line."""
    argv = list(argv)
    if SEPARATOR in argv:
        index = argv.index(SEPARATOR)
        return argv[:index], argv[index + 1 :]
    return argv, []


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    own_args, checked_args = split_argv(argv)

    cli = get_cli_arguments().parse_args(own_args)
    if cli.has_argument(CliKey.HELP):
        render_usage(cli, title="clargs [options] -- <command line>")
        return 0
    if cli.has_errors():
        render_errors(cli)
        render_usage(cli, title="clargs [options] -- <command line>")
        return 2

    setup_logging(
        log_filename=cli.get_value(CliKey.LOGFILE),
        debug=cli.has_argument(CliKey.DEBUG),
    )

    config_path = cli.get_value(CliKey.CONFIG)
    if config_path is None:
        # a trailing `-c` parses without error but carries no value
        console.print("[clargs.error]--config needs a file name[/]")
        return 2
    try:
        config = load_config(config_path)
    except (OSError, ValueError) as error:
        logger.error("Could not load declarations from %s: %s", config_path, error)
        console.print(
            f"[clargs.error]Could not load {escape(config_path)}:[/] {escape(str(error))}",
            soft_wrap=True,
        )
        return 2

    declared = config.to_arguments()
    result = declared.parse_args(checked_args)
    render_results(result)
    if result.has_errors():
        render_errors(result)
        render_usage(declared, title=config.program or None)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
