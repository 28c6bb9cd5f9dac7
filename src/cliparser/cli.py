#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Command-line interface for inspecting how cliparser classifies arguments.

The ``cliparser`` command scans its own arguments against an application
definition and prints the result. The definition is taken from, in order:

1. the file named by the ``CLIPARSER_CONFIG`` environment variable
2. an auto-discovered ``.cliparser.toml`` / ``.yaml`` / ``.yml`` / ``.json``
   or ``[tool.cliparser]`` table in ``pyproject.toml``
3. the built-in sandbox application

Examples
--------
Show the sandbox help::

    $ cliparser --help

Classify arguments::

    $ cliparser -n -i pattern file.txt

Use an application definition::

    $ CLIPARSER_CONFIG=./myapp.toml cliparser -abc input.txt

Trace scanning decisions to a file (``DEBUG`` adds timestamps and logger names)::

    $ CLIPARSER_LOG_LEVEL=DEBUG CLIPARSER_LOG_FILE=scan.log cliparser -n -i foo

"""

import logging
import os
import sys
from typing import IO, Optional, Sequence

from cliparser.app import CliApp
from cliparser.argspec import ArgSpec
from cliparser.builder import AppBuilder
from cliparser.config import load_app
from cliparser.constants import (
    CONFIG_ENV_VAR,
    EXIT_CONFIG_ERROR,
    EXIT_SUCCESS,
    LOG_FILE_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
)
from cliparser.exceptions import ConfigError
from cliparser.logging_utils import configure_logging
from cliparser.output import should_use_rich_output
from cliparser.result import ParsedArgs, ParseOutcome

logger = logging.getLogger(__name__)

__all__ = ["main", "build_sandbox_app", "print_parsed_args"]


def build_sandbox_app() -> CliApp:
    """Return the demonstration app used when no definition file is found."""
    return (
        AppBuilder("cliparser sandbox")
        .arg(ArgSpec.make("n", "numberlines", "Adds line numbers.", required=True))
        .arg(ArgSpec.make("i", "insensitive", "Case insensitive pattern matching", required=True, needs_value=True))
        .usage("cliparser <args> flags...")
        .author("Tamás Polgár")
        .version("0.1.57")
        .build()
    )


def print_parsed_args(app: CliApp, parsed: ParsedArgs, stream: Optional[IO[str]] = None) -> None:
    """Print classified arguments, as a rich table when output is a terminal."""
    target = stream or sys.stdout

    if should_use_rich_output(None, target):
        from rich.console import Console
        from rich.markup import escape
        from rich.table import Table

        table = Table(title=f"{escape(app.name)}: parsed arguments")
        table.add_column("Kind", style="cyan", no_wrap=True)
        table.add_column("Name", style="yellow")
        table.add_column("Value", style="white")
        for arg in parsed.positional_args:
            table.add_row("positional", "", escape(arg))
        for flag in sorted(parsed.flags):
            table.add_row("flag", escape(_describe(app, flag)), "")
        for flag, value in sorted(parsed.flags_with_args.items()):
            table.add_row("value", escape(_describe(app, flag)), escape(value))
        Console(file=target).print(table)
        return

    for arg in parsed.positional_args:
        print(arg, file=target)
    for flag in sorted(parsed.flags):
        print(f"Flag: {flag}", file=target)
    for flag, value in sorted(parsed.flags_with_args.items()):
        print(f"KEY: {flag}, VALUE: {value}", file=target)


def _describe(app: CliApp, short_name: str) -> str:
    spec = app.registry.find_by_short(short_name)
    return f"-{short_name}" if spec is None else f"-{short_name}/--{spec.long_name}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the ``cliparser`` command and return its exit code."""
    if argv is None:
        argv = sys.argv[1:]

    log_level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING")
    configure_logging(
        log_level,
        log_file=os.environ.get(LOG_FILE_ENV_VAR),
        trace_mode=log_level.upper() == "DEBUG",
        use_rich=should_use_rich_output(None, sys.stderr),
    )

    try:
        app = load_app(env_var_path=os.environ.get(CONFIG_ENV_VAR))
    except ConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if app is None:
        logger.debug("No app definition found, using the sandbox app")
        app = build_sandbox_app()

    for spec in app.args_config:
        logger.debug("%s", spec)

    result = app.scan(argv)
    if result.outcome is not ParseOutcome.OK:
        return app.handle(result)

    print_parsed_args(app, result.args)
    return EXIT_SUCCESS
