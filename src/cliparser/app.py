#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/cliparser/app.py
"""Application object produced by ``AppBuilder``."""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Sequence

from cliparser.argspec import ArgSpec
from cliparser.constants import EXIT_SUCCESS, EXIT_USAGE_ERROR
from cliparser.help_formatter import HelpRenderer
from cliparser.output import should_use_rich_output
from cliparser.registry import ArgSpecRegistry
from cliparser.result import ParsedArgs, ParseOutcome, ScanResult
from cliparser.scanner import ArgScanner

logger = logging.getLogger(__name__)


class CliApp:
    """A configured command-line application.

    Instances are created by ``AppBuilder.build()``. The registry they hold
    is frozen, so an app can be scanned any number of times, from any
    number of threads.

    Parameters
    ----------
    name : str
        Application name used in the version line
    registry : ArgSpecRegistry
        Declared arguments; frozen on construction
    version : str
        Version string
    author : str
        Author shown in help output
    usage : str
        Usage line shown in help output and after diagnostics

    """

    def __init__(self, name: str, registry: ArgSpecRegistry, version: str, author: str, usage: str) -> None:
        self._name = name
        self._registry = registry.freeze()
        self._version = version
        self._author = author
        self._usage = usage
        self._scanner = ArgScanner(self._registry)

    @property
    def name(self) -> str:
        return self._name

    @property
    def registry(self) -> ArgSpecRegistry:
        return self._registry

    @property
    def version(self) -> str:
        return self._version

    @property
    def author(self) -> str:
        return self._author

    @property
    def usage(self) -> str:
        return self._usage

    @property
    def min_positionals(self) -> int:
        return self._registry.min_positionals

    @property
    def args_config(self) -> tuple[ArgSpec, ...]:
        """Declared specs in help order."""
        return self._registry.specs

    def scan(self, argv: Sequence[str]) -> ScanResult:
        """Scan ``argv`` (without the program name)."""
        return self._scanner.scan(argv)

    def handle(
        self,
        result: ScanResult,
        *,
        stdout: Optional[IO[str]] = None,
        stderr: Optional[IO[str]] = None,
        use_rich: Optional[bool] = None,
    ) -> int:
        """Render the output a scan outcome calls for and return an exit code.

        Help and version print to ``stdout`` and return ``EXIT_SUCCESS``.
        Errors print the diagnostic and usage to ``stderr`` and return
        ``EXIT_USAGE_ERROR``. ``OK`` prints nothing.
        """
        if result.outcome is ParseOutcome.HELP_REQUESTED:
            renderer = HelpRenderer(self, use_rich=should_use_rich_output(use_rich, stdout))
            renderer.print_help(stdout)
            return EXIT_SUCCESS
        if result.outcome is ParseOutcome.VERSION_REQUESTED:
            HelpRenderer(self).print_version(stdout)
            return EXIT_SUCCESS
        if result.outcome is ParseOutcome.ERROR and result.error is not None:
            logger.debug("Argument error in %s: %s", self._name, result.error.message)
            renderer = HelpRenderer(self, use_rich=should_use_rich_output(use_rich, stderr))
            renderer.print_diagnostic(result.error, stderr)
            return EXIT_USAGE_ERROR
        return EXIT_SUCCESS

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> ParsedArgs:
        """Scan ``argv`` (default ``sys.argv[1:]``) the way a CLI entry point expects.

        Raises
        ------
        SystemExit
            With code 0 after printing help or version, or with
            ``EXIT_USAGE_ERROR`` after printing a diagnostic

        """
        if argv is None:
            argv = sys.argv[1:]
        result = self.scan(argv)
        if result.outcome is not ParseOutcome.OK:
            raise SystemExit(self.handle(result))
        return result.args

    def _resolve(self, name: str) -> Optional[ArgSpec]:
        if len(name) == 1:
            spec = self._registry.find_by_short(name)
            if spec is not None:
                return spec
        return self._registry.find_by_long(name)

    def is_set(self, parsed: ParsedArgs, name: str) -> bool:
        """Return True if the flag named ``name`` (short or long) was given.

        Raises
        ------
        KeyError
            If no argument with that name is declared

        """
        spec = self._resolve(name)
        if spec is None:
            raise KeyError(name)
        return parsed.is_present(spec.short_name)

    def value_of(self, parsed: ParsedArgs, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value given to the flag named ``name`` (short or long)."""
        spec = self._resolve(name)
        if spec is None:
            raise KeyError(name)
        return parsed.get_value(spec.short_name, default)

    def __repr__(self) -> str:
        return f"CliApp(name={self._name!r}, version={self._version!r}, args={len(self._registry)})"
