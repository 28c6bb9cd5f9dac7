#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/cliparser/builder.py
"""Fluent builder for ``CliApp``.

Examples
--------
>>> app = (
...     AppBuilder("grep-lite")
...     .arg(ArgSpec.make("n", "numberlines", "Adds line numbers."))
...     .arg(ArgSpec.make("i", "insensitive", "Case insensitive pattern matching", needs_value=True))
...     .usage("grep-lite <args> flags...")
...     .version("0.1.57")
...     .build()
... )
>>> app.scan(["-n", "-i", "foo", "file.txt"]).ok
True

"""

from __future__ import annotations

from cliparser.app import CliApp
from cliparser.argspec import ArgSpec
from cliparser.constants import DEFAULT_APP_AUTHOR, DEFAULT_APP_USAGE, DEFAULT_APP_VERSION
from cliparser.registry import ArgSpecRegistry


class AppBuilder:
    """Assemble application metadata and argument specs into a ``CliApp``.

    Each ``arg`` call registers immediately, so duplicate or invalid
    names raise at the call that introduces them.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._specs: list[ArgSpec] = []
        self._registry = ArgSpecRegistry()
        self._version = DEFAULT_APP_VERSION
        self._author = DEFAULT_APP_AUTHOR
        self._usage = DEFAULT_APP_USAGE
        self._min_positionals = 0

    def arg(self, spec: ArgSpec) -> AppBuilder:
        self._registry.register(spec)
        self._specs.append(spec)
        return self

    def author(self, author: str) -> AppBuilder:
        self._author = author
        return self

    def version(self, version: str) -> AppBuilder:
        self._version = version
        return self

    def usage(self, usage: str) -> AppBuilder:
        self._usage = usage
        return self

    def min_positionals(self, count: int) -> AppBuilder:
        """Require at least ``count`` positional arguments."""
        if count < 0:
            raise ValueError(f"min_positionals must be >= 0, got {count}")
        self._min_positionals = count
        return self

    def build(self) -> CliApp:
        """Return a new app; the builder can keep being used afterwards."""
        registry = ArgSpecRegistry(self._specs, min_positionals=self._min_positionals)
        return CliApp(self._name, registry, self._version, self._author, self._usage)
