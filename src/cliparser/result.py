#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/cliparser/result.py
"""Scan result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from cliparser.exceptions import ScanError


class ParseOutcome(str, Enum):
    """Terminal classification of a scan."""

    OK = "ok"
    HELP_REQUESTED = "help_requested"
    VERSION_REQUESTED = "version_requested"
    ERROR = "error"


@dataclass(frozen=True)
class ParsedArgs:
    """Tokens classified by a single scan.

    Attributes
    ----------
    flags : frozenset[str]
        Short names of boolean flags that were seen
    flags_with_args : Mapping[str, str]
        Short name to value for value flags; the last occurrence wins
    positional_args : tuple[str, ...]
        Tokens that did not start with a dash, in order of appearance

    """

    flags: frozenset[str] = frozenset()
    flags_with_args: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    positional_args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", frozenset(self.flags))
        object.__setattr__(self, "flags_with_args", MappingProxyType(dict(self.flags_with_args)))
        object.__setattr__(self, "positional_args", tuple(self.positional_args))

    def has_flag(self, short_name: str) -> bool:
        """Return True if ``short_name`` was seen as a boolean flag."""
        return short_name in self.flags

    def get_value(self, short_name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value given to ``short_name`` or ``default``."""
        return self.flags_with_args.get(short_name, default)

    def is_present(self, short_name: str) -> bool:
        """Return True if ``short_name`` appeared either as a flag or with a value."""
        return short_name in self.flags or short_name in self.flags_with_args

    def __hash__(self) -> int:
        return hash((self.flags, tuple(sorted(self.flags_with_args.items())), self.positional_args))


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of ``ArgScanner.scan``.

    Attributes
    ----------
    outcome : ParseOutcome
        Terminal classification
    args : ParsedArgs
        Everything classified before the scan finished or stopped
    error : ScanError or None
        Diagnostic describing the rule that fired when ``outcome`` is ERROR

    """

    outcome: ParseOutcome
    args: ParsedArgs
    error: Optional[ScanError] = None

    @property
    def ok(self) -> bool:
        return self.outcome is ParseOutcome.OK

    def __iter__(self) -> Iterator[Union[ParseOutcome, ParsedArgs]]:
        """Unpack as ``outcome, args = scan(...)``; the diagnostic stays on ``error``."""
        yield self.outcome
        yield self.args
