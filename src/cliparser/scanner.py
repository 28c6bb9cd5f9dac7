#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/cliparser/scanner.py
"""Argument vector scanner.

Classifies raw tokens against an ``ArgSpecRegistry``:

- ``--name`` is looked up by long name
- ``-abc`` is a cluster; every character is looked up by short name
- anything else is a positional argument

A flag that needs a value takes the next unconsumed token, unless that
token starts with ``--``. Inside a cluster the remaining characters are
still processed after the value token has been consumed, so ``-oa out``
sets ``o`` to ``out`` and ``a`` as a boolean flag.

Every helper takes the current cursor and returns the advanced cursor.
Scan problems are collected into the returned ``ScanResult``; nothing in
this module prints or exits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from cliparser.argspec import ArgSpec
from cliparser.constants import LONG_PREFIX, MIN_LONG_TOKEN_LENGTH, MIN_SHORT_TOKEN_LENGTH, SHORT_PREFIX
from cliparser.exceptions import (
    MalformedTokenError,
    MissingRequiredError,
    MissingValueError,
    ScanError,
    UnknownFlagError,
)
from cliparser.registry import ArgSpecRegistry
from cliparser.result import ParsedArgs, ParseOutcome, ScanResult

logger = logging.getLogger(__name__)


@dataclass
class _ScanState:
    """Mutable accumulator used for the duration of one scan."""

    flags: set[str] = field(default_factory=set)
    flags_with_args: dict[str, str] = field(default_factory=dict)
    positional_args: list[str] = field(default_factory=list)

    def freeze(self) -> ParsedArgs:
        return ParsedArgs(
            flags=frozenset(self.flags),
            flags_with_args=self.flags_with_args,
            positional_args=tuple(self.positional_args),
        )


def _is_long_token(token: str) -> bool:
    return token.startswith(LONG_PREFIX)


def check_token_form(token: str) -> None:
    """Raise MalformedTokenError for ``-``, ``--`` and whitespace after the dashes.

    Parameters
    ----------
    token : str
        A token starting with ``-``

    Raises
    ------
    MalformedTokenError
        If the token is too short for its form or the first name character is whitespace

    """
    is_long = _is_long_token(token)
    min_length = MIN_LONG_TOKEN_LENGTH if is_long else MIN_SHORT_TOKEN_LENGTH
    if len(token) < min_length:
        raise MalformedTokenError(token)
    name_start = len(LONG_PREFIX) if is_long else len(SHORT_PREFIX)
    if token[name_start].isspace():
        raise MalformedTokenError(token)


class ArgScanner:
    """Scan argument vectors against a registry.

    The scanner holds no per-scan state, so one instance can be reused
    and shared freely as long as the registry is not modified.

    Parameters
    ----------
    registry : ArgSpecRegistry
        Declared arguments

    """

    def __init__(self, registry: ArgSpecRegistry) -> None:
        self.registry = registry

    def scan(self, tokens: Sequence[str]) -> ScanResult:
        """Classify ``tokens`` and report the outcome.

        Parameters
        ----------
        tokens : Sequence[str]
            Argument vector without the program name

        Returns
        -------
        ScanResult
            Outcome, classified arguments and, for errors, the diagnostic.
            On an early failure ``args`` holds what was classified before it.

        """
        tokens = tuple(tokens)
        state = _ScanState()
        cursor = 0
        try:
            while cursor < len(tokens):
                cursor = self._scan_token(tokens, cursor, state)
        except ScanError as exc:
            logger.debug("Scan stopped at token %d: %s", cursor, exc.message)
            return ScanResult(ParseOutcome.ERROR, state.freeze(), exc)

        return self._classify(state.freeze())

    def _scan_token(self, tokens: tuple[str, ...], cursor: int, state: _ScanState) -> int:
        token = tokens[cursor]
        if not token.startswith(SHORT_PREFIX):
            state.positional_args.append(token)
            return cursor + 1

        check_token_form(token)

        if _is_long_token(token):
            name = token[len(LONG_PREFIX) :]
            spec = self.registry.find_by_long(name)
            if spec is None:
                raise UnknownFlagError(token)
            return self._record(spec, token, tokens, cursor + 1, state)

        next_cursor = cursor + 1
        for short_name in token[len(SHORT_PREFIX) :]:
            spec = self.registry.find_by_short(short_name)
            if spec is None:
                raise UnknownFlagError(f"{SHORT_PREFIX}{short_name}")
            next_cursor = self._record(spec, f"{SHORT_PREFIX}{short_name}", tokens, next_cursor, state)
        return next_cursor

    def _record(
        self,
        spec: ArgSpec,
        flag: str,
        tokens: tuple[str, ...],
        cursor: int,
        state: _ScanState,
    ) -> int:
        """Record ``spec`` and return the cursor past any value it consumed.

        ``cursor`` points at the first token not yet consumed.
        """
        if not spec.needs_value:
            state.flags.add(spec.short_name)
            return cursor

        if cursor >= len(tokens) or _is_long_token(tokens[cursor]):
            raise MissingValueError(flag)

        state.flags_with_args[spec.short_name] = tokens[cursor]
        logger.debug("%s takes value %r", flag, tokens[cursor])
        return cursor + 1

    def _classify(self, parsed: ParsedArgs) -> ScanResult:
        # help and version win over missing required arguments
        if parsed.has_flag(self.registry.help_spec.short_name):
            return ScanResult(ParseOutcome.HELP_REQUESTED, parsed)
        if parsed.has_flag(self.registry.version_spec.short_name):
            return ScanResult(ParseOutcome.VERSION_REQUESTED, parsed)

        missing = [spec for spec in self.registry.required_specs() if not parsed.is_present(spec.short_name)]
        shortfall = max(0, self.registry.min_positionals - len(parsed.positional_args))
        if missing or shortfall:
            error = MissingRequiredError(missing, positional_shortfall=shortfall)
            for line in error.details:
                logger.debug(line)
            return ScanResult(ParseOutcome.ERROR, parsed, error)

        return ScanResult(ParseOutcome.OK, parsed)


def scan(tokens: Sequence[str], registry: ArgSpecRegistry) -> ScanResult:
    """Scan ``tokens`` against ``registry``; see ``ArgScanner.scan``."""
    return ArgScanner(registry).scan(tokens)
