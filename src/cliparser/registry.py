#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/cliparser/registry.py
"""Ordered registry of declared argument specs.

The registry keeps specs in declaration order, which is the order used
for help output and for reporting missing required flags. The built-in
help and version specs are always present and always come first.

Lookups are linear scans. Argument lists are small enough that building
an index would not pay for itself.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from cliparser.argspec import ArgSpec
from cliparser.constants import (
    HELP_DESCRIPTION,
    HELP_LONG,
    HELP_SHORT,
    SHORT_PREFIX,
    VERSION_DESCRIPTION,
    VERSION_LONG,
    VERSION_SHORT,
)
from cliparser.exceptions import DuplicateNameError, InvalidSpecError, RegistryFrozenError

logger = logging.getLogger(__name__)


def _validate_names(spec: ArgSpec) -> None:
    """Raise InvalidSpecError when a spec could never be matched by a token."""
    short = spec.short_name
    if not isinstance(short, str) or len(short) != 1:
        raise InvalidSpecError(f"Short name must be a single character, got {short!r}", spec)
    if short == SHORT_PREFIX or short.isspace():
        raise InvalidSpecError(f"Short name cannot be {short!r}", spec)
    if not spec.long_name:
        raise InvalidSpecError(f"Long name for -{short} must not be empty", spec)
    if spec.long_name[0].isspace():
        raise InvalidSpecError(f"Long name {spec.long_name!r} cannot start with whitespace", spec)


class ArgSpecRegistry:
    """Ordered collection of ``ArgSpec`` with lookup by short or long name.

    Parameters
    ----------
    specs : Iterable[ArgSpec], optional
        Specs to register after the built-in help and version specs
    min_positionals : int, default 0
        Minimum number of positional arguments a successful scan must contain

    Raises
    ------
    DuplicateNameError
        If two specs share a short or long name
    InvalidSpecError
        If a spec has an unusable name

    """

    def __init__(self, specs: Iterable[ArgSpec] = (), *, min_positionals: int = 0) -> None:
        if min_positionals < 0:
            raise ValueError(f"min_positionals must be >= 0, got {min_positionals}")
        self._specs: list[ArgSpec] = []
        self._frozen = False
        self._min_positionals = min_positionals
        self._help_spec = ArgSpec.make(HELP_SHORT, HELP_LONG, HELP_DESCRIPTION)
        self._version_spec = ArgSpec.make(VERSION_SHORT, VERSION_LONG, VERSION_DESCRIPTION)
        self._specs.append(self._help_spec)
        self._specs.append(self._version_spec)
        for spec in specs:
            self.register(spec)

    def register(self, spec: ArgSpec) -> None:
        """Append ``spec`` to the registry.

        Raises
        ------
        RegistryFrozenError
            If ``freeze()`` has been called
        InvalidSpecError
            If the short name is not a single usable character or the long name is empty
        DuplicateNameError
            If the short or long name is already registered

        """
        if self._frozen:
            raise RegistryFrozenError()
        _validate_names(spec)

        existing = self.find_by_short(spec.short_name)
        if existing is not None:
            raise DuplicateNameError(spec, existing, "short_name")
        existing = self.find_by_long(spec.long_name)
        if existing is not None:
            raise DuplicateNameError(spec, existing, "long_name")

        self._specs.append(spec)
        logger.debug("Registered argument -%s/--%s", spec.short_name, spec.long_name)

    def find_by_short(self, short_name: str) -> Optional[ArgSpec]:
        """Return the spec whose short name equals ``short_name`` (case-sensitive)."""
        for spec in self._specs:
            if spec.short_name == short_name:
                return spec
        return None

    def find_by_long(self, long_name: str) -> Optional[ArgSpec]:
        """Return the spec whose long name equals ``long_name``."""
        for spec in self._specs:
            if spec.long_name == long_name:
                return spec
        return None

    def required_specs(self) -> list[ArgSpec]:
        """Return required specs in declaration order."""
        return [spec for spec in self._specs if spec.required]

    def freeze(self) -> ArgSpecRegistry:
        """Reject further registrations and return ``self``."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def specs(self) -> tuple[ArgSpec, ...]:
        """All specs, built-ins first, in declaration order."""
        return tuple(self._specs)

    @property
    def help_spec(self) -> ArgSpec:
        return self._help_spec

    @property
    def version_spec(self) -> ArgSpec:
        return self._version_spec

    @property
    def min_positionals(self) -> int:
        return self._min_positionals

    def __iter__(self) -> Iterator[ArgSpec]:
        return iter(tuple(self._specs))

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        names = ", ".join(f"-{spec.short_name}" for spec in self._specs)
        return f"ArgSpecRegistry([{names}], min_positionals={self._min_positionals}, frozen={self._frozen})"
