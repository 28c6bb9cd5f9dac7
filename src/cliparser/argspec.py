#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/cliparser/argspec.py
"""Declared argument specification."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ArgSpec:
    """A single declared flag.

    Parameters
    ----------
    short_name : str
        Single character matched by ``-x`` and inside short clusters
    long_name : str
        Name matched by ``--name``
    description : str
        Text shown in help output
    required : bool, default False
        The flag must be present in every successful scan
    needs_value : bool, default False
        The flag consumes the following token as its value

    Notes
    -----
    Nothing is validated here. Names are checked when the spec is
    registered and tokens are checked while scanning.

    """

    short_name: str
    long_name: str
    description: str = ""
    required: bool = False
    needs_value: bool = False

    @classmethod
    def make(
        cls,
        short_name: str,
        long_name: str,
        description: str = "",
        required: bool = False,
        needs_value: bool = False,
    ) -> ArgSpec:
        """Create a spec; mirrors the positional order of the dataclass fields."""
        return cls(short_name, long_name, description, required, needs_value)

    @property
    def option_strings(self) -> tuple[str, str]:
        """Return ``("-x", "--name")``."""
        return f"-{self.short_name}", f"--{self.long_name}"

    def __str__(self) -> str:
        return (
            f"Short name: {self.short_name}, long name: {self.long_name}, "
            f"required: {self.required}, needs argument: {self.needs_value}"
        )
