#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the cliparser library.

This module defines the exception classes for errors raised while declaring
an application's arguments and for the diagnostics produced while scanning
an argument vector.

Exception Hierarchy
-------------------
- CliParserError (base exception)

  - ConfigError (argument declaration problems, raised)
    - DuplicateNameError (short or long name already registered)
    - InvalidSpecError (unusable short or long name)
    - RegistryFrozenError (registration after the registry was built)
    - ConfigFileError (unreadable or invalid app-definition file)

  - ScanError (argv problems, returned in ScanResult.error)
    - MalformedTokenError (``-``, ``--`` or whitespace after the dashes)
    - UnknownFlagError (flag not declared)
    - MissingValueError (value flag without a value)
    - MissingRequiredError (required flags or positionals absent)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from cliparser.argspec import ArgSpec


class CliParserError(Exception):
    """Base exception class for all cliparser-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigError(CliParserError):
    """Exception raised for invalid argument declarations.

    Configuration errors are programming errors of the application using the
    library, so they are raised immediately rather than reported at scan time.
    """


class DuplicateNameError(ConfigError):
    """Exception raised when a spec reuses a short or long name.

    Parameters
    ----------
    spec : ArgSpec
        The spec that was being registered
    existing : ArgSpec
        The already registered spec it collides with
    field : str
        Either ``"short_name"`` or ``"long_name"``

    """

    def __init__(self, spec: ArgSpec, existing: ArgSpec, field: str):
        """Initialize the duplicate name error."""
        if field == "short_name":
            message = f"Short name '-{spec.short_name}' is already used by --{existing.long_name}"
        else:
            message = f"Long name '--{spec.long_name}' is already used by -{existing.short_name}"
        super().__init__(message)
        self.spec = spec
        self.existing = existing
        self.field = field


class InvalidSpecError(ConfigError):
    """Exception raised when a spec cannot be matched by any token.

    Parameters
    ----------
    message : str
        Description of the problem
    spec : ArgSpec
        The offending spec

    """

    def __init__(self, message: str, spec: ArgSpec):
        """Initialize the invalid spec error."""
        super().__init__(message)
        self.spec = spec


class RegistryFrozenError(ConfigError):
    """Exception raised when registering into a registry that was already built."""

    def __init__(self, message: str | None = None):
        """Initialize the frozen registry error."""
        super().__init__(message or "Cannot register arguments after the registry has been frozen")


class ConfigFileError(ConfigError):
    """Exception raised when an app-definition file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the problem
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config file error."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ScanError(CliParserError):
    """Base class for problems found while scanning an argument vector.

    Scan errors are never raised out of ``ArgScanner.scan``; they are
    attached to the returned ``ScanResult`` as its diagnostic.

    Parameters
    ----------
    message : str
        Description of the rule that fired
    token : str, optional
        The token (or flag) that triggered the error

    """

    def __init__(self, message: str, token: str | None = None):
        """Initialize the scan error."""
        super().__init__(message)
        self.token = token


class MalformedTokenError(ScanError):
    """A dash-prefixed token with no name or whitespace right after the dashes."""

    def __init__(self, token: str):
        """Initialize the malformed token error."""
        super().__init__(f"Invalid flag: {token!r}", token=token)


class UnknownFlagError(ScanError):
    """A short or long flag that is not declared in the registry."""

    def __init__(self, flag: str):
        """Initialize the unknown flag error."""
        super().__init__(f"Invalid cli flag: {flag}", token=flag)


class MissingValueError(ScanError):
    """A value flag that is last or is followed by a long flag."""

    def __init__(self, flag: str):
        """Initialize the missing value error."""
        super().__init__(f"Missing mandatory argument for {flag}", token=flag)


class MissingRequiredError(ScanError):
    """Required flags or positional arguments absent after a full scan.

    Parameters
    ----------
    missing : Sequence[ArgSpec]
        Required specs, in declaration order, that were not provided
    positional_shortfall : int, default 0
        How many positional arguments are missing to reach the declared minimum

    Attributes
    ----------
    missing : tuple[ArgSpec, ...]
        The missing specs
    positional_shortfall : int
        Number of missing positional arguments

    """

    def __init__(self, missing: Sequence[ArgSpec], positional_shortfall: int = 0):
        """Initialize the missing required error."""
        self.missing = tuple(missing)
        self.positional_shortfall = positional_shortfall
        super().__init__("Not all required arguments have been provided.")

    @property
    def details(self) -> list[str]:
        """Return one line per missing item for diagnostics."""
        lines = [f"Not provided: -{spec.short_name}/--{spec.long_name}" for spec in self.missing]
        if self.positional_shortfall:
            noun = "argument" if self.positional_shortfall == 1 else "arguments"
            lines.append(f"Not provided: {self.positional_shortfall} positional {noun}")
        return lines
