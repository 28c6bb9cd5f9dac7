#  Copyright (c) 2025 Tom Villani, Ph.D.
"""cliparser - declare flags, scan argv, branch on the outcome.

Basic Usage
-----------
>>> from cliparser import AppBuilder, ArgSpec, ParseOutcome
>>> app = (
...     AppBuilder("sandbox")
...     .arg(ArgSpec.make("o", "output", "Output file", required=True, needs_value=True))
...     .arg(ArgSpec.make("q", "quiet", "Less output"))
...     .build()
... )
>>> result = app.scan(["-qo", "out.txt", "input.txt"])
>>> result.outcome is ParseOutcome.OK
True
>>> result.args.flags_with_args["o"]
'out.txt'

Lower level, without application metadata:

>>> from cliparser import ArgSpecRegistry, scan
>>> registry = ArgSpecRegistry([ArgSpec.make("a", "all", "Everything")])
>>> scan(["-a", "x"], registry).args.positional_args
('x',)

"""

from cliparser.app import CliApp
from cliparser.argspec import ArgSpec
from cliparser.builder import AppBuilder
from cliparser.exceptions import (
    CliParserError,
    ConfigError,
    ConfigFileError,
    DuplicateNameError,
    InvalidSpecError,
    MalformedTokenError,
    MissingRequiredError,
    MissingValueError,
    RegistryFrozenError,
    ScanError,
    UnknownFlagError,
)
from cliparser.help_formatter import HelpRenderer
from cliparser.registry import ArgSpecRegistry
from cliparser.result import ParsedArgs, ParseOutcome, ScanResult
from cliparser.scanner import ArgScanner, scan

__version__ = "0.1.0"

__all__ = [
    "AppBuilder",
    "ArgScanner",
    "ArgSpec",
    "ArgSpecRegistry",
    "CliApp",
    "HelpRenderer",
    "ParseOutcome",
    "ParsedArgs",
    "ScanResult",
    "scan",
    # Exceptions
    "CliParserError",
    "ConfigError",
    "ConfigFileError",
    "DuplicateNameError",
    "InvalidSpecError",
    "MalformedTokenError",
    "MissingRequiredError",
    "MissingValueError",
    "RegistryFrozenError",
    "ScanError",
    "UnknownFlagError",
]
