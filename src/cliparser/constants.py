#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the cliparser library.

Constants are organized by category:
1. Built-in Flags - Help and version specs present in every registry
2. Token Grammar - Prefixes and minimum token lengths
3. Application Defaults - Metadata used when the builder is not told otherwise
4. Exit Codes - Values returned by ``CliApp.handle`` and the console script
5. Configuration - App-definition file names and environment variables
"""

from __future__ import annotations

# =============================================================================
# Built-in Flags
# =============================================================================

HELP_SHORT = "h"
HELP_LONG = "help"
HELP_DESCRIPTION = "Prints help information."

VERSION_SHORT = "v"
VERSION_LONG = "version"
VERSION_DESCRIPTION = "Prints version of app."

# =============================================================================
# Token Grammar
# =============================================================================

SHORT_PREFIX = "-"
LONG_PREFIX = "--"
MIN_SHORT_TOKEN_LENGTH = 2
MIN_LONG_TOKEN_LENGTH = 3

# =============================================================================
# Application Defaults
# =============================================================================

DEFAULT_APP_VERSION = "0.0.1"
DEFAULT_APP_AUTHOR = "Author Name"
DEFAULT_APP_USAGE = ""

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_CONFIG_ERROR = 2

# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILENAMES = (
    ".cliparser.toml",
    ".cliparser.yaml",
    ".cliparser.yml",
    ".cliparser.json",
)
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TOOL_KEY = "cliparser"

CONFIG_ENV_VAR = "CLIPARSER_CONFIG"
LOG_LEVEL_ENV_VAR = "CLIPARSER_LOG_LEVEL"
LOG_FILE_ENV_VAR = "CLIPARSER_LOG_FILE"
