#  Copyright (c) 2025 Tom Villani, Ph.D.

"""App-definition file discovery and loading.

An application can declare its arguments in a file instead of code::

    # .cliparser.toml
    name = "sandbox"
    version = "0.1.57"
    author = "Jane Doe"
    usage = "sandbox <args> flags..."
    min_positionals = 1

    [[args]]
    short = "n"
    long = "numberlines"
    description = "Adds line numbers."
    required = true

JSON, YAML and a ``[tool.cliparser]`` table in ``pyproject.toml`` use the
same keys. These files only declare arguments; argument values always come
from the command line.
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from cliparser.app import CliApp
from cliparser.argspec import ArgSpec
from cliparser.builder import AppBuilder
from cliparser.constants import CONFIG_FILENAMES, PYPROJECT_FILENAME, PYPROJECT_TOOL_KEY
from cliparser.exceptions import ConfigError, ConfigFileError

logger = logging.getLogger(__name__)

_APP_KEYS = {"name", "version", "author", "usage", "min_positionals", "args"}
_ARG_KEYS = {"short", "long", "description", "required", "needs_value"}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.cliparser] section from pyproject.toml.

    Returns an empty dict when the section is absent.

    Raises
    ------
    ConfigFileError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(
            f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", str(pyproject_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigFileError(
            f"Error reading pyproject.toml {pyproject_path}: {e}", str(pyproject_path), original_error=e
        ) from e

    section = data.get("tool", {}).get(PYPROJECT_TOOL_KEY)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigFileError(
            f"[tool.{PYPROJECT_TOOL_KEY}] section in {pyproject_path} must be a table, got {type(section).__name__}",
            str(pyproject_path),
        )
    return section


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find an app-definition file by walking up from ``start_dir``.

    Each directory is checked for the dedicated file names first, then for a
    ``pyproject.toml`` that has a ``[tool.cliparser]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigFileError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e.message)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover an app-definition file in standard locations.

    Searches from the current directory up to the filesystem root, then the
    user's home directory (dedicated file names only).

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents()
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load an app definition from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Raw configuration dictionary

    Raises
    ------
    ConfigFileError
        If the file is missing, unreadable, unparsable or of an unsupported type

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileError(f"Configuration file does not exist: {config_path}", str(config_path))
    if not config_path.is_file():
        raise ConfigFileError(f"Configuration path is not a file: {config_path}", str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == PYPROJECT_FILENAME:
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigFileError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", str(config_path)
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigFileError(f"Invalid config file {config_path}: {e}", str(config_path), original_error=e) from e
    except OSError as e:
        raise ConfigFileError(f"Error reading config file {config_path}: {e}", str(config_path), original_error=e) from e

    if not isinstance(config, dict):
        raise ConfigFileError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}",
            str(config_path),
        )
    logger.debug("Loaded app definition from %s", config_path)
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load an app definition with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path
    2. Path from the CLIPARSER_CONFIG environment variable
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration (empty dict if nothing was found)

    """
    if explicit_path:
        return load_config_file(explicit_path)
    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def _spec_from_entry(entry: Any, index: int) -> ArgSpec:
    if not isinstance(entry, dict):
        raise ConfigError(f"args[{index}] must be a table, got {type(entry).__name__}")
    unknown = set(entry) - _ARG_KEYS
    if unknown:
        raise ConfigError(f"args[{index}] has unknown keys: {', '.join(sorted(unknown))}")
    for key in ("short", "long"):
        if not isinstance(entry.get(key), str):
            raise ConfigError(f"args[{index}].{key} must be a string")
    description = entry.get("description")
    if description is not None and not isinstance(description, str):
        raise ConfigError(f"args[{index}].description must be a string")
    for key in ("required", "needs_value"):
        if not isinstance(entry.get(key, False), bool):
            raise ConfigError(f"args[{index}].{key} must be a boolean")

    return ArgSpec.make(
        entry["short"],
        entry["long"],
        description or "",
        required=entry.get("required", False),
        needs_value=entry.get("needs_value", False),
    )


def builder_from_config(config: Dict[str, Any], default_name: str = "app") -> AppBuilder:
    """Create an ``AppBuilder`` from a loaded app definition.

    Raises
    ------
    ConfigError
        If the definition has unknown keys or wrongly typed values, or
        declares duplicate or invalid argument names

    """
    unknown = set(config) - _APP_KEYS
    if unknown:
        raise ConfigError(f"Unknown app definition keys: {', '.join(sorted(unknown))}")

    builder = AppBuilder(str(config.get("name", default_name)))
    for key in ("version", "author", "usage"):
        if key in config:
            getattr(builder, key)(str(config[key]))

    min_positionals = config.get("min_positionals", 0)
    if not isinstance(min_positionals, int) or isinstance(min_positionals, bool) or min_positionals < 0:
        raise ConfigError(f"min_positionals must be a non-negative integer, got {min_positionals!r}")
    builder.min_positionals(min_positionals)

    entries = config.get("args", [])
    if not isinstance(entries, list):
        raise ConfigError(f"args must be a list, got {type(entries).__name__}")
    for index, entry in enumerate(entries):
        builder.arg(_spec_from_entry(entry, index))

    return builder


def load_app(explicit_path: Optional[str] = None, env_var_path: Optional[str] = None) -> Optional[CliApp]:
    """Build a ``CliApp`` from the highest-priority app definition, if any."""
    config = load_config_with_priority(explicit_path, env_var_path)
    if not config:
        return None
    return builder_from_config(config).build()
