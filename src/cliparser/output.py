"""Utility functions for terminal output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/cliparser/output.py
import sys
from typing import IO, Optional


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(use_rich: Optional[bool] = None, stream: Optional[IO[str]] = None) -> bool:
    """Determine if Rich output should be used for ``stream``.

    Parameters
    ----------
    use_rich : bool, optional
        ``True`` forces rich output, ``False`` disables it and ``None``
        enables it only when ``stream`` is a TTY
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    """
    if use_rich is False or not check_rich_available():
        return False
    if use_rich is True:
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except (OSError, ValueError):
            return False
    return False
