"""Tests for rich output detection."""

import io
from unittest.mock import patch

import pytest

from cliparser.output import check_rich_available, should_use_rich_output


class _TTY(io.StringIO):
    def isatty(self):
        return True


@pytest.mark.unit
class TestShouldUseRichOutput:
    """Rich output is used for terminals unless turned off."""

    def test_rich_is_installed(self):
        assert check_rich_available()

    def test_explicit_false(self):
        assert not should_use_rich_output(False, _TTY())

    def test_explicit_true(self):
        assert should_use_rich_output(True, io.StringIO())

    def test_auto_detects_tty(self):
        assert should_use_rich_output(None, _TTY())
        assert not should_use_rich_output(None, io.StringIO())

    def test_rich_missing(self):
        with patch("cliparser.output.check_rich_available", return_value=False):
            assert not should_use_rich_output(True, _TTY())
