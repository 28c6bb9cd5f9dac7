"""Tests for the exception hierarchy and its messages."""

import pytest

from cliparser import ArgSpec
from cliparser.exceptions import (
    CliParserError,
    ConfigError,
    ConfigFileError,
    DuplicateNameError,
    MalformedTokenError,
    MissingRequiredError,
    MissingValueError,
    ScanError,
    UnknownFlagError,
)


@pytest.mark.unit
class TestHierarchy:
    """Every error is a CliParserError; config and scan errors are separate families."""

    @pytest.mark.parametrize(
        "error",
        [
            MalformedTokenError("-"),
            UnknownFlagError("-z"),
            MissingValueError("--out"),
            MissingRequiredError([]),
        ],
    )
    def test_scan_errors(self, error):
        assert isinstance(error, ScanError)
        assert isinstance(error, CliParserError)
        assert not isinstance(error, ConfigError)
        assert str(error) == error.message

    def test_config_errors(self):
        spec = ArgSpec.make("x", "extra")

        assert isinstance(DuplicateNameError(spec, spec, "short_name"), ConfigError)
        assert isinstance(ConfigFileError("bad", "app.toml"), ConfigError)

    def test_original_error_is_kept(self):
        cause = ValueError("boom")

        assert ConfigFileError("bad", original_error=cause).original_error is cause


@pytest.mark.unit
class TestMessages:
    """Diagnostic wording."""

    def test_duplicate_long_message(self):
        existing = ArgSpec.make("o", "output")
        error = DuplicateNameError(ArgSpec.make("p", "output"), existing, "long_name")

        assert error.message == "Long name '--output' is already used by -o"

    def test_missing_required_details(self):
        error = MissingRequiredError([ArgSpec.make("x", "exact")], positional_shortfall=1)

        assert error.details == ["Not provided: -x/--exact", "Not provided: 1 positional argument"]
        assert error.missing[0].long_name == "exact"
