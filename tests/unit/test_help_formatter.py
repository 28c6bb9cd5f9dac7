"""Tests for help, version and diagnostic rendering."""

import io

import pytest

from cliparser import AppBuilder, ArgSpec, HelpRenderer
from cliparser.exceptions import MissingRequiredError, MissingValueError
from cliparser.help_formatter import format_option_strings


@pytest.mark.unit
class TestPlainRendering:
    """Plain-text output."""

    def test_format_option_strings(self):
        assert format_option_strings(ArgSpec.make("q", "quiet")) == "-q, --quiet"
        assert format_option_strings(ArgSpec.make("o", "output", needs_value=True)) == "-o, --output <arg>"

    def test_render_help(self, sample_app):
        text = HelpRenderer(sample_app).render_help()
        lines = text.splitlines()

        assert lines[0] == "USAGE: SANDBOX <args> flags..."
        assert lines[1] == "Author: Jane Doe"
        assert lines[2] == "Version: 0.1.57"
        assert lines[3] == "Options and flags:"
        assert lines[4].startswith("  -h, --help")
        assert lines[4].endswith("Prints help information.")
        assert "-i, --insensitive <arg>" in text
        assert "Adds line numbers. (required)" in text

    def test_help_lists_specs_in_order(self, sample_app):
        text = HelpRenderer(sample_app).render_help()

        positions = [text.index(f"--{name}") for name in ("help", "version", "numberlines", "insensitive")]
        assert positions == sorted(positions)

    def test_help_mentions_min_positionals(self):
        app = AppBuilder("demo").min_positionals(2).build()

        assert "Positional arguments: at least 2" in HelpRenderer(app).render_help()

    def test_spec_without_description(self):
        app = AppBuilder("demo").arg(ArgSpec.make("x", "extra")).build()

        assert "  -x, --extra" in HelpRenderer(app).render_help().splitlines()

    def test_long_option_name_moves_description_to_next_line(self):
        long_name = "a" * 100
        app = AppBuilder("demo").arg(ArgSpec.make("l", long_name, "desc here")).build()
        renderer = HelpRenderer(app)

        lines = renderer.render_help().splitlines()

        indent = " " * (renderer.MAX_OPTION_COLUMN + 2)
        position = lines.index(f"  -l, --{long_name}")
        assert lines[position + 1] == indent + "desc here"
        help_line = next(line for line in lines if line.startswith("  -h, --help"))
        assert help_line.endswith("Prints help information.")
        assert all(len(line) <= renderer.WRAP_WIDTH for line in lines if long_name not in line)

    def test_render_version(self, sample_app):
        assert HelpRenderer(sample_app).render_version() == "Cool app, version: 0.1.57"

    def test_render_diagnostic_missing_required(self, sample_app):
        error = MissingRequiredError(sample_app.registry.required_specs(), positional_shortfall=2)

        assert HelpRenderer(sample_app).render_diagnostic(error).splitlines() == [
            "Not provided: -n/--numberlines",
            "Not provided: -i/--insensitive",
            "Not provided: 2 positional arguments",
            "Not all required arguments have been provided.",
        ]

    def test_print_diagnostic_appends_usage(self, sample_app):
        stream = io.StringIO()

        HelpRenderer(sample_app).print_diagnostic(MissingValueError("-i"), stream)

        assert stream.getvalue() == "Missing mandatory argument for -i\nUSAGE: SANDBOX <args> flags...\n"


@pytest.mark.unit
class TestRichRendering:
    """Rich output, forced on."""

    def test_rich_help_table(self, sample_app):
        stream = io.StringIO()

        renderer = HelpRenderer(sample_app, use_rich=True)
        renderer.print_help(stream)

        output = stream.getvalue()
        assert renderer.use_rich
        assert "Options and flags" in output
        assert "--insensitive" in output
        assert "<arg>" in output

    def test_rich_diagnostic(self, sample_app):
        stream = io.StringIO()

        HelpRenderer(sample_app, use_rich=True).print_diagnostic(MissingValueError("-i"), stream)

        assert "Missing mandatory argument for -i" in stream.getvalue()
        assert "USAGE: SANDBOX <args> flags..." in stream.getvalue()

    def test_rich_unavailable_falls_back(self, sample_app, monkeypatch):
        monkeypatch.setattr("cliparser.help_formatter.check_rich_available", lambda: False)

        assert not HelpRenderer(sample_app, use_rich=True).use_rich
