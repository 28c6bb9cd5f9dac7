"""Help, version and diagnostic rendering for applications built with cliparser.

Rendering lives outside the scanner so that scanning stays free of output.
``HelpRenderer`` produces plain text by default; when rich output is
enabled it prints the option list as a ``rich`` table instead.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import sys
import textwrap
from typing import TYPE_CHECKING, IO, Any, Optional

from cliparser.exceptions import MissingRequiredError, ScanError
from cliparser.output import check_rich_available

if TYPE_CHECKING:
    from cliparser.app import CliApp
    from cliparser.argspec import ArgSpec


VALUE_PLACEHOLDER = "<arg>"


def format_option_strings(spec: ArgSpec) -> str:
    """Return ``-x, --name`` with a value placeholder for value flags."""
    short, long = spec.option_strings
    text = f"{short}, {long}"
    if spec.needs_value:
        text += f" {VALUE_PLACEHOLDER}"
    return text


class HelpRenderer:
    """Render the help screen, version line and scan diagnostics for an app.

    Parameters
    ----------
    app : CliApp
        Application whose metadata and registry are rendered
    use_rich : bool, default False
        Print tables with ``rich`` when it is installed

    """

    WRAP_WIDTH = 88
    MAX_OPTION_COLUMN = WRAP_WIDTH // 3

    def __init__(self, app: CliApp, *, use_rich: bool = False) -> None:
        self.app = app
        self.use_rich = use_rich and check_rich_available()

    def render_usage(self) -> str:
        return f"USAGE: {self.app.usage}"

    def render_version(self) -> str:
        return f"{self.app.name}, version: {self.app.version}"

    def render_help(self) -> str:
        lines = [
            self.render_usage(),
            f"Author: {self.app.author}",
            f"Version: {self.app.version}",
        ]
        if self.app.min_positionals:
            lines.append(f"Positional arguments: at least {self.app.min_positionals}")
        lines.append("Options and flags:")

        specs = self.app.registry.specs
        column = min(max(len(format_option_strings(spec)) for spec in specs) + 2, self.MAX_OPTION_COLUMN)
        indent = " " * (column + 2)
        wrapper = textwrap.TextWrapper(width=self.WRAP_WIDTH, initial_indent="", subsequent_indent=indent)
        for spec in specs:
            option = format_option_strings(spec)
            description = spec.description
            if spec.required:
                description = f"{description} (required)" if description else "(required)"
            if not description:
                lines.append(f"  {option}")
            elif len(option) + 2 > column:
                # too wide for the column: description goes on the next line
                lines.append(f"  {option}")
                lines.extend(
                    textwrap.wrap(description, width=self.WRAP_WIDTH, initial_indent=indent, subsequent_indent=indent)
                )
            else:
                lines.extend(wrapper.wrap(f"  {option:<{column}}{description}"))
        return "\n".join(lines)

    def render_diagnostic(self, error: ScanError) -> str:
        lines = []
        if isinstance(error, MissingRequiredError):
            lines.extend(error.details)
        lines.append(error.message)
        return "\n".join(lines)

    def print_help(self, stream: Optional[IO[str]] = None) -> None:
        target = stream or sys.stdout
        if self.use_rich:
            self._print_rich_help(target)
        else:
            print(self.render_help(), file=target)

    def print_version(self, stream: Optional[IO[str]] = None) -> None:
        print(self.render_version(), file=stream or sys.stdout)

    def print_diagnostic(self, error: ScanError, stream: Optional[IO[str]] = None) -> None:
        """Print the diagnostic followed by the usage line."""
        target = stream or sys.stderr
        if self.use_rich:
            from rich.console import Console
            from rich.markup import escape

            console = Console(file=target)
            console.print(f"[red]{escape(self.render_diagnostic(error))}[/red]", highlight=False)
            console.print(escape(self.render_usage()), highlight=False)
        else:
            print(self.render_diagnostic(error), file=target)
            print(self.render_usage(), file=target)

    def _print_rich_help(self, stream: IO[str]) -> None:
        from rich.console import Console
        from rich.markup import escape
        from rich.table import Table

        console: Any = Console(file=stream)
        console.print(f"[bold]{escape(self.render_usage())}[/bold]", highlight=False)
        console.print(f"Author: {escape(self.app.author)}", highlight=False)
        console.print(f"Version: {escape(self.app.version)}", highlight=False)

        table = Table(title="Options and flags", title_justify="left")
        table.add_column("Short", style="cyan", no_wrap=True)
        table.add_column("Long", style="cyan", no_wrap=True)
        table.add_column("Value", style="yellow", no_wrap=True)
        table.add_column("Description", style="white")
        table.add_column("Required", style="magenta")

        for spec in self.app.registry.specs:
            short, long = spec.option_strings
            table.add_row(
                escape(short),
                escape(long),
                VALUE_PLACEHOLDER if spec.needs_value else "",
                escape(spec.description),
                "[green]yes[/green]" if spec.required else "[dim]no[/dim]",
            )
        console.print(table)
        if self.app.min_positionals:
            console.print(f"[dim]Positional arguments: at least {self.app.min_positionals}[/dim]")
