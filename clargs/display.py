# clargs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich rendering helpers for `Arguments`.

These print the same information as `Arguments.display_value()` and
`Arguments.errors_display_value()`, laid out for a terminal. Any console can
be passed in; the clargs theme is applied while printing.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from clargs.arguments import Arguments
from clargs.console import console as default_console
from clargs.console import theme


def render_usage(
    arguments: Arguments,
    console: Console | None = None,
    title: str | None = None,
) -> None:
    """Print one table row per declared flag."""
    console = console or default_console
    table = Table(
        title=escape(title) if title else None,
        title_style="clargs.title",
        show_edge=False,
    )
    table.add_column("Short", style="clargs.key", no_wrap=True)
    table.add_column("Long", style="clargs.key", no_wrap=True)
    table.add_column("Required", style="clargs.required")
    table.add_column("Value")
    table.add_column("Description", style="clargs.muted")

    for parameter in arguments.parameters:
        table.add_row(
            f"-{parameter.key.short_key}",
            f"--{parameter.key.long_key}",
            "yes" if parameter.required else "no",
            parameter.value_type.display_value,
            escape(parameter.description or ""),
        )
    with console.use_theme(theme):
        console.print(table)


def render_errors(arguments: Arguments, console: Console | None = None) -> None:
    """Print one line per error message, in parse order."""
    console = console or default_console
    with console.use_theme(theme):
        for argument in arguments.get_arguments_with_errors():
            assert argument.error is not None
            console.print(
                f"[clargs.error]✗[/] {escape(argument.error.message)}", soft_wrap=True
            )


def render_results(arguments: Arguments, console: Console | None = None) -> None:
    """Print the successful parse results as a table."""
    console = console or default_console
    table = Table(show_edge=False)
    table.add_column("Flag", style="clargs.key", no_wrap=True)
    table.add_column("Value", style="clargs.value")

    for argument in arguments.get():
        value = argument.value
        table.add_row(
            f"--{argument.key.long_key}",
            escape(value) if value is not None else "[clargs.muted]-[/]",
        )
    with console.use_theme(theme):
        console.print(table)
