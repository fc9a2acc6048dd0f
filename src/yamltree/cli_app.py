"""CLI app wiring and registration."""

from __future__ import annotations

import typer
from rich.console import Console

from yamltree.cli_support import CliGuard, handle_error
from yamltree.commands import compare as compare_commands
from yamltree.commands import show as show_commands
from yamltree.core.errors import YamlTreeError


def build_app(*, console: Console | None = None) -> typer.Typer:
    """Build Typer app with subcommands."""

    resolved_console = console or Console()
    guard = CliGuard(console=resolved_console)

    app = typer.Typer(
        help="Print and compare YAML documents as ordered node trees.",
        no_args_is_help=True,
    )

    show_commands.register(app, guard=guard)
    compare_commands.register(app, console=resolved_console, guard=guard)

    @app.callback()
    def main_callback() -> None:
        """Typer callback placeholder."""

    return app


_default_console = Console()
app = build_app(console=_default_console)


def main() -> None:
    """Console entrypoint."""

    try:
        app()
    except YamlTreeError as exc:
        handle_error(_default_console, exc)
