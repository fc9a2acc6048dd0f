"""Shared Typer option definitions."""

from __future__ import annotations

import typer

file_option = typer.Option(
    ...,
    "--file",
    "-f",
    help="Path to the YAML file.",
    exists=True,
    readable=True,
    dir_okay=False,
    resolve_path=False,
)

left_option = typer.Option(
    ...,
    "--left",
    help="Path to the left-hand YAML file.",
    exists=True,
    readable=True,
    dir_okay=False,
)

right_option = typer.Option(
    ...,
    "--right",
    help="Path to the right-hand YAML file.",
    exists=True,
    readable=True,
    dir_okay=False,
)

indent_option = typer.Option(
    2,
    "--indent",
    help="Spaces per nesting level (default: 2).",
)

diff_mode_option = typer.Option(
    "summary",
    "--diff",
    help="Diff output mode: full | summary | none (default: summary).",
)
