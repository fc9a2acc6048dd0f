"""`compare` command registration."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console

from yamltree.cli_options import diff_mode_option, left_option, right_option
from yamltree.cli_support import CliGuard, validate_payload
from yamltree.core.arg_models import CompareArgs
from yamltree.core.containers import sort_tree
from yamltree.core.nodes import compare_nodes
from yamltree.io.diff import build_unified_diff, print_diff, summarize_diff
from yamltree.io.printer import print_document
from yamltree.io.reader import load_path

_DIFF_PREVIEW_LIMIT = 120


def register(app: typer.Typer, *, console: Console, guard: CliGuard) -> None:
    """Register `compare` command."""

    @app.command("compare")
    def compare_cmd(
        left_path: Path = left_option,
        right_path: Path = right_option,
        sort: bool = typer.Option(
            False,
            "--sort",
            help="Order every mapping by key before diffing.",
        ),
        diff_mode: str = diff_mode_option,
        json_output: bool = typer.Option(
            False,
            "--json",
            help="Emit machine-readable JSON (equal flag and ordering sign).",
        ),
    ) -> None:
        """Compare two YAML trees by value; comments are ignored."""

        with guard:
            args = validate_payload(CompareArgs, {"diff_mode": diff_mode, "sort": sort})
            left = load_path(left_path)
            right = load_path(right_path)
            if args.sort:
                left = sort_tree(left)
                right = sort_tree(right)

            order = compare_nodes(left, right)
            equal = order == 0

            if json_output:
                payload = {
                    "equal": equal,
                    "order": (order > 0) - (order < 0),
                    "left": str(left_path),
                    "right": str(right_path),
                }
                typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
                if not equal:
                    raise typer.Exit(code=1)
                return

            if equal:
                console.print("equal: both documents hold the same values")
                return

            relation = "less than" if order < 0 else "greater than"
            console.print(f"different: left sorts {relation} right")
            _render_diff(
                console,
                build_unified_diff(
                    print_document(left),
                    print_document(right),
                    left=str(left_path),
                    right=str(right_path),
                ),
                diff_mode=args.diff_mode,
            )
            raise typer.Exit(code=1)


def _render_diff(console: Console, diff_lines: list[str], *, diff_mode: str) -> None:
    summary = summarize_diff(diff_lines)
    stats = f"+{summary.added} -{summary.deleted} ({summary.hunks} hunks)"

    if diff_mode == "none":
        console.print(f"changes: {stats}; diff hidden (--diff full to show)")
        return

    if diff_mode == "summary" and len(diff_lines) > _DIFF_PREVIEW_LIMIT:
        console.print(
            f"diff summary: {stats}; showing first {_DIFF_PREVIEW_LIMIT} lines"
        )
        print_diff(console, diff_lines[:_DIFF_PREVIEW_LIMIT])
        console.print("... diff truncated (use --diff full to print all)")
        return

    console.print(f"diff summary: {stats}")
    print_diff(console, diff_lines)
