"""`print` command registration."""

from __future__ import annotations

from pathlib import Path

import typer

from yamltree.cli_options import file_option, indent_option
from yamltree.cli_support import CliGuard, validate_payload
from yamltree.core.arg_models import PrintArgs
from yamltree.core.containers import sort_tree
from yamltree.io.printer import print_document
from yamltree.io.reader import load_path


def register(app: typer.Typer, *, guard: CliGuard) -> None:
    """Register `print` command."""

    @app.command("print")
    def print_cmd(
        file_path: Path = file_option,
        sort: bool = typer.Option(
            False,
            "--sort",
            help="Order every mapping by key before printing.",
        ),
        indent: int = indent_option,
        no_document_start: bool = typer.Option(
            False,
            "--no-document-start",
            help="Omit the leading `---` marker.",
        ),
    ) -> None:
        """Load a YAML file and print it as a normalized document."""

        with guard:
            args = validate_payload(
                PrintArgs,
                {
                    "sort": sort,
                    "indent": indent,
                    "document_start": not no_document_start,
                },
            )
            node = load_path(file_path)
            if args.sort:
                node = sort_tree(node)
            typer.echo(print_document(node, args.printer_settings()), nl=False)
