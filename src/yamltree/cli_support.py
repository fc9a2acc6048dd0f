"""Shared CLI utilities."""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import AbstractContextManager
from types import TracebackType
from typing import Literal, NoReturn, TypeVar

import typer
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console

from yamltree.core.errors import ValidationError

TModel = TypeVar("TModel", bound=BaseModel)


def validate_payload(
    model_type: type[TModel], payload: Mapping[str, object]
) -> TModel:
    """Validate command payload against pydantic model."""

    try:
        return model_type.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(
            _format_pydantic_validation_error(
                exc,
                header="invalid command arguments:",
            )
        ) from exc


def handle_error(console: Console, exc: Exception) -> NoReturn:
    """Render user-visible CLI error and exit non-zero."""

    console.print(f"[red]error:[/red] {exc}")
    console.print("[dim]hint:[/dim] run with `--help` for command usage.")
    raise typer.Exit(code=1)


class CliGuard(AbstractContextManager[None]):
    """Context manager for consistent command error handling."""

    def __init__(self, *, console: Console) -> None:
        self.console = console

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        del exc_type
        del traceback
        if exc is None:
            return False
        if isinstance(exc, (typer.Exit, KeyboardInterrupt)):
            return False
        if not isinstance(exc, Exception):
            return False
        handle_error(self.console, exc)


def _format_pydantic_validation_error(
    exc: PydanticValidationError,
    *,
    header: str,
) -> str:
    lines: list[str] = []
    for issue in exc.errors():
        field = ".".join(str(part) for part in issue.get("loc", ()))
        message = str(issue.get("msg", "invalid value")).removeprefix("Value error, ")
        lines.append(f"{field.replace('_', '-')}: {message}" if field else message)

    if len(lines) == 1:
        return lines[0]
    return "\n".join([header, *[f"- {line}" for line in lines]])
