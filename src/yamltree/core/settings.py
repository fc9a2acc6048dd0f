"""Printer configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PrinterSettings(BaseModel):
    """Layout options for printed documents."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    indent_step: int = Field(default=2, ge=1)
    document_start: bool = True


DEFAULT_PRINTER_SETTINGS = PrinterSettings()
