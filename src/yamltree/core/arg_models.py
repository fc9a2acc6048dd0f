"""Pydantic models for CLI argument validation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from yamltree.core.settings import PrinterSettings


class PrintArgs(BaseModel):
    """Args for print."""

    model_config = ConfigDict(extra="forbid")

    sort: bool = False
    indent: int = Field(default=2, ge=1)
    document_start: bool = True

    def printer_settings(self) -> PrinterSettings:
        return PrinterSettings(
            indent_step=self.indent,
            document_start=self.document_start,
        )


class CompareArgs(BaseModel):
    """Args for compare."""

    model_config = ConfigDict(extra="forbid")

    diff_mode: Literal["full", "summary", "none"] = "summary"
    sort: bool = False

    @field_validator("diff_mode", mode="before")
    @classmethod
    def _normalize_diff_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value
