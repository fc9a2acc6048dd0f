"""When and how scalar text is quoted in printed YAML."""

from __future__ import annotations

import json
import re
from functools import cache
from typing import Literal, TypeAlias

from ruamel.yaml import YAML
from ruamel.yaml.emitter import Emitter

QuoteStyle: TypeAlias = Literal["'", '"']

_LINE_BREAKS: frozenset[str] = frozenset("\n\r\x85\u2028\u2029")
# Characters YAML treats as breaks or rejects as non-printable.
_UNSAFE_IN_DOUBLE_QUOTES = re.compile("[\x7f-\x9f\u2028\u2029\ufeff\ufffe\uffff]")


@cache
def _emitter() -> Emitter:
    return YAML(typ="rt").emitter


def needs_quotes(value: str) -> bool:
    """True when value would not read back as the same plain block scalar."""

    analysis = _emitter().analyze_scalar(value)
    return bool(analysis.empty) or not analysis.allow_block_plain


def quote(value: str, style: QuoteStyle = "'") -> str:
    """Quote value on a single line, falling back to double quotes when needed."""

    if style == "'" and _LINE_BREAKS.isdisjoint(value):
        if _emitter().analyze_scalar(value).allow_single_quoted:
            return "'" + value.replace("'", "''") + "'"
    return _UNSAFE_IN_DOUBLE_QUOTES.sub(
        lambda match: f"\\u{ord(match.group()):04x}",
        json.dumps(value, ensure_ascii=False),
    )
