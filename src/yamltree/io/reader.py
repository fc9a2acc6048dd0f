"""Build node trees from YAML text."""

from __future__ import annotations

from pathlib import Path
from typing import cast

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from yamltree.core.comments import EMPTY_COMMENT, Comment
from yamltree.core.containers import YamlMapping, YamlSequence
from yamltree.core.errors import ValidationError
from yamltree.core.nodes import YamlNode
from yamltree.core.quoting import QuoteStyle
from yamltree.core.scalars import PlainScalar, QuotedScalar

_QUOTE_STYLES: frozenset[str] = frozenset({"'", '"'})
_BLOCK_STYLES: frozenset[str] = frozenset({"|", ">"})


def build_yaml() -> YAML:
    """Round-trip composer; scalars keep their source text."""

    return YAML(typ="rt")


def read_text(path: Path) -> str:
    """Read UTF-8 text file."""

    return path.read_text(encoding="utf-8")


def load_node(text: str, *, source: str = "<string>") -> YamlNode:
    """Compose a single YAML document into a node tree.

    Scalar text is never coerced: `42`, `true` and `null` stay strings. An
    empty plain scalar, or an empty document, becomes an absent value.
    End-of-line comments are kept on the node they follow.
    """

    try:
        root = build_yaml().compose(text)
    except YAMLError as exc:
        raise ValidationError(f"yaml parse error in {source}: {exc}") from exc

    if root is None:
        return PlainScalar(None)
    return _TreeBuilder().build(root)


def load_path(path: Path) -> YamlNode:
    """Load YAML file as a node tree."""

    return load_node(read_text(path), source=str(path))


class _TreeBuilder:
    def __init__(self) -> None:
        self._built: dict[int, YamlNode] = {}
        self._pending: set[int] = set()

    def build(self, node: Node) -> YamlNode:
        node_id = id(node)
        cached = self._built.get(node_id)
        if cached is not None:
            return cached
        if node_id in self._pending:
            raise ValidationError("recursive aliases are not supported")

        self._pending.add(node_id)
        try:
            built = self._convert(node)
        finally:
            self._pending.discard(node_id)
        self._built[node_id] = built
        return built

    def _convert(self, node: Node) -> YamlNode:
        if isinstance(node, ScalarNode):
            return _scalar(node)
        if isinstance(node, SequenceNode):
            return YamlSequence(
                (self.build(item) for item in node.value), _node_comment(node)
            )
        if isinstance(node, MappingNode):
            return YamlMapping(
                ((self.build(key), self.build(value)) for key, value in node.value),
                _node_comment(node),
            )
        raise ValidationError(f"unsupported yaml node: {type(node).__name__}")


def _scalar(node: ScalarNode) -> YamlNode:
    value: str = node.value
    style = node.style
    comment = _node_comment(node)
    if style in _QUOTE_STYLES:
        return QuotedScalar(value, comment, style=cast(QuoteStyle, style))
    if style in _BLOCK_STYLES:
        # Block text can span lines; double quotes keep it on one.
        return QuotedScalar(value, comment, style='"')
    if value == "":
        return PlainScalar(None, comment)
    return PlainScalar(value, comment)


def _node_comment(node: Node) -> Comment:
    """End-of-line comment attached to a composed node, first line only.

    ruamel.yaml keeps the comment after `key:` on the nested collection that
    follows, so `owner:  # team` comments the `owner` value.
    """

    tokens = getattr(node, "comment", None)
    if not tokens:
        return EMPTY_COMMENT
    text = getattr(tokens[0], "value", None)
    if not isinstance(text, str):
        return EMPTY_COMMENT
    # Tokens for comments on the following lines start with a line break.
    first_line = text.split("\n", 1)[0].strip()
    if not first_line.startswith("#"):
        return EMPTY_COMMENT
    return Comment(first_line[1:].strip())
