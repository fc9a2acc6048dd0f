"""Scalar nodes and the behavior every scalar variant shares."""

from __future__ import annotations

from abc import abstractmethod
from typing import assert_never

from yamltree.core.comments import Comment, as_comment
from yamltree.core.nodes import NodeKind, YamlNode
from yamltree.core.quoting import QuoteStyle, needs_quotes, quote
from yamltree.io.printer import print_document

COMMENT_SEPARATOR = " # "


class ScalarContract(YamlNode):
    """Equality, hashing, ordering, emptiness and rendering for scalars.

    Concrete variants only provide ``value()`` and ``comment()``. Everything
    else is derived from ``value()``; the comment is used for rendering only.
    """

    __slots__ = ()

    kind = NodeKind.SCALAR

    @abstractmethod
    def value(self) -> str | None:
        """Scalar text, or None when the value is absent."""

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, YamlNode) or other.kind is not NodeKind.SCALAR:
            return False
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        # Absent values all hash as hash(None).
        return hash(self.value())

    def compare_to(self, other: YamlNode | None) -> int:
        """A scalar sorts after None and before any sequence or mapping.

        Two scalars compare by value: absent values are equal to each other
        and sort before present ones; present values compare by code point
        and the raw difference is returned.
        """

        if self is other:
            return 0
        if other is None:
            return 1
        match other.kind:
            case NodeKind.SEQUENCE | NodeKind.MAPPING:
                return -1
            case NodeKind.SCALAR:
                return _compare_values(self.value(), _scalar_value(other))
            case _ as unreachable:
                assert_never(unreachable)

    def is_empty(self) -> bool:
        value = self.value()
        return value is None or not value.strip()

    def absent_text(self) -> str:
        """Text printed in place of an absent value."""

        return ""

    def printed_text(self) -> str:
        """Value as it appears in printed YAML, without indentation or comment.

        Text that would not read back as the same plain scalar is single-quoted.
        """

        value = self.value()
        if value is None:
            return self.absent_text()
        if needs_quotes(value):
            return quote(value)
        return value

    def render(self, indentation: int) -> str:
        """Single indented line with the inline comment, if any.

        Negative indentation is treated as zero.
        """

        printed = " " * max(indentation, 0) + self.printed_text()
        comment = self.comment().value()
        if comment:
            printed += COMMENT_SEPARATOR + comment
        return printed

    def __str__(self) -> str:
        return print_document(self)


class PlainScalar(ScalarContract):
    """Scalar printed unquoted unless its text requires quotes."""

    __slots__ = ("_value", "_comment")

    def __init__(self, value: str | None, comment: Comment | str | None = None) -> None:
        self._value = value
        self._comment = as_comment(comment)

    def value(self) -> str | None:
        return self._value

    def comment(self) -> Comment:
        return self._comment

    def __repr__(self) -> str:
        return f"PlainScalar({self._value!r}, comment={self._comment.value()!r})"


class QuotedScalar(ScalarContract):
    """Scalar printed in single- or double-quoted style."""

    __slots__ = ("_value", "_comment", "_style")

    def __init__(
        self,
        value: str | None,
        comment: Comment | str | None = None,
        *,
        style: QuoteStyle = '"',
    ) -> None:
        self._value = value
        self._comment = as_comment(comment)
        self._style: QuoteStyle = style

    def value(self) -> str | None:
        return self._value

    def comment(self) -> Comment:
        return self._comment

    @property
    def style(self) -> QuoteStyle:
        return self._style

    def printed_text(self) -> str:
        value = self._value
        if value is None:
            return self.absent_text()
        return quote(value, self._style)

    def __repr__(self) -> str:
        return (
            f"QuotedScalar({self._value!r}, comment={self._comment.value()!r}, "
            f"style={self._style!r})"
        )


def _scalar_value(node: YamlNode) -> str | None:
    if isinstance(node, ScalarContract):
        return node.value()
    value_getter = getattr(node, "value", None)
    if not callable(value_getter):
        return None
    value = value_getter()
    return value if isinstance(value, str) else None


def _compare_values(value: str | None, other_value: str | None) -> int:
    if value is None and other_value is None:
        return 0
    if other_value is None:
        return 1
    if value is None:
        return -1
    for char, other_char in zip(value, other_value):
        if char != other_char:
            return ord(char) - ord(other_char)
    return len(value) - len(other_value)
