"""Sequence and mapping nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import assert_never

from yamltree.core.comments import Comment, as_comment
from yamltree.core.errors import ValidationError
from yamltree.core.nodes import NodeKind, YamlNode, compare_node_lists
from yamltree.core.scalars import PlainScalar, ScalarContract
from yamltree.io.printer import print_document


class YamlSequence(YamlNode):
    """Ordered list of nodes."""

    __slots__ = ("_items", "_comment")

    kind = NodeKind.SEQUENCE

    def __init__(
        self,
        items: Iterable[YamlNode] = (),
        comment: Comment | str | None = None,
    ) -> None:
        self._items: tuple[YamlNode, ...] = tuple(items)
        self._comment = as_comment(comment)

    def values(self) -> tuple[YamlNode, ...]:
        return self._items

    def comment(self) -> Comment:
        return self._comment

    def is_empty(self) -> bool:
        return not self._items

    def compare_to(self, other: YamlNode | None) -> int:
        """Greater than scalars, less than mappings, else element-wise."""

        if self is other:
            return 0
        if other is None:
            return 1
        match other.kind:
            case NodeKind.SCALAR:
                return 1
            case NodeKind.MAPPING:
                return -1
            case NodeKind.SEQUENCE:
                return compare_node_lists(self._items, _sequence_items(other))
            case _ as unreachable:
                assert_never(unreachable)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, YamlSequence):
            return False
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        return hash(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[YamlNode]:
        return iter(self._items)

    def __getitem__(self, index: int) -> YamlNode:
        return self._items[index]

    def __str__(self) -> str:
        return print_document(self)

    def __repr__(self) -> str:
        return f"YamlSequence({list(self._items)!r})"


class YamlMapping(YamlNode):
    """Insertion-ordered mapping with scalar keys."""

    __slots__ = ("_entries", "_comment")

    kind = NodeKind.MAPPING

    def __init__(
        self,
        pairs: Iterable[tuple[YamlNode, YamlNode]] = (),
        comment: Comment | str | None = None,
    ) -> None:
        entries: dict[ScalarContract, YamlNode] = {}
        for key, value in pairs:
            if not isinstance(key, ScalarContract):
                raise ValidationError(
                    f"mapping keys must be scalars (got {key.kind.name.lower()})"
                )
            if key in entries:
                raise ValidationError(f"duplicate mapping key: {key.printed_text()}")
            entries[key] = value
        self._entries = entries
        self._comment = as_comment(comment)

    def keys(self) -> list[ScalarContract]:
        return list(self._entries)

    def values(self) -> list[YamlNode]:
        return list(self._entries.values())

    def items(self) -> list[tuple[ScalarContract, YamlNode]]:
        return list(self._entries.items())

    def value(self, key: YamlNode | str) -> YamlNode | None:
        """Value stored under key, or None."""

        lookup = PlainScalar(key) if isinstance(key, str) else key
        if not isinstance(lookup, ScalarContract):
            return None
        return self._entries.get(lookup)

    def sorted(self) -> YamlMapping:
        """Copy with entries ordered by key."""

        return YamlMapping(
            sorted(self._entries.items(), key=_entry_key),
            comment=self._comment,
        )

    def comment(self) -> Comment:
        return self._comment

    def is_empty(self) -> bool:
        return not self._entries

    def compare_to(self, other: YamlNode | None) -> int:
        """Greater than scalars and sequences, else sorted keys then values."""

        if self is other:
            return 0
        if other is None:
            return 1
        match other.kind:
            case NodeKind.SCALAR | NodeKind.SEQUENCE:
                return 1
            case NodeKind.MAPPING:
                left = sorted(self._entries.items(), key=_entry_key)
                right = sorted(_mapping_entries(other), key=_entry_key)
                result = compare_node_lists(
                    [key for key, _ in left], [key for key, _ in right]
                )
                if result != 0:
                    return result
                return compare_node_lists(
                    [value for _, value in left], [value for _, value in right]
                )
            case _ as unreachable:
                assert_never(unreachable)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, YamlMapping):
            return False
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ScalarContract]:
        return iter(self._entries)

    def __str__(self) -> str:
        return print_document(self)

    def __repr__(self) -> str:
        return f"YamlMapping({list(self._entries.items())!r})"


def sort_tree(node: YamlNode) -> YamlNode:
    """Recursively order every mapping by key; sequences keep their order."""

    if isinstance(node, YamlMapping):
        return YamlMapping(
            sorted(
                ((key, sort_tree(value)) for key, value in node.items()),
                key=_entry_key,
            ),
            comment=node.comment(),
        )
    if isinstance(node, YamlSequence):
        return YamlSequence(
            (sort_tree(item) for item in node.values()),
            comment=node.comment(),
        )
    return node


def _entry_key(entry: tuple[YamlNode, YamlNode]) -> YamlNode:
    return entry[0]


def _sequence_items(node: YamlNode) -> list[YamlNode]:
    if isinstance(node, YamlSequence):
        return list(node.values())
    values = getattr(node, "values", None)
    return list(values()) if callable(values) else []


def _mapping_entries(node: YamlNode) -> list[tuple[YamlNode, YamlNode]]:
    if isinstance(node, YamlMapping):
        return node.items()
    items = getattr(node, "items", None)
    return list(items()) if callable(items) else []
