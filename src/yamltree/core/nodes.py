"""Node kinds and the total order over document-tree nodes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from yamltree.core.comments import Comment


class NodeKind(Enum):
    """Closed set of node variants, ranked for cross-kind ordering."""

    SCALAR = 0
    SEQUENCE = 1
    MAPPING = 2

    @property
    def rank(self) -> int:
        return self.value


class YamlNode(ABC):
    """Immutable node of a document tree."""

    __slots__ = ()

    kind: NodeKind

    @abstractmethod
    def comment(self) -> Comment:
        """Comment attached to this node (empty when none)."""

    @abstractmethod
    def compare_to(self, other: YamlNode | None) -> int:
        """Negative, zero or positive, like a three-way comparison."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True when the node contributes no visible content."""

    def __lt__(self, other: object) -> bool:
        if other is not None and not isinstance(other, YamlNode):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if other is not None and not isinstance(other, YamlNode):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if other is not None and not isinstance(other, YamlNode):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if other is not None and not isinstance(other, YamlNode):
            return NotImplemented
        return self.compare_to(other) >= 0


def compare_nodes(left: YamlNode | None, right: YamlNode | None) -> int:
    """Total order over nodes: None < scalars < sequences < mappings."""

    if left is right:
        return 0
    if left is None:
        return -1
    if right is None:
        return 1
    if left.kind is not right.kind:
        return -1 if left.kind.rank < right.kind.rank else 1
    return left.compare_to(right)


def compare_node_lists(
    left: tuple[YamlNode, ...] | list[YamlNode],
    right: tuple[YamlNode, ...] | list[YamlNode],
) -> int:
    """Element-wise comparison, shorter list first on a common prefix."""

    for left_item, right_item in zip(left, right):
        result = compare_nodes(left_item, right_item)
        if result != 0:
            return result
    return len(left) - len(right)
