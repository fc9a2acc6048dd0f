"""Comment value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Comment:
    """Inline comment attached to a node. Empty text means no comment."""

    text: str = ""

    def value(self) -> str:
        return self.text

    def is_empty(self) -> bool:
        return not self.text


EMPTY_COMMENT = Comment()


def as_comment(comment: Comment | str | None) -> Comment:
    """Accept a Comment, raw text, or None."""

    if comment is None:
        return EMPTY_COMMENT
    if isinstance(comment, Comment):
        return comment
    return Comment(comment)
