"""Document printer for node trees."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, TextIO, assert_never, cast

from yamltree.core.errors import PrintError
from yamltree.core.nodes import NodeKind, YamlNode
from yamltree.core.settings import DEFAULT_PRINTER_SETTINGS, PrinterSettings

if TYPE_CHECKING:
    from yamltree.core.containers import YamlMapping, YamlSequence
    from yamltree.core.scalars import ScalarContract

DOCUMENT_START = "---"
_EMPTY_FLOW: dict[NodeKind, str] = {
    NodeKind.SEQUENCE: "[]",
    NodeKind.MAPPING: "{}",
}


class YamlPrinter:
    """Writes one node as a complete YAML document to a text stream."""

    def __init__(self, stream: TextIO, settings: PrinterSettings | None = None) -> None:
        self.stream = stream
        self.settings = settings or DEFAULT_PRINTER_SETTINGS

    def print(self, node: YamlNode) -> None:
        lines: list[str] = []
        if self.settings.document_start:
            lines.append(DOCUMENT_START)
        if node.kind is not NodeKind.SCALAR:
            comment = node.comment().value()
            if comment:
                lines.append(f"# {comment}")
        lines.extend(self._node_lines(node, 0))
        for line in lines:
            self.stream.write(line)
            self.stream.write("\n")

    def _node_lines(self, node: YamlNode, indentation: int) -> list[str]:
        match node.kind:
            case NodeKind.SCALAR:
                return [cast("ScalarContract", node).render(indentation)]
            case NodeKind.SEQUENCE | NodeKind.MAPPING if node.is_empty():
                return [" " * indentation + _EMPTY_FLOW[node.kind]]
            case NodeKind.SEQUENCE:
                return self._sequence_lines(cast("YamlSequence", node), indentation)
            case NodeKind.MAPPING:
                return self._mapping_lines(cast("YamlMapping", node), indentation)
            case _ as unreachable:
                assert_never(unreachable)

    def _sequence_lines(self, sequence: YamlSequence, indentation: int) -> list[str]:
        pad = " " * indentation
        lines: list[str] = []
        for item in sequence.values():
            lines.extend(self._entry_lines(f"{pad}-", item, indentation))
        return lines

    def _mapping_lines(self, mapping: YamlMapping, indentation: int) -> list[str]:
        pad = " " * indentation
        lines: list[str] = []
        for key, value in mapping.items():
            key_text = key.printed_text()
            if key_text:
                head = f"{pad}{key_text}:"
            else:
                # An absent key only reads back from the explicit `?` form.
                lines.append(f"{pad}?")
                head = f"{pad}:"
            lines.extend(self._entry_lines(head, value, indentation))
        return lines

    def _entry_lines(self, head: str, value: YamlNode, indentation: int) -> list[str]:
        if value.kind is NodeKind.SCALAR:
            return [_join(head, cast("ScalarContract", value).render(0))]
        if value.is_empty():
            return [_join(head, _EMPTY_FLOW[value.kind] + _comment_suffix(value))]
        first = head + _comment_suffix(value)
        return [first, *self._node_lines(value, indentation + self.settings.indent_step)]


def print_document(node: YamlNode, settings: PrinterSettings | None = None) -> str:
    """Print node as a standalone document string."""

    stream = StringIO()
    printer = YamlPrinter(stream, settings)
    try:
        printer.print(node)
    except OSError as exc:
        raise PrintError("I/O error when printing YAML") from exc
    return stream.getvalue()


def _comment_suffix(node: YamlNode) -> str:
    comment = node.comment().value()
    return f" # {comment}" if comment else ""


def _join(head: str, rendered: str) -> str:
    if not rendered:
        return head
    if rendered.startswith(" "):
        return head + rendered
    return f"{head} {rendered}"
