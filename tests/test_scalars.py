from __future__ import annotations

from io import StringIO

import pytest

from yamltree.core.comments import EMPTY_COMMENT, Comment
from yamltree.core.containers import YamlMapping, YamlSequence
from yamltree.core.errors import PrintError
from yamltree.core.scalars import PlainScalar, QuotedScalar
from yamltree.io import printer as printer_module
from yamltree.io.printer import print_document
from yamltree.io.reader import load_node


def test_absent_values_are_equal_and_hash_alike() -> None:
    first = PlainScalar(None)
    second = QuotedScalar(None, "note")
    assert first is not second
    assert first == second
    assert hash(first) == hash(second)
    assert first.compare_to(second) == 0


def test_absent_value_sorts_before_present() -> None:
    absent = PlainScalar(None)
    empty = PlainScalar("")
    assert absent.compare_to(empty) == -1
    assert empty.compare_to(absent) == 1
    assert absent != empty


def test_lexicographic_order_returns_native_difference() -> None:
    a = PlainScalar("a")
    b = PlainScalar("b")
    assert a.compare_to(b) < 0
    assert b.compare_to(a) > 0
    assert PlainScalar("a").compare_to(PlainScalar("c")) == -2
    assert PlainScalar("abc").compare_to(PlainScalar("ab")) == 1
    assert PlainScalar("Z").compare_to(PlainScalar("a")) < 0


def test_equals_rejects_non_nodes() -> None:
    scalar = PlainScalar("1")
    assert scalar != "1"
    assert scalar != 1
    assert scalar.__eq__(None) is False
    assert scalar != YamlSequence([PlainScalar("1")])


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("   ", True),
        ("\t\n", True),
        ("", True),
        (None, True),
        ("x", False),
        (" x ", False),
    ],
)
def test_is_empty(value: str | None, expected: bool) -> None:
    assert PlainScalar(value).is_empty() is expected


def test_render_with_comment() -> None:
    assert PlainScalar("key", "note").render(2) == "  key # note"


def test_render_without_comment() -> None:
    assert PlainScalar("key", EMPTY_COMMENT).render(0) == "key"
    assert PlainScalar("key").render(0) == "key"


def test_render_keeps_comment_text_raw() -> None:
    assert PlainScalar("a", Comment("b # c")).render(1) == " a # b # c"


def test_render_absent_value_never_prints_none() -> None:
    assert PlainScalar(None).render(4) == "    "
    assert PlainScalar(None, "todo").render(0) == " # todo"
    assert "None" not in PlainScalar(None, "x").render(3)


def test_render_clamps_negative_indentation() -> None:
    assert PlainScalar("v").render(-3) == "v"


def test_quoted_scalar_renders_quoted_text() -> None:
    assert QuotedScalar("it's", style="'").render(0) == "'it''s'"
    assert QuotedScalar('say "hi"', "c").render(2) == '  "say \\"hi\\"" # c'
    assert QuotedScalar("a: b") == PlainScalar("a: b")


def test_str_is_a_complete_document() -> None:
    scalar = PlainScalar("hello")
    printed = str(scalar)
    assert printed == "---\nhello\n"
    assert load_node(printed) == scalar


def test_str_of_commented_scalar_round_trips_value() -> None:
    scalar = PlainScalar("hello", "greeting")
    printed = str(scalar)
    assert printed == "---\nhello # greeting\n"
    assert load_node(printed) == scalar


def test_str_of_absent_scalar_round_trips() -> None:
    scalar = PlainScalar(None)
    assert load_node(str(scalar)) == scalar


@pytest.mark.parametrize(
    ("value", "printed"),
    [
        ("a: b", "'a: b'"),
        ("hello # world", "'hello # world'"),
        ("", "''"),
        ("- x", "'- x'"),
        ("[1, 2]", "'[1, 2]'"),
        ("a\nb", '"a\\nb"'),
        ("it's: x", "'it''s: x'"),
    ],
)
def test_str_quotes_text_that_is_not_a_plain_scalar(value: str, printed: str) -> None:
    scalar = PlainScalar(value)
    document = str(scalar)
    assert document == f"---\n{printed}\n"
    loaded = load_node(document)
    assert loaded == scalar
    assert loaded.value() == value


def test_str_keeps_plain_text_unquoted() -> None:
    assert str(PlainScalar("a:b-c#d")) == "---\na:b-c#d\n"
    assert str(PlainScalar("null")) == "---\nnull\n"


def test_single_quoted_line_breaks_fall_back_to_double_quotes() -> None:
    scalar = QuotedScalar("a\nb", "c", style="'")
    assert scalar.render(2) == '  "a\\nb" # c'
    assert QuotedScalar("a\u2028b", style="'").render(0) == '"a\\u2028b"'

    tree = YamlMapping([(PlainScalar("k"), scalar)])
    loaded = load_node(print_document(tree))
    assert isinstance(loaded, YamlMapping)
    assert loaded.value("k") == PlainScalar("a\nb")


def test_str_wraps_io_failure_as_print_error(monkeypatch: pytest.MonkeyPatch) -> None:
    class _BrokenStream(StringIO):
        def write(self, text: str) -> int:
            raise OSError("disk on fire")

    monkeypatch.setattr(printer_module, "StringIO", _BrokenStream)

    with pytest.raises(PrintError) as exc_info:
        str(PlainScalar("hello"))

    assert isinstance(exc_info.value, RuntimeError)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_sorting_scalars_and_mapping() -> None:
    apple = PlainScalar("apple")
    banana = PlainScalar("banana")
    mapping = YamlMapping([(PlainScalar("k"), PlainScalar("v"))])

    assert sorted([mapping, banana, apple]) == [apple, banana, mapping]
    assert sorted([banana, mapping, apple])[2] is mapping
