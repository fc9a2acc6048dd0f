from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from yamltree.cli import app

runner = CliRunner()


def _write_yaml(dst_dir: Path, content: str, name: str = "doc.yaml") -> Path:
    dst = dst_dir / name
    dst.write_text(content, encoding="utf-8")
    return dst


def test_print_normalizes_layout_and_keeps_comments(tmp_path: Path) -> None:
    doc = _write_yaml(
        tmp_path,
        "name: demo  # kept with the value\n"
        "items:\n"
        "- one\n"
        "- 'two'\n"
        "meta: {b: 2, a: 1}\n",
    )

    result = runner.invoke(app, ["print", "--file", str(doc)])

    assert result.exit_code == 0, result.output
    assert result.output == (
        "---\n"
        "name: demo # kept with the value\n"
        "items:\n"
        "  - one\n"
        "  - 'two'\n"
        "meta:\n"
        "  b: 2\n"
        "  a: 1\n"
    )


def test_print_sort_and_indent(tmp_path: Path) -> None:
    doc = _write_yaml(tmp_path, "z:\n  y: 1\n  x: 2\na: []\n")

    result = runner.invoke(
        app,
        ["print", "--file", str(doc), "--sort", "--indent", "4", "--no-document-start"],
    )

    assert result.exit_code == 0, result.output
    assert result.output == "a: []\nz:\n    x: 2\n    y: 1\n"


def test_print_rejects_zero_indent(tmp_path: Path) -> None:
    doc = _write_yaml(tmp_path, "a: 1\n")

    result = runner.invoke(app, ["print", "--file", str(doc), "--indent", "0"])

    assert result.exit_code == 1
    assert "indent" in result.output


def test_print_reports_parse_errors(tmp_path: Path) -> None:
    doc = _write_yaml(tmp_path, "a: [1, 2\n")

    result = runner.invoke(app, ["print", "--file", str(doc)])

    assert result.exit_code == 1
    assert "yaml parse error" in result.output


def test_compare_ignores_comments_and_quoting(tmp_path: Path) -> None:
    left = _write_yaml(tmp_path, "a: x  # note\nb: [1, 2]\n", name="left.yaml")
    right = _write_yaml(tmp_path, "a: 'x'\nb:\n  - 1\n  - 2\n", name="right.yaml")

    result = runner.invoke(app, ["compare", "--left", str(left), "--right", str(right)])

    assert result.exit_code == 0, result.output
    assert "equal" in result.output


def test_compare_treats_mapping_key_order_as_irrelevant(tmp_path: Path) -> None:
    left = _write_yaml(tmp_path, "a: 1\nb: 2\n", name="left.yaml")
    right = _write_yaml(tmp_path, "b: 2\na: 1\n", name="right.yaml")

    result = runner.invoke(
        app,
        ["compare", "--left", str(left), "--right", str(right), "--json"],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["equal"] is True


def test_compare_reports_order_and_diff(tmp_path: Path) -> None:
    left = _write_yaml(tmp_path, "a: apple\n", name="left.yaml")
    right = _write_yaml(tmp_path, "a: banana\n", name="right.yaml")

    result = runner.invoke(
        app,
        ["compare", "--left", str(left), "--right", str(right), "--diff", "full"],
    )

    assert result.exit_code == 1
    assert "left sorts less than right" in result.output
    assert "+1 -1 (1 hunks)" in result.output
    assert "-a: apple" in result.output
    assert "+a: banana" in result.output


def test_compare_json_reports_sign(tmp_path: Path) -> None:
    left = _write_yaml(tmp_path, "[a]\n", name="left.yaml")
    right = _write_yaml(tmp_path, "plain\n", name="right.yaml")

    result = runner.invoke(
        app,
        ["compare", "--left", str(left), "--right", str(right), "--json"],
    )

    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload["equal"] is False
    assert payload["order"] == 1


def test_compare_rejects_unknown_diff_mode(tmp_path: Path) -> None:
    left = _write_yaml(tmp_path, "a: 1\n", name="left.yaml")

    result = runner.invoke(
        app,
        ["compare", "--left", str(left), "--right", str(left), "--diff", "loud"],
    )

    assert result.exit_code == 1
    assert "diff-mode" in result.output
