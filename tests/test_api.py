from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from arithpy import evaluate_file, evaluate_lines, format_expr, parse_source
from arithpy.cli import main


def test_evaluate_lines_collects_errors_and_skips_blanks() -> None:
    res = evaluate_lines(["1+1\n", "\n", "2*\n", "6/3"])
    assert [r.lineno for r in res] == [1, 3, 4]
    assert res[0].ok and res[0].value == 2.0
    assert not res[1].ok
    assert res[1].value is None
    assert "given empty number literal" in res[1].error
    assert res[2].value == 2.0


def test_evaluate_file(tmp_path: Path) -> None:
    p = tmp_path / "exprs.txt"
    p.write_text("1 + 2\n(3)*(4)\n1/0\n", encoding="utf-8")
    res = evaluate_file(p)
    assert [r.value for r in res[:2]] == [3.0, 12.0]
    assert res[2].error == "division by zero @ Span({0, 2} to {0, 3})"


def test_evaluate_file_counts_only_newlines(tmp_path: Path) -> None:
    p = tmp_path / "exprs.txt"
    p.write_text("1+1\x0c\n2\u2028\n\n1+\n", encoding="utf-8")
    res = evaluate_file(p)
    assert [r.lineno for r in res] == [1, 2, 4]
    assert [r.value for r in res[:2]] == [2.0, 2.0]
    assert not res[2].ok


def test_format_expr_is_canonical() -> None:
    assert format_expr(parse_source("1+2*(3-4)")) == "1.0 + 2.0 * (3.0 - 4.0)"
    assert format_expr(parse_source("1--.5")) == "1.0 - -0.5"
    assert format_expr(parse_source("10000000000000000000")) == "10000000000000000000"
    assert format_expr(parse_source("0.00001")) == "0.00001"
    big = format_expr(parse_source("9" * 308))
    assert big == "1" + "0" * 308
    assert format_expr(parse_source(big)) == big


def test_cli_evaluates_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1+2", "2/3*9"]) == 0
    assert capsys.readouterr().out == "3.0\n6.0\n"


def test_cli_reports_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1+2", "1+"]) == 1
    captured = capsys.readouterr()
    assert captured.out == "3.0\n"
    assert "error: given empty number literal @ Span({0, 2} to {0, 2})" in captured.err


def test_cli_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("1+1\n\n2*3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "2.0\n6.0\n"


def test_cli_reads_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "exprs.txt"
    p.write_text("2*2\n1 2\n", encoding="utf-8")
    assert main(["-f", str(p)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "4.0\n"
    assert "trailing data after expression" in captured.err


def test_cli_preserve_whitespace(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--preserve-whitespace", "1 + 2"]) == 1
    assert "trailing data" in capsys.readouterr().err


def test_cli_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--json", "1*2"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["type"] == "Node"
    factor = payload["value"]["factor"]
    assert factor["type"] == "Multiply"
    assert factor["left"]["value"]["number"]["value"] == 1.0
    assert payload["span"]["end"]["column"] == 3


def test_cli_json_reads_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "exprs.txt"
    p.write_text("1+2\n1+\n", encoding="utf-8")
    assert main(["--json", "-f", str(p)]) == 1
    captured = capsys.readouterr()
    assert json.loads(captured.out)["value"]["type"] == "Add"
    assert "error: given empty number literal" in captured.err


def test_cli_json_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("(4)\n"))
    assert main(["--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["value"]["factor"]["type"] == "Parenthesized"
