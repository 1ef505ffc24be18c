from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from hindi_transliterator.cli import app

runner = CliRunner()


def test_cli_name() -> None:
    res = runner.invoke(app, ["name", "Rajesh Kumar"])
    assert res.exit_code == 0
    assert "राजेश कुमार" in res.stdout


def test_cli_text_smart_keeps_devanagari() -> None:
    res = runner.invoke(app, ["text", "--smart", "राजेश kumar"])
    assert res.exit_code == 0
    assert "राजेश kumar" in res.stdout


def test_cli_address() -> None:
    res = runner.invoke(app, ["address", "12, Road"])
    assert res.exit_code == 0
    assert "12, रोड" in res.stdout


def test_cli_alternatives() -> None:
    res = runner.invoke(app, ["alternatives", "mathur"])
    assert res.exit_code == 0
    assert res.stdout.split() == ["मठुर", "मथुर"]


def test_cli_score() -> None:
    res = runner.invoke(app, ["score", "xzqploq"])
    assert res.exit_code == 0
    assert json.loads(res.stdout) == {"confidence": 0.5, "likely_accurate": False}


def test_cli_suggest_and_explain() -> None:
    res = runner.invoke(app, ["suggest", "Kumar Rajesh"])
    assert res.exit_code == 0
    assert "0.80" in res.stdout

    res = runner.invoke(app, ["explain", "manish"])
    assert res.exit_code == 0
    assert "short_a_exception" in res.stdout


def test_cli_user_lexicon(tmp_path: Path) -> None:
    p = tmp_path / "lex.json"
    p.write_text(json.dumps({"mathur": "माथुर"}, ensure_ascii=False), encoding="utf-8")
    res = runner.invoke(app, ["text", "mathur", "--lexicon", str(p)])
    assert res.exit_code == 0
    assert "माथुर" in res.stdout


def test_cli_bad_lexicon_exits_2(tmp_path: Path) -> None:
    res = runner.invoke(app, ["text", "mathur", "--lexicon", str(tmp_path / "missing.json")])
    assert res.exit_code == 2
    assert "Invalid configuration" in res.stdout
