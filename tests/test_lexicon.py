from __future__ import annotations

import json
from pathlib import Path

import pytest

from hindi_transliterator.errors import LexiconError
from hindi_transliterator.lexicon import (
    build_default_lexicon,
    load_user_lexicon,
    normalize_lexicon_key,
)
from hindi_transliterator.quality import conflicts


def test_dictionary_lookup() -> None:
    lex = build_default_lexicon()
    assert lex.lookup("kumar") == "कुमार"
    assert lex.lookup("Delhi") == "दिल्ली"
    assert lex.lookup("mathur") is None
    assert "priya" in lex


def test_typo_normalization_is_single_step() -> None:
    lex = build_default_lexicon()
    assert lex.normalize("kumer") == "kumar"
    assert lex.normalize("RAJEAH") == "rajesh"
    assert lex.normalize("mathur") == "mathur"


def test_known_conflicts_keep_first_definition() -> None:
    lex = build_default_lexicon()
    assert lex.lookup("bharat") == "भरत"
    assert lex.lookup("behind") == "के पीछे"
    found = {(i.key, i.kept, i.dropped) for i in conflicts(lex.issues)}
    assert ("bharat", "भरत", "भारत") in found
    assert ("behind", "के पीछे", "पीछे") in found


def test_invalid_keys_are_dropped() -> None:
    lex = build_default_lexicon()
    invalid = {i.key for i in lex.issues if i.kind == "invalid_key"}
    assert "sharmaा" in invalid
    assert any(k.startswith("r") and k != "rao" for k in invalid)
    assert lex.lookup("rao") == "राव"


def test_with_overrides_wins_over_builtin() -> None:
    lex = build_default_lexicon().with_overrides({"Kumar!": "कुमारr", "mathur": "माथुर", "": "x"})
    assert lex.lookup("kumar") == "कुमारr"
    assert lex.lookup("mathur") == "माथुर"
    assert build_default_lexicon().lookup("mathur") is None


def test_normalize_lexicon_key() -> None:
    assert normalize_lexicon_key("  Ram-Lal ") == "ramlal"


def test_load_user_lexicon_json(tmp_path: Path) -> None:
    p = tmp_path / "lex.json"
    p.write_text(json.dumps({"Mathur": "माथुर", "bad": 3, "": "x"}), encoding="utf-8")
    res = load_user_lexicon(str(p))
    assert res.mappings == {"mathur": "माथुर"}
    assert res.source == str(p)


def test_load_user_lexicon_yaml(tmp_path: Path) -> None:
    pytest.importorskip("yaml")
    p = tmp_path / "lex.yaml"
    p.write_text("mathur: माथुर\n", encoding="utf-8")
    assert load_user_lexicon(str(p)).mappings == {"mathur": "माथुर"}


def test_load_user_lexicon_none() -> None:
    res = load_user_lexicon(None)
    assert res.mappings == {} and res.source == "none"


def test_load_user_lexicon_errors(tmp_path: Path) -> None:
    with pytest.raises(LexiconError):
        load_user_lexicon(str(tmp_path / "missing.json"))
    with pytest.raises(LexiconError):
        load_user_lexicon(str(tmp_path))

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(LexiconError):
        load_user_lexicon(str(bad))

    arr = tmp_path / "arr.json"
    arr.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(LexiconError):
        load_user_lexicon(str(arr))

    txt = tmp_path / "lex.txt"
    txt.write_text("mathur=माथुर", encoding="utf-8")
    with pytest.raises(ValueError):
        load_user_lexicon(str(txt))
