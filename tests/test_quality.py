from __future__ import annotations

import logging
from types import MappingProxyType

from hindi_transliterator.lexicon import Lexicon
from hindi_transliterator.quality import conflicts, first_wins


def test_first_definition_wins_and_later_ones_are_reported() -> None:
    out, issues = first_wins(
        [("ram", "राम"), ("ram", "राम"), ("ram", "रम")], table="t", conflict_level=logging.DEBUG
    )
    assert out == {"ram": "राम"}
    assert [i.kind for i in issues] == ["duplicate", "conflict"]
    assert conflicts(issues)[0].dropped == "रम"


def test_capitalized_keys_are_lowercased_not_dropped() -> None:
    out, issues = first_wins([("Kumer", "kumar"), ("kumer", "kumar")], table="typos")
    assert out == {"kumer": "kumar"}
    assert [i.kind for i in issues] == ["duplicate"]


def test_non_ascii_keys_are_invalid() -> None:
    out, issues = first_wins([("sharmaा", "sharma"), ("Rао", "राव")], table="t")
    assert out == {}
    assert [(i.key, i.kind) for i in issues] == [("sharmaा", "invalid_key"), ("Rао", "invalid_key")]


def test_capitalized_typo_key_still_corrects() -> None:
    typos, _ = first_wins([("Kumer", "kumar")], table="typos")
    lex = Lexicon(dictionary=MappingProxyType({"kumar": "कुमार"}), typos=MappingProxyType(typos))
    assert lex.lookup(lex.normalize("KUMER")) == "कुमार"
