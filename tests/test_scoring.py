from __future__ import annotations

from hindi_transliterator.lexicon import build_default_lexicon
from hindi_transliterator.scoring import (
    has_common_phonetic_pattern,
    mean_score,
    score_word,
)


def test_score_word_tiers() -> None:
    lex = build_default_lexicon()
    assert score_word("priya", lex) == 1.0
    assert score_word("Kumer", lex) == 1.0  # typo of kumar
    assert score_word("ab", lex) == 0.7
    assert score_word("zzzesh", lex) == 0.8
    assert score_word("xzqploq", lex) == 0.5


def test_phonetic_patterns() -> None:
    assert has_common_phonetic_pattern("zzdeep")
    assert has_common_phonetic_pattern("Srikanthx")
    assert not has_common_phonetic_pattern("mathur")


def test_mean_score() -> None:
    lex = build_default_lexicon()
    assert mean_score([], lex) == 1.0
    assert mean_score(["rajesh", "xzqploq"], lex) == 0.75
