from __future__ import annotations

from hindi_transliterator.resolver import (
    VOWEL_LENGTH_RULES,
    matching_rule,
    needs_virama,
    prefers_long_a,
    should_delete_final_schwa,
)


def test_rules_are_ordered() -> None:
    assert [r.name for r in VOWEL_LENGTH_RULES] == [
        "short_a_exception",
        "always_long_word",
        "sha_tri",
        "nish_ending",
        "early_position",
        "long_suffix",
    ]


def test_short_a_exceptions_win_over_other_rules() -> None:
    assert not prefers_long_a("danish", 1)
    assert matching_rule("danish", 1).name == "short_a_exception"


def test_always_long_words() -> None:
    assert prefers_long_a("jha", 2)
    assert prefers_long_a("RAO", 1)


def test_sha_tri_is_long_only_after_sh() -> None:
    assert prefers_long_a("shastri", 2)
    assert not prefers_long_a("shastri", 5)


def test_nish_ending_is_short() -> None:
    # "ka" would otherwise lengthen the first vowel.
    assert not prefers_long_a("kanish", 1)
    assert matching_rule("kanish", 1).name == "nish_ending"


def test_suffix_rule() -> None:
    assert prefers_long_a("priya", 4)
    assert prefers_long_a("sunita", 5)
    assert not prefers_long_a("gita", 3)  # "ta" needs five letters
    assert not prefers_long_a("kumar", 3)


def test_prefix_rule() -> None:
    assert prefers_long_a("rajesh", 1)
    assert prefers_long_a("kamal", 1)
    assert not prefers_long_a("kam", 1)
    assert not prefers_long_a("rajesh", 3)


def test_unmatched_defaults_to_short() -> None:
    assert matching_rule("kumar", 3) is None
    assert not prefers_long_a("kumar", 3)


def test_final_schwa_deletion() -> None:
    assert should_delete_final_schwa("kumar")
    assert should_delete_final_schwa("amit")
    assert not should_delete_final_schwa("rajesh")
    assert not should_delete_final_schwa("ra")


def test_needs_virama() -> None:
    assert needs_virama("arjun", 2, 1)
    assert needs_virama("abcdefg", 1, 1)
    assert not needs_virama("pakd", 3, 1)
    assert not needs_virama("mg", 1, 1)


def test_first_syllable_ignores_long_endings() -> None:
    for word, pos in [("ma", 1), ("uma", 2), ("kya", 2), ("pra", 2)]:
        assert matching_rule(word, pos).name == "early_position", word
        assert not prefers_long_a(word, pos), word


def test_first_syllable_keeps_prefix_lengthening() -> None:
    assert matching_rule("raj", 1).name == "early_position"
    assert prefers_long_a("raj", 1)
    assert not prefers_long_a("mathur", 1)
