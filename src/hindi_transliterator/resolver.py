"""
Ambiguity resolution for romanized input.

Two policies, both pure functions of (word, position):

- vowel length: should a bare "a" be rendered long (आ / ा) or short (अ / inherent)?
- schwa deletion: should a consonant lose its inherent vowel (virama between consonants,
  silent final "a")?

The vowel-length heuristics are ordered (predicate, outcome) rules; the first rule whose
predicate matches decides. Words no rule covers (many compound names) fall back to the short
vowel. This is best-effort, not a phonological model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

WordPredicate = Callable[[str, int], bool]

# Whole words whose "a" is short even though a long-vowel rule would match.
SHORT_A_EXCEPTIONS: frozenset[str] = frozenset(
    {
        "manish",
        "tanish",
        "vanish",
        "danish",
        "ganesh",
        "mahesh",
        "dinesh",
        "hitesh",
    }
)

# Whole words whose "a" is always long, wherever it sits.
ALWAYS_LONG_WORDS: frozenset[str] = frozenset({"jha", "ray", "rai", "rao"})

# Two-letter endings that lengthen a final "a", with the minimum word length for each.
LONG_A_SUFFIXES: dict[str, int] = {"ra": 1, "ya": 1, "la": 1, "ma": 1, "ta": 5}

# Two-letter beginnings that lengthen the first "a", with the minimum word length for each.
LONG_A_PREFIXES: dict[str, int] = {"ra": 1, "ka": 4}

# Positions of a bare "a" that belong to the first syllable.
EARLY_POSITION_MAX = 2

# Final letters after which the inherent vowel is silent.
SILENT_SCHWA_FINALS: frozenset[str] = frozenset("rlmntdkjvp")


@dataclass(frozen=True)
class VowelLengthRule:
    name: str
    matches: WordPredicate
    prefer_long: WordPredicate


def _always(value: bool) -> WordPredicate:
    return lambda word, position: value


def _is_sha_tri(word: str, position: int) -> bool:
    return word.startswith("sha") and "tri" in word


def _sha_tri_long(word: str, position: int) -> bool:
    # Only the "a" right after the leading "sh" is long (shastri -> शास्त्री).
    return position == word.index("sha") + 2


def _has_long_suffix(word: str, position: int) -> bool:
    if position < len(word) - 2:
        return False
    min_len = LONG_A_SUFFIXES.get(word[-2:])
    return min_len is not None and len(word) >= min_len


def _has_long_prefix(word: str, position: int) -> bool:
    if position != 1:
        return False
    min_len = LONG_A_PREFIXES.get(word[:2])
    return min_len is not None and len(word) >= min_len


VOWEL_LENGTH_RULES: tuple[VowelLengthRule, ...] = (
    VowelLengthRule("short_a_exception", lambda w, p: w in SHORT_A_EXCEPTIONS, _always(False)),
    VowelLengthRule("always_long_word", lambda w, p: w in ALWAYS_LONG_WORDS, _always(True)),
    VowelLengthRule("sha_tri", _is_sha_tri, _sha_tri_long),
    VowelLengthRule("nish_ending", lambda w, p: w.endswith("nish"), _always(False)),
    # The first syllable is only lengthened by a known prefix, never by the ending (ma -> म).
    VowelLengthRule("early_position", lambda w, p: p <= EARLY_POSITION_MAX, _has_long_prefix),
    VowelLengthRule("long_suffix", _has_long_suffix, _always(True)),
)


def matching_rule(word: str, position: int) -> VowelLengthRule | None:
    """First vowel-length rule whose predicate matches, or None (short vowel)."""
    w = (word or "").lower()
    for rule in VOWEL_LENGTH_RULES:
        if rule.matches(w, position):
            return rule
    return None


def prefers_long_a(word: str, position: int) -> bool:
    """True if the bare "a" at `position` in `word` should be rendered long."""
    rule = matching_rule(word, position)
    if rule is None:
        return False
    return rule.prefer_long((word or "").lower(), position)


def should_delete_final_schwa(word: str) -> bool:
    """True if a word-final consonant keeps no inherent vowel (kumar -> कुमार, not कुमारा)."""
    w = (word or "").lower()
    return len(w) > 2 and w[-1] in SILENT_SCHWA_FINALS


def needs_virama(word: str, position: int, next_consonant_len: int) -> bool:
    """
    Whether to join the consonant before `position` to the consonant cluster starting there.

    Near the end of the word a consonant followed directly by the final cluster keeps its
    inherent vowel, so short words do not collapse into a single conjunct.
    """
    near_end = position >= len(word) - 3
    has_more_after = position + next_consonant_len < len(word)
    return not near_end or has_more_after
