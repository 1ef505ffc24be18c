from __future__ import annotations

from typing import Iterable

from .lexicon import Lexicon

DICTIONARY_SCORE = 1.0
SHORT_WORD_SCORE = 0.7
PATTERN_SCORE = 0.8
UNKNOWN_SCORE = 0.5

SHORT_WORD_MAX_LEN = 3
LIKELY_ACCURATE_THRESHOLD = 0.5

# Endings and beginnings typical of Indian given names and surnames.
COMMON_SUFFIXES: tuple[str, ...] = (
    "esh",  # rajesh, mahesh
    "an",  # raman, kiran
    "ar",  # kumar, shankar
    "deep",  # pradeep, sandeep
    "sh",  # ashish, harish
    "it",  # amit, rohit
    "vi",  # ravi, devi
    "ya",  # priya, kavya
    "ta",  # sunita, kavita
    "ini",  # shalini
    "ani",
)
COMMON_PREFIXES: tuple[str, ...] = ("sri", "ram", "krishn")


def has_common_phonetic_pattern(word: str) -> bool:
    w = (word or "").lower()
    return w.endswith(COMMON_SUFFIXES) or w.startswith(COMMON_PREFIXES)


def score_word(word: str, lexicon: Lexicon) -> float:
    """
    Confidence that the transliteration of a single word is right.

    Dictionary hits (after typo correction) are authoritative; very short words are often
    initials or abbreviations; familiar name shapes segment more reliably than arbitrary
    strings.
    """
    w = (word or "").lower()
    if lexicon.lookup(lexicon.normalize(w)) is not None:
        return DICTIONARY_SCORE
    if len(w) <= SHORT_WORD_MAX_LEN:
        return SHORT_WORD_SCORE
    if has_common_phonetic_pattern(w):
        return PATTERN_SCORE
    return UNKNOWN_SCORE


def mean_score(words: Iterable[str], lexicon: Lexicon) -> float:
    scores = [score_word(w, lexicon) for w in words]
    if not scores:
        return 1.0
    return min(1.0, max(0.0, sum(scores) / len(scores)))
