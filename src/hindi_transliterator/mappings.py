from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterable, Optional

from .quality import DataQualityIssue, first_wins

VIRAMA = "\u094d"
ANUSVARA = "\u0902"
LONG_A = "\u0906"
LONG_A_MATRA = "\u093e"
DENTAL_THA = "\u0925"

MAX_CONSONANT_KEY_LEN = 4
MAX_VOWEL_KEY_LEN = 3
MAX_NASAL_KEY_LEN = 2


class MappingCategory(str, Enum):
    VOWEL = "vowel"
    MATRA = "matra"
    CONSONANT = "consonant"
    NASALIZATION = "nasalization"


@dataclass(frozen=True)
class MappingEntry:
    key: str
    glyph: str
    category: MappingCategory


# Independent vowels (used at word start and after another vowel).
_VOWEL_PAIRS: tuple[tuple[str, str], ...] = (
    ("aaa", "आआ"), ("eee", "ईई"), ("iii", "ईई"), ("ooo", "ओओ"), ("uuu", "ऊऊ"),
    ("aa", "आ"), ("ae", "ए"), ("ai", "ऐ"), ("ay", "ऐ"), ("ao", "ओ"), ("au", "औ"), ("aw", "औ"),
    ("ea", "ई"), ("ee", "ई"), ("ei", "ऐ"), ("eo", "ओ"),
    ("ia", "इआ"), ("ie", "ई"), ("ii", "ई"), ("io", "इओ"), ("iu", "इउ"),
    ("oa", "ओआ"), ("oe", "ओ"), ("oi", "ऑय"), ("oo", "ऊ"), ("ou", "औ"), ("ow", "ओ"),
    ("ua", "उआ"), ("ue", "ऊ"), ("ui", "उइ"), ("uo", "उओ"), ("uu", "ऊ"),
    ("a", "अ"), ("e", "ए"), ("i", "इ"), ("o", "ओ"), ("u", "उ"),
)

# Dependent vowel signs. "a" maps to "": the consonant keeps its inherent vowel.
_MATRA_PAIRS: tuple[tuple[str, str], ...] = (
    ("aa", "ा"), ("ae", "े"), ("ai", "ै"), ("ay", "ै"), ("ao", "ो"), ("au", "ौ"), ("aw", "ौ"),
    ("ea", "ी"), ("ee", "ी"), ("ei", "ै"), ("eo", "ो"),
    ("ia", "िया"), ("ie", "ी"), ("ii", "ी"), ("io", "ियो"), ("iu", "िउ"),
    ("oa", "ोआ"), ("oe", "ो"), ("oi", "ॉय"), ("oo", "ू"), ("ou", "ौ"), ("ow", "ो"),
    ("ua", "ुआ"), ("ue", "ू"), ("ui", "ुइ"), ("uo", "ुओ"), ("uu", "ू"),
    ("ya", "्या"), ("ye", "्ये"), ("yi", "्यी"), ("yo", "्यो"), ("yu", "्यू"),
    ("a", ""), ("e", "े"), ("i", "ि"), ("o", "ो"), ("u", "ु"),
)

# Consonants and conjuncts. gy, ny, nn and ng appear twice; the first definition wins
# and the later ones are reported as data-quality issues.
_CONSONANT_PAIRS: tuple[tuple[str, str], ...] = (
    ("chch", "च्च"), ("kshh", "क्ष्"), ("shri", "श्री"), ("shre", "श्रे"),
    ("chh", "छ"), ("ksh", "क्ष"), ("shh", "श"), ("jny", "ज्ञ"),
    ("thr", "थ्र"), ("dhr", "ध्र"), ("shr", "श्र"), ("ttr", "त्त्र"),
    ("ngh", "ङ्घ"), ("nch", "ञ्च"), ("njh", "ञ्झ"), ("nth", "न्थ"),
    ("ndh", "न्ध"), ("ndr", "न्द्र"), ("mph", "म्फ"), ("mbh", "म्भ"),
    # velar
    ("kh", "ख"), ("gh", "घ"), ("ng", "ङ"), ("nk", "ङ्क"),
    # palatal
    ("ch", "च"), ("jh", "झ"), ("ny", "ञ"), ("nc", "ञ्च"),
    # retroflex
    ("th", "ठ"), ("dh", "ढ"), ("tt", "ट्ट"), ("dd", "ड्ड"), ("nn", "ण"),
    # dental
    ("nt", "न्त"), ("nd", "न्द"),
    # labial
    ("ph", "फ"), ("bh", "भ"), ("mp", "म्प"), ("mb", "म्ब"),
    # sibilants
    ("sh", "श"), ("ss", "स्स"), ("ts", "ट्स"), ("ds", "ड्स"),
    # common clusters
    ("tr", "त्र"), ("dr", "द्र"), ("kr", "क्र"), ("gr", "ग्र"),
    ("pr", "प्र"), ("br", "ब्र"), ("fr", "फ्र"), ("vr", "व्र"),
    ("gy", "ज्ञ"), ("gn", "ज्ञ"),
    ("ld", "ल्ड"), ("lt", "ल्ट"), ("ll", "ल्ल"),
    ("rk", "र्क"), ("rt", "र्त"), ("rd", "र्द"), ("rp", "र्प"), ("rm", "र्म"),
    ("rn", "र्ण"), ("rv", "र्व"), ("ry", "र्य"),
    ("st", "स्त"), ("sk", "स्क"), ("sp", "स्प"), ("sm", "स्म"), ("sn", "स्न"), ("sv", "स्व"),
    ("str", "स्त्र"), ("sth", "स्थ"),
    ("ks", "क्स"), ("kt", "क्त"), ("kn", "क्न"), ("kl", "क्ल"), ("kv", "क्व"), ("ky", "क्य"),
    ("pt", "प्त"), ("pn", "प्न"), ("pl", "प्ल"), ("ps", "प्स"), ("py", "प्य"),
    ("mn", "म्न"), ("ml", "म्ल"), ("mm", "म्म"), ("my", "म्य"), ("mv", "म्व"),
    ("ty", "त्य"), ("dy", "द्य"), ("ddy", "द्द्य"), ("tw", "त्व"), ("dv", "द्व"), ("dn", "द्न"),
    ("hn", "ह्न"), ("hm", "ह्म"), ("hy", "ह्य"), ("hl", "ह्ल"), ("hv", "ह्व"),
    ("ly", "ल्य"), ("lv", "ल्व"), ("ln", "ल्न"),
    ("vy", "व्य"), ("vv", "व्व"),
    ("by", "ब्य"), ("bj", "ब्ज"),
    ("ny", "न्य"), ("nv", "न्व"),
    ("gy", "ग्य"), ("gv", "ग्व"),
    ("jy", "ज्य"), ("jv", "ज्व"),
    # nasal combinations
    ("nn", "न्न"), ("ng", "ङ"), ("nj", "ञ्ज"),
    # single consonants
    ("k", "क"), ("g", "ग"),
    ("c", "क"), ("j", "ज"),
    ("t", "त"), ("d", "द"),
    ("p", "प"), ("b", "ब"), ("m", "म"),
    ("y", "य"), ("r", "र"), ("l", "ल"), ("v", "व"), ("w", "व"),
    ("s", "स"), ("h", "ह"),
    ("n", "न"),
    # nukta forms
    ("f", "फ़"), ("z", "ज़"), ("q", "क़"), ("x", "क्स"),
)

# Vowel + nasal consonant, rendered with anusvara when nasalization is enabled.
_NASALIZATION_PAIRS: tuple[tuple[str, str], ...] = (
    ("an", "अं"), ("in", "इं"), ("un", "उं"), ("en", "एं"), ("on", "ओं"),
    ("am", "अं"), ("im", "इं"), ("um", "उं"), ("em", "एं"), ("om", "ओं"),
)


class MappingTable:
    """
    Latin key -> Devanagari glyph table for one category.

    Entries are sorted by descending key length at construction (stable on definition order)
    and indexed per length, so `longest_match` is greedy by construction rather than by the
    iteration order of a dict.
    """

    def __init__(
        self,
        category: MappingCategory,
        pairs: Iterable[tuple[str, str]],
        *,
        max_key_len: int,
        conflict_level: int = logging.WARNING,
    ) -> None:
        lookup, issues = first_wins(pairs, table=category.value, conflict_level=conflict_level)
        too_long = [k for k in lookup if len(k) > max_key_len]
        if too_long:
            raise ValueError(
                f"{category.value} keys longer than {max_key_len}: {', '.join(sorted(too_long))}"
            )

        entries = [MappingEntry(key=k, glyph=g, category=category) for k, g in lookup.items()]
        entries.sort(key=lambda e: len(e.key), reverse=True)

        self.category = category
        self.max_key_len = max_key_len
        self.entries: tuple[MappingEntry, ...] = tuple(entries)
        self.issues: tuple[DataQualityIssue, ...] = tuple(issues)
        self._by_len: dict[int, dict[str, MappingEntry]] = {}
        for e in self.entries:
            self._by_len.setdefault(len(e.key), {})[e.key] = e
        self._lengths: tuple[int, ...] = tuple(sorted(self._by_len, reverse=True))

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._by_len.get(len(key), {})

    def get(self, key: str) -> Optional[MappingEntry]:
        return self._by_len.get(len(key), {}).get(key)

    def longest_match(
        self, word: str, position: int, *, max_len: Optional[int] = None
    ) -> Optional[MappingEntry]:
        """Longest entry whose key occurs in `word` at `position`, or None."""
        if position < 0 or position >= len(word):
            return None
        limit = self.max_key_len if max_len is None else min(max_len, self.max_key_len)
        remaining = len(word) - position
        for n in self._lengths:
            if n > limit or n > remaining:
                continue
            hit = self._by_len[n].get(word[position : position + n])
            if hit is not None:
                return hit
        return None

    def matches_at(self, word: str, position: int) -> bool:
        return self.longest_match(word, position) is not None


@dataclass(frozen=True)
class MappingTables:
    vowels: MappingTable
    matras: MappingTable
    consonants: MappingTable
    nasalization: MappingTable

    @property
    def issues(self) -> tuple[DataQualityIssue, ...]:
        return (
            self.vowels.issues
            + self.matras.issues
            + self.consonants.issues
            + self.nasalization.issues
        )

    def sizes(self) -> dict[str, int]:
        return {
            MappingCategory.VOWEL.value: len(self.vowels),
            MappingCategory.MATRA.value: len(self.matras),
            MappingCategory.CONSONANT.value: len(self.consonants),
            MappingCategory.NASALIZATION.value: len(self.nasalization),
        }


@lru_cache(maxsize=1)
def build_default_tables() -> MappingTables:
    # Built-in conflicts are known and covered by tests; keep them out of user-facing warnings.
    return MappingTables(
        vowels=MappingTable(
            MappingCategory.VOWEL,
            _VOWEL_PAIRS,
            max_key_len=MAX_VOWEL_KEY_LEN,
            conflict_level=logging.INFO,
        ),
        matras=MappingTable(
            MappingCategory.MATRA,
            _MATRA_PAIRS,
            max_key_len=MAX_VOWEL_KEY_LEN,
            conflict_level=logging.INFO,
        ),
        consonants=MappingTable(
            MappingCategory.CONSONANT,
            _CONSONANT_PAIRS,
            max_key_len=MAX_CONSONANT_KEY_LEN,
            conflict_level=logging.INFO,
        ),
        nasalization=MappingTable(
            MappingCategory.NASALIZATION,
            _NASALIZATION_PAIRS,
            max_key_len=MAX_NASAL_KEY_LEN,
            conflict_level=logging.INFO,
        ),
    )
