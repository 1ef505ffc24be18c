from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Optional

from .mappings import (
    ANUSVARA,
    LONG_A,
    LONG_A_MATRA,
    MAX_VOWEL_KEY_LEN,
    VIRAMA,
    MappingTable,
    MappingTables,
    build_default_tables,
)
from .resolver import matching_rule, needs_virama, should_delete_final_schwa

SegmentKind = Literal["vowel", "consonant", "matra", "virama", "nasal", "passthrough"]

# Anusvara reads wrong before semivowels and h (sanya -> सान्या, not संया).
_NO_ANUSVARA_BEFORE = frozenset("yrlvwh")


@dataclass(frozen=True)
class Segment:
    """
    One step of a segmentation.

    `inherent_vowel` is only set for a consonant that ends the word: True when its inherent
    "a" is pronounced, False when it is silent. Devanagari writes both the same way, so this
    does not change the rendered glyph. `rule` names the vowel-length rule that decided a
    bare "a", if any.
    """

    latin: str
    glyph: str
    kind: SegmentKind
    inherent_vowel: Optional[bool] = None
    rule: Optional[str] = None


class Segmenter:
    """
    Greedy longest-match phonetic segmentation of a single lowercase word.

    Single left-to-right pass: consonant (4→1 chars) followed by an optional vowel sign
    (3→1 chars); positions that do not start a consonant are matched as standalone vowels;
    anything else is copied through.
    """

    def __init__(self, tables: Optional[MappingTables] = None, *, nasalize: bool = False) -> None:
        self.tables = tables if tables is not None else build_default_tables()
        self.nasalize = bool(nasalize)

    def render(self, word: str, *, overrides: Optional[Mapping[str, str]] = None) -> str:
        return "".join(s.glyph for s in self.segment(word, overrides=overrides))

    def segment(
        self, word: str, *, overrides: Optional[Mapping[str, str]] = None
    ) -> list[Segment]:
        """
        Segment `word` into Devanagari glyphs.

        `overrides` replaces the glyph of specific consonant keys for this call only
        (e.g. {"th": "थ"} to read "th" as dental instead of retroflex).
        """
        w = (word or "").lower()
        out: list[Segment] = []
        consonants = self.tables.consonants
        i = 0
        while i < len(w):
            entry = consonants.longest_match(w, i)
            if entry is not None:
                glyph = entry.glyph
                if overrides:
                    glyph = overrides.get(entry.key, glyph)
                i = self._after_consonant(w, i + len(entry.key), entry.key, glyph, out)
                continue

            seg = self._nasal_vowel(w, i) or self._vowel(w, i, self.tables.vowels, standalone=True)
            if seg is None:
                seg = Segment(latin=w[i], glyph=w[i], kind="passthrough")
            out.append(seg)
            i += len(seg.latin)
        return out

    def _after_consonant(self, w: str, i: int, key: str, glyph: str, out: list[Segment]) -> int:
        if i >= len(w):
            out.append(
                Segment(
                    latin=key,
                    glyph=glyph,
                    kind="consonant",
                    inherent_vowel=not should_delete_final_schwa(w),
                )
            )
            return i

        out.append(Segment(latin=key, glyph=glyph, kind="consonant"))
        matra = self._vowel(w, i, self.tables.matras, standalone=False)
        if matra is not None:
            out.append(matra)
            i += len(matra.latin)
            nasal = self._anusvara_after(w, i, matra.latin[-1])
            if nasal is not None:
                out.append(nasal)
                i += 1
            return i

        nxt = self.tables.consonants.longest_match(w, i)
        if nxt is not None and needs_virama(w, i, len(nxt.key)):
            out.append(Segment(latin="", glyph=VIRAMA, kind="virama"))
        return i

    def _vowel(
        self, w: str, i: int, table: MappingTable, *, standalone: bool
    ) -> Optional[Segment]:
        entry = table.longest_match(w, i, max_len=MAX_VOWEL_KEY_LEN)
        if entry is None:
            return None
        kind: SegmentKind = "vowel" if standalone else "matra"
        if entry.key != "a":
            return Segment(latin=entry.key, glyph=entry.glyph, kind=kind)

        rule = matching_rule(w, i)
        if rule is not None and rule.prefer_long(w, i):
            glyph = LONG_A if standalone else LONG_A_MATRA
        else:
            glyph = entry.glyph
        return Segment(latin="a", glyph=glyph, kind=kind, rule=rule.name if rule else None)

    def _nasal_vowel(self, w: str, i: int) -> Optional[Segment]:
        if not self.nasalize:
            return None
        entry = self.tables.nasalization.longest_match(w, i)
        if entry is None or not self._anusvara_context(w, i + len(entry.key) - 1):
            return None
        return Segment(latin=entry.key, glyph=entry.glyph, kind="nasal")

    def _anusvara_after(self, w: str, i: int, vowel: str) -> Optional[Segment]:
        if not self.nasalize or i >= len(w):
            return None
        if (vowel + w[i]) not in self.tables.nasalization or not self._anusvara_context(w, i):
            return None
        return Segment(latin=w[i], glyph=ANUSVARA, kind="nasal")

    def _anusvara_context(self, w: str, nasal_pos: int) -> bool:
        # The nasal must be followed by a different consonant that can take anusvara.
        nxt = nasal_pos + 1
        if nxt >= len(w) or w[nxt] == w[nasal_pos] or w[nxt] in _NO_ANUSVARA_BEFORE:
            return False
        return self.tables.consonants.matches_at(w, nxt)
