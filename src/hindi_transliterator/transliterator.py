from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Callable, Mapping, NamedTuple, Optional

import regex as re

from .cache import CacheStats, LRUCache
from .config import TransliteratorConfig
from .lexicon import Lexicon, build_default_lexicon, load_user_lexicon
from .mappings import DENTAL_THA, MappingTables, build_default_tables
from .scoring import LIKELY_ACCURATE_THRESHOLD, mean_score
from .segmenter import Segment, Segmenter

logger = logging.getLogger(__name__)

_LATIN_RUN_RE = re.compile(r"\p{Latin}+", flags=re.VERSION1)
_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)", flags=re.VERSION1)
_DEVANAGARI_RE = re.compile(r"[\u0900-\u097F]", flags=re.VERSION1)

REVERSED_ORDER_FACTOR = 0.8
ALTERNATIVE_FACTOR = 0.6
ALTERNATIVES_BELOW = 0.7
MAX_SUGGESTIONS = 3
MAX_ALTERNATIVES = 3

EventHook = Callable[[dict[str, Any]], None]


def _emit(hook: Optional[EventHook], event: dict[str, Any]) -> None:
    if hook is None:
        return
    try:
        hook(event)
    except Exception:
        # Tracing must never break transliteration.
        return


class Suggestion(NamedTuple):
    text: str
    confidence: float


class HindiTransliterator:
    """
    Romanized Hindi names and addresses -> Devanagari.

    Each Latin letter run is handled on its own: typo correction, then the curated dictionary,
    then the memoized phonetic segmenter. Everything that is not a Latin letter is copied
    through, so no input makes the transliteration methods raise.

    Instances are independent; the word cache is the only mutable state. Pass
    `TransliteratorConfig(thread_safe=True)` (or a locked `LRUCache`) to share one instance
    between threads.
    """

    def __init__(
        self,
        config: Optional[TransliteratorConfig] = None,
        *,
        tables: Optional[MappingTables] = None,
        lexicon: Optional[Lexicon] = None,
        user_lexicon: Optional[Mapping[str, str]] = None,
        cache: Optional[LRUCache] = None,
        on_event: Optional[EventHook] = None,
    ) -> None:
        cfg = (config or TransliteratorConfig()).normalized()
        self.config = cfg
        self.tables = tables if tables is not None else build_default_tables()

        lex = lexicon if lexicon is not None else build_default_lexicon()
        if cfg.user_lexicon_path:
            loaded = load_user_lexicon(cfg.user_lexicon_path)
            lex = lex.with_overrides(loaded.mappings, source=loaded.source)
        if user_lexicon:
            lex = lex.with_overrides(user_lexicon, source="mapping")
        self.lexicon = lex

        if cache is None:
            cache = (
                LRUCache.thread_safe(cfg.cache_capacity)
                if cfg.thread_safe
                else LRUCache(cfg.cache_capacity)
            )
        self.cache = cache
        self.segmenter = Segmenter(self.tables, nasalize=cfg.nasalize)
        self.on_event = on_event

    # Per-word pipeline

    def transliterate_word(self, word: str) -> str:
        """Typo correction, then dictionary, then the cached segmenter."""
        if not word:
            return word
        normalized = self.lexicon.normalize(word.lower())

        hit = self.lexicon.lookup(normalized)
        if hit is not None:
            self._trace(word, normalized, "dictionary")
            return hit

        cached = self.cache.get(normalized)
        if cached is not None:
            self._trace(word, normalized, "cache")
            return cached

        out = self.segmenter.render(normalized)
        self.cache.put(normalized, out)
        self._trace(word, normalized, "segmenter")
        return out

    def _trace(self, word: str, normalized: str, source: str) -> None:
        _emit(
            self.on_event,
            {"stage": "word", "word": word, "normalized": normalized, "source": source},
        )

    def _render_runs(self, text: str, render: Callable[[str], str]) -> str:
        return _LATIN_RUN_RE.sub(lambda m: render(m.group(0)), text)

    # Modes

    def transliterate(self, text: str) -> str:
        if not text or text.isspace():
            return text
        return self._render_runs(text, self.transliterate_word)

    def transliterate_full_name(self, name: str) -> str:
        """Transliterate each whitespace-separated part; the whitespace runs are kept exactly."""
        if not name or name.isspace():
            return name
        parts = _WHITESPACE_SPLIT_RE.split(name)
        return "".join(
            p if not p or p.isspace() else self._render_runs(p, self.transliterate_word)
            for p in parts
        )

    def transliterate_address(self, address: str) -> str:
        """
        Transliterate the alphabetic runs of an address.

        House numbers, pin codes and the separators `, - . / ( ) # :` are copied verbatim, as is
        anything else that is not a Latin letter.
        """
        if not address or address.isspace():
            return address
        return self._render_runs(address, self.transliterate_word)

    def contains_hindi(self, text: str) -> bool:
        return bool(_DEVANAGARI_RE.search(text or ""))

    def smart_transliterate(self, text: str) -> str:
        if self.contains_hindi(text):
            return text
        return self.transliterate(text)

    def transliterate_with_corrections(
        self, text: str, corrections: Optional[Mapping[str, str]] = None
    ) -> str:
        """
        Apply user corrections (whole words, case-insensitive) and transliterate the rest.

        Longer keys are applied first so multi-word corrections win over their parts.
        """
        if not text or text.isspace():
            return text
        out = text
        for src, dst in sorted((corrections or {}).items(), key=lambda kv: -len(kv[0])):
            key = (src or "").strip()
            if not key:
                continue
            pattern = re.compile(
                r"(?<!\p{Latin})" + re.escape(key) + r"(?!\p{Latin})",
                flags=re.IGNORECASE | re.VERSION1,
            )
            out = pattern.sub(lambda _m, dst=dst: dst, out)
        return self.transliterate(out)

    def get_suggestion(self, text: str, is_address: bool = False) -> str:
        if is_address:
            return self.transliterate_address(text)
        return self.transliterate_full_name(text)

    # Confidence and alternatives

    def get_confidence_score(self, text: str) -> float:
        """Mean per-word confidence over the Latin letter runs of `text` (1.0 if there are none)."""
        runs = _LATIN_RUN_RE.findall(text or "")
        return mean_score(runs, self.lexicon)

    def is_likely_accurate(self, text: str) -> bool:
        return self.get_confidence_score(text) > LIKELY_ACCURATE_THRESHOLD

    def get_alternatives(self, word: str) -> list[str]:
        """
        Up to three distinct renderings: dictionary entry, plain phonetic reading, then the
        phonetic reading with "th" as dental थ and with "sh" read as "s".
        """
        text = word or ""
        lower = text.lower()
        if not _LATIN_RUN_RE.search(lower):
            return [text] if text else []

        candidates: list[str] = []
        single = _LATIN_RUN_RE.fullmatch(lower.strip())
        if single is not None:
            hit = self.lexicon.lookup(self.lexicon.normalize(single.group(0)))
            if hit is not None:
                candidates.append(hit)

        candidates.append(self._render_runs(lower, self._phonetic))
        if "th" in lower:
            dental = {"th": DENTAL_THA}
            candidates.append(
                self._render_runs(lower, lambda w: self.segmenter.render(w, overrides=dental))
            )
        if "sh" in lower:
            candidates.append(
                self._render_runs(lower, lambda w: self.segmenter.render(w.replace("sh", "s")))
            )

        out: list[str] = []
        for c in candidates:
            if c not in out:
                out.append(c)
        return out[:MAX_ALTERNATIVES]

    def _phonetic(self, word: str) -> str:
        cached = self.cache.get(word)
        if cached is not None:
            return cached
        out = self.segmenter.render(word)
        self.cache.put(word, out)
        return out

    def get_suggestions_with_confidence(
        self, text: str, is_address: bool = False
    ) -> list[Suggestion]:
        if not text or text.isspace():
            return []

        primary = self.get_suggestion(text, is_address)
        score = self.get_confidence_score(text)
        suggestions = [Suggestion(primary, score)]

        if not is_address:
            words = text.split()
            if len(words) == 2:
                reversed_text = self.transliterate_full_name(f"{words[1]} {words[0]}")
                if reversed_text != primary:
                    suggestions.append(Suggestion(reversed_text, score * REVERSED_ORDER_FACTOR))

        if score < ALTERNATIVES_BELOW:
            for alt in self.get_alternatives(text):
                if alt != primary and all(s.text != alt for s in suggestions):
                    suggestions.append(Suggestion(alt, score * ALTERNATIVE_FACTOR))

        return suggestions[:MAX_SUGGESTIONS]

    # Introspection

    def explain(self, word: str) -> list[Segment]:
        """Segmentation trace for `word` after typo correction (the dictionary is bypassed)."""
        w = (word or "").strip().lower()
        return self.segmenter.segment(self.lexicon.normalize(w))

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.debug("Transliteration cache cleared")

    def get_cache_stats(self) -> CacheStats:
        return self.cache.stats()


@lru_cache(maxsize=1)
def default_transliterator() -> HindiTransliterator:
    """Shared default instance for the CLI and scripts; library code should own its own."""
    return HindiTransliterator(TransliteratorConfig(thread_safe=True))
