from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

import regex as re

from .dictionary import NAME_ENTRIES, TYPO_ENTRIES
from .errors import LexiconError, OptionalDependencyError
from .quality import DataQualityIssue, first_wins

logger = logging.getLogger(__name__)

# Keep normalization consistent with per-word dispatch:
# - lower-case
# - keep Latin letters only
_LATIN_ONLY_RE = re.compile(r"[^\p{Latin}]+", flags=re.VERSION1)


def normalize_lexicon_key(key: str) -> str:
    k = (key or "").strip().lower()
    k = _LATIN_ONLY_RE.sub("", k)
    return k


@dataclass(frozen=True)
class Lexicon:
    """
    Curated exact-match tables: typo -> canonical spelling, canonical spelling -> Devanagari.

    Both mappings are read-only; `issues` lists what was dropped while building them.
    """

    dictionary: Mapping[str, str]
    typos: Mapping[str, str]
    issues: tuple[DataQualityIssue, ...] = field(default=())

    def normalize(self, word: str) -> str:
        """Apply a single typo-correction lookup (identity if the word is not a known typo)."""
        w = (word or "").lower()
        return self.typos.get(w, w)

    def lookup(self, word: str) -> Optional[str]:
        return self.dictionary.get((word or "").lower())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self.dictionary

    def __len__(self) -> int:
        return len(self.dictionary)

    def with_overrides(self, mappings: Mapping[str, str], *, source: str = "user") -> "Lexicon":
        """Return a new lexicon where `mappings` win over the built-in dictionary."""
        if not mappings:
            return self
        merged = dict(self.dictionary)
        added = 0
        for k, v in mappings.items():
            nk = normalize_lexicon_key(k)
            nv = (v or "").strip()
            if not nk or not nv:
                continue
            merged[nk] = nv
            added += 1
        logger.info("Applied %d lexicon overrides from %s", added, source)
        return Lexicon(
            dictionary=MappingProxyType(merged),
            typos=self.typos,
            issues=self.issues,
        )


@lru_cache(maxsize=1)
def build_default_lexicon() -> Lexicon:
    # Built-in conflicts are known; report them in `issues` without warning on every start.
    dictionary, dict_issues = first_wins(
        NAME_ENTRIES, table="dictionary", conflict_level=logging.INFO
    )
    typos, typo_issues = first_wins(TYPO_ENTRIES, table="typos", conflict_level=logging.INFO)
    return Lexicon(
        dictionary=MappingProxyType(dictionary),
        typos=MappingProxyType(typos),
        issues=tuple(dict_issues + typo_issues),
    )


@dataclass(frozen=True)
class LexiconLoadResult:
    mappings: dict[str, str]
    source: str


def _load_yaml_text(text: str) -> object:
    """
    YAML is optional: requires `PyYAML` to be installed.

    We keep the core package lightweight, so this only activates when the user
    installs the optional extra.
    """
    try:
        import yaml  # type: ignore[reportMissingImports]
    except ImportError as e:  # pragma: no cover
        raise OptionalDependencyError(
            "YAML lexicon support requires PyYAML. Install with: pip install -e \".[lexicon]\""
        ) from e

    return yaml.safe_load(text)


def load_user_lexicon(path: Optional[str]) -> LexiconLoadResult:
    """
    Load a user lexicon (custom latin -> Devanagari mappings) from JSON or YAML.

    Expected file format: a mapping/dict of { "latin_key": "देवनागरी", ... }.
    Keys are normalized (lower + latin-only) so that lookups remain stable across punctuation.
    """
    if not path:
        return LexiconLoadResult(mappings={}, source="none")

    p = Path(path).expanduser()
    if not p.exists():
        raise LexiconError(f"User lexicon not found: {p}")
    if not p.is_file():
        raise LexiconError(f"User lexicon path is not a file: {p}")

    raw = p.read_text(encoding="utf-8")
    suffix = p.suffix.lower()

    payload: object
    if suffix == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise LexiconError(f"User lexicon is not valid JSON: {p} ({e})") from e
    elif suffix in {".yaml", ".yml"}:
        payload = _load_yaml_text(raw)
    else:
        raise LexiconError(f"Unsupported lexicon format: {suffix} (use .json/.yaml/.yml)")

    if not isinstance(payload, dict):
        raise LexiconError("User lexicon must be a JSON/YAML object (mapping of key->value).")

    out: dict[str, str] = {}
    skipped = 0
    for k, v in payload.items():
        if not isinstance(k, str) or not isinstance(v, str):
            skipped += 1
            continue
        nk = normalize_lexicon_key(k)
        nv = v.strip()
        if not nk or not nv:
            skipped += 1
            continue
        out[nk] = nv

    if skipped:
        logger.warning("Skipped %d invalid entries in user lexicon %s", skipped, p)
    return LexiconLoadResult(mappings=out, source=str(p))
