from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from .cache import DEFAULT_CACHE_CAPACITY
from .errors import InvalidConfigError


@dataclass(frozen=True)
class TransliteratorConfig:
    """
    Stable, SDK-first configuration for a `HindiTransliterator`.

    The CLI maps flags -> this object; library callers pass it directly.
    """

    # Whole-word LRU cache.
    cache_capacity: int = DEFAULT_CACHE_CAPACITY
    # Guard the cache with a lock when one transliterator is shared between threads.
    thread_safe: bool = False

    # Render vowel + n/m before a consonant with anusvara (sandeep -> संदीप).
    nasalize: bool = False

    # Optional JSON/YAML file of latin -> Devanagari entries that override the dictionary.
    user_lexicon_path: Optional[str] = None

    # Serialization schema version for backwards-compatible config dicts.
    # NOTE: keep this field last to avoid breaking positional construction.
    schema_version: int = 1

    def normalized(self) -> "TransliteratorConfig":
        """Return a defensively normalized config (types/constraints)."""

        try:
            capacity = int(self.cache_capacity)
        except (TypeError, ValueError) as e:
            raise InvalidConfigError("cache_capacity must be an integer") from e
        if capacity < 1:
            raise InvalidConfigError("cache_capacity must be >= 1")

        lexicon_path = None if self.user_lexicon_path is None else str(self.user_lexicon_path)
        schema_version = max(1, int(self.schema_version))
        return TransliteratorConfig(
            cache_capacity=capacity,
            thread_safe=bool(self.thread_safe),
            nasalize=bool(self.nasalize),
            user_lexicon_path=lexicon_path or None,
            schema_version=schema_version,
        )

    def to_dict(self) -> dict[str, object]:
        # Keep it JSON-friendly.
        return dict(asdict(self))

    @classmethod
    def from_dict(cls, data: dict[str, object], *, strict: bool = False) -> "TransliteratorConfig":
        """
        Load a config from a JSON-friendly dict.

        Backward compatibility policy:
          - Older dicts without `schema_version` are accepted.
          - Unknown keys are ignored by default (strict=False).
          - Values are coerced conservatively (e.g., "1" -> 1) where safe.
        """

        if not isinstance(data, dict):
            raise InvalidConfigError("config must be a dict")

        allowed = {f.name for f in fields(cls)}
        unknown = sorted([k for k in data.keys() if k not in allowed])
        if unknown and strict:
            raise InvalidConfigError(f"Unknown config keys: {', '.join(unknown)}")

        def as_bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            s = str(v or "").strip().lower()
            if s in {"1", "true", "t", "yes", "y", "on"}:
                return True
            if s in {"0", "false", "f", "no", "n", "off"}:
                return False
            raise InvalidConfigError(f"not a boolean: {v!r}")

        def as_int(v: Any, *, default: int) -> int:
            if v is None:
                return int(default)
            try:
                return int(v)
            except (TypeError, ValueError) as e:
                raise InvalidConfigError(f"not an integer: {v!r}") from e

        def as_opt_str(v: Any) -> Optional[str]:
            if v is None:
                return None
            s = str(v).strip()
            return s if s else None

        kwargs: dict[str, Any] = {}
        if "cache_capacity" in data:
            kwargs["cache_capacity"] = as_int(data.get("cache_capacity"), default=DEFAULT_CACHE_CAPACITY)
        if "thread_safe" in data:
            kwargs["thread_safe"] = as_bool(data.get("thread_safe"))
        if "nasalize" in data:
            kwargs["nasalize"] = as_bool(data.get("nasalize"))
        if "user_lexicon_path" in data:
            kwargs["user_lexicon_path"] = as_opt_str(data.get("user_lexicon_path"))

        # v1: schema_version introduced. Older dicts may not have it.
        kwargs["schema_version"] = as_int(data.get("schema_version"), default=1)

        return cls(**kwargs).normalized()
