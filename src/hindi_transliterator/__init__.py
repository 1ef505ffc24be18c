"""Hindi Name Transliterator.

Public API is intentionally small. Prefer `HindiTransliterator` + `TransliteratorConfig` for SDK
usage.
"""

from .cache import CacheStats, LRUCache
from .config import TransliteratorConfig
from .errors import HtError, InvalidConfigError, LexiconError, OptionalDependencyError
from .lexicon import Lexicon, LexiconLoadResult, build_default_lexicon, load_user_lexicon
from .mappings import MappingCategory, MappingEntry, MappingTable, MappingTables, build_default_tables
from .quality import DataQualityIssue
from .segmenter import Segment, Segmenter
from .transliterator import HindiTransliterator, Suggestion, default_transliterator

__all__ = [
    "HindiTransliterator",
    "TransliteratorConfig",
    "Suggestion",
    "default_transliterator",
    "CacheStats",
    "LRUCache",
    "Segment",
    "Segmenter",
    "MappingCategory",
    "MappingEntry",
    "MappingTable",
    "MappingTables",
    "build_default_tables",
    "Lexicon",
    "LexiconLoadResult",
    "build_default_lexicon",
    "load_user_lexicon",
    "DataQualityIssue",
    "HtError",
    "InvalidConfigError",
    "LexiconError",
    "OptionalDependencyError",
]

__version__ = "0.1.0"
