from __future__ import annotations


class HtError(Exception):
    """
    Base error class for hindi-name-transliterator.

    Transliteration itself never raises; these errors only surface while building a
    transliterator (config values, user lexicon files).
    """


class InvalidConfigError(ValueError, HtError):
    """
    Raised when a user-provided config/argument is invalid.

    Subclasses ValueError for backward compatibility.
    """


class LexiconError(ValueError, HtError):
    """
    Raised when a user lexicon file is missing, unreadable or not a mapping.
    """


class OptionalDependencyError(ImportError, HtError):
    """
    Raised when an optional dependency is required but not installed.
    """
