from __future__ import annotations

import pytest

from hindi_transliterator.config import TransliteratorConfig
from hindi_transliterator.errors import InvalidConfigError


def test_config_to_dict_includes_schema_version() -> None:
    d = TransliteratorConfig().to_dict()
    assert isinstance(d, dict)
    assert int(d.get("schema_version", 0) or 0) >= 1
    assert d["cache_capacity"] == 200


def test_config_roundtrip_to_from_dict() -> None:
    cfg = TransliteratorConfig(
        cache_capacity=16,
        thread_safe=True,
        nasalize=True,
        user_lexicon_path="names.json",
    ).normalized()
    cfg2 = TransliteratorConfig.from_dict(cfg.to_dict())
    assert cfg2 == cfg


def test_config_from_dict_accepts_old_dicts_and_coerces() -> None:
    old = {"cache_capacity": "32", "nasalize": "yes", "some_future_field": 1}
    cfg = TransliteratorConfig.from_dict(old)
    assert cfg.schema_version == 1
    assert cfg.cache_capacity == 32
    assert cfg.nasalize is True
    assert cfg.thread_safe is False


def test_config_from_dict_strict_rejects_unknown_keys() -> None:
    with pytest.raises(InvalidConfigError):
        TransliteratorConfig.from_dict({"nasalize": True, "unknown": 1}, strict=True)


def test_config_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        TransliteratorConfig(cache_capacity=0).normalized()
    with pytest.raises(InvalidConfigError):
        TransliteratorConfig.from_dict({"thread_safe": "maybe"})
    with pytest.raises(InvalidConfigError):
        TransliteratorConfig.from_dict({"cache_capacity": "lots"})
    with pytest.raises(InvalidConfigError):
        TransliteratorConfig.from_dict(["not", "a", "dict"])  # type: ignore[arg-type]


def test_blank_lexicon_path_is_none() -> None:
    assert TransliteratorConfig.from_dict({"user_lexicon_path": "  "}).user_lexicon_path is None
