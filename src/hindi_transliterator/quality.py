from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Literal, Optional

import regex as re

logger = logging.getLogger(__name__)

IssueKind = Literal["duplicate", "conflict", "invalid_key"]

_LOWER_ASCII_RE = re.compile(r"[a-z]+")


@dataclass(frozen=True)
class DataQualityIssue:
    """
    A problem found while building one of the static tables.

    - duplicate: the key was defined again with the same value (harmless)
    - conflict: the key was defined again with a different value; the first one is kept
    - invalid_key: the key has characters other than ASCII letters and can never be looked up
    """

    table: str
    key: str
    kind: IssueKind
    kept: Optional[str]
    dropped: str


def first_wins(
    pairs: Iterable[tuple[str, str]],
    *,
    table: str,
    validate_keys: bool = True,
    conflict_level: int = logging.WARNING,
) -> tuple[dict[str, str], list[DataQualityIssue]]:
    """
    Build a lookup from (key, value) pairs where the first definition of a key wins.

    Source tables are kept as tuples of pairs instead of dict literals so that repeated keys
    stay visible here instead of being silently overwritten by the later definition.
    """
    out: dict[str, str] = {}
    issues: list[DataQualityIssue] = []
    for raw_key, value in pairs:
        # Lookups are case-insensitive, so "Kumer" and "kumer" are the same key.
        key = raw_key.lower() if validate_keys else raw_key
        if validate_keys and not _LOWER_ASCII_RE.fullmatch(key):
            logger.debug("%s: dropping invalid key %r", table, raw_key)
            issues.append(
                DataQualityIssue(
                    table=table, key=raw_key, kind="invalid_key", kept=None, dropped=value
                )
            )
            continue
        if key not in out:
            out[key] = value
            continue
        kept = out[key]
        if kept == value:
            logger.debug("%s: duplicate definition of %r", table, key)
            issues.append(
                DataQualityIssue(table=table, key=key, kind="duplicate", kept=kept, dropped=value)
            )
        else:
            logger.log(
                conflict_level,
                "%s: conflicting definitions for %r (keeping %r, dropping %r)",
                table,
                key,
                kept,
                value,
            )
            issues.append(
                DataQualityIssue(table=table, key=key, kind="conflict", kept=kept, dropped=value)
            )
    return out, issues


def conflicts(issues: Iterable[DataQualityIssue]) -> list[DataQualityIssue]:
    return [i for i in issues if i.kind == "conflict"]
