from __future__ import annotations

import platform
import sys
from importlib import metadata
from typing import Optional

from .lexicon import build_default_lexicon
from .mappings import build_default_tables
from .quality import conflicts


def _dist_version(dist_name: str) -> Optional[str]:
    try:
        return metadata.version(dist_name)
    except metadata.PackageNotFoundError:
        return None


def _module_importable(module_name: str) -> bool:
    try:
        __import__(module_name)
        return True
    except ImportError:
        return False


def collect_doctor_info() -> dict[str, object]:
    """
    Collect a best-effort environment and data report for `hxl doctor`.

    This should stay lightweight and side-effect free (no file or network access).
    """

    # Dist names (PyPI) may differ from import names.
    dists: dict[str, str] = {
        # Core
        "regex": "regex",
        "typer": "typer",
        "rich": "rich",
        # Optional features
        "pyyaml": "PyYAML",
        "pytest": "pytest",
    }

    packages: dict[str, dict[str, object]] = {}
    for name, dist in dists.items():
        v = _dist_version(dist)
        packages[name] = {"installed": v is not None, "version": v}

    tables = build_default_tables()
    lexicon = build_default_lexicon()
    issues = list(tables.issues) + list(lexicon.issues)

    return {
        "python": {"version": sys.version.split()[0], "executable": sys.executable},
        "platform": {
            "system": platform.system(),
            "release": platform.release(),
            "machine": platform.machine(),
        },
        "features": {
            "yaml_lexicon": _module_importable("yaml"),
        },
        "data": {
            "tables": tables.sizes(),
            "dictionary_entries": len(lexicon.dictionary),
            "typo_entries": len(lexicon.typos),
            "issues": len(issues),
            "conflicts": [
                {"table": i.table, "key": i.key, "kept": i.kept, "dropped": i.dropped}
                for i in conflicts(issues)
            ],
            "invalid_keys": sorted(i.key for i in issues if i.kind == "invalid_key"),
        },
        "packages": packages,
    }
