"""Filesystem helpers shared by the configuration readers.

Directory readers follow one policy: a missing or unlistable directory reads
as empty, and a file that cannot be read or parsed is dropped without
affecting its siblings.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Optional
import json
import logging
import os

JSON_SUFFIX = ".json"
MAX_READ_WORKERS = 8


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def list_json_entries(directory: Path) -> list[Path]:
    """Return ``*.json`` entries of ``directory`` in enumeration order, skipping directories."""

    out: list[Path] = []
    with os.scandir(directory) as it:
        for entry in it:
            if os.path.splitext(entry.name)[1] != JSON_SUFFIX:
                continue
            if entry.is_dir(follow_symlinks=False):
                continue
            out.append(Path(entry.path))
    return out


def _read_entry(path: Path, log: logging.Logger) -> Optional[tuple[str, Any]]:
    try:
        data = load_json(path)
    except (OSError, ValueError) as exc:
        log.debug("Error parsing %s: %s", path.name, exc)
        return None
    return path.stem, data


def read_json_dir(directory: Path, log: logging.Logger) -> list[tuple[str, Any]]:
    """Read every JSON file in ``directory`` concurrently.

    Returns ``(stem, parsed)`` pairs in enumeration order. Never raises for a
    missing directory, an unlistable directory or a bad file.
    """

    if not directory.exists():
        log.debug("Directory not found: %s", directory)
        return []
    try:
        paths = list_json_entries(directory)
    except OSError as exc:
        log.debug("Error reading directory %s: %s", directory, exc)
        return []

    log.debug("JSON files in %s: %s", directory, [p.name for p in paths])
    if not paths:
        return []

    workers = min(MAX_READ_WORKERS, len(paths))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lambda p: _read_entry(p, log), paths))
    return [item for item in results if item is not None]
