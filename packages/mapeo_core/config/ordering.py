"""Deterministic ordering for presets and other named entities."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, Mapping, Optional
import unicodedata


def _sort_key(value: Any) -> tuple[str, str]:
    """Collation key: accents and case fold away first, the lowercased text breaks ties."""

    text = ("" if value is None else str(value)).lower()
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return base, text


def compare_strings(a: Any = None, b: Any = None) -> int:
    """Case- and accent-insensitive three-way comparison. ``None`` reads as ``""``."""

    ka = _sort_key(a)
    kb = _sort_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def _sort_value(item: Mapping[str, Any]) -> Optional[float]:
    value = item.get("sort")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def preset_order(a: Mapping[str, Any], b: Mapping[str, Any]) -> int:
    sort_a = _sort_value(a)
    sort_b = _sort_value(b)

    if sort_a is not None and sort_b is not None:
        if sort_a == sort_b:
            return compare_strings(a.get("name"), b.get("name"))
        return -1 if sort_a < sort_b else 1
    # Entities with an explicit sort precede unordered ones.
    if sort_a is not None:
        return -1
    if sort_b is not None:
        return 1
    return compare_strings(a.get("name"), b.get("name"))


def sort_presets(presets: Iterable[Mapping[str, Any]]) -> list[Any]:
    return sorted(presets, key=cmp_to_key(preset_order))
