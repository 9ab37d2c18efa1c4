"""Structural format detection for presets and fields.

Neither format is declared inside the files themselves; the shape of each
document decides whether it is a legacy Mapeo or a CoMapeo entity.
"""

from __future__ import annotations

from typing import Any, Literal

ConfigFormat = Literal["legacy", "comapeo"]

LEGACY: ConfigFormat = "legacy"
COMAPEO: ConfigFormat = "comapeo"


def is_comapeo_preset(preset: Any) -> bool:
    if not isinstance(preset, dict):
        return False
    return (
        isinstance(preset.get("name"), str)
        and isinstance(preset.get("icon"), str)
        and isinstance(preset.get("color"), str)
        and isinstance(preset.get("fields"), list)
        and isinstance(preset.get("geometry"), list)
        and isinstance(preset.get("tags"), dict)
    )


def is_comapeo_field(field: Any) -> bool:
    if not isinstance(field, dict):
        return False
    return (
        isinstance(field.get("tagKey"), str)
        and isinstance(field.get("type"), str)
        and isinstance(field.get("label"), str)
    )


def classify_preset(preset: Any) -> ConfigFormat:
    return COMAPEO if is_comapeo_preset(preset) else LEGACY


def classify_field(field: Any) -> ConfigFormat:
    return COMAPEO if is_comapeo_field(field) else LEGACY


def resolve_config_format(metadata: Any, presets: list[dict[str, Any]]) -> ConfigFormat:
    """Overall format: CoMapeo only with a named metadata and a CoMapeo first preset."""

    name = metadata.get("name") if isinstance(metadata, dict) else None
    if name and presets and presets[0].get("_format") == COMAPEO:
        return COMAPEO
    return LEGACY
