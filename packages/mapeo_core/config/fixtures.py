"""Sample configuration projects in both formats.

Used by the fixture generator tool and by the test suites. Fixtures are only
ever written into a new (or empty) directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
import json
import logging

from .formats import COMAPEO, LEGACY, ConfigFormat
from .icons import icon_file_name

logger = logging.getLogger("mapeo_core.config.fixtures")

_ICON_SHAPES = {
    "airstrip": '<rect x="20" y="40" width="60" height="20" fill="#B209B2" />',
    "river": '<path d="M10,50 Q25,30 40,50 T70,50 T90,50" stroke="blue" stroke-width="5" fill="none" />',
    "village": '<rect x="25" y="40" width="50" height="40" fill="brown" /><polygon points="25,40 50,10 75,40" fill="red" />',
}

COMAPEO_PRESETS: dict[str, dict[str, Any]] = {
    "airstrip": {
        "name": "Airstrip",
        "icon": "airstrip",
        "color": "#B209B2",
        "fields": ["name"],
        "geometry": ["point", "area"],
        "tags": {"type": "aeroway", "aeroway": "airstrip"},
        "terms": ["airfield", "airport", "landing"],
    },
    "river": {
        "name": "River",
        "icon": "river",
        "color": "#0000FF",
        "fields": ["name", "notes"],
        "geometry": ["line"],
        "tags": {"natural": "water", "water": "river"},
        "terms": ["stream", "waterway"],
    },
    "village": {
        "name": "Village",
        "icon": "village",
        "color": "#8B4513",
        "fields": ["name", "population", "notes"],
        "geometry": ["point", "area"],
        "tags": {"place": "village"},
        "terms": ["settlement", "community"],
    },
}

COMAPEO_FIELDS: dict[str, dict[str, Any]] = {
    "name": {"tagKey": "name", "type": "text", "label": "Name", "placeholder": "Enter a name"},
    "notes": {"tagKey": "notes", "type": "text", "label": "Notes"},
    "population": {"tagKey": "population", "type": "number", "label": "Population"},
}

# Legacy presets carry no colour and may declare an explicit sort.
LEGACY_PRESETS: dict[str, dict[str, Any]] = {
    "airstrip": {
        "name": "Airstrip",
        "icon": "airstrip",
        "fields": ["name"],
        "geometry": ["point", "area"],
        "tags": {"aeroway": "airstrip"},
        "terms": ["airfield", "airport", "landing"],
    },
    "river": {
        "name": "River",
        "icon": "river",
        "fields": ["name", "notes"],
        "geometry": ["line"],
        "tags": {"waterway": "river"},
        "sort": 2,
    },
    "village": {
        "name": "Village",
        "icon": "village",
        "fields": ["name", "population"],
        "geometry": ["point", "area"],
        "tags": {"place": "village"},
        "sort": 1,
    },
}

LEGACY_FIELDS: dict[str, dict[str, Any]] = {
    "name": {"key": "name", "type": "text", "label": "Name"},
    "notes": {"key": "notes", "type": "textarea", "label": "Notes"},
    "population": {"key": "population", "type": "number", "label": "Population"},
}

DEFAULTS = {
    "area": ["airstrip", "village"],
    "line": ["river"],
    "point": ["airstrip", "village"],
    "vertex": [],
    "relation": [],
}

STYLESHEET = """/* Custom preset styles */
.preset-airstrip {
  color: #B209B2;
}
.preset-river {
  color: #0000FF;
}
"""


def _english_messages(presets: dict[str, dict[str, Any]], fields: dict[str, dict[str, Any]]) -> dict[str, Any]:
    bundle: dict[str, Any] = {}
    for key, field in fields.items():
        bundle[f"fields.{key}.label"] = {
            "description": f"Label for field {key}",
            "message": field["label"],
        }
    for slug, preset in presets.items():
        bundle[f"presets.{slug}.name"] = {
            "description": f"The name of preset {slug}",
            "message": preset["name"],
        }
    return bundle


def _svg(shape: str) -> str:
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">'
        f"{shape}</svg>\n"
    )


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def write_fixture(out_dir: Path, fmt: ConfigFormat = COMAPEO) -> list[Path]:
    """Write a complete sample configuration into ``out_dir`` and return the files written."""

    if fmt not in (LEGACY, COMAPEO):
        raise ValueError(f"Unknown configuration format: {fmt}")
    if out_dir.exists() and any(out_dir.iterdir()):
        raise FileExistsError(f"Refusing to write fixture into non-empty directory: {out_dir}")

    presets = COMAPEO_PRESETS if fmt == COMAPEO else LEGACY_PRESETS
    fields = COMAPEO_FIELDS if fmt == COMAPEO else LEGACY_FIELDS
    metadata = {
        "dataset_id": f"{fmt}-test-config",
        "name": f"{fmt}-test-config",
        "version": "1.0.0",
    }

    written: list[Path] = []
    for slug, preset in presets.items():
        path = out_dir / "presets" / f"{slug}.json"
        _write_json(path, preset)
        written.append(path)
    for key, field in fields.items():
        path = out_dir / "fields" / f"{key}.json"
        _write_json(path, field)
        written.append(path)

    messages_path = out_dir / "messages" / "en.json"
    _write_json(messages_path, _english_messages(presets, fields))
    written.append(messages_path)

    icons_dir = out_dir / "icons"
    icons_dir.mkdir(parents=True, exist_ok=True)
    for icon, shape in _ICON_SHAPES.items():
        path = icons_dir / icon_file_name(icon, fmt)
        path.write_text(_svg(shape), encoding="utf-8")
        written.append(path)

    for name, data in (("defaults.json", DEFAULTS), ("metadata.json", metadata)):
        path = out_dir / name
        _write_json(path, data)
        written.append(path)

    style_path = out_dir / "style.css"
    style_path.write_text(STYLESHEET, encoding="utf-8")
    written.append(style_path)

    logger.info("Wrote %s fixture with %d files to %s", fmt, len(written), out_dir)
    return written
