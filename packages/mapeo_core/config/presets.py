"""Preset reader.

Presets are read concurrently, sorted with :func:`preset_order` once every
file is in, then classified and given an icon URL matching their format.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union
import logging

from .file_utils import read_json_dir
from .formats import classify_preset
from .icons import icon_file_name
from .log import get_logger
from .ordering import sort_presets

ICONS_URL_PREFIX = "icons/"


def build_base_url(
    protocol: Optional[str] = None,
    hostname: Optional[str] = None,
    port: Union[str, int, None] = None,
) -> str:
    if protocol and hostname and port:
        return f"{protocol}://{hostname}:{port}/"
    if protocol:
        # Kept for compatibility: a bare protocol is used as the prefix as-is.
        return protocol
    return ""


def get_presets(
    presets_dir: Union[str, Path],
    protocol: Optional[str] = None,
    hostname: Optional[str] = None,
    port: Union[str, int, None] = None,
    *,
    logger: logging.Logger | None = None,
) -> list[dict[str, Any]]:
    log = get_logger("mapeo_core.config.presets", logger)
    base_url = build_base_url(protocol, hostname, port)
    directory = Path(presets_dir)
    log.debug("[PRESETS] Reading presets directory %s", directory)

    loaded: list[dict[str, Any]] = []
    for slug, data in read_json_dir(directory, log):
        if not isinstance(data, dict):
            log.debug("[PRESETS] Skipping %s: not a JSON object", slug)
            continue
        preset = dict(data)
        preset["slug"] = slug
        loaded.append(preset)

    presets: list[dict[str, Any]] = []
    for preset in sort_presets(loaded):
        fmt = classify_preset(preset)
        icon = str(preset.get("icon"))
        preset["iconPath"] = f"{base_url}{ICONS_URL_PREFIX}{icon_file_name(icon, fmt)}"
        preset["_format"] = fmt
        presets.append(preset)

    log.debug("[PRESETS] Presets loaded: %d", len(presets))
    if presets:
        log.debug("[PRESETS] First preset: %s", presets[0])
    return presets
