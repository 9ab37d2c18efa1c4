"""Field definition reader."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union
import logging

from .file_utils import read_json_dir
from .formats import classify_field
from .log import get_logger


def get_fields(
    fields_dir: Union[str, Path],
    *,
    logger: logging.Logger | None = None,
) -> list[dict[str, Any]]:
    """Return every field in ``fields_dir`` tagged with ``key`` and ``_format``.

    Order follows directory enumeration; fields are not sorted.
    """

    log = get_logger("mapeo_core.config.fields", logger)
    directory = Path(fields_dir)
    log.debug("[FIELDS] Reading fields directory %s", directory)

    fields: list[dict[str, Any]] = []
    for key, data in read_json_dir(directory, log):
        if not isinstance(data, dict):
            log.debug("[FIELDS] Skipping %s: not a JSON object", key)
            continue
        field = dict(data)
        field["key"] = key
        field["_format"] = classify_field(data)
        fields.append(field)

    log.debug("[FIELDS] Fields loaded: %d", len(fields))
    return fields
