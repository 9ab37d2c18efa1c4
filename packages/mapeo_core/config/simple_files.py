"""Single-file readers for ``defaults.json``, ``metadata.json`` and ``style.css``.

Each reader returns an empty fallback when its file is missing, unreadable or
malformed; nothing is raised to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union
import logging

from .file_utils import load_json
from .log import get_logger

DEFAULTS_FILE = "defaults.json"
METADATA_FILE = "metadata.json"
STYLESHEET_FILE = "style.css"


def _read_json_file(path: Path, log: logging.Logger) -> Any:
    log.debug("Reading %s", path)
    try:
        data = load_json(path)
    except FileNotFoundError:
        log.debug("%s not found, returning empty object", path.name)
        return {}
    except (OSError, ValueError) as exc:
        log.debug("Error reading %s: %s", path.name, exc)
        return {}
    log.debug("Parsed %s: %s", path.name, data)
    return data


def get_defaults(
    config_dir: Union[str, Path],
    *,
    logger: logging.Logger | None = None,
) -> Any:
    log = get_logger("mapeo_core.config.defaults", logger)
    return _read_json_file(Path(config_dir) / DEFAULTS_FILE, log)


def get_metadata(
    config_dir: Union[str, Path],
    *,
    logger: logging.Logger | None = None,
) -> Any:
    log = get_logger("mapeo_core.config.metadata", logger)
    return _read_json_file(Path(config_dir) / METADATA_FILE, log)


def get_stylesheet(
    config_dir: Union[str, Path],
    *,
    logger: logging.Logger | None = None,
) -> str:
    log = get_logger("mapeo_core.config.stylesheet", logger)
    path = Path(config_dir) / STYLESHEET_FILE
    log.debug("Reading stylesheet %s", path)
    try:
        css = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.debug("%s not found, returning empty string", STYLESHEET_FILE)
        return ""
    except (OSError, UnicodeDecodeError) as exc:
        log.debug("Error reading %s: %s", STYLESHEET_FILE, exc)
        return ""
    log.debug("Parsed stylesheet (%d chars)", len(css))
    return css
