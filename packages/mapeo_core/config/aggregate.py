"""Aggregate a whole configuration directory into one JSON-ready object."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Optional, Union
import logging
import os

from .errors import ConfigDirectoryNotFound, ConfigParseFailure
from .fields import get_fields
from .formats import resolve_config_format
from .log import get_logger
from .messages import get_messages
from .presets import get_presets
from .simple_files import get_defaults, get_metadata, get_stylesheet

PRESETS_DIR = "presets"
FIELDS_DIR = "fields"
MESSAGES_DIR = "messages"
ICONS_DIR = "icons"


def config_dir_exists(config_dir: Union[str, Path]) -> bool:
    return os.access(config_dir, os.R_OK)


def get_config(
    config_dir: Union[str, Path],
    protocol: Optional[str] = None,
    hostname: Optional[str] = None,
    port: Union[str, int, None] = None,
    *,
    logger: logging.Logger | None = None,
) -> dict[str, Any]:
    """Read presets, fields, messages, defaults, metadata and stylesheet together.

    Raises :class:`ConfigDirectoryNotFound` when ``config_dir`` itself is
    missing and :class:`ConfigParseFailure` for anything unexpected. Missing
    or broken sub-resources come back empty instead.
    """

    log = get_logger("mapeo_core.config.aggregate", logger)
    root = Path(config_dir)
    log.debug("[CONFIG] Reading configuration directory %s", root)

    if not config_dir_exists(root):
        log.warning("[CONFIG] Configuration directory not found: %s", root)
        raise ConfigDirectoryNotFound(str(root))

    try:
        with ThreadPoolExecutor(max_workers=6) as pool:
            presets_f = pool.submit(
                get_presets, root / PRESETS_DIR, protocol, hostname, port, logger=logger
            )
            fields_f = pool.submit(get_fields, root / FIELDS_DIR, logger=logger)
            messages_f = pool.submit(get_messages, root / MESSAGES_DIR, logger=logger)
            defaults_f = pool.submit(get_defaults, root, logger=logger)
            metadata_f = pool.submit(get_metadata, root, logger=logger)
            stylesheet_f = pool.submit(get_stylesheet, root, logger=logger)

            presets = presets_f.result()
            fields = fields_f.result()
            messages = messages_f.result()
            defaults = defaults_f.result()
            metadata = metadata_f.result()
            stylesheet = stylesheet_f.result()

        config = {
            "presets": presets,
            "fields": fields,
            "messages": messages,
            "defaults": defaults,
            "metadata": metadata,
            "stylesheet": stylesheet,
            "_format": resolve_config_format(metadata, presets),
        }
    except Exception as exc:
        log.error("[CONFIG] Error parsing configuration %s: %s", root, exc)
        raise ConfigParseFailure(exc) from exc

    log.debug(
        "[CONFIG] Configuration parsed: presets=%d fields=%d messages=%d format=%s",
        len(presets),
        len(fields),
        len(messages),
        config["_format"],
    )
    return config
