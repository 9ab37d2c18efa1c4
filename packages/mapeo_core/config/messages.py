"""Translation bundle reader."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union
import logging

from .file_utils import read_json_dir
from .log import get_logger


def get_messages(
    messages_dir: Union[str, Path],
    *,
    logger: logging.Logger | None = None,
) -> dict[str, Any]:
    """Map each language code (file stem) to its parsed message bundle."""

    log = get_logger("mapeo_core.config.messages", logger)
    directory = Path(messages_dir)
    log.debug("[MESSAGES] Reading messages directory %s", directory)

    messages: dict[str, Any] = {}
    for lang_code, bundle in read_json_dir(directory, log):
        messages[lang_code] = bundle
        log.debug("[MESSAGES] Parsed messages for language: %s", lang_code)
    return messages
