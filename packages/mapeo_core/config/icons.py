"""Icon lookup for configuration ``icons/`` directories."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union
import logging
import stat

from .formats import COMAPEO, ConfigFormat
from .log import get_logger

SVG_SUFFIX = ".svg"
LEGACY_ICON_SIZE_SUFFIX = "-100px"
ICON_NOT_FOUND_MESSAGE = "Icon not found."


def icon_not_found() -> dict[str, str]:
    return {"error": ICON_NOT_FOUND_MESSAGE}


def is_icon_not_found(result: Any) -> bool:
    return isinstance(result, dict) and result.get("error") == ICON_NOT_FOUND_MESSAGE


def icon_file_name(icon: str, fmt: ConfigFormat) -> str:
    if fmt == COMAPEO:
        return f"{icon}{SVG_SUFFIX}"
    return f"{icon}{LEGACY_ICON_SIZE_SUFFIX}{SVG_SUFFIX}"


def resolve_icon_path(icons_dir: Path, icon_name: str) -> Optional[Path]:
    """Join ``icon_name`` onto ``icons_dir``; ``None`` if the result escapes it."""

    root = icons_dir.resolve()
    candidate = (root / icon_name).resolve()
    if root not in candidate.parents:
        return None
    return candidate


def get_icon(
    icon_path: Union[str, Path],
    *,
    logger: logging.Logger | None = None,
) -> Union[str, dict[str, str]]:
    log = get_logger("mapeo_core.config.icons", logger)
    path = Path(icon_path)
    log.debug("[ICONS] Reading icon %s", path)

    try:
        st = path.stat()
        if not stat.S_ISREG(st.st_mode) or path.suffix != SVG_SUFFIX:
            log.debug("[ICONS] Icon not found or not an SVG file: %s", path)
            return icon_not_found()
        svg = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.debug("[ICONS] Error reading icon %s: %s", path, exc)
        return icon_not_found()

    log.debug("[ICONS] Icon data loaded (%d chars)", len(svg))
    return svg
