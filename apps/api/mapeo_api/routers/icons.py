"""SVG icon endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from packages.mapeo_core.config.icons import get_icon, icon_not_found, is_icon_not_found, resolve_icon_path

logger = logging.getLogger("mapeo_api.icons")

router = APIRouter(prefix="/icons", tags=["icons"])


@router.get("/{icon_name}")
def read_icon(icon_name: str, request: Request) -> Response:
    settings = request.app.state.settings
    icon_path = resolve_icon_path(settings.icons_dir, icon_name)
    if icon_path is None:
        logger.warning("[ICONS] Rejected icon name outside icons directory: %s", icon_name)
        return JSONResponse(status_code=404, content=icon_not_found())

    result = get_icon(icon_path, logger=request.app.state.core_logger)
    if is_icon_not_found(result):
        return JSONResponse(status_code=404, content=result)
    return Response(content=result, media_type="image/svg+xml")
