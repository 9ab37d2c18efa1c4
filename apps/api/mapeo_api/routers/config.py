"""Configuration read endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from packages.mapeo_core.config.aggregate import FIELDS_DIR, MESSAGES_DIR, PRESETS_DIR, get_config
from packages.mapeo_core.config.fields import get_fields
from packages.mapeo_core.config.messages import get_messages
from packages.mapeo_core.config.presets import get_presets
from packages.mapeo_core.config.simple_files import get_defaults, get_metadata, get_stylesheet

from ..settings import ApiSettings

logger = logging.getLogger("mapeo_api.config")

router = APIRouter(tags=["config"])


def _settings(request: Request) -> ApiSettings:
    return request.app.state.settings


def _core_logger(request: Request) -> logging.Logger | None:
    return request.app.state.core_logger


def request_origin(request: Request, settings: ApiSettings) -> tuple[str, str, int]:
    """Protocol, hostname and port that icon URLs should point back at."""

    protocol = request.url.scheme
    hostname = request.url.hostname or "localhost"
    port = settings.public_port or request.url.port or (443 if protocol == "https" else 80)
    return protocol, hostname, port


@router.get("/api/config")
def read_config(request: Request) -> dict[str, Any]:
    settings = _settings(request)
    protocol, hostname, port = request_origin(request, settings)
    config = get_config(
        settings.config_dir,
        protocol,
        hostname,
        port,
        logger=_core_logger(request),
    )
    logger.info(
        "[CONFIG] Served %s configuration (%d presets)",
        config["_format"],
        len(config["presets"]),
    )
    return config


@router.get("/api/presets")
def read_presets(request: Request) -> list[dict[str, Any]]:
    settings = _settings(request)
    protocol, hostname, port = request_origin(request, settings)
    return get_presets(
        settings.config_dir / PRESETS_DIR,
        protocol,
        hostname,
        port,
        logger=_core_logger(request),
    )


@router.get("/api/fields")
def read_fields(request: Request) -> list[dict[str, Any]]:
    return get_fields(_settings(request).config_dir / FIELDS_DIR, logger=_core_logger(request))


@router.get("/api/messages")
def read_messages(request: Request) -> dict[str, Any]:
    return get_messages(_settings(request).config_dir / MESSAGES_DIR, logger=_core_logger(request))


@router.get("/api/defaults")
def read_defaults(request: Request) -> Any:
    return get_defaults(_settings(request).config_dir, logger=_core_logger(request))


@router.get("/api/metadata")
def read_metadata(request: Request) -> Any:
    return get_metadata(_settings(request).config_dir, logger=_core_logger(request))


@router.get("/api/stylesheet", response_class=PlainTextResponse)
def read_stylesheet(request: Request) -> PlainTextResponse:
    css = get_stylesheet(_settings(request).config_dir, logger=_core_logger(request))
    return PlainTextResponse(css, media_type="text/css")


@router.get("/path")
def config_path(request: Request) -> dict[str, str]:
    return {"data": str(_settings(request).config_dir)}
