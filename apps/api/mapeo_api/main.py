"""FastAPI entrypoint for the Mapeo config renderer API."""

from __future__ import annotations

import asyncio
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from packages.mapeo_core.config.errors import ConfigError
from packages.mapeo_core.config.log import verbose_logger

from .routers.config import router as config_router
from .routers.icons import router as icons_router
from .routers.updates import router as updates_router
from .services.change_notifier import ConfigWatcher, UpdateBroadcaster
from .settings import ApiSettings, settings_from_env

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("mapeo_api")


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    settings = settings or settings_from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("[STARTUP] Serving configuration from %s", settings.config_dir)
        if settings.watch:
            app.state.watcher.start(asyncio.get_running_loop())
        else:
            logger.info("[STARTUP] File watching is disabled")
        try:
            yield
        finally:
            app.state.watcher.stop()

    app = FastAPI(title="Mapeo Config Renderer API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.core_logger = verbose_logger() if settings.debug else None
    app.state.broadcaster = UpdateBroadcaster()
    app.state.watcher = ConfigWatcher(
        settings.config_dir,
        app.state.broadcaster,
        debounce_seconds=settings.watch_debounce_seconds,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
    )
    app.include_router(config_router)
    app.include_router(icons_router)
    app.include_router(updates_router)

    @app.exception_handler(ConfigError)
    async def _config_error_handler(request: Request, exc: ConfigError):
        logger.error("[CONFIG] %s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc), "code": exc.error_code},
        )

    @app.get("/healthz")
    def healthz() -> dict[str, str]:
        logger.debug("[HEALTH] Health check requested")
        return {"status": "ok"}

    return app


app = create_app()
