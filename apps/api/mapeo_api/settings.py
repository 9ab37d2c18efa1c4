"""Environment-driven settings for the Mapeo config API."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import os

DEFAULT_DEBOUNCE_SECONDS = 1.0


def _truthy_env(name: str, default: bool = False) -> bool:
    raw = str(os.environ.get(name) or "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _first_non_empty(*values: str | None) -> str | None:
    for value in values:
        if value and value.strip():
            return value.strip()
    return None


def _float_env(name: str, default: float) -> float:
    raw = _first_non_empty(os.environ.get(name))
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


@dataclass(frozen=True)
class ApiSettings:
    config_dir: Path
    debug: bool = False
    watch: bool = True
    watch_debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    public_port: int | None = None

    @property
    def icons_dir(self) -> Path:
        return self.config_dir / "icons"


def settings_from_env() -> ApiSettings:
    config_dir = _first_non_empty(os.environ.get("MAPEO_CONFIG_DIR")) or "."
    origins = [o.strip() for o in (os.environ.get("MAPEO_CORS_ORIGINS") or "*").split(",") if o.strip()]
    port_raw = _first_non_empty(os.environ.get("MAPEO_PUBLIC_PORT"))
    public_port = int(port_raw) if port_raw and port_raw.isdigit() else None
    return ApiSettings(
        config_dir=Path(config_dir),
        debug=_truthy_env("MAPEO_DEBUG", default=False),
        watch=_truthy_env("MAPEO_WATCH", default=True),
        watch_debounce_seconds=_float_env("MAPEO_WATCH_DEBOUNCE_SECONDS", DEFAULT_DEBOUNCE_SECONDS),
        cors_origins=origins or ["*"],
        public_port=public_port,
    )
