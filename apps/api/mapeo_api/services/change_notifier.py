"""File-watch driven update notifications for connected clients.

A ``watchdog`` observer reports changes under the configuration directory,
a trailing-edge debouncer collapses bursts of events into one, and the
broadcaster pushes an update event to every connected WebSocket so clients
refetch the configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional
import asyncio
import logging
import threading

from fastapi import WebSocket
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

logger = logging.getLogger("mapeo_api.change_notifier")

UPDATE_EVENT = {"event": "presets:update", "message": "Presets updated"}


def is_ignored_path(path: str, root: Optional[Path] = None) -> bool:
    """Dotfiles and anything inside a dot-directory are ignored."""

    candidate = Path(path)
    if root is not None:
        try:
            candidate = candidate.relative_to(root)
        except ValueError:
            pass
    return any(part.startswith(".") and part not in {".", ".."} for part in candidate.parts)


class UpdateBroadcaster:
    def __init__(self) -> None:
        self._clients: set[WebSocket] = set()

    @property
    def client_count(self) -> int:
        return len(self._clients)

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self._clients.add(websocket)
        logger.info("[WATCH] Client connected (%d total)", len(self._clients))

    def disconnect(self, websocket: WebSocket) -> None:
        self._clients.discard(websocket)
        logger.info("[WATCH] Client disconnected (%d total)", len(self._clients))

    async def broadcast(self, payload: dict[str, Any]) -> int:
        sent = 0
        for websocket in list(self._clients):
            try:
                await websocket.send_json(payload)
                sent += 1
            except Exception as exc:
                logger.debug("[WATCH] Dropping client after send failure: %s", exc)
                self.disconnect(websocket)
        return sent


class ChangeDebouncer:
    """Run ``callback`` once, ``delay_seconds`` after the last of a burst of triggers."""

    def __init__(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        self.delay_seconds = delay_seconds
        self._callback = callback
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def trigger(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            timer = threading.Timer(self.delay_seconds, lambda: self._fire(timer))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _fire(self, timer: threading.Timer) -> None:
        with self._lock:
            # A newer trigger replaced this timer after it had already started.
            if self._timer is not timer:
                return
            self._timer = None
        try:
            self._callback()
        except Exception as exc:
            logger.error("[WATCH] Update callback failed: %s", exc)


class _ConfigEventHandler(FileSystemEventHandler):
    def __init__(self, root: Path, on_change: Callable[[str], None]) -> None:
        super().__init__()
        self._root = root
        self._on_change = on_change

    def _handle(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        path = str(event.src_path)
        if is_ignored_path(path, self._root):
            return
        self._on_change(path)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._handle(event)

    def on_created(self, event: FileSystemEvent) -> None:
        self._handle(event)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._handle(event)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._handle(event)


class ConfigWatcher:
    """Watch ``config_dir`` and broadcast a debounced update event on change."""

    def __init__(
        self,
        config_dir: Path,
        broadcaster: UpdateBroadcaster,
        *,
        debounce_seconds: float = 1.0,
    ) -> None:
        self.config_dir = config_dir.resolve()
        self.broadcaster = broadcaster
        self.debouncer = ChangeDebouncer(debounce_seconds, self._notify)
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._observer: Optional[Any] = None

    @property
    def running(self) -> bool:
        return self._observer is not None

    def file_changed(self, path: str) -> None:
        logger.info("[WATCH] File %s has been changed", path)
        self.debouncer.trigger()

    def _notify(self) -> None:
        if self._loop is None or self._loop.is_closed():
            return
        asyncio.run_coroutine_threadsafe(self.broadcaster.broadcast(UPDATE_EVENT), self._loop)

    def start(self, loop: asyncio.AbstractEventLoop) -> bool:
        if self._observer is not None:
            return True
        if not self.config_dir.is_dir():
            logger.warning("[WATCH] Not watching missing directory %s", self.config_dir)
            return False
        self._loop = loop
        observer = Observer()
        observer.schedule(
            _ConfigEventHandler(self.config_dir, self.file_changed),
            str(self.config_dir),
            recursive=True,
        )
        observer.daemon = True
        observer.start()
        self._observer = observer
        logger.info("[WATCH] Watching %s", self.config_dir)
        return True

    def stop(self) -> None:
        self.debouncer.cancel()
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join(timeout=5)
        self._observer = None
        logger.info("[WATCH] Stopped watching %s", self.config_dir)
