"""WebSocket channel for configuration change notifications."""

from __future__ import annotations

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

router = APIRouter(tags=["updates"])


@router.websocket("/ws/updates")
async def updates_socket(websocket: WebSocket) -> None:
    broadcaster = websocket.app.state.broadcaster
    await broadcaster.connect(websocket)
    try:
        while True:
            # Clients only listen; inbound frames keep the connection alive.
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        broadcaster.disconnect(websocket)
