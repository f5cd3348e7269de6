"""WebSocket endpoint for real-time bus position updates."""

import asyncio
import logging

import orjson
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)

router = APIRouter()

# Will be set by main.py on startup
broadcaster = None
tracker = None


@router.websocket("/ws/buses")
async def bus_ws(websocket: WebSocket) -> None:
    """Stream live bus position updates, starting with a full snapshot."""
    await websocket.accept()

    if broadcaster is None or tracker is None:
        await websocket.close(code=1011, reason="Service not ready")
        return

    await websocket.send_bytes(orjson.dumps({"type": "snapshot", "buses": tracker.snapshot()}))

    queue = broadcaster.subscribe()
    try:
        while True:
            data = await queue.get()
            await websocket.send_bytes(data)
    except WebSocketDisconnect:
        pass
    except asyncio.CancelledError:
        pass
    except Exception:
        logger.exception("WebSocket error")
    finally:
        broadcaster.unsubscribe(queue)
