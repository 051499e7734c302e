import json
from typing import Optional

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.concurrency import run_in_threadpool
from loguru import logger

router = APIRouter()


def _resolve_user_id(websocket: WebSocket, token: Optional[str]) -> Optional[int]:
    if not token:
        return None
    state = websocket.app.state
    with state.database.SessionLocal() as db:
        user = state.auth_service.user_from_token(db, token)
        return user.id if user else None


@router.websocket("/socket")
async def socket_endpoint(websocket: WebSocket, token: Optional[str] = None):
    hub = websocket.app.state.socket_hub
    user_id = await run_in_threadpool(_resolve_user_id, websocket, token)

    await websocket.accept()
    hub.add(websocket, user_id)
    logger.info("Socket connected user_id={}", user_id)
    try:
        await websocket.send_json({"event": "connected", "data": {"user_id": user_id}})
        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except ValueError:
                await websocket.send_json({"event": "error", "data": {"message": "Invalid JSON"}})
                continue
            if isinstance(message, dict) and message.get("event") == "ping":
                await websocket.send_json({"event": "pong"})
            else:
                logger.debug("Socket message ignored: {}", message)
    except WebSocketDisconnect:
        logger.info("Socket disconnected user_id={}", user_id)
    finally:
        hub.remove(websocket)
