from __future__ import annotations
from typing import Any, Dict, Optional, Set, Tuple

from fastapi import WebSocket
from loguru import logger


class SocketHub:
    """
    실시간 알림용 WebSocket 연결 관리.
    연결은 (user_id, websocket) 쌍으로 보관하며 익명 연결은 user_id=None.
    """

    def __init__(self):
        self.connections: Set[Tuple[Optional[int], WebSocket]] = set()

    def add(self, websocket: WebSocket, user_id: Optional[int] = None) -> None:
        self.connections.add((user_id, websocket))
        logger.debug("[SocketHub] added connection user_id={} total={}", user_id, len(self.connections))

    def remove(self, websocket: WebSocket) -> None:
        self.connections = {c for c in self.connections if c[1] is not websocket}
        logger.debug("[SocketHub] removed connection total={}", len(self.connections))

    def count(self, user_id: Optional[int] = None) -> int:
        if user_id is None:
            return len(self.connections)
        return sum(1 for uid, _ in self.connections if uid == user_id)

    async def _send(self, targets, message: Dict[str, Any]) -> int:
        sent = 0
        dead = []
        for websocket in targets:
            try:
                await websocket.send_json(message)
                sent += 1
            except Exception as e:
                logger.warning("[SocketHub] send failed, dropping connection: {}", e)
                dead.append(websocket)
        for websocket in dead:
            self.remove(websocket)
        return sent

    async def notify(self, user_id: int, event: str, data: Dict[str, Any]) -> int:
        targets = [ws for uid, ws in list(self.connections) if uid == user_id]
        return await self._send(targets, {"event": event, "data": data})

    async def broadcast(self, event: str, data: Dict[str, Any]) -> int:
        targets = [ws for _, ws in list(self.connections)]
        return await self._send(targets, {"event": event, "data": data})
