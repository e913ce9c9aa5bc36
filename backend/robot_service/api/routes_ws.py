from __future__ import annotations

import asyncio
import json
import logging
from typing import Iterable, Sequence, Set

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from robot_service.deps import get_fleet, get_hub
from robot_service.services.fleet import Fleet

logger = logging.getLogger("robot_service.ws")
router = APIRouter()


def robots_message(positions: Iterable[Sequence[float]]) -> dict:
    return {"kind": "robots", "data": {"robots": [list(p) for p in positions]}}


class WsHub:
    """Fan-out of fleet snapshots to every connected map client."""

    def __init__(self):
        self._clients: Set[WebSocket] = set()
        self._lock = asyncio.Lock()

    async def connect(self, ws: WebSocket) -> None:
        await ws.accept()
        async with self._lock:
            self._clients.add(ws)

    async def disconnect(self, ws: WebSocket) -> None:
        async with self._lock:
            self._clients.discard(ws)

    @property
    def client_count(self) -> int:
        return len(self._clients)

    async def broadcast(self, message: dict) -> None:
        # Copy references to avoid mutation while iterating
        async with self._lock:
            clients = list(self._clients)
        if not clients:
            return

        logger.debug("Broadcasting %s to %d client(s)", message.get("kind", "?"), len(clients))
        payload = json.dumps(message, ensure_ascii=False)
        dead = []
        for ws in clients:
            try:
                await ws.send_text(payload)
            except Exception:
                dead.append(ws)
        for ws in dead:
            await self.disconnect(ws)

    async def broadcast_robots(self, positions: Iterable[Sequence[float]]) -> None:
        await self.broadcast(robots_message(positions))


@router.websocket("/ws/robots")
async def ws_robots(ws: WebSocket, fleet: Fleet = Depends(get_fleet), hub: WsHub = Depends(get_hub)):
    await hub.connect(ws)
    logger.info("WS connect (%d client(s))", hub.client_count)
    try:
        await ws.send_text(json.dumps(robots_message(fleet.list())))
        while True:
            _ = await ws.receive_text()
    except WebSocketDisconnect:
        logger.info("WS disconnect")
    except Exception:
        logger.info("WS error/disconnect")
    finally:
        await hub.disconnect(ws)
