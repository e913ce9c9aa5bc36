from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import httpx

Position = Tuple[float, float]


class FleetClient:
    """Minimal async HTTP client for the robot service.

    The service exposes:
      - GET  /robots      -> {"robots": [[lat, lng], ...]}
      - POST /move        -> step all robots
      - POST /reset       -> re-spawn robots
      - POST /start-auto  -> arm auto-stepping
      - POST /stop-auto   -> cancel auto-stepping
      - GET  /auto        -> auto-step status
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:4000",
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        # Single shared client for all calls
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    @staticmethod
    def _robots(r: httpx.Response) -> List[Position]:
        r.raise_for_status()
        return [(float(p[0]), float(p[1])) for p in r.json()["robots"]]

    async def get_robots(self) -> List[Position]:
        return self._robots(await self._client.get("/robots"))

    async def move(self, meters: Optional[float] = None) -> List[Position]:
        body = {} if meters is None else {"meters": meters}
        return self._robots(await self._client.post("/move", json=body))

    async def reset(self, count: Optional[int] = None) -> List[Position]:
        body = {} if count is None else {"count": count}
        return self._robots(await self._client.post("/reset", json=body))

    async def start_auto(self, meters: Optional[float] = None, interval_ms: Optional[float] = None) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if meters is not None:
            body["meters"] = meters
        if interval_ms is not None:
            body["intervalMs"] = interval_ms
        r = await self._client.post("/start-auto", json=body)
        r.raise_for_status()
        return r.json()

    async def stop_auto(self) -> Dict[str, Any]:
        r = await self._client.post("/stop-auto")
        r.raise_for_status()
        return r.json()

    async def auto_status(self) -> Dict[str, Any]:
        r = await self._client.get("/auto")
        r.raise_for_status()
        return r.json()

    async def close(self) -> None:
        await self._client.aclose()
