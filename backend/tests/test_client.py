import asyncio
import json

import httpx
import pytest

from robot_service.client import FleetClient


def _client(seen):
    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        seen.append((request.method, request.url.path, body))
        if request.url.path == "/start-auto":
            return httpx.Response(200, json={"status": "started", "meters": 1.0, "intervalMs": 60000.0})
        if request.url.path == "/stop-auto":
            return httpx.Response(200, json={"status": "stopped"})
        if request.url.path == "/auto":
            return httpx.Response(200, json={"status": "idle", "ticks": 0})
        if request.url.path == "/boom":
            return httpx.Response(500)
        return httpx.Response(200, json={"robots": [[34.03, -118.25], [34.04, -118.26]]})

    return FleetClient("http://robots.test/", transport=httpx.MockTransport(handler))


def test_calls_and_payloads():
    seen = []

    async def scenario():
        c = _client(seen)
        try:
            assert await c.get_robots() == [(34.03, -118.25), (34.04, -118.26)]
            await c.move()
            await c.move(12.5)
            await c.reset(0)
            assert (await c.start_auto(meters=3, interval_ms=500))["status"] == "started"
            assert await c.stop_auto() == {"status": "stopped"}
            assert (await c.auto_status())["status"] == "idle"
        finally:
            await c.close()

    asyncio.run(scenario())
    assert seen == [
        ("GET", "/robots", None),
        ("POST", "/move", {}),
        ("POST", "/move", {"meters": 12.5}),
        ("POST", "/reset", {"count": 0}),
        ("POST", "/start-auto", {"meters": 3, "intervalMs": 500}),
        ("POST", "/stop-auto", None),
        ("GET", "/auto", None),
    ]


def test_http_errors_raise():
    async def scenario():
        c = _client([])
        try:
            r = await c._client.get("/boom")
            with pytest.raises(httpx.HTTPStatusError):
                c._robots(r)
        finally:
            await c.close()

    asyncio.run(scenario())
