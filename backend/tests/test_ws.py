from fastapi.testclient import TestClient


def test_ws_snapshot_then_updates(client: TestClient):
    client.post("/reset", json={"count": 4})
    with client.websocket_connect("/ws/robots") as ws:
        first = ws.receive_json()
        assert first["kind"] == "robots"
        assert first["data"]["robots"] == client.get("/robots").json()["robots"]

        moved = client.post("/move", json={"meters": 30}).json()["robots"]
        assert ws.receive_json()["data"]["robots"] == moved

        reset = client.post("/reset", json={"count": 2}).json()["robots"]
        msg = ws.receive_json()
        assert msg["data"]["robots"] == reset
        assert len(reset) == 2
