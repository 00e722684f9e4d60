"""Info route — identity fields and store-backed message count."""

from datetime import datetime


async def test_info_structure(client):
    res = await client.get("/api/info")
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"app", "version", "timestamp", "totalMessages"}
    assert body["app"] == "simple-java-docker"
    assert body["version"] == "1.0.0"
    assert body["totalMessages"] == 0
    datetime.fromisoformat(body["timestamp"])


async def test_info_counts_messages(client):
    for i in range(5):
        await client.post("/api/messages", json={"content": f"m{i}"})
    res = await client.get("/api/info")
    assert res.json()["totalMessages"] == 5


async def test_info_independent_of_counter(client):
    for _ in range(3):
        await client.get("/api/counter")
    await client.post("/api/messages", json={"content": "one"})
    res = await client.get("/api/info")
    assert res.json()["totalMessages"] == 1


async def test_rejected_messages_not_counted(client):
    await client.post("/api/messages", json={"content": None})
    await client.post("/api/messages", json={"content": "x" * 1001})
    res = await client.get("/api/info")
    assert res.json()["totalMessages"] == 0
