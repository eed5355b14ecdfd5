import pytest
from readpulse.mcp.client import ReadPulseClient


@pytest.mark.asyncio
async def test_client_sends_user_header(client, user):
    rp = ReadPulseClient(client, user_id=user["id"])
    result = await rp.get("/api/users/me")
    assert result["id"] == user["id"]


@pytest.mark.asyncio
async def test_client_post_success(client, user):
    """Client.post returns parsed JSON for 201."""
    rp = ReadPulseClient(client, user_id=user["id"])
    result = await rp.post("/api/books", json={"title": "Dune", "author": "Frank Herbert", "total_pages": 412})
    assert result["title"] == "Dune"
    assert result["total_pages"] == 412


@pytest.mark.asyncio
async def test_client_get_404(client, user):
    """Client.get returns error dict for 404."""
    rp = ReadPulseClient(client, user_id=user["id"])
    result = await rp.get("/api/books/999")
    assert result["error"] is True
    assert result["status"] == 404


@pytest.mark.asyncio
async def test_client_unknown_user(client):
    rp = ReadPulseClient(client, user_id=42)
    result = await rp.get("/api/analytics/summary")
    assert result["error"] is True
    assert result["status"] == 401


@pytest.mark.asyncio
async def test_client_delete_204(client, user):
    """Client.delete returns ok dict for 204."""
    rp = ReadPulseClient(client, user_id=user["id"])
    book = await rp.post("/api/books", json={"title": "Temp", "author": "Nobody", "total_pages": 10})
    result = await rp.delete(f"/api/books/{book['id']}")
    assert result == {"ok": True}


@pytest.mark.asyncio
async def test_client_put(client, user):
    rp = ReadPulseClient(client, user_id=user["id"])
    result = await rp.put("/api/users/me", json={"timezone": "Asia/Tokyo"})
    assert result["timezone"] == "Asia/Tokyo"
