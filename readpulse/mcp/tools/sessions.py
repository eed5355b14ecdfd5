from readpulse.mcp.client import ReadPulseClient
from readpulse.mcp.tools.library import resolve_book_id


async def log_session(
    client: ReadPulseClient,
    title: str,
    author: str,
    start_page: int,
    end_page: int,
    start_time: str,
    end_time: str,
) -> dict:
    book_id = await resolve_book_id(client, title, author)
    if isinstance(book_id, dict):
        return book_id
    body = {
        "book_id": book_id,
        "start_page": start_page,
        "end_page": end_page,
        "start_time": start_time,
        "end_time": end_time,
    }
    return await client.post("/api/sessions", json=body)


async def get_sessions(client: ReadPulseClient, title: str, author: str) -> list[dict]:
    book_id = await resolve_book_id(client, title, author)
    if isinstance(book_id, dict):
        return []
    result = await client.get(f"/api/books/{book_id}/sessions")
    if isinstance(result, dict) and result.get("error"):
        return []
    return result
