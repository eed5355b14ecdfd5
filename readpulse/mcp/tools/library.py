from readpulse.mcp.client import ReadPulseClient


async def resolve_book_id(client: ReadPulseClient, title: str, author: str) -> int | dict:
    """Look up a book by exact title and author. Returns its id, or an
    error dict when no such book exists. Newest wins on duplicates."""
    result = await client.get("/api/books", params={"title": title, "author": author, "limit": 1})
    if isinstance(result, dict) and result.get("error"):
        return result
    if not result["books"]:
        return {"error": True, "status": 404, "detail": f"No book '{title}' by {author}"}
    return result["books"][0]["id"]


async def add_book(
    client: ReadPulseClient,
    title: str,
    author: str,
    total_pages: int,
    status: str | None = None,
) -> dict:
    body = {"title": title, "author": author, "total_pages": total_pages}
    if status is not None:
        body["status"] = status.upper()
    return await client.post("/api/books", json=body)


async def list_books(
    client: ReadPulseClient,
    status: str | None = None,
    limit: int = 50,
) -> dict:
    params = {"limit": limit}
    if status is not None:
        params["status"] = status.upper()
    return await client.get("/api/books", params=params)
