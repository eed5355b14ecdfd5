from readpulse.mcp.client import ReadPulseClient
from readpulse.mcp.tools.library import resolve_book_id


async def _scope_params(
    client: ReadPulseClient,
    title: str | None,
    author: str | None,
    start_date: str | None,
    end_date: str | None,
) -> dict:
    """Query params for an analytics scope, or an error dict."""
    if (title is None) != (author is None):
        return {"error": True, "status": 400, "detail": "Provide both title and author to filter by book"}
    params = {}
    if title is not None:
        book_id = await resolve_book_id(client, title, author)
        if isinstance(book_id, dict):
            return book_id
        params["book_id"] = book_id
    if start_date is not None:
        params["start_date"] = start_date
    if end_date is not None:
        params["end_date"] = end_date
    return params


async def _analytics(client: ReadPulseClient, view: str, **scope) -> dict:
    params = await _scope_params(client, **scope)
    if params.get("error"):
        return params
    return await client.get(f"/api/analytics/{view}", params=params)


async def speed_by_hour(
    client: ReadPulseClient,
    title: str | None = None,
    author: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> dict:
    return await _analytics(
        client, "speed", title=title, author=author, start_date=start_date, end_date=end_date
    )


async def reading_velocity(
    client: ReadPulseClient,
    title: str | None = None,
    author: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> dict:
    return await _analytics(
        client, "velocity", title=title, author=author, start_date=start_date, end_date=end_date
    )


async def reading_summary(
    client: ReadPulseClient,
    title: str | None = None,
    author: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> dict:
    return await _analytics(
        client, "summary", title=title, author=author, start_date=start_date, end_date=end_date
    )
