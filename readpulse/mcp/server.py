from fastmcp import FastMCP

from readpulse.mcp.client import ReadPulseClient
from readpulse.mcp.tools.analytics import (
    reading_summary as _reading_summary,
    reading_velocity as _reading_velocity,
    speed_by_hour as _speed_by_hour,
)
from readpulse.mcp.tools.library import add_book as _add_book, list_books as _list_books
from readpulse.mcp.tools.sessions import get_sessions as _get_sessions, log_session as _log_session


def create_mcp_server(client: ReadPulseClient) -> FastMCP:
    mcp = FastMCP(
        name="readpulse",
        instructions=(
            "ReadPulse tracks reading sessions and reports reading speed. Use these "
            "tools to register books, log timed reading sessions, and see how fast "
            "you read by hour of day and over time. Books are identified by title "
            "and author."
        ),
    )

    @mcp.tool()
    async def add_book(title: str, author: str, total_pages: int, status: str | None = None) -> dict:
        """Add a book with its total page count. Status is one of READING,
        COMPLETED, PAUSED, DROPPED or WISHLIST (default READING)."""
        return await _add_book(client, title=title, author=author, total_pages=total_pages, status=status)

    @mcp.tool()
    async def list_books(status: str | None = None, limit: int = 50) -> dict:
        """List your books, newest first, optionally filtered by status."""
        return await _list_books(client, status=status, limit=limit)

    @mcp.tool()
    async def log_session(
        title: str,
        author: str,
        start_page: int,
        end_page: int,
        start_time: str,
        end_time: str,
    ) -> dict:
        """Log a reading session. Times are ISO 8601 instants, e.g.
        2025-03-01T20:15:00+05:30. Returns pages read, duration and speed."""
        return await _log_session(
            client, title=title, author=author,
            start_page=start_page, end_page=end_page,
            start_time=start_time, end_time=end_time,
        )

    @mcp.tool()
    async def get_sessions(title: str, author: str) -> list[dict]:
        """Get all logged sessions of a book in chronological order."""
        return await _get_sessions(client, title=title, author=author)

    @mcp.tool()
    async def speed_by_hour(
        title: str | None = None,
        author: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> dict:
        """Average reading speed (pages/hour) for each local hour of day in
        which sessions started. Optionally limit to one book or a date range."""
        return await _speed_by_hour(client, title=title, author=author, start_date=start_date, end_date=end_date)

    @mcp.tool()
    async def reading_velocity(
        title: str | None = None,
        author: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> dict:
        """Compare recent reading speed against your overall average and
        report whether it is increasing, decreasing or stable."""
        return await _reading_velocity(client, title=title, author=author, start_date=start_date, end_date=end_date)

    @mcp.tool()
    async def reading_summary(
        title: str | None = None,
        author: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> dict:
        """Totals: sessions, books, pages read, reading time, average speed
        and average session length."""
        return await _reading_summary(client, title=title, author=author, start_date=start_date, end_date=end_date)

    return mcp
