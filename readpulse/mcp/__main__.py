import os
import subprocess
import sys
from pathlib import Path

from httpx import ASGITransport, AsyncClient

from readpulse.app import create_app
from readpulse.mcp.client import ReadPulseClient
from readpulse.mcp.server import create_mcp_server


def run_migrations():
    """Run Alembic migrations before starting the MCP server."""
    db_path = os.environ.get("READPULSE_DB_PATH", "readpulse.db")
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        capture_output=False,
    )
    if result.returncode != 0:
        sys.exit(1)


def main():
    user_id = os.environ.get("READPULSE_USER_ID")
    if not user_id:
        sys.exit("READPULSE_USER_ID must be set to the id of an existing user")

    run_migrations()

    app = create_app()
    transport = ASGITransport(app=app)
    http = AsyncClient(transport=transport, base_url="http://localhost")
    client = ReadPulseClient(http, user_id=int(user_id))
    mcp = create_mcp_server(client)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
