from readpulse.mcp.client import ReadPulseClient
from readpulse.mcp.server import create_mcp_server


def test_mcp_server_created(client):
    rp = ReadPulseClient(client, user_id=1)
    mcp = create_mcp_server(rp)
    assert mcp.name == "readpulse"
