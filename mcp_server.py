"""
MCP Server wrapping the Tasks API (`mcp_server.py`)
"""

from mcp.server.fastmcp import FastMCP
from tasks_api.services.task_client import TaskClient

# Initialize MCP server
mcp = FastMCP("Tasks API MCP Server")
client = TaskClient()


@mcp.resource("tasks://list")
def list_tasks() -> list:
    """Fetch all tasks from the Tasks API."""
    return client.list_tasks()


@mcp.tool()
def add_task(title: str) -> dict:
    """Add a new task via the Tasks API."""
    return client.add_task(title)


if __name__ == "__main__":
    # stdio transport for local clients
    mcp.run(transport="stdio")
