import os

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

DEFAULT_DATA_PATH = os.path.join(BASE_DIR, "data", "tasks.json")
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


class Config:
    """Defaults for the Flask app, overridable through TASKS_* env variables."""

    DATA_PATH = os.getenv("TASKS_DATA_PATH", DEFAULT_DATA_PATH)
    HOST = os.getenv("TASKS_HOST", DEFAULT_HOST)
    PORT = int(os.getenv("TASKS_PORT", DEFAULT_PORT))


def api_url():
    """Base URL the client and MCP server talk to."""
    return os.getenv("TASKS_API_URL", f"http://localhost:{Config.PORT}")
