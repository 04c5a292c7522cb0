# tasks_api/services/task_client.py

import requests

from ..config import api_url


class TaskClient:
    def __init__(self, base_url=None, timeout=10):
        self.base_url = (base_url or api_url()).rstrip("/")
        self.timeout = timeout

    def list_tasks(self) -> list:
        """Fetch all tasks from the Tasks API."""
        response = requests.get(f"{self.base_url}/api/tasks", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def add_task(self, title: str) -> dict:
        """Create a task through the Tasks API."""
        payload = {"title": title}
        response = requests.post(f"{self.base_url}/api/tasks", json=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def ping(self) -> dict:
        response = requests.get(f"{self.base_url}/ping", timeout=self.timeout)
        response.raise_for_status()
        return response.json()
