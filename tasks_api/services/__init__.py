from .task_client import TaskClient
from .task_store import TaskStore, TaskStoreError

__all__ = ["TaskClient", "TaskStore", "TaskStoreError"]
