# tasks_api/services/task_store.py

import json
import logging
import os

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """Raised when the tasks file cannot be read, parsed or written."""


class TaskStore:
    """
    Flat JSON file holding every task as one array.

    There is no locking around append(): two concurrent writers can both read
    the same snapshot and the later save wins.
    """

    def __init__(self, path):
        self.path = path

    def load(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise TaskStoreError(f"Could not read tasks from {self.path}: {e}") from e

    def load_or_empty(self):
        records = self.load()
        if records is None:
            return []
        if not isinstance(records, list):
            raise TaskStoreError(f"Tasks file {self.path} does not hold a list")
        return records

    def save(self, records):
        directory = os.path.dirname(self.path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)
        except OSError as e:
            raise TaskStoreError(f"Could not write tasks to {self.path}: {e}") from e

    def append(self, task):
        records = self.load_or_empty()
        records.append(task.to_dict())
        self.save(records)
        logger.debug("Stored task %s (%d total)", task.id, len(records))
        return task
