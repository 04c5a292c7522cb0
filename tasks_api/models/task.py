from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional


def _iso_millis(moment: datetime) -> str:
    # 2024-05-01T12:00:00.123Z
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Task:
    id: int
    title: Any
    completed: bool
    created_at: str

    @classmethod
    def create(cls, title: Any, now: Optional[datetime] = None) -> "Task":
        """Build a new, not yet completed task stamped with the current time."""
        if now is None:
            now = datetime.now(timezone.utc)
        return cls(
            id=int(now.timestamp()) * 1000 + now.microsecond // 1000,
            title=title,
            completed=False,
            created_at=_iso_millis(now),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        return cls(
            id=data.get("id"),
            title=data.get("title"),
            completed=data.get("completed", False),
            created_at=data.get("createdAt"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "createdAt": self.created_at,
        }
