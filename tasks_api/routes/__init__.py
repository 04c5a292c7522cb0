from .ping import ping_bp
from .tasks import tasks_bp

__all__ = ["ping_bp", "tasks_bp"]
