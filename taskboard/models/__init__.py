"""Database models."""
from taskboard.models.task import Task, TaskPriority

__all__ = [
    "Task",
    "TaskPriority",
]
