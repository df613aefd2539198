"""Task model."""
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String, Text, Enum as SQLEnum

from taskboard.database import Base


def utcnow() -> datetime:
    """Timezone-aware current time used for store-maintained timestamps."""
    return datetime.now(timezone.utc)


class TaskPriority(str, Enum):
    """Task priority."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        """Ordinal used for sorting: LOW=1, MEDIUM=2, HIGH=3."""
        return _PRIORITY_ORDER.index(self) + 1


# Fixed ascending order; rank is the 1-based position.
_PRIORITY_ORDER = (TaskPriority.LOW, TaskPriority.MEDIUM, TaskPriority.HIGH)


class Task(Base):
    """Task model. Rows are soft-deleted via ``deleted_at``, never removed."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    title = Column("task", String(255), nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(
        SQLEnum(TaskPriority, name="task_priority"),
        nullable=False,
        default=TaskPriority.MEDIUM,
        index=True,
    )
    due_date = Column(Date, nullable=False, index=True)
    status = Column(Boolean, nullable=False, default=False, index=True)
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
