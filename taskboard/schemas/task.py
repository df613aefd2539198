"""Task schemas."""
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from taskboard.models.task import TaskPriority

TITLE_MIN_LENGTH = 2
TITLE_MAX_LENGTH = 255


def _coerce_due_date(value: Any) -> Any:
    """Drop the time-of-day part; due dates compare by calendar date only."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            return value
    return value


class TaskBase(BaseModel):
    """Base task schema."""

    title: str = Field(min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = ""
    priority: TaskPriority
    due_date: date
    status: bool = False

    @field_validator("due_date", mode="before")
    @classmethod
    def _due_date_as_date(cls, value):
        return _coerce_due_date(value)

    @field_validator("description")
    @classmethod
    def _description_default(cls, value):
        return value or ""


class TaskCreate(TaskBase):
    """Task creation schema."""

    pass


class TaskUpdate(BaseModel):
    """Task update schema. Only explicitly set fields are written."""

    title: Optional[str] = Field(default=None, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None
    status: Optional[bool] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def _due_date_as_date(cls, value):
        return _coerce_due_date(value)

    @field_validator("title", "priority", "due_date", "status")
    @classmethod
    def _not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class TaskFormData(TaskBase):
    """Values submitted from the task form; ``id`` is present when editing."""

    id: Optional[int] = Field(default=None, gt=0)


class TaskResponse(BaseModel):
    """Task response schema."""

    id: int
    title: str
    description: str = ""
    priority: TaskPriority
    due_date: date
    status: bool
    deleted_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("description", mode="before")
    @classmethod
    def _description_default(cls, value):
        return value or ""

    class Config:
        from_attributes = True
