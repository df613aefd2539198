"""Task list view schemas: filter/sort/pagination parameters and page payloads."""
from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from taskboard.config import settings
from taskboard.models.task import TaskPriority
from taskboard.schemas.task import TaskResponse


class PriorityFilter(str, Enum):
    """Priority filter; ALL disables it."""

    ALL = "ALL"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    def matches(self, priority: TaskPriority) -> bool:
        return self is PriorityFilter.ALL or self.value == priority.value


class StatusFilter(str, Enum):
    """Completion filter, used both for the status dropdown and the tabs."""

    ALL = "ALL"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"

    def matches(self, status: bool) -> bool:
        if self is StatusFilter.COMPLETED:
            return bool(status)
        if self is StatusFilter.PENDING:
            return not status
        return True


class SortField(str, Enum):
    """Sortable columns."""

    DUE_DATE = "due_date"
    PRIORITY = "priority"
    TITLE = "title"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


# Changing any of these moves the list back to the first page.
_PAGE_RESETTING_FIELDS = frozenset(
    {"search_text", "priority_filter", "status_filter", "tab_filter", "page_size"}
)


class TaskListParams(BaseModel):
    """Immutable view parameters for one task list computation."""

    search_text: str = ""
    priority_filter: PriorityFilter = PriorityFilter.ALL
    status_filter: StatusFilter = StatusFilter.ALL
    tab_filter: Optional[StatusFilter] = None
    sort_field: SortField = SortField.DUE_DATE
    sort_direction: SortDirection = SortDirection.ASC
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default_factory=lambda: settings.DEFAULT_PAGE_SIZE, ge=1)

    class Config:
        frozen = True
        extra = "forbid"

    def with_changes(self, **changes: Any) -> "TaskListParams":
        """Return a copy with ``changes`` applied.

        The page resets to 1 when a filter or the page size changes,
        unless ``page`` is part of ``changes``.
        """
        values = self.model_dump()
        values.update(changes)
        if "page" not in changes and any(
            name in _PAGE_RESETTING_FIELDS and value != getattr(self, name)
            for name, value in changes.items()
        ):
            values["page"] = 1
        return TaskListParams(**values)


class TaskCounts(BaseModel):
    """Dashboard counters over the unfiltered task set."""

    total: int = 0
    pending: int = 0
    completed: int = 0


class TaskListPage(BaseModel):
    """Task list page response."""

    items: List[TaskResponse]
    total_filtered_count: int
    total_pages: int
    page: int
    page_size: int
    counts: TaskCounts
    page_links: List[int] = Field(default_factory=list)


class LabeledOption(BaseModel):
    """Value with its localized label."""

    value: str
    label: str


class ViewOptionsResponse(BaseModel):
    """Options the task list UI renders in its filter and sort controls."""

    locale: str
    priorities: List[LabeledOption]
    statuses: List[LabeledOption]
    sort_fields: List[LabeledOption]
    page_size_options: List[int]
    default_page_size: int
    max_page_links: int
