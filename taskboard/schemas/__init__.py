"""Schema modules."""
from taskboard.schemas.task import TaskCreate, TaskUpdate, TaskFormData, TaskResponse
from taskboard.schemas.view import (
    PriorityFilter,
    StatusFilter,
    SortField,
    SortDirection,
    TaskListParams,
    TaskCounts,
    TaskListPage,
    ViewOptionsResponse,
)
