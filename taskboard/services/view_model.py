"""Task list view-model.

Pure computation that turns a task snapshot plus ``TaskListParams`` into the
page of rows to render, the filtered count, the page count and dashboard
counters. Nothing here performs I/O, caches between calls or mutates the
tasks it is given, so identical inputs always produce identical output.

Tasks are read by attribute only (``title``, ``priority``, ``due_date``,
``status``); ORM rows and ``TaskResponse`` objects both work.
"""
from __future__ import annotations

import math
import unicodedata
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Sequence, Tuple

from taskboard.schemas.view import (
    SortDirection,
    SortField,
    TaskCounts,
    TaskListParams,
)


@dataclass(frozen=True)
class TaskListView:
    """Result of one view-model computation."""

    visible_tasks: List[Any]
    total_filtered_count: int
    total_pages: int
    counts: TaskCounts
    page: int
    page_size: int


def matches_filters(task: Any, params: TaskListParams) -> bool:
    """True when ``task`` passes search, priority, status and tab filters."""
    if params.search_text:
        needle = params.search_text.lower()
        if needle not in task.title.lower() and needle not in task.priority.value.lower():
            return False

    if not params.priority_filter.matches(task.priority):
        return False

    if not params.status_filter.matches(task.status):
        return False

    # The tab narrows the status dropdown further; both must pass.
    if params.tab_filter is not None and not params.tab_filter.matches(task.status):
        return False

    return True


def filter_tasks(tasks: Sequence[Any], params: TaskListParams) -> List[Any]:
    """Tasks passing every filter, in input order."""
    return [task for task in tasks if matches_filters(task, params)]


def title_collation_key(title: str) -> Tuple[str, str]:
    """Locale-style collation key for titles.

    Primary level ignores accents and case, so "apple" < "Banana" < "cherry".
    Ties are broken case-sensitively with lowercase first ("a" < "A").
    """
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), title.swapcase()


def _due_date_key(task: Any) -> date:
    due = task.due_date
    return due.date() if isinstance(due, datetime) else due


_SORT_KEYS: Dict[SortField, Callable[[Any], Any]] = {
    SortField.DUE_DATE: _due_date_key,
    SortField.PRIORITY: lambda task: task.priority.rank,
    SortField.TITLE: lambda task: title_collation_key(task.title),
}


def sort_tasks(
    tasks: Sequence[Any],
    sort_field: SortField,
    sort_direction: SortDirection,
) -> List[Any]:
    """Stable sort; equal keys keep their input order in either direction."""
    # sorted() stays stable with reverse=True, so ties are not flipped.
    return sorted(
        tasks,
        key=_SORT_KEYS[sort_field],
        reverse=sort_direction is SortDirection.DESC,
    )


def count_pages(total: int, page_size: int) -> int:
    """ceil(total / page_size); 0 for an empty result."""
    _check_positive("page_size", page_size)
    return math.ceil(total / page_size) if total > 0 else 0


def paginate(tasks: Sequence[Any], page: int, page_size: int) -> List[Any]:
    """Window ``[(page-1)*page_size, page*page_size)``; empty past the end."""
    _check_positive("page", page)
    _check_positive("page_size", page_size)
    start = (page - 1) * page_size
    return list(tasks[start:start + page_size])


def count_tasks(tasks: Sequence[Any]) -> TaskCounts:
    """Total, pending and completed counts over the whole snapshot."""
    completed = sum(1 for task in tasks if task.status)
    return TaskCounts(total=len(tasks), pending=len(tasks) - completed, completed=completed)


def compute_task_list(tasks: Sequence[Any], params: TaskListParams) -> TaskListView:
    """Filter, sort and paginate ``tasks`` according to ``params``."""
    _check_positive("page", params.page)
    _check_positive("page_size", params.page_size)

    filtered = filter_tasks(tasks, params)
    ordered = sort_tasks(filtered, params.sort_field, params.sort_direction)

    return TaskListView(
        visible_tasks=paginate(ordered, params.page, params.page_size),
        total_filtered_count=len(ordered),
        total_pages=count_pages(len(ordered), params.page_size),
        counts=count_tasks(tasks),
        page=params.page,
        page_size=params.page_size,
    )


def toggle_sort(params: TaskListParams, sort_field: SortField) -> TaskListParams:
    """Clicking the active column flips direction; another column sorts ascending."""
    if params.sort_field is sort_field:
        return params.with_changes(sort_direction=params.sort_direction.flipped())
    return params.with_changes(sort_field=sort_field, sort_direction=SortDirection.ASC)


def go_to_page(params: TaskListParams, page: int, total_pages: int) -> TaskListParams:
    """Move to ``page`` if it exists, otherwise keep the current params."""
    if 0 < page <= total_pages:
        return params.with_changes(page=page)
    return params


def _check_positive(name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
