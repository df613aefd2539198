"""Tasks API endpoints."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.config import settings
from taskboard.database import get_db
from taskboard.dependencies import get_locale
from taskboard.schemas.task import TaskResponse, TaskUpdate
from taskboard.schemas.view import (
    PriorityFilter,
    SortDirection,
    SortField,
    StatusFilter,
    TaskListPage,
    TaskListParams,
)
from taskboard.services.pagination import page_window
from taskboard.services.task_editor import task_editor
from taskboard.services.task_store import task_store
from taskboard.services.view_model import compute_task_list

router = APIRouter()


@router.get("", response_model=TaskListPage)
async def list_tasks(
    search: str = Query(default="", max_length=255, description="Match task name or priority"),
    priority: PriorityFilter = Query(default=PriorityFilter.ALL),
    status_filter: StatusFilter = Query(default=StatusFilter.ALL, alias="status"),
    tab: Optional[StatusFilter] = Query(default=None, description="Secondary status tab"),
    sort_field: SortField = Query(default=SortField.DUE_DATE),
    sort_direction: SortDirection = Query(default=SortDirection.ASC),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
):
    """Filtered, sorted and paginated task list with dashboard counters."""
    params = TaskListParams(
        search_text=search,
        priority_filter=priority,
        status_filter=status_filter,
        tab_filter=tab,
        sort_field=sort_field,
        sort_direction=sort_direction,
        page=page,
        page_size=page_size,
    )
    tasks = await task_store.list_active_tasks(db, locale=locale)
    view = compute_task_list(tasks, params)

    return TaskListPage(
        items=[TaskResponse.model_validate(t) for t in view.visible_tasks],
        total_filtered_count=view.total_filtered_count,
        total_pages=view.total_pages,
        page=view.page,
        page_size=view.page_size,
        counts=view.counts,
        page_links=page_window(view.page, view.total_pages),
    )


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_in: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
):
    """Create a task from the editor form."""
    values = {k: v for k, v in task_in.items() if k != "id"}
    form = task_editor.build_form_data(values, locale=locale)
    return await task_editor.submit(db, form, locale=locale)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int = Path(..., ge=1),
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
):
    """Get an active task by ID."""
    return await task_store.get_task(db, task_id, locale=locale)


@router.put("/{task_id}", response_model=TaskResponse)
async def replace_task(
    task_in: Dict[str, Any] = Body(...),
    task_id: int = Path(..., ge=1),
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
):
    """Save the edit form of an existing task."""
    form = task_editor.build_form_data({**task_in, "id": task_id}, locale=locale)
    return await task_editor.submit(db, form, locale=locale)


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_in: TaskUpdate,
    task_id: int = Path(..., ge=1),
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
):
    """Partially update a task."""
    return await task_store.update_task(db, task_id, task_in, locale=locale)


@router.post("/{task_id}/complete", response_model=TaskResponse)
async def complete_task(
    task_id: int = Path(..., ge=1),
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
):
    """Mark a task as completed."""
    return await task_store.complete_task(db, task_id, locale=locale)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: int = Path(..., ge=1),
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
):
    """Soft-delete a task."""
    await task_store.soft_delete_task(db, task_id, locale=locale)
