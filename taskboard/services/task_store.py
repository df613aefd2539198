"""Task store: the persistence boundary for tasks."""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.exceptions import NotFoundError, StoreError
from taskboard.crud.task import task as task_crud
from taskboard.localization.helpers import get_translation
from taskboard.middleware.metrics import task_operations_total
from taskboard.models.task import Task
from taskboard.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskStore:
    """Create, read, update and soft-delete tasks.

    Failures of the underlying database surface as ``StoreError``; unknown or
    soft-deleted ids surface as ``NotFoundError``. Nothing is retried.
    """

    @staticmethod
    async def list_active_tasks(db: AsyncSession, *, locale: str = "en") -> List[Task]:
        """Return every task that is not soft-deleted, newest first."""
        try:
            return await task_crud.list_active(db)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching tasks: {e}", exc_info=True)
            raise StoreError("fetch", locale=locale) from e

    @staticmethod
    async def get_task(db: AsyncSession, task_id: int, *, locale: str = "en") -> Task:
        """Return a single active task."""
        try:
            task_obj = await task_crud.get_active(db, id=task_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching task {task_id}: {e}", exc_info=True)
            raise StoreError("fetch", locale=locale) from e

        if task_obj is None:
            raise NotFoundError(
                get_translation("errors.task_not_found", locale, task_id=task_id),
                locale=locale,
            )
        return task_obj

    @staticmethod
    async def create_task(db: AsyncSession, fields: TaskCreate, *, locale: str = "en") -> Task:
        """Persist a new task; the store assigns id and timestamps."""
        try:
            task_obj = await task_crud.create(db, obj_in=fields)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error creating task: {e}", exc_info=True)
            raise StoreError("write", locale=locale) from e

        task_operations_total.labels(operation="create").inc()
        logger.info(f"Created task {task_obj.id}", extra={"task_id": task_obj.id})
        return task_obj

    @staticmethod
    async def update_task(
        db: AsyncSession,
        task_id: int,
        fields: TaskUpdate,
        *,
        locale: str = "en",
    ) -> Task:
        """Apply a partial update to an active task."""
        task_obj = await TaskStore.get_task(db, task_id, locale=locale)
        try:
            task_obj = await task_crud.update(db, db_obj=task_obj, obj_in=fields)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error updating task {task_id}: {e}", exc_info=True)
            raise StoreError("write", locale=locale) from e

        task_operations_total.labels(operation="update").inc()
        logger.info(
            f"Updated task {task_id}",
            extra={"task_id": task_id, "fields": sorted(fields.model_fields_set)},
        )
        return task_obj

    @staticmethod
    async def complete_task(db: AsyncSession, task_id: int, *, locale: str = "en") -> Task:
        """Mark an active task as completed."""
        return await TaskStore.update_task(db, task_id, TaskUpdate(status=True), locale=locale)

    @staticmethod
    async def soft_delete_task(db: AsyncSession, task_id: int, *, locale: str = "en") -> Task:
        """Set ``deleted_at``; the row itself is never removed."""
        task_obj = await TaskStore.get_task(db, task_id, locale=locale)
        try:
            task_obj = await task_crud.soft_delete(db, db_obj=task_obj)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error deleting task {task_id}: {e}", exc_info=True)
            raise StoreError("write", locale=locale) from e

        task_operations_total.labels(operation="delete").inc()
        logger.info(f"Soft-deleted task {task_id}", extra={"task_id": task_id})
        return task_obj


task_store = TaskStore()
