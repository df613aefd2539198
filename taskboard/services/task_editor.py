"""Task editor: validates form values and dispatches them to the task store."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.exceptions import ValidationError
from taskboard.models.task import Task, TaskPriority
from taskboard.schemas.task import TaskCreate, TaskFormData, TaskUpdate
from taskboard.services.task_store import task_store


def _error_list(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


class TaskEditor:
    """Form-side handling of a single task."""

    @staticmethod
    def default_form_values(today: Optional[date] = None) -> Dict[str, Any]:
        """Initial values of an empty "new task" form."""
        return {
            "title": "",
            "description": "",
            "priority": TaskPriority.MEDIUM,
            "due_date": today or date.today(),
            "status": False,
        }

    @staticmethod
    def is_selectable_due_date(day: date, today: Optional[date] = None) -> bool:
        """Date-picker rule for new tasks: past days are disabled.

        Only the picker applies this; the store accepts any date.
        """
        return day >= (today or date.today())

    @staticmethod
    def build_form_data(values: Mapping[str, Any], *, locale: str = "en") -> TaskFormData:
        """Validate raw form values."""
        try:
            return TaskFormData.model_validate(dict(values))
        except PydanticValidationError as e:
            raise ValidationError(_error_list(e), locale=locale) from e

    @staticmethod
    async def submit(db: AsyncSession, form: TaskFormData, *, locale: str = "en") -> Task:
        """Create the task when ``form.id`` is empty, otherwise update it."""
        fields = form.model_dump(exclude={"id"})
        if form.id is None:
            return await task_store.create_task(db, TaskCreate(**fields), locale=locale)
        return await task_store.update_task(db, form.id, TaskUpdate(**fields), locale=locale)


task_editor = TaskEditor()
