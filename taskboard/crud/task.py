"""Task CRUD operations."""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.crud.base import CRUDBase
from taskboard.models.task import Task, utcnow
from taskboard.schemas.task import TaskCreate, TaskUpdate


class CRUDTask(CRUDBase[Task, TaskCreate, TaskUpdate]):
    """CRUD operations for Task. Reads exclude soft-deleted rows."""

    @staticmethod
    def active_query() -> Select:
        """Base query for tasks that are not soft-deleted."""
        return select(Task).where(Task.deleted_at.is_(None))

    async def get_active(self, db: AsyncSession, *, id: int) -> Optional[Task]:
        """Get a task by id unless it is soft-deleted."""
        result = await db.execute(self.active_query().where(Task.id == id))
        return result.scalar_one_or_none()

    async def list_active(self, db: AsyncSession) -> List[Task]:
        """All non-deleted tasks, newest first."""
        result = await db.execute(
            self.active_query().order_by(Task.created_at.desc(), Task.id.desc())
        )
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: TaskCreate) -> Task:
        """Create a task; the store owns the timestamps."""
        now = utcnow()
        return await super().create(
            db,
            obj_in={**obj_in.model_dump(), "created_at": now, "updated_at": now},
        )

    async def update(self, db: AsyncSession, *, db_obj: Task, obj_in: TaskUpdate) -> Task:
        """Apply the explicitly set fields and bump ``updated_at``."""
        update_data = obj_in.model_dump(exclude_unset=True)
        update_data["updated_at"] = utcnow()
        return await super().update(db, db_obj=db_obj, obj_in=update_data)

    async def soft_delete(
        self,
        db: AsyncSession,
        *,
        db_obj: Task,
        deleted_at: Optional[datetime] = None,
    ) -> Task:
        """Mark the task deleted; the row is kept."""
        now = deleted_at or utcnow()
        return await super().update(
            db,
            db_obj=db_obj,
            obj_in={"deleted_at": now, "updated_at": now},
        )


task = CRUDTask(Task)
