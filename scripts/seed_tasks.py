"""Script to insert a handful of demo tasks into an empty database."""
import asyncio
import sys
from datetime import date, timedelta
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import func, select

from taskboard.database import AsyncSessionLocal, init_db
from taskboard.models.task import Task, TaskPriority
from taskboard.schemas.task import TaskCreate
from taskboard.services.task_store import task_store

DEMO_TASKS = [
    ("Buy milk", TaskPriority.HIGH, 1, False),
    ("Call bank", TaskPriority.LOW, -2, True),
    ("Prepare sprint review", TaskPriority.MEDIUM, 3, False),
    ("Renew passport", TaskPriority.HIGH, 14, False),
    ("Clean garage", TaskPriority.LOW, 7, False),
    ("Pay electricity bill", TaskPriority.MEDIUM, 0, True),
    ("Book dentist appointment", TaskPriority.MEDIUM, 5, False),
]


async def seed_tasks():
    """Create demo tasks unless the table already holds active tasks."""
    await init_db()
    async with AsyncSessionLocal() as db:
        result = await db.execute(select(func.count(Task.id)).where(Task.deleted_at.is_(None)))
        existing = result.scalar_one()
        if existing:
            print(f"✓ {existing} active tasks already present, nothing to seed")
            return

        today = date.today()
        for title, priority, due_in_days, done in DEMO_TASKS:
            await task_store.create_task(
                db,
                TaskCreate(
                    title=title,
                    priority=priority,
                    due_date=today + timedelta(days=due_in_days),
                    status=done,
                ),
            )
        print(f"✓ Created {len(DEMO_TASKS)} demo tasks")


if __name__ == "__main__":
    asyncio.run(seed_tasks())
