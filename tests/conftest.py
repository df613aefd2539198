"""Pytest configuration and fixtures."""
import asyncio
import os
from datetime import date
from pathlib import Path
from typing import Optional

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

TEST_DB_PATH = Path("test_taskboard.db")
if TEST_DB_PATH.exists():
    TEST_DB_PATH.unlink()

TEST_DATABASE_URL = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.setdefault("LOG_FORMAT", "text")

from taskboard.main import app  # noqa: E402
from taskboard.database import Base, engine  # noqa: E402
from taskboard.models.task import Task, TaskPriority  # noqa: E402
from taskboard.schemas.task import TaskResponse  # noqa: E402


# Create test engine
test_engine = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@pytest_asyncio.fixture(scope="function")
async def db_session():
    """Create a test database session."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def _drop_app_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def client():
    """Test client on a fresh schema; the app lifespan creates the tables."""
    with TestClient(app) as test_client:
        yield test_client
    asyncio.run(_drop_app_tables())


@pytest.fixture
def make_task():
    """Factory for detached task snapshots fed to the view-model."""
    counter = {"next_id": 1}

    def _make(
        title: str = "Task",
        priority: TaskPriority = TaskPriority.MEDIUM,
        due_date: date = date(2024, 1, 1),
        status: bool = False,
        id: Optional[int] = None,
    ) -> TaskResponse:
        if id is None:
            id = counter["next_id"]
        counter["next_id"] = max(counter["next_id"], id) + 1
        return TaskResponse(
            id=id,
            title=title,
            description="",
            priority=priority,
            due_date=due_date,
            status=status,
            created_at="2024-01-01T00:00:00Z",
            updated_at="2024-01-01T00:00:00Z",
        )

    return _make


@pytest_asyncio.fixture
async def stored_task(db_session: AsyncSession):
    """A persisted pending task."""
    task = Task(
        title="Buy milk",
        description="Two litres",
        priority=TaskPriority.HIGH,
        due_date=date(2024, 1, 5),
        status=False,
    )
    db_session.add(task)
    await db_session.commit()
    await db_session.refresh(task)
    return task
