"""Shared fixtures."""

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from klarity.models import Task, TaskStatus


@pytest.fixture
def now() -> datetime:
    """A fixed, millisecond-precision point in time."""
    return datetime(2025, 1, 15, 10, 30, 0, 123000, tzinfo=UTC)


@pytest.fixture
def make_task(now: datetime) -> Callable[..., Task]:
    """Factory for tasks with required timestamps filled in."""

    def _make(task_id: str, status: TaskStatus = TaskStatus.TODO, **kwargs) -> Task:
        kwargs.setdefault("title", task_id.replace("-", " ").title())
        kwargs.setdefault("created_at", now)
        kwargs.setdefault("updated_at", now)
        return Task(id=task_id, status=status, **kwargs)

    return _make
