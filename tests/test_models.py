"""Unit tests for domain models."""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from klarity.models import (
    EmptyState,
    ErrorState,
    IdleState,
    KanbanColumn,
    LoadingState,
    Subtask,
    SuccessState,
    TagColor,
    Task,
    TaskPriority,
    TaskStatus,
    TaskTimer,
    default_columns,
)
from klarity.models.ui_state import (
    get_or_default,
    get_or_none,
    is_error,
    is_loading,
    is_success,
)


class TestNamedEnum:
    """Tests for name resolution with fallback."""

    def test_from_name_exact_match(self):
        assert TaskStatus.from_name("IN_PROGRESS") == TaskStatus.IN_PROGRESS
        assert TaskPriority.from_name("LOW") == TaskPriority.LOW
        assert TagColor.from_name("PINK") == TagColor.PINK

    def test_from_name_unknown_uses_default(self):
        """Each enum has its own fallback member."""
        assert TaskStatus.from_name("ARCHIVED") == TaskStatus.TODO
        assert TaskPriority.from_name("URGENT_MAX") == TaskPriority.MEDIUM
        assert TagColor.from_name("CHARTREUSE") == TagColor.GRAY

    def test_from_name_is_case_sensitive(self):
        """Lowercase values are not member names."""
        assert TaskPriority.from_name("high") == TaskPriority.MEDIUM

    def test_from_name_none_uses_default(self):
        assert TaskStatus.from_name(None) == TaskStatus.TODO

    def test_status_labels(self):
        assert [s.label for s in TaskStatus] == [
            "Backlog",
            "To Do",
            "In Progress",
            "In Review",
            "Done",
        ]

    def test_priority_colors(self):
        assert TaskPriority.HIGH.color == 0xFFEF4444
        assert TaskPriority.MEDIUM.color == 0xFFFACC15
        assert TaskPriority.LOW.color == 0xFF3B82F6
        assert TaskPriority.NONE.color == 0xFF9E9E9E


class TestTaskTimer:
    """Tests for TaskTimer elapsed time."""

    def test_elapsed_excludes_paused_duration(self, now: datetime):
        timer = TaskTimer(
            started_at=now - timedelta(minutes=10),
            paused_duration=timedelta(minutes=3),
        )
        assert timer.elapsed(now) == timedelta(minutes=7)

    def test_elapsed_never_negative(self, now: datetime):
        """A start time in the future reads as zero."""
        timer = TaskTimer(started_at=now + timedelta(minutes=5))
        assert timer.elapsed(now) == timedelta(0)

    def test_formatted_time(self, now: datetime):
        timer = TaskTimer(started_at=now - timedelta(hours=1, minutes=2, seconds=3))
        assert timer.formatted_time(now) == "01:02:03"

    def test_formatted_time_caps_at_99_hours(self, now: datetime):
        timer = TaskTimer(started_at=now - timedelta(hours=150))
        assert timer.formatted_time(now) == "99:59:59"

    def test_defaults(self, now: datetime):
        timer = TaskTimer(started_at=now)
        assert timer.paused_duration == timedelta(0)
        assert timer.is_paused is False


class TestTask:
    """Tests for Task properties."""

    def test_defaults(self, make_task):
        task = make_task("task-1")
        assert task.description == ""
        assert task.priority == TaskPriority.MEDIUM
        assert task.tags == []
        assert task.timer is None
        assert task.completed is False
        assert task.order == 0

    def test_created_at_required(self):
        with pytest.raises(ValidationError):
            Task(id="task-1", title="No timestamps")

    def test_has_active_timer(self, make_task, now: datetime):
        assert make_task("a").has_active_timer is False
        assert make_task("b", timer=TaskTimer(started_at=now)).has_active_timer is True

    def test_subtask_progress(self, make_task):
        task = make_task(
            "task-1",
            subtasks=[
                Subtask(id="s1", title="One", is_completed=True),
                Subtask(id="s2", title="Two"),
                Subtask(id="s3", title="Three", is_completed=True),
            ],
        )
        assert task.subtask_progress == (2, 3)

    def test_is_overdue_past_due_date(self, make_task, now: datetime):
        task = make_task("task-1", due_date=now - timedelta(days=1))
        assert task.is_overdue(now) is True

    def test_is_overdue_future_due_date(self, make_task, now: datetime):
        task = make_task("task-1", due_date=now + timedelta(days=1))
        assert task.is_overdue(now) is False

    def test_completed_task_never_overdue(self, make_task, now: datetime):
        task = make_task("task-1", due_date=now - timedelta(days=1), completed=True)
        assert task.is_overdue(now) is False

    def test_no_due_date_never_overdue(self, make_task, now: datetime):
        assert make_task("task-1").is_overdue(now) is False


class TestKanbanColumn:
    """Tests for KanbanColumn."""

    def test_title_is_status_label(self):
        assert KanbanColumn(status=TaskStatus.IN_REVIEW).title == "In Review"

    def test_over_wip_limit(self, make_task):
        column = KanbanColumn(
            status=TaskStatus.IN_PROGRESS,
            tasks=[make_task("a"), make_task("b")],
            wip_limit=1,
        )
        assert column.is_over_wip_limit is True

    def test_at_wip_limit_is_not_over(self, make_task):
        column = KanbanColumn(status=TaskStatus.TODO, tasks=[make_task("a")], wip_limit=1)
        assert column.is_over_wip_limit is False

    def test_no_wip_limit_never_over(self, make_task):
        column = KanbanColumn(status=TaskStatus.TODO, tasks=[make_task("a"), make_task("b")])
        assert column.is_over_wip_limit is False

    def test_wip_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            KanbanColumn(status=TaskStatus.TODO, wip_limit=0)

    def test_default_columns(self):
        columns = default_columns()
        assert [c.status for c in columns] == list(TaskStatus)
        assert [c.wip_limit for c in columns] == [None, 5, 3, None, None]
        assert all(c.tasks == [] for c in columns)


class TestUiState:
    """Tests for screen state helpers."""

    def test_predicates(self):
        assert is_loading(LoadingState())
        assert is_success(SuccessState())
        assert is_error(ErrorState(message="boom"))
        assert not is_success(IdleState())
        assert not is_error(EmptyState())

    def test_get_or_none(self):
        columns = default_columns()
        assert get_or_none(SuccessState(columns=columns)) == columns
        assert get_or_none(ErrorState(message="boom")) is None

    def test_get_or_default(self):
        fallback = [KanbanColumn(status=TaskStatus.DONE)]
        assert get_or_default(LoadingState(), fallback) == fallback
        assert get_or_default(SuccessState(), fallback) == []

    def test_error_is_retryable_by_default(self):
        assert ErrorState(message="boom").retryable is True

    def test_kind_discriminators(self):
        kinds = [s().kind for s in (IdleState, LoadingState, SuccessState, EmptyState)]
        assert kinds == ["idle", "loading", "success", "empty"]
