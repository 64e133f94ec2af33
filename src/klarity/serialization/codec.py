"""Codec between the in-memory board and the persisted JSON document."""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Callable, Sequence
from datetime import timedelta
from typing import TypeVar

from pydantic import ValidationError

from ..models import (
    KanbanColumn,
    Subtask,
    TagColor,
    Task,
    TaskPriority,
    TaskStatus,
    TaskTag,
    TaskTimer,
)
from ..models.enums import NamedEnum
from ..utils import from_epoch_ms, to_epoch_ms, to_millis
from .records import (
    BoardDocument,
    ColumnRecord,
    SubtaskRecord,
    TagRecord,
    TaskRecord,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
E = TypeVar("E", bound=NamedEnum)


def _optional(value: T | None, convert: Callable[[T], R]) -> R | None:
    """Convert a present value; pass absence through."""
    return None if value is None else convert(value)


def _resolve(enum_cls: type[E], name: str, field: str) -> E:
    """Resolve an enum by name, logging when the fallback member is used."""
    member = enum_cls.from_name(name)
    if member.name != name:
        logger.debug("Unknown %s %r, falling back to %s", field, name, member.name)
    return member


class BoardStateCodec:
    """
    Bidirectional conversion between board columns and text.

    encode() flattens columns into a BoardDocument and renders compact JSON.
    decode() parses JSON back into ordered columns. Neither operation raises:
    unreadable input decodes to an empty board, and unknown enum names
    resolve to each enum's default member.
    """

    # --- Text <-> document ---

    @staticmethod
    def encode_document(document: BoardDocument) -> str:
        """Render a document as compact JSON, including default-valued fields."""
        return document.model_dump_json(by_alias=True)

    @staticmethod
    def decode_document(text: str) -> BoardDocument:
        """Parse JSON into a document, or return an empty document on failure."""
        try:
            return BoardDocument.model_validate_json(text)
        except ValidationError as e:
            logger.warning(
                "Unreadable board document (%d error(s)), using empty board",
                e.error_count(),
            )
            return BoardDocument()

    # --- Columns <-> document ---

    @classmethod
    def to_document(cls, columns: Sequence[KanbanColumn]) -> BoardDocument:
        """Flatten columns into independent column and task lists."""
        column_records = [
            ColumnRecord(
                id=column.status.name,
                title=column.status.label,
                status=column.status.name,
                order=index,
                is_collapsed=column.is_collapsed,
                wip_limit=column.wip_limit,
            )
            for index, column in enumerate(columns)
        ]
        task_records = [
            cls._task_to_record(task, column.status)
            for column in columns
            for task in column.tasks
        ]
        return BoardDocument(columns=column_records, tasks=task_records)

    @classmethod
    def from_document(cls, document: BoardDocument) -> list[KanbanColumn]:
        """Rebuild ordered columns from a flat document.

        Tasks are grouped by exact status string. A task whose status has no
        column is not placed anywhere. Columns that resolve to the same status
        are kept as they are and logged.
        """
        tasks_by_status: dict[str, list[TaskRecord]] = defaultdict(list)
        for record in document.tasks:
            tasks_by_status[record.status].append(record)

        column_statuses = {record.status for record in document.columns}
        orphaned = [r.id for r in document.tasks if r.status not in column_statuses]
        if orphaned:
            logger.debug("Tasks with no matching column: %s", ", ".join(orphaned))

        columns: list[KanbanColumn] = []
        for record in sorted(document.columns, key=lambda c: c.order):
            task_records = sorted(tasks_by_status.get(record.status, []), key=lambda t: t.order)
            columns.append(
                KanbanColumn(
                    status=_resolve(TaskStatus, record.status, "column status"),
                    tasks=[cls._record_to_task(t) for t in task_records],
                    is_collapsed=record.is_collapsed,
                    wip_limit=cls._wip_limit(record),
                )
            )

        resolved = Counter(column.status for column in columns)
        duplicates = [status.name for status, count in resolved.items() if count > 1]
        if duplicates:
            logger.warning("Several columns resolve to status %s", ", ".join(duplicates))
        return columns

    # --- Columns <-> text ---

    @classmethod
    def encode(cls, columns: Sequence[KanbanColumn]) -> str:
        """Serialize columns to JSON text."""
        return cls.encode_document(cls.to_document(columns))

    @classmethod
    def decode(cls, text: str) -> list[KanbanColumn]:
        """Deserialize JSON text to columns. Never raises."""
        document = cls.decode_document(text)
        try:
            return cls.from_document(document)
        except (OverflowError, ValueError) as e:
            # Parsed, but holds values no domain object can represent
            # (e.g. epoch milliseconds outside the datetime range).
            logger.warning("Board document could not be rebuilt, using empty board: %s", e)
            return []

    # --- Private helpers ---

    @staticmethod
    def _wip_limit(record: ColumnRecord) -> int | None:
        if record.wip_limit is not None and record.wip_limit < 1:
            logger.debug("Ignoring non-positive WIP limit on column %s", record.id)
            return None
        return record.wip_limit

    @staticmethod
    def _task_to_record(task: Task, status: TaskStatus) -> TaskRecord:
        timer = task.timer
        return TaskRecord(
            id=task.id,
            title=task.title,
            description=task.description,
            status=status.name,
            priority=task.priority.name,
            tags=[TagRecord(label=tag.label, color=tag.color.name) for tag in task.tags],
            points=task.points,
            assignee=task.assignee,
            due_date=_optional(task.due_date, to_epoch_ms),
            start_date=_optional(task.start_date, to_epoch_ms),
            estimated_hours=task.estimated_hours,
            actual_hours=task.actual_hours,
            subtasks=[
                SubtaskRecord(
                    id=s.id,
                    title=s.title,
                    is_completed=s.is_completed,
                    order=s.order,
                )
                for s in task.subtasks
            ],
            linked_note_ids=list(task.linked_note_ids),
            timer_started_at=None if timer is None else to_epoch_ms(timer.started_at),
            timer_paused_duration=None if timer is None else to_millis(timer.paused_duration),
            timer_is_paused=False if timer is None else timer.is_paused,
            is_active=task.is_active,
            completed=task.completed,
            created_at=to_epoch_ms(task.created_at),
            updated_at=to_epoch_ms(task.updated_at),
            completed_at=_optional(task.completed_at, to_epoch_ms),
            order=task.order,
        )

    @staticmethod
    def _record_to_timer(record: TaskRecord) -> TaskTimer | None:
        # timerStartedAt alone decides whether a timer exists
        if record.timer_started_at is None:
            return None
        return TaskTimer(
            started_at=from_epoch_ms(record.timer_started_at),
            paused_duration=timedelta(milliseconds=record.timer_paused_duration or 0),
            is_paused=record.timer_is_paused,
        )

    @classmethod
    def _record_to_task(cls, record: TaskRecord) -> Task:
        return Task(
            id=record.id,
            title=record.title,
            description=record.description,
            status=_resolve(TaskStatus, record.status, "task status"),
            priority=_resolve(TaskPriority, record.priority, "priority"),
            tags=[
                TaskTag(label=tag.label, color=_resolve(TagColor, tag.color, "tag color"))
                for tag in record.tags
            ],
            points=record.points,
            assignee=record.assignee,
            due_date=_optional(record.due_date, from_epoch_ms),
            start_date=_optional(record.start_date, from_epoch_ms),
            estimated_hours=record.estimated_hours,
            actual_hours=record.actual_hours,
            subtasks=[
                Subtask(
                    id=s.id,
                    title=s.title,
                    is_completed=s.is_completed,
                    order=s.order,
                )
                for s in record.subtasks
            ],
            linked_note_ids=list(record.linked_note_ids),
            timer=cls._record_to_timer(record),
            is_active=record.is_active,
            completed=record.completed,
            created_at=from_epoch_ms(record.created_at),
            updated_at=from_epoch_ms(record.updated_at),
            completed_at=_optional(record.completed_at, from_epoch_ms),
            order=record.order,
        )
