"""Service for board state management."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from ..models import (
    EmptyState,
    ErrorState,
    IdleState,
    KanbanColumn,
    LoadingState,
    SuccessState,
    Task,
    TaskStatus,
    TaskTimer,
    TasksUiState,
)
from ..models.klarity_config import BoardConfig
from ..repositories import BoardStoreProtocol
from ..serialization import BoardStateCodec
from ..utils import now_utc, to_epoch_ms

if TYPE_CHECKING:
    from .config_service import ConfigService

logger = logging.getLogger(__name__)


class BoardService:
    """
    Owns the in-memory board and applies user intents to it.

    Every mutating operation persists the whole board through the codec
    and the store before returning.
    """

    def __init__(
        self,
        store: BoardStoreProtocol,
        config_service: ConfigService | None = None,
    ) -> None:
        self.store = store
        self._config_service = config_service
        self._columns: list[KanbanColumn] = []
        self.state: TasksUiState = IdleState()
        self.recovered_from_unreadable = False

    def _get_board_config(self) -> BoardConfig:
        """Get board config, using default if no config service."""
        if self._config_service:
            return self._config_service.get_board_config()
        return BoardConfig.default()

    @property
    def columns(self) -> list[KanbanColumn]:
        """Current columns in display order."""
        return self._columns

    # --- Loading and saving ---

    def load_board(self) -> list[KanbanColumn]:
        """
        Load the board from the store.

        Nothing saved yet gives the configured initial columns. Saved text
        that decodes to nothing is kept as an empty board (and left
        untouched on disk) so the unreadable data is not overwritten.
        """
        self.recovered_from_unreadable = False
        text = self.store.load()

        if not text.strip():
            logger.info("No saved board, starting with configured columns")
            self._columns = self._get_board_config().initial_columns()
            return self._columns

        self._columns = BoardStateCodec.decode(text)
        if not self._columns:
            self.recovered_from_unreadable = True
            logger.warning("Saved board decoded to an empty board (%d chars)", len(text))
        else:
            logger.info(
                "Board loaded: %d columns, %d tasks", len(self._columns), len(self.all_tasks())
            )
        return self._columns

    def load_state(self) -> TasksUiState:
        """Load the board and return the resulting screen state."""
        self.state = LoadingState()
        try:
            columns = self.load_board()
        except OSError as e:
            logger.error("Failed to load board: %s", e)
            self.state = ErrorState(message=f"Failed to load board: {e}", retryable=True)
            return self.state

        self.state = SuccessState(columns=columns) if columns else EmptyState()
        return self.state

    def reset_board(self) -> list[KanbanColumn]:
        """Replace the board with empty configured columns and save it."""
        logger.info("Resetting board to configured columns")
        self._columns = self._get_board_config().initial_columns()
        self.recovered_from_unreadable = False
        self.save_board()
        return self._columns

    def save_board(self) -> bool:
        """Encode the current board and write it to the store."""
        saved = self.store.save(BoardStateCodec.encode(self._columns))
        if not saved:
            logger.warning("Board changes were not saved")
        return saved

    # --- Queries ---

    def all_tasks(self) -> list[Task]:
        """All tasks across columns, in board order."""
        return [task for column in self._columns for task in column.tasks]

    def get_task(self, task_id: str) -> Task | None:
        """Find a task by ID."""
        for task in self.all_tasks():
            if task.id == task_id:
                return task
        return None

    def find_column(self, status: TaskStatus) -> KanbanColumn | None:
        """Find the column for a status."""
        for column in self._columns:
            if column.status == status:
                return column
        return None

    # --- Task intents ---

    def create_task(self, status: TaskStatus, title: str = "New Task") -> Task | None:
        """Create a task at the end of a column.

        An unknown status falls back to the first column.
        """
        column = self.find_column(status)
        if column is None:
            if not self._columns:
                logger.debug("create_task: board has no columns")
                return None
            column = self._columns[0]
            logger.debug("create_task: no %s column, using %s", status.name, column.status.name)

        now = now_utc()
        task = Task(
            id=self._new_task_id(to_epoch_ms(now)),
            title=title,
            status=column.status,
            order=len(column.tasks),
            created_at=now,
            updated_at=now,
        )
        column.tasks.append(task)
        self._warn_wip(column)
        self.save_board()
        logger.info("Task created: %s (status=%s)", task.id, column.status.name)
        return task

    def update_task(self, task: Task) -> Task | None:
        """Replace a task with an edited copy, moving it if its status changed."""
        current = self.get_task(task.id)
        if current is None:
            logger.debug("update_task: task not found: %s", task.id)
            return None

        updated = task.model_copy(update={"updated_at": now_utc()})
        if updated.status != current.status:
            if self.find_column(updated.status) is not None:
                self._remove_task(task.id)
                return self._insert_task(updated, updated.status, -1)
            # No column for the new status; the task stays where it is
            updated = updated.model_copy(update={"status": current.status})

        self._replace_task(updated)
        self.save_board()
        return updated

    def delete_task(self, task_id: str) -> bool:
        """Delete a task by ID."""
        removed = self._remove_task(task_id)
        if removed is None:
            logger.debug("delete_task: task not found: %s", task_id)
            return False
        self.save_board()
        logger.info("Task deleted: %s", task_id)
        return True

    def move_task(self, task_id: str, to_status: TaskStatus, index: int = -1) -> Task | None:
        """
        Move a task to a column at a position.

        Args:
            task_id: Task ID to move
            to_status: Target column status
            index: Position in the target column (-1 or out of range = end)

        Returns:
            The moved task, or None if the task or column doesn't exist
        """
        if self.find_column(to_status) is None:
            logger.debug("move_task: no column for %s", to_status.name)
            return None

        task = self._remove_task(task_id)
        if task is None:
            logger.debug("move_task: task not found: %s", task_id)
            return None

        old_status = task.status
        moved = task.model_copy(update={"status": to_status, "updated_at": now_utc()})
        result = self._insert_task(moved, to_status, index)
        logger.info("Task moved: %s (%s -> %s)", task_id, old_status.name, to_status.name)
        return result

    def toggle_complete(self, task_id: str) -> Task | None:
        """Flip a task's completion flag."""
        task = self.get_task(task_id)
        if task is None:
            return None

        now = now_utc()
        completed = not task.completed
        return self._save_change(
            task.model_copy(
                update={
                    "completed": completed,
                    "completed_at": now if completed else None,
                    "updated_at": now,
                }
            )
        )

    # --- Timer intents ---

    def start_timer(self, task_id: str) -> Task | None:
        """Start a fresh timer on a task."""
        task = self.get_task(task_id)
        if task is None:
            return None
        if task.timer is not None:
            logger.debug("start_timer: timer already running: %s", task_id)
            return task

        now = now_utc()
        return self._save_change(
            task.model_copy(
                update={
                    "timer": TaskTimer(started_at=now),
                    "is_active": True,
                    "updated_at": now,
                }
            )
        )

    def pause_timer(self, task_id: str) -> Task | None:
        """Mark a running timer as paused."""
        return self._set_timer_paused(task_id, True)

    def resume_timer(self, task_id: str) -> Task | None:
        """Mark a paused timer as running."""
        return self._set_timer_paused(task_id, False)

    def stop_timer(self, task_id: str) -> Task | None:
        """Stop a timer, adding its elapsed time to the task's actual hours."""
        task = self.get_task(task_id)
        if task is None or task.timer is None:
            return task

        now = now_utc()
        elapsed_hours = task.timer.elapsed(now) / timedelta(hours=1)
        actual_hours = (task.actual_hours or 0.0) + elapsed_hours
        logger.info("Timer stopped: %s (+%.2fh)", task_id, elapsed_hours)
        return self._save_change(
            task.model_copy(
                update={
                    "timer": None,
                    "is_active": False,
                    "actual_hours": actual_hours,
                    "updated_at": now,
                }
            )
        )

    # --- Column intents ---

    def set_column_collapsed(self, status: TaskStatus, collapsed: bool) -> bool:
        """Collapse or expand a column."""
        column = self.find_column(status)
        if column is None:
            return False
        column.is_collapsed = collapsed
        self.save_board()
        return True

    # --- Private helpers ---

    def _new_task_id(self, stamp: int) -> str:
        """Generate a task ID from a timestamp, unique within the board."""
        existing = {task.id for task in self.all_tasks()}
        task_id = f"task-{stamp}"
        suffix = 2
        while task_id in existing:
            task_id = f"task-{stamp}-{suffix}"
            suffix += 1
        return task_id

    def _set_timer_paused(self, task_id: str, paused: bool) -> Task | None:
        task = self.get_task(task_id)
        if task is None or task.timer is None:
            return task
        timer = task.timer.model_copy(update={"is_paused": paused})
        return self._save_change(
            task.model_copy(update={"timer": timer, "updated_at": now_utc()})
        )

    def _save_change(self, task: Task) -> Task:
        self._replace_task(task)
        self.save_board()
        return task

    def _replace_task(self, task: Task) -> None:
        """Swap a task in place, keeping its column and position."""
        for column in self._columns:
            for i, existing in enumerate(column.tasks):
                if existing.id == task.id:
                    column.tasks[i] = task
                    return

    def _remove_task(self, task_id: str) -> Task | None:
        """Detach a task from its column and renumber that column."""
        for column in self._columns:
            for i, task in enumerate(column.tasks):
                if task.id == task_id:
                    del column.tasks[i]
                    self._renumber(column)
                    return task
        return None

    def _insert_task(self, task: Task, status: TaskStatus, index: int) -> Task | None:
        column = self.find_column(status)
        if column is None:
            return None

        if index < 0 or index > len(column.tasks):
            index = len(column.tasks)
        column.tasks.insert(index, task)
        self._renumber(column)
        self._warn_wip(column)
        self.save_board()
        return column.tasks[index]

    @staticmethod
    def _renumber(column: KanbanColumn) -> None:
        """Rewrite task order fields to match list positions."""
        column.tasks[:] = [
            task if task.order == i else task.model_copy(update={"order": i})
            for i, task in enumerate(column.tasks)
        ]

    @staticmethod
    def _warn_wip(column: KanbanColumn) -> None:
        if column.is_over_wip_limit:
            logger.warning(
                "Column %s over WIP limit (%d/%d)",
                column.status.name,
                len(column.tasks),
                column.wip_limit,
            )
