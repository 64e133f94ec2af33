"""Enums for task status, priority and tag color."""

from enum import Enum
from typing import Self


class NamedEnum(str, Enum):
    """Enum whose canonical string form is the member name.

    Resolution from a string is total: unknown names resolve to the
    enum's default member instead of raising.
    """

    @classmethod
    def default(cls) -> Self:
        """Fallback member used when a name cannot be resolved."""
        raise NotImplementedError

    @classmethod
    def from_name(cls, name: str | None) -> Self:
        """Resolve a member by exact name, or return the default member."""
        if name is None:
            return cls.default()
        member = cls.__members__.get(name)
        return member if member is not None else cls.default()


class TaskStatus(NamedEnum):
    """Board column statuses, in default display order."""

    BACKLOG = "backlog"
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    IN_REVIEW = "in_review"
    DONE = "done"

    @classmethod
    def default(cls) -> "TaskStatus":
        return cls.TODO

    @property
    def label(self) -> str:
        """Display label for the column."""
        return _STATUS_LABELS[self]


class TaskPriority(NamedEnum):
    """Priority levels for tasks."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"

    @classmethod
    def default(cls) -> "TaskPriority":
        return cls.MEDIUM

    @property
    def color(self) -> int:
        """Indicator color as a 32-bit ARGB value."""
        return _PRIORITY_COLORS[self]


class TagColor(NamedEnum):
    """Color classes available for task tags."""

    PURPLE = "purple"
    ORANGE = "orange"
    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    PINK = "pink"
    GRAY = "gray"

    @classmethod
    def default(cls) -> "TagColor":
        return cls.GRAY


_STATUS_LABELS = {
    TaskStatus.BACKLOG: "Backlog",
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.IN_REVIEW: "In Review",
    TaskStatus.DONE: "Done",
}

_PRIORITY_COLORS = {
    TaskPriority.HIGH: 0xFFEF4444,  # red
    TaskPriority.MEDIUM: 0xFFFACC15,  # yellow
    TaskPriority.LOW: 0xFF3B82F6,  # blue
    TaskPriority.NONE: 0xFF9E9E9E,  # gray
}
