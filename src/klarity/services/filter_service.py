"""Service for parsing and applying filters to tasks."""

import re
from dataclasses import dataclass, field
from datetime import datetime

from ..models import KanbanColumn, Task, TaskPriority, TaskStatus


@dataclass
class TaskFilter:
    """Filter criteria. Empty criteria match every task."""

    search_query: str = ""  # Free text in title or description
    assignees: set[str] = field(default_factory=set)  # assignee:value
    tags: set[str] = field(default_factory=set)  # tag:value (tag labels)
    priorities: set[TaskPriority] = field(default_factory=set)  # priority:value
    statuses: set[TaskStatus] = field(default_factory=set)  # status:value
    show_overdue_only: bool = False  # overdue:true

    @property
    def is_empty(self) -> bool:
        """True when the filter matches everything."""
        return self == TaskFilter()


class FilterService:
    """Service for parsing and applying filters to tasks."""

    # Pattern for key:value tokens
    TOKEN_PATTERN = re.compile(r"(?:(tag|assignee|priority|status|overdue):)?(\S+)")

    def parse(self, expression: str) -> TaskFilter:
        """
        Parse a filter expression string.

        Syntax:
        - Free text: matches title or description
        - tag:value: filter by tag label
        - assignee:value: filter by assignee
        - priority:high/medium/low/none
        - status:backlog/todo/in_progress/in_review/done
        - overdue:true - only overdue tasks

        Repeated keys are ORed together; different keys are ANDed.
        """
        f = TaskFilter()
        text_parts: list[str] = []

        for match in self.TOKEN_PATTERN.finditer(expression):
            key = match.group(1)
            value = match.group(2)

            if key is None:
                text_parts.append(value)

            elif key == "tag":
                f.tags.add(value)

            elif key == "assignee":
                f.assignees.add(value)

            elif key == "priority":
                # Unknown priorities are ignored
                name = value.upper()
                if name in TaskPriority.__members__:
                    f.priorities.add(TaskPriority[name])

            elif key == "status":
                name = value.upper()
                if name in TaskStatus.__members__:
                    f.statuses.add(TaskStatus[name])

            elif key == "overdue":
                f.show_overdue_only = value.lower() == "true"

        f.search_query = " ".join(text_parts)
        return f

    def apply(
        self, tasks: list[Task], filter_: TaskFilter, now: datetime | None = None
    ) -> list[Task]:
        """Apply filter to a list of tasks."""
        return [task for task in tasks if self._matches(task, filter_, now)]

    def apply_to_columns(
        self, columns: list[KanbanColumn], filter_: TaskFilter, now: datetime | None = None
    ) -> list[KanbanColumn]:
        """Return copies of the columns holding only matching tasks."""
        return [
            column.model_copy(update={"tasks": self.apply(column.tasks, filter_, now)})
            for column in columns
        ]

    def filter_by_assignee(self, tasks: list[Task], assignee: str) -> list[Task]:
        """Tasks assigned to exactly this assignee."""
        return [task for task in tasks if task.assignee == assignee]

    def filter_by_tags(self, tasks: list[Task], tags: set[str]) -> list[Task]:
        """Tasks with at least one of the tag labels (all tasks if none given)."""
        if not tags:
            return tasks
        return [task for task in tasks if any(tag.label in tags for tag in task.tags)]

    def _matches(self, task: Task, f: TaskFilter, now: datetime | None) -> bool:
        """Check if a task matches the filter."""
        if f.assignees and (task.assignee is None or task.assignee not in f.assignees):
            return False

        # Tag inclusion (any match)
        if f.tags and not any(tag.label in f.tags for tag in task.tags):
            return False

        if f.priorities and task.priority not in f.priorities:
            return False

        if f.statuses and task.status not in f.statuses:
            return False

        # Text search (case-insensitive)
        if f.search_query.strip():
            query = f.search_query.lower()
            if query not in task.title.lower() and query not in task.description.lower():
                return False

        return not (f.show_overdue_only and not task.is_overdue(now))
