"""Configuration models for klarity.yml."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .board import KanbanColumn, default_columns
from .enums import TaskStatus


class ColumnConfig(BaseModel):
    """Configuration for a single board column."""

    status: TaskStatus
    wip_limit: int | None = Field(default=None, ge=1)
    collapsed: bool = False

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v: object) -> TaskStatus:
        """Accept a status name in any case (e.g. "in_progress" or "IN_PROGRESS")."""
        if isinstance(v, TaskStatus):
            return v
        if not isinstance(v, str):
            raise ValueError("Column status must be a string")
        name = v.strip().upper()
        if name not in TaskStatus.__members__:
            valid = ", ".join(s.name.lower() for s in TaskStatus)
            raise ValueError(f"Unknown column status '{v}'. Must be one of: {valid}")
        return TaskStatus[name]


class BoardConfig(BaseModel):
    """Board layout: which status columns appear, and in what order."""

    columns: list[ColumnConfig] = Field(..., min_length=1)

    @field_validator("columns")
    @classmethod
    def validate_unique_statuses(cls, v: list[ColumnConfig]) -> list[ColumnConfig]:
        """Each status may appear in at most one column."""
        statuses = [col.status for col in v]
        if len(statuses) != len(set(statuses)):
            raise ValueError("Column statuses must be unique")
        return v

    @property
    def statuses(self) -> list[TaskStatus]:
        """Column statuses in display order."""
        return [col.status for col in self.columns]

    def initial_columns(self) -> list[KanbanColumn]:
        """Empty board columns for this layout."""
        return [
            KanbanColumn(
                status=col.status,
                wip_limit=col.wip_limit,
                is_collapsed=col.collapsed,
            )
            for col in self.columns
        ]

    @classmethod
    def default(cls) -> "BoardConfig":
        """Return the default five-column layout."""
        return cls(
            columns=[
                ColumnConfig(
                    status=col.status,
                    wip_limit=col.wip_limit,
                    collapsed=col.is_collapsed,
                )
                for col in default_columns()
            ]
        )


class KlarityConfig(BaseModel):
    """Root configuration from klarity.yml."""

    version: int = 1
    board_file: str = Field(
        default=".klarity/board.json",
        description="Relative path to the persisted board document",
    )
    board: BoardConfig = Field(default_factory=BoardConfig.default)

    @field_validator("board_file")
    @classmethod
    def validate_board_file(cls, v: str) -> str:
        """Validate board_file is a relative path inside the project."""
        path = Path(v)
        if path.is_absolute():
            raise ValueError("board_file must be a relative path")
        # Check for path traversal attempts (e.g., "../other.json")
        try:
            resolved = Path().resolve() / path
            resolved.resolve().relative_to(Path().resolve())
        except ValueError as err:
            raise ValueError("board_file must be within the project directory") from err
        return v

    @classmethod
    def default(cls) -> "KlarityConfig":
        """Return default configuration."""
        return cls(board=BoardConfig.default())
