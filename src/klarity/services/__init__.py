"""Service layer for business logic."""

from .board_service import BoardService
from .config_service import ConfigService
from .filter_service import FilterService, TaskFilter

__all__ = [
    "BoardService",
    "ConfigService",
    "FilterService",
    "TaskFilter",
]
