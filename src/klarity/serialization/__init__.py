"""Board document serialization."""

from .codec import BoardStateCodec
from .records import (
    BoardDocument,
    ColumnRecord,
    SubtaskRecord,
    TagRecord,
    TaskRecord,
)

__all__ = [
    "BoardDocument",
    "BoardStateCodec",
    "ColumnRecord",
    "SubtaskRecord",
    "TagRecord",
    "TaskRecord",
]
