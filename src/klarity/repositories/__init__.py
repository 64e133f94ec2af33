"""Repository layer for board persistence."""

from .filesystem import FileBoardStore
from .protocol import BoardStoreProtocol

__all__ = [
    "BoardStoreProtocol",
    "FileBoardStore",
]
