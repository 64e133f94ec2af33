"""Filesystem-based store for the board document."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class FileBoardStore:
    """
    Store for the encoded board kept in a single file.

    The file holds one JSON document (see serialization.records). Writes go
    to a temporary file in the same directory which then replaces the
    target, so a crash mid-write never leaves a truncated board behind.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize the store.

        Args:
            path: Path to the board file (e.g., .klarity/board.json)
        """
        self.path = path

    def ensure_directory(self) -> None:
        """Create the board file's directory if it doesn't exist."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def exists(self) -> bool:
        """Check whether the board file exists."""
        return self.path.exists()

    def load(self) -> str:
        """Read the board file, or return "" when it doesn't exist.

        Bytes that are not valid UTF-8 are replaced, so the text reaches the
        codec and is treated as an unreadable board. Read errors other than
        a missing file propagate to the caller.
        """
        if not self.path.exists():
            logger.debug("No board file at %s", self.path)
            return ""
        return self.path.read_text(encoding="utf-8", errors="replace")

    def save(self, text: str) -> bool:
        """Atomically write the board file. Returns False on I/O errors."""
        tmp_name: str | None = None
        try:
            self.ensure_directory()
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.warning("Failed to save board to %s: %s", self.path, e)
            return False
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug("Saved board to %s (%d bytes)", self.path, len(text))
        return True

    def validate(self) -> tuple[bool, str | None]:
        """Validate that the board directory is accessible.

        Returns:
            (True, None) if the directory exists or can be created,
            (False, message) otherwise.
        """
        try:
            self.ensure_directory()
            return (True, None)
        except OSError as e:
            return (False, f"Cannot access board directory: {e}")
