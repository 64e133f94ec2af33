"""Store protocol for board persistence backends."""

from typing import Protocol


class BoardStoreProtocol(Protocol):
    """Interface for board storage backends.

    A store only moves opaque text; encoding and decoding the board is
    the codec's job. This keeps the board format independent of where it
    lives (a file, an embedded database, a sync service).
    """

    def load(self) -> str:
        """Load the persisted board text.

        Returns:
            The stored text, or an empty string if nothing was saved yet.
        """
        ...

    def save(self, text: str) -> bool:
        """Persist board text, replacing any previous content.

        Args:
            text: The encoded board document.

        Returns:
            True if the text was written, False otherwise.
        """
        ...

    def exists(self) -> bool:
        """Check whether a board has been saved before."""
        ...
