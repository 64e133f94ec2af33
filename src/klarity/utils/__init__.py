"""Utility functions."""

from .datetime import from_epoch_ms, now_utc, to_epoch_ms, to_millis

__all__ = [
    "from_epoch_ms",
    "now_utc",
    "to_epoch_ms",
    "to_millis",
]
