"""klarity - local-first Kanban board."""

__version__ = "0.1.0"
