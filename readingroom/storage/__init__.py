"""
ReadingRoom Storage - Persistence collaborators for finished assignments.

This module provides:
- AssignmentStore: the async store interface used by AuthoringSession
- InMemoryAssignmentStore: dict-backed store
- SQLiteAssignmentStore: SQLite-backed store
- filter_by_due_date: due-date filtering of stored assignments
"""

from .base import (
    AssignmentStore,
    new_stored_assignment,
    filter_by_due_date,
)

from .memory import InMemoryAssignmentStore

from .sqlite import (
    SQLiteAssignmentStore,
    SCHEMA,
)

__all__ = [
    "AssignmentStore",
    "new_stored_assignment",
    "filter_by_due_date",
    "InMemoryAssignmentStore",
    "SQLiteAssignmentStore",
    "SCHEMA",
]
