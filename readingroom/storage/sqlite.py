"""
SQLiteAssignmentStore - Persist reading assignments in a SQLite database.

Stores one row per assignment:
- Scalar fields (title, description, duration, ...) as columns
- The content document as JSON, written and read back verbatim
- Tools as a JSON array
"""

import asyncio
import json
import logging
import sqlite3
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from readingroom.authoring.errors import StorageError
from readingroom.schemas import AssignmentPayload, ContentDocument, StoredAssignment

from .base import new_stored_assignment

logger = logging.getLogger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS reading_assignments (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    description TEXT,
    content JSON NOT NULL,
    tools JSON NOT NULL DEFAULT '[]',
    duration_minutes INTEGER,
    parent_encouragement TEXT,
    due_date TEXT,
    created_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_reading_assignments_due
ON reading_assignments(due_date);
"""


class SQLiteAssignmentStore:
    """
    Assignment store backed by SQLite.

    Each call opens its own short-lived connection inside a worker thread,
    so the store can be shared by the async authoring sessions of one app.
    """

    def __init__(self, db_path: str | Path):
        """
        Initialize the store, creating the database if needed.

        Args:
            db_path: Path to the SQLite file
        """
        self.db_path = Path(db_path)
        self._ensure_database()

    def _ensure_database(self):
        """Create database and tables if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript(SCHEMA)
            conn.commit()
        finally:
            conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def _row_to_assignment(self, row: sqlite3.Row) -> StoredAssignment:
        return StoredAssignment(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            content=ContentDocument.model_validate(json.loads(row["content"])),
            tools=json.loads(row["tools"]),
            duration_minutes=row["duration_minutes"],
            parent_encouragement=row["parent_encouragement"],
            due_date=date.fromisoformat(row["due_date"]) if row["due_date"] else None,
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    # -------------------------------------------------------------------------
    # Blocking operations
    # -------------------------------------------------------------------------

    def _insert(self, stored: StoredAssignment):
        conn = self._get_connection()
        try:
            conn.execute(
                """INSERT INTO reading_assignments
                   (id, title, description, content, tools, duration_minutes,
                    parent_encouragement, due_date, created_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    stored.id,
                    stored.title,
                    stored.description,
                    json.dumps(stored.content.to_payload(), ensure_ascii=False),
                    json.dumps(list(stored.tools), ensure_ascii=False),
                    stored.duration_minutes,
                    stored.parent_encouragement,
                    stored.due_date.isoformat() if stored.due_date else None,
                    stored.created_at.isoformat(),
                )
            )
            conn.commit()
        finally:
            conn.close()

    def _select_one(self, assignment_id: str) -> Optional[StoredAssignment]:
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                "SELECT * FROM reading_assignments WHERE id = ?", (assignment_id,)
            )
            row = cursor.fetchone()
            return self._row_to_assignment(row) if row else None
        finally:
            conn.close()

    def _select_all(self) -> list[StoredAssignment]:
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                "SELECT * FROM reading_assignments ORDER BY created_at, rowid"
            )
            return [self._row_to_assignment(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def _delete(self, assignment_id: str) -> bool:
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                "DELETE FROM reading_assignments WHERE id = ?", (assignment_id,)
            )
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    # -------------------------------------------------------------------------
    # AssignmentStore interface
    # -------------------------------------------------------------------------

    async def create_assignment(self, payload: AssignmentPayload) -> StoredAssignment:
        stored = new_stored_assignment(payload)
        try:
            await asyncio.to_thread(self._insert, stored)
        except sqlite3.Error as e:
            raise StorageError(f"Could not save assignment: {e}") from e
        logger.info(f"Stored assignment {stored.id} in {self.db_path}")
        return stored

    async def get_assignment(self, assignment_id: str) -> Optional[StoredAssignment]:
        try:
            return await asyncio.to_thread(self._select_one, assignment_id)
        except sqlite3.Error as e:
            raise StorageError(f"Could not load assignment {assignment_id}: {e}") from e

    async def list_assignments(self) -> list[StoredAssignment]:
        try:
            return await asyncio.to_thread(self._select_all)
        except sqlite3.Error as e:
            raise StorageError(f"Could not list assignments: {e}") from e

    async def delete_assignment(self, assignment_id: str) -> bool:
        try:
            return await asyncio.to_thread(self._delete, assignment_id)
        except sqlite3.Error as e:
            raise StorageError(f"Could not delete assignment {assignment_id}: {e}") from e
