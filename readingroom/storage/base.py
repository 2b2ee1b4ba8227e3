"""
Assignment store interface and helpers shared by store implementations.

A store is the persistence collaborator of the authoring workflow: it
receives a finished AssignmentPayload and returns it as a StoredAssignment
with an id. Content is stored and returned verbatim.
"""

import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional, Protocol

from readingroom.schemas import AssignmentPayload, StoredAssignment


class AssignmentStore(Protocol):
    """
    Async persistence interface.

    Expected failures (database unavailable, write rejected) must be raised
    as StorageError; the authoring session reports those as SubmissionFailed.
    Any other exception is treated as a bug and propagates to the caller.
    """

    async def create_assignment(self, payload: AssignmentPayload) -> StoredAssignment: ...

    async def get_assignment(self, assignment_id: str) -> Optional[StoredAssignment]: ...

    async def list_assignments(self) -> list[StoredAssignment]: ...

    async def delete_assignment(self, assignment_id: str) -> bool: ...


def new_stored_assignment(payload: AssignmentPayload) -> StoredAssignment:
    """Attach a fresh id and creation time to a payload."""
    return StoredAssignment(
        id=uuid.uuid4().hex,
        created_at=datetime.now(timezone.utc),
        **dict(payload),
    )


def filter_by_due_date(
    assignments: Iterable[StoredAssignment],
    year: Optional[int] = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
) -> list[StoredAssignment]:
    """
    Filter assignments by due-date parts.

    With no parts given every assignment is returned; otherwise assignments
    without a due date are excluded and each given part must match.
    """
    assignments = list(assignments)
    if not year and not month and not day:
        return assignments

    result = []
    for assignment in assignments:
        due = assignment.due_date
        if due is None:
            continue
        if year and due.year != year:
            continue
        if month and due.month != month:
            continue
        if day and due.day != day:
            continue
        result.append(assignment)
    return result
