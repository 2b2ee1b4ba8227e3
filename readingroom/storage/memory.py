"""In-memory assignment store, for tests and the demo app."""

import logging
from typing import Optional

from readingroom.schemas import AssignmentPayload, StoredAssignment

from .base import new_stored_assignment

logger = logging.getLogger(__name__)


class InMemoryAssignmentStore:
    """Keeps stored assignments in a dict, in creation order."""

    def __init__(self):
        self._assignments: dict[str, StoredAssignment] = {}

    async def create_assignment(self, payload: AssignmentPayload) -> StoredAssignment:
        stored = new_stored_assignment(payload)
        self._assignments[stored.id] = stored
        logger.info(f"Stored assignment {stored.id} in memory")
        return stored

    async def get_assignment(self, assignment_id: str) -> Optional[StoredAssignment]:
        return self._assignments.get(assignment_id)

    async def list_assignments(self) -> list[StoredAssignment]:
        return list(self._assignments.values())

    async def delete_assignment(self, assignment_id: str) -> bool:
        return self._assignments.pop(assignment_id, None) is not None
