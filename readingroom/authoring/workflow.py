"""
AuthoringSession - Step-by-step creation of a reading assignment.

Walks a draft through title -> paragraph -> actions -> metadata -> review
and hands the finished payload to an assignment store. Each session is
created and owned by its caller; nothing is shared between drafts.
"""

import logging
import random
from datetime import date
from typing import Optional

from readingroom.schemas import (
    AUTHORING_ORDER,
    AssignmentMetadata,
    AssignmentPayload,
    AuthoringStep,
    ContentDocument,
    StoredAssignment,
)

from .document import attach_action, build, clear_action, list_actioned_words, summarize_actions
from .errors import AuthoringError, StorageError, SubmissionFailed, WorkflowPreconditionUnmet
from .results import Result

logger = logging.getLogger(__name__)


def parse_tools(text: str) -> tuple[str, ...]:
    """Split the comma-separated tools field, dropping blanks."""
    return tuple(tool.strip() for tool in text.split(",") if tool.strip())


class AuthoringSession:
    """
    One tutor's assignment draft.

    Holds the title, the current content document and the metadata, and
    enforces the step gates. Word-action edits are accepted only at the
    actions step; going back never discards entered data.
    """

    def __init__(self, store, rng: Optional[random.Random] = None):
        """
        Initialize a fresh draft.

        Args:
            store: Assignment store receiving the finished payload
            rng: Random source for definition shuffles (tests pass a seeded one)
        """
        self.store = store
        self.rng = rng or random.Random()
        self.is_submitting = False
        self._reset_draft()

    def _reset_draft(self):
        self.step = AuthoringStep.TITLE
        self.title = ""
        self.document: Optional[ContentDocument] = None
        self.metadata = AssignmentMetadata()
        self.error: Optional[str] = None

    def reset(self):
        """Drop the draft and start again at the title step."""
        self._reset_draft()
        logger.info("Authoring draft reset")

    # -------------------------------------------------------------------------
    # Field entry
    # -------------------------------------------------------------------------

    def set_title(self, title: str):
        self.title = title

    def load_paragraph(self, paragraph: str) -> Result[ContentDocument]:
        """
        Build a new document from a paragraph, replacing any previous one.

        All actions on the previous document are discarded.
        """
        if self.step not in (AuthoringStep.PARAGRAPH, AuthoringStep.ACTIONS):
            return self._fail(WorkflowPreconditionUnmet(
                f"A paragraph can only be loaded at the paragraph or actions step (now: {self.step.value})"
            ))
        document = build(paragraph)
        if not document.sentences:
            return self._fail(WorkflowPreconditionUnmet("Please enter a paragraph"))
        self.document = document
        self.error = None
        return Result.success(document)

    def set_action(self, address: str, action) -> Result[ContentDocument]:
        """Attach or replace the action on a word (actions step only)."""
        gate = self._require_actions_step()
        if gate is not None:
            return self._fail(gate)
        result = attach_action(self.document, address, action, self.rng)
        return self._apply(result)

    def clear_action(self, address: str) -> Result[ContentDocument]:
        gate = self._require_actions_step()
        if gate is not None:
            return self._fail(gate)
        return self._apply(clear_action(self.document, address))

    def set_metadata(
        self,
        description: Optional[str] = None,
        tools=(),
        duration_minutes: Optional[int] = None,
        parent_encouragement: Optional[str] = None,
        due_date: Optional[date] = None,
    ):
        """Replace the optional assignment details."""
        if isinstance(tools, str):
            tools = parse_tools(tools)
        self.metadata = AssignmentMetadata(
            description=description,
            tools=tools,
            duration_minutes=duration_minutes,
            parent_encouragement=parent_encouragement,
            due_date=due_date,
        )

    def _require_actions_step(self) -> Optional[AuthoringError]:
        if self.step != AuthoringStep.ACTIONS or self.document is None:
            return WorkflowPreconditionUnmet(
                f"Word actions can only be edited at the actions step (now: {self.step.value})"
            )
        return None

    def _apply(self, result: Result[ContentDocument]) -> Result[ContentDocument]:
        if not result.ok:
            return self._fail(result.error)
        self.document = result.value
        self.error = None
        return result

    def _fail(self, error: AuthoringError) -> Result:
        self.error = error.message
        return Result.failure(error)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def actioned_words(self):
        return list_actioned_words(self.document)

    def summary(self) -> dict:
        """Review-step overview of the draft."""
        return {
            "title": self.title.strip(),
            "sentences": len(self.document.sentences) if self.document else 0,
            "words": self.document.word_count if self.document else 0,
            "actions": summarize_actions(self.document),
            "tools": list(self.metadata.tools),
            "step": self.step.value,
        }

    def step_position(self) -> tuple[int, int]:
        """1-based position of the current step among the editable steps."""
        editable = AUTHORING_ORDER[:-1]
        return editable.index(self.step) + 1, len(editable)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def check_gate(self, step: AuthoringStep) -> Optional[AuthoringError]:
        """The reason the draft cannot leave `step`, or None."""
        if step == AuthoringStep.TITLE:
            if not self.title.strip():
                return WorkflowPreconditionUnmet("Please enter a title")
        elif step == AuthoringStep.PARAGRAPH:
            if self.document is None or not self.document.sentences:
                return WorkflowPreconditionUnmet("Please load a paragraph")
        elif step == AuthoringStep.ACTIONS:
            if not list_actioned_words(self.document):
                return WorkflowPreconditionUnmet("Please assign at least one action to a word")
        elif step == AuthoringStep.REVIEW:
            return WorkflowPreconditionUnmet("Submit the assignment to finish the review step")
        elif step == AuthoringStep.SUBMITTED:
            return WorkflowPreconditionUnmet("The assignment has already been submitted")
        return None

    def advance(self) -> Result[AuthoringStep]:
        """Move to the next step if the current step's gate is satisfied."""
        gate = self.check_gate(self.step)
        if gate is not None:
            logger.info(f"Blocked at {self.step.value}: {gate.message}")
            return self._fail(gate)
        previous = self.step
        self.step = AUTHORING_ORDER[AUTHORING_ORDER.index(self.step) + 1]
        self.error = None
        logger.info(f"Authoring step {previous.value} -> {self.step.value}")
        return Result.success(self.step)

    def go_back(self) -> Result[AuthoringStep]:
        """Return to the previous step; entered data is kept."""
        if self.is_submitting:
            return self._fail(WorkflowPreconditionUnmet("A submission is in progress"))
        index = AUTHORING_ORDER.index(self.step)
        if index == 0 or self.step == AuthoringStep.SUBMITTED:
            return self._fail(WorkflowPreconditionUnmet(f"Cannot go back from {self.step.value}"))
        self.step = AUTHORING_ORDER[index - 1]
        self.error = None
        logger.info(f"Authoring step back to {self.step.value}")
        return Result.success(self.step)

    # -------------------------------------------------------------------------
    # Submission
    # -------------------------------------------------------------------------

    def build_payload(self) -> Result[AssignmentPayload]:
        """Re-check every gate and assemble the outbound payload."""
        for step in (AuthoringStep.TITLE, AuthoringStep.PARAGRAPH, AuthoringStep.ACTIONS):
            gate = self.check_gate(step)
            if gate is not None:
                return Result.failure(gate)
        return Result.success(AssignmentPayload.from_draft(self.title, self.document, self.metadata))

    async def submit(self) -> Result[StoredAssignment]:
        """
        Hand the draft to the store.

        Only valid at the review step, and only one submission may be in
        flight. On success the draft is reset to a fresh title step; on
        failure the session stays at review with the error message kept.
        Only StorageError counts as a store failure; other exceptions
        propagate with the in-flight guard cleared.
        """
        if self.is_submitting:
            return self._fail(WorkflowPreconditionUnmet("A submission is already in progress"))
        if self.step != AuthoringStep.REVIEW:
            return self._fail(WorkflowPreconditionUnmet(
                f"Assignments can only be submitted from the review step (now: {self.step.value})"
            ))
        payload_result = self.build_payload()
        if not payload_result.ok:
            return self._fail(payload_result.error)

        self.is_submitting = True
        try:
            stored = await self.store.create_assignment(payload_result.value)
        except StorageError as e:
            logger.error(f"Submission failed: {e}")
            return self._fail(SubmissionFailed(str(e) or "Failed to create assignment"))
        finally:
            self.is_submitting = False

        self.step = AuthoringStep.SUBMITTED
        logger.info(f"Assignment submitted: {stored.id} ({stored.title!r})")
        self.reset()
        return Result.success(stored)
