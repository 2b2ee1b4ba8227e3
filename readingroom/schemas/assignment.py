"""
Assignment schemas for ReadingRoom.

Defines Pydantic models for the authoring output including:
- Authoring step tracking
- Assignment metadata (optional details from the metadata step)
- The payload handed to the persistence collaborator
- Stored assignments as returned by a store
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from .actions import ContentModel
from .content import ContentDocument


class AuthoringStep(str, Enum):
    TITLE = "title"
    PARAGRAPH = "paragraph"
    ACTIONS = "actions"
    METADATA = "metadata"
    REVIEW = "review"
    SUBMITTED = "submitted"


AUTHORING_ORDER = [
    AuthoringStep.TITLE,
    AuthoringStep.PARAGRAPH,
    AuthoringStep.ACTIONS,
    AuthoringStep.METADATA,
    AuthoringStep.REVIEW,
    AuthoringStep.SUBMITTED,
]


class AssignmentMetadata(ContentModel):
    """Optional details collected at the metadata step."""
    description: Optional[str] = None
    tools: tuple[str, ...] = ()
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    parent_encouragement: Optional[str] = None
    due_date: Optional[date] = None

    @field_validator('tools', mode='before')
    @classmethod
    def drop_blank_tools(cls, v):
        return tuple(str(tool).strip() for tool in v if str(tool).strip())


class AssignmentPayload(ContentModel):
    """What a finished draft hands to the store."""
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    content: ContentDocument
    tools: tuple[str, ...] = ()
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    parent_encouragement: Optional[str] = None
    due_date: Optional[date] = None

    @classmethod
    def from_draft(
        cls,
        title: str,
        content: ContentDocument,
        metadata: AssignmentMetadata,
    ) -> "AssignmentPayload":
        return cls(
            title=title.strip(),
            description=metadata.description,
            content=content,
            tools=metadata.tools,
            duration_minutes=metadata.duration_minutes,
            parent_encouragement=metadata.parent_encouragement,
            due_date=metadata.due_date,
        )


class StoredAssignment(AssignmentPayload):
    id: str
    created_at: datetime
