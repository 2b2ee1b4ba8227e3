"""
ReadingRoom Schemas - Pydantic models for reading assignments.

This module exports all schema classes for:
- Actions: the Define / Illustrate / Fill word-action union
- Content: addressed sentences and words of a paragraph
- Assignment: authoring steps, metadata and persistence payloads
"""

# Action schemas
from .actions import (
    ContentModel,
    DefineAction,
    ImageChoice,
    IllustrateAction,
    FillAction,
    WordAction,
    ACTION_TYPES,
    REQUIRED_IMAGE_COUNT,
    parse_action,
)

# Content schemas
from .content import (
    ADDRESS_PATTERN,
    WordAddress,
    Word,
    Sentence,
    ContentDocument,
    sentence_id,
)

# Assignment schemas
from .assignment import (
    AuthoringStep,
    AUTHORING_ORDER,
    AssignmentMetadata,
    AssignmentPayload,
    StoredAssignment,
)

__all__ = [
    # Actions
    'ContentModel',
    'DefineAction',
    'ImageChoice',
    'IllustrateAction',
    'FillAction',
    'WordAction',
    'ACTION_TYPES',
    'REQUIRED_IMAGE_COUNT',
    'parse_action',
    # Content
    'ADDRESS_PATTERN',
    'WordAddress',
    'Word',
    'Sentence',
    'ContentDocument',
    'sentence_id',
    # Assignment
    'AuthoringStep',
    'AUTHORING_ORDER',
    'AssignmentMetadata',
    'AssignmentPayload',
    'StoredAssignment',
]
