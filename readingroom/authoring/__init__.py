"""
ReadingRoom Authoring - Content model operations and the authoring workflow.

This module provides:
- tokenize / build: paragraph -> addressed ContentDocument
- attach_action / set_action / clear_action / get_word: word-level updates
- Randomizer helpers: definition shuffle and letter hiding
- AuthoringSession: gated title -> paragraph -> actions -> metadata -> review flow
- Result and the AuthoringError taxonomy
"""

from .errors import (
    AuthoringError,
    AddressNotFound,
    InvalidDefinition,
    InvalidImageCount,
    NoLettersSelected,
    InvalidAction,
    WorkflowPreconditionUnmet,
    SubmissionFailed,
    StorageError,
)

from .results import Result

from .tokenizer import (
    tokenize,
    split_sentences,
    split_words,
)

from .randomizer import (
    DEFAULT_PLACEHOLDER,
    shuffle_definition,
    hideable_letters,
    count_hidden_letters,
    hidden_cells,
    obscure_word,
    present_action,
)

from .validation import (
    validate_action,
    complete_action,
)

from .document import (
    ActionedWord,
    build,
    load_document,
    get_word,
    attach_action,
    set_action,
    clear_action,
    list_actioned_words,
    summarize_actions,
)

from .workflow import (
    AuthoringSession,
    parse_tools,
)

__all__ = [
    # Errors
    "AuthoringError",
    "AddressNotFound",
    "InvalidDefinition",
    "InvalidImageCount",
    "NoLettersSelected",
    "InvalidAction",
    "WorkflowPreconditionUnmet",
    "SubmissionFailed",
    "StorageError",
    "Result",
    # Tokenizer
    "tokenize",
    "split_sentences",
    "split_words",
    # Randomizer
    "DEFAULT_PLACEHOLDER",
    "shuffle_definition",
    "hideable_letters",
    "count_hidden_letters",
    "hidden_cells",
    "obscure_word",
    "present_action",
    # Validation
    "validate_action",
    "complete_action",
    # Document
    "ActionedWord",
    "build",
    "load_document",
    "get_word",
    "attach_action",
    "set_action",
    "clear_action",
    "list_actioned_words",
    "summarize_actions",
    # Workflow
    "AuthoringSession",
    "parse_tools",
]
