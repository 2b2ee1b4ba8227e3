"""
Content document builder - Build, query and update reading content.

Provides:
- build(): paragraph -> ContentDocument
- get_word() / attach_action() / set_action() / clear_action()
- list_actioned_words() and summarize_actions() for gating and summaries
- load_document() to restore persisted content without re-tokenizing

Updates never mutate: a new document is returned that shares every
sentence except the one containing the target word.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from readingroom.schemas import (
    ACTION_TYPES,
    ContentDocument,
    Word,
    WordAction,
    WordAddress,
    parse_action,
)

from .errors import AddressNotFound, AuthoringError, InvalidAction, InvalidDefinition
from .results import Result
from .tokenizer import tokenize
from .validation import complete_action, validate_action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionedWord:
    """A word that carries an action, as listed for gating and exercises."""
    address: str
    text: str
    action: WordAction


def build(paragraph: str) -> ContentDocument:
    """Tokenize a paragraph into a fresh document with no actions."""
    document = tokenize(paragraph)
    logger.info(
        f"Built content document: {len(document.sentences)} sentences, "
        f"{document.word_count} words"
    )
    return document


def load_document(payload: dict) -> ContentDocument:
    """
    Restore a persisted document verbatim.

    Raises:
        pydantic.ValidationError: If the payload is not a content document
    """
    return ContentDocument.model_validate(payload)


# -----------------------------------------------------------------------------
# Queries
# -----------------------------------------------------------------------------

def _resolve(document: ContentDocument, address: str) -> Optional[WordAddress]:
    location = WordAddress.parse(address)
    if location is None:
        return None
    if location.sentence_index >= len(document.sentences):
        return None
    if location.word_index >= len(document.sentences[location.sentence_index].words):
        return None
    return location


def _not_found(address) -> AddressNotFound:
    return AddressNotFound(f"No word at address {address!r}")


def get_word(document: ContentDocument, address: str) -> Result[Word]:
    location = _resolve(document, address)
    if location is None:
        return Result.failure(_not_found(address))
    return Result.success(document.sentences[location.sentence_index].words[location.word_index])


def list_actioned_words(document: Optional[ContentDocument]) -> list[ActionedWord]:
    """All words with an action, in sentence order then word order."""
    if document is None:
        return []
    return [
        ActionedWord(address=word.address, text=word.text, action=word.action)
        for word in document.iter_words()
        if word.action is not None
    ]


def summarize_actions(document: Optional[ContentDocument]) -> dict:
    """Counts of configured words, overall and per action type."""
    actioned = list_actioned_words(document)
    by_type = {action_type: 0 for action_type in ACTION_TYPES}
    for entry in actioned:
        by_type[entry.action.type] += 1
    return {
        "total": len(actioned),
        "by_type": by_type,
        "label": f"{len(actioned)} word{'s' if len(actioned) != 1 else ''} configured",
    }


# -----------------------------------------------------------------------------
# Updates
# -----------------------------------------------------------------------------

def _replace_word_action(
    document: ContentDocument,
    location: WordAddress,
    action: Optional[WordAction],
) -> ContentDocument:
    """Copy-on-write along document -> sentence -> word; siblings are reused."""
    sentence = document.sentences[location.sentence_index]
    words = list(sentence.words)
    words[location.word_index] = words[location.word_index].model_copy(update={"action": action})
    sentences = list(document.sentences)
    sentences[location.sentence_index] = sentence.model_copy(update={"words": tuple(words)})
    return document.model_copy(update={"sentences": tuple(sentences)})


def _parse_failure(candidate, exc: ValidationError) -> AuthoringError:
    """Map a payload that fails to parse onto the error taxonomy."""
    if isinstance(candidate, dict) and candidate.get("type") == "define":
        fields = {str(err["loc"][1]) for err in exc.errors() if len(err["loc"]) > 1}
        if fields <= {"definition"}:
            return InvalidDefinition("Please enter a definition")
    first = exc.errors()[0] if exc.errors() else {"msg": str(exc)}
    return InvalidAction(f"Invalid word action: {first['msg']}")


def attach_action(
    document: ContentDocument,
    address: str,
    candidate,
    rng: Optional[random.Random] = None,
) -> Result[ContentDocument]:
    """
    Validate a candidate action and attach it to the addressed word.

    Checks, first failure wins: AddressNotFound, InvalidAction (payload
    does not parse; a define payload without a usable definition reports
    InvalidDefinition), InvalidDefinition, InvalidImageCount,
    NoLettersSelected. On success the word's previous action is replaced
    entirely.

    Args:
        document: Document to update (left unchanged)
        address: Word address token, e.g. "s0_w1"
        candidate: Action model or JSON dict
        rng: Random source for the Define shuffle

    Returns:
        Result holding the updated document
    """
    location = _resolve(document, address)
    if location is None:
        return Result.failure(_not_found(address))

    try:
        candidate = parse_action(candidate)
    except ValidationError as e:
        error = _parse_failure(candidate, e)
        logger.info(f"Rejected action payload for {address}: {error.code}")
        return Result.failure(error)

    word = document.sentences[location.sentence_index].words[location.word_index]
    error = validate_action(candidate, word)
    if error is not None:
        logger.info(f"Rejected {candidate.type} action for {address}: {error.code}")
        return Result.failure(error)

    action = complete_action(candidate, word, rng)
    logger.info(f"Attached {action.type} action to {address} ({word.text!r})")
    return Result.success(_replace_word_action(document, location, action))


def set_action(
    document: ContentDocument,
    address: str,
    action,
    rng: Optional[random.Random] = None,
) -> Result[ContentDocument]:
    """Replace the action at an address; see attach_action for validation."""
    return attach_action(document, address, action, rng)


def clear_action(document: ContentDocument, address: str) -> Result[ContentDocument]:
    """Remove the action at an address (no-op result if it had none)."""
    location = _resolve(document, address)
    if location is None:
        return Result.failure(_not_found(address))
    word = document.sentences[location.sentence_index].words[location.word_index]
    if word.action is None:
        return Result.success(document)
    logger.info(f"Cleared {word.action.type} action from {address}")
    return Result.success(_replace_word_action(document, location, None))
