"""
Action validation - Per-variant checks and completion of candidate actions.

A candidate action comes from the authoring UI and may be incomplete
(no shuffle yet, letter count not computed). `complete_action` turns a
valid candidate into the fully formed action stored on the word.
"""

import random
from typing import Optional

from readingroom.schemas import (
    DefineAction,
    FillAction,
    IllustrateAction,
    REQUIRED_IMAGE_COUNT,
    Word,
)

from .errors import AuthoringError, InvalidDefinition, InvalidImageCount, NoLettersSelected
from .randomizer import count_hidden_letters, is_permutation_of, shuffle_definition


def letters_in_word(letters_to_hide, word_text: str) -> tuple[str, ...]:
    """Restrict a letter selection to characters that occur in the word."""
    present = set(word_text.upper())
    return tuple(sorted({letter.upper() for letter in letters_to_hide} & present))


def validate_action(candidate, word: Word) -> Optional[AuthoringError]:
    """Return the first validation failure for a candidate, or None."""
    if isinstance(candidate, DefineAction):
        if not candidate.definition.strip():
            return InvalidDefinition("Please enter a definition")
        return None
    if isinstance(candidate, IllustrateAction):
        count = len(candidate.images)
        if count != REQUIRED_IMAGE_COUNT:
            return InvalidImageCount(
                f"Please select exactly {REQUIRED_IMAGE_COUNT} images (currently {count})"
            )
        return None
    if isinstance(candidate, FillAction):
        if not letters_in_word(candidate.letters_to_hide, word.text):
            return NoLettersSelected("Please select at least one letter to hide")
        return None
    raise TypeError(f"Unknown word action: {candidate!r}")


def complete_action(candidate, word: Word, rng: Optional[random.Random] = None):
    """
    Fill in derived fields of a validated candidate for the target word.

    - Define: trims the definition; reshuffles unless the candidate already
      carries a permutation of exactly this definition
    - Fill: binds to the word's text and recomputes the hidden count
    - Illustrate: unchanged
    """
    if isinstance(candidate, DefineAction):
        definition = candidate.definition.strip()
        randomized = candidate.randomized_words
        if not randomized or not is_permutation_of(randomized, definition):
            randomized = shuffle_definition(definition, rng)
        return DefineAction(definition=definition, randomized_words=randomized)
    if isinstance(candidate, FillAction):
        letters = letters_in_word(candidate.letters_to_hide, word.text)
        return FillAction(
            letters_to_hide=letters,
            hidden_letter_count=count_hidden_letters(word.text, letters),
            original_word=word.text,
        )
    if isinstance(candidate, IllustrateAction):
        return candidate
    raise TypeError(f"Unknown word action: {candidate!r}")
