"""
Randomizer / Obscurer - Student-facing transforms for word actions.

Provides:
- Fisher-Yates shuffle of definition tokens (Define)
- Letter hiding over a word (Fill)
- Identity presentation of images (Illustrate)
"""

import random
from typing import Optional, Union

from readingroom.schemas import DefineAction, FillAction, IllustrateAction, ImageChoice


DEFAULT_PLACEHOLDER = "_"


def definition_tokens(definition: str) -> list[str]:
    return definition.split()


def shuffle_definition(definition: str, rng: Optional[random.Random] = None) -> tuple[str, ...]:
    """
    Shuffle the whitespace tokens of a definition.

    Walks i from the last index down to 1, draws j uniformly from [0, i]
    and swaps. Every call reshuffles; nothing is cached.
    """
    rng = rng or random.Random()
    tokens = definition_tokens(definition)
    for i in range(len(tokens) - 1, 0, -1):
        j = rng.randint(0, i)
        tokens[i], tokens[j] = tokens[j], tokens[i]
    return tuple(tokens)


def is_permutation_of(tokens, definition: str) -> bool:
    return sorted(tokens) == sorted(definition_tokens(definition))


# -----------------------------------------------------------------------------
# Fill
# -----------------------------------------------------------------------------

def hideable_letters(word: str) -> list[str]:
    """Unique uppercase characters of a word, in first-appearance order."""
    return list(dict.fromkeys(word.upper()))


def count_hidden_letters(original_word: str, letters_to_hide) -> int:
    """Number of characters of the word hidden by letters_to_hide."""
    return sum(hidden_cells(original_word, letters_to_hide))


def obscure_word(
    original_word: str,
    letters_to_hide,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> tuple[str, ...]:
    """
    One display cell per character of the uppercased word.

    A cell is the placeholder when the uppercased character is in
    letters_to_hide; otherwise it is the uppercased character. Characters
    whose uppercase form is longer than one character (e.g. "ß") are shown
    as written so the cells stay aligned with the word.
    """
    cells = []
    for char, hidden in zip(original_word, hidden_cells(original_word, letters_to_hide)):
        upper = char.upper()
        if hidden:
            cells.append(placeholder)
        else:
            cells.append(upper if len(upper) == 1 else char)
    return tuple(cells)


def hidden_cells(original_word: str, letters_to_hide) -> tuple[bool, ...]:
    """Per character of the word, whether it is hidden."""
    hidden = {letter.upper() for letter in letters_to_hide}
    return tuple(char.upper() in hidden for char in original_word)


# -----------------------------------------------------------------------------
# Presentation dispatch
# -----------------------------------------------------------------------------

def present_action(
    action: Union[DefineAction, IllustrateAction, FillAction],
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> Union[tuple[str, ...], tuple[ImageChoice, ...]]:
    """
    Student-facing view of an action.

    Define shows its frozen shuffle (computed when the action was attached),
    Fill shows the obscured word, Illustrate shows its images unchanged.
    """
    if isinstance(action, DefineAction):
        return action.randomized_words
    if isinstance(action, FillAction):
        return obscure_word(action.original_word, action.letters_to_hide, placeholder)
    if isinstance(action, IllustrateAction):
        return action.images
    raise TypeError(f"Unknown word action: {action!r}")
