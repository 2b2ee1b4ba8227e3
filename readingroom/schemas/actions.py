"""
Word action schemas for ReadingRoom.

Defines the closed set of pedagogical actions a tutor can attach to a word:
- Define: student rebuilds a shuffled definition
- Illustrate: student picks among exactly three images
- Fill: student fills letters hidden from the word

The JSON form of every model uses camelCase keys (randomizedWords,
lettersToHide, ...) so persisted content keeps its external shape.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, Literal, Optional, Union


REQUIRED_IMAGE_COUNT = 3


class ContentModel(BaseModel):
    """Base for all persisted content: immutable, camelCase on the wire."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict:
        """JSON-compatible dict in the external (camelCase) shape."""
        return self.model_dump(mode="json", by_alias=True)


# -----------------------------------------------------------------------------
# Action variants
# -----------------------------------------------------------------------------

class DefineAction(ContentModel):
    """Definition the student reassembles from shuffled tokens."""
    type: Literal["define"] = "define"
    definition: str
    randomized_words: tuple[str, ...] = ()


ImageSource = Literal["url", "phone_upload", "library"]


class ImageChoice(ContentModel):
    url: str
    source: ImageSource = "url"
    alt_text: Optional[str] = None


class IllustrateAction(ContentModel):
    """
    Three candidate images for a word.

    The count is not enforced here: a candidate with the wrong number of
    images must still reach attach-time validation so it can be reported
    as InvalidImageCount instead of a parse error.
    """
    type: Literal["illustrate"] = "illustrate"
    images: tuple[ImageChoice, ...] = ()


class FillAction(ContentModel):
    """Letters hidden from the word; the student types them back in."""
    type: Literal["fill"] = "fill"
    letters_to_hide: tuple[str, ...] = ()
    hidden_letter_count: int = Field(default=0, ge=0)
    original_word: str = ""

    @field_validator("letters_to_hide", mode="before")
    @classmethod
    def normalize_letters(cls, v):
        """Uppercase, de-duplicate and sort; each entry is one character."""
        letters = set()
        for letter in v:
            if not isinstance(letter, str) or len(letter) != 1:
                raise ValueError(f"letters_to_hide entries must be single characters, got {letter!r}")
            letters.add(letter.upper())
        return tuple(sorted(letters))


WordAction = Annotated[
    Union[DefineAction, IllustrateAction, FillAction],
    Field(discriminator="type"),
]

ACTION_TYPES = ("define", "illustrate", "fill")

_word_action_adapter = TypeAdapter(WordAction)


def parse_action(data: Union[dict, DefineAction, IllustrateAction, FillAction]):
    """
    Parse an inbound action payload into its variant model.

    Accepts an already-built model (returned as-is) or a JSON dict using
    either camelCase or snake_case keys.

    Raises:
        pydantic.ValidationError: Unknown `type` or malformed fields
    """
    if isinstance(data, (DefineAction, IllustrateAction, FillAction)):
        return data
    return _word_action_adapter.validate_python(data)
