"""
Content document schemas for ReadingRoom.

Defines the tokenized reading paragraph:
- WordAddress: stable s{sentence}_w{word} token
- Word / Sentence / ContentDocument: immutable nested structure

Documents are frozen and hold tuples, so an update always produces a new
document and untouched sentences can be shared between versions.
"""

import re
from typing import NamedTuple, Optional

from pydantic import Field, field_validator

from .actions import ContentModel, WordAction

# =============================================================================
# ADDRESS CONVENTION: s{N}_w{M}, base-10, zero-based, no leading zeros
# =============================================================================

ADDRESS_PATTERN = r'^s(0|[1-9]\d*)_w(0|[1-9]\d*)$'
_ADDRESS_RE = re.compile(ADDRESS_PATTERN)


class WordAddress(NamedTuple):
    """(sentence_index, word_index) pair; str() gives the wire token."""
    sentence_index: int
    word_index: int

    def __str__(self) -> str:
        return f"s{self.sentence_index}_w{self.word_index}"

    @classmethod
    def parse(cls, token: str) -> Optional["WordAddress"]:
        """Parse an address token; None if it does not match the format."""
        if not isinstance(token, str):
            return None
        match = _ADDRESS_RE.match(token)
        if not match:
            return None
        return cls(int(match.group(1)), int(match.group(2)))


def sentence_id(sentence_index: int) -> str:
    return f"s{sentence_index}"


# -----------------------------------------------------------------------------
# Document structure
# -----------------------------------------------------------------------------

class Word(ContentModel):
    address: str = Field(..., pattern=ADDRESS_PATTERN)
    text: str = Field(..., min_length=1)
    action: Optional[WordAction] = None

    @field_validator('text')
    @classmethod
    def text_has_no_whitespace(cls, v):
        if any(c.isspace() for c in v):
            raise ValueError('Word text must not contain whitespace')
        return v

    @property
    def location(self) -> WordAddress:
        return WordAddress.parse(self.address)


class Sentence(ContentModel):
    id: str = Field(..., pattern=r'^s(0|[1-9]\d*)$')
    text: str = Field(..., min_length=1)
    words: tuple[Word, ...] = Field(..., min_length=1)


class ContentDocument(ContentModel):
    """
    A paragraph split into addressed sentences and words.

    This is the value persisted as an assignment's `content` field and
    reloaded verbatim (no re-tokenization on load).
    """
    original_paragraph: str
    sentences: tuple[Sentence, ...] = ()

    @property
    def word_count(self) -> int:
        return sum(len(sentence.words) for sentence in self.sentences)

    def iter_words(self):
        """Yield every word in document order."""
        for sentence in self.sentences:
            yield from sentence.words
