"""Shared test fixtures."""

import asyncio
import random

import pytest

from readingroom.authoring import AuthoringSession, StorageError, build
from readingroom.schemas import DefineAction, ImageChoice
from readingroom.storage import InMemoryAssignmentStore, new_stored_assignment


SAMPLE_PARAGRAPH = "The cat sat. It was happy!"


class FailingStore(InMemoryAssignmentStore):
    """Store whose writes fail until `fail` is switched off."""

    def __init__(self, message: str = "database unavailable"):
        super().__init__()
        self.fail = True
        self.message = message
        self.attempts = 0

    async def create_assignment(self, payload):
        self.attempts += 1
        if self.fail:
            raise StorageError(self.message)
        return await super().create_assignment(payload)


class BlockingStore(InMemoryAssignmentStore):
    """Store whose writes wait until `release` is set."""

    def __init__(self):
        super().__init__()
        self.release = asyncio.Event()
        self.calls = 0

    async def create_assignment(self, payload):
        self.calls += 1
        await self.release.wait()
        return new_stored_assignment(payload)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def document():
    """The two-sentence sample paragraph, freshly tokenized."""
    return build(SAMPLE_PARAGRAPH)


@pytest.fixture
def three_images():
    return [
        ImageChoice(url=f"https://example.com/cat{idx}.png", source="url", alt_text=f"Image {idx}")
        for idx in range(1, 4)
    ]


@pytest.fixture
def memory_store():
    return InMemoryAssignmentStore()


def drive_to_review(session: AuthoringSession, paragraph: str = SAMPLE_PARAGRAPH) -> AuthoringSession:
    """Walk a session through every gate up to the review step."""
    session.set_title("Cats")
    session.advance().unwrap()
    session.load_paragraph(paragraph).unwrap()
    session.advance().unwrap()
    session.set_action("s0_w1", DefineAction(definition="a small domesticated carnivorous mammal")).unwrap()
    session.advance().unwrap()
    session.set_metadata(tools="Dictionary, Google Images", duration_minutes=20)
    session.advance().unwrap()
    return session


@pytest.fixture
def review_session(memory_store, rng):
    return drive_to_review(AuthoringSession(memory_store, rng=rng))
