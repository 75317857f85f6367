"""Shared fixtures for unit tests."""

from datetime import UTC, datetime

import pytest

from domain.entities.account import Account
from domain.entities.conversation import Conversation
from domain.entities.letter import Letter
from domain.entities.profile import Profile
from domain.entities.reply import Reply
from domain.entities.space import Space
from domain.services.event_service import EventService
from infrastructure.events.memory_event_log import InMemoryEventLog


@pytest.fixture
def space() -> Space:
    return Space(id="space-1", name="Grief")


@pytest.fixture
def author(space: Space) -> Profile:
    """The profile that writes the letter."""
    return Profile(id="profile-author", space=space)


@pytest.fixture
def responder(space: Space) -> Profile:
    """The profile that answers the letter."""
    return Profile(id="profile-responder", space=space)


@pytest.fixture
def outsider(space: Space) -> Profile:
    """A profile with no part in the conversation."""
    return Profile(id="profile-outsider", space=space)


@pytest.fixture
def account(author: Profile) -> Account:
    return Account(id="account-1", profiles=[author])


@pytest.fixture
def letter(author: Profile) -> Letter:
    return Letter(id="letter-1", content="Has anyone else lost a parent young?", author=author)


@pytest.fixture
def conversation(letter: Letter, responder: Profile) -> Conversation:
    return letter.start_new_conversation(conversation_id="c1", responder=responder)


@pytest.fixture
def sent_at() -> datetime:
    return datetime(2024, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def reply(conversation: Conversation, responder: Profile, sent_at: datetime) -> Reply:
    """A reply written by the responder."""
    return conversation.send_reply(
        responder=responder, response="hello", reply_id="r1", reply_sent_at=sent_at
    )


@pytest.fixture
def event_log() -> InMemoryEventLog:
    return InMemoryEventLog()


@pytest.fixture
def event_service(event_log: InMemoryEventLog) -> EventService:
    return EventService(event_log)
