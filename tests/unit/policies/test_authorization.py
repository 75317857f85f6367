"""Unit tests for authorization policies."""

import pytest

from core.config import Settings
from domain.entities.account import Account
from domain.entities.conversation import Conversation
from domain.entities.profile import Profile
from domain.entities.reply import Reply
from domain.policies.authorization import (
    Action,
    AllowAllAuthorizer,
    ParticipantAuthorizer,
    get_authorizer,
)


@pytest.fixture
def authorizer() -> ParticipantAuthorizer:
    return ParticipantAuthorizer()


class TestViewProfiles:
    def test_owner_only(self, authorizer: ParticipantAuthorizer):
        account = Account(id="a1")

        assert authorizer.authorize(Account(id="a1"), Action.VIEW_PROFILES, account)
        assert not authorizer.authorize(Account(id="a2"), Action.VIEW_PROFILES, account)

    def test_profile_actor_is_denied(self, authorizer: ParticipantAuthorizer, author: Profile):
        assert not authorizer.authorize(author, Action.VIEW_PROFILES, Account(id="a1"))


class TestConversationActions:
    @pytest.mark.parametrize(
        "action, allowed",
        [
            (Action.REQUEST_PUBLICATION, {"author"}),
            (Action.RESCIND_PUBLICATION_REQUEST, {"author"}),
            (Action.ACCEPT_PUBLICATION, {"responder"}),
            (Action.RESCIND_PUBLICATION_ACCEPTANCE, {"responder"}),
            (Action.SEND_REPLY, {"author", "responder"}),
        ],
    )
    def test_role_matrix(
        self,
        authorizer: ParticipantAuthorizer,
        conversation: Conversation,
        author: Profile,
        responder: Profile,
        outsider: Profile,
        action: Action,
        allowed: set[str],
    ):
        actors = {"author": author, "responder": responder, "outsider": outsider}

        permitted = {
            name for name, actor in actors.items()
            if authorizer.authorize(actor, action, conversation)
        }

        assert permitted == allowed

    def test_conversation_action_needs_conversation_target(
        self, authorizer: ParticipantAuthorizer, author: Profile, reply: Reply
    ):
        assert not authorizer.authorize(author, Action.REQUEST_PUBLICATION, reply)


class TestReplyActions:
    @pytest.mark.parametrize("action", [Action.REACT_TO_REPLY, Action.LABEL_REPLY])
    def test_only_the_other_participant(
        self,
        authorizer: ParticipantAuthorizer,
        reply: Reply,
        author: Profile,
        responder: Profile,
        outsider: Profile,
        action: Action,
    ):
        assert authorizer.authorize(author, action, reply)
        assert not authorizer.authorize(responder, action, reply)
        assert not authorizer.authorize(outsider, action, reply)

    def test_reply_action_needs_reply_target(
        self, authorizer: ParticipantAuthorizer, conversation: Conversation, author: Profile
    ):
        assert not authorizer.authorize(author, Action.LABEL_REPLY, conversation)


class TestGetAuthorizer:
    def test_enforced_by_default(self):
        assert isinstance(get_authorizer(Settings()), ParticipantAuthorizer)

    def test_disabled(self, outsider: Profile, conversation: Conversation):
        authorizer = get_authorizer(Settings(enforce_participation=False))

        assert isinstance(authorizer, AllowAllAuthorizer)
        assert authorizer.authorize(outsider, Action.ACCEPT_PUBLICATION, conversation)
