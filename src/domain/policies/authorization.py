"""Authorization policies for account and conversation actions."""

from enum import StrEnum
from typing import Any, Protocol

from core.config import Settings
from domain.entities.account import Account
from domain.entities.conversation import Conversation
from domain.entities.profile import Profile
from domain.entities.reply import Reply


class Action(StrEnum):
    """Actions gated by an authorizer."""

    VIEW_PROFILES = "view_profiles"
    REQUEST_PUBLICATION = "request_publication"
    RESCIND_PUBLICATION_REQUEST = "rescind_publication_request"
    ACCEPT_PUBLICATION = "accept_publication"
    RESCIND_PUBLICATION_ACCEPTANCE = "rescind_publication_acceptance"
    SEND_REPLY = "send_reply"
    REACT_TO_REPLY = "react_to_reply"
    LABEL_REPLY = "label_reply"


AUTHOR_ACTIONS = frozenset({Action.REQUEST_PUBLICATION, Action.RESCIND_PUBLICATION_REQUEST})
RESPONDER_ACTIONS = frozenset({Action.ACCEPT_PUBLICATION, Action.RESCIND_PUBLICATION_ACCEPTANCE})
REPLY_ACTIONS = frozenset({Action.REACT_TO_REPLY, Action.LABEL_REPLY})


class IAuthorizer(Protocol):
    """Protocol for capability checks."""

    def authorize(self, actor: Any, action: Action, target: Any) -> bool:
        """
        Decide whether ``actor`` may perform ``action`` on ``target``.

        Args:
            actor: The acting Profile, or Account for account-level actions
            action: The action being attempted
            target: The Account, Conversation or Reply acted upon

        Returns:
            True if allowed, False otherwise
        """
        ...


class ParticipantAuthorizer:
    """Restricts each action to the profiles the conversation involves.

    - Only the account itself may view its profiles.
    - Only the letter's author requests or rescinds publication.
    - Only the responder accepts or rescinds acceptance.
    - Either participant may send replies.
    - Reactions and labels come from the participant who did not write the reply.
    """

    def authorize(self, actor: Any, action: Action, target: Any) -> bool:
        if action == Action.VIEW_PROFILES:
            return (
                isinstance(actor, Account)
                and isinstance(target, Account)
                and actor.id == target.id
            )

        if not isinstance(actor, Profile):
            return False

        if action in REPLY_ACTIONS:
            if not isinstance(target, Reply):
                return False
            return target.conversation.is_participant(actor) and actor.id != target.author.id

        if not isinstance(target, Conversation):
            return False
        if action in AUTHOR_ACTIONS:
            return actor.id == target.author.id
        if action in RESPONDER_ACTIONS:
            return actor.id == target.responder.id
        if action == Action.SEND_REPLY:
            return target.is_participant(actor)
        return False


class AllowAllAuthorizer:
    """Permits everything. For callers that authorize upstream."""

    def authorize(self, actor: Any, action: Action, target: Any) -> bool:
        return True


def get_authorizer(config: Settings) -> IAuthorizer:
    """Pick the authorizer matching ``enforce_participation``."""
    if config.enforce_participation:
        return ParticipantAuthorizer()
    return AllowAllAuthorizer()
