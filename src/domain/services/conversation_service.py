"""Conversation service layer: publication consent, replies, reactions and labels."""

from collections.abc import Callable
from datetime import datetime
from typing import Optional

import structlog

from core.config import get_settings
from core.exceptions import AccountBannedError, LabelAlreadySetError, NotAParticipantError
from domain.entities.account import Account
from domain.entities.conversation import Conversation
from domain.entities.event import Events
from domain.entities.label import Label
from domain.entities.letter import Letter
from domain.entities.profile import Profile
from domain.entities.reply import Reply
from domain.policies.authorization import Action, IAuthorizer, get_authorizer
from domain.services.event_service import EventService

logger = structlog.get_logger()


class ConversationService:
    """Service layer wrapping Conversation and Reply with authorization and events."""

    def __init__(
        self,
        authorizer: IAuthorizer | None = None,
        event_service: Optional["EventService"] = None,
    ) -> None:
        self._authorizer = authorizer or get_authorizer(get_settings())
        self._events = event_service

    # --- Conversations ---

    def start_conversation(
        self,
        letter: Letter,
        responder: Profile,
        conversation_id: str,
        actor_account: Account | None = None,
    ) -> Conversation:
        """Start a conversation on ``letter``. Any profile may respond."""
        self._require_not_banned(actor_account)

        conversation = letter.start_new_conversation(
            conversation_id=conversation_id, responder=responder
        )
        logger.info(
            "conversation_started",
            conversation_id=conversation.id,
            letter_id=letter.id,
            responder_id=responder.id,
        )

        if self._events:
            self._events.emit(
                Events.CONVERSATION_STARTED,
                actor_id=responder.id,
                entity_type="conversation",
                entity_id=conversation.id,
                metadata={"letter_id": letter.id, "author_id": letter.author.id},
            )
        return conversation

    # --- Publication consent ---

    def request_publication(
        self, conversation: Conversation, actor: Profile, actor_account: Account | None = None
    ) -> Conversation:
        """Author consents to publishing the conversation."""
        return self._change_consent(
            conversation,
            actor,
            actor_account,
            Action.REQUEST_PUBLICATION,
            conversation.request_publication,
            Events.PUBLICATION_REQUESTED,
        )

    def rescind_publication_request(
        self, conversation: Conversation, actor: Profile, actor_account: Account | None = None
    ) -> Conversation:
        """Author withdraws consent; unpublishes a public conversation."""
        return self._change_consent(
            conversation,
            actor,
            actor_account,
            Action.RESCIND_PUBLICATION_REQUEST,
            conversation.rescind_publication_request,
            Events.PUBLICATION_REQUEST_RESCINDED,
        )

    def accept_publication(
        self, conversation: Conversation, actor: Profile, actor_account: Account | None = None
    ) -> Conversation:
        """Responder consents to publishing the conversation."""
        return self._change_consent(
            conversation,
            actor,
            actor_account,
            Action.ACCEPT_PUBLICATION,
            conversation.accept_publication,
            Events.PUBLICATION_ACCEPTED,
        )

    def rescind_publication_acceptance(
        self, conversation: Conversation, actor: Profile, actor_account: Account | None = None
    ) -> Conversation:
        """Responder withdraws consent; unpublishes a public conversation."""
        return self._change_consent(
            conversation,
            actor,
            actor_account,
            Action.RESCIND_PUBLICATION_ACCEPTANCE,
            conversation.rescind_publication_acceptance,
            Events.PUBLICATION_ACCEPTANCE_RESCINDED,
        )

    # --- Replies ---

    def send_reply(
        self,
        conversation: Conversation,
        actor: Profile,
        response: str,
        reply_id: str,
        sent_at: datetime,
        actor_account: Account | None = None,
    ) -> Reply:
        """Send a reply as one of the conversation's participants."""
        self._require_not_banned(actor_account)
        self._require(actor, Action.SEND_REPLY, conversation, conversation)

        reply = conversation.send_reply(
            responder=actor,
            response=response,
            reply_id=reply_id,
            reply_sent_at=sent_at,
        )
        logger.info("reply_sent", conversation_id=conversation.id, reply_id=reply.id)

        if self._events:
            self._events.emit(
                Events.REPLY_SENT,
                actor_id=actor.id,
                entity_type="reply",
                entity_id=reply.id,
                metadata={"conversation_id": conversation.id},
            )
        return reply

    def react_to_reply(
        self,
        reply: Reply,
        actor: Profile,
        reaction: str | None,
        actor_account: Account | None = None,
    ) -> Reply:
        """Set or clear the reaction on a reply. The last reaction wins."""
        self._require_not_banned(actor_account)
        self._require(actor, Action.REACT_TO_REPLY, reply, reply.conversation)

        previous = reply.reaction
        reply.reaction = reaction
        logger.info("reply_reacted", reply_id=reply.id, reaction=reaction)

        if self._events:
            self._events.emit(
                Events.REPLY_REACTED,
                actor_id=actor.id,
                entity_type="reply",
                entity_id=reply.id,
                metadata={"old": previous, "new": reaction},
            )
        return reply

    def label_reply(
        self,
        reply: Reply,
        actor: Profile,
        label: Label,
        actor_account: Account | None = None,
    ) -> Reply:
        """Attach a label to a reply.

        Raises:
            LabelAlreadySetError: The reply already carries a label.
        """
        self._require_not_banned(actor_account)
        self._require(actor, Action.LABEL_REPLY, reply, reply.conversation)

        try:
            reply.label = label
        except LabelAlreadySetError as exc:
            logger.warning(
                "label_rejected",
                reply_id=reply.id,
                current_label=exc.details["current_label"],
                attempted_label=exc.details["attempted_label"],
            )
            raise

        label = reply.label
        if label is None:
            return reply
        logger.info("reply_labeled", reply_id=reply.id, label=label.value)

        if self._events:
            self._emit_label_events(self._events, reply, actor, label)
        return reply

    # --- Helpers ---

    @staticmethod
    def _emit_label_events(events: EventService, reply: Reply, actor: Profile, label: Label) -> None:
        metadata = {
            "label": label.value,
            "conversation_id": reply.conversation.id,
            "author_id": reply.author.id,
        }
        recorded = [
            events.record(
                Events.REPLY_LABELED,
                actor_id=actor.id,
                entity_type="reply",
                entity_id=reply.id,
                metadata=metadata,
            )
        ]

        match label:
            case Label.MALICE:
                recorded.append(
                    events.record(
                        Events.REPLY_FLAGGED_MALICIOUS,
                        actor_id=actor.id,
                        entity_type="reply",
                        entity_id=reply.id,
                        metadata=metadata,
                    )
                )
            case Label.EXEMPLARY:
                recorded.append(
                    events.record(
                        Events.REPLY_MARKED_EXEMPLARY,
                        actor_id=actor.id,
                        entity_type="reply",
                        entity_id=reply.id,
                        metadata=metadata,
                    )
                )
            case Label.HELPFUL:
                pass
            case _:
                raise ValueError(f"Unhandled label: {label!r}")

        events.dispatch(*recorded)

    def _change_consent(
        self,
        conversation: Conversation,
        actor: Profile,
        actor_account: Account | None,
        action: Action,
        apply: Callable[[], None],
        event_name: str,
    ) -> Conversation:
        self._require_not_banned(actor_account)
        self._require(actor, action, conversation, conversation)

        was_public = conversation.is_public
        apply()
        is_public = conversation.is_public

        logger.info(
            "publication_consent_changed",
            conversation_id=conversation.id,
            action=action.value,
            is_public=is_public,
        )

        if self._events:
            recorded = [
                self._events.record(
                    event_name,
                    actor_id=actor.id,
                    entity_type="conversation",
                    entity_id=conversation.id,
                )
            ]
            if was_public != is_public:
                recorded.append(
                    self._events.record(
                        Events.CONVERSATION_PUBLISHED if is_public else Events.CONVERSATION_UNPUBLISHED,
                        actor_id=actor.id,
                        entity_type="conversation",
                        entity_id=conversation.id,
                        metadata={"letter_id": conversation.letter.id},
                    )
                )
            self._events.dispatch(*recorded)
        return conversation

    def _require(
        self,
        actor: Profile,
        action: Action,
        target: Conversation | Reply,
        conversation: Conversation,
    ) -> None:
        if not self._authorizer.authorize(actor, action, target):
            logger.warning(
                "action_denied",
                conversation_id=conversation.id,
                profile_id=actor.id,
                action=action.value,
            )
            raise NotAParticipantError(conversation.id, actor.id, action.value)

    @staticmethod
    def _require_not_banned(account: Account | None) -> None:
        if account is not None and account.is_banned:
            raise AccountBannedError(account.id)
