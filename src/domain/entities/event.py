"""Domain event entity and event name constants."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import uuid4

from core.time import utc_now

# --- Event Name Constants ---
# Format: {entity_type}.{action}


class Events:
    """Domain event names using dot-notation."""

    # Account events
    ACCOUNT_BANNED = "account.banned"
    ACCOUNT_UNBANNED = "account.unbanned"
    PROFILE_CREATED = "profile.created"

    # Conversation events
    CONVERSATION_STARTED = "conversation.started"
    PUBLICATION_REQUESTED = "conversation.publication_requested"
    PUBLICATION_REQUEST_RESCINDED = "conversation.publication_request_rescinded"
    PUBLICATION_ACCEPTED = "conversation.publication_accepted"
    PUBLICATION_ACCEPTANCE_RESCINDED = "conversation.publication_acceptance_rescinded"
    CONVERSATION_PUBLISHED = "conversation.published"
    CONVERSATION_UNPUBLISHED = "conversation.unpublished"

    # Reply events
    REPLY_SENT = "reply.sent"
    REPLY_REACTED = "reply.reacted"
    REPLY_LABELED = "reply.labeled"
    REPLY_FLAGGED_MALICIOUS = "reply.flagged_malicious"
    REPLY_MARKED_EXEMPLARY = "reply.marked_exemplary"


@dataclass(frozen=True)
class DomainEvent:
    """Something that happened to an entity, for moderation and notification subscribers."""

    name: str
    actor_id: str | None
    entity_type: str
    entity_id: str
    metadata: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = field(default_factory=utc_now)
