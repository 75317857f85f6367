"""Letter domain entity."""

from dataclasses import dataclass

from core.time import utc_now
from domain.entities.conversation import Conversation
from domain.entities.profile import Profile


@dataclass(frozen=True)
class Letter:
    """An outgoing request for discussion.

    Anyone can reply to a letter; doing so starts a new conversation tied to
    the letter, and every later reply belongs to that conversation.
    """

    id: str
    content: str
    author: Profile

    def start_new_conversation(self, conversation_id: str, responder: Profile) -> Conversation:
        """Start a conversation between this letter's author and ``responder``.

        Any profile may respond. Restricting later activity to the two
        participants is up to the caller's authorizer.
        """
        return Conversation(
            id=conversation_id,
            letter=self,
            responder=responder,
            created_at=utc_now(),
        )
