"""Conversation domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from core.time import utc_now
from domain.entities.profile import Profile
from domain.entities.reply import Reply

if TYPE_CHECKING:
    from domain.entities.letter import Letter


@dataclass
class Conversation:
    """An exchange between a letter's author and one responder.

    A conversation becomes public if, and only if, the letter's author has
    requested publication and the responder has accepted it. Either party can
    withdraw consent at any time, which makes the conversation private again.
    """

    id: str
    letter: "Letter"
    responder: Profile
    created_at: datetime = field(default_factory=utc_now)
    is_publication_requested: bool = False
    is_publication_accepted: bool = False

    @property
    def author(self) -> Profile:
        """The profile that wrote the letter."""
        return self.letter.author

    @property
    def is_public(self) -> bool:
        """Both parties currently consent to publication."""
        return self.is_publication_requested and self.is_publication_accepted

    def is_participant(self, profile: Profile) -> bool:
        """Check whether ``profile`` is the letter author or the responder."""
        return profile.id in (self.author.id, self.responder.id)

    def request_publication(self) -> None:
        """Record the author's consent to publish."""
        self.is_publication_requested = True

    def rescind_publication_request(self) -> None:
        """Withdraw the author's consent to publish."""
        self.is_publication_requested = False

    def accept_publication(self) -> None:
        """Record the responder's consent to publish."""
        self.is_publication_accepted = True

    def rescind_publication_acceptance(self) -> None:
        """Withdraw the responder's consent to publish."""
        self.is_publication_accepted = False

    def send_reply(
        self,
        responder: Profile,
        response: str,
        reply_id: str,
        reply_sent_at: datetime,
    ) -> Reply:
        """Create a reply in this conversation.

        ``created_at`` is stamped now while ``sent_at`` comes from the caller,
        so a reply composed offline keeps its original send time.
        """
        return Reply(
            id=reply_id,
            conversation=self,
            author=responder,
            content=response,
            sent_at=reply_sent_at,
            created_at=utc_now(),
        )
