"""Reply domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

from core.exceptions import LabelAlreadySetError
from core.time import utc_now
from domain.entities.label import Label
from domain.entities.profile import Profile

if TYPE_CHECKING:
    from domain.entities.conversation import Conversation


@dataclass
class Reply:
    """A message sent within a conversation.

    ``reaction`` is a free-form emoji reaction and may be overwritten at will.
    ``label`` can be assigned at most once: any assignment after a label is
    set raises ``LabelAlreadySetError`` and keeps the original label.
    """

    id: str
    conversation: "Conversation"
    author: Profile
    content: str
    sent_at: datetime
    created_at: datetime = field(default_factory=utc_now)
    reaction: str | None = None
    label: Label | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "label":
            current = getattr(self, "label", None)
            if current is not None:
                raise LabelAlreadySetError(
                    reply_id=self.id,
                    current=current.value,
                    attempted=value.value if isinstance(value, Label) else value,
                )
            if value is not None and not isinstance(value, Label):
                value = Label(value)
        super().__setattr__(name, value)

    @property
    def has_label(self) -> bool:
        return self.label is not None
