"""Profile domain entity."""

from dataclasses import dataclass

from domain.entities.space import Space


@dataclass(frozen=True)
class Profile:
    """A user's pseudonymous identity within one space.

    Interactions in a space are tied to a profile, never to the account that
    owns it.
    """

    id: str
    space: Space
