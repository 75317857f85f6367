"""Space domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Space:
    """A named topic of discussion.

    Spaces have no behavior of their own; profiles belong to exactly one space.
    """

    id: str
    name: str
