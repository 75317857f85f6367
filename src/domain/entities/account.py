"""Account domain entity."""

from dataclasses import dataclass, field

from domain.entities.profile import Profile
from domain.entities.space import Space


@dataclass
class Account:
    """Domain entity for a user account.

    An account owns several profiles. Profiles are private to the owner;
    callers must only expose ``profiles`` to the account owner
    (see ``AccountService.get_profiles``).
    """

    id: str
    profiles: tuple[Profile, ...] = field(default_factory=tuple)
    is_banned: bool = False

    def __post_init__(self) -> None:
        """Freeze the supplied profiles into a read-only snapshot."""
        self.profiles = tuple(self.profiles)

    def create_profile(self, profile_id: str, space: Space) -> Profile:
        """Create a profile scoped to ``space``.

        The new profile is not added to ``profiles``; persisting the
        association is the caller's responsibility. No duplicate check is made
        on ``profile_id``.
        """
        return Profile(id=profile_id, space=space)

    def ban(self) -> None:
        """Mark the account as banned."""
        self.is_banned = True

    def unban(self) -> None:
        """Lift the ban on the account."""
        self.is_banned = False
