"""Account service layer with business logic."""

from typing import Optional

import structlog

from core.config import get_settings
from core.exceptions import AccountBannedError, NotAccountOwnerError
from domain.entities.account import Account
from domain.entities.event import Events
from domain.entities.profile import Profile
from domain.entities.space import Space
from domain.policies.authorization import Action, IAuthorizer, get_authorizer
from domain.services.event_service import EventService

logger = structlog.get_logger()


class AccountService:
    """Service layer for Account business logic."""

    def __init__(
        self,
        authorizer: IAuthorizer | None = None,
        event_service: Optional["EventService"] = None,
    ) -> None:
        self._authorizer = authorizer or get_authorizer(get_settings())
        self._events = event_service

    def create_profile(self, account: Account, profile_id: str, space: Space) -> Profile:
        """Create a profile for ``account`` in ``space``.

        The caller persists the account-profile association.
        """
        if account.is_banned:
            raise AccountBannedError(account.id)

        profile = account.create_profile(profile_id=profile_id, space=space)
        logger.info("profile_created", account_id=account.id, profile_id=profile.id, space_id=space.id)

        if self._events:
            self._events.emit(
                Events.PROFILE_CREATED,
                actor_id=account.id,
                entity_type="profile",
                entity_id=profile.id,
                metadata={"account_id": account.id, "space_id": space.id},
            )
        return profile

    def get_profiles(self, account: Account, requester: Account) -> tuple[Profile, ...]:
        """Return the account's profiles. Only the account owner may see them."""
        if not self._authorizer.authorize(requester, Action.VIEW_PROFILES, account):
            logger.warning(
                "profiles_access_denied",
                account_id=account.id,
                requester_id=requester.id,
            )
            raise NotAccountOwnerError(account.id)
        return account.profiles

    def ban(self, account: Account, moderator_id: str | None = None) -> Account:
        """Ban an account. Banning a banned account changes nothing."""
        was_banned = account.is_banned
        account.ban()
        logger.info("account_banned", account_id=account.id, changed=not was_banned)

        if self._events:
            self._events.emit(
                Events.ACCOUNT_BANNED,
                actor_id=moderator_id,
                entity_type="account",
                entity_id=account.id,
                metadata={"changed": not was_banned},
            )
        return account

    def unban(self, account: Account, moderator_id: str | None = None) -> Account:
        """Lift a ban. Unbanning an unbanned account changes nothing."""
        was_banned = account.is_banned
        account.unban()
        logger.info("account_unbanned", account_id=account.id, changed=was_banned)

        if self._events:
            self._events.emit(
                Events.ACCOUNT_UNBANNED,
                actor_id=moderator_id,
                entity_type="account",
                entity_id=account.id,
                metadata={"changed": was_banned},
            )
        return account
