"""Unit tests for Account and Profile entities."""

from dataclasses import FrozenInstanceError

import pytest

from domain.entities.account import Account
from domain.entities.profile import Profile
from domain.entities.space import Space


class TestAccountDefaults:
    def test_new_account_is_not_banned(self):
        account = Account(id="a1")
        assert account.is_banned is False
        assert account.profiles == ()

    def test_profiles_are_a_read_only_snapshot(self, space: Space):
        supplied = [Profile(id="p1", space=space)]
        account = Account(id="a1", profiles=supplied)

        supplied.append(Profile(id="p2", space=space))

        assert isinstance(account.profiles, tuple)
        assert [p.id for p in account.profiles] == ["p1"]


class TestCreateProfile:
    def test_creates_profile_in_space(self, space: Space):
        account = Account(id="a1")

        profile = account.create_profile(profile_id="p1", space=space)

        assert profile.id == "p1"
        assert profile.space is space

    def test_does_not_register_profile(self, space: Space):
        account = Account(id="a1")

        account.create_profile(profile_id="p1", space=space)

        assert account.profiles == ()

    def test_duplicate_ids_are_not_checked(self, space: Space):
        account = Account(id="a1")

        first = account.create_profile(profile_id="p1", space=space)
        second = account.create_profile(profile_id="p1", space=space)

        assert first == second


class TestBan:
    def test_ban_then_unban(self):
        account = Account(id="a1")

        account.ban()
        assert account.is_banned is True

        account.unban()
        assert account.is_banned is False

    def test_repeated_ban_is_noop(self):
        account = Account(id="a1", is_banned=True)

        account.ban()
        account.ban()

        assert account.is_banned is True

    def test_repeated_unban_is_noop(self):
        account = Account(id="a1")

        account.unban()
        account.unban()

        assert account.is_banned is False

    @pytest.mark.parametrize(
        "calls",
        [
            ["ban"],
            ["unban"],
            ["ban", "unban"],
            ["unban", "ban"],
            ["ban", "ban", "unban", "unban", "ban"],
            ["ban", "unban", "unban"],
        ],
    )
    def test_last_call_wins(self, calls: list[str]):
        account = Account(id="a1")

        for call in calls:
            getattr(account, call)()

        assert account.is_banned is (calls[-1] == "ban")


class TestValueObjects:
    def test_space_is_immutable(self, space: Space):
        with pytest.raises(FrozenInstanceError):
            space.name = "Other"  # type: ignore[misc]

    def test_profile_is_immutable(self, space: Space):
        profile = Profile(id="p1", space=space)
        with pytest.raises(FrozenInstanceError):
            profile.space = Space(id="s2", name="Other")  # type: ignore[misc]
