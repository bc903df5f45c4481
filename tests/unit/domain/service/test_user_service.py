"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from ranker.domain.error import NotFoundError, ValidationError
from ranker.domain.model import User
from ranker.domain.repository import UserRepository
from ranker.domain.service import UserService, VoteService, WorkService
from ranker.domain.value import AuthProvider, UserId, Username
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestFindOrRegister:
    """Tests for find_or_register method."""

    @pytest.mark.asyncio
    async def test_registers_new_username(self, unit_env):
        """A new username creates a user."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await user_service.find_or_register("alice")

        # Assert
        saved = await user_repo.find_by_username(Username("alice"))
        assert saved is not None
        assert saved.id == user.id
        assert saved.provider is None

    @pytest.mark.asyncio
    async def test_returns_existing_user(self, unit_env):
        """Logging in again with the same username reuses the account."""
        user_service = await unit_env.get(UserService)

        first = await user_service.find_or_register("alice")
        second = await user_service.find_or_register("alice")

        assert first.id == second.id
        assert len(await user_service.list_users()) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", [None, "", "   ", "x" * 256])
    async def test_rejects_invalid_username(self, unit_env, username):
        """Blank, missing and overlong usernames are invalid."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError):
            await user_service.find_or_register(username)

        assert await user_service.list_users() == []


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_rejects_taken_username(self, unit_env):
        """Usernames are unique."""
        user_service = await unit_env.get(UserService)
        await user_service.find_or_register("octocat")

        with pytest.raises(ValidationError, match="already been taken"):
            await user_service.register(
                User(
                    id=UserId(uuid4()),
                    username=Username("octocat"),
                    provider=AuthProvider.GITHUB,
                    uid="583231",
                )
            )

    @pytest.mark.asyncio
    async def test_lookup_by_provider_identity(self, unit_env):
        """Federated users are found by (provider, uid)."""
        user_service = await unit_env.get(UserService)
        registered = await user_service.register(
            User(
                id=UserId(uuid4()),
                username=Username("octocat"),
                provider=AuthProvider.GITHUB,
                uid="583231",
            )
        )

        found = await user_service.get_user_by_provider_identity(
            AuthProvider.GITHUB, "583231"
        )
        missing = await user_service.get_user_by_provider_identity(
            AuthProvider.GITHUB, "1"
        )

        assert found is not None
        assert found.id == registered.id
        assert missing is None


class TestListing:
    """Tests for list_users and vote_counts."""

    @pytest.mark.asyncio
    async def test_list_users_is_ordered_by_username(self, unit_env):
        """Users are listed alphabetically."""
        user_service = await unit_env.get(UserService)
        for name in ["carol", "alice", "bob"]:
            await user_service.find_or_register(name)

        users = await user_service.list_users()

        assert [u.username.root for u in users] == ["alice", "bob", "carol"]

    @pytest.mark.asyncio
    async def test_vote_counts_include_users_without_votes(self, unit_env):
        """Users who never voted count zero."""
        user_service = await unit_env.get(UserService)
        work_service = await unit_env.get(WorkService)
        vote_service = await unit_env.get(VoteService)
        alice = await user_service.find_or_register("alice")
        bob = await user_service.find_or_register("bob")
        work = await work_service.create_work("Heat", "movie")
        await vote_service.upvote(alice.id, work.id)

        counts = await user_service.vote_counts([alice.id, bob.id])

        assert counts == {alice.id: 1, bob.id: 0}


class TestDeleteUser:
    """Tests for delete_user method."""

    @pytest.mark.asyncio
    async def test_delete_user_removes_their_votes(self, unit_env):
        """Deleting a user cascades to their votes and frees the count."""
        user_service = await unit_env.get(UserService)
        work_service = await unit_env.get(WorkService)
        vote_service = await unit_env.get(VoteService)
        alice = await user_service.find_or_register("alice")
        bob = await user_service.find_or_register("bob")
        work = await work_service.create_work("Heat", "movie")
        await vote_service.upvote(alice.id, work.id)
        await vote_service.upvote(bob.id, work.id)

        await user_service.delete_user(alice.id)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(alice.id)
        assert (await work_service.get_work(work.id)).vote_count == 1

    @pytest.mark.asyncio
    async def test_delete_unknown_user_raises_not_found(self, unit_env):
        """Unknown ids raise NotFoundError."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.delete_user(UserId(uuid4()))
