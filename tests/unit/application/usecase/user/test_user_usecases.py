"""Unit tests for the user use cases."""

from uuid import uuid4

import pytest

from ranker.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    ListUsersUseCase,
)
from ranker.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
)
from ranker.domain.service import UserService, VoteService, WorkService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListUsersUseCase:
    """Tests for ListUsersUseCase."""

    @pytest.mark.asyncio
    async def test_lists_users_with_vote_counts(self, unit_env):
        """Each user is listed with the votes they cast."""
        user_service = await unit_env.get(UserService)
        work_service = await unit_env.get(WorkService)
        vote_service = await unit_env.get(VoteService)
        alice = await user_service.find_or_register("alice")
        await user_service.find_or_register("bob")
        work = await work_service.create_work("Heat", "movie")
        await vote_service.upvote(alice.id, work.id)
        use_case = await unit_env.get(ListUsersUseCase)

        result = await use_case.execute()

        assert [(u.username, u.vote_count) for u in result.users] == [
            ("alice", 1),
            ("bob", 0),
        ]


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_lists_voted_works(self, unit_env):
        """The profile shows the works the user voted for."""
        user_service = await unit_env.get(UserService)
        work_service = await unit_env.get(WorkService)
        vote_service = await unit_env.get(VoteService)
        alice = await user_service.find_or_register("alice")
        heat = await work_service.create_work("Heat", "movie")
        await work_service.create_work("Dune", "book")
        await vote_service.upvote(alice.id, heat.id)
        use_case = await unit_env.get(GetUserProfileUseCase)

        result = await use_case.execute(GetUserProfileRequest(user_id=str(alice.id)))

        assert result.username == "alice"
        assert [w.title for w in result.voted_works] == ["Heat"]

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        """Unknown ids raise NotFoundError."""
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(user_id=str(uuid4())))


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase."""

    @pytest.mark.asyncio
    async def test_user_can_delete_own_account(self, unit_env):
        """Self-deletion succeeds."""
        user_service = await unit_env.get(UserService)
        alice = await user_service.find_or_register("alice")
        use_case = await unit_env.get(DeleteUserUseCase)

        result = await use_case.execute(
            DeleteUserRequest(user_id=str(alice.id), current_user_id=str(alice.id))
        )

        assert result.deleted is True
        assert await user_service.list_users() == []

    @pytest.mark.asyncio
    async def test_deleting_someone_else_is_forbidden(self, unit_env):
        """Users cannot delete other accounts."""
        user_service = await unit_env.get(UserService)
        alice = await user_service.find_or_register("alice")
        bob = await user_service.find_or_register("bob")
        use_case = await unit_env.get(DeleteUserUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteUserRequest(user_id=str(alice.id), current_user_id=str(bob.id))
            )

        assert len(await user_service.list_users()) == 2

    @pytest.mark.asyncio
    async def test_deleting_without_session_is_unauthenticated(self, unit_env):
        """Signed-out requests are rejected."""
        user_service = await unit_env.get(UserService)
        alice = await user_service.find_or_register("alice")
        use_case = await unit_env.get(DeleteUserUseCase)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(DeleteUserRequest(user_id=str(alice.id)))
