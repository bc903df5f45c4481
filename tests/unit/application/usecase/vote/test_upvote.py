"""Unit tests for UpvoteUseCase."""

from uuid import uuid4

import pytest

from ranker.application.usecase.vote import (
    UpvoteOutcome,
    UpvoteRequest,
    UpvoteUseCase,
)
from ranker.domain.error import NotFoundError
from ranker.domain.service import UserService, WorkService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpvoteUseCase:
    """Tests for UpvoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_records_vote(self, unit_env):
        """A signed-in user's first upvote is recorded."""
        # Arrange
        user = await (await unit_env.get(UserService)).find_or_register("alice")
        work = await (await unit_env.get(WorkService)).create_work("Heat", "movie")
        use_case = await unit_env.get(UpvoteUseCase)

        # Act
        result = await use_case.execute(
            UpvoteRequest(work_id=str(work.id), user_id=str(user.id))
        )

        # Assert
        assert result.outcome == UpvoteOutcome.VOTED
        assert result.vote_id is not None
        assert result.vote_count == 1

    @pytest.mark.asyncio
    async def test_second_upvote_is_a_soft_failure(self, unit_env):
        """Repeating an upvote reports already_voted and keeps the count."""
        user = await (await unit_env.get(UserService)).find_or_register("alice")
        work = await (await unit_env.get(WorkService)).create_work("Heat", "movie")
        use_case = await unit_env.get(UpvoteUseCase)
        request = UpvoteRequest(work_id=str(work.id), user_id=str(user.id))
        await use_case.execute(request)

        result = await use_case.execute(request)

        assert result.outcome == UpvoteOutcome.ALREADY_VOTED
        assert result.vote_id is None
        assert result.vote_count == 1

    @pytest.mark.asyncio
    async def test_anonymous_upvote_is_a_soft_failure(self, unit_env):
        """Without a user nothing is recorded."""
        work = await (await unit_env.get(WorkService)).create_work("Heat", "movie")
        use_case = await unit_env.get(UpvoteUseCase)

        result = await use_case.execute(UpvoteRequest(work_id=str(work.id)))

        assert result.outcome == UpvoteOutcome.UNAUTHENTICATED
        assert result.vote_count is None
        assert (await (await unit_env.get(WorkService)).get_work(work.id)).vote_count == 0

    @pytest.mark.asyncio
    async def test_anonymous_upvote_on_unknown_work_is_a_soft_failure(self, unit_env):
        """Without a session the work is never looked up, so no NotFoundError."""
        use_case = await unit_env.get(UpvoteUseCase)

        result = await use_case.execute(UpvoteRequest(work_id=str(uuid4())))

        assert result.outcome == UpvoteOutcome.UNAUTHENTICATED
        assert result.vote_id is None

    @pytest.mark.asyncio
    async def test_upvote_unknown_work_raises_not_found(self, unit_env):
        """A signed-in user upvoting an unknown work gets NotFoundError."""
        user = await (await unit_env.get(UserService)).find_or_register("alice")
        use_case = await unit_env.get(UpvoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpvoteRequest(work_id=str(uuid4()), user_id=str(user.id))
            )
