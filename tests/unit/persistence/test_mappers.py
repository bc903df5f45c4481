"""Unit tests for row/model mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from ranker.domain.model import Work
from ranker.domain.value import AuthProvider, Category, WorkId
from ranker.persistence.mappers import row_to_user, row_to_work, work_to_dict

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TestWorkMapping:
    def test_row_without_vote_count_defaults_to_zero(self):
        work_id = uuid4()

        work = row_to_work(
            {"id": str(work_id), "title": "Heat", "category": "movie", "created_at": NOW}
        )

        assert work.id == work_id
        assert work.category == Category.MOVIE
        assert work.vote_count == 0

    def test_vote_count_is_never_written(self):
        work = Work(
            id=WorkId(uuid4()),
            title="Heat",
            category=Category.MOVIE,
            vote_count=7,
            created_at=NOW,
        )

        row = work_to_dict(work)

        assert "vote_count" not in row
        assert row["category"] == "movie"


class TestUserMapping:
    def test_local_user_has_no_provider(self):
        user = row_to_user(
            {"id": uuid4(), "username": "alice", "provider": None, "created_at": NOW}
        )

        assert user.provider is None
        assert user.username.root == "alice"
        assert user.session_version == 0

    def test_federated_user(self):
        user = row_to_user(
            {
                "id": uuid4(),
                "username": "octocat",
                "provider": "github",
                "uid": "583231",
                "name": "The Octocat",
                "created_at": NOW,
            }
        )

        assert user.provider == AuthProvider.GITHUB
        assert user.uid == "583231"
