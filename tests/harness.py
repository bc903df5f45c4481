"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is running and migrated; settings are
loaded from environment variables (configure via .env or export).
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from ranker.interface.api.app import create_app
from ranker.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container for service
    access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_work(unit_env):
            service = await unit_env.get(WorkService)
            work = await service.create_work("Kind of Blue", "album")
            assert work.vote_count == 0
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture():
    """Factory for a fixture yielding a TestClient over a fully mocked app.

    Each test gets a fresh container, and so an empty in-memory catalog.
    Redirects are not followed so tests can assert on them.
    """

    @pytest.fixture
    def _client():
        app = create_app(build_test_container(for_app=True))
        with TestClient(app, follow_redirects=False) as client:
            yield client

    return _client
