"""Test configuration and fixtures."""

import os

import logfire
import pytest

# Keep telemetry local: no console noise, nothing sent anywhere
logfire.configure(send_to_logfire=False, console=False)


def pytest_collection_modifyitems(config, items):
    """Mark integration tests; skip them unless a database is available.

    Integration tests need a migrated PostgreSQL (see scripts/run_migrations.py)
    and run only with RANKER_INTEGRATION=1.
    """
    enabled = os.environ.get("RANKER_INTEGRATION") == "1"
    skip = pytest.mark.skip(reason="set RANKER_INTEGRATION=1 to run against PostgreSQL")
    for item in items:
        if "integration/" in item.nodeid.replace("\\", "/"):
            item.add_marker(pytest.mark.integration)
            if not enabled:
                item.add_marker(skip)
