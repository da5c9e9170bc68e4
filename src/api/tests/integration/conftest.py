"""Integration test fixtures for Neo4j tests.

These fixtures require a reachable Neo4j server loaded with the movies
dataset (``:play movies``). They are skipped unless
``MOVIES_INTEGRATION=1`` is set; connection values come from the usual
``NEO4J_*`` variables and default to the public demo database.
"""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from neo4j import AsyncDriver

from infrastructure.database.driver import close_driver, create_driver
from infrastructure.settings import Neo4jSettings
from movies.application.services import MovieService
from movies.infrastructure.movie_repository import MovieRepository
from movies.infrastructure.neo4j_executor import Neo4jQueryExecutor


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


def pytest_collection_modifyitems(config, items):
    if os.getenv("MOVIES_INTEGRATION") == "1":
        return
    skip = pytest.mark.skip(reason="set MOVIES_INTEGRATION=1 to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def integration_neo4j_settings() -> Neo4jSettings:
    return Neo4jSettings()


@pytest_asyncio.fixture
async def neo4j_driver(
    integration_neo4j_settings: Neo4jSettings,
) -> AsyncGenerator[AsyncDriver, None]:
    """Provide a driver for one test, closed afterwards."""
    driver = create_driver(integration_neo4j_settings)
    yield driver
    await close_driver(driver)


@pytest.fixture
def movie_service(
    neo4j_driver: AsyncDriver,
    integration_neo4j_settings: Neo4jSettings,
) -> MovieService:
    executor = Neo4jQueryExecutor(
        neo4j_driver,
        database=integration_neo4j_settings.database,
        timeout_seconds=integration_neo4j_settings.query_timeout_seconds,
    )
    return MovieService(repository=MovieRepository(executor=executor))
