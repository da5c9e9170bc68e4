"""Shared infrastructure dependencies.

Provides ONLY raw database infrastructure resources (the pooled driver).
Does NOT import from bounded contexts to maintain DDD boundaries.
"""

from functools import lru_cache

from neo4j import AsyncDriver

from infrastructure.database.driver import close_driver, create_driver
from infrastructure.settings import get_neo4j_settings


@lru_cache
def get_neo4j_driver() -> AsyncDriver:
    """Get the application-scoped Neo4j driver (singleton).

    The driver owns a connection pool and is shared across all requests;
    each operation borrows its own short-lived session from it.

    Returns:
        AsyncDriver configured from the Neo4j settings.
    """
    return create_driver(get_neo4j_settings())


async def shutdown_neo4j_driver() -> None:
    """Close the cached driver, if one was created, and reset the cache."""
    if get_neo4j_driver.cache_info().currsize == 0:
        return
    driver = get_neo4j_driver()
    get_neo4j_driver.cache_clear()
    await close_driver(driver)
