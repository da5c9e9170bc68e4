"""Neo4j async driver creation and lifecycle helpers.

The driver owns the connection pool and is safe to share across
concurrent requests; sessions borrowed from it are not.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from neo4j import AsyncGraphDatabase
from neo4j.exceptions import DriverError, Neo4jError

from infrastructure.database.exceptions import DatabaseConnectionError
from infrastructure.observability.probes import DefaultDriverProbe, DriverProbe

if TYPE_CHECKING:
    from neo4j import AsyncDriver

    from infrastructure.settings import Neo4jSettings

__all__ = [
    "close_driver",
    "create_driver",
    "verify_connectivity",
]


def create_driver(
    settings: Neo4jSettings,
    probe: DriverProbe | None = None,
) -> AsyncDriver:
    """Create the application-scoped async driver.

    Args:
        settings: Neo4j connection settings
        probe: Optional observability probe

    Returns:
        Configured AsyncDriver (connections are opened lazily)

    Raises:
        DatabaseConnectionError: If the URI or auth configuration is invalid
    """
    probe = probe or DefaultDriverProbe()
    try:
        driver = AsyncGraphDatabase.driver(
            settings.uri,
            auth=settings.auth,
            max_connection_pool_size=settings.max_connection_pool_size,
        )
    except (ValueError, DriverError) as e:
        probe.driver_creation_failed(uri=settings.uri, error=e)
        raise DatabaseConnectionError(f"Failed to create driver: {e}") from e

    probe.driver_created(
        uri=settings.uri,
        database=settings.database,
        max_pool_size=settings.max_connection_pool_size,
    )
    return driver


async def verify_connectivity(
    driver: AsyncDriver,
    settings: Neo4jSettings,
    probe: DriverProbe | None = None,
) -> bool:
    """Check that the server is reachable with the configured credentials.

    Returns:
        True if the server answered, False otherwise.
    """
    probe = probe or DefaultDriverProbe()
    try:
        await driver.verify_connectivity(database=settings.database)
    except (DriverError, Neo4jError, OSError) as e:
        probe.connectivity_check_failed(uri=settings.uri, error=e)
        return False
    probe.connectivity_verified(uri=settings.uri)
    return True


async def close_driver(driver: AsyncDriver, probe: DriverProbe | None = None) -> None:
    """Close the driver and every pooled connection."""
    await driver.close()
    (probe or DefaultDriverProbe()).driver_closed()
