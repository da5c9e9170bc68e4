"""Dependency injection for the Movies bounded context.

Composes the shared driver with movies-specific components (executor,
repository, service).
"""

from typing import Annotated
from uuid import uuid4

from fastapi import Depends, Request
from neo4j import AsyncDriver

from infrastructure.dependencies import get_neo4j_driver
from infrastructure.observability.context import ObservationContext
from infrastructure.settings import get_neo4j_settings
from movies.application.observability import DefaultMovieServiceProbe
from movies.application.services import MovieService
from movies.infrastructure.movie_repository import MovieRepository
from movies.infrastructure.neo4j_executor import Neo4jQueryExecutor
from movies.infrastructure.observability import DefaultQueryExecutorProbe

REQUEST_ID_HEADER = "x-request-id"


def get_observation_context(request: Request) -> ObservationContext:
    """Build the request-scoped observation context.

    Reuses the caller's request id header when present.
    """
    return ObservationContext(
        request_id=request.headers.get(REQUEST_ID_HEADER) or uuid4().hex,
        database=get_neo4j_settings().database,
    )


def get_query_executor(
    driver: Annotated[AsyncDriver, Depends(get_neo4j_driver)],
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> Neo4jQueryExecutor:
    """Get a request-scoped executor over the shared driver.

    Args:
        driver: Application-scoped pooled driver
        context: Request observation context

    Returns:
        Neo4jQueryExecutor bound to the configured database
    """
    settings = get_neo4j_settings()
    return Neo4jQueryExecutor(
        driver=driver,
        database=settings.database,
        timeout_seconds=settings.query_timeout_seconds,
        probe=DefaultQueryExecutorProbe().with_context(context),
    )


def get_movie_service(
    executor: Annotated[Neo4jQueryExecutor, Depends(get_query_executor)],
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> MovieService:
    """Get MovieService instance.

    Args:
        executor: Request-scoped query executor
        context: Request observation context

    Returns:
        MovieService instance
    """
    return MovieService(
        repository=MovieRepository(executor=executor),
        probe=DefaultMovieServiceProbe().with_context(context),
    )
