"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Annotated

import uvicorn
from fastapi import Depends, FastAPI
from neo4j import AsyncDriver

from infrastructure.database.driver import verify_connectivity
from infrastructure.dependencies import get_neo4j_driver, shutdown_neo4j_driver
from infrastructure.logging import configure_logging
from infrastructure.settings import get_neo4j_settings, get_settings
from infrastructure.version import __version__
from movies.presentation import routes as movie_routes


@asynccontextmanager
async def movies_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Driver lifecycle (created at startup, closed on shutdown)
    """
    configure_logging(get_settings().log_level)
    get_neo4j_driver()

    yield

    await shutdown_neo4j_driver()


app = FastAPI(
    title=get_settings().app_name,
    description="Movie lookups, votes, search and actor/movie graph over Neo4j",
    version=__version__,
    lifespan=movies_lifespan,
)

app.include_router(movie_routes.router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/health/db")
async def health_db(
    driver: Annotated[AsyncDriver, Depends(get_neo4j_driver)],
) -> dict:
    """Check that Neo4j is reachable.

    Returns the connectivity status and database name.
    """
    settings = get_neo4j_settings()
    is_healthy = await verify_connectivity(driver, settings)
    return {
        "status": "ok" if is_healthy else "unhealthy",
        "database": settings.database,
    }


def run() -> None:
    """Serve the application with uvicorn using the configured address."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
