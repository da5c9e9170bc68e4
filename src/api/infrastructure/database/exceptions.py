"""Database-specific exceptions shared by the bounded contexts."""


class DatabaseError(Exception):
    """Base exception for database operations."""

    pass


class DatabaseConnectionError(DatabaseError):
    """Raised when the driver cannot be created or reach the server."""

    pass


class QueryError(DatabaseError):
    """Raised when a Cypher query is rejected or fails mid-execution.

    Covers server-side rejections, timeouts and network faults raised
    while a result stream is being consumed.
    """

    def __init__(self, message: str, query: str | None = None):
        super().__init__(message)
        self.query = query
