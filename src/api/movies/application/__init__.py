"""Movies application layer.

Contains the application service that validates input and orchestrates
the repository and the subgraph assembler.
"""

from movies.application.services import MovieService

__all__ = ["MovieService"]
