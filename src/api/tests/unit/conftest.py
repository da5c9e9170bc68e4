"""Unit test fixtures with mocked dependencies.

The fake driver/session/result classes mimic the parts of the neo4j
async API the executor touches, so no server is needed.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest


class FakeResult:
    """Stands in for ``neo4j.AsyncResult``.

    Args:
        records: Rows to yield (plain dicts).
        fail_at: Raise ``error`` when this row index is reached while
            iterating (``len(records)`` fails after the last row).
        error: Exception raised at ``fail_at``.
        properties_set: Counter reported by ``consume()``.
    """

    def __init__(
        self,
        records: list[dict[str, Any]] | None = None,
        fail_at: int | None = None,
        error: Exception | None = None,
        properties_set: int = 0,
    ):
        self._records = list(records or [])
        self._fail_at = fail_at
        self._error = error
        self._properties_set = properties_set
        self.consumed = False

    async def fetch(self, n: int) -> list[dict[str, Any]]:
        return self._records[:n]

    async def consume(self) -> SimpleNamespace:
        self.consumed = True
        return SimpleNamespace(
            counters=SimpleNamespace(properties_set=self._properties_set)
        )

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for index, record in enumerate(self._records):
            if index == self._fail_at:
                raise self._error
            yield record
        if self._fail_at == len(self._records):
            raise self._error


class FakeSession:
    """Stands in for ``neo4j.AsyncSession``."""

    def __init__(self, result: FakeResult | None = None, run_error=None):
        self._result = result or FakeResult()
        self._run_error = run_error
        self.runs: list[tuple[Any, dict[str, Any]]] = []
        self.closed = False

    async def __aenter__(self) -> FakeSession:
        return self

    async def __aexit__(self, *exc_info) -> bool:
        self.closed = True
        return False

    async def run(self, query, parameters=None) -> FakeResult:
        self.runs.append((query, parameters))
        if self._run_error is not None:
            raise self._run_error
        return self._result


class FakeDriver:
    """Stands in for ``neo4j.AsyncDriver``; hands out one fake session."""

    def __init__(self, session: FakeSession):
        self._session = session
        self.session_configs: list[dict[str, Any]] = []

    def session(self, **config) -> FakeSession:
        self.session_configs.append(config)
        return self._session


@pytest.fixture
def mock_neo4j_settings():
    """Provide test Neo4j settings."""
    from infrastructure.settings import Neo4jSettings

    return Neo4jSettings(
        uri="neo4j://testhost:7687",
        user="testuser",
        password="testpass",
        database="testdb",
    )


@pytest.fixture
def make_driver():
    """Build a fake driver around a session returning the given result."""

    def _make(result: FakeResult | None = None, run_error=None) -> FakeDriver:
        return FakeDriver(FakeSession(result=result, run_error=run_error))

    return _make


@pytest.fixture
def make_result():
    """Build a fake result."""
    return FakeResult
