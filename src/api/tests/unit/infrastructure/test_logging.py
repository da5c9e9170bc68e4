"""Unit tests for structlog configuration."""

import json

import pytest
import structlog

from infrastructure.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    yield
    structlog.reset_defaults()


def test_non_tty_output_is_json(capsys):
    configure_logging("info")

    structlog.get_logger().info("movie_voted", title="Heat", updates=1)

    event = json.loads(capsys.readouterr().out.strip())
    assert event["event"] == "movie_voted"
    assert event["title"] == "Heat"
    assert event["level"] == "info"
    assert "timestamp" in event


def test_level_filters_lower_events(capsys):
    configure_logging("warning")

    logger = structlog.get_logger()
    logger.info("hidden")
    logger.warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out
