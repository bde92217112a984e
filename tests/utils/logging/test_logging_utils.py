# ABOUTME: Tests for structured logging decorators and context helpers
# ABOUTME: Uses structlog's capture_logs to inspect emitted events

import pytest
import structlog
from structlog.testing import capture_logs

from wikiquiz.utils.logging import (
    get_logger,
    log_api_call,
    log_extraction_step,
    with_operation_context,
    with_pipeline_context,
    with_quiz_context,
)


@pytest.fixture(autouse=True)
def _default_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


def test_get_logger_binds():
    with capture_logs() as logs:
        get_logger("wikiquiz.tests").bind(url="https://en.wikipedia.org/wiki/X").info("hello")
    assert logs == [{"url": "https://en.wikipedia.org/wiki/X", "event": "hello", "log_level": "info"}]


def test_extraction_step_wraps_sync_functions():
    @log_extraction_step("parse")
    def parse(markup: str, url: str) -> list[str]:
        return ["a", "b"]

    with capture_logs() as logs:
        assert parse("<p/>", "https://en.wikipedia.org/wiki/X") == ["a", "b"]

    completed = [e for e in logs if e["event"] == "Completed extraction step: parse"]
    assert completed[0]["result_count"] == 2
    assert completed[0]["url"] == "https://en.wikipedia.org/wiki/X"


@pytest.mark.asyncio
async def test_extraction_step_wraps_async_functions():
    @log_extraction_step("load")
    async def load() -> str:
        return "ok"

    assert await load() == "ok"


def test_extraction_step_reraises():
    @log_extraction_step("explode")
    def explode():
        raise ValueError("bad markup")

    with capture_logs() as logs, pytest.raises(ValueError):
        explode()

    failed = [e for e in logs if e["log_level"] == "error"]
    assert failed[0]["error_type"] == "ValueError"


@pytest.mark.asyncio
async def test_api_call_logs_failures_and_reraises():
    @log_api_call("wikipedia")
    async def fetch(url: str) -> str:
        raise ConnectionError("down")

    with capture_logs() as logs, pytest.raises(ConnectionError):
        await fetch("https://en.wikipedia.org/wiki/X")

    assert logs[-1]["event"] == "API call to wikipedia failed"
    assert logs[-1]["success"] is False


@pytest.mark.asyncio
async def test_operation_context_logs_start_and_completion():
    @with_operation_context("generate_quiz")
    async def generate(url: str) -> str:
        return url

    with capture_logs() as logs:
        await generate("https://en.wikipedia.org/wiki/X")

    assert [e["event"] for e in logs] == ["Starting generate_quiz", "Completed generate_quiz"]
    assert logs[0]["operation_id"] == logs[1]["operation_id"]


def test_context_managers_bind_fields():
    with capture_logs() as logs:
        with with_quiz_context(url="https://en.wikipedia.org/wiki/X") as logger:
            logger.info("quiz event")
        with with_pipeline_context("url_to_quiz", url="u") as logger:
            logger.info("pipeline event")

    assert logs[0]["entity_type"] == "wiki_quiz"
    assert logs[1]["pipeline"] == "url_to_quiz"
    assert "operation_id" in logs[1]
