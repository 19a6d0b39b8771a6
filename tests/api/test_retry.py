"""Tests for the request-level retry wrapper."""

import logging
from unittest.mock import AsyncMock

import pytest

from docqa.api.retry import run_with_retries
from docqa.core.exceptions import InvalidInputError, LLMError, VectorIndexError


@pytest.mark.asyncio
async def test_returns_first_success() -> None:
    func = AsyncMock(return_value="done")

    assert await run_with_retries(func, "a", max_attempts=3, initial_delay_s=0, flag=True) == "done"
    func.assert_awaited_once_with("a", flag=True)


@pytest.mark.asyncio
async def test_retries_retryable_errors_until_success() -> None:
    func = AsyncMock(side_effect=[VectorIndexError("busy"), LLMError("busy"), "ok"])

    assert await run_with_retries(func, max_attempts=3, initial_delay_s=0) == "ok"
    assert func.await_count == 3


@pytest.mark.asyncio
async def test_reraises_last_error_when_attempts_run_out() -> None:
    func = AsyncMock(side_effect=VectorIndexError("still busy"))

    with pytest.raises(VectorIndexError, match="still busy"):
        await run_with_retries(func, max_attempts=2, initial_delay_s=0)
    assert func.await_count == 2


@pytest.mark.asyncio
async def test_non_retryable_error_is_raised_immediately() -> None:
    func = AsyncMock(side_effect=InvalidInputError("bad"))

    with pytest.raises(InvalidInputError):
        await run_with_retries(func, max_attempts=5, initial_delay_s=0)
    assert func.await_count == 1


@pytest.mark.asyncio
async def test_backoff_doubles(caplog) -> None:
    func = AsyncMock(side_effect=[LLMError("x"), LLMError("x"), LLMError("x"), "ok"])

    with caplog.at_level(logging.WARNING, logger="docqa.api.retry"):
        assert await run_with_retries(func, max_attempts=4, initial_delay_s=0.01) == "ok"

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 3
    for message, delay in zip(messages, ("0.01", "0.02", "0.04")):
        assert f"in {delay} seconds" in message
