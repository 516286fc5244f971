"""Tests for the retry decorator."""

import httpx
import pytest

from mastermind.lib.retry import with_retry


@pytest.mark.asyncio
async def test_retries_transport_errors() -> None:
    """Transport errors are retried until a call succeeds."""
    calls = 0

    @with_retry(max_attempts=3, min_wait=0, max_wait=0)
    async def flaky() -> str:
        nonlocal calls
        calls += 1
        if calls < 3:
            raise httpx.ConnectTimeout("timed out")
        return "ok"

    assert await flaky() == "ok"
    assert calls == 3


@pytest.mark.asyncio
async def test_reraises_after_last_attempt() -> None:
    calls = 0

    @with_retry(max_attempts=2, min_wait=0, max_wait=0)
    async def down() -> None:
        nonlocal calls
        calls += 1
        raise httpx.ConnectError("refused")

    with pytest.raises(httpx.ConnectError):
        await down()
    assert calls == 2


@pytest.mark.asyncio
async def test_single_attempt_is_single_shot() -> None:
    calls = 0

    @with_retry(max_attempts=1)
    async def down() -> None:
        nonlocal calls
        calls += 1
        raise httpx.ReadTimeout("timed out")

    with pytest.raises(httpx.ReadTimeout):
        await down()
    assert calls == 1


@pytest.mark.asyncio
async def test_other_errors_are_not_retried() -> None:
    calls = 0

    @with_retry(max_attempts=3, min_wait=0, max_wait=0)
    async def broken() -> None:
        nonlocal calls
        calls += 1
        raise KeyError("game_id")

    with pytest.raises(KeyError):
        await broken()
    assert calls == 1


@pytest.mark.asyncio
async def test_extra_exceptions() -> None:
    calls = 0

    @with_retry(max_attempts=2, min_wait=0, max_wait=0, extra_exceptions=(KeyError,))
    async def broken() -> None:
        nonlocal calls
        calls += 1
        raise KeyError("game_id")

    with pytest.raises(KeyError):
        await broken()
    assert calls == 2


def test_rejects_zero_attempts() -> None:
    with pytest.raises(ValueError):
        with_retry(max_attempts=0)
