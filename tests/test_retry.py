"""Tests for transient failure retries."""

import asyncio

import httpx
import pytest

from calorie_tracker.services.retry import call_with_retry, is_transient
from tests.conftest import http_status_error


def _recording_sleep(delays: list[float]):  # type: ignore[no-untyped-def]
    async def sleep(delay: float) -> None:
        delays.append(delay)

    return sleep


def test_is_transient_only_for_server_errors() -> None:
    assert is_transient(http_status_error(503))
    assert is_transient(http_status_error(500))
    assert not is_transient(http_status_error(429))
    assert not is_transient(http_status_error(401))
    assert not is_transient(httpx.ConnectError("offline"))
    assert not is_transient(ValueError("bad"))


def test_retries_server_errors_then_succeeds() -> None:
    attempts = 0
    delays: list[float] = []

    async def flaky() -> str:
        nonlocal attempts
        attempts += 1
        if attempts < 3:
            raise http_status_error(503)
        return "ok"

    result = asyncio.run(
        call_with_retry(flaky, base_delay_seconds=1.0, sleep=_recording_sleep(delays))
    )

    assert result == "ok"
    assert attempts == 3
    assert delays == [1.0, 2.0]


def test_gives_up_after_max_retries() -> None:
    attempts = 0
    delays: list[float] = []

    async def down() -> str:
        nonlocal attempts
        attempts += 1
        raise http_status_error(502)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(call_with_retry(down, sleep=_recording_sleep(delays)))

    assert attempts == 3
    assert delays == [1.0, 2.0]


@pytest.mark.parametrize("status_code", [400, 401, 429])
def test_client_errors_are_not_retried(status_code: int) -> None:
    attempts = 0
    delays: list[float] = []

    async def rejected() -> str:
        nonlocal attempts
        attempts += 1
        raise http_status_error(status_code)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(call_with_retry(rejected, sleep=_recording_sleep(delays)))

    assert attempts == 1
    assert delays == []


def test_network_errors_are_not_retried() -> None:
    attempts = 0

    async def offline() -> str:
        nonlocal attempts
        attempts += 1
        raise httpx.ConnectError("offline")

    with pytest.raises(httpx.ConnectError):
        asyncio.run(call_with_retry(offline, base_delay_seconds=0))

    assert attempts == 1
