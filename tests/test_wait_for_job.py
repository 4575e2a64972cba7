"""Tests for the poll-until-terminal loop."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from conftest import job_payload
from krea_mcp.schemas.jobs import Job
from krea_mcp.schemas.result import ErrorKind, OperationResult
from krea_mcp.services.jobs import wait_for_terminal


def fetched(status: str, **extra) -> OperationResult:
    return OperationResult.ok(Job.model_validate(job_payload(status=status, **extra)))


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["completed", "failed", "cancelled"])
async def test_terminal_status_is_a_successful_wait(clock, status):
    fetch = AsyncMock(return_value=fetched(status, error="boom" if status == "failed" else None))

    result = await wait_for_terminal(fetch, "job_1", clock=clock, sleep=clock.sleep)

    assert result.success is True
    assert result.value.status == status
    assert fetch.await_count == 1
    assert clock.sleeps == []


@pytest.mark.asyncio
async def test_polls_once_per_observation_until_completed(clock):
    fetch = AsyncMock(
        side_effect=[
            fetched("processing"),
            fetched("processing"),
            fetched("completed", result={"urls": ["https://cdn.krea.ai/out.png"]}),
        ]
    )

    result = await wait_for_terminal(
        fetch, "job_1", timeout_ms=120000, poll_interval_ms=2000, clock=clock, sleep=clock.sleep
    )

    assert result.success is True
    assert result.value.output_urls == ["https://cdn.krea.ai/out.png"]
    assert fetch.await_count == 3
    assert clock.sleeps == [2.0, 2.0]
    fetch.assert_awaited_with("job_1")


@pytest.mark.asyncio
async def test_pending_then_processing_then_completed(clock):
    fetch = AsyncMock(
        side_effect=[fetched("pending"), fetched("processing"), fetched("completed")]
    )

    result = await wait_for_terminal(fetch, "job_1", poll_interval_ms=1000, clock=clock, sleep=clock.sleep)

    assert result.value.status == "completed"
    assert clock.sleeps == [1.0, 1.0]


@pytest.mark.asyncio
async def test_times_out_when_job_never_finishes(clock):
    fetch = AsyncMock(return_value=fetched("processing"))

    result = await wait_for_terminal(
        fetch, "job_1", timeout_ms=5000, poll_interval_ms=2000, clock=clock, sleep=clock.sleep
    )

    assert result.success is False
    assert result.error.kind == ErrorKind.TIMEOUT
    assert "job_1" in result.error.message
    assert "5000ms" in result.error.message
    assert fetch.await_count in (2, 3)
    assert clock.now <= 5.0 + 2.0


@pytest.mark.asyncio
async def test_deadline_is_checked_before_each_poll(clock):
    async def slow_fetch(job_id):
        clock.now += 3.0
        return fetched("processing")

    fetch = AsyncMock(side_effect=slow_fetch)

    result = await wait_for_terminal(
        fetch, "job_1", timeout_ms=5000, poll_interval_ms=2000, clock=clock, sleep=clock.sleep
    )

    assert result.error.kind == ErrorKind.TIMEOUT
    assert fetch.await_count == 1


@pytest.mark.asyncio
async def test_zero_budget_never_fetches(clock):
    fetch = AsyncMock(return_value=fetched("completed"))

    result = await wait_for_terminal(fetch, "job_1", timeout_ms=0, clock=clock, sleep=clock.sleep)

    assert result.error.kind == ErrorKind.TIMEOUT
    fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_fetch_error_is_returned_immediately(clock):
    failure = OperationResult.fail(ErrorKind.NETWORK_ERROR, "connection refused")
    fetch = AsyncMock(side_effect=[fetched("processing"), failure, fetched("completed")])

    result = await wait_for_terminal(fetch, "job_1", clock=clock, sleep=clock.sleep)

    assert result is failure
    assert fetch.await_count == 2
    assert clock.sleeps == [2.0]


@pytest.mark.asyncio
async def test_default_sleep_yields_to_other_tasks():
    fetch = AsyncMock(side_effect=[fetched("processing"), fetched("processing"), fetched("completed")])
    ticks = []

    async def ticker():
        for _ in range(3):
            ticks.append(fetch.await_count)
            await asyncio.sleep(0.001)

    result, _ = await asyncio.gather(
        wait_for_terminal(fetch, "job_1", timeout_ms=5000, poll_interval_ms=10),
        ticker(),
    )

    assert result.value.status == "completed"
    assert len(ticks) == 3
    assert ticks[-1] < 3
