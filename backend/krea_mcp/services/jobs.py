import asyncio
import logging
import time
from typing import Awaitable, Callable

from krea_mcp.core.config import DEFAULT_POLL_INTERVAL_MS, DEFAULT_WAIT_TIMEOUT_MS
from krea_mcp.schemas.jobs import Job
from krea_mcp.schemas.result import ErrorKind, OperationResult

logger = logging.getLogger(__name__)

FetchJob = Callable[[str], Awaitable[OperationResult[Job]]]


async def wait_for_terminal(
    fetch: FetchJob,
    job_id: str,
    timeout_ms: int = DEFAULT_WAIT_TIMEOUT_MS,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> OperationResult[Job]:
    """
    Poll ``fetch(job_id)`` until the job is completed, failed or cancelled.

    A terminal job is a successful result even when its status is ``failed``;
    the error side is reserved for "could not find out": a failed fetch is
    returned as-is, and running out of ``timeout_ms`` gives a ``timeout``
    error. The deadline is checked before every fetch and the interval between
    fetches is fixed.
    """
    deadline = clock() + timeout_ms / 1000.0
    interval = poll_interval_ms / 1000.0
    polls = 0

    while clock() < deadline:
        result = await fetch(job_id)
        polls += 1
        if not result.success:
            logger.warning(
                f"Polling job {job_id} failed after {polls} polls: {result.error.message}"
            )
            return result

        job = result.value
        if job.is_terminal:
            logger.info(f"Job {job_id} reached {job.status} after {polls} polls")
            return result

        logger.debug(f"Job {job_id} still {job.status} (poll {polls})")
        await sleep(interval)

    logger.warning(f"Job {job_id} timed out after {polls} polls")
    return OperationResult.fail(
        ErrorKind.TIMEOUT,
        f"Job {job_id} did not complete within {timeout_ms}ms",
    )
