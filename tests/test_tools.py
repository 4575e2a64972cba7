"""Tests for the MCP tool layer with a mocked gateway."""

from unittest.mock import AsyncMock

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from conftest import job_payload
from krea_mcp.mcp import tools
from krea_mcp.schemas.common import Page
from krea_mcp.schemas.generation import FluxRequest, KlingRequest, TrainStyleRequest
from krea_mcp.schemas.jobs import Job
from krea_mcp.schemas.result import ErrorKind, OperationResult


def job(**kwargs) -> Job:
    return Job.model_validate(job_payload(**kwargs))


@pytest.fixture
def gateway() -> AsyncMock:
    return AsyncMock()


@pytest.mark.asyncio
async def test_wait_for_job_renders_failed_job_without_raising(gateway):
    gateway.wait_for_job.return_value = OperationResult.ok(job(status="failed", error="NSFW"))

    response = await tools.wait_for_job(gateway, "job_1", timeout_seconds=30, poll_interval_ms=1500)

    assert "Generation Failed" in response["markdown"]
    assert response["job"]["status"] == "failed"
    assert response["job"]["error"] == "NSFW"
    gateway.wait_for_job.assert_awaited_once_with("job_1", timeout_ms=30000, poll_interval_ms=1500)


@pytest.mark.asyncio
async def test_wait_for_job_timeout_is_a_tool_error(gateway):
    gateway.wait_for_job.return_value = OperationResult.fail(
        ErrorKind.TIMEOUT, "Job job_1 did not complete within 120000ms"
    )

    with pytest.raises(ToolError) as exc_info:
        await tools.wait_for_job(gateway, "job_1")

    message = str(exc_info.value)
    assert "did not complete within 120000ms" in message
    assert "krea_wait_for_job" in message


@pytest.mark.asyncio
async def test_get_job_http_error_includes_status(gateway):
    gateway.get_job.return_value = OperationResult.fail(
        ErrorKind.REMOTE_HTTP_ERROR, "Unauthorized", status_code=401
    )

    with pytest.raises(ToolError, match=r"Unauthorized \(HTTP 401\)"):
        await tools.get_job(gateway, "job_1")


@pytest.mark.asyncio
async def test_delete_requires_confirmation(gateway):
    with pytest.raises(ToolError, match="Deletion not confirmed"):
        await tools.delete_job(gateway, "job_1")
    with pytest.raises(ToolError, match="Deletion not confirmed"):
        await tools.delete_asset(gateway, "asset_1", confirm=False)

    gateway.delete_job.assert_not_awaited()
    gateway.delete_asset.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_job_confirmed(gateway):
    gateway.delete_job.return_value = OperationResult.ok(True)

    response = await tools.delete_job(gateway, "job_1", confirm=True)

    assert response["deleted"] is True
    assert "`job_1` deleted" in response["markdown"]


@pytest.mark.asyncio
async def test_list_jobs_passes_filters_through(gateway):
    gateway.list_jobs.return_value = OperationResult.ok(
        Page[Job](items=[job(job_id="a")], total=7, has_more=True)
    )

    response = await tools.list_jobs(gateway, limit=1, offset=3, status="all", type="video")

    gateway.list_jobs.assert_awaited_once_with(status="all", type="video", limit=1, offset=3)
    assert response["total"] == 7
    assert response["has_more"] is True
    assert response["jobs"][0]["id"] == "a"


@pytest.mark.asyncio
async def test_generate_forwards_payload_and_wait_flag(gateway):
    gateway.generate.return_value = OperationResult.ok(job(status="pending"))
    request = FluxRequest(prompt="a red fox", model="flux-1.1-pro", wait_for_completion=True)

    response = await tools.generate(gateway, "flux", request)

    generator, payload = gateway.generate.await_args.args
    assert generator == "flux"
    assert payload["prompt"] == "a red fox"
    assert payload["model"] == "flux-1.1-pro"
    assert "wait_for_completion" not in payload
    assert "seed" not in payload
    assert gateway.generate.await_args.kwargs == {"wait": True}
    assert "Generation In Progress" in response["markdown"]


@pytest.mark.asyncio
async def test_generate_video_payload_defaults(gateway):
    gateway.generate.return_value = OperationResult.ok(job(status="pending", type="video"))

    await tools.generate(gateway, "kling", KlingRequest(prompt="waves"))

    _, payload = gateway.generate.await_args.args
    assert payload["model"] == "kling-2.5"
    assert payload["duration"] == "5s"
    assert payload["resolution"] == "1080p"
    assert payload["aspect_ratio"] == "16:9"


@pytest.mark.asyncio
async def test_train_style_reports_job(gateway):
    gateway.train_style.return_value = OperationResult.ok(job(job_id="train_1", type="style"))
    request = TrainStyleRequest(name="Ink", images=["https://a", "https://b", "https://c"])

    response = await tools.train_style(gateway, request)

    assert "`train_1`" in response["markdown"]
    gateway.train_style.assert_awaited_once_with(
        {"name": "Ink", "images": ["https://a", "https://b", "https://c"]}
    )


@pytest.mark.asyncio
async def test_update_style_needs_a_field(gateway):
    with pytest.raises(ToolError, match="Nothing to update"):
        await tools.update_style(gateway, "style_1")
    gateway.update_style.assert_not_awaited()
