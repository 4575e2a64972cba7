"""MCP tool implementations for Krea AI.

Each function takes the gateway explicitly, calls it, and returns a dict with
a ``markdown`` summary plus the structured data. Gateway failures become
``ToolError`` so the MCP client sees ``isError``. A job whose remote status is
``failed`` is a normal answer and is rendered, not raised.
"""

from typing import Any, Dict, List, NoReturn, Optional

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import BaseModel

from krea_mcp.core.config import DEFAULT_POLL_INTERVAL_MS
from krea_mcp.schemas.generation import GenerationRequest, TrainStyleRequest
from krea_mcp.schemas.result import ErrorKind, OperationResult
from krea_mcp.services import formatters
from krea_mcp.services.krea_client import KreaGateway

SUGGESTIONS = {
    ErrorKind.TIMEOUT: (
        "The job may still be running. Call krea_wait_for_job again "
        "or check it with krea_get_job."
    ),
    ErrorKind.NOT_FOUND: "Check the ID; list resources to find valid IDs.",
    ErrorKind.NETWORK_ERROR: "Check connectivity to the Krea API and retry.",
}


def fail(result: OperationResult[Any]) -> NoReturn:
    error = result.error
    message = error.message
    if error.status_code and error.kind != ErrorKind.NOT_FOUND:
        message = f"{message} (HTTP {error.status_code})"
    raise ToolError(formatters.format_error(message, SUGGESTIONS.get(error.kind)))


def dump(model: BaseModel) -> Dict[str, Any]:
    return model.model_dump(mode="json", exclude_none=True)


def respond(markdown: str, **data: Any) -> Dict[str, Any]:
    return {"markdown": formatters.truncate_text(markdown), **data}


# Jobs


async def list_jobs(
    gateway: KreaGateway,
    limit: int = 20,
    offset: int = 0,
    status: str = "all",
    type: Optional[str] = None,
) -> Dict[str, Any]:
    result = await gateway.list_jobs(status=status, type=type, limit=limit, offset=offset)
    if not result.success:
        fail(result)
    page = result.value
    return respond(
        formatters.format_jobs_list_markdown(page.items, page.total),
        jobs=[dump(job) for job in page.items],
        total=page.total,
        has_more=page.has_more,
    )


async def get_job(gateway: KreaGateway, job_id: str) -> Dict[str, Any]:
    result = await gateway.get_job(job_id)
    if not result.success:
        fail(result)
    return respond(formatters.format_job_markdown(result.value), job=dump(result.value))


async def wait_for_job(
    gateway: KreaGateway,
    job_id: str,
    timeout_seconds: int = 120,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
) -> Dict[str, Any]:
    result = await gateway.wait_for_job(
        job_id, timeout_ms=timeout_seconds * 1000, poll_interval_ms=poll_interval_ms
    )
    if not result.success:
        fail(result)
    job = result.value
    return respond(formatters.format_generation_result(job), job=dump(job))


async def delete_job(gateway: KreaGateway, job_id: str, confirm: bool = False) -> Dict[str, Any]:
    if not confirm:
        raise ToolError(
            formatters.format_error("Deletion not confirmed", "Set confirm=true to delete")
        )
    result = await gateway.delete_job(job_id)
    if not result.success:
        fail(result)
    return respond(f"✅ Job `{job_id}` deleted successfully.", deleted=result.value)


# Assets


async def list_assets(
    gateway: KreaGateway, limit: int = 20, offset: int = 0, type: str = "all"
) -> Dict[str, Any]:
    result = await gateway.list_assets(type=type, limit=limit, offset=offset)
    if not result.success:
        fail(result)
    page = result.value
    return respond(
        formatters.format_assets_list_markdown(page.items, page.total),
        assets=[dump(asset) for asset in page.items],
        total=page.total,
        has_more=page.has_more,
    )


async def upload_asset(gateway: KreaGateway, url: str, name: Optional[str] = None) -> Dict[str, Any]:
    result = await gateway.upload_asset(url, name=name)
    if not result.success:
        fail(result)
    markdown = f"✅ **Asset Uploaded**\n\n{formatters.format_asset_markdown(result.value)}"
    return respond(markdown, asset=dump(result.value))


async def get_asset(gateway: KreaGateway, asset_id: str) -> Dict[str, Any]:
    result = await gateway.get_asset(asset_id)
    if not result.success:
        fail(result)
    return respond(formatters.format_asset_markdown(result.value), asset=dump(result.value))


async def delete_asset(gateway: KreaGateway, asset_id: str, confirm: bool = False) -> Dict[str, Any]:
    if not confirm:
        raise ToolError(
            formatters.format_error("Deletion not confirmed", "Set confirm=true to delete")
        )
    result = await gateway.delete_asset(asset_id)
    if not result.success:
        fail(result)
    return respond(f"✅ Asset `{asset_id}` deleted successfully.", deleted=result.value)


# Styles


async def train_style(gateway: KreaGateway, request: TrainStyleRequest) -> Dict[str, Any]:
    result = await gateway.train_style(request.model_dump(exclude_none=True))
    if not result.success:
        fail(result)
    markdown = (
        "🎨 **Style Training Started**\n\n"
        f"- **Job ID**: `{result.value.id}`\n"
        f"- **Name**: {request.name}\n\n"
        "Use `krea_wait_for_job` to wait for training completion."
    )
    return respond(markdown, job=dump(result.value))


async def search_styles(
    gateway: KreaGateway,
    query: Optional[str] = None,
    type: str = "all",
    limit: int = 20,
    offset: int = 0,
) -> Dict[str, Any]:
    result = await gateway.search_styles(query=query, type=type, limit=limit, offset=offset)
    if not result.success:
        fail(result)
    page = result.value
    return respond(
        formatters.format_styles_list_markdown(page.items, page.total),
        styles=[dump(style) for style in page.items],
        total=page.total,
        has_more=page.has_more,
    )


async def get_style(gateway: KreaGateway, style_id: str) -> Dict[str, Any]:
    result = await gateway.get_style(style_id)
    if not result.success:
        fail(result)
    return respond(formatters.format_style_markdown(result.value), style=dump(result.value))


async def update_style(
    gateway: KreaGateway,
    style_id: str,
    name: Optional[str] = None,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    if name is None and description is None:
        raise ToolError(
            formatters.format_error("Nothing to update", "Pass a new name or description")
        )
    result = await gateway.update_style(style_id, name=name, description=description)
    if not result.success:
        fail(result)
    markdown = f"✅ **Style Updated**\n\n{formatters.format_style_markdown(result.value)}"
    return respond(markdown, style=dump(result.value))


async def share_style(gateway: KreaGateway, style_id: str) -> Dict[str, Any]:
    result = await gateway.get_style_share_link(style_id)
    if not result.success:
        fail(result)
    return respond(f"🔗 **Shareable Link**: {result.value.url}", url=result.value.url)


async def share_style_with_workspace(gateway: KreaGateway, style_id: str) -> Dict[str, Any]:
    result = await gateway.share_style_with_workspace(style_id)
    if not result.success:
        fail(result)
    return respond(f"🤝 Style `{style_id}` shared with your workspace.", shared=result.value)


async def remove_style_from_workspace(gateway: KreaGateway, style_id: str) -> Dict[str, Any]:
    result = await gateway.remove_style_from_workspace(style_id)
    if not result.success:
        fail(result)
    return respond(f"✅ Style `{style_id}` removed from your workspace.", removed=result.value)


# Generation


async def generate(
    gateway: KreaGateway, generator: str, request: GenerationRequest
) -> Dict[str, Any]:
    """Run one generation tool: submit, optionally wait, render the job."""
    result = await gateway.generate(
        generator, request.to_payload(), wait=request.wait_for_completion
    )
    if not result.success:
        fail(result)
    job = result.value
    return respond(formatters.format_generation_result(job), job=dump(job))


TOOL_NAMES: List[str] = [
    # Jobs
    "krea_list_jobs",
    "krea_get_job",
    "krea_wait_for_job",
    "krea_delete_job",
    # Assets
    "krea_list_assets",
    "krea_upload_asset",
    "krea_get_asset",
    "krea_delete_asset",
    # Styles
    "krea_train_style",
    "krea_search_styles",
    "krea_get_style",
    "krea_update_style",
    "krea_share_style",
    "krea_share_style_with_workspace",
    "krea_remove_style_from_workspace",
    # Image generation
    "krea_generate_flux",
    "krea_generate_flux_kontext",
    "krea_generate_nano_banana",
    "krea_generate_ideogram",
    "krea_generate_imagen",
    "krea_generate_seedream",
    "krea_generate_runway_image",
    "krea_generate_chatgpt_image",
    "krea_edit_image",
    # Video generation
    "krea_generate_kling",
    "krea_generate_hailuo",
    "krea_generate_veo",
    "krea_generate_wan",
    "krea_generate_pika",
    "krea_generate_seedance",
    "krea_generate_runway",
    "krea_generate_ray",
    # Enhance
    "krea_enhance_image",
]
