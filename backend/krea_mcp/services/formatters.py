"""Markdown rendering of Krea jobs, assets and styles for tool responses."""

from typing import List, Optional

from krea_mcp.schemas.assets import Asset
from krea_mcp.schemas.jobs import Job
from krea_mcp.schemas.styles import Style
from krea_mcp.utils.time import format_display

CHARACTER_LIMIT = 10000
TRUNCATION_NOTICE = "\n\n... [Truncated. Use pagination for more results.]"

STATUS_EMOJI = {
    "completed": "✅",
    "processing": "⏳",
    "pending": "🕐",
    "failed": "❌",
    "cancelled": "🚫",
}
STYLE_STATUS_EMOJI = {"ready": "✅", "training": "⏳", "failed": "❌"}
STYLE_TYPE_EMOJI = {"preset": "📦", "custom": "🎨", "shared": "🤝"}
MEDIA_EMOJI = {"image": "🖼️", "video": "🎬"}


def truncate_text(text: str, limit: int = CHARACTER_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return f"{text[: limit - 100]}{TRUNCATION_NOTICE}"


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    text = f"❌ **Error**: {message}"
    if suggestion:
        text += f"\n\n💡 **Suggestion**: {suggestion}"
    return text


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024**2:
        return f"{size / 1024:.1f} KB"
    if size < 1024**3:
        return f"{size / 1024**2:.1f} MB"
    return f"{size / 1024**3:.1f} GB"


def media_kind(job: Job) -> str:
    return "video" if "video" in job.type else "image"


def _url_lines(urls: List[str]) -> List[str]:
    if len(urls) == 1:
        return ["### Generated Asset", "", urls[0]]
    lines = ["### Generated Assets", ""]
    lines.extend(f"{index}. {url}" for index, url in enumerate(urls, start=1))
    return lines


def _progress_line(job: Job) -> List[str]:
    if job.progress is None:
        return []
    fraction = min(max(job.progress, 0.0), 1.0)
    return [f"- **Progress**: {round(fraction * 100)}%"]


def format_job_markdown(job: Job) -> str:
    lines = [
        f"## Job {STATUS_EMOJI.get(job.status, '❓')}",
        "",
        f"- **ID**: `{job.id}`",
        f"- **Status**: {job.status}",
        f"- **Type**: {job.type}",
        f"- **Created**: {format_display(job.created_at)}",
        f"- **Updated**: {format_display(job.updated_at)}",
    ]
    if job.completed_at:
        lines.append(f"- **Completed**: {format_display(job.completed_at)}")
    lines.extend(_progress_line(job))
    if job.error:
        lines.extend(["", "### Error", "", "```", job.error, "```"])
    urls = job.output_urls
    if urls:
        lines.append("")
        lines.extend(_url_lines(urls))
    return "\n".join(lines)


def format_jobs_list_markdown(jobs: List[Job], total: int) -> str:
    if not jobs:
        return "No jobs found."
    lines = [f"## Jobs ({len(jobs)} of {total})", ""]
    for job in jobs:
        lines.append(f"### {STATUS_EMOJI.get(job.status, '❓')} `{job.id}`")
        lines.append(f"- **Type**: {job.type} | **Status**: {job.status}")
        lines.append(f"- **Created**: {format_display(job.created_at)}")
        lines.append("")
    return "\n".join(lines)


def format_asset_markdown(asset: Asset) -> str:
    lines = [
        "## Asset",
        "",
        f"- **ID**: `{asset.id}`",
        f"- **Type**: {asset.type}",
        f"- **URL**: {asset.url}",
    ]
    if asset.width and asset.height:
        lines.append(f"- **Dimensions**: {asset.width}x{asset.height}")
    if asset.duration:
        lines.append(f"- **Duration**: {asset.duration:g}s")
    if asset.format:
        lines.append(f"- **Format**: {asset.format}")
    if asset.size:
        lines.append(f"- **Size**: {format_file_size(asset.size)}")
    lines.append(f"- **Created**: {format_display(asset.created_at)}")
    return "\n".join(lines)


def format_assets_list_markdown(assets: List[Asset], total: int) -> str:
    if not assets:
        return "No assets found."
    lines = [f"## Assets ({len(assets)} of {total})", ""]
    for asset in assets:
        lines.append(f"### {MEDIA_EMOJI.get(asset.type, '🖼️')} `{asset.id}`")
        lines.append(f"- **URL**: {asset.url}")
        if asset.width and asset.height:
            lines.append(f"- **Dimensions**: {asset.width}x{asset.height}")
        lines.append("")
    return "\n".join(lines)


def format_style_markdown(style: Style) -> str:
    lines = [
        f"## Style {STYLE_STATUS_EMOJI.get(style.status, '❓')}",
        "",
        f"- **ID**: `{style.id}`",
        f"- **Name**: {style.name}",
        f"- **Type**: {style.type}",
        f"- **Status**: {style.status}",
    ]
    if style.description:
        lines.append(f"- **Description**: {style.description}")
    if style.thumbnail_url:
        lines.append(f"- **Thumbnail**: {style.thumbnail_url}")
    lines.append(f"- **Created**: {format_display(style.created_at)}")
    lines.append(f"- **Updated**: {format_display(style.updated_at)}")
    return "\n".join(lines)


def format_styles_list_markdown(styles: List[Style], total: int) -> str:
    if not styles:
        return "No styles found."
    lines = [f"## Styles ({len(styles)} of {total})", ""]
    for style in styles:
        type_emoji = STYLE_TYPE_EMOJI.get(style.type, "🎨")
        status_emoji = STYLE_STATUS_EMOJI.get(style.status, "❓")
        lines.append(f"### {type_emoji} {style.name} {status_emoji}")
        lines.append(f"- **ID**: `{style.id}`")
        if style.description:
            lines.append(f"- **Description**: {style.description}")
        lines.append("")
    return "\n".join(lines)


def format_generation_result(job: Job, kind: Optional[str] = None) -> str:
    """Summarize a generation job for the agent.

    A ``failed`` or ``cancelled`` job is rendered here as an outcome, not
    raised as a tool error.
    """
    emoji = MEDIA_EMOJI.get(kind or media_kind(job), "🖼️")
    if job.status == "completed":
        lines = [f"## {emoji} Generation Complete!", ""]
        lines.extend(_url_lines(job.output_urls) if job.output_urls else [f"- **Job ID**: `{job.id}`"])
    elif job.status in ("pending", "processing"):
        lines = [
            f"## {emoji} Generation In Progress",
            "",
            f"- **Job ID**: `{job.id}`",
            f"- **Status**: {job.status}",
        ]
        lines.extend(_progress_line(job))
        lines.extend(
            [
                "",
                "Use `krea_get_job` with this ID to check status, "
                "or `krea_wait_for_job` to wait for completion.",
            ]
        )
    else:
        lines = [
            f"## {emoji} Generation Failed",
            "",
            f"- **Job ID**: `{job.id}`",
            f"- **Status**: {job.status}",
        ]
        if job.error:
            lines.append(f"- **Error**: {job.error}")
    return "\n".join(lines)
