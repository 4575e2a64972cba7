from conftest import job_payload
from krea_mcp.schemas.assets import Asset
from krea_mcp.schemas.jobs import Job
from krea_mcp.schemas.styles import Style
from krea_mcp.services import formatters
from krea_mcp.utils.time import format_display


def make_job(**kwargs) -> Job:
    return Job.model_validate(job_payload(**kwargs))


def test_format_display():
    assert format_display("2025-01-05T15:04:00Z") == "Jan 5, 2025, 03:04 PM"
    assert format_display("not a date") == "not a date"
    assert format_display(None) == "-"


def test_job_markdown_lists_outputs_and_progress():
    job = make_job(
        status="completed",
        progress=1.0,
        completedAt="2025-01-05T15:06:00Z",
        result={"urls": ["https://cdn.krea.ai/a.png", "https://cdn.krea.ai/b.png"]},
    )

    text = formatters.format_job_markdown(job)

    assert text.startswith("## Job ✅")
    assert "- **ID**: `job_1`" in text
    assert "- **Progress**: 100%" in text
    assert "- **Completed**: Jan 5, 2025, 03:06 PM" in text
    assert "1. https://cdn.krea.ai/a.png" in text
    assert "2. https://cdn.krea.ai/b.png" in text


def test_job_markdown_shows_remote_error():
    job = make_job(status="failed", error="NSFW content detected")

    text = formatters.format_job_markdown(job)

    assert "### Error" in text
    assert "NSFW content detected" in text


def test_generation_result_by_status():
    done = make_job(status="completed", type="video", result={"url": "https://cdn.krea.ai/v.mp4"})
    running = make_job(status="processing", progress=0.42)
    failed = make_job(status="failed", error="out of credits")

    assert "🎬 Generation Complete!" in formatters.format_generation_result(done)
    assert "https://cdn.krea.ai/v.mp4" in formatters.format_generation_result(done)

    in_progress = formatters.format_generation_result(running)
    assert "Generation In Progress" in in_progress
    assert "- **Progress**: 42%" in in_progress
    assert "krea_wait_for_job" in in_progress

    failure = formatters.format_generation_result(failed)
    assert "Generation Failed" in failure
    assert "- **Error**: out of credits" in failure


def test_empty_lists():
    assert formatters.format_jobs_list_markdown([], 0) == "No jobs found."
    assert formatters.format_assets_list_markdown([], 0) == "No assets found."
    assert formatters.format_styles_list_markdown([], 0) == "No styles found."


def test_jobs_list_header_counts():
    jobs = [make_job(job_id="a"), make_job(job_id="b")]

    text = formatters.format_jobs_list_markdown(jobs, 40)

    assert text.startswith("## Jobs (2 of 40)")
    assert "### 🕐 `a`" in text


def test_asset_markdown_sizes():
    asset = Asset.model_validate(
        {
            "id": "asset_1",
            "url": "https://cdn.krea.ai/a.png",
            "type": "image",
            "width": 1024,
            "height": 768,
            "size": 2 * 1024 * 1024,
            "createdAt": "2025-01-05T15:04:00Z",
        }
    )

    text = formatters.format_asset_markdown(asset)

    assert "- **Dimensions**: 1024x768" in text
    assert "- **Size**: 2.0 MB" in text


def test_style_markdown():
    style = Style.model_validate(
        {
            "id": "style_1",
            "name": "Ink",
            "type": "custom",
            "status": "training",
            "thumbnailUrl": "https://cdn.krea.ai/t.png",
            "createdAt": "2025-01-05T15:04:00Z",
            "updatedAt": "2025-01-05T15:04:00Z",
        }
    )

    text = formatters.format_style_markdown(style)

    assert text.startswith("## Style ⏳")
    assert "- **Thumbnail**: https://cdn.krea.ai/t.png" in text


def test_truncate_text():
    assert formatters.truncate_text("short") == "short"
    long_text = "x" * (formatters.CHARACTER_LIMIT + 1)

    truncated = formatters.truncate_text(long_text)

    assert len(truncated) <= formatters.CHARACTER_LIMIT
    assert truncated.endswith("[Truncated. Use pagination for more results.]")


def test_format_error_with_suggestion():
    text = formatters.format_error("Deletion not confirmed", "Set confirm=true to delete")

    assert text == (
        "❌ **Error**: Deletion not confirmed\n\n💡 **Suggestion**: Set confirm=true to delete"
    )


def test_out_of_range_progress_is_clamped():
    job = make_job(status="processing", progress=45)

    assert "- **Progress**: 100%" in formatters.format_generation_result(job)
