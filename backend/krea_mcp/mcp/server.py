"""MCP server exposing the Krea AI API through FastMCP."""

import logging
from typing import Annotated, List, Literal, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import Field

from krea_mcp.core.config import DEFAULT_POLL_INTERVAL_MS, SERVICE_NAME
from krea_mcp.mcp import tools
from krea_mcp.schemas import generation as gen
from krea_mcp.services.krea_client import KreaGateway

logger = logging.getLogger(__name__)

INSTRUCTIONS = """
# Krea AI

Generate images and videos with 30+ models, manage uploaded assets and train
custom styles (LoRAs).

## Workflow

1. Start a generation with one of the `krea_generate_*` tools (or
   `krea_edit_image` / `krea_enhance_image`). It returns a job ID right away.
2. Call `krea_wait_for_job` with that ID to block until the job finishes, or
   pass `wait_for_completion=true` to the generation tool.
3. A job that ends as `failed` is reported with the error from Krea; a tool
   error means the outcome could not be determined (timeout, network, HTTP).

## Model families

- **Images**: Flux, Flux Kontext, Nano Banana, Ideogram, Imagen, Seedream,
  Runway, ChatGPT Image
- **Videos**: Kling, Hailuo, Veo, Wan, Pika, Seedance, Runway, Ray
- **Enhance**: Topaz, Topaz Generative, Bloom
"""

READ_ONLY = ToolAnnotations(
    readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True
)
CREATE = ToolAnnotations(
    readOnlyHint=False, destructiveHint=False, idempotentHint=False, openWorldHint=True
)
UPDATE = ToolAnnotations(
    readOnlyHint=False, destructiveHint=False, idempotentHint=True, openWorldHint=True
)
DELETE = ToolAnnotations(
    readOnlyHint=False, destructiveHint=True, idempotentHint=True, openWorldHint=True
)

Limit = Annotated[int, Field(ge=1, le=100, description="Maximum results")]
Offset = Annotated[int, Field(ge=0, description="Pagination offset")]
Identifier = Annotated[str, Field(min_length=1)]
Url = Annotated[str, Field(pattern=r"^https?://", description="Public http(s) URL")]
OptionalUrl = Annotated[Optional[str], Field(pattern=r"^https?://")]
Prompt = Annotated[str, Field(min_length=1, max_length=2000, description="Text prompt")]
NegativePrompt = Annotated[
    Optional[str], Field(max_length=1000, description="What to avoid")
]
Weight = Annotated[Optional[float], Field(ge=0, le=1)]
NumImages = Annotated[int, Field(ge=1, le=4, description="Number of images to generate")]
Wait = Annotated[bool, Field(description="Wait for the job to finish before returning")]


def build_server(gateway: KreaGateway) -> FastMCP:
    """Create the FastMCP server with every Krea tool bound to ``gateway``."""
    mcp = FastMCP(SERVICE_NAME, instructions=INSTRUCTIONS, stateless_http=True)

    # Jobs

    @mcp.tool(name="krea_list_jobs", title="List Jobs", annotations=READ_ONLY)
    async def list_jobs(
        limit: Limit = 20,
        offset: Offset = 0,
        status: Literal[
            "pending", "processing", "completed", "failed", "cancelled", "all"
        ] = "all",
        type: Annotated[
            Optional[str], Field(description="Job type filter, e.g. image or video")
        ] = None,
    ) -> dict:
        """
        List generation jobs in the Krea account.

        Args:
            limit: Max results (1-100, default 20)
            offset: Pagination offset
            status: pending, processing, completed, failed, cancelled or all
            type: Filter by job type (image, video)
        """
        return await tools.list_jobs(gateway, limit=limit, offset=offset, status=status, type=type)

    @mcp.tool(name="krea_get_job", title="Get Job Details", annotations=READ_ONLY)
    async def get_job(job_id: Identifier) -> dict:
        """Get status, progress and results of a job."""
        return await tools.get_job(gateway, job_id)

    @mcp.tool(name="krea_wait_for_job", title="Wait for Job Completion", annotations=READ_ONLY)
    async def wait_for_job(
        job_id: Identifier,
        timeout_seconds: Annotated[int, Field(ge=10, le=300)] = 120,
        poll_interval_ms: Annotated[int, Field(ge=1000, le=10000)] = DEFAULT_POLL_INTERVAL_MS,
    ) -> dict:
        """
        Wait for a job to finish and return the result.

        Args:
            job_id: The job ID to wait for
            timeout_seconds: Max wait time (10-300, default 120)
            poll_interval_ms: Polling interval (1000-10000, default 2000)
        """
        return await tools.wait_for_job(
            gateway, job_id, timeout_seconds=timeout_seconds, poll_interval_ms=poll_interval_ms
        )

    @mcp.tool(name="krea_delete_job", title="Delete Job", annotations=DELETE)
    async def delete_job(job_id: Identifier, confirm: bool = False) -> dict:
        """Delete a job. `confirm` must be true."""
        return await tools.delete_job(gateway, job_id, confirm=confirm)

    # Assets

    @mcp.tool(name="krea_list_assets", title="List Assets", annotations=READ_ONLY)
    async def list_assets(
        limit: Limit = 20,
        offset: Offset = 0,
        type: Literal["image", "video", "all"] = "all",
    ) -> dict:
        """List uploaded and generated assets."""
        return await tools.list_assets(gateway, limit=limit, offset=offset, type=type)

    @mcp.tool(name="krea_upload_asset", title="Upload Asset", annotations=CREATE)
    async def upload_asset(url: Url, name: Optional[str] = None) -> dict:
        """Upload an image or video from a URL to use in generations."""
        return await tools.upload_asset(gateway, url, name=name)

    @mcp.tool(name="krea_get_asset", title="Get Asset", annotations=READ_ONLY)
    async def get_asset(asset_id: Identifier) -> dict:
        """Get details about an asset."""
        return await tools.get_asset(gateway, asset_id)

    @mcp.tool(name="krea_delete_asset", title="Delete Asset", annotations=DELETE)
    async def delete_asset(asset_id: Identifier, confirm: bool = False) -> dict:
        """Delete an asset. `confirm` must be true."""
        return await tools.delete_asset(gateway, asset_id, confirm=confirm)

    # Styles

    @mcp.tool(name="krea_train_style", title="Train Custom Style (LoRA)", annotations=CREATE)
    async def train_style(
        name: Annotated[str, Field(min_length=1, max_length=100)],
        images: Annotated[List[str], Field(min_length=3, max_length=20)],
        description: Annotated[Optional[str], Field(max_length=500)] = None,
        trigger_word: Optional[str] = None,
    ) -> dict:
        """
        Train a custom style/LoRA from 3-20 similar images.

        Returns a job ID; use krea_wait_for_job to follow training.
        """
        request = gen.TrainStyleRequest(
            name=name, images=images, description=description, trigger_word=trigger_word
        )
        return await tools.train_style(gateway, request)

    @mcp.tool(name="krea_search_styles", title="Search Styles", annotations=READ_ONLY)
    async def search_styles(
        query: Optional[str] = None,
        type: Literal["preset", "custom", "shared", "all"] = "all",
        limit: Limit = 20,
        offset: Offset = 0,
    ) -> dict:
        """Search available styles/LoRAs."""
        return await tools.search_styles(gateway, query=query, type=type, limit=limit, offset=offset)

    @mcp.tool(name="krea_get_style", title="Get Style Details", annotations=READ_ONLY)
    async def get_style(style_id: Identifier) -> dict:
        """Get details about a style."""
        return await tools.get_style(gateway, style_id)

    @mcp.tool(name="krea_update_style", title="Update Style", annotations=UPDATE)
    async def update_style(
        style_id: Identifier,
        name: Annotated[Optional[str], Field(min_length=1, max_length=100)] = None,
        description: Annotated[Optional[str], Field(max_length=500)] = None,
    ) -> dict:
        """Update a style's name or description."""
        return await tools.update_style(gateway, style_id, name=name, description=description)

    @mcp.tool(name="krea_share_style", title="Share Style", annotations=READ_ONLY)
    async def share_style(style_id: Identifier) -> dict:
        """Get a shareable link for a style."""
        return await tools.share_style(gateway, style_id)

    @mcp.tool(
        name="krea_share_style_with_workspace",
        title="Share Style with Workspace",
        annotations=UPDATE,
    )
    async def share_style_with_workspace(style_id: Identifier) -> dict:
        """Make a style available to everyone in the workspace."""
        return await tools.share_style_with_workspace(gateway, style_id)

    @mcp.tool(
        name="krea_remove_style_from_workspace",
        title="Remove Style from Workspace",
        annotations=DELETE,
    )
    async def remove_style_from_workspace(style_id: Identifier) -> dict:
        """Stop sharing a style with the workspace."""
        return await tools.remove_style_from_workspace(gateway, style_id)

    # Image generation

    @mcp.tool(name="krea_generate_flux", title="Generate Image with Flux", annotations=CREATE)
    async def generate_flux(
        prompt: Prompt,
        model: gen.FluxModel = "flux",
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.AspectRatio = "1:1",
        style_id: Optional[str] = None,
        style_weight: Weight = 0.8,
        image_url: OptionalUrl = None,
        image_weight: Weight = 0.5,
        seed: Optional[int] = None,
        num_images: NumImages = 1,
        wait_for_completion: Wait = False,
    ) -> dict:
        """
        Generate images with Flux (fast, high quality).

        Models: flux (default), flux-1.1-pro, flux-1.1-pro-ultra.
        """
        request = gen.FluxRequest(
            prompt=prompt,
            model=model,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            style_id=style_id,
            style_weight=style_weight,
            image_url=image_url,
            image_weight=image_weight,
            seed=seed,
            num_images=num_images,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "flux", request)

    @mcp.tool(
        name="krea_generate_flux_kontext",
        title="Generate/Edit with Flux Kontext",
        annotations=CREATE,
    )
    async def generate_flux_kontext(
        prompt: Prompt,
        edit_prompt: Optional[str] = None,
        mask_url: OptionalUrl = None,
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.AspectRatio = "1:1",
        style_id: Optional[str] = None,
        style_weight: Weight = 0.8,
        image_url: OptionalUrl = None,
        image_weight: Weight = 0.5,
        seed: Optional[int] = None,
        num_images: NumImages = 1,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate or edit images with context-aware Flux Kontext."""
        request = gen.FluxKontextRequest(
            prompt=prompt,
            edit_prompt=edit_prompt,
            mask_url=mask_url,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            style_id=style_id,
            style_weight=style_weight,
            image_url=image_url,
            image_weight=image_weight,
            seed=seed,
            num_images=num_images,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "flux_kontext", request)

    @mcp.tool(
        name="krea_generate_nano_banana",
        title="Generate Image with Nano Banana",
        annotations=CREATE,
    )
    async def generate_nano_banana(
        prompt: Prompt,
        model: gen.NanoBananaModel = "nano-banana-pro",
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.AspectRatio = "1:1",
        style_id: Optional[str] = None,
        style_weight: Weight = 0.8,
        image_url: OptionalUrl = None,
        image_weight: Weight = 0.5,
        seed: Optional[int] = None,
        num_images: NumImages = 1,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate images with Nano Banana (nano-banana, nano-banana-pro)."""
        request = gen.NanoBananaRequest(
            prompt=prompt,
            model=model,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            style_id=style_id,
            style_weight=style_weight,
            image_url=image_url,
            image_weight=image_weight,
            seed=seed,
            num_images=num_images,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "nano_banana", request)

    @mcp.tool(
        name="krea_generate_ideogram", title="Generate Image with Ideogram", annotations=CREATE
    )
    async def generate_ideogram(
        prompt: Prompt,
        model: gen.IdeogramModel = "ideogram-3.0",
        magic_prompt: bool = True,
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.AspectRatio = "1:1",
        style_id: Optional[str] = None,
        style_weight: Weight = 0.8,
        image_url: OptionalUrl = None,
        image_weight: Weight = 0.5,
        seed: Optional[int] = None,
        num_images: NumImages = 1,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate images with Ideogram, good at rendering text."""
        request = gen.IdeogramRequest(
            prompt=prompt,
            model=model,
            magic_prompt=magic_prompt,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            style_id=style_id,
            style_weight=style_weight,
            image_url=image_url,
            image_weight=image_weight,
            seed=seed,
            num_images=num_images,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "ideogram", request)

    @mcp.tool(name="krea_generate_imagen", title="Generate Image with Imagen", annotations=CREATE)
    async def generate_imagen(
        prompt: Prompt,
        model: gen.ImagenModel = "imagen-4",
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.AspectRatio = "1:1",
        style_id: Optional[str] = None,
        style_weight: Weight = 0.8,
        image_url: OptionalUrl = None,
        image_weight: Weight = 0.5,
        seed: Optional[int] = None,
        num_images: NumImages = 1,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate images with Google Imagen (3, 4, 4-fast, 4-ultra)."""
        request = gen.ImagenRequest(
            prompt=prompt,
            model=model,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            style_id=style_id,
            style_weight=style_weight,
            image_url=image_url,
            image_weight=image_weight,
            seed=seed,
            num_images=num_images,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "imagen", request)

    @mcp.tool(
        name="krea_generate_seedream", title="Generate Image with Seedream", annotations=CREATE
    )
    async def generate_seedream(
        prompt: Prompt,
        model: gen.SeedreamModel = "seedream-4",
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.AspectRatio = "1:1",
        style_id: Optional[str] = None,
        style_weight: Weight = 0.8,
        image_url: OptionalUrl = None,
        image_weight: Weight = 0.5,
        seed: Optional[int] = None,
        num_images: NumImages = 1,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate images with ByteDance Seedream (3, 4)."""
        request = gen.SeedreamRequest(
            prompt=prompt,
            model=model,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            style_id=style_id,
            style_weight=style_weight,
            image_url=image_url,
            image_weight=image_weight,
            seed=seed,
            num_images=num_images,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "seedream", request)

    @mcp.tool(
        name="krea_generate_runway_image", title="Generate Image with Runway", annotations=CREATE
    )
    async def generate_runway_image(
        prompt: Prompt,
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.AspectRatio = "1:1",
        style_id: Optional[str] = None,
        style_weight: Weight = 0.8,
        image_url: OptionalUrl = None,
        image_weight: Weight = 0.5,
        seed: Optional[int] = None,
        num_images: NumImages = 1,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate images with Runway Gen-4."""
        request = gen.RunwayImageRequest(
            prompt=prompt,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            style_id=style_id,
            style_weight=style_weight,
            image_url=image_url,
            image_weight=image_weight,
            seed=seed,
            num_images=num_images,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "runway_image", request)

    @mcp.tool(
        name="krea_generate_chatgpt_image",
        title="Generate Image with ChatGPT Image",
        annotations=CREATE,
    )
    async def generate_chatgpt_image(
        prompt: Prompt,
        edit_mode: bool = False,
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.AspectRatio = "1:1",
        style_id: Optional[str] = None,
        style_weight: Weight = 0.8,
        image_url: OptionalUrl = None,
        image_weight: Weight = 0.5,
        seed: Optional[int] = None,
        num_images: NumImages = 1,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate or edit images with OpenAI's ChatGPT Image model."""
        request = gen.ChatGPTImageRequest(
            prompt=prompt,
            edit_mode=edit_mode,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            style_id=style_id,
            style_weight=style_weight,
            image_url=image_url,
            image_weight=image_weight,
            seed=seed,
            num_images=num_images,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "chatgpt_image", request)

    @mcp.tool(name="krea_edit_image", title="Edit Image", annotations=CREATE)
    async def edit_image(
        image_url: Url,
        prompt: Prompt,
        mask_url: OptionalUrl = None,
        model: gen.EditModel = "nano-banana-pro",
        wait_for_completion: Wait = False,
    ) -> dict:
        """
        Edit an existing image from instructions.

        Models: nano-banana-pro (default), seededit, flux-kontext.
        """
        request = gen.EditImageRequest(
            image_url=image_url,
            prompt=prompt,
            mask_url=mask_url,
            model=model,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "edit", request)

    # Video generation

    @mcp.tool(name="krea_generate_kling", title="Generate Video with Kling", annotations=CREATE)
    async def generate_kling(
        prompt: Prompt,
        model: gen.KlingModel = "kling-2.5",
        motion_intensity: Weight = 0.5,
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.VideoAspectRatio = "16:9",
        duration: gen.VideoDuration = "5s",
        resolution: gen.VideoResolution = "1080p",
        start_image_url: OptionalUrl = None,
        end_image_url: OptionalUrl = None,
        seed: Optional[int] = None,
        wait_for_completion: Wait = False,
    ) -> dict:
        """
        Generate videos with Kling (1.0 to 2.5).

        Video jobs wait up to 5 minutes when wait_for_completion is set.
        """
        request = gen.KlingRequest(
            prompt=prompt,
            model=model,
            motion_intensity=motion_intensity,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            duration=duration,
            resolution=resolution,
            start_image_url=start_image_url,
            end_image_url=end_image_url,
            seed=seed,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "kling", request)

    @mcp.tool(name="krea_generate_hailuo", title="Generate Video with Hailuo", annotations=CREATE)
    async def generate_hailuo(
        prompt: Prompt,
        model: gen.HailuoModel = "hailuo-2.3",
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.VideoAspectRatio = "16:9",
        duration: gen.VideoDuration = "5s",
        resolution: gen.VideoResolution = "1080p",
        start_image_url: OptionalUrl = None,
        end_image_url: OptionalUrl = None,
        seed: Optional[int] = None,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate videos with MiniMax Hailuo."""
        request = gen.HailuoRequest(
            prompt=prompt,
            model=model,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            duration=duration,
            resolution=resolution,
            start_image_url=start_image_url,
            end_image_url=end_image_url,
            seed=seed,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "hailuo", request)

    @mcp.tool(name="krea_generate_veo", title="Generate Video with Veo", annotations=CREATE)
    async def generate_veo(
        prompt: Prompt,
        model: gen.VeoModel = "veo-3",
        generate_audio: Annotated[
            bool, Field(description="Generate matching audio (Veo 3+ only)")
        ] = True,
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.VideoAspectRatio = "16:9",
        duration: gen.VideoDuration = "5s",
        resolution: gen.VideoResolution = "1080p",
        start_image_url: OptionalUrl = None,
        end_image_url: OptionalUrl = None,
        seed: Optional[int] = None,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate videos with Google Veo, optionally with audio."""
        request = gen.VeoRequest(
            prompt=prompt,
            model=model,
            generate_audio=generate_audio,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            duration=duration,
            resolution=resolution,
            start_image_url=start_image_url,
            end_image_url=end_image_url,
            seed=seed,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "veo", request)

    @mcp.tool(name="krea_generate_wan", title="Generate Video with Wan", annotations=CREATE)
    async def generate_wan(
        prompt: Prompt,
        model: gen.WanModel = "wan-2.5",
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.VideoAspectRatio = "16:9",
        duration: gen.VideoDuration = "5s",
        resolution: gen.VideoResolution = "1080p",
        start_image_url: OptionalUrl = None,
        end_image_url: OptionalUrl = None,
        seed: Optional[int] = None,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate videos with Alibaba Wan."""
        request = gen.WanRequest(
            prompt=prompt,
            model=model,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            duration=duration,
            resolution=resolution,
            start_image_url=start_image_url,
            end_image_url=end_image_url,
            seed=seed,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "wan", request)

    @mcp.tool(name="krea_generate_pika", title="Generate Video with Pika", annotations=CREATE)
    async def generate_pika(
        prompt: Prompt,
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.VideoAspectRatio = "16:9",
        duration: gen.VideoDuration = "5s",
        resolution: gen.VideoResolution = "1080p",
        start_image_url: OptionalUrl = None,
        end_image_url: OptionalUrl = None,
        seed: Optional[int] = None,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate videos with Pika 2.2."""
        request = gen.PikaRequest(
            prompt=prompt,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            duration=duration,
            resolution=resolution,
            start_image_url=start_image_url,
            end_image_url=end_image_url,
            seed=seed,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "pika", request)

    @mcp.tool(
        name="krea_generate_seedance", title="Generate Video with Seedance", annotations=CREATE
    )
    async def generate_seedance(
        prompt: Prompt,
        model: gen.SeedanceModel = "seedance-pro",
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.VideoAspectRatio = "16:9",
        duration: gen.VideoDuration = "5s",
        resolution: gen.VideoResolution = "1080p",
        start_image_url: OptionalUrl = None,
        end_image_url: OptionalUrl = None,
        seed: Optional[int] = None,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate videos with ByteDance Seedance."""
        request = gen.SeedanceRequest(
            prompt=prompt,
            model=model,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            duration=duration,
            resolution=resolution,
            start_image_url=start_image_url,
            end_image_url=end_image_url,
            seed=seed,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "seedance", request)

    @mcp.tool(name="krea_generate_runway", title="Generate Video with Runway", annotations=CREATE)
    async def generate_runway(
        prompt: Prompt,
        model: gen.RunwayVideoModel = "runway-gen-4",
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.VideoAspectRatio = "16:9",
        duration: gen.VideoDuration = "5s",
        resolution: gen.VideoResolution = "1080p",
        start_image_url: OptionalUrl = None,
        end_image_url: OptionalUrl = None,
        seed: Optional[int] = None,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate videos with Runway (Gen-3, Gen-4, Aleph)."""
        request = gen.RunwayVideoRequest(
            prompt=prompt,
            model=model,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            duration=duration,
            resolution=resolution,
            start_image_url=start_image_url,
            end_image_url=end_image_url,
            seed=seed,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "runway_video", request)

    @mcp.tool(name="krea_generate_ray", title="Generate Video with Ray", annotations=CREATE)
    async def generate_ray(
        prompt: Prompt,
        negative_prompt: NegativePrompt = None,
        aspect_ratio: gen.VideoAspectRatio = "16:9",
        duration: gen.VideoDuration = "5s",
        resolution: gen.VideoResolution = "1080p",
        start_image_url: OptionalUrl = None,
        end_image_url: OptionalUrl = None,
        seed: Optional[int] = None,
        wait_for_completion: Wait = False,
    ) -> dict:
        """Generate videos with Luma Ray 2."""
        request = gen.RayRequest(
            prompt=prompt,
            negative_prompt=negative_prompt,
            aspect_ratio=aspect_ratio,
            duration=duration,
            resolution=resolution,
            start_image_url=start_image_url,
            end_image_url=end_image_url,
            seed=seed,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "ray", request)

    # Enhance

    @mcp.tool(name="krea_enhance_image", title="Enhance/Upscale Image", annotations=CREATE)
    async def enhance_image(
        image_url: Url,
        model: gen.EnhanceModel = "topaz-generative",
        scale: gen.EnhanceScale = "2x",
        prompt: Annotated[Optional[str], Field(max_length=500)] = None,
        creativity: Weight = 0.5,
        wait_for_completion: Wait = False,
    ) -> dict:
        """
        Upscale and enhance an image.

        Models: topaz-generative (default), topaz, bloom. Scale 1x to 8x.
        """
        request = gen.EnhanceRequest(
            image_url=image_url,
            model=model,
            scale=scale,
            prompt=prompt,
            creativity=creativity,
            wait_for_completion=wait_for_completion,
        )
        return await tools.generate(gateway, "enhance", request)

    logger.info(f"Registered {len(tools.TOOL_NAMES)} Krea tools on {SERVICE_NAME}")
    return mcp
