"""Static tables mapping friendly model names to Krea endpoint slugs.

Each generator (``flux``, ``kling``, ...) belongs to a family that fixes the
URL prefix and the default wait budget. A model name missing from a table
resolves to that table's ``default_model``; callers going through the MCP
tools never hit this because the tool schemas only accept listed models.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from krea_mcp.core.config import DEFAULT_WAIT_TIMEOUT_MS, VIDEO_WAIT_TIMEOUT_MS

logger = logging.getLogger(__name__)


class Family(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    ENHANCE = "enhance"
    STYLE_TRAINING = "style_training"


FAMILY_PATHS: Dict[Family, str] = {
    Family.IMAGE: "/v1/image/{slug}",
    Family.VIDEO: "/v1/video/{slug}",
    Family.ENHANCE: "/v1/image-enhance/{slug}",
    Family.STYLE_TRAINING: "/v1/styles/train",
}

FAMILY_WAIT_TIMEOUT_MS: Dict[Family, int] = {
    Family.IMAGE: DEFAULT_WAIT_TIMEOUT_MS,
    Family.VIDEO: VIDEO_WAIT_TIMEOUT_MS,
    Family.ENHANCE: DEFAULT_WAIT_TIMEOUT_MS,
    Family.STYLE_TRAINING: DEFAULT_WAIT_TIMEOUT_MS,
}


@dataclass(frozen=True)
class EndpointTable:
    family: Family
    default_model: str
    slugs: Dict[str, str] = field(default_factory=dict)

    def slug_for(self, model: Optional[str]) -> str:
        if model is None:
            return self.slugs[self.default_model]
        slug = self.slugs.get(model)
        if slug is None:
            logger.warning(
                f"Unknown model {model!r} for {self.family.value} endpoint, "
                f"using default {self.default_model!r}"
            )
            return self.slugs[self.default_model]
        return slug


ENDPOINTS: Dict[str, EndpointTable] = {
    # Image
    "flux": EndpointTable(
        Family.IMAGE,
        "flux",
        {
            "flux": "flux",
            "flux-1.1-pro": "flux-11-pro",
            "flux-1.1-pro-ultra": "flux-11-pro-ultra",
        },
    ),
    "flux_kontext": EndpointTable(
        Family.IMAGE, "flux-kontext", {"flux-kontext": "flux-kontext"}
    ),
    "nano_banana": EndpointTable(
        Family.IMAGE,
        "nano-banana-pro",
        {"nano-banana": "nano-banana", "nano-banana-pro": "nano-banana-pro"},
    ),
    "ideogram": EndpointTable(
        Family.IMAGE,
        "ideogram-3.0",
        {"ideogram-2.0a-turbo": "ideogram-20a-turbo", "ideogram-3.0": "ideogram-30"},
    ),
    "imagen": EndpointTable(
        Family.IMAGE,
        "imagen-4",
        {
            "imagen-3": "imagen-3",
            "imagen-4": "imagen-4",
            "imagen-4-fast": "imagen-4-fast",
            "imagen-4-ultra": "imagen-4-ultra",
        },
    ),
    "seedream": EndpointTable(
        Family.IMAGE,
        "seedream-4",
        {"seedream-3": "seedream-3", "seedream-4": "seedream-4"},
    ),
    "runway_image": EndpointTable(
        Family.IMAGE, "runway-gen-4", {"runway-gen-4": "runway-gen-4"}
    ),
    "chatgpt_image": EndpointTable(
        Family.IMAGE, "chatgpt-image", {"chatgpt-image": "chatgpt-image"}
    ),
    "edit": EndpointTable(
        Family.IMAGE,
        "nano-banana-pro",
        {
            "seededit": "seededit",
            "flux-kontext": "flux-kontext",
            "nano-banana-pro": "nano-banana-pro",
        },
    ),
    # Video
    "kling": EndpointTable(
        Family.VIDEO,
        "kling-2.5",
        {
            "kling-1.0": "kling-10",
            "kling-1.5": "kling-15",
            "kling-1.6": "kling-16",
            "kling-2.0": "kling-20",
            "kling-2.1": "kling-21",
            "kling-2.5": "kling-25",
        },
    ),
    "hailuo": EndpointTable(
        Family.VIDEO,
        "hailuo-2.3",
        {
            "hailuo": "hailuo",
            "hailuo-02": "hailuo-02",
            "hailuo-2.3": "hailuo-23",
            "hailuo-2.3-fast": "hailuo-23-fast",
        },
    ),
    "veo": EndpointTable(
        Family.VIDEO,
        "veo-3",
        {
            "veo-2": "veo-2",
            "veo-3": "veo-3",
            "veo-3-fast": "veo-3-fast",
            "veo-3.1": "veo-31",
            "veo-3.1-fast": "veo-31-fast",
        },
    ),
    "wan": EndpointTable(
        Family.VIDEO,
        "wan-2.5",
        {"wan-2.1": "wan-21", "wan-2.2": "wan-22", "wan-2.5": "wan-25"},
    ),
    "pika": EndpointTable(Family.VIDEO, "pika-2.2", {"pika-2.2": "pika-22"}),
    "seedance": EndpointTable(
        Family.VIDEO,
        "seedance-pro",
        {
            "seedance-lite": "seedance-lite",
            "seedance-pro": "seedance-pro",
            "seedance-pro-fast": "seedance-pro-fast",
        },
    ),
    "runway_video": EndpointTable(
        Family.VIDEO,
        "runway-gen-4",
        {
            "runway-gen-3": "runway-gen-3",
            "runway-gen-4": "runway-gen-4",
            "runway-aleph": "runway-aleph",
        },
    ),
    "ray": EndpointTable(Family.VIDEO, "ray-2", {"ray-2": "ray-2"}),
    # Enhance
    "enhance": EndpointTable(
        Family.ENHANCE,
        "topaz-generative",
        {"topaz-generative": "topaz-generative", "topaz": "topaz", "bloom": "bloom"},
    ),
}


def resolve(generator: str, model: Optional[str] = None) -> tuple[Family, str]:
    """Return ``(family, slug)`` for a generator key and optional model name."""
    table = ENDPOINTS.get(generator)
    if table is None:
        raise KeyError(f"unknown generator: {generator}")
    return table.family, table.slug_for(model)


def submit_path(family: Family, slug: Optional[str] = None) -> str:
    template = FAMILY_PATHS[family]
    if "{slug}" in template:
        if not slug:
            raise ValueError(f"{family.value} submissions need an endpoint slug")
        return template.format(slug=slug)
    return template
