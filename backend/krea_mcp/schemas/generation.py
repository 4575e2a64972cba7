from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

AspectRatio = Literal["1:1", "16:9", "9:16", "4:3", "3:4", "3:2", "2:3", "21:9", "9:21"]
VideoAspectRatio = Literal["16:9", "9:16", "1:1"]
VideoDuration = Literal["5s", "6s", "8s", "10s", "12s"]
VideoResolution = Literal["720p", "1080p"]

FluxModel = Literal["flux", "flux-1.1-pro", "flux-1.1-pro-ultra"]
NanoBananaModel = Literal["nano-banana", "nano-banana-pro"]
IdeogramModel = Literal["ideogram-2.0a-turbo", "ideogram-3.0"]
ImagenModel = Literal["imagen-3", "imagen-4", "imagen-4-fast", "imagen-4-ultra"]
SeedreamModel = Literal["seedream-3", "seedream-4"]
EditModel = Literal["seededit", "flux-kontext", "nano-banana-pro"]

KlingModel = Literal["kling-1.0", "kling-1.5", "kling-1.6", "kling-2.0", "kling-2.1", "kling-2.5"]
HailuoModel = Literal["hailuo", "hailuo-02", "hailuo-2.3", "hailuo-2.3-fast"]
VeoModel = Literal["veo-2", "veo-3", "veo-3-fast", "veo-3.1", "veo-3.1-fast"]
WanModel = Literal["wan-2.1", "wan-2.2", "wan-2.5"]
SeedanceModel = Literal["seedance-lite", "seedance-pro", "seedance-pro-fast"]
RunwayVideoModel = Literal["runway-gen-3", "runway-gen-4", "runway-aleph"]

EnhanceModel = Literal["topaz-generative", "topaz", "bloom"]
EnhanceScale = Literal["1x", "2x", "4x", "8x"]


class GenerationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    wait_for_completion: bool = False

    def to_payload(self) -> Dict[str, Any]:
        """Body forwarded to Krea; ``wait_for_completion`` stays local."""
        return self.model_dump(exclude_none=True, exclude={"wait_for_completion"})


class ImageRequest(GenerationRequest):
    prompt: str = Field(..., min_length=1, max_length=2000)
    negative_prompt: Optional[str] = Field(None, max_length=1000)
    aspect_ratio: AspectRatio = "1:1"
    style_id: Optional[str] = None
    style_weight: Optional[float] = Field(0.8, ge=0, le=1)
    image_url: Optional[str] = None
    image_weight: Optional[float] = Field(0.5, ge=0, le=1)
    seed: Optional[int] = None
    num_images: int = Field(1, ge=1, le=4)


class FluxRequest(ImageRequest):
    model: FluxModel = "flux"


class FluxKontextRequest(ImageRequest):
    edit_prompt: Optional[str] = None
    mask_url: Optional[str] = None


class NanoBananaRequest(ImageRequest):
    model: NanoBananaModel = "nano-banana-pro"


class IdeogramRequest(ImageRequest):
    model: IdeogramModel = "ideogram-3.0"
    magic_prompt: bool = True


class ImagenRequest(ImageRequest):
    model: ImagenModel = "imagen-4"


class SeedreamRequest(ImageRequest):
    model: SeedreamModel = "seedream-4"


class RunwayImageRequest(ImageRequest):
    pass


class ChatGPTImageRequest(ImageRequest):
    edit_mode: bool = False


class EditImageRequest(GenerationRequest):
    image_url: str
    prompt: str = Field(..., min_length=1, max_length=2000)
    mask_url: Optional[str] = None
    model: EditModel = "nano-banana-pro"


class VideoRequest(GenerationRequest):
    prompt: str = Field(..., min_length=1, max_length=2000)
    negative_prompt: Optional[str] = Field(None, max_length=1000)
    aspect_ratio: VideoAspectRatio = "16:9"
    duration: VideoDuration = "5s"
    resolution: VideoResolution = "1080p"
    start_image_url: Optional[str] = None
    end_image_url: Optional[str] = None
    seed: Optional[int] = None


class KlingRequest(VideoRequest):
    model: KlingModel = "kling-2.5"
    motion_intensity: Optional[float] = Field(0.5, ge=0, le=1)


class HailuoRequest(VideoRequest):
    model: HailuoModel = "hailuo-2.3"


class VeoRequest(VideoRequest):
    model: VeoModel = "veo-3"
    generate_audio: bool = True


class WanRequest(VideoRequest):
    model: WanModel = "wan-2.5"


class PikaRequest(VideoRequest):
    pass


class SeedanceRequest(VideoRequest):
    model: SeedanceModel = "seedance-pro"


class RunwayVideoRequest(VideoRequest):
    model: RunwayVideoModel = "runway-gen-4"


class RayRequest(VideoRequest):
    pass


class EnhanceRequest(GenerationRequest):
    image_url: str
    model: EnhanceModel = "topaz-generative"
    scale: EnhanceScale = "2x"
    prompt: Optional[str] = Field(None, max_length=500)
    creativity: Optional[float] = Field(0.5, ge=0, le=1)


class TrainStyleRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=100)
    images: List[str] = Field(..., min_length=3, max_length=20)
    description: Optional[str] = Field(None, max_length=500)
    trigger_word: Optional[str] = None
