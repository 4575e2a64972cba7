from typing import Any, Dict, Literal, Optional

from krea_mcp.schemas.common import RemoteModel


class Asset(RemoteModel):
    id: str
    url: str
    type: Literal["image", "video"]
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[float] = None
    format: Optional[str] = None
    size: Optional[int] = None
    created_at: str
    metadata: Optional[Dict[str, Any]] = None
