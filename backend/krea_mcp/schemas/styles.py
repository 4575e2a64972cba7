from typing import Literal, Optional

from krea_mcp.schemas.common import RemoteModel


class Style(RemoteModel):
    id: str
    name: str
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    type: Literal["preset", "custom", "shared"]
    status: Literal["ready", "training", "failed"]
    created_at: str
    updated_at: str


class ShareLink(RemoteModel):
    url: str
