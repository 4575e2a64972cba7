from typing import Any, Dict, List, Literal, Optional

from krea_mcp.schemas.assets import Asset
from krea_mcp.schemas.common import RemoteModel

JobStatus = Literal["pending", "processing", "completed", "failed", "cancelled"]
TERMINAL_STATUSES = frozenset({"completed", "failed", "cancelled"})


class JobResult(RemoteModel):
    assets: Optional[List[Asset]] = None
    url: Optional[str] = None
    urls: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class Job(RemoteModel):
    id: str
    status: JobStatus
    type: str
    created_at: str
    updated_at: str
    completed_at: Optional[str] = None
    result: Optional[JobResult] = None
    error: Optional[str] = None
    # Advisory only; rendered clamped to [0, 1].
    progress: Optional[float] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def output_urls(self) -> List[str]:
        if self.result is None:
            return []
        if self.result.urls:
            return list(self.result.urls)
        if self.result.url:
            return [self.result.url]
        if self.result.assets:
            return [asset.url for asset in self.result.assets]
        return []
