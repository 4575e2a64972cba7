from typing import Any, Dict

from fastapi import APIRouter

from krea_mcp.core.config import SERVICE_NAME, SERVICE_VERSION
from krea_mcp.utils.time import utc_now

router = APIRouter()


@router.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "timestamp": utc_now(),
    }
