from typing import Any, Dict

from fastapi import APIRouter

from krea_mcp.core.config import SERVICE_DESCRIPTION, SERVICE_VERSION
from krea_mcp.mcp.tools import TOOL_NAMES

router = APIRouter()


@router.get("/")
async def info() -> Dict[str, Any]:
    return {
        "name": "Krea AI MCP Server",
        "version": SERVICE_VERSION,
        "description": SERVICE_DESCRIPTION,
        "endpoints": {"mcp": "/mcp", "health": "/health"},
        "documentation": "https://docs.krea.ai/api-reference/introduction",
        "tools": TOOL_NAMES,
    }
