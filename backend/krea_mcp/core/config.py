import os
from typing import List, Optional

from pydantic import BaseModel, Field

KREA_API_KEY = os.environ.get("KREA_API_KEY", "")
KREA_API_BASE_URL = os.environ.get("KREA_API_BASE_URL", "https://api.krea.ai").rstrip("/")
KREA_WEBHOOK_URL = os.environ.get("KREA_WEBHOOK_URL") or None
REQUEST_TIMEOUT_MS = int(os.environ.get("REQUEST_TIMEOUT_MS", "120000"))

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "3000"))
CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

DEFAULT_WAIT_TIMEOUT_MS = int(os.environ.get("DEFAULT_WAIT_TIMEOUT_MS", "120000"))
VIDEO_WAIT_TIMEOUT_MS = int(os.environ.get("VIDEO_WAIT_TIMEOUT_MS", "300000"))
DEFAULT_POLL_INTERVAL_MS = int(os.environ.get("DEFAULT_POLL_INTERVAL_MS", "2000"))

SERVICE_NAME = "krea-ai-mcp-server"
SERVICE_VERSION = "1.0.0"
SERVICE_DESCRIPTION = "MCP Server for Krea AI - Generate images and videos with 30+ AI models"


class GatewaySettings(BaseModel):
    api_key: str = Field(..., min_length=1)
    base_url: str = "https://api.krea.ai"
    timeout_ms: int = Field(120000, gt=0)
    webhook_url: Optional[str] = None


def load_gateway_settings() -> GatewaySettings:
    return GatewaySettings(
        api_key=KREA_API_KEY,
        base_url=KREA_API_BASE_URL,
        timeout_ms=REQUEST_TIMEOUT_MS,
        webhook_url=KREA_WEBHOOK_URL,
    )


def cors_origins() -> List[str]:
    origins = [origin.strip() for origin in CORS_ORIGINS.split(",") if origin.strip()]
    return origins or ["*"]
