"""
Shared fixtures for the Krea MCP test suite.

Provides: remote job payloads, a gateway wired to ``httpx.MockTransport``,
and a fake clock for driving the wait loop without real sleeps.
"""

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from krea_mcp.core.config import GatewaySettings
from krea_mcp.services.krea_client import KreaGateway

BASE_URL = "https://api.test.krea"


def job_payload(job_id: str = "job_1", status: str = "pending", **extra: Any) -> Dict[str, Any]:
    payload = {
        "id": job_id,
        "status": status,
        "type": "image",
        "createdAt": "2025-01-05T15:04:00Z",
        "updatedAt": "2025-01-05T15:04:00Z",
    }
    payload.update(extra)
    return payload


class FakeClock:
    """Monotonic clock whose ``sleep`` advances time instantly."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class RecordingHandler:
    """MockTransport handler that records requests and replays routed answers."""

    def __init__(self, routes: Dict[str, Callable[[httpx.Request], httpx.Response]]):
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = f"{request.method} {request.url.path}"
        if key not in self.routes:
            return httpx.Response(404, json={"message": f"no route for {key}"})
        return self.routes[key](request)

    def body(self, index: int = -1) -> Dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def settings() -> GatewaySettings:
    return GatewaySettings(api_key="test-key", base_url=BASE_URL, timeout_ms=5000)


@pytest.fixture
def make_gateway(settings: GatewaySettings):
    def _make(
        routes: Dict[str, Callable[[httpx.Request], httpx.Response]],
        webhook_url: Optional[str] = None,
    ):
        handler = RecordingHandler(routes)
        gateway_settings = settings.model_copy(update={"webhook_url": webhook_url})
        gateway = KreaGateway(gateway_settings, transport=httpx.MockTransport(handler))
        return gateway, handler

    return _make


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
