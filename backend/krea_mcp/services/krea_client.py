import asyncio
import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from krea_mcp.core.config import DEFAULT_POLL_INTERVAL_MS, GatewaySettings
from krea_mcp.schemas.assets import Asset
from krea_mcp.schemas.common import Page
from krea_mcp.schemas.jobs import Job
from krea_mcp.schemas.result import ErrorKind, OperationResult
from krea_mcp.schemas.styles import ShareLink, Style
from krea_mcp.services import endpoints
from krea_mcp.services.jobs import wait_for_terminal

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

CONNECT_TIMEOUT = 10.0


def build_auth_headers(api_key: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


def drop_unset(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if params is None:
        return None
    return {key: value for key, value in params.items() if value is not None}


def without_all(value: Optional[str]) -> Optional[str]:
    """``"all"`` is a local sentinel for "no filter"; Krea does not know it."""
    return None if value == "all" else value


def extract_error_message(response: httpx.Response) -> tuple[str, Optional[Dict[str, Any]]]:
    fallback = f"Request failed with status {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return (text or fallback), None
    if not isinstance(body, dict):
        return fallback, None
    message = body.get("message")
    error = body.get("error")
    if not message and isinstance(error, dict):
        message = error.get("message")
    if not message and isinstance(error, str):
        message = error
    if not message and isinstance(body.get("detail"), str):
        message = body["detail"]
    return (message or fallback), body


async def request_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    headers: Dict[str, str],
    params: Optional[Dict[str, Any]] = None,
    json_body: Optional[Dict[str, Any]] = None,
    deadline: Optional[float] = None,
) -> OperationResult[Any]:
    """Send one request and normalize the outcome.

    ``deadline`` bounds the whole call in seconds; httpx timeouts only bound
    each phase, so a slowly trickling body could otherwise outlive it.
    """
    try:
        response = await asyncio.wait_for(
            client.request(
                method,
                url,
                headers=headers,
                params=drop_unset(params),
                json=json_body,
            ),
            deadline,
        )
    except (httpx.TimeoutException, asyncio.TimeoutError):
        logger.warning(f"{method} {url} timed out")
        return OperationResult.fail(ErrorKind.TIMEOUT, "Request timed out")
    except httpx.HTTPError as exc:
        logger.warning(f"{method} {url} failed: {exc}")
        return OperationResult.fail(ErrorKind.NETWORK_ERROR, str(exc) or type(exc).__name__)

    if response.status_code >= 400:
        message, details = extract_error_message(response)
        kind = ErrorKind.NOT_FOUND if response.status_code == 404 else ErrorKind.REMOTE_HTTP_ERROR
        logger.info(f"{method} {url} -> {response.status_code}: {message}")
        return OperationResult.fail(
            kind, message, status_code=response.status_code, details=details
        )

    if not response.content:
        return OperationResult.ok({})
    try:
        return OperationResult.ok(response.json())
    except ValueError:
        return OperationResult.fail(
            ErrorKind.INVALID_RESPONSE,
            f"Krea returned a non-JSON body for {method} {url}",
            status_code=response.status_code,
        )


def parse_as(result: OperationResult[Any], model: Type[ModelT]) -> OperationResult[ModelT]:
    if not result.success:
        return result
    try:
        return OperationResult.ok(model.model_validate(result.value))
    except ValidationError as exc:
        return OperationResult.fail(
            ErrorKind.INVALID_RESPONSE,
            f"Unexpected response shape for {model.__name__}: {exc.error_count()} validation errors",
            details={"errors": exc.errors(include_url=False, include_context=False)},
        )


def flag(result: OperationResult[Any], key: str, missing_ok: bool = False) -> OperationResult[bool]:
    """Reduce an acknowledgement body such as ``{"deleted": true}`` to a bool.

    With ``missing_ok`` a 404 counts as done: the resource is already gone.
    """
    if not result.success:
        if missing_ok and result.error.kind == ErrorKind.NOT_FOUND:
            return OperationResult.ok(True)
        return result
    body = result.value
    if isinstance(body, dict) and key in body:
        return OperationResult.ok(bool(body[key]))
    return OperationResult.ok(True)


class KreaGateway:
    """Async client for the Krea REST API.

    Every call returns an ``OperationResult``; nothing is retried. A fresh
    ``httpx.AsyncClient`` is opened per call so no connection outlives a
    request (in particular, none is held across a poll sleep).
    """

    def __init__(
        self,
        settings: GatewaySettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self.webhook_url = settings.webhook_url
        seconds = settings.timeout_ms / 1000.0
        self.deadline = seconds
        self.timeout = httpx.Timeout(seconds, connect=min(CONNECT_TIMEOUT, seconds))
        self._headers = build_auth_headers(settings.api_key)
        self._transport = transport

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> OperationResult[Any]:
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            return await request_json(
                client,
                method,
                f"{self.base_url}{path}",
                self._headers,
                params=params,
                json_body=json_body,
                deadline=self.deadline,
            )

    def _with_webhook(self, params: Dict[str, Any]) -> Dict[str, Any]:
        body = dict(params)
        if self.webhook_url:
            body["webhook_url"] = self.webhook_url
        return body

    # Jobs

    async def submit(
        self,
        family: endpoints.Family,
        params: Dict[str, Any],
        slug: Optional[str] = None,
    ) -> OperationResult[Job]:
        path = endpoints.submit_path(family, slug)
        response = await self.request("POST", path, json_body=self._with_webhook(params))
        result = parse_as(response, Job)
        if result.success:
            logger.info(f"Submitted {family.value} job {result.value.id} to {path}")
        return result

    async def get_job(self, job_id: str) -> OperationResult[Job]:
        return parse_as(await self.request("GET", f"/v1/jobs/{job_id}"), Job)

    async def delete_job(self, job_id: str, missing_ok: bool = True) -> OperationResult[bool]:
        return flag(
            await self.request("DELETE", f"/v1/jobs/{job_id}"), "deleted", missing_ok
        )

    async def list_jobs(
        self,
        status: Optional[str] = None,
        type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> OperationResult[Page[Job]]:
        params = {
            "limit": limit,
            "offset": offset,
            "status": without_all(status),
            "type": without_all(type),
        }
        return parse_as(await self.request("GET", "/v1/jobs", params=params), Page[Job])

    async def wait_for_job(
        self,
        job_id: str,
        timeout_ms: Optional[int] = None,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
    ) -> OperationResult[Job]:
        if timeout_ms is None:
            timeout_ms = endpoints.FAMILY_WAIT_TIMEOUT_MS[endpoints.Family.IMAGE]
        return await wait_for_terminal(
            self.get_job, job_id, timeout_ms=timeout_ms, poll_interval_ms=poll_interval_ms
        )

    async def generate(
        self,
        generator: str,
        params: Dict[str, Any],
        wait: bool = False,
        timeout_ms: Optional[int] = None,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
    ) -> OperationResult[Job]:
        """Submit to the endpoint for ``generator`` and optionally wait.

        The endpoint slug comes from ``params["model"]`` via the static tables.
        Without an explicit ``timeout_ms`` the wait budget is the family
        default (longer for video).

        An unknown ``generator`` key is a programming error, not a remote
        failure: it raises ``KeyError`` before anything is sent.
        """
        family, slug = endpoints.resolve(generator, params.get("model"))
        submitted = await self.submit(family, params, slug)
        if not submitted.success or not wait:
            return submitted
        if timeout_ms is None:
            timeout_ms = endpoints.FAMILY_WAIT_TIMEOUT_MS[family]
        return await self.wait_for_job(
            submitted.value.id, timeout_ms=timeout_ms, poll_interval_ms=poll_interval_ms
        )

    # Assets

    async def list_assets(
        self,
        type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> OperationResult[Page[Asset]]:
        params = {"limit": limit, "offset": offset, "type": without_all(type)}
        return parse_as(await self.request("GET", "/v1/assets", params=params), Page[Asset])

    async def upload_asset(self, url: str, name: Optional[str] = None) -> OperationResult[Asset]:
        body = drop_unset({"url": url, "name": name})
        return parse_as(await self.request("POST", "/v1/assets", json_body=body), Asset)

    async def get_asset(self, asset_id: str) -> OperationResult[Asset]:
        return parse_as(await self.request("GET", f"/v1/assets/{asset_id}"), Asset)

    async def delete_asset(self, asset_id: str, missing_ok: bool = True) -> OperationResult[bool]:
        return flag(
            await self.request("DELETE", f"/v1/assets/{asset_id}"), "deleted", missing_ok
        )

    # Styles

    async def train_style(self, params: Dict[str, Any]) -> OperationResult[Job]:
        return await self.submit(endpoints.Family.STYLE_TRAINING, params)

    async def search_styles(
        self,
        query: Optional[str] = None,
        type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> OperationResult[Page[Style]]:
        params = {"q": query, "type": without_all(type), "limit": limit, "offset": offset}
        return parse_as(await self.request("GET", "/v1/styles", params=params), Page[Style])

    async def get_style(self, style_id: str) -> OperationResult[Style]:
        return parse_as(await self.request("GET", f"/v1/styles/{style_id}"), Style)

    async def update_style(
        self,
        style_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> OperationResult[Style]:
        body = drop_unset({"name": name, "description": description})
        return parse_as(
            await self.request("PATCH", f"/v1/styles/{style_id}", json_body=body), Style
        )

    async def get_style_share_link(self, style_id: str) -> OperationResult[ShareLink]:
        return parse_as(await self.request("GET", f"/v1/styles/{style_id}/share"), ShareLink)

    async def share_style_with_workspace(self, style_id: str) -> OperationResult[bool]:
        return flag(await self.request("POST", f"/v1/styles/{style_id}/share"), "shared")

    async def remove_style_from_workspace(self, style_id: str) -> OperationResult[bool]:
        return flag(await self.request("DELETE", f"/v1/styles/{style_id}/share"), "removed")
