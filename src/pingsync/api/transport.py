"""Pingdom HTTP transport.

Thin async wrapper over httpx: bearer-token auth, JSON bodies, decoded JSON
responses. Every failure surfaces as RemoteOperationError.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from pingsync.core.exceptions import RemoteOperationError
from pingsync.core.settings import settings

logger = logging.getLogger(__name__)


class PingdomTransport:
    """Async JSON client for the Pingdom API.

    Usage:
        async with PingdomTransport(token) as transport:
            body = await transport.get("checks", params={"include_tags": True})
    """

    def __init__(
        self,
        api_token: str,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            api_token: Pingdom API token (bearer)
            base_url: API root (default: settings.api_url)
            timeout: Request timeout in seconds (default: settings.request_timeout)
            transport: Optional httpx transport (tests inject httpx.MockTransport)
        """
        self.base_url = (base_url or settings.api_url).rstrip("/") + "/"
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {api_token}",
                "Accept": "application/json",
            },
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> PingdomTransport:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            RemoteOperationError: On transport errors and non-2xx responses
        """
        operation = f"{method} {path}"
        logger.debug(f"Pingdom request: {operation} params={params}")

        try:
            response = await self._client.request(method, path, params=params, json=json)
        except httpx.HTTPError as e:
            raise RemoteOperationError(operation, str(e) or type(e).__name__) from e

        if response.is_error:
            body = _decode(response)
            message = _error_message(body) or response.reason_phrase
            raise RemoteOperationError(operation, message, status_code=response.status_code, body=body)

        return _decode(response) or {}

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("DELETE", path, params=params)


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(body: Any) -> str | None:
    """Pingdom errors look like {"error": {"statuscode": 400, "errormessage": "..."}}."""
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            return error.get("errormessage") or error.get("statusdesc")
        if isinstance(error, str):
            return error
    if isinstance(body, str) and body:
        return body[:200]
    return None
