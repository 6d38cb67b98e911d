"""
apps.stripe_demo.fetch_client
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Small async HTTP client for the admin API, built on ``httpx.AsyncClient``.

Every failure, transport or HTTP status, surfaces as :class:`FetchError` so
callers handle one exception type.  The server's error envelope message, when
present, is exposed as :attr:`FetchError.server_message`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

logger = structlog.get_logger(__name__)


class FetchError(Exception):
    """A request to the admin API failed."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.data = data

    @property
    def server_message(self) -> str | None:
        """``error.message`` from the response body, if the server sent one."""
        if not isinstance(self.data, dict):
            return None
        error = self.data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return None


@dataclass(frozen=True)
class FetchResponse:
    status_code: int
    data: Any


class FetchClient:
    """
    Thin JSON wrapper over ``httpx.AsyncClient``.

    Example::

        async with FetchClient("https://cms.example.com", auth=("admin", "pw")) as client:
            response = await client.get("/stripe-demo/config/")
            response.data  # {"stripeKey": "sk_test_..."}
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        auth: httpx.Auth | tuple[str, str] | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = 10.0,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            auth=auth,
            headers={"Accept": "application/json", **(headers or {})},
            transport=transport,
            timeout=timeout,
        )

    async def get(self, path: str) -> FetchResponse:
        return await self._request("GET", path)

    async def put(self, path: str, json: Any) -> FetchResponse:
        return await self._request("PUT", path, json=json)

    async def _request(self, method: str, path: str, json: Any = None) -> FetchResponse:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as exc:
            logger.warning("fetch_transport_error", method=method, path=path, error=str(exc))
            raise FetchError(f"{method} {path} failed: {exc}") from exc

        data = _decode(response)
        if response.is_error:
            logger.warning("fetch_http_error", method=method, path=path, status=response.status_code)
            raise FetchError(
                f"{method} {path} failed with status {response.status_code}",
                status_code=response.status_code,
                data=data,
            )
        return FetchResponse(status_code=response.status_code, data=data)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> FetchClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
