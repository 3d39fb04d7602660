from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from .errors import ProviderRateLimited, ProviderRequestError


@dataclass
class BaseHttpClient:
    """
    Provider-agnostic async HTTP client wrapper.

    - Uses a single underlying httpx.AsyncClient for connection pooling.
    - Provides consistent error handling.
    - Error messages carry the request path only; query strings may hold credentials.
    """

    base_url: str
    timeout_s: float = 30.0
    connect_timeout_s: float = 10.0
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers=dict(self.headers),
            transport=self.transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> BaseHttpClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request_json_value(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Perform an HTTP request and return the parsed JSON body (object or array).
        Raises ProviderRequestError (including ProviderRateLimited) on transport issues / non-2xx.
        """
        url = path.lstrip("/")
        try:
            resp = await self._client.request(
                method=method,
                url=url,
                params=params,
                headers=headers,
            )
        except (httpx.TimeoutException, httpx.NetworkError) as e:
            raise ProviderRequestError(f"{type(e).__name__} for {method} /{url}") from e

        if resp.status_code == 429:
            raise ProviderRateLimited(
                "Provider rate limited the request (HTTP 429).", status_code=429
            )

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderRequestError(
                f"HTTP {resp.status_code} for {method} /{url}",
                status_code=resp.status_code,
            ) from e

        try:
            return resp.json()
        except ValueError as e:
            raise ProviderRequestError(
                "Response was not valid JSON.", status_code=resp.status_code
            ) from e

    async def get_json_value(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self.request_json_value("GET", path, params=params, headers=headers)
