"""REST transport: the single network boundary of the client."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT
from ...core.exceptions import TransportError
from .http_client import HTTPClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class RESTTransport:
    """Sends requests and hands back status and body untouched.

    Connection errors and timeouts surface as ``TransportError``; status
    codes are not interpreted here.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_body: Any = None,
    ) -> RawResponse:
        logger.debug(
            "http_request",
            extra={"method": method, "path": path, "params": dict(params or {})},
        )
        try:
            status, body = await self._http.request(method, path, params=params, json=json_body)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method} {path} failed: {type(e).__name__}: {e}") from e
        logger.debug(
            "http_response",
            extra={"method": method, "path": path, "status": status, "bytes": len(body)},
        )
        return RawResponse(status=status, body=body)

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> RawResponse:
        return await self.send("GET", path, params=params)

    async def post(self, path: str, json_body: Any = None) -> RawResponse:
        return await self.send("POST", path, json_body=json_body)

    async def close(self) -> None:
        await self._http.close()
