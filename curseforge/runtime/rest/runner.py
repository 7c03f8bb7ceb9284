"""REST request runner using endpoint specs and the response decoder."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ...core.exceptions import DecodeError, ResponseDecodeError, StatusError
from ...models.response import PaginatedDataResponse
from .decoder import ResponseDecoder
from .transport import RawResponse, RESTTransport

# Longest body excerpt quoted in a StatusError message
_BODY_EXCERPT = 200


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    # Type of ``data`` (single-value endpoints) or of one item (paginated ones)
    item_type: Any
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], Any] | None = None
    paginated: bool = False


class RestRunner:
    """Executes endpoint specs: one request, one decode, no retries.

    ``fetch_page`` is the page fetcher used by the pagination layer. It never
    holds cursor state; the offset and page size are passed on every call.
    """

    def __init__(self, transport: RESTTransport, decoder: ResponseDecoder) -> None:
        self._t = transport
        self._decoder = decoder

    @property
    def decoder(self) -> ResponseDecoder:
        return self._decoder

    async def run(self, *, spec: RestEndpointSpec, params: dict[str, Any]) -> Any:
        """Call a single-value endpoint and return the unwrapped ``data``."""
        response = await self._send(spec, params)
        try:
            return self._decoder.decode_data(response.body, spec.item_type)
        except DecodeError as e:
            raise ResponseDecodeError(f"{spec.id}: {e}", e) from e

    async def fetch_page(
        self,
        *,
        spec: RestEndpointSpec,
        params: Mapping[str, Any],
        offset: int,
        page_size: int | None = None,
    ) -> PaginatedDataResponse[Any]:
        """Fetch one page of a paginated endpoint starting at ``offset``."""
        if not spec.paginated:
            raise ValueError(f"Endpoint {spec.id} is not paginated")
        cursor: dict[str, Any] = {"index": offset}
        if page_size is not None:
            cursor["pageSize"] = page_size

        response = await self._send(spec, dict(params), cursor=cursor)
        try:
            return self._decoder.decode_page(response.body, spec.item_type)
        except DecodeError as e:
            raise ResponseDecodeError(f"{spec.id}: {e}", e) from e

    async def _send(
        self,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        *,
        cursor: dict[str, Any] | None = None,
    ) -> RawResponse:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None

        if spec.method.upper() == "GET":
            if cursor:
                query = {**(query or {}), **cursor}
            response = await self._t.send("GET", path, params=query)
        else:
            if cursor:
                body = {**(body or {}), **cursor}
            response = await self._t.send(spec.method.upper(), path, params=query, json_body=body)

        if not response.ok:
            excerpt = response.body[:_BODY_EXCERPT].decode("utf-8", errors="replace")
            raise StatusError(
                f"{spec.id}: HTTP {response.status}: {excerpt}",
                status_code=response.status,
                body=response.body,
            )
        return response
