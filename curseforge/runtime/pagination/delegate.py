"""Pagination delegate: binds one endpoint query and owns its cursor state.

A delegate knows how to fetch "the next page" of one query and remembers
where it is. It does not buffer records and does not decide when the
sequence ends; that is the job of ``PaginatedStream``.
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from time import perf_counter
from typing import Any, Generic, TypeVar

from ...config import API_PAGINATION_RESULTS_LIMIT, DEFAULT_PAGE_SIZE
from ...core.enums import ViolationPolicy
from ...core.exceptions import FetchError, ProtocolViolationError, ProtocolViolationWarning
from ...models.core import Pagination
from ..rest.runner import RestEndpointSpec, RestRunner
from .telemetry import log_page_error, log_page_fetched, log_pagination_violation

T = TypeVar("T")


class PaginationDelegate(Generic[T]):
    """Cursor over one paginated endpoint with fixed parameters.

    The same class serves every paginated endpoint: the endpoint spec
    supplies the path, the item type and the request method, ``params``
    supplies the fixed (non-cursor) parameters.

    Cursor state (``current_offset()`` and the last ``Pagination``) changes
    only after a page was fetched, decoded and checked successfully, or
    through an explicit ``set_offset``.
    """

    def __init__(
        self,
        runner: RestRunner,
        spec: RestEndpointSpec,
        params: Mapping[str, Any] | None = None,
        *,
        offset: int | None = None,
        page_size: int | None = None,
        limit: int = API_PAGINATION_RESULTS_LIMIT,
        violation_policy: ViolationPolicy | None = None,
    ) -> None:
        """Initialize pagination delegate.

        Args:
            runner: Runner used to fetch pages
            spec: Paginated endpoint definition
            params: Fixed parameters sent with every page request
            offset: Starting offset (default 0)
            page_size: Requested page size (None = server default)
            limit: Global cap on retrievable results
            violation_policy: Reaction to inconsistent descriptors; derived
                from the decoder's compatibility mode when omitted
        """
        if not spec.paginated:
            raise ValueError(f"Endpoint {spec.id} is not paginated")
        if offset is not None and offset < 0:
            raise ValueError("offset must be None or a non-negative integer")
        if page_size is not None and page_size <= 0:
            raise ValueError("page_size must be None or a positive integer")
        if limit < 0:
            raise ValueError("limit must be a non-negative integer")

        self._runner = runner
        self._spec = spec
        self._params = dict(params or {})
        self._offset = offset or 0
        self._page_size = page_size
        self._limit = limit
        self._pagination: Pagination | None = None
        self._violation_policy = violation_policy or ViolationPolicy.for_mode(runner.decoder.mode)

    @property
    def endpoint_id(self) -> str:
        return self._spec.id

    @property
    def item_type(self) -> Any:
        return self._spec.item_type

    @property
    def params(self) -> dict[str, Any]:
        return dict(self._params)

    @property
    def page_size(self) -> int | None:
        return self._page_size

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def violation_policy(self) -> ViolationPolicy:
        return self._violation_policy

    @property
    def pagination(self) -> Pagination | None:
        """Descriptor of the last successful fetch, if any."""
        return self._pagination

    def current_offset(self) -> int:
        return self._offset

    def set_offset(self, value: int) -> None:
        if value < 0:
            raise ValueError("offset must be a non-negative integer")
        self._offset = value

    def known_total(self) -> int | None:
        """Reported total capped at the global limit, None before the first fetch."""
        if self._pagination is None:
            return None
        return min(self._limit, self._pagination.total_count)

    async def fetch_next(self) -> list[T]:
        """Fetch the page starting at the current offset.

        The offset is not advanced here; the caller moves it once the
        records have been accepted.

        Raises:
            FetchError: Transport, status, decode or protocol failure. Cursor
                state is left untouched.
        """
        offset = self._offset
        page_size = self._request_page_size(offset)
        start = perf_counter()
        try:
            page = await self._runner.fetch_page(
                spec=self._spec,
                params=self._params,
                offset=offset,
                page_size=page_size,
            )
            records = list(page.data)
            self._check_descriptor(page.pagination, offset, len(records))
        except FetchError as e:
            log_page_error(
                endpoint_id=self._spec.id,
                offset=offset,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        self._pagination = page.pagination
        log_page_fetched(
            endpoint_id=self._spec.id,
            offset=offset,
            page_size=page_size,
            result_count=page.pagination.result_count,
            total_count=page.pagination.total_count,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return records

    def _request_page_size(self, offset: int) -> int | None:
        # The remote rejects requests reaching past the global cap
        remaining = self._limit - offset
        if remaining <= 0:
            return self._page_size
        if self._page_size is None:
            return remaining if remaining < DEFAULT_PAGE_SIZE else None
        return min(self._page_size, remaining)

    def _check_descriptor(self, pagination: Pagination, offset: int, received: int) -> None:
        if pagination.index != offset:
            self._violation("index", expected=offset, reported=pagination.index)
        if pagination.result_count != received:
            self._violation("resultCount", expected=received, reported=pagination.result_count)

    def _violation(self, field: str, *, expected: int, reported: int) -> None:
        log_pagination_violation(
            endpoint_id=self._spec.id,
            field=field,
            expected=expected,
            reported=reported,
        )
        message = (
            f"{self._spec.id}: pagination {field} is {reported}, expected {expected}"
        )
        if self._violation_policy == ViolationPolicy.RAISE:
            raise ProtocolViolationError(message, field=field, expected=expected, reported=reported)
        warnings.warn(message, ProtocolViolationWarning, stacklevel=4)
