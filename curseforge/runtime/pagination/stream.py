"""Paginated stream: flattens page fetches into one lazy async sequence.

Architecture:
    ``PaginatedStream`` drives a ``PaginationDelegate`` page by page and hands
    out one record per ``__anext__``. Records are yielded in exactly the order
    the remote returned them; nothing is reordered, deduplicated or fetched
    ahead of time.

State Machine:
    NOT_STARTED -> FETCHING -> BUFFERED <-> FETCHING -> EXHAUSTED | FAILED

    - EXHAUSTED: the global cap or the reported total was reached, or a page
      came back empty. Further calls end immediately without fetching.
    - FAILED: a fetch raised. Further calls re-raise the same error without
      fetching. To resume, build a new stream at ``offset``.

Concurrency:
    One consumer at a time. At most one page request is in flight and it is
    the only suspension point, so cancelling simply means not awaiting the
    next item; cursor state only moves after a fetch fully succeeds.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Generic, TypeVar

from ...core.exceptions import FetchError
from ...models.core import Pagination
from .delegate import PaginationDelegate
from .telemetry import log_stream_exhausted

T = TypeVar("T")


class StreamState(str, Enum):
    NOT_STARTED = "not_started"
    FETCHING = "fetching"
    BUFFERED = "buffered"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class PaginatedStream(Generic[T]):
    """Async iterator over every record of a paginated query.

    Example:
        async for project in client.search_projects_iter(SearchParams(game_id=432)):
            print(project.name)
    """

    def __init__(self, delegate: PaginationDelegate[T], limit: int | None = None) -> None:
        """Initialize paginated stream.

        Args:
            delegate: Delegate bound to the query to iterate
            limit: Global cap on retrievable results (default: the delegate's)
        """
        if limit is not None and limit < 0:
            raise ValueError("limit must be None or a non-negative integer")
        self._delegate = delegate
        self._limit = delegate.limit if limit is None else limit
        self._buffer: deque[T] = deque()
        self._state = StreamState.NOT_STARTED
        self._error: FetchError | None = None
        self._pages_fetched = 0

    @property
    def delegate(self) -> PaginationDelegate[T]:
        return self._delegate

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def error(self) -> FetchError | None:
        return self._error

    @property
    def pagination(self) -> Pagination | None:
        return self._delegate.pagination

    @property
    def offset(self) -> int:
        """Offset of the next page request."""
        return self._delegate.current_offset()

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def buffered(self) -> int:
        return len(self._buffer)

    def size_hint(self) -> tuple[int, int | None]:
        """Return lower and upper bounds on the number of results.

        The upper bound is None until a page has been fetched, then the
        reported total capped at ``limit``. It is an estimate of the query
        size, not of the records still to come.
        """
        total = self._delegate.known_total()
        if total is None:
            return 0, None
        return 0, min(self._limit, total)

    def __aiter__(self) -> PaginatedStream[T]:
        return self

    async def __anext__(self) -> T:
        if self._buffer:
            return self._buffer.popleft()
        if self._state == StreamState.EXHAUSTED:
            raise StopAsyncIteration
        if self._state == StreamState.FAILED:
            assert self._error is not None
            raise self._error

        offset = self._delegate.current_offset()
        known_total = self._delegate.known_total()
        effective_limit = self._limit if known_total is None else min(self._limit, known_total)
        if offset >= effective_limit:
            self._exhaust()
            raise StopAsyncIteration

        previous = self._state
        self._state = StreamState.FETCHING
        try:
            records = await self._delegate.fetch_next()
        except FetchError as e:
            self._state = StreamState.FAILED
            self._error = e
            raise
        except BaseException:
            # Cancellation or a request-building error; the cursor never moved
            self._state = previous
            raise
        self._pages_fetched += 1

        reported = self._delegate.pagination.result_count if self._delegate.pagination else 0
        # Advance past every received record even if resultCount under-reports
        self._delegate.set_offset(offset + max(reported, len(records)))

        room = self._limit - offset
        if len(records) > room:
            records = records[:room]
        if not records:
            self._exhaust()
            raise StopAsyncIteration

        self._buffer.extend(records)
        self._state = StreamState.BUFFERED
        return self._buffer.popleft()

    async def next(self) -> T:
        """Return the next record; raises StopAsyncIteration at the end."""
        return await self.__anext__()

    async def collect(self) -> list[T]:
        """Consume the remaining stream into a list."""
        return [item async for item in self]

    def _exhaust(self) -> None:
        self._state = StreamState.EXHAUSTED
        log_stream_exhausted(
            endpoint_id=self._delegate.endpoint_id,
            offset=self._delegate.current_offset(),
            limit=self._limit,
            known_total=self._delegate.known_total(),
        )
