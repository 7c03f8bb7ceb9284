"""Unit tests for PaginatedStream.

Tests focus on ordering, termination, the global cap and failure handling.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from curseforge.core import (
    CompatibilityMode,
    ProtocolViolationError,
    ProtocolViolationWarning,
    ResponseDecodeError,
    StatusError,
    TransportError,
    ViolationPolicy,
)
from curseforge.endpoints import GAMES, SEARCH_PROJECTS
from curseforge.runtime.pagination import PaginatedStream, PaginationDelegate, StreamState
from curseforge.runtime.rest import RawResponse, ResponseDecoder, RestRunner, RESTTransport


def _stream(
    send, *, mode=CompatibilityMode.IGNORE, stream_limit=None, spec=GAMES, **delegate_kwargs
):
    transport = MagicMock(spec=RESTTransport)
    transport.send = AsyncMock(side_effect=send)
    runner = RestRunner(transport, ResponseDecoder(mode))
    delegate = PaginationDelegate(runner, spec, **delegate_kwargs)
    return PaginatedStream(delegate, limit=stream_limit), transport


class TestStreamOrdering:
    """Test records come out in remote order across pages."""

    @pytest.mark.asyncio
    async def test_pages_flattened_in_order(self, paged_server, game_payload):
        server = paged_server([game_payload(i) for i in range(5)])
        stream, transport = _stream(server.send, page_size=2)

        ids = [game.id async for game in stream]

        assert ids == [0, 1, 2, 3, 4]
        assert server.offsets == [0, 2, 4]
        assert transport.send.call_count == 3
        assert stream.pages_fetched == 3

    @pytest.mark.asyncio
    async def test_ends_on_reported_total_without_extra_fetch(self, paged_server, game_payload):
        server = paged_server([game_payload(i) for i in range(4)])
        stream, transport = _stream(server.send, page_size=2)

        assert len(await stream.collect()) == 4
        assert transport.send.call_count == 2
        assert stream.state == StreamState.EXHAUSTED

    @pytest.mark.asyncio
    async def test_end_is_idempotent(self, paged_server, game_payload):
        server = paged_server([game_payload(1)])
        stream, transport = _stream(server.send)

        assert (await stream.next()).id == 1
        for _ in range(3):
            with pytest.raises(StopAsyncIteration):
                await stream.next()

        assert transport.send.call_count == 1

    @pytest.mark.asyncio
    async def test_starting_offset(self, paged_server, game_payload):
        server = paged_server([game_payload(i) for i in range(6)])
        stream, _ = _stream(server.send, offset=3, page_size=2)

        ids = [game.id async for game in stream]

        assert ids == [3, 4, 5]
        assert server.offsets == [3, 5]

    @pytest.mark.asyncio
    async def test_empty_result_set(self, paged_server):
        server = paged_server([])
        stream, transport = _stream(server.send)

        assert await stream.collect() == []
        assert transport.send.call_count == 1
        assert stream.state == StreamState.EXHAUSTED

    @pytest.mark.asyncio
    async def test_empty_page_ends_stream(self, paged_server, game_payload):
        # Remote claims more results than it actually serves
        server = paged_server([game_payload(i) for i in range(3)], reported_total=10)
        stream, transport = _stream(server.send, page_size=2)

        ids = [game.id async for game in stream]

        assert ids == [0, 1, 2]
        assert server.offsets == [0, 2, 3]
        assert stream.state == StreamState.EXHAUSTED


class TestStreamLimit:
    """Test the global result cap."""

    @pytest.mark.asyncio
    async def test_requests_clamped_to_limit(self, paged_server, game_payload):
        server = paged_server([game_payload(i) for i in range(5)])
        stream, transport = _stream(server.send, page_size=2, limit=3)

        ids = [game.id async for game in stream]

        assert ids == [0, 1, 2]
        assert [cursor["pageSize"] for _, _, cursor in server.requests] == [2, 1]
        assert transport.send.call_count == 2

    @pytest.mark.asyncio
    async def test_oversized_page_truncated(self, paged_server, game_payload):
        server = paged_server(
            [game_payload(i) for i in range(5)], default_page_size=2, ignore_page_size=True
        )
        stream, _ = _stream(server.send, limit=3)

        ids = [game.id async for game in stream]

        assert ids == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_stream_limit_overrides_delegate(self, paged_server, game_payload):
        server = paged_server([game_payload(i) for i in range(5)])
        stream, transport = _stream(server.send, stream_limit=1, page_size=2)

        assert [game.id async for game in stream] == [0]
        assert stream.limit == 1
        assert transport.send.call_count == 1

    @pytest.mark.asyncio
    async def test_zero_limit_never_fetches(self, paged_server):
        server = paged_server([])
        stream, transport = _stream(server.send, limit=0)

        assert await stream.collect() == []
        transport.send.assert_not_called()

    def test_negative_limit_rejected(self, paged_server):
        transport = MagicMock(spec=RESTTransport)
        delegate = PaginationDelegate(RestRunner(transport, ResponseDecoder()), GAMES)
        with pytest.raises(ValueError):
            PaginatedStream(delegate, limit=-1)

    @pytest.mark.asyncio
    async def test_cap_with_large_reported_total(self, paged_server, game_payload):
        server = paged_server(
            [game_payload(i) for i in range(30)], reported_total=1_000_000
        )
        stream, _ = _stream(server.send, page_size=10, limit=25)

        ids = [game.id async for game in stream]

        assert ids == list(range(25))
        assert stream.size_hint() == (0, 25)


class TestStreamFailures:
    """Test that failures are terminal."""

    @pytest.mark.asyncio
    async def test_transport_failure_is_terminal(self, game_payload, page_body):
        first = RawResponse(200, page_body([game_payload(0), game_payload(1)], page_size=2, total=4))
        stream, transport = _stream([first, TransportError("connection reset")], page_size=2)

        assert (await stream.next()).id == 0
        assert (await stream.next()).id == 1
        with pytest.raises(TransportError) as exc_info:
            await stream.next()

        assert stream.state == StreamState.FAILED
        assert stream.error is exc_info.value
        assert stream.offset == 2

        with pytest.raises(TransportError) as again:
            await stream.next()
        assert again.value is exc_info.value
        assert transport.send.call_count == 2

    @pytest.mark.asyncio
    async def test_status_failure(self):
        stream, _ = _stream([RawResponse(403, b"Forbidden")])

        with pytest.raises(StatusError) as exc_info:
            await stream.next()
        assert exc_info.value.status_code == 403
        assert stream.state == StreamState.FAILED

    @pytest.mark.asyncio
    async def test_decode_failure_mid_stream(self, game_payload, page_body):
        pages = [
            RawResponse(200, page_body([game_payload(0)], page_size=1, total=2)),
            RawResponse(200, page_body([game_payload(1, extra=1)], index=1, page_size=1, total=2)),
        ]
        stream, _ = _stream(pages, mode=CompatibilityMode.STRICT, page_size=1)

        assert (await stream.next()).id == 0
        with pytest.raises(ResponseDecodeError) as exc_info:
            await stream.next()

        assert exc_info.value.field_path == ("data", 0, "extra")
        assert stream.state == StreamState.FAILED

    @pytest.mark.asyncio
    async def test_protocol_violation_raises_by_default(self, paged_server, game_payload):
        server = paged_server([game_payload(i) for i in range(4)], report_index=lambda i: 0)
        stream, _ = _stream(server.send, page_size=2)

        assert [(await stream.next()).id, (await stream.next()).id] == [0, 1]
        with pytest.raises(ProtocolViolationError):
            await stream.next()
        assert stream.state == StreamState.FAILED

    @pytest.mark.asyncio
    async def test_protocol_violation_warns_when_lenient(self, paged_server, game_payload):
        server = paged_server([game_payload(i) for i in range(4)], report_index=lambda i: 0)
        stream, _ = _stream(server.send, mode=CompatibilityMode.LENIENT, page_size=2)

        with pytest.warns(ProtocolViolationWarning):
            ids = [game.id async for game in stream]

        assert ids == [0, 1, 2, 3]
        assert stream.state == StreamState.EXHAUSTED

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "report_count,expected_ids,expected_offsets",
        [
            # Under-reported: advance past every record actually received
            (lambda n: n - 1, list(range(10)), [0, 5]),
            # Over-reported: advance by the reported count, skipping 5 and 6
            (lambda n: n + 2, [0, 1, 2, 3, 4, 7, 8, 9], [0, 7]),
        ],
    )
    async def test_result_count_mismatch_under_warn_policy(
        self, paged_server, game_payload, report_count, expected_ids, expected_offsets
    ):
        server = paged_server([game_payload(i) for i in range(10)], report_count=report_count)
        stream, _ = _stream(server.send, page_size=5, violation_policy=ViolationPolicy.WARN)

        with pytest.warns(ProtocolViolationWarning):
            ids = [game.id async for game in stream]

        assert ids == expected_ids
        assert server.offsets == expected_offsets
        assert stream.state == StreamState.EXHAUSTED

    @pytest.mark.asyncio
    async def test_result_count_mismatch_raises_by_default(self, paged_server, game_payload):
        server = paged_server([game_payload(i) for i in range(3)], report_count=lambda n: 5)
        stream, transport = _stream(server.send)

        with pytest.raises(ProtocolViolationError) as exc_info:
            await stream.next()

        assert exc_info.value.field == "resultCount"
        assert exc_info.value.expected == 3
        assert exc_info.value.reported == 5
        assert stream.state == StreamState.FAILED
        assert stream.offset == 0

        with pytest.raises(ProtocolViolationError):
            await stream.next()
        assert transport.send.call_count == 1

    @pytest.mark.asyncio
    async def test_request_building_error_restores_state(self):
        stream, transport = _stream(None, spec=SEARCH_PROJECTS)

        for _ in range(2):
            with pytest.raises(ValueError):
                await stream.next()
            assert stream.state == StreamState.NOT_STARTED

        assert stream.offset == 0
        assert stream.pages_fetched == 0
        transport.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_cancellation_keeps_cursor(self):
        started = asyncio.Event()

        async def hang(*args, **kwargs):
            started.set()
            await asyncio.Event().wait()

        stream, _ = _stream(hang)
        task = asyncio.create_task(stream.next())
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert stream.state == StreamState.NOT_STARTED
        assert stream.offset == 0
        assert stream.pages_fetched == 0


class TestStreamIntrospection:
    """Test state and size reporting."""

    @pytest.mark.asyncio
    async def test_size_hint(self, paged_server, game_payload):
        server = paged_server([game_payload(i) for i in range(7)])
        stream, _ = _stream(server.send, page_size=3)

        assert stream.size_hint() == (0, None)
        await stream.next()
        assert stream.size_hint() == (0, 7)

    @pytest.mark.asyncio
    async def test_state_transitions(self, paged_server, game_payload):
        server = paged_server([game_payload(i) for i in range(2)])
        stream, _ = _stream(server.send, page_size=2)

        assert stream.state == StreamState.NOT_STARTED
        await stream.next()
        assert stream.state == StreamState.BUFFERED
        assert stream.buffered == 1
        assert stream.pagination.total_count == 2
        await stream.next()
        with pytest.raises(StopAsyncIteration):
            await stream.next()
        assert stream.state == StreamState.EXHAUSTED
