"""Structured logging for pagination operations.

This module provides telemetry hooks for the pagination delegate and the
paginated stream, emitting structured logs for observability.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    offset: int,
    page_size: int | None,
    result_count: int,
    total_count: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page fetch.

    Args:
        endpoint_id: Endpoint identifier
        offset: Offset that was requested
        page_size: Page size that was requested (None = server default)
        result_count: Number of records in the page
        total_count: Total reported by the remote
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "offset": offset,
            "page_size": page_size,
            "result_count": result_count,
            "total_count": total_count,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    offset: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        endpoint_id: Endpoint identifier
        offset: Offset that was requested
        error_type: Type of error (e.g., "StatusError", "ResponseDecodeError")
        error_message: Error message
    """
    logger.error(
        "page_fetch_error",
        extra={
            "endpoint_id": endpoint_id,
            "offset": offset,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_violation(
    *,
    endpoint_id: str,
    field: str,
    expected: int,
    reported: int,
) -> None:
    """Log a descriptor that contradicts its request."""
    logger.warning(
        "pagination_violation",
        extra={
            "endpoint_id": endpoint_id,
            "field": field,
            "expected": expected,
            "reported": reported,
        },
    )


def log_stream_exhausted(
    *,
    endpoint_id: str,
    offset: int,
    limit: int,
    known_total: int | None,
) -> None:
    """Log the end of a paginated stream."""
    logger.debug(
        "stream_exhausted",
        extra={
            "endpoint_id": endpoint_id,
            "offset": offset,
            "limit": limit,
            "known_total": known_total,
        },
    )
