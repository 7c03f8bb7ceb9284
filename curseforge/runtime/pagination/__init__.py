"""Generic pagination layer for offset-based CurseForge endpoints.

Architecture:
    The pagination layer consists of:
    - delegate.py: Binds one query and owns its cursor (offset, last descriptor)
    - stream.py: Turns repeated delegate fetches into one lazy async sequence
    - telemetry.py: Structured logging

Usage:
    The client builds a ``PaginationDelegate`` for a paginated endpoint spec
    and wraps it in a ``PaginatedStream``; callers iterate with ``async for``.
"""

from __future__ import annotations

from .delegate import PaginationDelegate
from .stream import PaginatedStream, StreamState

__all__ = [
    "PaginationDelegate",
    "PaginatedStream",
    "StreamState",
]
