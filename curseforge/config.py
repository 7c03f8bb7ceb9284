"""Shared CurseForge API constants.

This module centralizes the base URL, path prefix and service limits used by
the endpoint definitions, the runner and the pagination layer.
"""

from __future__ import annotations

from .core.enums import CompatibilityMode

# Official Core API host. A proxy with the same path layout may be used instead.
DEFAULT_API_BASE = "https://api.curseforge.com"

# Every endpoint of the Core API lives under this prefix
API_PATH_PREFIX = "/v1"

# The remote refuses to page past this many results for any single query,
# regardless of the reported totalCount.
# https://docs.curseforge.com/#pagination-limits
API_PAGINATION_RESULTS_LIMIT = 10_000

# Page size applied by the remote when pageSize is omitted
DEFAULT_PAGE_SIZE = 50

# Optional timestamps are encoded as this literal instead of null
NULL_DATETIME_SENTINEL = "0001-01-01T00:00:00"

DEFAULT_TIMEOUT = 30.0

DEFAULT_COMPATIBILITY_MODE = CompatibilityMode.IGNORE

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

API_KEY_HEADER = "x-api-key"


def api_path(path: str) -> str:
    """Prefix an endpoint path with the API version segment.

    Examples:
        >>> api_path("/games")
        '/v1/games'
    """
    return f"{API_PATH_PREFIX}{path}"
