"""Runtime orchestration components."""

from .pagination import PaginatedStream, PaginationDelegate, StreamState
from .rest import (
    HTTPClient,
    RawResponse,
    ResponseDecoder,
    RestEndpointSpec,
    RestRunner,
    RESTTransport,
)

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RawResponse",
    "ResponseDecoder",
    "RestRunner",
    "RestEndpointSpec",
    "PaginationDelegate",
    "PaginatedStream",
    "StreamState",
]
