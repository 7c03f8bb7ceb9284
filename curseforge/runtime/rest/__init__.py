"""REST runtime abstractions."""

from .decoder import ResponseDecoder
from .http_client import HTTPClient
from .runner import RestEndpointSpec, RestRunner
from .transport import RawResponse, RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RawResponse",
    "ResponseDecoder",
    "RestRunner",
    "RestEndpointSpec",
]
