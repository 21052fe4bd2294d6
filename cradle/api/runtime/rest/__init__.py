"""REST runtime abstractions."""

from .http_client import HTTPClient, HTTPResult
from .runner import EnvelopeAdapter, ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "HTTPResult",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "EnvelopeAdapter",
]
