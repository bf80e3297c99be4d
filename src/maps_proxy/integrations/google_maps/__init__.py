"""
Google Maps integration for the maps proxy.

Provides the outbound client for the Geocoding, Find Place and Nearby Search
web services, its error types, and the shared HTTP transport.
"""

from .client import GoogleMapsClient
from .exceptions import (
    GoogleMapsClientError,
    RequestBuildError,
    ResponseDecodeError,
    ResponseReadError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from .transport import create_http_client, get_http_client

__all__ = [
    # Main Client
    "GoogleMapsClient",
    # Transport
    "create_http_client",
    "get_http_client",
    # Exceptions
    "GoogleMapsClientError",
    "RequestBuildError",
    "UpstreamTransportError",
    "UpstreamStatusError",
    "ResponseReadError",
    "ResponseDecodeError",
]
