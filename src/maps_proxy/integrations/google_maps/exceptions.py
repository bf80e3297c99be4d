"""
Custom exceptions for the Google Maps client.

This module contains all exception classes used by the Google Maps integration.
Each one wraps the underlying cause via exception chaining.
"""


class GoogleMapsClientError(Exception):
    """Base exception for all Google Maps client errors."""

    pass


class RequestBuildError(GoogleMapsClientError):
    """Raised when the outbound request cannot be constructed."""

    pass


class UpstreamTransportError(GoogleMapsClientError):
    """Raised when the request cannot be sent or no response arrives."""

    pass


class UpstreamStatusError(GoogleMapsClientError):
    """Raised when the provider answers with anything other than HTTP 200.

    The status code is kept for logging only; callers outside the proxy
    see a generic failure.
    """

    def __init__(self, status_code: int, message: str = "Status not OK") -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseReadError(GoogleMapsClientError):
    """Raised when the response body cannot be read."""

    pass


class ResponseDecodeError(GoogleMapsClientError):
    """Raised when the body is not valid JSON for the expected schema."""

    pass
