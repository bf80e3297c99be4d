"""Process-wide HTTP transport shared by every invocation.

The client is created on first use (the Lambda cold start), reused for all
later invocations, and never closed while the process lives. It carries no
per-request state, so concurrent use only relies on httpx's own connection
pool.
"""

import logging

import httpx

from maps_proxy.settings import get_settings

logger = logging.getLogger(__name__)

_client: httpx.Client | None = None


def create_http_client(
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Build a new ``httpx.Client``.

    ``timeout=None`` disables timeouts. Redirects are followed and only the
    final response status is checked.
    """
    return httpx.Client(timeout=timeout, follow_redirects=True, transport=transport)


def get_http_client() -> httpx.Client:
    """Return the shared client, creating it on the first call."""
    global _client
    if _client is None:
        timeout = get_settings().http_timeout
        logger.debug("Creating shared HTTP client (timeout=%s)", timeout)
        _client = create_http_client(timeout)
    return _client
