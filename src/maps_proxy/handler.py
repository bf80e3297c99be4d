"""Lambda proxy handler for the Nearby Search endpoint.

The gateway passes ``location`` ("lat,lng"), ``radius`` and an optional
``name`` in the query string. Any failure is reported to the caller as
HTTP 400 with the body ``"Error"``; the cause only goes to the logs.
"""

import logging
from typing import Any

from pydantic import ValidationError

from maps_proxy.integrations.google_maps import (
    GoogleMapsClient,
    GoogleMapsClientError,
    get_http_client,
)
from maps_proxy.models.proxy import ProxyRequest, ProxyResponse
from maps_proxy.settings import get_settings

logger = logging.getLogger(__name__)

_handler: "NearbySearchHandler | None" = None


def build_nearby_params(query: ProxyRequest, api_key: str) -> dict[str, str]:
    """Map the inbound query string to Nearby Search parameters.

    ``name`` is only added when it was sent with a non-empty value.
    """
    params = {
        "location": query.query("location"),
        "radius": query.query("radius"),
        "key": api_key,
    }
    name = query.query("name")
    if name:
        params["name"] = name
    return params


class NearbySearchHandler:
    """Translate one proxy request into one Nearby Search call."""

    def __init__(self, client: GoogleMapsClient, api_key: str) -> None:
        self.client = client
        self.api_key = api_key

    def handle(self, request: ProxyRequest) -> ProxyResponse:
        params = build_nearby_params(request, self.api_key)
        try:
            result = self.client.place_nearby(params)
        except GoogleMapsClientError as err:
            logger.warning("Nearby search failed: %s", err)
            return ProxyResponse.failure(err)
        return ProxyResponse.success(result.model_dump_wire_json())


def get_handler() -> NearbySearchHandler:
    """Return the handler for this process, building it on first use."""
    global _handler
    if _handler is None:
        settings = get_settings()
        logging.basicConfig(
            level=getattr(logging, settings.log_level, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        client = GoogleMapsClient(
            get_http_client(),
            base_url=settings.google_maps_base_url,
        )
        _handler = NearbySearchHandler(client, settings.google_maps_api_key)
    return _handler


def lambda_handler(event: dict[str, Any] | None, context: Any) -> dict[str, Any]:
    """AWS Lambda handler for API Gateway proxy integration."""
    try:
        request = ProxyRequest.model_validate(event or {})
    except ValidationError as err:
        response = ProxyResponse.failure(err)
    else:
        response = get_handler().handle(request)
    if response.error is not None:
        logger.error(
            "Invocation failed with %s",
            type(response.error).__name__,
            exc_info=response.error,
        )
    return response.to_lambda()
