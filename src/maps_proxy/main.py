"""Local development server exposing the proxy over plain HTTP."""

import logging
from collections.abc import Callable

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import Response

from .handler import NearbySearchHandler, get_handler
from .integrations.google_maps import GoogleMapsClientError
from .models.google_maps import GoogleMapsResponse
from .models.proxy import ProxyRequest, ProxyResponse
from .settings import get_settings

app = FastAPI(title="Maps Proxy", version="0.1.0")

logger = logging.getLogger(__name__)


def _to_http(proxy_response: ProxyResponse) -> Response:
    media_type = "application/json" if proxy_response.status_code == 200 else "text/plain"
    return Response(
        content=proxy_response.body,
        status_code=proxy_response.status_code,
        media_type=media_type,
    )


def _passthrough(
    lookup: Callable[[dict[str, str]], GoogleMapsResponse],
    request: Request,
    api_key: str,
) -> Response:
    params = dict(request.query_params)
    params["key"] = api_key
    try:
        result = lookup(params)
    except GoogleMapsClientError as err:
        logger.warning("%s failed: %s", request.url.path, err)
        return _to_http(ProxyResponse.failure(err))
    return _to_http(ProxyResponse.success(result.model_dump_wire_json()))


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/nearby")
def nearby(request: Request, handler: NearbySearchHandler = Depends(get_handler)):
    """Same contract as the Lambda: location, radius and optional name."""
    event = ProxyRequest(query_string_parameters=dict(request.query_params))
    return _to_http(handler.handle(event))


@app.get("/geocode")
def geocode(request: Request, handler: NearbySearchHandler = Depends(get_handler)):
    """Forward ``address`` (and any other query parameter) to the Geocoding API."""
    return _passthrough(handler.client.geocode, request, handler.api_key)


@app.get("/findplace")
def find_place(request: Request, handler: NearbySearchHandler = Depends(get_handler)):
    """Forward ``input``/``inputtype`` to the Find Place API."""
    return _passthrough(handler.client.find_place, request, handler.api_key)


def main():
    """Main entry point for the development server."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting Maps Proxy development server")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
