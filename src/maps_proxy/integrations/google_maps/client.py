import logging
from typing import TypeVar

import httpx
from pydantic import ValidationError

from maps_proxy.integrations.google_maps.exceptions import (
    RequestBuildError,
    ResponseDecodeError,
    ResponseReadError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from maps_proxy.models.google_maps import (
    FindPlaceResponse,
    GeocodeResponse,
    GoogleMapsResponse,
    NearbySearchResponse,
)

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=GoogleMapsResponse)


class GoogleMapsClient:
    """Minimal client for the Google Maps Geocoding and Places web services.

    Every call is a single GET with all parameters in the query string.
    Callers must include every parameter the endpoint requires, ``key``
    included.
    """

    BASE_URL = "https://maps.googleapis.com/maps/api"
    GEOCODE_PATH = "/geocode/json"
    FIND_PLACE_PATH = "/place/findplacefromtext/json"
    NEARBY_SEARCH_PATH = "/place/nearbysearch/json"

    def __init__(self, http_client: httpx.Client, base_url: str | None = None) -> None:
        self._http = http_client
        self.base_url = (base_url or self.BASE_URL).rstrip("/")

    def _get(
        self,
        path: str,
        params: dict[str, str],
        response_model: type[ResponseT],
    ) -> ResponseT:
        """Run one lookup and decode the body into ``response_model``."""
        url = f"{self.base_url}{path}"
        try:
            request = self._http.build_request("GET", url, params=params)
        except (httpx.InvalidURL, TypeError, ValueError) as err:
            raise RequestBuildError(f"Cannot build request for {path}") from err

        logger.debug("GET %s", path)
        try:
            response = self._http.send(request, stream=True)
        except httpx.RequestError as err:
            raise UpstreamTransportError(f"Request to {path} failed: {err}") from err

        try:
            if response.status_code != httpx.codes.OK:
                logger.warning("%s answered with HTTP %s", path, response.status_code)
                raise UpstreamStatusError(response.status_code)
            try:
                content = response.read()
            except (httpx.RequestError, httpx.StreamError) as err:
                raise ResponseReadError(f"Cannot read response from {path}") from err
        finally:
            response.close()

        try:
            return response_model.model_validate_json(content)
        except ValidationError as err:
            raise ResponseDecodeError(
                f"Invalid {response_model.__name__} payload from {path}"
            ) from err

    def geocode(self, params: dict[str, str]) -> GeocodeResponse:
        """Geocode an address.

        Requires ``address`` and ``key``.
        """
        return self._get(self.GEOCODE_PATH, params, GeocodeResponse)

    def find_place(self, params: dict[str, str]) -> FindPlaceResponse:
        """Find places matching a text query.

        Requires ``input``, ``inputtype`` and ``key``. Unlike Nearby Search,
        the returned fields can be restricted with ``fields``.
        """
        return self._get(self.FIND_PLACE_PATH, params, FindPlaceResponse)

    def place_nearby(self, params: dict[str, str]) -> NearbySearchResponse:
        """Search for places around a point.

        Requires ``location`` ("lat,lng"), ``radius`` and ``key``; ``name``
        is an optional filter. Nearby Search always returns (and bills for)
        every data field of each place.
        """
        return self._get(self.NEARBY_SEARCH_PATH, params, NearbySearchResponse)
