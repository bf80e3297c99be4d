"""
Google Maps data models using Pydantic v2.

This module contains the response schemas for the Geocoding, Find Place
and Nearby Search web services. Field names match the provider's JSON keys
and no entry field is guaranteed to be present.
"""

from typing import Annotated, Any, TypeVar

from pydantic import BeforeValidator, Field

from .base import BaseProxyModel

T = TypeVar("T")


def _null_to_empty(value: Any) -> Any:
    return [] if value is None else value


# The provider may send null instead of an empty array
NullableList = Annotated[list[T], BeforeValidator(_null_to_empty)]

# Values of the top-level ``status`` field
STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"
STATUS_OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
STATUS_REQUEST_DENIED = "REQUEST_DENIED"
STATUS_INVALID_REQUEST = "INVALID_REQUEST"
STATUS_UNKNOWN_ERROR = "UNKNOWN_ERROR"
STATUS_NOT_FOUND = "NOT_FOUND"


class LatLng(BaseProxyModel):
    """A latitude/longitude pair."""

    lat: float | None = None
    lng: float | None = None


class Viewport(BaseProxyModel):
    """Recommended viewport for displaying a result."""

    northeast: LatLng | None = None
    southwest: LatLng | None = None


class Geometry(BaseProxyModel):
    location: LatLng | None = None
    location_type: str | None = Field(
        default=None, description="Geocode precision, e.g. ROOFTOP"
    )
    viewport: Viewport | None = None


class PlusCode(BaseProxyModel):
    compound_code: str | None = None
    global_code: str | None = None


class AddressComponent(BaseProxyModel):
    long_name: str | None = None
    short_name: str | None = None
    types: NullableList[str] = Field(default_factory=list)


class Photo(BaseProxyModel):
    """Reference to a place photo, fetched separately via the Photos API."""

    height: int | None = None
    width: int | None = None
    html_attributions: NullableList[str] = Field(default_factory=list)
    photo_reference: str | None = None


class OpeningHours(BaseProxyModel):
    open_now: bool | None = None


class GoogleMapsResponse(BaseProxyModel):
    """Fields shared by every Google Maps web service response."""

    status: str | None = Field(default=None, description="Provider status code")
    error_message: str | None = Field(
        default=None, description="Detail sent by the provider when status is not OK"
    )

    @property
    def is_ok(self) -> bool:
        return self.status == STATUS_OK


class GeocodeResult(BaseProxyModel):
    """A single Geocoding API result."""

    address_components: NullableList[AddressComponent] = Field(default_factory=list)
    formatted_address: str | None = None
    geometry: Geometry | None = None
    place_id: str | None = None
    plus_code: PlusCode | None = None
    types: NullableList[str] = Field(default_factory=list)


class GeocodeResponse(GoogleMapsResponse):
    results: NullableList[GeocodeResult] = Field(default_factory=list)


class PlaceCandidate(BaseProxyModel):
    """A Find Place candidate."""

    formatted_address: str | None = None
    name: str | None = None
    photos: NullableList[Photo] = Field(default_factory=list)
    rating: float | None = None


class FindPlaceResponse(GoogleMapsResponse):
    candidates: NullableList[PlaceCandidate] = Field(default_factory=list)


class NearbyPlace(BaseProxyModel):
    """A Nearby Search result."""

    geometry: Geometry | None = None
    icon: str | None = None
    id: str | None = None
    name: str | None = None
    opening_hours: OpeningHours | None = None
    photos: NullableList[Photo] = Field(default_factory=list)
    place_id: str | None = None
    plus_code: PlusCode | None = None
    price_level: int | None = None
    rating: float | None = None
    reference: str | None = None
    scope: str | None = None
    types: NullableList[str] = Field(default_factory=list)
    user_ratings_total: int | None = None
    vicinity: str | None = None


class NearbySearchResponse(GoogleMapsResponse):
    html_attributions: NullableList[Any] = Field(default_factory=list)
    results: NullableList[NearbyPlace] = Field(default_factory=list)
