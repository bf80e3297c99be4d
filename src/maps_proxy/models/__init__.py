"""
Shared data models for the maps proxy.

This module exposes the provider response schemas and the proxy envelope.
"""

from .google_maps import (
    AddressComponent,
    FindPlaceResponse,
    GeocodeResponse,
    GeocodeResult,
    Geometry,
    GoogleMapsResponse,
    LatLng,
    NearbyPlace,
    NearbySearchResponse,
    OpeningHours,
    Photo,
    PlaceCandidate,
    PlusCode,
    Viewport,
)
from .proxy import ERROR_BODY, ProxyRequest, ProxyResponse

__all__ = [
    # Provider responses
    "GoogleMapsResponse",
    "GeocodeResponse",
    "FindPlaceResponse",
    "NearbySearchResponse",
    # Entries
    "GeocodeResult",
    "PlaceCandidate",
    "NearbyPlace",
    "AddressComponent",
    "Geometry",
    "LatLng",
    "OpeningHours",
    "Photo",
    "PlusCode",
    "Viewport",
    # Proxy envelope
    "ProxyRequest",
    "ProxyResponse",
    "ERROR_BODY",
]
