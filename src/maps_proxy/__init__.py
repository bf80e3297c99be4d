"""Serverless proxy for the Google Maps Places and Geocoding APIs."""

__version__ = "0.1.0"
