"""External service integrations for the maps proxy."""
