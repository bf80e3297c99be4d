"""Central application settings using Pydantic."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Core application
    log_level: str = Field("INFO", env="LOG_LEVEL")
    port: int = Field(8000, env="PORT")

    # Google Maps
    google_maps_api_key: str = Field(..., env="GOOGLE_MAPS_API_KEY")
    google_maps_base_url: str = Field(
        "https://maps.googleapis.com/maps/api", env="GOOGLE_MAPS_BASE_URL"
    )

    # Outbound transport; None disables timeouts entirely
    http_timeout: float | None = Field(None, env="HTTP_TIMEOUT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return str(v).upper()

    @field_validator("google_maps_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return str(v).rstrip("/")


def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings()
