"""Application configuration."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from OSMTILE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OSMTILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Base URL of the tile server used for the view/status links
    tile_server_url: str = "https://tile.openstreetmap.org"

    # Edge length of a rendered tile in pixels
    tile_size: int = 256

    # Logging
    log_level: str = "warning"

    @field_validator("tile_server_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the server URL without a trailing slash."""
        return v.rstrip("/")

    @field_validator("tile_size")
    @classmethod
    def check_tile_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("tile_size must be positive")
        return v


settings = Settings()
