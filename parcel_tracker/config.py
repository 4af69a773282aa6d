# parcel_tracker/config.py
"""
Configuration settings for the parcel tracker.

Values come from environment variables prefixed with ``PARCEL_TRACKER_``
or from a local ``.env`` file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PARCEL_TRACKER_",
        env_file=".env",
        case_sensitive=False,
    )

    app_name: str = "ParcelTracker API"

    # Database
    database_url: str = "sqlite:///tracker.db"
    db_echo: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"


settings = Settings()
