"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_dir: str = ".qr_vault"
    media_upload_url: str | None = None
    media_upload_preset: str | None = None
    media_upload_timeout_seconds: float = 30.0
    qr_error_correction: str = "M"
    qr_scale: int = 10
    qr_border: int = 4
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="QR_VAULT_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def media_upload_enabled(self) -> bool:
        """Return True when both the upload endpoint and preset are set."""
        return bool(self.media_upload_url and self.media_upload_preset)
