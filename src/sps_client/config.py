"""Configuration management for the SBPS client."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sps_client.models.identity import Locale

SANDBOX_ENDPOINT = "https://stbfep.sps-system.com/api/xmlapi.do"


class Settings(BaseSettings):
    """Client settings loaded from ``SPS_*`` environment variables."""

    # Gateway
    endpoint: str = Field(default=SANDBOX_ENDPOINT, description="SBPS XML API endpoint")
    merchant_id: str = Field(default="", description="Merchant ID issued by SBPS")
    service_id: str = Field(default="", description="Service ID issued by SBPS")
    hash_key: str = Field(default="", description="Shared secret for signatures and Basic auth")

    # Messages
    locale: Locale = Field(default=Locale.EN, description="Locale for translated error messages")

    # Diagnostics
    debug: bool = Field(default=False, description="Log request and response bodies")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON")

    model_config = SettingsConfigDict(
        env_prefix="SPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
