"""Client configuration settings."""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from NEXMO_* environment variables."""

    # Credentials
    api_key: Optional[str] = Field(default=None, description="Account API key")
    api_secret: Optional[str] = Field(default=None, description="Account API secret")

    # API hosts
    rest_base_url: str = Field(
        default="https://rest.nexmo.com",
        description="Base URL for the numbers endpoints"
    )
    api_base_url: str = Field(
        default="https://api.nexmo.com",
        description="Base URL for the verify endpoints"
    )

    # HTTP configuration
    http_timeout: float = Field(default=10.0, description="Request timeout in seconds")
    http_max_connections: int = Field(default=10, description="Connection pool size")
    user_agent: str = Field(default="nexmo-python-client/0.1.0")

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or text

    model_config = SettingsConfigDict(
        env_prefix="NEXMO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# Global settings instance
settings = Settings()
