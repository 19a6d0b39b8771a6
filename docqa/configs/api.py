"""
HTTP boundary configuration settings.

Bearer token, retry policy and server binding for the FastAPI app.

Dependencies: pydantic, pydantic_settings
System role: API surface configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """HTTP boundary configuration."""

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    auth_token: str = Field(
        default="",
        validation_alias=AliasChoices("API_AUTH_TOKEN", "AUTH_TOKEN"),
        description="Bearer token expected on protected routes",
    )
    max_retries: int = Field(default=3, ge=1, description="Attempts per request, first included")
    initial_retry_delay_ms: int = Field(
        default=1000,
        ge=0,
        description="Backoff before the second attempt; doubles afterwards",
    )
    fetch_timeout_s: float = Field(default=60.0, gt=0, description="Document download timeout")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, validation_alias=AliasChoices("API_PORT", "PORT"))
