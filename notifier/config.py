"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name (or UTC+HH:MM offset) used for timestamps",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of notifications",
        min_length=3,
    )
    sms_api_url: str = Field(
        default="https://api.textsms.co.ke/api/v3",
        description="Base URL of the SMS gateway REST API",
    )
    sms_api_key: str | None = Field(
        default=None, description="Bearer token for the SMS gateway"
    )
    sms_partner_id: str | None = Field(
        default=None, description="Partner identifier assigned by the SMS gateway"
    )
    sms_sender_id: str = Field(
        default="BIRDVIEW", description="Sender name shown on outgoing SMS"
    )
    sms_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout applied to SMS gateway requests",
        gt=0,
    )
    strict_template_lookup: bool = Field(
        default=False,
        description=(
            "Reject bulk sends whose template id does not exist instead of "
            "falling back to the inline template content"
        ),
    )

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
