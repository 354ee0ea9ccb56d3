"""Configuration management for the Wheel of Life service."""

from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    # Environment variables should be set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    WHEEL_ENV: str = Field(default="dev", description="Environment: dev, staging, prod")

    # Mail transport selection
    MAIL_TRANSPORT: Literal["smtp", "resend"] = Field(
        default="smtp", description="Outbound mail transport: smtp (Gmail) or resend"
    )
    MAIL_FROM_NAME: str = Field(
        default="Wheel of Life Assessment", description="Display name on outbound mail"
    )
    MAIL_TIMEOUT_SECONDS: float = Field(
        default=15.0, gt=0, description="Default deadline for a single delivery attempt"
    )

    # Gmail SMTP (optional; email sending is refused without both)
    GMAIL_USER: str | None = Field(default=None, description="Gmail sender account")
    GMAIL_APP_PASSWORD: str | None = Field(default=None, description="Gmail app password")
    SMTP_HOST: str = Field(default="smtp.gmail.com", description="SMTP host (implicit TLS)")
    SMTP_PORT: int = Field(default=465, description="SMTP port (implicit TLS)")

    # Resend (optional; used when MAIL_TRANSPORT=resend)
    RESEND_API_KEY: str | None = Field(default=None, description="Resend API key")
    RESEND_FROM_EMAIL: str | None = Field(default=None, description="Resend sender address")


@dataclass(frozen=True)
class MailConfig:
    """Resolved outbound mail configuration.

    ``sender`` and ``credential`` are the two secrets of the active transport:
    the Gmail account and app password for ``smtp``, the sender address and
    API key for ``resend``.
    """

    transport: str
    sender: str | None
    credential: str | None
    from_name: str
    smtp_host: str
    smtp_port: int
    timeout_seconds: float

    @property
    def is_configured(self) -> bool:
        return bool(self.sender) and bool(self.credential)

    @property
    def from_header(self) -> str:
        return f'"{self.from_name}" <{self.sender}>'

    @classmethod
    def from_settings(cls, settings: Settings) -> "MailConfig":
        if settings.MAIL_TRANSPORT == "resend":
            sender, credential = settings.RESEND_FROM_EMAIL, settings.RESEND_API_KEY
        else:
            sender, credential = settings.GMAIL_USER, settings.GMAIL_APP_PASSWORD

        return cls(
            transport=settings.MAIL_TRANSPORT,
            sender=sender,
            credential=credential,
            from_name=settings.MAIL_FROM_NAME,
            smtp_host=settings.SMTP_HOST,
            smtp_port=settings.SMTP_PORT,
            timeout_seconds=settings.MAIL_TIMEOUT_SECONDS,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    return Settings()
