"""Pytest configuration and fixtures."""

import pytest

from wheel_of_life.core.config import MailConfig, get_settings

MAIL_ENV_VARS = (
    "MAIL_TRANSPORT",
    "MAIL_FROM_NAME",
    "MAIL_TIMEOUT_SECONDS",
    "GMAIL_USER",
    "GMAIL_APP_PASSWORD",
    "SMTP_HOST",
    "SMTP_PORT",
    "RESEND_API_KEY",
    "RESEND_FROM_EMAIL",
)


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Start every test with no mail credentials and a fresh settings cache."""
    monkeypatch.setenv("WHEEL_ENV", "test")
    for var in MAIL_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def gmail_env(monkeypatch):
    """Configure the SMTP transport through the environment."""
    monkeypatch.setenv("GMAIL_USER", "coach@example.com")
    monkeypatch.setenv("GMAIL_APP_PASSWORD", "app-password")
    get_settings.cache_clear()


@pytest.fixture
def smtp_config() -> MailConfig:
    return MailConfig(
        transport="smtp",
        sender="coach@example.com",
        credential="app-password",
        from_name="Wheel of Life Assessment",
        smtp_host="smtp.example.com",
        smtp_port=465,
        timeout_seconds=15.0,
    )


@pytest.fixture
def resend_config() -> MailConfig:
    return MailConfig(
        transport="resend",
        sender="results@example.com",
        credential="re_test_key",
        from_name="Wheel of Life Assessment",
        smtp_host="smtp.example.com",
        smtp_port=465,
        timeout_seconds=15.0,
    )
