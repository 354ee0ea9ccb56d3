"""Tests for settings and mail configuration."""

import pytest
from pydantic import ValidationError

from wheel_of_life.core.config import MailConfig, Settings, get_settings


def test_defaults_leave_mail_unconfigured():
    settings = get_settings()

    config = MailConfig.from_settings(settings)

    assert settings.MAIL_TRANSPORT == "smtp"
    assert config.transport == "smtp"
    assert config.smtp_host == "smtp.gmail.com"
    assert config.smtp_port == 465
    assert config.timeout_seconds == 15.0
    assert config.is_configured is False


def test_gmail_env_configures_smtp(gmail_env):
    config = MailConfig.from_settings(get_settings())

    assert config.is_configured is True
    assert config.sender == "coach@example.com"
    assert config.credential == "app-password"
    assert config.from_header == '"Wheel of Life Assessment" <coach@example.com>'


@pytest.mark.parametrize(
    "overrides",
    [{"GMAIL_USER": "coach@example.com"}, {"GMAIL_APP_PASSWORD": "app-password"}],
)
def test_smtp_needs_both_secrets(overrides):
    config = MailConfig.from_settings(Settings(**overrides))

    assert config.is_configured is False


def test_resend_uses_its_own_secrets():
    settings = Settings(
        MAIL_TRANSPORT="resend",
        GMAIL_USER="coach@example.com",
        GMAIL_APP_PASSWORD="app-password",
        RESEND_FROM_EMAIL="results@example.com",
        RESEND_API_KEY="re_test_key",
    )

    config = MailConfig.from_settings(settings)

    assert config.transport == "resend"
    assert config.sender == "results@example.com"
    assert config.credential == "re_test_key"
    assert config.is_configured is True


def test_rejects_unknown_transport():
    with pytest.raises(ValidationError):
        Settings(MAIL_TRANSPORT="carrier-pigeon")


def test_settings_are_cached():
    assert get_settings() is get_settings()
