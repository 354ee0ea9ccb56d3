"""Outbound email service for assessment results.

Each call makes exactly one delivery attempt; there is no retry.
Primary: Gmail SMTP with an app password.
Alternative: Resend API (MAIL_TRANSPORT=resend).
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from email.utils import make_msgid
from time import monotonic
from typing import Any

import httpx

from wheel_of_life.core.config import MailConfig
from wheel_of_life.core.email_templates import ResultsEmail, compose_results_email
from wheel_of_life.core.logging import get_logger, log_with_context, recipient_domain
from wheel_of_life.core.schemas_assessment import ScoredResult

logger = get_logger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class ConfigurationError(Exception):
    """Raised when the active mail transport is missing its credentials."""


class DeliveryError(Exception):
    """Raised when the single delivery attempt fails."""


def build_message(config: MailConfig, recipient: str, email: ResultsEmail) -> EmailMessage:
    """Build a multipart (plain text + HTML) message."""
    msg = EmailMessage()
    msg["From"] = config.from_header
    msg["To"] = recipient
    msg["Subject"] = email.subject
    msg["Message-ID"] = make_msgid(domain=recipient_domain(config.sender or ""))
    msg.set_content(email.text_body)
    msg.add_alternative(email.html_body, subtype="html")
    return msg


def _time_left(deadline: float) -> float:
    """Seconds until ``deadline`` (a time.monotonic() value)."""
    remaining = deadline - monotonic()
    if remaining <= 0:
        raise TimeoutError("Mail delivery deadline exceeded")
    return remaining


def _deliver_smtp(config: MailConfig, msg: EmailMessage, deadline: float) -> None:
    """Blocking SMTP delivery over implicit TLS.

    The deadline bounds the whole transaction: each step's socket timeout is
    the time left, and no step starts once the deadline has passed.
    """
    with smtplib.SMTP_SSL(
        config.smtp_host, config.smtp_port, timeout=_time_left(deadline)
    ) as smtp:
        smtp.sock.settimeout(_time_left(deadline))
        smtp.login(config.sender, config.credential)
        smtp.sock.settimeout(_time_left(deadline))
        smtp.send_message(msg)


async def _send_via_smtp(
    config: MailConfig,
    recipient: str,
    email: ResultsEmail,
    timeout: float,
) -> dict[str, Any]:
    """Send email via SMTP without blocking the event loop.

    The outcome is whatever the worker thread reports; the deadline is
    enforced inside the thread, so a late success is still reported as sent.
    """
    msg = build_message(config, recipient, email)
    deadline = monotonic() + timeout
    await asyncio.to_thread(_deliver_smtp, config, msg, deadline)
    return {"message_id": msg["Message-ID"], "status": "sent", "transport": "smtp"}


def _resend_message_id(response: httpx.Response) -> str:
    # A 2xx means the message was accepted, even if the body is not the expected JSON
    try:
        data = response.json() if response.content else {}
    except ValueError:
        return ""
    if not isinstance(data, dict):
        return ""
    return str(data.get("id", ""))


async def _send_via_resend(
    config: MailConfig,
    recipient: str,
    email: ResultsEmail,
    timeout: float,
) -> dict[str, Any]:
    """Send email via Resend API."""
    payload: dict[str, Any] = {
        "from": f"{config.from_name} <{config.sender}>",
        "to": [recipient],
        "subject": email.subject,
        "html": email.html_body,
        "text": email.text_body,
    }

    async with httpx.AsyncClient(timeout=timeout) as client:
        response = await client.post(
            RESEND_API_URL,
            headers={
                "Authorization": f"Bearer {config.credential}",
                "Content-Type": "application/json",
            },
            json=payload,
        )
        response.raise_for_status()

        return {
            "message_id": _resend_message_id(response),
            "status": "sent",
            "transport": "resend",
        }


async def send_results_email(
    config: MailConfig,
    recipient: str,
    result: ScoredResult,
    name: str | None = None,
    timeout: float | None = None,
) -> dict[str, Any]:
    """
    Email assessment results to a recipient.

    Args:
        config: Resolved mail configuration
        recipient: Validated recipient address
        result: Scored assessment
        name: Optional display name for the greeting
        timeout: Deadline in seconds for the attempt (defaults to config)

    Returns:
        Dict with message_id, status and transport

    Raises:
        ConfigurationError: If the transport credentials are missing (nothing is sent)
        DeliveryError: If the delivery attempt fails or times out
    """
    if not config.is_configured:
        logger.error(f"Mail transport '{config.transport}' is not configured")
        raise ConfigurationError(f"Mail transport '{config.transport}' is missing credentials")

    email = compose_results_email(result, name)
    deadline = timeout if timeout is not None else config.timeout_seconds
    send = _send_via_resend if config.transport == "resend" else _send_via_smtp

    try:
        sent = await send(config, recipient, email, deadline)
    except (smtplib.SMTPException, OSError, httpx.HTTPError, TimeoutError) as e:
        log_with_context(
            logger,
            logging.WARNING,
            f"Results email delivery failed: {type(e).__name__}",
            transport=config.transport,
            recipient_domain=recipient_domain(recipient),
        )
        raise DeliveryError(f"Delivery via {config.transport} failed") from e

    log_with_context(
        logger,
        logging.INFO,
        "Results email sent",
        transport=config.transport,
        recipient_domain=recipient_domain(recipient),
        message_id=sent["message_id"],
        top_category=result.priority_ranked[0].category,
    )
    return sent
