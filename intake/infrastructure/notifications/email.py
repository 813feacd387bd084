"""Consultation notice emails through a transactional mail HTTP API.

The payload follows the Mailjet v3.1 send format; the API login and key are
sent as basic-auth credentials.
"""

import html

import httpx
import structlog

from ...application.ports.outbound import EmailNotifier
from ...config import Settings
from ...domain.entities import UNKNOWN_CLICK_SOURCE
from ...domain.errors import NotificationError
from ...domain.value_objects import NotificationOutcome
from ..logging import redact_secret

logger = structlog.get_logger()


class MailApiEmailNotifier(EmailNotifier):
    """Sends one email per consultation. No retry."""

    def __init__(
        self,
        api_url: str,
        login: str,
        api_key: str,
        sender_email: str,
        sender_name: str,
        recipient_email: str,
        timeout: float = 25.0,
    ) -> None:
        self._api_url = api_url
        self._login = login
        self._api_key = api_key
        self._sender_email = sender_email
        self._sender_name = sender_name
        self._recipient_email = recipient_email
        self._timeout = timeout

    async def send_consultation_notice(
        self,
        name: str,
        contact: str,
        click_source: str | None = None,
    ) -> NotificationOutcome:
        if not self._login or not self._api_key:
            raise NotificationError("Mail API credentials are not configured")
        if not self._sender_email or not self._recipient_email:
            raise NotificationError("Mail sender or recipient address is not configured")

        payload = {
            "Messages": [
                {
                    "From": {"Email": self._sender_email, "Name": self._sender_name},
                    "To": [{"Email": self._recipient_email}],
                    **compose_consultation_message(name, contact, click_source),
                }
            ]
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self._api_url,
                    json=payload,
                    auth=(self._login, self._api_key),
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NotificationError(
                f"Mail API error: {e.response.status_code}",
                details=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise NotificationError(f"Mail API request failed: {e}") from e

        logger.info("Consultation email sent", recipient=self._recipient_email)
        return NotificationOutcome.ok()


def compose_consultation_message(name: str, contact: str, click_source: str | None) -> dict:
    """Subject, text and HTML parts. User-provided values are HTML-escaped."""
    source = click_source or UNKNOWN_CLICK_SOURCE
    text_part = f"새 상담 신청이 접수되었습니다.\n\n이름: {name}\n연락처: {contact}\n유입 경로: {source}\n"
    html_part = (
        "<h2>새 상담 신청</h2>"
        f"<p><strong>이름:</strong> {html.escape(name)}</p>"
        f"<p><strong>연락처:</strong> {html.escape(contact)}</p>"
        f"<p><strong>유입 경로:</strong> {html.escape(source)}</p>"
    )
    return {
        "Subject": f"[상담 신청] {name}님",
        "TextPart": text_part,
        "HTMLPart": html_part,
    }


def create_email_notifier(settings: Settings) -> MailApiEmailNotifier | None:
    """Build the email notifier, or return None when login or key is absent."""
    logger.info(
        "Mail configuration",
        login=redact_secret(settings.mail_api_login),
        api_key=redact_secret(settings.mail_api_key),
        sender_configured=bool(settings.mail_sender_email),
        recipient_configured=bool(settings.consultation_notify_email),
    )
    if not settings.email_configured:
        return None
    return MailApiEmailNotifier(
        api_url=settings.mail_api_url,
        login=settings.mail_api_login,
        api_key=settings.mail_api_key,
        sender_email=settings.mail_sender_email,
        sender_name=settings.mail_sender_name,
        recipient_email=settings.consultation_notify_email,
        timeout=settings.mail_timeout_seconds,
    )
