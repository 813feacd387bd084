import asyncio

import httpx
import structlog

from ...application.ports.outbound import ChatNotifier
from ...domain.value_objects import NotificationOutcome

logger = structlog.get_logger()


class SlackWebhookNotifier(ChatNotifier):
    """Slack incoming webhook notifier.

    The whole POST is bounded by ``timeout``; on expiry the in-flight request
    is cancelled and reported as a transport failure.
    """

    def __init__(self, webhook_url: str | None, timeout: float = 5.0) -> None:
        self._webhook_url = webhook_url
        self._timeout = timeout

    async def send(self, text: str) -> NotificationOutcome:
        if not self._webhook_url:
            logger.warning("SLACK_WEBHOOK_URL not configured - skipping Slack notification")
            return NotificationOutcome.skipped("missing_webhook")

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await asyncio.wait_for(
                    client.post(self._webhook_url, json={"text": text}),
                    timeout=self._timeout,
                )
        except asyncio.TimeoutError:
            logger.error("Slack notification timed out", timeout_s=self._timeout)
            return NotificationOutcome.failed(f"timed out after {self._timeout}s")
        except Exception as e:
            logger.error("Slack notification failed", error=str(e), error_type=type(e).__name__)
            return NotificationOutcome.failed(str(e))

        if not response.is_success:
            logger.error(
                "Slack webhook rejected message",
                status_code=response.status_code,
                body=response.text,
            )
            return NotificationOutcome.failed(response.text, status=response.status_code)

        return NotificationOutcome.ok()
