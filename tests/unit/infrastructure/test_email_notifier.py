from unittest.mock import AsyncMock, patch

import httpx
import pytest

from intake.domain.errors import NotificationError
from intake.infrastructure.notifications import MailApiEmailNotifier
from intake.infrastructure.notifications.email import compose_consultation_message

API_URL = "https://api.mail.test/v3.1/send"


def _response(status_code: int, text: str = "{}") -> httpx.Response:
    return httpx.Response(status_code, text=text, request=httpx.Request("POST", API_URL))


class TestMailApiEmailNotifier:
    @pytest.fixture
    def notifier(self):
        return MailApiEmailNotifier(
            api_url=API_URL,
            login="login-123",
            api_key="key-456",
            sender_email="noreply@example.com",
            sender_name="상담 알림",
            recipient_email="team@example.com",
        )

    @pytest.mark.asyncio
    async def test_send_success(self, notifier):
        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(return_value=_response(200))
            mock_client.return_value.__aenter__.return_value.post = post

            outcome = await notifier.send_consultation_notice(name="Kim", contact="010", click_source="hero")

        assert outcome.success is True
        kwargs = post.call_args.kwargs
        assert post.call_args.args == (API_URL,)
        assert kwargs["auth"] == ("login-123", "key-456")
        message = kwargs["json"]["Messages"][0]
        assert message["From"] == {"Email": "noreply@example.com", "Name": "상담 알림"}
        assert message["To"] == [{"Email": "team@example.com"}]
        assert "Kim" in message["Subject"]

    @pytest.mark.asyncio
    async def test_rejected_send_raises(self, notifier):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=_response(401, "unauthorized")
            )

            with pytest.raises(NotificationError, match="401"):
                await notifier.send_consultation_notice(name="Kim", contact="010")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, notifier):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ReadTimeout("timed out")
            )

            with pytest.raises(NotificationError):
                await notifier.send_consultation_notice(name="Kim", contact="010")

    @pytest.mark.asyncio
    async def test_missing_credentials_raise(self):
        notifier = MailApiEmailNotifier(
            api_url=API_URL,
            login="",
            api_key="",
            sender_email="noreply@example.com",
            sender_name="x",
            recipient_email="team@example.com",
        )

        with patch("httpx.AsyncClient") as mock_client:
            with pytest.raises(NotificationError):
                await notifier.send_consultation_notice(name="Kim", contact="010")

        mock_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_recipient_raises(self, notifier):
        notifier._recipient_email = ""

        with pytest.raises(NotificationError, match="recipient"):
            await notifier.send_consultation_notice(name="Kim", contact="010")


def test_compose_escapes_html_and_defaults_source():
    message = compose_consultation_message("<b>Kim</b>", "010", None)

    assert "&lt;b&gt;Kim&lt;/b&gt;" in message["HTMLPart"]
    assert "<b>Kim</b>" not in message["HTMLPart"]
    assert "unknown" in message["TextPart"]
