import asyncio
from collections.abc import Awaitable, Callable

import structlog

from ...domain.entities import ConsultationRequest
from ...domain.entities.consultation import CONSULTATIONS_TABLE
from ...domain.errors import ConfigurationError, PersistenceError, ValidationError
from ...domain.value_objects import NotificationOutcome
from ...infrastructure.logging import Timer
from ..dtos import ConsultationSubmissionDTO
from ..ports.inbound import SubmitConsultationUseCase
from ..ports.outbound import ChatNotifier, EmailNotifier, RecordStore

logger = structlog.get_logger()

MISSING_NAME_OR_CONTACT = "이름과 연락처를 입력해주세요."
PRIVACY_NOT_AGREED = "개인정보 처리방침에 동의해주세요."
DATABASE_NOT_CONFIGURED = "데이터베이스 연결 설정이 필요합니다."
CONSULTATION_SAVE_FAILED = "데이터 저장 중 오류가 발생했습니다."


class SubmitConsultationService(SubmitConsultationUseCase):
    """Validates, persists and announces a consultation request.

    The record store is ``None`` when the backend is not configured. Email is
    ``None`` when mail credentials are absent and is then skipped. Notifications
    run only after a successful insert and never change the result.
    """

    def __init__(
        self,
        record_store: RecordStore | None,
        chat_notifier: ChatNotifier,
        email_notifier: EmailNotifier | None = None,
    ):
        self._record_store = record_store
        self._chat_notifier = chat_notifier
        self._email_notifier = email_notifier

    async def execute(self, dto: ConsultationSubmissionDTO) -> list[dict]:
        logger.info(
            "Consultation submission received",
            has_name=bool(dto.name),
            has_contact=bool(dto.contact),
            privacy_agreed=bool(dto.privacy_agreed),
            click_source=dto.click_source,
        )

        if not dto.name or not dto.contact:
            raise ValidationError(MISSING_NAME_OR_CONTACT)
        if not dto.privacy_agreed:
            raise ValidationError(PRIVACY_NOT_AGREED)

        if self._record_store is None:
            logger.error("Record store unavailable - persistence configuration missing")
            raise ConfigurationError(DATABASE_NOT_CONFIGURED)

        consultation = ConsultationRequest.create(
            name=dto.name,
            contact=dto.contact,
            click_source=dto.click_source,
        )

        try:
            with Timer() as t:
                data = await self._record_store.insert(CONSULTATIONS_TABLE, [consultation.to_record()])
        except PersistenceError as e:
            logger.error("Consultation insert rejected", details=e.details)
            raise PersistenceError(CONSULTATION_SAVE_FAILED, details=e.details) from e

        logger.info(
            "Consultation stored",
            records=len(data),
            click_source=consultation.click_source,
            duration_ms=t.duration_ms,
        )

        await self._notify(consultation)
        return data

    async def _notify(self, consultation: ConsultationRequest) -> list[NotificationOutcome]:
        """Attempt both notifications; every outcome is logged and discarded."""
        text = consultation.generate_notification_text()
        return list(
            await asyncio.gather(
                self._attempt("email", lambda: self._send_email(consultation)),
                self._attempt("slack", lambda: self._chat_notifier.send(text)),
            )
        )

    async def _send_email(self, consultation: ConsultationRequest) -> NotificationOutcome:
        if self._email_notifier is None:
            logger.warning("Email credentials not configured - skipping email notification")
            return NotificationOutcome.skipped("missing_credentials")
        return await self._email_notifier.send_consultation_notice(
            name=consultation.name,
            contact=consultation.contact,
            click_source=consultation.click_source,
        )

    @staticmethod
    async def _attempt(
        channel: str,
        send: Callable[[], Awaitable[NotificationOutcome]],
    ) -> NotificationOutcome:
        try:
            outcome = await send()
        except Exception as e:
            logger.error(
                "Notification failed",
                channel=channel,
                error=str(e),
                error_type=type(e).__name__,
            )
            return NotificationOutcome.failed(str(e))

        if outcome.success:
            logger.info("Notification sent", channel=channel)
        else:
            logger.warning("Notification not delivered", channel=channel, **outcome.as_log_fields())
        return outcome
