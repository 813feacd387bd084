import structlog

from ...domain.entities import TrackingEvent
from ...domain.entities.tracking_event import TRACKING_LOGS_TABLE
from ...domain.errors import ConfigurationError, PersistenceError, ValidationError
from ..dtos import TrackingEventDTO
from ..ports.inbound import TrackEventUseCase
from ..ports.outbound import RecordStore
from .submit_consultation_service import DATABASE_NOT_CONFIGURED

logger = structlog.get_logger()

MISSING_EVENT_OR_SOURCE = "이벤트와 출처는 필수입니다."
TRACKING_SAVE_FAILED = "추적 데이터 저장 중 오류가 발생했습니다."


class TrackEventService(TrackEventUseCase):
    """Validates and persists a tracking event. No notifications."""

    def __init__(self, record_store: RecordStore | None):
        self._record_store = record_store

    async def execute(self, dto: TrackingEventDTO) -> list[dict]:
        if not dto.event or not dto.source:
            raise ValidationError(MISSING_EVENT_OR_SOURCE)

        if self._record_store is None:
            logger.error("Record store unavailable - persistence configuration missing")
            raise ConfigurationError(DATABASE_NOT_CONFIGURED)

        tracking_event = TrackingEvent.create(
            event=dto.event,
            source=dto.source,
            timestamp=dto.timestamp,
            metadata=dto.metadata,
        )
        try:
            data = await self._record_store.insert(TRACKING_LOGS_TABLE, [tracking_event.to_record()])
        except PersistenceError as e:
            logger.error("Tracking insert rejected", details=e.details)
            raise PersistenceError(TRACKING_SAVE_FAILED, details=e.details) from e

        logger.info("Tracking event stored", tracking_event=tracking_event.event, source=tracking_event.source)
        return data
