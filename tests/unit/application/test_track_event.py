import pytest

from intake.application.dtos import TrackingEventDTO
from intake.application.services import TrackEventService
from intake.application.services.submit_consultation_service import DATABASE_NOT_CONFIGURED
from intake.application.services.track_event_service import (
    MISSING_EVENT_OR_SOURCE,
    TRACKING_SAVE_FAILED,
)
from intake.domain.errors import ConfigurationError, PersistenceError, ValidationError


class TestTrackEventService:
    @pytest.fixture
    def service(self, mock_record_store):
        return TrackEventService(record_store=mock_record_store)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "event, source",
        [(None, "daangn"), ("page_view", None), ("", "daangn"), ("page_view", "")],
    )
    async def test_missing_event_or_source_rejected(self, service, event, source, mock_record_store):
        with pytest.raises(ValidationError) as exc_info:
            await service.execute(TrackingEventDTO(event=event, source=source))

        assert exc_info.value.message == MISSING_EVENT_OR_SOURCE
        mock_record_store.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_unconfigured_persistence(self):
        service = TrackEventService(record_store=None)

        with pytest.raises(ConfigurationError) as exc_info:
            await service.execute(TrackingEventDTO(event="page_view", source="daangn"))

        assert exc_info.value.message == DATABASE_NOT_CONFIGURED

    @pytest.mark.asyncio
    async def test_defaults_timestamp_and_metadata(self, service, mock_record_store):
        data = await service.execute(TrackingEventDTO(event="page_view", source="daangn"))

        table, rows = mock_record_store.insert.call_args[0]
        assert table == "tracking_logs"
        assert rows[0]["metadata"] == {}
        assert rows[0]["timestamp"]
        assert data[0]["event"] == "page_view"

    @pytest.mark.asyncio
    async def test_keeps_provided_timestamp_and_metadata(self, service, mock_record_store):
        await service.execute(
            TrackingEventDTO(
                event="click",
                source="daangn",
                timestamp="2024-05-01T10:00:00Z",
                metadata={"position": "top"},
            )
        )

        rows = mock_record_store.insert.call_args[0][1]
        assert rows[0]["timestamp"] == "2024-05-01T10:00:00Z"
        assert rows[0]["metadata"] == {"position": "top"}

    @pytest.mark.asyncio
    async def test_persistence_rejection(self, service, mock_record_store):
        mock_record_store.insert.side_effect = PersistenceError("Supabase insert rejected", details="bad column")

        with pytest.raises(PersistenceError) as exc_info:
            await service.execute(TrackingEventDTO(event="page_view", source="daangn"))

        assert exc_info.value.message == TRACKING_SAVE_FAILED
        assert exc_info.value.details == "bad column"
