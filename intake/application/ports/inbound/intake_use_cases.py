from abc import ABC, abstractmethod

from ...dtos import ConsultationSubmissionDTO, TrackingEventDTO


class SubmitConsultationUseCase(ABC):
    """Inbound port for submitting a consultation request."""

    @abstractmethod
    async def execute(self, dto: ConsultationSubmissionDTO) -> list[dict]:
        pass


class TrackEventUseCase(ABC):
    """Inbound port for recording a tracking event."""

    @abstractmethod
    async def execute(self, dto: TrackingEventDTO) -> list[dict]:
        pass
