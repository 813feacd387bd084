from .submit_consultation_service import SubmitConsultationService
from .track_event_service import TrackEventService

__all__ = ["SubmitConsultationService", "TrackEventService"]
