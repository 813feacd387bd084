from .consultation_dto import ConsultationSubmissionDTO
from .tracking_dto import TrackingEventDTO

__all__ = ["ConsultationSubmissionDTO", "TrackingEventDTO"]
