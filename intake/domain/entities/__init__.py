from .consultation import UNKNOWN_CLICK_SOURCE, ConsultationRequest
from .tracking_event import TrackingEvent

__all__ = ["ConsultationRequest", "TrackingEvent", "UNKNOWN_CLICK_SOURCE"]
