from .intake_use_cases import SubmitConsultationUseCase, TrackEventUseCase

__all__ = ["SubmitConsultationUseCase", "TrackEventUseCase"]
