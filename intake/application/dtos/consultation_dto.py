"""Consultation submission DTO.

Presence rules (non-empty name/contact, agreed privacy policy) are enforced by
the service so the client receives the localized messages, not schema errors.
Values are stored exactly as received.
"""

from pydantic import BaseModel, ConfigDict, Field


class ConsultationSubmissionDTO(BaseModel):
    """Body of ``POST /submit``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    contact: str | None = None
    privacy_agreed: bool | None = Field(default=None, alias="privacyAgreed")
    click_source: str | None = Field(default=None, alias="clickSource")
