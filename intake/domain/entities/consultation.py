from dataclasses import dataclass

CONSULTATIONS_TABLE = "consultations"
UNKNOWN_CLICK_SOURCE = "unknown"


@dataclass(frozen=True)
class ConsultationRequest:
    """Consultation request submitted from the marketing site.

    Append-only: created once per valid submission and never updated by this
    service. Completion is tracked elsewhere.
    """

    name: str
    contact: str
    click_source: str = UNKNOWN_CLICK_SOURCE
    is_completed: bool = False

    @classmethod
    def create(
        cls,
        name: str,
        contact: str,
        click_source: str | None = None,
    ) -> "ConsultationRequest":
        """Factory method for a new, not yet completed request."""
        return cls(
            name=name,
            contact=contact,
            click_source=click_source or UNKNOWN_CLICK_SOURCE,
            is_completed=False,
        )

    def to_record(self) -> dict:
        """Row for the ``consultations`` table. The backend adds id and created_at."""
        return {
            "name": self.name,
            "contact": self.contact,
            "is_completed": self.is_completed,
            "click_source": self.click_source,
        }

    def generate_notification_text(self) -> str:
        """Plain-text summary used by the chat notification."""
        return "\n".join(
            [
                "📞 새 상담 신청이 접수되었습니다.",
                f"• 이름: {self.name}",
                f"• 연락처: {self.contact}",
                f"• 유입 경로: {self.click_source}",
            ]
        )
