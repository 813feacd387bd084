from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class NotificationOutcome:
    """Result of a best-effort notification attempt. Never persisted."""

    success: bool
    reason: str | None = None
    status: int | None = None
    error: str | None = None

    @classmethod
    def ok(cls) -> "NotificationOutcome":
        return cls(success=True)

    @classmethod
    def skipped(cls, reason: str) -> "NotificationOutcome":
        return cls(success=False, reason=reason)

    @classmethod
    def failed(cls, error: str, status: int | None = None) -> "NotificationOutcome":
        return cls(success=False, status=status, error=error)

    def as_log_fields(self) -> dict:
        """Non-empty fields, for structured logging."""
        return {k: v for k, v in asdict(self).items() if v is not None}
