"""Error taxonomy for the intake flow.

Every error carries the HTTP status and the user-facing (Korean) message the
presentation layer renders. ``NotificationError`` never reaches a caller.
"""


class IntakeError(Exception):
    """Base class for errors surfaced by the intake services."""

    status_code: int = 500

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict:
        payload = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(IntakeError):
    """Client input defect."""

    status_code = 400


class ConfigurationError(IntakeError):
    """Deployment or environment defect."""

    status_code = 500


class PersistenceError(IntakeError):
    """The backend rejected the write; ``details`` holds the provider message."""

    status_code = 500


class NotificationError(IntakeError):
    """Best-effort notification failure. Logged, never escalated."""

    status_code = 500
