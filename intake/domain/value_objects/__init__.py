from .notification_outcome import NotificationOutcome

__all__ = ["NotificationOutcome"]
