from .notifiers import ChatNotifier, EmailNotifier
from .record_store import RecordStore

__all__ = ["ChatNotifier", "EmailNotifier", "RecordStore"]
