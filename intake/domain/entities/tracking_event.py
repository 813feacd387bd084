from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

TRACKING_LOGS_TABLE = "tracking_logs"


def _utc_now_iso() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class TrackingEvent:
    """Analytics event reported by the marketing site."""

    event: str
    source: str
    timestamp: str
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        event: str,
        source: str,
        timestamp: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> "TrackingEvent":
        """Factory method; missing timestamp means now, missing metadata means empty."""
        return cls(
            event=event,
            source=source,
            timestamp=timestamp or _utc_now_iso(),
            metadata=dict(metadata) if metadata else {},
        )

    def to_record(self) -> dict:
        """Row for the ``tracking_logs`` table."""
        return {
            "event": self.event,
            "source": self.source,
            "timestamp": self.timestamp,
            "metadata": self.metadata,
        }
