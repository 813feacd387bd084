from typing import Any

from pydantic import BaseModel


class TrackingEventDTO(BaseModel):
    """Body of ``POST /track``."""

    event: str | None = None
    source: str | None = None
    timestamp: str | None = None
    metadata: dict[str, Any] | None = None
