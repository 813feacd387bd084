"""
Structured logging configuration.

Centralized logging setup with:
- Structured JSON output
- Correlation ID (bound per request via structlog contextvars)
- Timing helper
- Secret redaction (prefix + length only)
"""

import logging
import sys
import time
from typing import Any

import structlog


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Configure structured logging for the service.

    Args:
        service_name: Name of the service for log context
        level: Minimum stdlib log level name
    """
    # structlog.stdlib.LoggerFactory wraps stdlib logging, so it needs a handler
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


class Timer:
    """
    Context manager for timing operations.

    Usage:
        with Timer() as t:
            await store.insert("consultations", rows)
        logger.info("Insert completed", duration_ms=t.duration_ms)
    """

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds, rounded to 2 decimal places."""
        return round((self._end - self._start) * 1000, 2)


def redact_secret(value: str | None, visible_chars: int = 4) -> dict[str, Any]:
    """
    Describe a secret for logging without revealing it.

    Only a short prefix and the length are ever exposed. Values too short to
    keep at least twice ``visible_chars`` hidden get no prefix at all.

    Args:
        value: The sensitive value (may be empty or None)
        visible_chars: Number of leading characters to show

    Returns:
        Mapping with ``configured``, ``preview`` and ``length`` keys
    """
    if not value:
        return {"configured": False, "preview": None, "length": 0}
    if len(value) <= visible_chars * 3:
        preview = "***"
    else:
        preview = value[:visible_chars] + "..."
    return {"configured": True, "preview": preview, "length": len(value)}
