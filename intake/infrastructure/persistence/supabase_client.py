"""Supabase persistence over the PostgREST HTTP API."""

import httpx
import structlog

from ...application.ports.outbound import RecordStore
from ...config import Settings
from ...domain.errors import PersistenceError
from ..logging import redact_secret

logger = structlog.get_logger()


class SupabaseRecordStore(RecordStore):
    """Inserts rows through ``/rest/v1/<table>`` and returns the stored rows."""

    def __init__(self, url: str, api_key: str, timeout: float = 10.0) -> None:
        self._base_url = url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout

    async def insert(self, table: str, rows: list[dict]) -> list[dict]:
        url = f"{self._base_url}/rest/v1/{table}"
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(url, headers=headers, json=rows)
        except httpx.HTTPError as e:
            logger.error("Supabase request failed", table=table, error=str(e), error_type=type(e).__name__)
            raise PersistenceError("Supabase request failed", details=str(e)) from e

        if not response.is_success:
            details = _error_message(response)
            logger.error(
                "Supabase insert rejected",
                table=table,
                status_code=response.status_code,
                details=details,
            )
            raise PersistenceError("Supabase insert rejected", details=details)

        try:
            return response.json()
        except ValueError as e:
            logger.error("Supabase returned an unreadable body", table=table, status_code=response.status_code)
            raise PersistenceError(
                "Supabase response unreadable",
                details=f"HTTP {response.status_code}: {e}",
            ) from e


def _error_message(response: httpx.Response) -> str:
    """PostgREST reports errors as ``{"message", "code", "details", "hint"}``."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text or f"HTTP {response.status_code}"


def create_record_store(settings: Settings) -> SupabaseRecordStore | None:
    """Build the record store, or return None when credentials are absent."""
    logger.info(
        "Persistence configuration",
        url_configured=bool(settings.supabase_url),
        service_role_key=redact_secret(settings.supabase_service_role_key),
        anon_key=redact_secret(settings.supabase_anon_key),
    )
    if not settings.persistence_configured:
        return None
    return SupabaseRecordStore(
        url=settings.supabase_url,
        api_key=settings.supabase_key,
        timeout=settings.supabase_timeout_seconds,
    )
