from itertools import count
from unittest.mock import AsyncMock

import pytest

from intake.domain.value_objects import NotificationOutcome

INTAKE_ENV_VARS = [
    "SUPABASE_URL",
    "NEXT_PUBLIC_SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "NEXT_PUBLIC_SUPABASE_ANON_KEY",
    "MAIL_API_URL",
    "MAIL_API_LOGIN",
    "MAIL_API_KEY",
    "MAIL_SENDER_EMAIL",
    "MAIL_SENDER_NAME",
    "CONSULTATION_NOTIFY_EMAIL",
    "SLACK_WEBHOOK_URL",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No intake variables and no stray .env file."""
    for var in INTAKE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def mock_record_store():
    """Record store echoing inserted rows with a fresh id, like PostgREST."""
    ids = count(1)

    def _insert(table, rows):
        return [{"id": next(ids), **row} for row in rows]

    store = AsyncMock()
    store.insert.side_effect = _insert
    return store


@pytest.fixture
def mock_chat_notifier():
    notifier = AsyncMock()
    notifier.send.return_value = NotificationOutcome.ok()
    return notifier


@pytest.fixture
def mock_email_notifier():
    notifier = AsyncMock()
    notifier.send_consultation_notice.return_value = NotificationOutcome.ok()
    return notifier
