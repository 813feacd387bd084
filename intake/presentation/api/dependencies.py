from fastapi import Depends

from ...application.services import SubmitConsultationService, TrackEventService
from ...config import Settings, get_settings
from ...infrastructure.notifications import SlackWebhookNotifier, create_email_notifier
from ...infrastructure.notifications.email import MailApiEmailNotifier
from ...infrastructure.persistence import SupabaseRecordStore, create_record_store

# No module-level singletons: configuration is read and clients are built per request.


def get_record_store(settings: Settings = Depends(get_settings)) -> SupabaseRecordStore | None:
    return create_record_store(settings)


def get_email_notifier(settings: Settings = Depends(get_settings)) -> MailApiEmailNotifier | None:
    return create_email_notifier(settings)


def get_chat_notifier(settings: Settings = Depends(get_settings)) -> SlackWebhookNotifier:
    return SlackWebhookNotifier(
        webhook_url=settings.slack_webhook_url,
        timeout=settings.slack_timeout_seconds,
    )


def get_submit_consultation_service(
    record_store: SupabaseRecordStore | None = Depends(get_record_store),
    chat_notifier: SlackWebhookNotifier = Depends(get_chat_notifier),
    email_notifier: MailApiEmailNotifier | None = Depends(get_email_notifier),
) -> SubmitConsultationService:
    return SubmitConsultationService(
        record_store=record_store,
        chat_notifier=chat_notifier,
        email_notifier=email_notifier,
    )


def get_track_event_service(
    record_store: SupabaseRecordStore | None = Depends(get_record_store),
) -> TrackEventService:
    return TrackEventService(record_store=record_store)
