from .email import MailApiEmailNotifier, create_email_notifier
from .slack import SlackWebhookNotifier

__all__ = ["MailApiEmailNotifier", "SlackWebhookNotifier", "create_email_notifier"]
