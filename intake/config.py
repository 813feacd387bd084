from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAIL_API_URL = "https://api.mailjet.com/v3.1/send"


class Settings(BaseSettings):
    """Service settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Service
    service_name: str = "lead-intake"
    log_level: str = "INFO"
    debug: bool = False

    # Supabase (PostgREST)
    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_url", "next_public_supabase_url"),
    )
    supabase_service_role_key: str = ""
    supabase_anon_key: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_anon_key", "next_public_supabase_anon_key"),
    )
    supabase_timeout_seconds: float = 10.0

    # Transactional mail API
    mail_api_url: str = DEFAULT_MAIL_API_URL
    mail_api_login: str = ""
    mail_api_key: str = ""
    mail_sender_email: str = ""
    mail_sender_name: str = "상담 알림"
    consultation_notify_email: str = ""
    mail_timeout_seconds: float = 25.0

    # Slack incoming webhook
    slack_webhook_url: str = ""
    slack_timeout_seconds: float = 5.0

    @property
    def supabase_key(self) -> str:
        """Service role key, falling back to the anon key."""
        return self.supabase_service_role_key or self.supabase_anon_key

    @property
    def persistence_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    @property
    def email_configured(self) -> bool:
        return bool(self.mail_api_login and self.mail_api_key)


def get_settings() -> Settings:
    """Read settings from the environment at call time."""
    return Settings()
