import logging
import warnings

from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_DEFAULT_KEY = "kP3v9QeZ2mL0tYbW8rXcN5sHaJ4dUf6gE1iOq7wRzTy"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url_sync: str = "sqlite:///chefai.db"

    # Auth
    secret_key: str = _INSECURE_DEFAULT_KEY
    access_token_expire_minutes: int = 60
    refresh_token_expire_days: int = 7
    admin_emails: list[str] = []

    # Stripe
    stripe_secret_key: str = ""
    stripe_webhook_secret: str = ""
    stripe_pro_price_id: str = ""
    tip_amount_cents: int = 200
    platform_fee_cents: int = 50

    # Generative AI
    google_api_key: str = ""
    genai_model: str = "gemini-1.5-flash-latest"
    official_account_email: str = "chef@chefai.app"

    # App
    app_name: str = "ChefAI"
    frontend_url: str = "http://localhost:3000"
    debug: bool = False


settings = Settings()

# Warn loudly when using the default secret key
_log = logging.getLogger(__name__)
if settings.secret_key == _INSECURE_DEFAULT_KEY:
    msg = (
        "SECRET_KEY is using the insecure default value. "
        "Set SECRET_KEY in your .env file for production."
    )
    _log.warning(msg)
    if not settings.debug:
        warnings.warn(msg, stacklevel=1)
