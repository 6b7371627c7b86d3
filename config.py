"""
reCAPTCHA configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).

The endpoints default to Google's public hosts; self-hosters behind a firewall
can point both at www.recaptcha.net instead.
"""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_SERVER = "https://www.google.com/recaptcha/api"
DEFAULT_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"


class ReCaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    recaptcha_site_key: str = ""
    recaptcha_secret_key: str = ""

    recaptcha_api_server: str = DEFAULT_API_SERVER
    recaptcha_verify_url: str = DEFAULT_VERIFY_URL

    # Enforced by HttpClient, never by the provider itself
    recaptcha_timeout_seconds: float = 5.0

    # Widget defaults applied to every config built from settings
    recaptcha_noscript: bool = False
    recaptcha_theme: Optional[str] = None
    recaptcha_size: Optional[str] = None
    recaptcha_hl: Optional[str] = None

    def widget_options(self) -> dict:
        """Return only the display options that were explicitly configured."""
        options = {
            "theme": self.recaptcha_theme,
            "size": self.recaptcha_size,
            "hl": self.recaptcha_hl,
        }
        return {k: v for k, v in options.items() if v is not None}


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"
    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production

    @property
    def is_production(self) -> bool:
        return self.env == "production"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"

    # Sub-configs (composed via model_validator below)
    recaptcha: Optional[ReCaptchaSettings] = None
    logging: Optional[LoggingSettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        # Populate sub-configs from the same env/dotenv source
        if self.recaptcha is None:
            self.recaptcha = ReCaptchaSettings()
        if self.logging is None:
            self.logging = LoggingSettings()

        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"
