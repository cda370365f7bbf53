# brewmind/config.py
import os
from typing import Optional
from pydantic import BaseModel

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 60.0


class Settings(BaseModel):
    """Relay configuration, read from the process environment."""
    google_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_MODEL
    bot_username: Optional[str] = None
    bot_password: Optional[str] = None
    api_base: str = DEFAULT_API_BASE
    provider_timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @property
    def auth_enabled(self) -> bool:
        return bool(self.bot_username and self.bot_password)


def _timeout_from_env() -> float:
    raw = os.getenv("PROVIDER_TIMEOUT")
    try:
        timeout = float(raw) if raw else DEFAULT_TIMEOUT
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


def get_settings() -> Settings:
    # Not cached: the credential check runs against the environment on every request
    return Settings(
        google_api_key=os.getenv("GOOGLE_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        bot_username=os.getenv("BOT_USERNAME") or None,
        bot_password=os.getenv("BOT_PASSWORD") or None,
        api_base=(os.getenv("GEMINI_API_BASE") or DEFAULT_API_BASE).rstrip("/"),
        provider_timeout=_timeout_from_env(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
