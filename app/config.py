import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


# === Defaults ===
DEFAULT_PRIMARY_MODEL = "gemini-pro"
DEFAULT_FALLBACK_MODEL = "gpt-4"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass(frozen=True)
class Settings:
    google_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    primary_model: str = DEFAULT_PRIMARY_MODEL
    fallback_model: str = DEFAULT_FALLBACK_MODEL
    provider_timeout: Optional[float] = None   # seconds per provider call, None = no limit
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    log_file: Optional[str] = None             # e.g. "summarizer.log", written under logs/


def load_settings() -> Settings:
    """
    Build settings from the process environment (.env is loaded at import).
    Credentials are not validated here; a missing key only shows up when the
    matching provider is first called.
    """
    return Settings(
        google_api_key=os.environ.get("GOOGLE_API_KEY") or None,
        openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
        primary_model=os.environ.get("PRIMARY_MODEL", DEFAULT_PRIMARY_MODEL),
        fallback_model=os.environ.get("FALLBACK_MODEL", DEFAULT_FALLBACK_MODEL),
        provider_timeout=_optional_float(os.environ.get("PROVIDER_TIMEOUT_SECONDS")),
        host=os.environ.get("HOST", DEFAULT_HOST),
        port=int(os.environ.get("PORT", DEFAULT_PORT)),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        log_file=os.environ.get("LOG_FILE") or None,
    )
