from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from src.reader_config import DEFAULT_READER_CONFIG, TranscriptionBackend


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    Reader defaults come from ``DEFAULT_READER_CONFIG``.
    """

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""

    # Transcription
    transcription_backend: TranscriptionBackend = TranscriptionBackend.MOCK
    assemblyai_api_key: str = ""  # Only needed when transcription_backend=assemblyai
    mock_transcription_delay: float = 2.0

    # App config
    api_url: str = "http://localhost:8000"
    log_level: str = "INFO"
    snippet_char_budget: int = Field(default=DEFAULT_READER_CONFIG.char_budget, gt=0)
    default_scroll_limit: int = DEFAULT_READER_CONFIG.default_scroll_limit

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
