from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    google_api_key: Optional[str] = os.getenv("GOOGLE_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    temperature: float = float(os.getenv("MODEL_TEMPERATURE", "0.7"))
    top_p: float = float(os.getenv("MODEL_TOP_P", "0.95"))
    chat_history_limit: int = int(os.getenv("CHAT_HISTORY_LIMIT", "10"))
    chat_context_chars: int = int(os.getenv("CHAT_CONTEXT_CHARS", "20000"))
    summary_input_chars: int = int(os.getenv("SUMMARY_INPUT_CHARS", "30000"))
    file_preview_chars: int = int(os.getenv("FILE_PREVIEW_CHARS", "5000"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
