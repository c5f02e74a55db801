"""Application configuration loaded from environment variables."""

import logging
import sys

from pydantic import Field
from pydantic_settings import BaseSettings

logger = logging.getLogger("uvicorn.error")

MISSING_API_KEY_MESSAGE = "GEMINI_API_KEY is missing in .env file!"


class Settings(BaseSettings):
    """Type-safe configuration sourced from .env / environment."""

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_temperature: float | None = None

    # Knowledge document
    knowledge_path: str = "medical_data.txt"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    max_request_bytes: int = Field(default=50 * 1024 * 1024)  # base64 audio
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    # Prompt
    audio_mime_type: str = "audio/wav"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def ensure_api_key(config: Settings | None = None) -> None:
    """Exit the process when the Gemini credential is not configured."""
    config = config or settings
    if not config.gemini_api_key:
        logger.error(MISSING_API_KEY_MESSAGE)
        sys.exit(1)
