"""Configuration management for formatsig."""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()


class Settings(BaseModel):
    """Application settings."""

    model_config = ConfigDict(validate_default=True)

    # Same-position type conflicts: 'strict' raises, 'lenient' keeps the first type
    conflict_mode: Literal["strict", "lenient"] = os.getenv(
        "FORMATSIG_CONFLICT_MODE", "strict"
    ).lower()

    # Locale other variants are compared against when checking consistency
    base_locale: str = os.getenv("FORMATSIG_BASE_LOCALE", "en")

    # Logging level for the CLI
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = os.getenv(
        "FORMATSIG_LOG_LEVEL", "WARNING"
    ).upper()


settings = Settings()
