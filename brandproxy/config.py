# brandproxy/config.py
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

# Settings are resolved once on startup and shared read-only afterwards
_settings: Optional["ProxySettings"] = None


class ProxySettings(BaseModel):
    brandfetch_api_key: Optional[str] = Field(
        None, description="Server-side fallback Brandfetch API key."
    )
    log_level: str = Field("INFO", description="Root logging level.")

    @field_validator("brandfetch_api_key", mode="before")
    @classmethod
    def blank_key_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value):
        # Unknown names would make logging.basicConfig raise on import
        level = str(value or "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            return "INFO"
        return level


def read_settings() -> ProxySettings:
    """Builds settings from the process environment (and a local .env file)."""
    load_dotenv()
    return ProxySettings(
        brandfetch_api_key=os.getenv("BRANDFETCH_API_KEY"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


def load_settings() -> ProxySettings:
    """Loads settings into the module-wide slot. Called on application startup."""
    global _settings
    if _settings is None:
        _settings = read_settings()
        if _settings.brandfetch_api_key:
            logger.info("Fallback Brandfetch API key configured.")
        else:
            logger.warning(
                "BRANDFETCH_API_KEY not set; callers must send X-User-Api-Key."
            )
    return _settings


def reset_settings():
    global _settings
    _settings = None


def get_settings() -> ProxySettings:
    """
    Returns the loaded settings.
    Ensures that load_settings() has been called, typically during app startup.
    """
    if _settings is None:
        raise RuntimeError("Settings not loaded. Call load_settings() on application startup.")
    return _settings
