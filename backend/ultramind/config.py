"""
UltraMind Backend: Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types and ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; the Gemini key is checked before
       the server accepts any request (see main.run and main.lifespan).

Only GEMINI_API_KEY is required. Everything else has a development default:

    GEMINI_API_KEY   Google Gemini API key (required)
    GEMINI_MODEL     Model used for analysis (gemini-2.5-flash)
    BACKEND_HOST     Bind address (0.0.0.0)
    BACKEND_PORT     Listen port (3000)
    LOG_LEVEL        DEBUG, INFO, WARNING, ERROR or CRITICAL (INFO)
    CORS_ORIGIN      Value of Access-Control-Allow-Origin (*)
    MAX_FILE_SIZE    Largest accepted PDF upload in bytes (10MB)
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

# Value shipped in .env.example; treated the same as an unset key
PLACEHOLDER_API_KEY = "your_gemini_api_key_here"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability. The instance is
    never mutated after startup.
    """

    # ── Google Gemini ─────────────────────────────────────────────────────
    # How to obtain: https://aistudio.google.com/app/apikey
    gemini_api_key: str = Field(
        default="",
        description="Google Gemini API key used for document analysis",
    )

    gemini_model: str = Field(default="gemini-2.5-flash")

    # ── Uploads ───────────────────────────────────────────────────────────
    # Uploads are buffered in memory, so the cap bounds per-request memory.
    # Default: 10MB = 10 * 1024 * 1024 = 10485760
    max_file_size: int = Field(default=10_485_760, ge=1_048_576, le=52_428_800)

    # ── CORS ──────────────────────────────────────────────────────────────
    # The front-end page may be served from anywhere (including file://)
    cors_origin: str = Field(default="*")

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # GEMINI_API_KEY and gemini_api_key both work
        "extra": "ignore",
    }

    @property
    def gemini_configured(self) -> bool:
        """True when a usable (non-placeholder) API key is present."""
        return bool(self.gemini_api_key) and self.gemini_api_key != PLACEHOLDER_API_KEY

    def validate_required_for_production(self) -> None:
        """
        Fail-fast check for settings the server cannot run without.

        Raises:
            ValueError naming every missing variable.
        """
        errors = []
        if not self.gemini_configured:
            errors.append(
                "GEMINI_API_KEY not found in environment or .env file. "
                "Get a key at https://aistudio.google.com/app/apikey"
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance, imported throughout the application
settings = Settings()
