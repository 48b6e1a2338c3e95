"""
Notes App Backend — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Nothing here is required: every setting has a development default, and the
application keeps no state outside process memory.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    app_name: str = Field(default="Notes App")

    # ── Notes & Categories ────────────────────────────────────────────────
    # What: Insert the "Welcome to Notes App" note when the server starts
    seed_welcome_note: bool = Field(default=True)

    # What: Color given to categories created without one (CSS color string)
    default_category_color: str = Field(default="#6c757d", min_length=1)

    # ── Front End ─────────────────────────────────────────────────────────
    # What: Directory holding the compiled single-page client (index.html + assets)
    # When unset or missing on disk, only the API is served
    static_dir: Optional[str] = Field(default=None)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8080, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
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

    # ── Rate Limiting ─────────────────────────────────────────────────────
    # What: Per-IP sliding window rate limit
    rate_limit_enabled: bool = Field(default=True)
    rate_limit_requests: int = Field(default=1000, ge=10, le=100000)
    rate_limit_window: int = Field(default=3600, ge=60, le=86400)  # seconds

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported throughout the application
settings = Settings()
