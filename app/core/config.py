"""
app/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; the hosting environment injects these at runtime.

Unlike a module-level singleton, ``Settings`` is built once at startup by
``load_settings()`` and handed to ``create_app()`` explicitly.
"""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import DEFAULT_PROMPT_TEMPLATE
from app.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "Document Summarizer API"
    app_version: str = "1.0.0"
    debug: bool = False
    dev_mode: bool = False       # exposes error details in 500 responses

    # ── Server ─────────────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = Field(default=5000, ge=1, le=65535)
    frontend_url: str = "http://localhost:5173"

    # ── AI provider (Gemini) ───────────────────────────────────────────────────
    gemini_api_key: str
    gemini_model: str = "gemini-1.5-flash"

    # ── Summarization pipeline ─────────────────────────────────────────────────
    max_prompt_chars: int = Field(default=30_000, gt=0)
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    prompt_template: str = DEFAULT_PROMPT_TEMPLATE

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("gemini_api_key")
    @classmethod
    def api_key_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("GEMINI_API_KEY must not be empty.")
        return v.strip()

    @field_validator("prompt_template")
    @classmethod
    def template_must_have_text_slot(cls, v: str) -> str:
        if "{text}" not in v:
            raise ValueError("PROMPT_TEMPLATE must contain a '{text}' placeholder.")
        return v


def load_settings(**overrides) -> Settings:
    """
    Build the Settings object from the environment (and optional overrides).

    Raises:
        ConfigurationError: If a required value is missing or invalid.
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration — {problems}") from exc
