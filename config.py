"""
Centralised settings loader.

Values come from the environment (or a local `.env`) via pydantic-settings.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ────────────────────────────────────────────────────
    env_name: str = Field("local")
    log_level: str = Field("INFO")

    # ─── Gemini ─────────────────────────────────────────────────────
    gemini_api_key: str | None = Field(None)
    chat_model: str = Field("models/gemini-2.0-flash")
    support_model: str = Field("models/gemini-2.0-flash")
    temperature: float = Field(0.7)
    max_output_tokens: int = Field(2000)

    # allow other teammates’ env-vars without crashing
    model_config = {"extra": "ignore", "env_file": ".env", "env_file_encoding": "utf-8"}


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
