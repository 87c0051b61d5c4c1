"""Configuration management for the scoring engine."""

from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "VENTURE_SCORING_"


class EngineSettings(BaseSettings):
    """Engine configuration from environment variables (prefix VENTURE_SCORING_)."""

    # Embeddings
    enable_embeddings: bool = False
    embedding_model_name: str = "sentence-transformers/all-MiniLM-L6-v2"

    # Optional model artefacts
    reliability_weights_path: Optional[str] = None
    risk_weights_path: Optional[str] = None
    scoring_weights_path: Optional[str] = None

    # Matching
    parallel_threshold: int = 25
    max_workers: int = 8

    # Record store (only needed by SupabaseRecordStore)
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


def validate_settings() -> EngineSettings:
    """Load and validate settings from the environment.

    Raises ValueError listing every invalid variable (not just the first one).
    """
    try:
        return EngineSettings()
    except ValidationError as exc:
        names = ", ".join(
            f"{ENV_PREFIX}{str(err['loc'][0]).upper()}" for err in exc.errors() if err.get("loc")
        )
        raise ValueError(
            f"Invalid environment variable(s): {names}. "
            "Please fix them in your .env file or environment."
        ) from exc


def load_settings() -> EngineSettings:
    """Load settings from environment (startup entry point)."""
    return validate_settings()
