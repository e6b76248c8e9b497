"""
Configuration management for collab-match.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from collab_match.utils.constants import (
    APP_NAME,
    DEFAULT_SCORING_WEIGHTS,
    MATCH_SCORE_THRESHOLD,
    MAX_RECOMMENDATION_REASONS,
    TOP_SKILLS_LIMIT,
    VERSION,
)


class MatchingSettings(BaseSettings):
    """Matching engine configuration."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    threshold: float = Field(default=MATCH_SCORE_THRESHOLD, ge=0, le=100)

    # Component weights, must sum to 1
    skills_weight: float = Field(default=DEFAULT_SCORING_WEIGHTS["skills"], ge=0, le=1)
    interests_weight: float = Field(default=DEFAULT_SCORING_WEIGHTS["interests"], ge=0, le=1)
    availability_weight: float = Field(default=DEFAULT_SCORING_WEIGHTS["availability"], ge=0, le=1)
    location_weight: float = Field(default=DEFAULT_SCORING_WEIGHTS["location"], ge=0, le=1)
    experience_weight: float = Field(default=DEFAULT_SCORING_WEIGHTS["experience"], ge=0, le=1)

    max_reasons: int = Field(default=MAX_RECOMMENDATION_REASONS, ge=0)
    top_skills_limit: int = Field(default=TOP_SKILLS_LIMIT, ge=1)

    @model_validator(mode="after")
    def validate_weights_sum(self) -> "MatchingSettings":
        """Validate that component weights sum to 1.0."""
        total = sum(self.weights.values())
        if abs(total - 1.0) > 0.01:
            raise ValueError(f"Matching weights must sum to 1.0, got {total:.2f}")
        return self

    @property
    def weights(self) -> dict[str, float]:
        """Component weights keyed the same way as DEFAULT_SCORING_WEIGHTS."""
        return {
            "skills": self.skills_weight,
            "interests": self.interests_weight,
            "availability": self.availability_weight,
            "location": self.location_weight,
            "experience": self.experience_weight,
        }


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Optional[Path] = None
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = APP_NAME
    version: str = VERSION
    description: str = "Rule-based collaborator-to-project matching"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
