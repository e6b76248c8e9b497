"""
Base model classes for collab-match data models.

Provides common configuration shared across all models.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class EmbeddedModel(BaseModel):
    """
    Base model for all collab-match records.

    Fields are declared in snake_case and also accept the camelCase
    names used by the surrounding web service (``requiredSkills``,
    ``remoteOk``, ...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )


class TimestampMixin(EmbeddedModel):
    """Mixin providing a creation timestamp."""

    created_at: datetime = Field(default_factory=utc_now)
