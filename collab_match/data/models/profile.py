"""
Candidate profile models for collab-match.

Defines the schema for community members available for matching:
their skills, interests, availability and past match outcomes.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from collab_match.utils.constants import SkillLevel

from .base import EmbeddedModel, TimestampMixin, utc_now


class ProfileSkill(EmbeddedModel):
    """A single skill held by a community member."""

    skill: str = Field(..., min_length=1)
    level: SkillLevel
    experience: str = ""  # e.g. "8 years organizing housing justice campaigns"
    verified: bool = False

    @field_validator("skill")
    @classmethod
    def strip_skill_name(cls, v: str) -> str:
        """Trim surrounding whitespace, keeping the display casing."""
        return v.strip()


class MatchHistoryEntry(EmbeddedModel):
    """Outcome of a past match. Immutable once recorded."""

    model_config = ConfigDict(frozen=True)

    project_id: str
    match_score: float = Field(..., ge=0, le=100)
    joined: bool
    recorded_at: datetime = Field(default_factory=utc_now)


class CandidateProfileCreate(EmbeddedModel):
    """Input for adding a profile to the matching pool."""

    user_name: str = Field(..., min_length=1, max_length=200)
    user_email: Optional[str] = None
    bio: Optional[str] = None

    skills: list[ProfileSkill] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)

    availability: str = ""  # e.g. "10-15 hours/week"
    preferred_commitment: str = ""  # e.g. "3-6 months"
    location: Optional[str] = None

    is_active: bool = True

    @field_validator("interests")
    @classmethod
    def dedupe_interests(cls, v: list[str]) -> list[str]:
        """Interests are a set of labels; drop blanks and repeats, keep order."""
        seen: set[str] = set()
        result = []
        for interest in v:
            label = interest.strip()
            if label and label.lower() not in seen:
                seen.add(label.lower())
                result.append(label)
        return result


class CandidateProfile(CandidateProfileCreate, TimestampMixin):
    """
    A community member in the matching pool.

    Profiles are never deleted; set ``is_active`` to False to take one
    out of matching. ``match_history`` only grows.
    """

    id: str = Field(..., min_length=1)
    match_history: list[MatchHistoryEntry] = Field(default_factory=list)

    @property
    def verified_skills(self) -> list[ProfileSkill]:
        """Skills marked as verified."""
        return [s for s in self.skills if s.verified]

    @property
    def verified_skill_count(self) -> int:
        return len(self.verified_skills)
