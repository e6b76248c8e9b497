"""
Match and analytics models for collab-match.

Defines the scored result of matching a profile to a project and the
aggregate analytics over the matching pool.
"""

from pydantic import Field, computed_field

from collab_match.utils.constants import MISSING_SKILL_LEVEL, MatchScoreLevel

from .base import EmbeddedModel
from .profile import CandidateProfile


class SkillMatch(EmbeddedModel):
    """Contribution of one required skill to a profile's skill score."""

    skill: str
    profile_level: str  # "none" if the profile lacks the skill
    required_level: str
    score_contribution: int = 0  # before the priority multiplier
    related_match: bool = False  # True if matched through a related skill

    @property
    def found(self) -> bool:
        return self.profile_level != MISSING_SKILL_LEVEL


class SkillMatchResult(EmbeddedModel):
    """Overall skill score with its per-skill breakdown."""

    overall_score: int = Field(..., ge=0, le=100)
    matches: list[SkillMatch] = Field(default_factory=list)


class MatchResult(EmbeddedModel):
    """Score of one profile against one set of project requirements."""

    profile: CandidateProfile
    match_score: int = Field(..., ge=0, le=100)

    # Component scores
    skill_score: int = 0
    skill_matches: list[SkillMatch] = Field(default_factory=list)
    interest_alignment: int = 0
    availability_match: bool = False
    location_match: bool = False
    experience_bonus: int = 0

    confidence_score: int = Field(default=0, ge=0, le=100)
    recommendation_reasons: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def score_level(self) -> MatchScoreLevel:
        """Categorical level of the match score."""
        return MatchScoreLevel.from_score(self.match_score)

    @property
    def profile_id(self) -> str:
        return self.profile.id

    @property
    def matched_skills(self) -> list[str]:
        """Required skills the profile holds (exactly or through a related skill)."""
        return [m.skill for m in self.skill_matches if m.found]

    @property
    def missing_skills(self) -> list[str]:
        """Required skills the profile lacks."""
        return [m.skill for m in self.skill_matches if not m.found]


class SkillFrequency(EmbeddedModel):
    """How many profiles list a given skill."""

    skill: str
    count: int = Field(..., ge=0)


class MatchingAnalytics(EmbeddedModel):
    """Aggregate statistics over the matching pool."""

    total_profiles: int = 0
    active_profiles: int = 0
    top_skills: list[SkillFrequency] = Field(default_factory=list)
    average_skills_per_profile: float = 0.0
    verification_rate: float = Field(default=0.0, ge=0, le=1)  # verified / total skill entries
