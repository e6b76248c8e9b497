"""
Pydantic data models for collab-match.

This module provides all data models used throughout the application:
candidate profiles, project requirements, match results and analytics.
"""

# Base models
from .base import EmbeddedModel, TimestampMixin

# Profile models
from .profile import (
    CandidateProfile,
    CandidateProfileCreate,
    MatchHistoryEntry,
    ProfileSkill,
)

# Project models
from .project import ProjectRequirements, RequiredSkill

# Match models
from .match import (
    MatchingAnalytics,
    MatchResult,
    SkillFrequency,
    SkillMatch,
    SkillMatchResult,
)

__all__ = [
    # Base
    "EmbeddedModel",
    "TimestampMixin",
    # Profile
    "CandidateProfile",
    "CandidateProfileCreate",
    "MatchHistoryEntry",
    "ProfileSkill",
    # Project
    "ProjectRequirements",
    "RequiredSkill",
    # Match
    "MatchingAnalytics",
    "MatchResult",
    "SkillFrequency",
    "SkillMatch",
    "SkillMatchResult",
]
