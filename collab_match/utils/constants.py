"""
Application-wide constants for collab-match.

This module contains all constant values used by the matching engine.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "collab-match"
APP_DISPLAY_NAME: Final[str] = "Community Collaborator Matching Engine"
VERSION: Final[str] = "1.0.0"

SUPPORTED_INPUT_FORMATS: Final[tuple[str, ...]] = (".json",)


# =============================================================================
# Enums
# =============================================================================


class SkillLevel(str, Enum):
    """Proficiency level of a skill."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class SkillPriority(str, Enum):
    """How important a required skill is to a project."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# =============================================================================
# Skill Scoring Constants
# =============================================================================

# Ordinal value of each proficiency level
SKILL_LEVEL_VALUES: Final[dict[str, int]] = {
    SkillLevel.BEGINNER.value: 1,
    SkillLevel.INTERMEDIATE.value: 2,
    SkillLevel.ADVANCED.value: 3,
    SkillLevel.EXPERT.value: 4,
}

PRIORITY_MULTIPLIERS: Final[dict[str, float]] = {
    SkillPriority.LOW.value: 1.0,
    SkillPriority.MEDIUM.value: 1.5,
    SkillPriority.HIGH.value: 2.0,
    SkillPriority.CRITICAL.value: 3.0,
}

SKILL_BASE_SCORE: Final[float] = 100.0
SKILL_EXCEED_BONUS_PER_LEVEL: Final[float] = 5.0
SKILL_EXCEED_BONUS_CAP: Final[float] = 20.0
SKILL_BELOW_LEVEL_SCALE: Final[float] = 80.0
SKILL_BELOW_LEVEL_FLOOR: Final[float] = 30.0
VERIFIED_SKILL_MULTIPLIER: Final[float] = 1.1
MISSING_REQUIRED_SKILL_SCORE: Final[float] = 10.0

# Skill score used when a project lists no skills at all
NEUTRAL_SKILL_SCORE: Final[int] = 75

# Profile level recorded for a required skill the profile lacks
MISSING_SKILL_LEVEL: Final[str] = "none"

# Related-skill keyword table used for fuzzy skill matching
SKILL_RELATIONS: Final[dict[str, tuple[str, ...]]] = {
    "Community Organizing": ("organizing", "activism", "advocacy", "campaign", "mobilization"),
    "Web Development": ("programming", "coding", "javascript", "react", "frontend", "backend"),
    "Graphic Design": ("design", "visual", "branding", "illustration", "creative"),
    "Event Planning": ("events", "coordination", "logistics", "planning"),
    "Grant Writing": ("fundraising", "grants", "funding", "proposals"),
    "Project Management": ("management", "coordination", "planning", "leadership"),
    "Social Media": ("marketing", "communications", "outreach", "digital"),
    "Mental Health": ("counseling", "therapy", "wellness", "healing", "support"),
}


# =============================================================================
# Interest Scoring Constants
# =============================================================================

INTEREST_CATEGORY_SCORE: Final[int] = 40
INTEREST_DESCRIPTION_SCORE: Final[int] = 20
THEMATIC_KEYWORD_SCORE: Final[int] = 10
THEMATIC_SCORE_CAP: Final[int] = 30
NEUTRAL_INTEREST_SCORE: Final[int] = 50

# Thematic keywords associated with named community interests
THEMATIC_KEYWORDS: Final[dict[str, tuple[str, ...]]] = {
    "Housing Justice": ("housing", "tenant", "affordable", "gentrification", "displacement"),
    "Mental Health": ("wellness", "healing", "trauma", "therapy", "support"),
    "Digital Equity": ("technology", "digital", "internet", "access", "literacy"),
    "Economic Justice": ("economic", "wealth", "financial", "cooperative", "jobs"),
    "Racial Equity": ("racial", "justice", "equality", "discrimination", "bias"),
    "Environmental Justice": ("environment", "climate", "sustainability", "green", "pollution"),
}


# =============================================================================
# Match Scoring Constants
# =============================================================================

DEFAULT_SCORING_WEIGHTS: Final[dict[str, float]] = {
    "skills": 0.45,
    "interests": 0.25,
    "availability": 0.15,
    "location": 0.10,
    "experience": 0.05,
}

# Component scores for the boolean checks
AVAILABILITY_SCORES: Final[tuple[int, int]] = (100, 50)  # (match, no match)
LOCATION_SCORES: Final[tuple[int, int]] = (100, 60)  # (match, no match)

# Profiles must offer at least this share of the required hours
AVAILABILITY_RATIO: Final[float] = 0.7

NEUTRAL_EXPERIENCE_BONUS: Final[int] = 50

# Minimum match score returned by find_matches
MATCH_SCORE_THRESHOLD: Final[int] = 60

SCORE_THRESHOLDS: Final[dict[str, int]] = {
    "excellent": 85,
    "good": 70,
    "fair": MATCH_SCORE_THRESHOLD,
}


# =============================================================================
# Confidence & Recommendation Constants
# =============================================================================

BASE_CONFIDENCE: Final[float] = 50.0
VERIFIED_CONFIDENCE_WEIGHT: Final[float] = 20.0
STRONG_SKILL_CONFIDENCE: Final[float] = 15.0
STRONG_INTEREST_CONFIDENCE: Final[float] = 10.0
ENGAGED_BIO_CONFIDENCE: Final[float] = 5.0

STRONG_SKILL_SCORE: Final[int] = 80
STRONG_INTEREST_SCORE: Final[int] = 70
ENGAGED_BIO_LENGTH: Final[int] = 50

EXPERT_CONTRIBUTION_SCORE: Final[int] = 90
MIN_VERIFIED_FOR_REASON: Final[int] = 2
PASSION_INTEREST_SCORE: Final[int] = 80
LONG_BIO_LENGTH: Final[int] = 100
EXPERIENCE_MARKER: Final[str] = "years"
MAX_RECOMMENDATION_REASONS: Final[int] = 3

TOP_SKILLS_LIMIT: Final[int] = 10


class MatchScoreLevel(Enum):
    """Categorical levels for match scores."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_score(cls, score: float) -> "MatchScoreLevel":
        """Convert a 0-100 match score to a level."""
        if score >= SCORE_THRESHOLDS["excellent"]:
            return cls.EXCELLENT
        elif score >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        elif score >= SCORE_THRESHOLDS["fair"]:
            return cls.FAIR
        return cls.POOR


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    PROFILE_ADDED = "profile_added"
    PROFILES_LOADED = "profiles_loaded"
    MATCHES_RANKED = "matches_ranked"
    MATCH_OUTCOME_RECORDED = "match_outcome_recorded"
