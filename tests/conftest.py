"""
Shared test fixtures for the collab-match test suite.

Sets environment variables before any collab_match imports so settings
load in testing mode, then provides factory fixtures for profiles and
project requirements and ready-made engines.
"""

import os

# === Set environment BEFORE any collab_match imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Any, Optional

import pytest

from collab_match.core.matching import MatchingEngine, create_sample_engine
from collab_match.data.models import (
    CandidateProfile,
    MatchHistoryEntry,
    ProfileSkill,
    ProjectRequirements,
    RequiredSkill,
)


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_profile():
    """Factory that returns a callable to build CandidateProfile models."""
    counter = iter(range(1, 10_000))

    def _factory(
        skills: Optional[list[dict[str, Any]]] = None,
        interests: Optional[list[str]] = None,
        availability: str = "10-15 hours/week",
        location: Optional[str] = "Oakland, CA",
        bio: Optional[str] = None,
        is_active: bool = True,
        match_history: Optional[list[dict[str, Any]]] = None,
        **kwargs,
    ) -> CandidateProfile:
        n = next(counter)
        return CandidateProfile(
            id=kwargs.pop("id", f"test-profile-{n}"),
            user_name=kwargs.pop("user_name", f"Member {n}"),
            skills=[ProfileSkill(**s) for s in (skills or [])],
            interests=interests or [],
            availability=availability,
            location=location,
            bio=bio,
            is_active=is_active,
            match_history=[MatchHistoryEntry(**h) for h in (match_history or [])],
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_requirements():
    """Factory that returns a callable to build ProjectRequirements models."""

    def _factory(
        required_skills: Optional[list[dict[str, Any]]] = None,
        category: str = "Housing Justice",
        description: str = "",
        time_commitment: str = "5-10 hours/week",
        location: Optional[str] = "Oakland, CA",
        remote_ok: bool = True,
        **kwargs,
    ) -> ProjectRequirements:
        return ProjectRequirements(
            required_skills=[RequiredSkill(**s) for s in (required_skills or [])],
            category=category,
            description=description,
            time_commitment=time_commitment,
            location=location,
            remote_ok=remote_ok,
            **kwargs,
        )

    return _factory


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def matching_engine():
    """Empty MatchingEngine with default settings."""
    return MatchingEngine()


@pytest.fixture
def sample_engine():
    """MatchingEngine loaded with the sample community pool."""
    return create_sample_engine()


@pytest.fixture
def digital_equity_requirements():
    """Remote digital-equity project that only the web developer fits."""
    return ProjectRequirements(
        id="proj-digital",
        required_skills=[
            RequiredSkill(skill="Web Development", level="advanced", priority="high", is_required=True),
        ],
        category="Digital Equity",
        description="Building digital literacy tools for community internet access",
        time_commitment="5-10 hours/week",
        remote_ok=True,
    )


@pytest.fixture
def housing_requirements():
    """In-person housing organizing project in Oakland."""
    return ProjectRequirements.model_validate(
        {
            "id": "proj-housing",
            "requiredSkills": [
                {"skill": "Community Organizing", "level": "advanced", "priority": "high", "isRequired": True},
                {"skill": "Grant Writing", "level": "intermediate", "priority": "medium", "isRequired": False},
            ],
            "category": "Housing Justice",
            "description": "Tenant organizing against displacement in Oakland",
            "timeCommitment": "8-10 hours/week",
            "location": "Oakland, CA",
            "remoteOk": False,
        }
    )
