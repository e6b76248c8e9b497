"""Collaborator-project matching engine module."""

from .matching_engine import (
    MatchingEngine,
    create_sample_engine,
)
from .scoring import (
    calculate_skill_match,
    is_skill_related,
)

__all__ = [
    "MatchingEngine",
    "create_sample_engine",
    "calculate_skill_match",
    "is_skill_related",
]
