"""
Project requirement models for collab-match.

Requirements are the input of a matching run and are not stored by the engine.
"""

from typing import Optional

from pydantic import Field

from collab_match.utils.constants import SkillLevel, SkillPriority

from .base import EmbeddedModel


class RequiredSkill(EmbeddedModel):
    """A skill a project is looking for."""

    skill: str = Field(..., min_length=1)
    level: SkillLevel = SkillLevel.INTERMEDIATE
    priority: SkillPriority = SkillPriority.MEDIUM
    is_required: bool = True  # False for nice-to-have skills


class ProjectRequirements(EmbeddedModel):
    """Skill, time and location needs of a project for one matching run."""

    id: Optional[str] = None
    required_skills: list[RequiredSkill] = Field(default_factory=list)

    # Free text used for interest alignment
    category: str = ""
    description: str = ""

    timeline: str = ""  # informational only, not scored
    time_commitment: str = ""  # e.g. "5-10 hours/week"
    location: Optional[str] = None
    remote_ok: bool = True
