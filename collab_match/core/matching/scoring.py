"""
Scoring functions for collaborator matching.

Each function scores one facet of a profile against project requirements:
skills, interests, availability, location and past match history, plus the
confidence score and recommendation reasons derived from them. All functions
are pure and deterministic; the MatchingEngine combines them with weights.
"""

import math
import re
from typing import Optional, Sequence

from collab_match.data.models import (
    CandidateProfile,
    MatchHistoryEntry,
    ProfileSkill,
    RequiredSkill,
    SkillMatch,
    SkillMatchResult,
)
from collab_match.utils.constants import (
    BASE_CONFIDENCE,
    ENGAGED_BIO_CONFIDENCE,
    ENGAGED_BIO_LENGTH,
    EXPERIENCE_MARKER,
    EXPERT_CONTRIBUTION_SCORE,
    INTEREST_CATEGORY_SCORE,
    INTEREST_DESCRIPTION_SCORE,
    LONG_BIO_LENGTH,
    MAX_RECOMMENDATION_REASONS,
    MIN_VERIFIED_FOR_REASON,
    MISSING_REQUIRED_SKILL_SCORE,
    MISSING_SKILL_LEVEL,
    NEUTRAL_EXPERIENCE_BONUS,
    NEUTRAL_INTEREST_SCORE,
    NEUTRAL_SKILL_SCORE,
    PASSION_INTEREST_SCORE,
    PRIORITY_MULTIPLIERS,
    SKILL_BASE_SCORE,
    SKILL_BELOW_LEVEL_FLOOR,
    SKILL_BELOW_LEVEL_SCALE,
    SKILL_EXCEED_BONUS_CAP,
    SKILL_EXCEED_BONUS_PER_LEVEL,
    SKILL_LEVEL_VALUES,
    SKILL_RELATIONS,
    STRONG_INTEREST_CONFIDENCE,
    STRONG_INTEREST_SCORE,
    STRONG_SKILL_CONFIDENCE,
    STRONG_SKILL_SCORE,
    THEMATIC_KEYWORD_SCORE,
    THEMATIC_KEYWORDS,
    THEMATIC_SCORE_CAP,
    AVAILABILITY_RATIO,
    VERIFIED_CONFIDENCE_WEIGHT,
    VERIFIED_SKILL_MULTIPLIER,
)

# First number, optionally followed by "-number" (e.g. "10-15 hours/week")
_HOURS_PATTERN = re.compile(r"(\d+)-?(\d+)?")

_THEMATIC_KEYWORDS_LOWER = {
    interest.lower(): keywords for interest, keywords in THEMATIC_KEYWORDS.items()
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


# ── Skills ───────────────────────────────────────────────────────────────────


def is_skill_related(profile_skill: str, required_skill: str) -> bool:
    """
    Check whether two skill names are related.

    Skills are related if either name contains the other, or if one name
    contains a cluster's canonical name and the other contains one of
    that cluster's keywords.
    """
    profile_lower = profile_skill.lower()
    required_lower = required_skill.lower()

    if profile_lower in required_lower or required_lower in profile_lower:
        return True

    return any(
        _cluster_links(canonical.lower(), keywords, profile_lower, required_lower)
        or _cluster_links(canonical.lower(), keywords, required_lower, profile_lower)
        for canonical, keywords in SKILL_RELATIONS.items()
    )


def _cluster_links(canonical: str, keywords: Sequence[str], named: str, other: str) -> bool:
    return canonical in named and any(k in other for k in keywords)


def find_profile_skill(
    profile_skills: Sequence[ProfileSkill],
    required_skill: str,
) -> tuple[Optional[ProfileSkill], bool]:
    """
    Find the profile skill satisfying a required skill.

    An exact (case-insensitive) name match wins over a related skill.

    Returns:
        Tuple of (matching skill or None, True if matched through a related skill)
    """
    required_lower = required_skill.lower()
    for skill in profile_skills:
        if skill.skill.lower() == required_lower:
            return skill, False

    for skill in profile_skills:
        if is_skill_related(skill.skill, required_skill):
            return skill, True

    return None, False


def score_skill_level(profile_level: str, required_level: str, verified: bool = False) -> float:
    """
    Score a held skill against the level a project asks for.

    Meeting the bar earns full points plus a capped bonus for each level
    above it; falling short earns partial credit floored so that any
    presence beats absence. Verified skills get a 10% bonus.
    """
    profile_value = SKILL_LEVEL_VALUES[profile_level]
    required_value = SKILL_LEVEL_VALUES[required_level]

    if profile_value >= required_value:
        score = SKILL_BASE_SCORE + min(
            SKILL_EXCEED_BONUS_CAP,
            (profile_value - required_value) * SKILL_EXCEED_BONUS_PER_LEVEL,
        )
    else:
        score = max(
            SKILL_BELOW_LEVEL_FLOOR,
            (profile_value / required_value) * SKILL_BELOW_LEVEL_SCALE,
        )

    if verified:
        score *= VERIFIED_SKILL_MULTIPLIER

    return score


def calculate_skill_match(
    profile_skills: Sequence[ProfileSkill],
    required_skills: Sequence[RequiredSkill],
) -> SkillMatchResult:
    """
    Score a profile's skills against a project's required skills.

    Args:
        profile_skills: Skills held by the profile
        required_skills: Skills the project asks for

    Returns:
        SkillMatchResult with the 0-100 overall score and per-skill breakdown
    """
    if not required_skills:
        return SkillMatchResult(overall_score=NEUTRAL_SKILL_SCORE)

    total_possible = 0.0
    achieved = 0.0
    matches: list[SkillMatch] = []

    for required in required_skills:
        multiplier = PRIORITY_MULTIPLIERS[required.priority]
        profile_skill, related = find_profile_skill(profile_skills, required.skill)

        if profile_skill is not None:
            contribution = score_skill_level(
                profile_skill.level, required.level, profile_skill.verified
            )
            achieved += contribution * multiplier
            total_possible += SKILL_BASE_SCORE * multiplier
            matches.append(
                SkillMatch(
                    skill=required.skill,
                    profile_level=profile_skill.level,
                    required_level=required.level,
                    score_contribution=round_half_up(contribution),
                    related_match=related,
                )
            )
        elif required.is_required:
            # Missing required skill: heavy penalty, but not zero
            achieved += MISSING_REQUIRED_SKILL_SCORE * multiplier
            total_possible += SKILL_BASE_SCORE * multiplier
            matches.append(
                SkillMatch(
                    skill=required.skill,
                    profile_level=MISSING_SKILL_LEVEL,
                    required_level=required.level,
                    score_contribution=0,
                )
            )
        # Missing optional skills neither add nor subtract

    if total_possible == 0:
        return SkillMatchResult(overall_score=NEUTRAL_SKILL_SCORE, matches=matches)

    overall = min(100, round_half_up(achieved / total_possible * 100))
    return SkillMatchResult(overall_score=overall, matches=matches)


# ── Interests ────────────────────────────────────────────────────────────────


def calculate_thematic_alignment(interest: str, category: str, description: str) -> int:
    """Score keywords of a named interest's theme found in the project text."""
    keywords = _THEMATIC_KEYWORDS_LOWER.get(interest.lower(), ())
    combined_text = f"{category} {description}".lower()

    score = sum(THEMATIC_KEYWORD_SCORE for keyword in keywords if keyword in combined_text)
    return min(THEMATIC_SCORE_CAP, score)


def calculate_interest_alignment(
    interests: Sequence[str],
    category: str,
    description: str,
) -> int:
    """
    Score how well a profile's interests align with a project.

    Each interest earns points for overlapping the project category,
    for appearing in the description, and for thematic keywords.

    Returns:
        Alignment score 0-100 (50 if the profile lists no interests)
    """
    if not interests:
        return NEUTRAL_INTEREST_SCORE

    category_lower = category.lower()
    description_lower = description.lower()
    score = 0

    for interest in interests:
        interest_lower = interest.lower()

        if interest_lower in category_lower or category_lower in interest_lower:
            score += INTEREST_CATEGORY_SCORE

        if interest_lower in description_lower:
            score += INTEREST_DESCRIPTION_SCORE

        score += calculate_thematic_alignment(interest, category, description)

    return min(100, score)


# ── Availability & location ──────────────────────────────────────────────────


def extract_hours(text: Optional[str]) -> int:
    """
    Extract an hour count from free text.

    Uses the upper bound of the first range ("10-15 hours/week" -> 15)
    or the first number on its own ("6+ months" -> 6). Text without
    digits yields 0.
    """
    if not text:
        return 0

    match = _HOURS_PATTERN.search(text)
    if not match:
        return 0

    return int(match.group(2) or match.group(1))


def check_availability_match(profile_availability: str, required_commitment: str) -> bool:
    """A profile matches if it offers at least 70% of the required hours."""
    profile_hours = extract_hours(profile_availability)
    required_hours = extract_hours(required_commitment)
    return profile_hours >= required_hours * AVAILABILITY_RATIO


def _city(location: str) -> str:
    return location.split(",")[0].strip().lower()


def check_location_match(
    profile_location: Optional[str],
    project_location: Optional[str],
    remote_ok: bool = True,
) -> bool:
    """Remote-friendly projects always match; otherwise the cities must be equal."""
    if remote_ok:
        return True
    if not profile_location or not project_location:
        return False
    return _city(profile_location) == _city(project_location)


# ── History ──────────────────────────────────────────────────────────────────


def calculate_experience_bonus(match_history: Sequence[MatchHistoryEntry]) -> int:
    """
    Score a profile's past match outcomes.

    Half of the bonus comes from the share of matches the person joined,
    the other half from their average historical match score.
    """
    if not match_history:
        return NEUTRAL_EXPERIENCE_BONUS

    total = len(match_history)
    joined = sum(1 for entry in match_history if entry.joined)
    average_score = sum(entry.match_score for entry in match_history) / total

    return round_half_up((joined / total) * 50 + average_score * 0.5)


# ── Confidence & reasons ─────────────────────────────────────────────────────


def calculate_confidence_score(
    skill_score: int,
    interest_alignment: int,
    profile: CandidateProfile,
) -> int:
    """Estimate how reliable a match recommendation is (0-100)."""
    confidence = BASE_CONFIDENCE

    if profile.skills:
        confidence += (profile.verified_skill_count / len(profile.skills)) * VERIFIED_CONFIDENCE_WEIGHT

    if skill_score >= STRONG_SKILL_SCORE:
        confidence += STRONG_SKILL_CONFIDENCE

    if interest_alignment >= STRONG_INTEREST_SCORE:
        confidence += STRONG_INTEREST_CONFIDENCE

    if profile.is_active and profile.bio and len(profile.bio) > ENGAGED_BIO_LENGTH:
        confidence += ENGAGED_BIO_CONFIDENCE

    return min(100, round_half_up(confidence))


def generate_recommendation_reasons(
    skill_matches: Sequence[SkillMatch],
    interest_alignment: int,
    availability_match: bool,
    location_match: bool,
    profile: CandidateProfile,
    limit: int = MAX_RECOMMENDATION_REASONS,
) -> list[str]:
    """
    Generate human-readable reasons for recommending a profile.

    Reasons are checked in a fixed order of precedence and only the
    first ``limit`` that apply are returned.
    """
    reasons = []

    strong_skills = [m for m in skill_matches if m.score_contribution >= EXPERT_CONTRIBUTION_SCORE]
    if strong_skills:
        reasons.append(f"Expert-level match in {strong_skills[0].skill}")

    verified_count = profile.verified_skill_count
    if verified_count >= MIN_VERIFIED_FOR_REASON:
        reasons.append(f"{verified_count} verified skills")

    if interest_alignment >= PASSION_INTEREST_SCORE:
        reasons.append("Strong passion alignment with project goals")

    if any(EXPERIENCE_MARKER in s.experience for s in profile.skills):
        reasons.append("Extensive hands-on experience")

    if availability_match:
        reasons.append("Schedule availability matches project needs")

    if location_match:
        reasons.append("Local community member")

    if profile.bio and len(profile.bio) > LONG_BIO_LENGTH:
        reasons.append("Active and engaged community member")

    return reasons[:limit]
