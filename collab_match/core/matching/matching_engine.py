"""
Collaborator-project matching engine.

Scores and ranks community members against a project's requirements
using a weighted combination of skill fit, interest alignment,
availability, location and past match outcomes.
"""

import uuid
from collections.abc import Iterable, Mapping
from threading import Lock
from typing import Any, Optional, Union

from collab_match.data.models import (
    CandidateProfile,
    CandidateProfileCreate,
    MatchHistoryEntry,
    MatchingAnalytics,
    MatchResult,
    ProjectRequirements,
    SkillFrequency,
)
from collab_match.data.sample_profiles import get_sample_profiles
from collab_match.utils.config import MatchingSettings, get_settings
from collab_match.utils.constants import (
    AVAILABILITY_SCORES,
    DEFAULT_SCORING_WEIGHTS,
    LOCATION_SCORES,
    AuditAction,
)
from collab_match.utils.logger import LoggerMixin, audit_log

from .scoring import (
    calculate_confidence_score,
    calculate_experience_bonus,
    calculate_interest_alignment,
    calculate_skill_match,
    check_availability_match,
    check_location_match,
    generate_recommendation_reasons,
    round_half_up,
)

ProfileInput = Union[CandidateProfileCreate, Mapping[str, Any]]
RequirementsInput = Union[ProjectRequirements, Mapping[str, Any]]


class MatchingEngine(LoggerMixin):
    """
    Engine for matching community members to projects.

    Owns an insertion-ordered pool of candidate profiles keyed by id.
    Profiles are added with ``add_skill_profile`` (or in bulk with
    ``load_profiles``) and only ever change by having match outcomes
    appended to their history. A single lock serializes those mutations
    against ranking and analytics reads. Profiles handed out by the
    engine, including the ones inside match results, are copies.
    """

    def __init__(
        self,
        profiles: Optional[Iterable[Union[CandidateProfile, Mapping[str, Any]]]] = None,
        weights: Optional[dict[str, float]] = None,
        threshold: Optional[float] = None,
        max_reasons: Optional[int] = None,
        top_skills_limit: Optional[int] = None,
    ):
        """
        Initialize the matching engine.

        Args:
            profiles: Optional fully formed profiles to start the pool with
            weights: Optional custom component weights, keyed like
                DEFAULT_SCORING_WEIGHTS and summing to 1
            threshold: Optional minimum match score for find_matches
            max_reasons: Optional number of recommendation reasons per match
            top_skills_limit: Optional number of skills reported by analytics
        """
        settings = get_settings().matching

        self.weights = settings.weights if weights is None else _validate_weights(weights)
        self.threshold = settings.threshold if threshold is None else threshold
        self.max_reasons = settings.max_reasons if max_reasons is None else max_reasons
        self.top_skills_limit = (
            settings.top_skills_limit if top_skills_limit is None else top_skills_limit
        )

        self._profiles: dict[str, CandidateProfile] = {}
        self._lock = Lock()

        if profiles is not None:
            self.load_profiles(profiles)

    def __len__(self) -> int:
        with self._lock:
            return len(self._profiles)

    @property
    def profiles(self) -> tuple[CandidateProfile, ...]:
        """Copies of the pooled profiles in insertion order."""
        with self._lock:
            return tuple(p.model_copy(deep=True) for p in self._profiles.values())

    def get_profile(self, profile_id: str) -> Optional[CandidateProfile]:
        """Look up a copy of a profile by id."""
        with self._lock:
            profile = self._profiles.get(profile_id)
            return profile.model_copy(deep=True) if profile is not None else None

    # ── Matching ─────────────────────────────────────────────────────────────

    def find_matches(self, requirements: RequirementsInput) -> list[MatchResult]:
        """
        Rank active profiles against project requirements.

        Args:
            requirements: Project requirements (model or camelCase/snake_case mapping)

        Returns:
            Results scoring at or above the threshold, highest score first.
            Equal scores keep the pool's insertion order.
        """
        if not isinstance(requirements, ProjectRequirements):
            requirements = ProjectRequirements.model_validate(requirements)

        with self._lock:
            results = [
                self.score_profile(profile, requirements)
                for profile in self._profiles.values()
                if profile.is_active
            ]

        scored = len(results)
        matches = [r for r in results if r.match_score >= self.threshold]
        matches.sort(key=lambda r: r.match_score, reverse=True)

        self.logger.debug(
            f"Ranked project {requirements.id or '<unnamed>'}: "
            f"{len(matches)} of {scored} active profiles above {self.threshold}"
        )
        audit_log(
            AuditAction.MATCHES_RANKED.value,
            {
                "project_id": requirements.id,
                "profiles_scored": scored,
                "matches": [(r.profile_id, r.match_score) for r in matches],
            },
        )
        return matches

    def score_profile(
        self,
        profile: CandidateProfile,
        requirements: ProjectRequirements,
    ) -> MatchResult:
        """
        Score a single profile against project requirements.

        Does not apply the threshold or the active check.
        """
        skill_result = calculate_skill_match(profile.skills, requirements.required_skills)
        interest_alignment = calculate_interest_alignment(
            profile.interests, requirements.category, requirements.description
        )
        availability_match = check_availability_match(
            profile.availability, requirements.time_commitment
        )
        location_match = check_location_match(
            profile.location, requirements.location, requirements.remote_ok
        )
        experience_bonus = calculate_experience_bonus(profile.match_history)

        availability_score = AVAILABILITY_SCORES[0] if availability_match else AVAILABILITY_SCORES[1]
        location_score = LOCATION_SCORES[0] if location_match else LOCATION_SCORES[1]

        weighted = (
            skill_result.overall_score * self.weights["skills"]
            + interest_alignment * self.weights["interests"]
            + availability_score * self.weights["availability"]
            + location_score * self.weights["location"]
            + experience_bonus * self.weights["experience"]
        )
        match_score = min(100, max(0, round_half_up(weighted)))

        return MatchResult(
            profile=profile.model_copy(deep=True),
            match_score=match_score,
            skill_score=skill_result.overall_score,
            skill_matches=skill_result.matches,
            interest_alignment=interest_alignment,
            availability_match=availability_match,
            location_match=location_match,
            experience_bonus=experience_bonus,
            confidence_score=calculate_confidence_score(
                skill_result.overall_score, interest_alignment, profile
            ),
            recommendation_reasons=generate_recommendation_reasons(
                skill_result.matches,
                interest_alignment,
                availability_match,
                location_match,
                profile,
                limit=self.max_reasons,
            ),
        )

    # ── Pool mutation ────────────────────────────────────────────────────────

    def add_skill_profile(self, data: ProfileInput) -> CandidateProfile:
        """
        Add a new profile to the matching pool.

        A fresh id is assigned and the match history starts empty; any
        id or history in the input is ignored. Profiles are not
        deduplicated by name or email.

        Args:
            data: Profile fields (model or camelCase/snake_case mapping)

        Returns:
            A copy of the stored profile
        """
        if not isinstance(data, CandidateProfileCreate):
            data = CandidateProfileCreate.model_validate(data)

        fields = data.model_dump(include=set(CandidateProfileCreate.model_fields))

        with self._lock:
            profile_id = self._new_profile_id()
            profile = CandidateProfile.model_validate({**fields, "id": profile_id})
            self._profiles[profile_id] = profile
            added = profile.model_copy(deep=True)

        self.logger.info(f"Added profile {profile_id} to the matching pool")
        audit_log(
            AuditAction.PROFILE_ADDED.value,
            {"profile_id": profile_id, "skills": len(profile.skills)},
            audit_type="PROFILE",
        )
        return added

    def load_profiles(
        self,
        profiles: Iterable[Union[CandidateProfile, Mapping[str, Any]]],
    ) -> int:
        """
        Bulk-load fully formed profiles, keeping their ids and history.

        Either every profile is loaded or none is.

        Returns:
            Number of profiles loaded

        Raises:
            ValueError: If a profile id is already in the pool or repeated
        """
        validated = [
            p.model_copy(deep=True) if isinstance(p, CandidateProfile) else CandidateProfile.model_validate(p)
            for p in profiles
        ]

        with self._lock:
            seen: set[str] = set()
            for profile in validated:
                if profile.id in self._profiles or profile.id in seen:
                    raise ValueError(f"Duplicate profile id: {profile.id}")
                seen.add(profile.id)

            for profile in validated:
                self._profiles[profile.id] = profile

        self.logger.info(f"Loaded {len(validated)} profile(s) into the matching pool")
        audit_log(
            AuditAction.PROFILES_LOADED.value,
            {"count": len(validated)},
            audit_type="PROFILE",
        )
        return len(validated)

    def record_match_outcome(
        self,
        profile_id: str,
        project_id: str,
        match_score: float,
        joined: bool,
    ) -> bool:
        """
        Append a match outcome to a profile's history.

        Unknown profile ids are ignored whatever the other arguments are.

        Returns:
            True if the outcome was recorded

        Raises:
            ValidationError: If the profile exists and match_score is outside 0-100
        """
        with self._lock:
            profile = self._profiles.get(profile_id)
            if profile is None:
                self.logger.warning(f"Match outcome for unknown profile {profile_id} ignored")
                return False
            profile.match_history.append(
                MatchHistoryEntry(project_id=project_id, match_score=match_score, joined=joined)
            )

        audit_log(
            AuditAction.MATCH_OUTCOME_RECORDED.value,
            {
                "profile_id": profile_id,
                "project_id": project_id,
                "match_score": match_score,
                "joined": joined,
            },
        )
        return True

    # ── Analytics ────────────────────────────────────────────────────────────

    def get_matching_analytics(self) -> MatchingAnalytics:
        """Summarize the pool: counts, most common skills and verification rate."""
        with self._lock:
            profiles = list(self._profiles.values())

        total_profiles = len(profiles)
        if total_profiles == 0:
            return MatchingAnalytics()

        skill_counts: dict[str, int] = {}
        total_skills = 0
        verified_skills = 0
        for profile in profiles:
            for skill in profile.skills:
                skill_counts[skill.skill] = skill_counts.get(skill.skill, 0) + 1
                total_skills += 1
                if skill.verified:
                    verified_skills += 1

        # sorted() is stable, so ties keep first-seen order
        top_skills = sorted(skill_counts.items(), key=lambda item: item[1], reverse=True)

        return MatchingAnalytics(
            total_profiles=total_profiles,
            active_profiles=sum(1 for p in profiles if p.is_active),
            top_skills=[
                SkillFrequency(skill=name, count=count)
                for name, count in top_skills[: self.top_skills_limit]
            ],
            average_skills_per_profile=total_skills / total_profiles,
            verification_rate=verified_skills / total_skills if total_skills else 0.0,
        )

    def _new_profile_id(self) -> str:
        # Caller holds the lock
        while True:
            profile_id = f"profile-{uuid.uuid4().hex[:12]}"
            if profile_id not in self._profiles:
                return profile_id


def _validate_weights(weights: Mapping[str, float]) -> dict[str, float]:
    missing = set(DEFAULT_SCORING_WEIGHTS) - set(weights)
    if missing:
        raise ValueError(f"Missing matching weights: {', '.join(sorted(missing))}")
    return MatchingSettings(**{f"{name}_weight": value for name, value in weights.items()}).weights


def create_sample_engine(**kwargs: Any) -> MatchingEngine:
    """Create an engine pre-loaded with the sample community profiles."""
    return MatchingEngine(profiles=get_sample_profiles(), **kwargs)
