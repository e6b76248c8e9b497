"""
Tests for collab_match.core.matching.matching_engine — MatchingEngine behavior.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from collab_match.core.matching import MatchingEngine
from collab_match.data.models import (
    CandidateProfile,
    CandidateProfileCreate,
    MatchHistoryEntry,
    MatchResult,
)


def _strong_profile_data(**overrides):
    data = {
        "user_name": "Strong Fit",
        "skills": [{"skill": "Grant Writing", "level": "advanced", "verified": True}],
        "interests": ["Housing Justice", "Housing"],
        "availability": "10 hours/week",
        "location": "Oakland, CA",
    }
    data.update(overrides)
    return data


def _strong_requirements(make_requirements, **overrides):
    kwargs = {
        "required_skills": [{"skill": "Grant Writing", "level": "advanced", "priority": "critical"}],
        "category": "Housing Justice",
        "description": "housing justice grant writing for tenant displacement work",
        "time_commitment": "10 hours/week",
    }
    kwargs.update(overrides)
    return make_requirements(**kwargs)


# ── find_matches ─────────────────────────────────────────────────────────────


class TestFindMatches:
    def test_housing_project_on_sample_pool(self, sample_engine, housing_requirements):
        results = sample_engine.find_matches(housing_requirements)

        assert [r.profile.user_name for r in results] == ["Alex Rivera"]
        top = results[0]
        assert top.match_score == 93
        assert top.skill_score == 100
        assert top.interest_alignment == 80
        assert top.availability_match is True
        assert top.location_match is True
        assert top.experience_bonus == 50

    def test_digital_equity_project_on_sample_pool(self, sample_engine, digital_equity_requirements):
        results = sample_engine.find_matches(digital_equity_requirements)

        assert [r.profile.id for r in results] == ["profile-2"]
        top = results[0]
        assert top.match_score == 90
        assert top.confidence_score == 93
        assert top.recommendation_reasons == [
            "Expert-level match in Web Development",
            "2 verified skills",
            "Extensive hands-on experience",
        ]

    def test_accepts_camel_case_mapping(self, sample_engine):
        results = sample_engine.find_matches(
            {
                "requiredSkills": [{"skill": "Web Development", "level": "advanced", "priority": "high"}],
                "category": "Digital Equity",
                "description": "Building digital literacy tools for community internet access",
                "timeCommitment": "5-10 hours/week",
                "remoteOk": True,
            }
        )
        assert [r.profile.id for r in results] == ["profile-2"]

    def test_inactive_profiles_excluded(self, matching_engine, make_requirements):
        matching_engine.add_skill_profile(_strong_profile_data(is_active=False))
        requirements = _strong_requirements(make_requirements)

        assert matching_engine.find_matches(requirements) == []

        # Would have scored well if active
        inactive = matching_engine.profiles[0]
        assert matching_engine.score_profile(inactive, requirements).match_score >= 60

    def test_results_above_threshold_and_sorted(self, sample_engine, make_requirements):
        sample_engine.add_skill_profile(_strong_profile_data())
        sample_engine.add_skill_profile(_strong_profile_data(interests=[]))
        requirements = _strong_requirements(make_requirements)

        results = sample_engine.find_matches(requirements)

        assert len(results) >= 2
        assert all(r.match_score >= 60 for r in results)
        scores = [r.match_score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_insertion_order(self, matching_engine, make_requirements):
        first = matching_engine.add_skill_profile(_strong_profile_data(user_name="First"))
        second = matching_engine.add_skill_profile(_strong_profile_data(user_name="Second"))

        results = matching_engine.find_matches(_strong_requirements(make_requirements))

        assert [r.profile.id for r in results] == [first.id, second.id]
        assert results[0].match_score == results[1].match_score

    def test_exact_fit_scores_near_100(self, matching_engine, make_requirements):
        matching_engine.add_skill_profile(_strong_profile_data())

        results = matching_engine.find_matches(_strong_requirements(make_requirements))

        assert results[0].match_score >= 95
        assert results[0].skill_score == 100

    def test_no_overlapping_skills_scores_low(self, matching_engine, make_requirements):
        profile = matching_engine.add_skill_profile(
            {"user_name": "Photographer", "skills": [{"skill": "Photography", "level": "expert"}]}
        )
        requirements = make_requirements(
            required_skills=[
                {"skill": "Legal Research", "level": "advanced", "priority": "critical"},
                {"skill": "Case Documentation", "level": "intermediate", "priority": "high"},
            ],
            category="Legal Advocacy",
        )

        result = matching_engine.score_profile(profile, requirements)

        assert result.skill_score == 10
        assert result.match_score < 60
        assert result.missing_skills == ["Legal Research", "Case Documentation"]
        assert matching_engine.find_matches(requirements) == []

    def test_empty_required_skills_neutral(self, matching_engine, make_requirements):
        profile = matching_engine.add_skill_profile({"user_name": "Anyone"})
        result = matching_engine.score_profile(profile, make_requirements(required_skills=[]))

        assert result.skill_score == 75
        assert result.skill_matches == []
        assert result.interest_alignment == 50
        assert result.experience_bonus == 50

    def test_remote_ok_ignores_locations(self, matching_engine, make_requirements):
        profile = matching_engine.add_skill_profile({"user_name": "Nowhere"})
        result = matching_engine.score_profile(profile, make_requirements(location=None, remote_ok=True))
        assert result.location_match is True

    def test_match_score_always_in_bounds(self, matching_engine, make_requirements):
        variants = [
            {"user_name": "Empty"},
            _strong_profile_data(),
            _strong_profile_data(interests=["Housing Justice", "Housing", "Justice", "Tenant"]),
            {"user_name": "Beginner", "skills": [{"skill": "Grant Writing", "level": "beginner"}], "availability": "flexible"},
        ]
        for data in variants:
            matching_engine.add_skill_profile(data)

        requirement_variants = [
            make_requirements(required_skills=[]),
            _strong_requirements(make_requirements),
            make_requirements(
                required_skills=[{"skill": "Legal Research", "level": "expert", "priority": "critical"}],
                category="",
                time_commitment="40 hours/week",
                location="Chicago, IL",
                remote_ok=False,
            ),
        ]

        for profile in matching_engine.profiles:
            for requirements in requirement_variants:
                result = matching_engine.score_profile(profile, requirements)
                assert 0 <= result.match_score <= 100
                assert 0 <= result.confidence_score <= 100
                assert len(result.recommendation_reasons) <= 3

    def test_custom_threshold(self, sample_engine, housing_requirements):
        engine = MatchingEngine(profiles=sample_engine.profiles, threshold=0)
        assert len(engine.find_matches(housing_requirements)) == 5

    def test_history_raises_experience_bonus(self, matching_engine, make_requirements):
        profile = matching_engine.add_skill_profile(_strong_profile_data())
        requirements = _strong_requirements(make_requirements)
        before = matching_engine.score_profile(profile, requirements)

        matching_engine.record_match_outcome(profile.id, "proj-1", 90, True)
        after = matching_engine.score_profile(matching_engine.get_profile(profile.id), requirements)

        assert after.experience_bonus == 95
        assert after.match_score >= before.match_score

    def test_result_type(self, sample_engine, digital_equity_requirements):
        result = sample_engine.find_matches(digital_equity_requirements)[0]
        assert isinstance(result, MatchResult)
        assert result.profile_id == "profile-2"
        assert result.matched_skills == ["Web Development"]


# ── add_skill_profile ────────────────────────────────────────────────────────


class TestAddSkillProfile:
    def test_assigns_id_and_empty_history(self, matching_engine):
        profile = matching_engine.add_skill_profile(
            {
                "id": "caller-chosen",
                "userName": "Sam Lee",
                "skills": [{"skill": "Event Planning", "level": "advanced"}],
                "matchHistory": [{"projectId": "p", "matchScore": 80, "joined": True}],
            }
        )

        assert isinstance(profile, CandidateProfile)
        assert profile.id != "caller-chosen"
        assert profile.id.startswith("profile-")
        assert profile.match_history == []
        assert profile.user_name == "Sam Lee"
        assert matching_engine.get_profile(profile.id) == profile

    def test_accepts_create_model(self, matching_engine):
        profile = matching_engine.add_skill_profile(CandidateProfileCreate(user_name="Model Input"))
        assert profile.user_name == "Model Input"
        assert len(matching_engine) == 1

    def test_unique_ids_on_rapid_calls(self, matching_engine):
        ids = {matching_engine.add_skill_profile({"user_name": f"M{i}"}).id for i in range(200)}
        assert len(ids) == 200

    def test_unique_ids_across_threads(self, matching_engine):
        with ThreadPoolExecutor(max_workers=8) as pool:
            profiles = list(pool.map(lambda i: matching_engine.add_skill_profile({"user_name": f"T{i}"}), range(64)))

        assert len({p.id for p in profiles}) == 64
        assert len(matching_engine) == 64

    def test_no_deduplication(self, matching_engine):
        matching_engine.add_skill_profile({"user_name": "Twin", "user_email": "twin@example.org"})
        matching_engine.add_skill_profile({"user_name": "Twin", "user_email": "twin@example.org"})
        assert len(matching_engine) == 2

    def test_preserves_insertion_order(self, sample_engine):
        added = sample_engine.add_skill_profile({"user_name": "Newcomer"})
        assert sample_engine.profiles[-1].id == added.id
        assert sample_engine.profiles[0].id == "profile-1"


# ── record_match_outcome ─────────────────────────────────────────────────────


class TestRecordMatchOutcome:
    def test_appends_entry(self, sample_engine):
        assert sample_engine.record_match_outcome("profile-1", "proj-housing", 93, True) is True

        history = sample_engine.get_profile("profile-1").match_history
        assert len(history) == 1
        assert history[0].project_id == "proj-housing"
        assert history[0].match_score == 93
        assert history[0].joined is True

    def test_appends_in_order(self, sample_engine):
        sample_engine.record_match_outcome("profile-1", "a", 70, False)
        sample_engine.record_match_outcome("profile-1", "b", 80, True)
        assert [h.project_id for h in sample_engine.get_profile("profile-1").match_history] == ["a", "b"]

    def test_unknown_profile_is_noop(self, sample_engine):
        assert sample_engine.record_match_outcome("missing", "proj", 75, True) is False
        assert all(p.match_history == [] for p in sample_engine.profiles)

    def test_unknown_profile_ignores_out_of_range_score(self, sample_engine):
        assert sample_engine.record_match_outcome("missing", "proj", 150, True) is False
        assert sample_engine.record_match_outcome("missing", "proj", -5, False) is False

    def test_out_of_range_score_for_known_profile(self, sample_engine):
        with pytest.raises(ValidationError):
            sample_engine.record_match_outcome("profile-1", "proj", 150, True)
        assert sample_engine.get_profile("profile-1").match_history == []


# ── Profile copies ───────────────────────────────────────────────────────────


class TestProfileCopies:
    def test_returned_profiles_do_not_write_through(self, sample_engine):
        entry = MatchHistoryEntry(project_id="sneaky", match_score=99, joined=True)
        sample_engine.get_profile("profile-1").match_history.append(entry)
        sample_engine.profiles[0].match_history.append(entry)

        assert sample_engine.get_profile("profile-1").match_history == []

    def test_added_profile_is_a_copy(self, matching_engine):
        added = matching_engine.add_skill_profile({"user_name": "Copy"})
        added.match_history.append(MatchHistoryEntry(project_id="p", match_score=50, joined=False))
        assert matching_engine.get_profile(added.id).match_history == []

    def test_loaded_profiles_are_copied(self, matching_engine, make_profile):
        original = make_profile(id="m1")
        matching_engine.load_profiles([original])
        original.match_history.append(MatchHistoryEntry(project_id="p", match_score=50, joined=False))
        assert matching_engine.get_profile("m1").match_history == []

    def test_results_unchanged_by_later_outcomes(self, sample_engine, digital_equity_requirements):
        result = sample_engine.find_matches(digital_equity_requirements)[0]
        sample_engine.record_match_outcome(result.profile_id, "proj-digital", 90, True)

        assert result.profile.match_history == []
        assert len(sample_engine.get_profile(result.profile_id).match_history) == 1


# ── load_profiles ────────────────────────────────────────────────────────────


class TestLoadProfiles:
    def test_keeps_ids(self, matching_engine, make_profile):
        count = matching_engine.load_profiles([make_profile(id="a"), make_profile(id="b")])
        assert count == 2
        assert [p.id for p in matching_engine.profiles] == ["a", "b"]

    def test_duplicate_in_pool(self, sample_engine, make_profile):
        with pytest.raises(ValueError, match="profile-1"):
            sample_engine.load_profiles([make_profile(id="profile-1")])

    def test_duplicate_in_batch_loads_nothing(self, matching_engine, make_profile):
        with pytest.raises(ValueError):
            matching_engine.load_profiles([make_profile(id="x"), make_profile(id="y"), make_profile(id="x")])
        assert len(matching_engine) == 0

    def test_accepts_mappings(self, matching_engine):
        matching_engine.load_profiles([{"id": "m1", "userName": "Mapped"}])
        assert matching_engine.get_profile("m1").user_name == "Mapped"


# ── get_matching_analytics ───────────────────────────────────────────────────


class TestMatchingAnalytics:
    def test_sample_pool(self, sample_engine):
        analytics = sample_engine.get_matching_analytics()

        assert analytics.total_profiles == 5
        assert analytics.active_profiles == 5
        assert analytics.average_skills_per_profile == pytest.approx(3.0)
        assert analytics.verification_rate == pytest.approx(10 / 15)
        assert len(analytics.top_skills) == 10
        assert analytics.top_skills[0].skill == "Community Organizing"
        assert all(s.count == 1 for s in analytics.top_skills)

    def test_counts_and_top_skill_order(self, matching_engine):
        matching_engine.add_skill_profile({"user_name": "A", "skills": [{"skill": "Photography", "level": "beginner"}]})
        matching_engine.add_skill_profile(
            {
                "user_name": "B",
                "is_active": False,
                "skills": [
                    {"skill": "Grant Writing", "level": "expert", "verified": True},
                    {"skill": "Photography", "level": "expert", "verified": True},
                ],
            }
        )

        analytics = matching_engine.get_matching_analytics()

        assert analytics.total_profiles == 2
        assert analytics.active_profiles == 1
        assert [(s.skill, s.count) for s in analytics.top_skills] == [("Photography", 2), ("Grant Writing", 1)]
        assert analytics.average_skills_per_profile == pytest.approx(1.5)
        assert analytics.verification_rate == pytest.approx(2 / 3)

    def test_empty_pool(self, matching_engine):
        analytics = matching_engine.get_matching_analytics()
        assert analytics.total_profiles == 0
        assert analytics.top_skills == []
        assert analytics.average_skills_per_profile == 0.0
        assert analytics.verification_rate == 0.0

    def test_profiles_without_skills(self, matching_engine):
        matching_engine.add_skill_profile({"user_name": "No Skills"})
        analytics = matching_engine.get_matching_analytics()
        assert analytics.average_skills_per_profile == 0.0
        assert analytics.verification_rate == 0.0

    def test_read_only(self, sample_engine):
        before = [p.model_dump() for p in sample_engine.profiles]
        sample_engine.get_matching_analytics()
        assert [p.model_dump() for p in sample_engine.profiles] == before


# ── Custom weights ───────────────────────────────────────────────────────────


class TestCustomWeights:
    SKILLS_ONLY = {"skills": 1.0, "interests": 0.0, "availability": 0.0, "location": 0.0, "experience": 0.0}

    def test_custom_weights_applied(self, sample_engine, digital_equity_requirements):
        engine = MatchingEngine(profiles=sample_engine.profiles, weights=self.SKILLS_ONLY, threshold=0)
        for result in engine.find_matches(digital_equity_requirements):
            assert result.match_score == result.skill_score

    def test_missing_weight(self):
        weights = dict(self.SKILLS_ONLY)
        del weights["experience"]
        with pytest.raises(ValueError, match="experience"):
            MatchingEngine(weights=weights)

    def test_unknown_weight(self):
        with pytest.raises(ValidationError):
            MatchingEngine(weights={**self.SKILLS_ONLY, "karma": 0.0})

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ValidationError, match="sum to 1.0"):
            MatchingEngine(weights={**self.SKILLS_ONLY, "interests": 0.5})


# ── Concurrency ──────────────────────────────────────────────────────────────


class TestConcurrentAccess:
    def test_reads_interleaved_with_writes(self, sample_engine, housing_requirements):
        n = 40
        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = []
            for i in range(n):
                futures.append(("add", pool.submit(sample_engine.add_skill_profile, _strong_profile_data(user_name=f"W{i}"))))
                futures.append(("record", pool.submit(sample_engine.record_match_outcome, "profile-1", f"proj-{i}", 80, True)))
                futures.append(("match", pool.submit(sample_engine.find_matches, housing_requirements)))
                futures.append(("analytics", pool.submit(sample_engine.get_matching_analytics)))

            outcomes = [(kind, future.result()) for kind, future in futures]

        assert len(sample_engine) == 5 + n
        assert len(sample_engine.get_profile("profile-1").match_history) == n

        for kind, value in outcomes:
            if kind == "record":
                assert value is True
            elif kind == "match":
                assert all(0 <= r.match_score <= 100 for r in value)
                assert len({r.profile_id for r in value}) == len(value)
            elif kind == "analytics":
                assert 5 <= value.total_profiles <= 5 + n
                assert value.active_profiles == value.total_profiles

        final = sample_engine.get_matching_analytics()
        assert final.total_profiles == 5 + n
