"""Tests for the Profile snapshot and its queries."""

import pytest

from duolingo_client.core.profile import (
    SUMMARY_FIELDS,
    Profile,
    UnknownLanguageError,
    sort_skills_by_learned,
)
from duolingo_client.errors import DuolingoError


class TestFromPayload:
    """Tests for Profile.from_payload."""

    def test_language_codes_follow_payload_order(self, sample_profile):
        profile = Profile.from_payload(sample_profile)
        assert profile.language_codes == ("es", "fr")

    def test_default_target_is_first_language(self, sample_profile):
        profile = Profile.from_payload(sample_profile)
        assert profile.default_target_language == "es"

    def test_missing_language_data(self):
        profile = Profile.from_payload({"username": "ana"})
        assert profile.language_codes == ()
        assert profile.default_target_language is None

    def test_ui_language(self, sample_profile):
        assert Profile.from_payload(sample_profile).ui_language == "en"


class TestLearningLanguages:
    """Tests for learning_languages."""

    def test_display_names(self, sample_profile):
        profile = Profile.from_payload(sample_profile)
        assert profile.learning_languages() == ["Spanish", "French"]

    def test_abbreviations(self, sample_profile):
        profile = Profile.from_payload(sample_profile)
        assert profile.learning_languages(abbreviations=True) == ["es", "fr"]

    def test_no_languages(self):
        assert Profile.from_payload({}).learning_languages() == []


class TestSummary:
    """Tests for summary projection."""

    def test_summary_order(self, sample_profile):
        summary = Profile.from_payload(sample_profile).summary()

        assert len(summary) == len(SUMMARY_FIELDS)
        assert summary[0] == "ana"
        assert summary[1] == "Aprendiendo idiomas"
        assert summary[2] == 42
        assert summary[3] == 3
        assert summary[4] == 5
        assert summary[-1] == "en"

    def test_missing_fields_are_none(self, sample_profile):
        summary = Profile.from_payload(sample_profile).summary_dict()
        assert summary["gplus_id"] is None
        assert summary["twitter_id"] is None

    def test_summary_of_empty_payload(self):
        assert Profile.from_payload({}).summary() == [None] * len(SUMMARY_FIELDS)


class TestSkills:
    """Tests for per-language skill queries."""

    def test_raw_skills_unfiltered(self, sample_profile):
        skills = Profile.from_payload(sample_profile).skills("es")
        assert [s["title"] for s in skills] == ["Basics 1", "Food", "Animals"]

    def test_learned_skills_newest_first(self, sample_profile):
        learned = Profile.from_payload(sample_profile).learned_skills("es")
        assert [s["learned_ts"] for s in learned] == [10, 5]

    def test_learned_skills_does_not_mutate_payload(self, sample_profile):
        profile = Profile.from_payload(sample_profile)
        profile.learned_skills("es")
        titles = [s["title"] for s in sample_profile["language_data"]["es"]["skills"]]
        assert titles == ["Basics 1", "Food", "Animals"]

    def test_learned_words(self, sample_profile):
        words = Profile.from_payload(sample_profile).learned_words("es")
        assert words == ["a", "b", "c"]

    def test_known_topics(self, sample_profile):
        topics = Profile.from_payload(sample_profile).known_topics("es")
        assert topics == ["Basics 1", "Animals"]

    def test_language_without_skills(self, sample_profile):
        profile = Profile.from_payload(sample_profile)
        assert profile.learned_skills("fr") == []
        assert profile.learned_words("fr") == []

    def test_unknown_language(self, sample_profile):
        profile = Profile.from_payload(sample_profile)
        with pytest.raises(UnknownLanguageError) as exc_info:
            profile.learned_words("it")

        assert exc_info.value.language == "it"
        assert exc_info.value.available == ["es", "fr"]
        assert isinstance(exc_info.value, DuolingoError)

    def test_null_language_entry(self):
        profile = Profile.from_payload({"language_data": {"es": None}})
        assert profile.skills("es") == []
        assert profile.learned_words("es") == []
        assert profile.known_topics("es") == []

    def test_default_language_error_message(self):
        error = UnknownLanguageError(None, [])
        assert error.language is None
        assert "idioma por defecto" in str(error)

    def test_has_language(self, sample_profile):
        profile = Profile.from_payload(sample_profile)
        assert profile.has_language("es") is True
        assert profile.has_language("de") is False


class TestSortSkillsByLearned:
    """Tests for the learned-skill ordering on partial input."""

    def test_learned_before_unlearned(self):
        skills = [
            {"title": "x", "learned": False},
            {"title": "y", "learned": True, "learned_ts": 1},
        ]
        assert [s["title"] for s in sort_skills_by_learned(skills)] == ["y", "x"]

    def test_missing_timestamp_sorts_last(self):
        skills = [
            {"title": "old", "learned": True},
            {"title": "new", "learned": True, "learned_ts": 3},
        ]
        assert [s["title"] for s in sort_skills_by_learned(skills)] == ["new", "old"]
