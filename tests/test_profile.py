"""Unit tests for UserDiscoveryInput."""

import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.raw import Level, LocationMode


class TestUserDiscoveryInput:
    """Tests for UserDiscoveryInput model."""

    def test_defaults(self) -> None:
        profile = UserDiscoveryInput()
        assert profile.skills == ()
        assert profile.time_availability == "any"
        assert profile.risk_appetite == Level.MEDIUM
        assert profile.work_preference == LocationMode.BOTH
        assert profile.income_goal == 0

    def test_frozen(self) -> None:
        """Input is immutable for the duration of a request."""
        profile = UserDiscoveryInput(skills=["python"])
        with pytest.raises(ValidationError):
            profile.income_goal = 5000

    def test_comma_separated_skills(self) -> None:
        profile = UserDiscoveryInput(skills="python, sql ,,writing")
        assert profile.skills == ("python", "sql", "writing")

    def test_any_work_preference_is_both(self) -> None:
        assert UserDiscoveryInput(work_preference="any").work_preference == LocationMode.BOTH
        assert UserDiscoveryInput(work_preference="Remote").work_preference == LocationMode.REMOTE

    def test_unknown_risk_defaults_to_medium(self) -> None:
        assert UserDiscoveryInput(risk_appetite="yolo").risk_appetite == Level.MEDIUM

    def test_negative_goal_rejected(self) -> None:
        with pytest.raises(ValidationError):
            UserDiscoveryInput(income_goal=-1)

    def test_normalized(self) -> None:
        """normalized() lowercases, de-duplicates and sorts skills."""
        profile = UserDiscoveryInput(skills=["Writing", "javascript", "JavaScript "], time_availability=" Part-Time ")
        norm = profile.normalized()
        assert norm.skills == ("javascript", "writing")
        assert norm.time_availability == "part-time"
        assert profile.skills == ("Writing", "javascript", "JavaScript")

    def test_cache_key_is_order_and_case_insensitive(self) -> None:
        a = UserDiscoveryInput(skills=["React", "python"], risk_appetite="high", work_preference="remote")
        b = UserDiscoveryInput(skills=["PYTHON", "react"], risk_appetite="HIGH", work_preference="remote")
        assert a.cache_key() == b.cache_key()
        assert a.cache_key() == "python,react|any|high|remote"

    def test_cache_key_differs_by_band(self) -> None:
        a = UserDiscoveryInput(skills=["python"], time_availability="part-time")
        b = UserDiscoveryInput(skills=["python"], time_availability="full-time")
        assert a.cache_key() != b.cache_key()

    def test_from_yaml_nested_preferences(self) -> None:
        """from_yaml reads a nested preferences block."""
        yaml_content = """
skills: [javascript, writing]
preferences:
  timeAvailability: 10-20 hours/week
  riskAppetite: medium
  incomeGoals: 2000
  workPreference: remote
"""
        with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False) as f:
            Path(f.name).write_text(yaml_content)
            profile = UserDiscoveryInput.from_yaml(f.name)
            Path(f.name).unlink()
        assert profile.skills == ("javascript", "writing")
        assert profile.time_availability == "10-20 hours/week"
        assert profile.income_goal == 2000
        assert profile.work_preference == LocationMode.REMOTE

    def test_from_yaml_flat_structure(self) -> None:
        """from_yaml supports flat snake_case keys."""
        yaml_content = """
skills: [design]
time_availability: weekends
risk_appetite: low
income_goal: 500
context: Parent of two, prefers async work
"""
        with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False) as f:
            Path(f.name).write_text(yaml_content)
            profile = UserDiscoveryInput.from_yaml(f.name)
            Path(f.name).unlink()
        assert profile.skills == ("design",)
        assert profile.risk_appetite == Level.LOW
        assert profile.work_preference == LocationMode.BOTH
        assert profile.context.startswith("Parent")
