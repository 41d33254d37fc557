"""Pytest fixtures for hustle-finder tests."""

from typing import Any, Optional

import pytest

from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.raw import RawOpportunity


class StaticProvider:
    """Async adapter returning fixed candidates; records how often it was called."""

    def __init__(self, source_id: str, items: list[Any], name: Optional[str] = None):
        self.source_id = source_id
        self.name = name or source_id.title()
        self._items = items
        self.calls = 0

    async def fetch(self, user_input: UserDiscoveryInput) -> list[Any]:
        self.calls += 1
        return list(self._items)


class FailingProvider:
    """Async adapter that raises instead of degrading."""

    def __init__(self, source_id: str = "broken", error: Optional[Exception] = None):
        self.source_id = source_id
        self.name = source_id.title()
        self._error = error or RuntimeError("upstream exploded")
        self.calls = 0

    async def fetch(self, user_input: UserDiscoveryInput) -> list[Any]:
        self.calls += 1
        raise self._error


@pytest.fixture
def example_input() -> UserDiscoveryInput:
    """Profile used across scoring, ranking and engine tests."""
    return UserDiscoveryInput(
        skills=["JavaScript", "writing"],
        time_availability="10-20 hours/week",
        risk_appetite="medium",
        income_goal=2000,
        work_preference="remote",
    )


@pytest.fixture
def react_candidate() -> RawOpportunity:
    """Freelance candidate requiring javascript + react, $3000-6000/month, 15-25 h/week, low barrier."""
    return RawOpportunity(
        id="react-gig-1",
        title="React Frontend Contract",
        description="",
        source="testboard",
        opportunity_type="freelance",
        required_skills=["javascript", "react"],
        estimated_income={"min": 3000, "max": 6000, "timeframe": "monthly"},
        time_required={"min": 15, "max": 25, "unit": "week"},
        location="remote",
        entry_barrier="low",
        competition="medium",
    )


@pytest.fixture
def template_candidate() -> RawOpportunity:
    """Digital product candidate with a modest income."""
    return RawOpportunity(
        title="Notion Template Pack",
        description="Sell productivity templates.",
        source="testshop",
        opportunity_type="digital-product",
        required_skills=["notion"],
        estimated_income={"min": 200, "max": 1000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 50},
        time_required={"min": 5, "max": 10},
        entry_barrier="low",
    )


@pytest.fixture
def static_provider() -> type[StaticProvider]:
    """Factory for fixed-result adapters: static_provider("src", [items])."""
    return StaticProvider


@pytest.fixture
def failing_provider() -> type[FailingProvider]:
    """Factory for adapters that raise from fetch."""
    return FailingProvider
