"""Integration tests for DiscoveryEngine."""

import asyncio
from unittest.mock import MagicMock, patch

import httpx
import pytest

from hustle_finder.cache import ResultCache
from hustle_finder.config import CategoryThresholds, EngineSettings
from hustle_finder.content import DEFAULT_SUCCESS_STORIES, ContentPool
from hustle_finder.engine import DiscoveryEngine, DiscoveryError, location_allowed, opportunity_id
from hustle_finder.models.opportunity import Category
from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.raw import LocationMode, OpportunityType, RawOpportunity
from hustle_finder.providers.catalog import CatalogProvider, entry
from hustle_finder.providers.registry import ProviderRegistry


def _engine(*providers, **settings) -> DiscoveryEngine:
    return DiscoveryEngine(registry=ProviderRegistry(providers), settings=EngineSettings(**settings))


class TestHelpers:
    """Tests for id and location helpers."""

    def test_opportunity_id_stable_and_namespaced(self) -> None:
        a = RawOpportunity(id="1", title="Logo Design", source="upwork")
        b = RawOpportunity(id="1", title="Logo Design", source="contra")
        assert opportunity_id(a) == opportunity_id(a.model_copy())
        assert opportunity_id(a) != opportunity_id(b)
        assert opportunity_id(a).startswith("opp-")
        assert len(opportunity_id(a)) == len("opp-") + 16

    @pytest.mark.parametrize(
        "location,preference,allowed",
        [
            (LocationMode.REMOTE, LocationMode.REMOTE, True),
            (LocationMode.LOCAL, LocationMode.REMOTE, False),
            (LocationMode.REMOTE, LocationMode.LOCAL, False),
            (LocationMode.BOTH, LocationMode.LOCAL, True),
            (LocationMode.LOCAL, LocationMode.BOTH, True),
        ],
    )
    def test_location_allowed(self, location, preference, allowed) -> None:
        assert location_allowed(location, preference) is allowed


class TestExampleScenario:
    """javascript+writing user, 10-20 h/week, medium risk, $2000 goal, remote."""

    def test_growth_at_default_threshold(self, static_provider, example_input, react_candidate) -> None:
        """Scores ~67.7: below the default quick-win threshold of 80."""
        engine = _engine(static_provider("board", [react_candidate]))
        result = engine.discover_sync(example_input)

        assert len(result.opportunities) == 1
        opp = result.opportunities[0]
        assert opp.match_score == pytest.approx(67.7, abs=0.01)
        assert opp.features.skill_match == 0.5
        assert opp.skill_match.matched == ["javascript"]
        assert opp.skill_match.missing == ["react"]
        assert opp.category == Category.GROWTH
        assert result.categories[Category.GROWTH] == [opp.id]

    def test_quick_win_at_lower_threshold(self, static_provider, example_input, react_candidate) -> None:
        engine = _engine(
            static_provider("board", [react_candidate]),
            thresholds=CategoryThresholds(quick_win_score=60),
        )
        opp = engine.discover_sync(example_input).opportunities[0]
        assert opp.category == Category.QUICK_WIN

    def test_enrichment(self, static_provider, example_input, react_candidate) -> None:
        opp = _engine(static_provider("board", [react_candidate])).discover_sync(example_input).opportunities[0]
        assert opp.id == opportunity_id(react_candidate)
        assert opp.provider_id == "react-gig-1"
        assert opp.monthly_income == 4500
        # freelance midpoint 18 + 14 for react
        assert opp.time_to_first_revenue_days == 32
        assert opp.skill_gap.missing_skills == ["react"]
        assert opp.skill_gap.estimated_time == "2 weeks"
        assert [r.title for r in opp.learning_resources] == [
            "React - The Complete Guide",
            "React Documentation",
        ]
        assert opp.success_stories == DEFAULT_SUCCESS_STORIES[OpportunityType.FREELANCE]


class TestDiscover:
    """Tests for the discovery pipeline."""

    def test_result_shape(self, static_provider, example_input, react_candidate, template_candidate) -> None:
        engine = _engine(
            static_provider("board", [react_candidate]),
            static_provider("shop", [template_candidate]),
        )
        result = engine.discover_sync(example_input)
        assert len(result.request_id) == 32
        assert result.input.skills == ("javascript", "writing")
        assert set(result.categories) == set(Category)
        assert result.metrics.sources_searched == 2
        assert result.metrics.raw_candidates == 2
        assert result.metrics.processing_time_ms >= 0
        ids = [o.id for o in result.opportunities]
        assert len(ids) == len(set(ids))
        indexed = [i for group in result.categories.values() for i in group]
        assert sorted(indexed) == sorted(ids)

    def test_same_title_different_sources_do_not_collide(self, static_provider, example_input) -> None:
        same = {"title": "Newsletter Writer", "required_skills": ["writing"]}
        engine = _engine(static_provider("a", [dict(same)]), static_provider("b", [dict(same)]))
        result = engine.discover_sync(example_input)
        assert len(result.opportunities) == 2
        assert {o.source for o in result.opportunities} == {"a", "b"}

    def test_duplicates_within_source_dropped(self, static_provider, example_input, react_candidate) -> None:
        engine = _engine(static_provider("board", [react_candidate, react_candidate.model_copy()]))
        result = engine.discover_sync(example_input)
        assert len(result.opportunities) == 1
        assert result.metrics.raw_candidates == 2

    def test_failing_provider_degrades(self, static_provider, failing_provider, example_input, react_candidate) -> None:
        broken = failing_provider("broken")
        engine = _engine(static_provider("board", [react_candidate]), broken)
        result = engine.discover_sync(example_input)
        assert len(result.opportunities) == 1
        assert result.metrics.sources_failed == 1
        stats = engine.registry.stats()
        assert stats["broken"].failed_requests == 1
        assert stats["board"].successful_requests == 1

    def test_degraded_builtin_adapter_feeds_health_stats(self, example_input) -> None:
        """A catalog adapter whose feed fails still returns entries but is counted as failed."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500)

        provider = CatalogProvider(
            "shop",
            "Shop",
            "https://shop.test",
            [entry("Writing Gig", "Write things.", triggers=("writ",), required_skills=["writing"])],
            feed_url="https://shop.test/feed",
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
            retries=0,
            backoff=0,
        )
        engine = _engine(provider)
        result = engine.discover_sync(example_input)

        assert [o.title for o in result.opportunities] == ["Writing Gig"]
        assert result.metrics.sources_failed == 1
        stats = engine.registry.stats()["shop"]
        assert stats.failed_requests == 1
        assert stats.successful_requests == 0
        assert stats.last_error == "Shop feed unavailable"

    def test_all_providers_fail_is_empty_result(self, failing_provider, example_input) -> None:
        result = _engine(failing_provider("x"), failing_provider("y")).discover_sync(example_input)
        assert result.opportunities == []
        assert result.metrics.sources_failed == 2

    def test_location_filter(self, static_provider, example_input) -> None:
        local = RawOpportunity(title="Dog Walking", location="local", source="town")
        hybrid = RawOpportunity(title="Tutoring", location="both", source="town")
        result = _engine(static_provider("town", [local, hybrid])).discover_sync(example_input)
        assert [o.title for o in result.opportunities] == ["Tutoring"]

    def test_min_match_score(self, static_provider, example_input, react_candidate, template_candidate) -> None:
        engine = _engine(static_provider("mixed", [react_candidate, template_candidate]), min_match_score=60)
        result = engine.discover_sync(example_input)
        assert [o.title for o in result.opportunities] == ["React Frontend Contract"]
        assert result.metrics.match_threshold == 60

    def test_max_results(self, static_provider, example_input) -> None:
        items = [RawOpportunity(title=f"Gig {i}", required_skills=["writing"]) for i in range(6)]
        result = _engine(static_provider("board", items), max_results=3).discover_sync(example_input)
        assert len(result.opportunities) == 3
        assert sum(len(v) for v in result.categories.values()) == 3

    def test_success_stories_precedence(self, static_provider, example_input) -> None:
        own = RawOpportunity(title="Own", opportunity_type="content", success_stories=["Mine."])
        bare = RawOpportunity(title="Bare", opportunity_type="service")
        provider = static_provider("s", [own, bare])

        result = _engine(provider).discover_sync(example_input)
        by_title = {o.title: o for o in result.opportunities}
        assert by_title["Own"].success_stories == ["Mine."]
        assert by_title["Bare"].success_stories == DEFAULT_SUCCESS_STORIES[OpportunityType.SERVICE]

        pool = ContentPool(success_stories={"content": ["From the pool."]})
        engine = DiscoveryEngine(registry=ProviderRegistry([provider]), content=pool)
        by_title = {o.title: o for o in engine.discover_sync(example_input).opportunities}
        assert by_title["Own"].success_stories == ["From the pool."]

    def test_engagement_feeds_popularity(self, static_provider, example_input, react_candidate) -> None:
        opp_id = opportunity_id(react_candidate)
        engine = DiscoveryEngine(
            registry=ProviderRegistry([static_provider("board", [react_candidate])]),
            engagement={opp_id: 1.0},
        )
        assert engine.discover_sync(example_input).opportunities[0].features.popularity == 1.0

    def test_internal_failure_raises_discovery_error(self, static_provider, example_input, react_candidate) -> None:
        engine = _engine(static_provider("board", [react_candidate]))
        with patch("hustle_finder.engine.rank", side_effect=RuntimeError("sort exploded")):
            with pytest.raises(DiscoveryError, match="sort exploded"):
                engine.discover_sync(example_input)
        assert len(engine.cache) == 0


class TestCaching:
    """Tests for result caching through the engine."""

    def test_hit_returns_identical_object(self, static_provider, example_input, react_candidate) -> None:
        provider = static_provider("board", [react_candidate])
        engine = _engine(provider)
        first = engine.discover_sync(example_input)
        reordered = UserDiscoveryInput(
            skills=["writing", "javascript"],
            time_availability="10-20 Hours/Week",
            risk_appetite="MEDIUM",
            income_goal=2000,
            work_preference="remote",
        )
        second = engine.discover_sync(reordered)
        assert second is first
        assert provider.calls == 1

    def test_expired_entry_refetches(self, static_provider, example_input, react_candidate) -> None:
        now = {"t": 0.0}
        provider = static_provider("board", [react_candidate])
        engine = DiscoveryEngine(
            registry=ProviderRegistry([provider]),
            cache=ResultCache(ttl_seconds=60, clock=lambda: now["t"]),
        )
        first = engine.discover_sync(example_input)
        now["t"] = 61
        second = engine.discover_sync(example_input)
        assert second is not first
        assert provider.calls == 2

    def test_injected_empty_cache_is_kept(self) -> None:
        cache = ResultCache(ttl_seconds=5)
        engine = DiscoveryEngine(registry=ProviderRegistry([]), cache=cache)
        assert engine.cache is cache

    def test_other_income_goal_is_miss(self, static_provider, example_input, react_candidate) -> None:
        """Same cache key, different goal: recomputed rather than served the other caller's result."""
        provider = static_provider("board", [react_candidate])
        engine = _engine(provider)
        first = engine.discover_sync(example_input)
        richer = example_input.model_copy(update={"income_goal": 10000})
        second = engine.discover_sync(richer)

        assert second is not first
        assert provider.calls == 2
        assert second.input.income_goal == 10000
        assert second.opportunities[0].features.income_fit < first.opportunities[0].features.income_fit

    def test_cache_read_failure_is_miss(self, static_provider, example_input, react_candidate) -> None:
        cache = MagicMock()
        cache.get.side_effect = RuntimeError("cache down")
        cache.put.side_effect = RuntimeError("cache down")
        provider = static_provider("board", [react_candidate])
        engine = DiscoveryEngine(registry=ProviderRegistry([provider]), cache=cache)
        result = engine.discover_sync(example_input)
        assert len(result.opportunities) == 1
        assert provider.calls == 1

    def test_concurrent_identical_requests(self, static_provider, example_input, react_candidate) -> None:
        engine = _engine(static_provider("board", [react_candidate]))

        async def run():
            return await asyncio.gather(engine.discover(example_input), engine.discover(example_input))

        a, b = asyncio.run(run())
        assert [o.id for o in a.opportunities] == [o.id for o in b.opportunities]


class TestSweeper:
    def test_start_and_stop(self, example_input) -> None:
        engine = _engine()

        async def run():
            task = engine.start_sweeper(0.01)
            assert engine.start_sweeper(0.01) is task
            await asyncio.sleep(0.03)
            await engine.stop_sweeper()
            return task

        task = asyncio.run(run())
        assert task.cancelled()
