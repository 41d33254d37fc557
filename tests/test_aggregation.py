"""Unit tests for concurrent provider aggregation."""

import asyncio
import time

from hustle_finder.aggregation import aggregate, collect
from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.raw import RawOpportunity


class SlowProvider:
    source_id = "slow"
    name = "Slow"

    async def fetch(self, user_input):
        await asyncio.sleep(5)
        return [RawOpportunity(title="Too Late")]


class SyncProvider:
    """Blocking adapter; run in a worker thread by the aggregator."""

    source_id = "legacy"
    name = "Legacy"

    def fetch(self, user_input):
        return [RawOpportunity(title=f"Legacy {s}") for s in user_input.skills]


class SocketTimeoutProvider:
    """Blocking adapter whose own I/O times out."""

    source_id = "sockets"
    name = "Sockets"

    def fetch(self, user_input):
        raise TimeoutError("read timed out")


class DegradedProvider:
    """Returns catalog results but reports that its live feed failed."""

    source_id = "degraded"
    name = "Degraded"

    def __init__(self):
        self.last_error = None

    async def fetch(self, user_input):
        self.last_error = "Degraded feed unavailable"
        return [RawOpportunity(title="Catalog Only")]


class TestCollect:
    """Tests for collect()."""

    def test_merges_all_sources(self, static_provider) -> None:
        a = static_provider("a", [RawOpportunity(title="A1"), RawOpportunity(title="A2")])
        b = static_provider("b", [RawOpportunity(title="B1")])
        report = asyncio.run(collect([a, b], UserDiscoveryInput(skills=["x"])))
        assert sorted(o.title for o in report.candidates) == ["A1", "A2", "B1"]
        assert report.sources_searched == 2
        assert report.sources_failed == 0
        assert {s.source_id: s.count for s in report.sources} == {"a": 2, "b": 1}

    def test_failure_isolated(self, static_provider, failing_provider) -> None:
        """One raising adapter out of three leaves the others' candidates intact."""
        sources = [
            static_provider("a", [RawOpportunity(title="A1")]),
            failing_provider("broken"),
            static_provider("c", [RawOpportunity(title="C1")]),
        ]
        report = asyncio.run(collect(sources, UserDiscoveryInput()))
        assert sorted(o.title for o in report.candidates) == ["A1", "C1"]
        assert report.sources_failed == 1
        broken = next(s for s in report.sources if s.source_id == "broken")
        assert broken.error == "upstream exploded"
        assert broken.count == 0

    def test_timeout_isolated(self, static_provider) -> None:
        """A slow adapter is cut off at the timeout without delaying the rest."""
        fast = static_provider("fast", [RawOpportunity(title="Quick")])
        started = time.perf_counter()
        report = asyncio.run(collect([SlowProvider(), fast], UserDiscoveryInput(), timeout=0.1))
        elapsed = time.perf_counter() - started

        assert elapsed < 2
        assert [o.title for o in report.candidates] == ["Quick"]
        slow = next(s for s in report.sources if s.source_id == "slow")
        assert slow.failed
        assert "timed out" in slow.error

    def test_adapter_timeout_without_bound(self, static_provider) -> None:
        """An adapter raising TimeoutError itself is isolated even with timeout=None."""
        fast = static_provider("fast", [RawOpportunity(title="Quick")])
        report = asyncio.run(collect([SocketTimeoutProvider(), fast], UserDiscoveryInput(), timeout=None))
        assert [o.title for o in report.candidates] == ["Quick"]
        assert report.sources_failed == 1
        assert next(s for s in report.sources if s.source_id == "sockets").failed

    def test_degraded_adapter_counts_as_failed(self) -> None:
        """Candidates are kept, but the swallowed error is reported."""
        report = asyncio.run(collect([DegradedProvider()], UserDiscoveryInput()))
        assert [o.title for o in report.candidates] == ["Catalog Only"]
        assert report.sources_failed == 1
        assert report.sources[0].error == "Degraded feed unavailable"
        assert report.sources[0].count == 1

    def test_sync_adapter(self) -> None:
        report = asyncio.run(collect([SyncProvider()], UserDiscoveryInput(skills=["python", "sql"])))
        assert [o.title for o in report.candidates] == ["Legacy python", "Legacy sql"]

    def test_dicts_coerced_and_invalid_skipped(self, static_provider) -> None:
        provider = static_provider(
            "feed",
            [
                {"title": "From Dict", "opportunity_type": "content"},
                {"title": "Bad", "opportunity_type": "lottery"},
                RawOpportunity(title="Already Sourced", source="elsewhere"),
            ],
        )
        report = asyncio.run(collect([provider], UserDiscoveryInput()))
        titles = {o.title: o.source for o in report.candidates}
        assert titles == {"From Dict": "feed", "Already Sourced": "elsewhere"}

    def test_no_sources(self) -> None:
        report = asyncio.run(collect([], UserDiscoveryInput()))
        assert report.candidates == []
        assert report.sources == []

    def test_zero_results_is_not_failure(self, static_provider) -> None:
        report = asyncio.run(collect([static_provider("empty", [])], UserDiscoveryInput()))
        assert report.sources_failed == 0
        assert report.sources[0].count == 0


class TestAggregate:
    def test_returns_flat_list(self, static_provider, failing_provider) -> None:
        sources = [static_provider("a", [RawOpportunity(title="A1")]), failing_provider()]
        candidates = asyncio.run(aggregate(sources, UserDiscoveryInput()))
        assert [o.title for o in candidates] == ["A1"]
