"""Unit tests for ProviderRegistry."""

from unittest.mock import patch

import pytest

from hustle_finder.config import EngineSettings, ProviderSettings
from hustle_finder.providers.registry import ProviderRegistry
from hustle_finder.providers.upwork import UpworkProvider


class TestProviderRegistryBuiltins:
    """Tests for built-in source construction."""

    def test_available_sources(self) -> None:
        sources = ProviderRegistry.available_sources()
        assert sources == [
            "upwork",
            "gumroad",
            "substack",
            "contra",
            "indiehackers",
            "kajabi",
            "maven",
            "podia",
            "teachable",
        ]

    def test_create_case_insensitive(self) -> None:
        assert ProviderRegistry.create("Gumroad").source_id == "gumroad"

    def test_unknown_source_raises(self) -> None:
        """Unknown source raises ValueError."""
        with pytest.raises(ValueError, match="Unknown source: fiverr"):
            ProviderRegistry.create("fiverr")

    def test_default_registers_all(self) -> None:
        registry = ProviderRegistry.default()
        assert len(registry) == 9
        assert [p.source_id for p in registry.enabled()] == sorted(ProviderRegistry.available_sources())

    def test_default_honors_disabled_sources(self) -> None:
        settings = EngineSettings(providers=ProviderSettings(disabled_sources=["kajabi", "maven"]))
        registry = ProviderRegistry.default(settings)
        assert "kajabi" in registry
        assert not registry.is_enabled("kajabi")
        assert "maven" not in [p.source_id for p in registry.enabled()]

    def test_default_passes_upwork_key(self) -> None:
        settings = EngineSettings(providers=ProviderSettings(upwork_api_key="abc"))
        with patch.dict("os.environ", {}, clear=True):
            registry = ProviderRegistry.default(settings)
        upwork = registry.get("upwork")
        assert isinstance(upwork, UpworkProvider)
        assert upwork.has_api_access


class TestProviderRegistry:
    """Tests for registration, enablement and stats."""

    def test_register_and_get(self, static_provider) -> None:
        registry = ProviderRegistry([static_provider("alpha", [])])
        assert registry.get("alpha").source_id == "alpha"
        assert registry.stats()["alpha"].name == "Alpha"

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown source: beta"):
            ProviderRegistry().get("beta")

    def test_enable_disable(self, static_provider) -> None:
        registry = ProviderRegistry([static_provider("b", []), static_provider("a", [])])
        registry.disable("a")
        assert [p.source_id for p in registry.enabled()] == ["b"]
        registry.enable("a")
        assert [p.source_id for p in registry.enabled()] == ["a", "b"]

    def test_unregister(self, static_provider) -> None:
        registry = ProviderRegistry([static_provider("a", [])])
        registry.unregister("a")
        assert "a" not in registry
        assert len(registry) == 0

    def test_record_stats(self, static_provider) -> None:
        registry = ProviderRegistry([static_provider("a", [])])
        registry.record_success("a", 100)
        registry.record_success("a", 300)
        registry.record_failure("a", "timeout")
        stats = registry.stats()["a"]
        assert stats.total_requests == 3
        assert stats.successful_requests == 2
        assert stats.failed_requests == 1
        assert stats.average_response_ms == pytest.approx(200)
        assert stats.last_error == "timeout"
        assert stats.last_error_at is not None

    def test_record_unknown_source_ignored(self) -> None:
        registry = ProviderRegistry()
        registry.record_failure("ghost", "x")
        assert registry.stats() == {}

    def test_stats_are_copies(self, static_provider) -> None:
        registry = ProviderRegistry([static_provider("a", [])])
        registry.stats()["a"].total_requests = 99
        assert registry.stats()["a"].total_requests == 0


class TestHealthCheck:
    """Tests for automatic disable/re-enable by failure rate."""

    def test_needs_more_than_ten_requests(self, static_provider) -> None:
        registry = ProviderRegistry([static_provider("a", [])])
        for _ in range(10):
            registry.record_failure("a", "down")
        assert registry.health_check() == {}
        assert registry.is_enabled("a")

    def test_disables_high_failure_rate(self, static_provider) -> None:
        registry = ProviderRegistry([static_provider("a", [])])
        for _ in range(11):
            registry.record_failure("a", "down")
        assert registry.health_check() == {"a": False}
        assert not registry.is_enabled("a")

    def test_reenables_when_recovered(self, static_provider) -> None:
        registry = ProviderRegistry([static_provider("a", [])])
        for _ in range(11):
            registry.record_failure("a", "down")
        registry.health_check()
        for _ in range(30):
            registry.record_success("a", 10)
        # 11 failures / 41 requests is below 0.3
        assert registry.health_check() == {"a": True}
        assert registry.is_enabled("a")

    def test_manual_disable_not_reenabled(self, static_provider) -> None:
        registry = ProviderRegistry([static_provider("a", [])])
        registry.disable("a")
        for _ in range(20):
            registry.record_success("a", 10)
        assert registry.health_check() == {}
        assert not registry.is_enabled("a")
