"""Registry of provider adapters with per-source request stats and health checks."""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional

import httpx
from pydantic import BaseModel

from hustle_finder.config import EngineSettings
from hustle_finder.providers import (
    contra,
    gumroad,
    indiehackers,
    kajabi,
    maven,
    podia,
    substack,
    teachable,
)
from hustle_finder.providers.base import ProviderAdapter
from hustle_finder.providers.upwork import UpworkProvider

logger = logging.getLogger(__name__)


class SourceStats(BaseModel):
    """Request counters for one source."""

    source_id: str
    name: str = ""
    enabled: bool = True
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    average_response_ms: float = 0.0
    last_error: Optional[str] = None
    last_error_at: Optional[datetime] = None

    @property
    def failure_rate(self) -> float:
        if self.total_requests == 0:
            return 0.0
        return self.failed_requests / self.total_requests


class ProviderRegistry:
    """
    Holds the adapters the engine fans out to.
    Sources can be disabled by hand or by health_check(); only health-disabled
    sources are re-enabled automatically.
    """

    HEALTH_MIN_REQUESTS = 10
    DISABLE_FAILURE_RATE = 0.8
    REENABLE_FAILURE_RATE = 0.3

    _builders: dict[str, Callable[..., ProviderAdapter]] = {
        "upwork": UpworkProvider,
        "gumroad": gumroad.build,
        "substack": substack.build,
        "contra": contra.build,
        "indiehackers": indiehackers.build,
        "kajabi": kajabi.build,
        "maven": maven.build,
        "podia": podia.build,
        "teachable": teachable.build,
    }

    def __init__(self, providers: Iterable[ProviderAdapter] = ()):
        self._providers: dict[str, ProviderAdapter] = {}
        self._stats: dict[str, SourceStats] = {}
        self._health_disabled: set[str] = set()
        self._lock = threading.Lock()
        for provider in providers:
            self.register(provider)

    @classmethod
    def available_sources(cls) -> list[str]:
        """Return list of built-in source identifiers."""
        return list(cls._builders.keys())

    @classmethod
    def create(cls, source_id: str, **kwargs: Any) -> ProviderAdapter:
        """Build a built-in adapter. kwargs passed to the adapter constructor."""
        builder = cls._builders.get(source_id.lower())
        if not builder:
            raise ValueError(f"Unknown source: {source_id}. Available: {list(cls._builders.keys())}")
        return builder(**kwargs)

    @classmethod
    def default(
        cls,
        settings: Optional[EngineSettings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> "ProviderRegistry":
        """All built-in adapters configured from settings; disabled_sources start disabled."""
        settings = settings or EngineSettings()
        providers = settings.providers
        registry = cls()
        for source_id in cls.available_sources():
            kwargs: dict[str, Any] = {
                "client": client,
                "cache_ttl": settings.cache.provider_ttl_seconds,
                "request_timeout": providers.request_timeout_seconds,
                "retries": providers.max_retries,
                "backoff": providers.backoff_seconds,
                "feed_url": providers.feed_urls.get(source_id),
            }
            if source_id == "upwork":
                kwargs["api_key"] = providers.upwork_api_key
            registry.register(
                cls.create(source_id, **kwargs),
                enabled=source_id not in providers.disabled_sources,
            )
        return registry

    def register(self, provider: ProviderAdapter, *, enabled: bool = True) -> None:
        """Add or replace an adapter; stats start fresh."""
        source_id = provider.source_id
        with self._lock:
            self._providers[source_id] = provider
            self._stats[source_id] = SourceStats(
                source_id=source_id,
                name=getattr(provider, "name", source_id),
                enabled=enabled,
            )
            self._health_disabled.discard(source_id)

    def unregister(self, source_id: str) -> None:
        with self._lock:
            self._providers.pop(source_id, None)
            self._stats.pop(source_id, None)
            self._health_disabled.discard(source_id)

    def get(self, source_id: str) -> ProviderAdapter:
        provider = self._providers.get(source_id)
        if provider is None:
            raise ValueError(f"Unknown source: {source_id}. Available: {list(self._providers.keys())}")
        return provider

    def enable(self, source_id: str) -> None:
        self._set_enabled(source_id, True)

    def disable(self, source_id: str) -> None:
        self._set_enabled(source_id, False)

    def _set_enabled(self, source_id: str, enabled: bool) -> None:
        self.get(source_id)
        with self._lock:
            self._stats[source_id].enabled = enabled
            self._health_disabled.discard(source_id)

    def is_enabled(self, source_id: str) -> bool:
        stats = self._stats.get(source_id)
        return bool(stats and stats.enabled)

    def enabled(self) -> list[ProviderAdapter]:
        """Enabled adapters in source-id order."""
        return [self._providers[s] for s in sorted(self._providers) if self.is_enabled(s)]

    def __len__(self) -> int:
        return len(self._providers)

    def __contains__(self, source_id: object) -> bool:
        return source_id in self._providers

    def record_success(self, source_id: str, elapsed_ms: float) -> None:
        with self._lock:
            stats = self._stats.get(source_id)
            if stats is None:
                return
            stats.total_requests += 1
            stats.successful_requests += 1
            n = stats.successful_requests
            stats.average_response_ms = (stats.average_response_ms * (n - 1) + elapsed_ms) / n

    def record_failure(self, source_id: str, error: str) -> None:
        with self._lock:
            stats = self._stats.get(source_id)
            if stats is None:
                return
            stats.total_requests += 1
            stats.failed_requests += 1
            stats.last_error = error
            stats.last_error_at = datetime.now(timezone.utc)

    def health_check(self) -> dict[str, bool]:
        """
        Disable sources failing more than 80% of over 10 requests; re-enable
        health-disabled sources whose failure rate dropped below 30%.
        Returns {source_id: new_enabled} for sources that changed.
        """
        changed: dict[str, bool] = {}
        with self._lock:
            for source_id, stats in self._stats.items():
                if stats.total_requests <= self.HEALTH_MIN_REQUESTS:
                    continue
                rate = stats.failure_rate
                if stats.enabled and rate > self.DISABLE_FAILURE_RATE:
                    logger.warning("Disabling source %s due to high failure rate: %.2f", source_id, rate)
                    stats.enabled = False
                    self._health_disabled.add(source_id)
                    changed[source_id] = False
                elif source_id in self._health_disabled and rate < self.REENABLE_FAILURE_RATE:
                    logger.info("Re-enabling source %s, failure rate improved: %.2f", source_id, rate)
                    stats.enabled = True
                    self._health_disabled.discard(source_id)
                    changed[source_id] = True
        return changed

    def stats(self) -> dict[str, SourceStats]:
        """Snapshot copies of per-source stats."""
        with self._lock:
            return {s: st.model_copy() for s, st in self._stats.items()}
