"""Engine configuration: scoring weights, category thresholds, cache and provider settings."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

ENV_PREFIX = "HUSTLE_FINDER_"


class ScoringWeights(BaseModel):
    """Raw feature weights; normalized to sum to 1 before use."""

    skill_match: float = 0.35
    skill_multiplier: float = 2.0
    time_fit: float = 0.15
    risk_fit: float = 0.15
    income_fit: float = 0.20
    content_quality: float = 0.05
    popularity: float = 0.10

    roi_weight: float = Field(default=0.2, ge=0, le=1, description="Blend weight of the ROI pass")
    roi_cap: float = Field(default=100.0, gt=0, description="ROI value mapped to 1.0")
    startup_cost_floor: float = Field(default=1.0, gt=0)

    def normalized(self) -> dict[str, float]:
        """Feature name -> weight, summing to 1."""
        raw = {
            "skill_match": self.skill_match * self.skill_multiplier,
            "time_fit": self.time_fit,
            "risk_fit": self.risk_fit,
            "income_fit": self.income_fit,
            "content_quality": self.content_quality,
            "popularity": self.popularity,
        }
        total = sum(w for w in raw.values() if w > 0)
        if total <= 0:
            return {k: 1 / len(raw) for k in raw}
        return {k: max(0.0, w) / total for k, w in raw.items()}


class CategoryThresholds(BaseModel):
    quick_win_score: float = 80.0
    aspirational_income_multiple: float = 2.0
    aspirational_score_ceiling: float = 60.0
    score_noise: float = Field(default=10.0, description="Score gaps at or below this rank by income")


class CacheSettings(BaseModel):
    ttl_seconds: float = 3600.0
    retention_seconds: float = 24 * 3600.0
    sweep_interval_seconds: float = 15 * 60.0
    provider_ttl_seconds: float = 3600.0


class ProviderSettings(BaseModel):
    timeout_seconds: float = Field(default=30.0, gt=0, description="Per-adapter bound in the aggregator")
    request_timeout_seconds: float = 15.0
    max_retries: int = Field(default=3, ge=0)
    backoff_seconds: float = 2.0
    disabled_sources: list[str] = Field(default_factory=list)
    feed_urls: dict[str, str] = Field(default_factory=dict)
    upwork_api_key: Optional[str] = None


class EngineSettings(BaseModel):
    """Top-level settings. Defaults mirror the production constants."""

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    thresholds: CategoryThresholds = Field(default_factory=CategoryThresholds)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    providers: ProviderSettings = Field(default_factory=ProviderSettings)
    max_results: Optional[int] = Field(default=None, ge=1)
    min_match_score: float = Field(default=0.0, ge=0, le=100, description="Reported as match_threshold")
    log_level: str = "INFO"

    @classmethod
    def load(cls, path: Optional[str | Path] = None) -> "EngineSettings":
        """Load from optional YAML file, then apply HUSTLE_FINDER_* environment overrides."""
        data: dict[str, Any] = {}
        if path is not None:
            data = yaml.safe_load(Path(path).read_text()) or {}
        settings = cls.model_validate(data)
        return settings._with_env_overrides()

    def _with_env_overrides(self) -> "EngineSettings":
        env = os.environ
        cache = self.cache
        providers = self.providers
        log_level = self.log_level

        ttl = env.get(f"{ENV_PREFIX}CACHE_TTL")
        if ttl:
            cache = cache.model_copy(update={"ttl_seconds": float(ttl)})
        timeout = env.get(f"{ENV_PREFIX}PROVIDER_TIMEOUT")
        if timeout:
            providers = providers.model_copy(update={"timeout_seconds": float(timeout)})
        disabled = env.get(f"{ENV_PREFIX}DISABLED_SOURCES")
        if disabled:
            names = [s.strip().lower() for s in disabled.split(",") if s.strip()]
            providers = providers.model_copy(update={"disabled_sources": names})
        api_key = env.get(f"{ENV_PREFIX}UPWORK_API_KEY")
        if api_key:
            providers = providers.model_copy(update={"upwork_api_key": api_key})
        level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            log_level = level.upper()

        return self.model_copy(update={"cache": cache, "providers": providers, "log_level": log_level})
