"""Discovery result returned by the engine."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hustle_finder.models.opportunity import Category, EnrichedOpportunity
from hustle_finder.models.profile import UserDiscoveryInput


class SourceReport(BaseModel):
    """Outcome of one provider call during aggregation."""

    model_config = ConfigDict(frozen=True)

    source_id: str
    count: int = 0
    elapsed_ms: float = 0.0
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class DiscoveryMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    sources_searched: int = 0
    sources_failed: int = 0
    raw_candidates: int = 0
    match_threshold: float = 0.0
    processing_time_ms: float = 0.0
    source_stats: list[SourceReport] = Field(default_factory=list)


class DiscoveryResult(BaseModel):
    """
    Ranked, categorized output of one discovery call.
    Created once by the engine and never mutated; cache hits return the same object.
    `input` echoes the normalized input of the call that computed it. Hits are
    only served to callers with the same cache key and income goal, so its
    `context` may still be another caller's.
    """

    model_config = ConfigDict(frozen=True)

    request_id: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    input: UserDiscoveryInput
    opportunities: list[EnrichedOpportunity] = Field(default_factory=list)
    categories: dict[Category, list[str]] = Field(default_factory=dict)
    metrics: DiscoveryMetrics = Field(default_factory=DiscoveryMetrics)

    def by_category(self, category: Category) -> list[EnrichedOpportunity]:
        """Opportunities of one category, in ranked order."""
        wanted = set(self.categories.get(category, []))
        return [o for o in self.opportunities if o.id in wanted]
