"""Discovery orchestration: aggregate → filter → score → skill gap → categorize → rank → cache."""

import asyncio
import contextlib
import hashlib
import logging
import time
import uuid
from typing import Iterable, Mapping, Optional

from hustle_finder.aggregation import AggregateReport, collect
from hustle_finder.cache import ResultCache
from hustle_finder.config import EngineSettings
from hustle_finder.content import DEFAULT_SUCCESS_STORIES, ContentPool
from hustle_finder.models.opportunity import EnrichedOpportunity
from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.raw import LocationMode, RawOpportunity, typical_days_to_revenue
from hustle_finder.models.result import DiscoveryMetrics, DiscoveryResult
from hustle_finder.providers.registry import ProviderRegistry
from hustle_finder.ranking import assign_category, group_ids, rank
from hustle_finder.scoring import Scorer
from hustle_finder.skill_gap import (
    DAYS_PER_NICE_TO_HAVE_SKILL,
    DAYS_PER_REQUIRED_SKILL,
    SkillGapResolver,
)

logger = logging.getLogger(__name__)


class DiscoveryError(RuntimeError):
    """A discovery call failed; no partial result is returned."""


def opportunity_id(candidate: RawOpportunity) -> str:
    """Stable engine id from source, provider id and title."""
    basis = "|".join([candidate.source or "", candidate.id or "", candidate.title])
    return "opp-" + hashlib.sha256(basis.encode("utf-8")).hexdigest()[:16]


def location_allowed(location: LocationMode, preference: LocationMode) -> bool:
    """Remote-only and local-only exclude each other; BOTH on either side passes."""
    if preference == LocationMode.BOTH or location == LocationMode.BOTH:
        return True
    return location == preference


def _dedupe(candidates: Iterable[RawOpportunity]) -> list[tuple[str, RawOpportunity]]:
    seen: set[str] = set()
    out: list[tuple[str, RawOpportunity]] = []
    for candidate in candidates:
        opp_id = opportunity_id(candidate)
        if opp_id in seen:
            continue
        seen.add(opp_id)
        out.append((opp_id, candidate))
    return out


class DiscoveryEngine:
    """
    Turns a user profile into a ranked, categorized DiscoveryResult.

    Identical (normalized) inputs within the cache TTL return the same
    DiscoveryResult object without calling any provider. Provider failures
    only reduce the candidate pool; anything else that goes wrong raises
    DiscoveryError.
    """

    def __init__(
        self,
        registry: Optional[ProviderRegistry] = None,
        settings: Optional[EngineSettings] = None,
        cache: Optional[ResultCache] = None,
        scorer: Optional[Scorer] = None,
        skill_gaps: Optional[SkillGapResolver] = None,
        content: Optional[ContentPool] = None,
        engagement: Optional[Mapping[str, float]] = None,
    ):
        self.settings = settings or EngineSettings()
        self.registry = registry if registry is not None else ProviderRegistry.default(self.settings)
        # ResultCache defines __len__, so an empty injected cache is falsy
        if cache is None:
            cache = ResultCache(self.settings.cache.ttl_seconds, self.settings.cache.retention_seconds)
        self.cache = cache
        self.scorer = scorer if scorer is not None else Scorer(self.settings.weights, engagement=engagement)
        self.content = content
        self.skill_gaps = skill_gaps if skill_gaps is not None else SkillGapResolver(pool=content)
        self._sweeper: Optional[asyncio.Task] = None

    async def discover(self, user_input: UserDiscoveryInput) -> DiscoveryResult:
        normalized = user_input.normalized()

        cached = self._cached(normalized)
        if cached is not None:
            return cached

        started = time.perf_counter()
        try:
            report = await collect(
                self.registry.enabled(),
                normalized,
                timeout=self.settings.providers.timeout_seconds,
            )
            self._record(report)
            opportunities = self._process(report.candidates, normalized)
            result = DiscoveryResult(
                request_id=uuid.uuid4().hex,
                input=normalized,
                opportunities=opportunities,
                categories=group_ids(opportunities),
                metrics=DiscoveryMetrics(
                    sources_searched=report.sources_searched,
                    sources_failed=report.sources_failed,
                    raw_candidates=len(report.candidates),
                    match_threshold=self.settings.min_match_score,
                    processing_time_ms=(time.perf_counter() - started) * 1000,
                    source_stats=report.sources,
                ),
            )
        except Exception as e:
            logger.exception("Discovery failed for skills=%s", list(normalized.skills))
            raise DiscoveryError(f"Discovery failed: {e}") from e

        logger.info(
            "Discovered %d opportunities from %d candidates in %.0fms",
            len(result.opportunities),
            result.metrics.raw_candidates,
            result.metrics.processing_time_ms,
        )
        self._store(normalized, result)
        return result

    def discover_sync(self, user_input: UserDiscoveryInput) -> DiscoveryResult:
        """Blocking wrapper for callers without an event loop."""
        return asyncio.run(self.discover(user_input))

    def start_sweeper(self, interval_seconds: Optional[float] = None) -> asyncio.Task:
        """Start the periodic cache sweep on the running loop; idempotent."""
        if self._sweeper is None or self._sweeper.done():
            interval = interval_seconds or self.settings.cache.sweep_interval_seconds
            self._sweeper = asyncio.get_running_loop().create_task(self.cache.run_sweeper(interval))
        return self._sweeper

    async def stop_sweeper(self) -> None:
        task, self._sweeper = self._sweeper, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    def _cached(self, user_input: UserDiscoveryInput) -> Optional[DiscoveryResult]:
        """
        Cached result for the input, or None.
        The cache key leaves out the income goal, which drives income fit and
        the aspirational category, so a hit computed for another goal is a miss.
        """
        try:
            cached = self.cache.get(user_input)
        except Exception as e:
            logger.warning("Result cache read failed, treating as miss: %s", e)
            return None
        if cached is not None and cached.input.income_goal != user_input.income_goal:
            logger.debug("Result cache entry was for income goal %s, recomputing", cached.input.income_goal)
            return None
        return cached

    def _store(self, user_input: UserDiscoveryInput, result: DiscoveryResult) -> None:
        try:
            self.cache.put(user_input, result)
        except Exception as e:
            logger.warning("Result cache write failed: %s", e)

    def _record(self, report: AggregateReport) -> None:
        for source in report.sources:
            if source.failed:
                self.registry.record_failure(source.source_id, source.error or "")
            else:
                self.registry.record_success(source.source_id, source.elapsed_ms)
        self.registry.health_check()

    def _process(
        self,
        candidates: list[RawOpportunity],
        user_input: UserDiscoveryInput,
    ) -> list[EnrichedOpportunity]:
        enriched: list[EnrichedOpportunity] = []
        for opp_id, candidate in _dedupe(candidates):
            if not location_allowed(candidate.location, user_input.work_preference):
                logger.debug("Skipping %r: location %s", candidate.title, candidate.location.value)
                continue
            opp = self._enrich(opp_id, candidate, user_input)
            if opp.match_score < self.settings.min_match_score:
                continue
            enriched.append(opp)

        ranked = rank(enriched, self.settings.thresholds)
        if self.settings.max_results is not None:
            ranked = ranked[: self.settings.max_results]
        return ranked

    def _enrich(
        self,
        opp_id: str,
        candidate: RawOpportunity,
        user_input: UserDiscoveryInput,
    ) -> EnrichedOpportunity:
        scored = self.scorer.score(candidate, user_input, opportunity_id=opp_id)
        skills = scored.skill_match
        gap = self.skill_gaps.resolve(skills.missing, nice_to_have_missing=skills.missing_nice_to_have)
        days = (
            typical_days_to_revenue(candidate.opportunity_type)
            + DAYS_PER_REQUIRED_SKILL * len(skills.missing)
            + DAYS_PER_NICE_TO_HAVE_SKILL * len(skills.missing_nice_to_have)
        )
        category = assign_category(candidate, scored.score, user_input.income_goal, self.settings.thresholds)

        data = candidate.model_dump(exclude={"id"})
        data["success_stories"] = self._success_stories(candidate)
        return EnrichedOpportunity(
            **data,
            id=opp_id,
            provider_id=candidate.id,
            match_score=scored.score,
            features=scored.features,
            skill_match=skills,
            monthly_income=scored.monthly_income,
            time_to_first_revenue_days=days,
            skill_gap=gap,
            learning_resources=gap.resources,
            category=category,
        )

    def _success_stories(self, candidate: RawOpportunity) -> list[str]:
        """Content pool by type, else the candidate's own, else the built-in table."""
        if self.content is not None:
            stories = self.content.stories_for(candidate.opportunity_type)
            if stories:
                return stories
        if candidate.success_stories:
            return list(candidate.success_stories)
        return list(DEFAULT_SUCCESS_STORIES.get(candidate.opportunity_type, []))
