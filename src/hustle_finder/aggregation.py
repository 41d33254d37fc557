"""Concurrent fan-out to provider adapters.

Every adapter runs as its own task bounded by a timeout. A failing or slow
adapter contributes no candidates and an error entry in its SourceReport;
it never cancels or delays reporting of the others.

Adapters that swallow their own errors (see providers.base.guarded) expose
the most recent one as `last_error`. A non-empty value after fetch marks the
source as failed in its SourceReport while keeping whatever it returned.
"""

import asyncio
import inspect
import logging
import time
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field, ValidationError

from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.raw import RawOpportunity
from hustle_finder.models.result import SourceReport
from hustle_finder.providers.base import ProviderAdapter

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_TIMEOUT = 30.0


class AggregateReport(BaseModel):
    """Merged candidates plus one report per adapter called."""

    candidates: list[RawOpportunity] = Field(default_factory=list)
    sources: list[SourceReport] = Field(default_factory=list)

    @property
    def sources_searched(self) -> int:
        return len(self.sources)

    @property
    def sources_failed(self) -> int:
        return sum(1 for s in self.sources if s.failed)


async def _call(provider: ProviderAdapter, user_input: UserDiscoveryInput) -> Any:
    """Await async adapters directly; run sync ones in a worker thread."""
    if inspect.iscoroutinefunction(provider.fetch):
        return await provider.fetch(user_input)
    result = await asyncio.to_thread(provider.fetch, user_input)
    if inspect.isawaitable(result):
        result = await result
    return result


def _coerce(found: Any, source_id: str) -> list[RawOpportunity]:
    """Accept RawOpportunity or dicts; skip anything that does not validate."""
    items: list[RawOpportunity] = []
    for item in found or []:
        try:
            opp = item if isinstance(item, RawOpportunity) else RawOpportunity.model_validate(item)
        except ValidationError as e:
            logger.warning("Skipping malformed candidate from %s: %s", source_id, e)
            continue
        if not opp.source:
            opp = opp.model_copy(update={"source": source_id})
        items.append(opp)
    return items


async def _run_one(
    provider: ProviderAdapter,
    user_input: UserDiscoveryInput,
    timeout: Optional[float],
) -> tuple[list[RawOpportunity], SourceReport]:
    source_id = getattr(provider, "source_id", None) or type(provider).__name__
    started = time.perf_counter()
    error: Optional[str] = None
    items: list[RawOpportunity] = []
    try:
        found = await asyncio.wait_for(_call(provider, user_input), timeout=timeout)
        items = _coerce(found, source_id)
        degraded = getattr(provider, "last_error", None)
        if isinstance(degraded, str) and degraded:
            error = degraded
            logger.warning("Source %s degraded: %s", source_id, error)
    except asyncio.TimeoutError:
        error = "timed out" if timeout is None else f"timed out after {timeout:g}s"
        logger.warning("Source %s %s", source_id, error)
    except Exception as e:
        error = str(e) or type(e).__name__
        logger.warning("Source %s failed: %s", source_id, error, exc_info=True)

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.debug("Source %s returned %d candidates in %.0fms", source_id, len(items), elapsed_ms)
    return items, SourceReport(source_id=source_id, count=len(items), elapsed_ms=elapsed_ms, error=error)


async def collect(
    sources: Iterable[ProviderAdapter],
    user_input: UserDiscoveryInput,
    *,
    timeout: Optional[float] = DEFAULT_PROVIDER_TIMEOUT,
) -> AggregateReport:
    """Call all sources concurrently and merge their candidates."""
    sources = list(sources)
    if not sources:
        return AggregateReport()
    outcomes = await asyncio.gather(*(_run_one(p, user_input, timeout) for p in sources))

    report = AggregateReport()
    for items, source_report in outcomes:
        report.candidates.extend(items)
        report.sources.append(source_report)
    logger.info(
        "Aggregated %d candidates from %d sources (%d failed)",
        len(report.candidates),
        report.sources_searched,
        report.sources_failed,
    )
    return report


async def aggregate(
    sources: Iterable[ProviderAdapter],
    user_input: UserDiscoveryInput,
    *,
    timeout: Optional[float] = DEFAULT_PROVIDER_TIMEOUT,
) -> list[RawOpportunity]:
    """Merged candidates from all sources; order is unspecified."""
    report = await collect(sources, user_input, timeout=timeout)
    return report.candidates
