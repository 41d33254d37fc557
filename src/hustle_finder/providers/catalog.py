"""Curated catalog provider shared by the platform modules."""

import logging
from typing import Any, Callable, Iterable, Optional, Sequence

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from hustle_finder.cache import TTLCache
from hustle_finder.matching import has_word_prefix
from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.raw import (
    OpportunityType,
    RawOpportunity,
    typical_days_to_revenue,
)
from hustle_finder.providers.base import (
    DEFAULT_BACKOFF,
    DEFAULT_HEADERS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_RETRIES,
    categorize_risk,
    fetch_json,
    guarded,
    make_opportunity_id,
    skills_cache_key,
)

logger = logging.getLogger(__name__)

# Listing keys accepted in feed payloads (camelCase alternates first-match)
_LISTING_ALIASES: dict[str, tuple[str, ...]] = {
    "id": ("id", "listingId"),
    "title": ("title", "name"),
    "description": ("description", "summary"),
    "url": ("url", "link"),
    "opportunity_type": ("opportunity_type", "type"),
    "required_skills": ("required_skills", "requiredSkills", "skills"),
    "nice_to_have_skills": ("nice_to_have_skills", "niceToHaveSkills"),
    "estimated_income": ("estimated_income", "estimatedIncome", "income"),
    "startup_cost": ("startup_cost", "startupCost"),
    "time_required": ("time_required", "timeRequired"),
    "location": ("location",),
    "entry_barrier": ("entry_barrier", "entryBarrier"),
    "competition": ("competition",),
    "steps_to_start": ("steps_to_start", "stepsToStart"),
    "resources": ("resources", "resourceLinks"),
    "success_stories": ("success_stories", "successStories"),
}


class CatalogEntry(BaseModel):
    """
    Opportunity template offered when any trigger prefixes a word of a user skill.
    always=True entries are offered regardless of skills.
    """

    model_config = ConfigDict(frozen=True)

    opportunity: RawOpportunity
    triggers: tuple[str, ...] = ()
    always: bool = False

    def matches(self, skills: Iterable[str]) -> bool:
        if self.always:
            return True
        return any(has_word_prefix(skill, t) for skill in skills for t in self.triggers)


def parse_listing(
    item: dict[str, Any],
    source_id: str,
    default_type: OpportunityType = OpportunityType.FREELANCE,
) -> RawOpportunity:
    """
    Convert one feed listing dict to RawOpportunity.
    Missing entry barrier is derived from startup cost, revenue window and competition.
    Raises ValidationError for listings that cannot be coerced.
    """
    data: dict[str, Any] = {}
    for field, keys in _LISTING_ALIASES.items():
        for key in keys:
            if item.get(key) not in (None, ""):
                data[field] = item[key]
                break
    data.setdefault("opportunity_type", default_type)
    data["source"] = source_id
    if data.get("id") is not None:
        data["id"] = str(data["id"])

    opp = RawOpportunity.model_validate(data)
    if "entry_barrier" not in data:
        days = item.get("days_to_first_dollar") or typical_days_to_revenue(opp.opportunity_type)
        barrier = categorize_risk(opp.startup_cost.average, float(days), opp.competition)
        opp = opp.model_copy(update={"entry_barrier": barrier})
    return opp


def _feed_items(payload: Any) -> list[dict]:
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict):
        items = payload.get("items") or payload.get("opportunities") or payload.get("results") or []
    else:
        items = []
    return [i for i in items if isinstance(i, dict)]


def _unique_by_title(opportunities: Iterable[RawOpportunity]) -> list[RawOpportunity]:
    seen: set[str] = set()
    out: list[RawOpportunity] = []
    for o in opportunities:
        key = o.title.strip().lower()
        if key not in seen:
            seen.add(key)
            out.append(o)
    return out


class CatalogProvider:
    """
    Provider backed by a curated catalog of opportunity templates,
    optionally merged with a JSON listings feed.

    Results are cached per sorted skill list; callers always get copies.
    A feed failure leaves `last_error` set for the call that hit it.
    """

    def __init__(
        self,
        source_id: str,
        name: str,
        base_url: str,
        entries: Sequence[CatalogEntry],
        *,
        opportunity_type: OpportunityType = OpportunityType.FREELANCE,
        fallback: Sequence[CatalogEntry] = (),
        min_results: int = 0,
        generic: Optional[Callable[[str], RawOpportunity]] = None,
        feed_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        cache_ttl: float = 3600.0,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        retries: int = DEFAULT_RETRIES,
        backoff: float = DEFAULT_BACKOFF,
    ):
        self.source_id = source_id
        self.name = name
        self.base_url = base_url
        self.opportunity_type = opportunity_type
        self._entries = tuple(entries)
        self._fallback = tuple(fallback)
        self._min_results = min_results
        self._generic = generic
        self.feed_url = feed_url
        self._client = client
        self._request_timeout = request_timeout
        self._retries = retries
        self._backoff = backoff
        self._cache: TTLCache[list[RawOpportunity]] = TTLCache(cache_ttl)
        self.last_error: Optional[str] = None

    def __repr__(self) -> str:
        return f"CatalogProvider({self.source_id!r}, entries={len(self._entries)})"

    @guarded()
    async def fetch(self, user_input: UserDiscoveryInput) -> list[RawOpportunity]:
        """Feed listings (if configured) followed by matching catalog entries."""
        key = skills_cache_key(user_input.skills)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Using cached %s opportunities (%d items)", self.name, len(cached))
            return [o.model_copy(deep=True) for o in cached]

        logger.info("Fetching opportunities from %s for skills: %s", self.name, ", ".join(user_input.skills))
        found = await self._from_feed(user_input)
        found.extend(self.from_catalog(user_input.skills))
        found = _unique_by_title(found)

        # Catalog-only results after a feed failure are not cached so the feed is retried
        if self.last_error is None:
            self._cache.set(key, [o.model_copy(deep=True) for o in found])
        return found

    def from_catalog(self, skills: Sequence[str]) -> list[RawOpportunity]:
        """Materialize catalog entries for the given skills (no I/O)."""
        skills = [s for s in skills if s and s.strip()]
        results = [self._materialize(e.opportunity) for e in self._entries if e.matches(skills)]

        if self._generic is not None:
            for skill in skills:
                if not any(not e.always and e.matches([skill]) for e in self._entries):
                    results.append(self._materialize(self._generic(skill)))

        if len(results) < self._min_results:
            results.extend(self._materialize(e.opportunity) for e in self._fallback)
        return results

    def _materialize(self, template: RawOpportunity) -> RawOpportunity:
        return template.model_copy(
            update={
                "id": template.id or make_opportunity_id(self.source_id, template.title),
                "source": self.source_id,
                "url": template.url or self.base_url,
            },
            deep=True,
        )

    async def _from_feed(self, user_input: UserDiscoveryInput) -> list[RawOpportunity]:
        if not self.feed_url:
            return []
        params = {"skills": ",".join(user_input.skills)}
        if self._client is not None:
            payload = await self._get_feed(self._client, params)
        else:
            async with httpx.AsyncClient(headers=DEFAULT_HEADERS, follow_redirects=True) as client:
                payload = await self._get_feed(client, params)
        if payload is None:
            logger.warning("%s feed unavailable, using catalog only", self.name)
            self.last_error = f"{self.name} feed unavailable"
            return []

        listings: list[RawOpportunity] = []
        for item in _feed_items(payload):
            try:
                listings.append(parse_listing(item, self.source_id, self.opportunity_type))
            except ValidationError as e:
                logger.warning("Skipping malformed %s listing %r: %s", self.name, item.get("title"), e)
        return [self._materialize(o) for o in listings]

    async def _get_feed(self, client: httpx.AsyncClient, params: dict[str, Any]) -> Any:
        return await fetch_json(
            client,
            self.feed_url,
            params=params,
            retries=self._retries,
            timeout=self._request_timeout,
            backoff=self._backoff,
        )


def entry(
    title: str,
    description: str,
    *,
    triggers: Sequence[str] = (),
    always: bool = False,
    **fields: Any,
) -> CatalogEntry:
    """Shorthand for catalog modules: entry("Title", "Desc", triggers=(...), estimated_income={...})."""
    return CatalogEntry(
        opportunity=RawOpportunity.model_validate({"title": title, "description": description, **fields}),
        triggers=tuple(triggers),
        always=always,
    )
