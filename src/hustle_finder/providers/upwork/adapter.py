"""Upwork provider: job-search API when a key is configured, curated catalog otherwise.

Flow:
1. With an API key, search jobs matching the user's skills (most recent first)
2. Parse each job into RawOpportunity; malformed jobs are skipped
3. If the key is missing, the API is unreachable, or it returns no jobs,
   fall back to the curated catalog
"""

import logging
import os
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from hustle_finder.cache import TTLCache
from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.raw import OpportunityType, RawOpportunity
from hustle_finder.providers.base import (
    DEFAULT_BACKOFF,
    DEFAULT_HEADERS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_RETRIES,
    fetch_json,
    guarded,
    skills_cache_key,
)
from hustle_finder.providers.catalog import CatalogProvider

from .catalog import ENTRIES, FALLBACK, specialist_job
from .parsers import extract_jobs, parse_job

logger = logging.getLogger(__name__)

API_KEY_ENV = "HUSTLE_FINDER_UPWORK_API_KEY"


class UpworkProvider:
    """Freelance jobs from Upwork."""

    source_id = "upwork"
    name = "Upwork"

    BASE_URL = "https://www.upwork.com"
    API_URL = "https://api.upwork.com/v2/"
    SEARCH_PATH = "api/jobs/search"
    PAGE_SIZE = 20

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        *,
        cache_ttl: float = 3600.0,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        retries: int = DEFAULT_RETRIES,
        backoff: float = DEFAULT_BACKOFF,
        feed_url: Optional[str] = None,
    ):
        self._api_key = api_key or os.environ.get(API_KEY_ENV)
        self._client = client
        self._request_timeout = request_timeout
        self._retries = retries
        self._backoff = backoff
        self._cache: TTLCache[list[RawOpportunity]] = TTLCache(cache_ttl)
        self.last_error: Optional[str] = None
        self.catalog = CatalogProvider(
            self.source_id,
            self.name,
            self.BASE_URL,
            ENTRIES,
            opportunity_type=OpportunityType.FREELANCE,
            fallback=FALLBACK,
            min_results=2,
            generic=specialist_job,
            feed_url=feed_url,
            client=client,
            cache_ttl=cache_ttl,
            request_timeout=request_timeout,
            retries=retries,
            backoff=backoff,
        )

    @property
    def has_api_access(self) -> bool:
        return bool(self._api_key)

    @guarded()
    async def fetch(self, user_input: UserDiscoveryInput) -> list[RawOpportunity]:
        if self.has_api_access and user_input.skills:
            jobs = await self._search_api(user_input)
            if jobs:
                return jobs
            logger.info("Upwork API returned no jobs, using curated catalog")
        found = await self.catalog.fetch(user_input)
        self.last_error = self.last_error or self.catalog.last_error
        return found

    async def _search_api(self, user_input: UserDiscoveryInput) -> list[RawOpportunity]:
        key = skills_cache_key(user_input.skills)
        cached = self._cache.get(key)
        if cached is not None:
            return [o.model_copy(deep=True) for o in cached]

        params = {
            "q": " OR ".join(user_input.skills),
            "limit": self.PAGE_SIZE,
            "sort": "recency",
        }
        if self._client is not None:
            payload = await self._get(self._client, params)
        else:
            async with httpx.AsyncClient(headers=DEFAULT_HEADERS) as client:
                payload = await self._get(client, params)
        if payload is None:
            self.last_error = "Upwork API unavailable"
            return []

        jobs: list[RawOpportunity] = []
        for item in extract_jobs(payload):
            try:
                jobs.append(parse_job(item))
            except ValidationError as e:
                logger.warning("Skipping malformed Upwork job %r: %s", item.get("id"), e)
        self._cache.set(key, [o.model_copy(deep=True) for o in jobs])
        return jobs

    async def _get(self, client: httpx.AsyncClient, params: dict[str, Any]) -> Any:
        return await fetch_json(
            client,
            self.API_URL + self.SEARCH_PATH,
            params=params,
            headers={"Authorization": f"Bearer {self._api_key}"},
            retries=self._retries,
            timeout=self._request_timeout,
            backoff=self._backoff,
        )
