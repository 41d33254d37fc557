"""Provider adapter contract and the helpers adapters compose."""

import asyncio
import functools
import inspect
import logging
import re
from typing import Any, Awaitable, Callable, Optional, Protocol, Union, runtime_checkable

import httpx

from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.raw import Level, RawOpportunity, parse_level

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 15.0
DEFAULT_RETRIES = 3
DEFAULT_BACKOFF = 2.0

DEFAULT_HEADERS = {
    "User-Agent": "hustle-finder/0.1 (income opportunity discovery)",
    "Accept": "application/json",
}

FetchResult = Union[list[RawOpportunity], Awaitable[list[RawOpportunity]]]


@runtime_checkable
class ProviderAdapter(Protocol):
    """
    Anything with a source id, a display name and a fetch method.
    fetch may be a coroutine function or a plain function; it must not raise.
    """

    source_id: str
    name: str

    def fetch(self, user_input: UserDiscoveryInput) -> FetchResult:
        ...


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    method: str = "GET",
    params: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
    json_body: Any = None,
    retries: int = DEFAULT_RETRIES,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    backoff: float = DEFAULT_BACKOFF,
) -> Optional[Any]:
    """
    Request url and decode JSON, retrying with exponential backoff.
    Waits backoff, 2*backoff, 4*backoff... between attempts.
    Returns None once retries are exhausted.
    """
    for attempt in range(retries + 1):
        try:
            response = await client.request(
                method,
                url,
                params=params,
                headers=headers,
                json=json_body,
                timeout=timeout,
            )
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            if attempt >= retries:
                logger.warning("Failed to fetch %s after %d attempts: %s", url, attempt + 1, e)
                return None
            delay = backoff * (2**attempt)
            logger.warning(
                "Error fetching %s, retrying in %.1fs (%d attempts left): %s",
                url,
                delay,
                retries - attempt,
                e,
            )
            if delay > 0:
                await asyncio.sleep(delay)
    return None


def escalate_risk(level: Level) -> Level:
    """One step up the low/medium/high scale; high stays high."""
    if level == Level.LOW:
        return Level.MEDIUM
    return Level.HIGH


def categorize_risk(
    startup_cost: float,
    days_to_first_dollar: float,
    competition: Union[Level, str],
) -> Level:
    """
    Entry barrier from cost, time-to-first-income and competition.
    Cost >5000 -> high, >1000 -> medium; then one step up each for
    more than 90 days to first dollar and for high competition.
    """
    risk = Level.LOW
    if startup_cost > 5000:
        risk = Level.HIGH
    elif startup_cost > 1000:
        risk = Level.MEDIUM

    if days_to_first_dollar > 90:
        risk = escalate_risk(risk)
    if parse_level(competition) == Level.HIGH:
        risk = escalate_risk(risk)
    return risk


def make_opportunity_id(source_id: str, identifier: str) -> str:
    """Provider-scoped id: "upwork-react-developer-for-e-commerce" style."""
    slug = re.sub(r"[^a-z0-9]", "-", identifier.strip().lower())
    return f"{source_id.lower()}-{slug}"


def skills_cache_key(skills: Any) -> str:
    """Order-insensitive key for per-adapter caches."""
    return ",".join(sorted({str(s).strip().lower() for s in skills if str(s).strip()}))


def _note_error(args: tuple, error: Optional[str]) -> None:
    """Set last_error on the adapter instance when guarding a method."""
    if args and not isinstance(args[0], UserDiscoveryInput):
        setattr(args[0], "last_error", error)


def guarded(adapter_name: Optional[str] = None) -> Callable:
    """
    Decorate an adapter's fetch so failures are logged with source attribution
    and turned into an empty list. Works for sync and async fetch methods.
    When adapter_name is None, the instance's `name` attribute is used.

    On methods, the instance's `last_error` is cleared on entry and set to the
    error message on failure, so the aggregator can count the failure.
    """

    def decorator(fetch: Callable) -> Callable:
        def _label(args: tuple) -> str:
            if adapter_name:
                return adapter_name
            return getattr(args[0], "name", fetch.__qualname__) if args else fetch.__qualname__

        if inspect.iscoroutinefunction(fetch):

            @functools.wraps(fetch)
            async def async_wrapper(*args, **kwargs) -> list[RawOpportunity]:
                _note_error(args, None)
                try:
                    return list(await fetch(*args, **kwargs) or [])
                except Exception as e:
                    logger.warning("Error in %s source (fetch): %s", _label(args), e, exc_info=True)
                    _note_error(args, str(e) or type(e).__name__)
                    return []

            return async_wrapper

        @functools.wraps(fetch)
        def sync_wrapper(*args, **kwargs) -> list[RawOpportunity]:
            _note_error(args, None)
            try:
                return list(fetch(*args, **kwargs) or [])
            except Exception as e:
                logger.warning("Error in %s source (fetch): %s", _label(args), e, exc_info=True)
                _note_error(args, str(e) or type(e).__name__)
                return []

        return sync_wrapper

    return decorator
