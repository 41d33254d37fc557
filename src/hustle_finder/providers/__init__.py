"""Opportunity providers (one adapter per platform) and their registry."""

from hustle_finder.providers.base import ProviderAdapter, categorize_risk, fetch_json, guarded
from hustle_finder.providers.catalog import CatalogEntry, CatalogProvider
from hustle_finder.providers.registry import ProviderRegistry, SourceStats
from hustle_finder.providers.upwork import UpworkProvider

__all__ = [
    "CatalogEntry",
    "CatalogProvider",
    "ProviderAdapter",
    "ProviderRegistry",
    "SourceStats",
    "UpworkProvider",
    "categorize_risk",
    "fetch_json",
    "guarded",
]
