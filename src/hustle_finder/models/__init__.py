"""Data models for discovery input, raw and enriched opportunities, and results."""

from hustle_finder.models.opportunity import (
    Category,
    EnrichedOpportunity,
    FeatureVector,
    Resource,
    SkillGapAnalysis,
    SkillMatch,
)
from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.raw import (
    IncomeRange,
    Level,
    LocationMode,
    OpportunityType,
    RawOpportunity,
    TimeRange,
    Timeframe,
    ValueRange,
)
from hustle_finder.models.result import DiscoveryMetrics, DiscoveryResult, SourceReport

__all__ = [
    "Category",
    "DiscoveryMetrics",
    "DiscoveryResult",
    "EnrichedOpportunity",
    "FeatureVector",
    "IncomeRange",
    "Level",
    "LocationMode",
    "OpportunityType",
    "RawOpportunity",
    "Resource",
    "SkillGapAnalysis",
    "SkillMatch",
    "SourceReport",
    "TimeRange",
    "Timeframe",
    "UserDiscoveryInput",
    "ValueRange",
]
