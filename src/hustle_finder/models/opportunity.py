"""Enriched (scored and categorized) opportunity models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hustle_finder.models.raw import RawOpportunity


class Category(str, Enum):
    """Strategic bucket assigned to each ranked opportunity."""

    QUICK_WIN = "quick_win"
    GROWTH = "growth"
    PASSIVE = "passive"
    ASPIRATIONAL = "aspirational"


# Display order of the final ranking (differs from assignment priority)
CATEGORY_DISPLAY_ORDER: tuple[Category, ...] = (
    Category.QUICK_WIN,
    Category.GROWTH,
    Category.PASSIVE,
    Category.ASPIRATIONAL,
)


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class SkillMatch(BaseModel):
    """Disjoint skill groups for one candidate."""

    model_config = ConfigDict(frozen=True)

    matched: list[str] = Field(default_factory=list, description="Required and held")
    missing: list[str] = Field(default_factory=list, description="Required, not held")
    related: list[str] = Field(default_factory=list, description="Nice-to-have and held")
    missing_nice_to_have: list[str] = Field(default_factory=list)


class FeatureVector(BaseModel):
    """Per-feature fit values, each in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    skill_match: float = 0.5
    time_fit: float = 0.5
    risk_fit: float = 0.5
    income_fit: float = 0.5
    content_quality: float = 0.5
    popularity: float = 0.5
    roi: float = 0.0


class Resource(BaseModel):
    """Learning resource for a skill."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    type: str = "other"  # course | article | video | other
    is_paid: bool = False
    duration: Optional[str] = None
    source: Optional[str] = None
    description: Optional[str] = None


class SkillGapAnalysis(BaseModel):
    """Learning plan for the skills a candidate requires but the user lacks."""

    model_config = ConfigDict(frozen=True)

    missing_skills: list[str] = Field(default_factory=list)
    resources: list[Resource] = Field(default_factory=list)
    estimated_days: int = 0
    estimated_time: str = "0 days"
    difficulty: Difficulty = Difficulty.BEGINNER


class EnrichedOpportunity(RawOpportunity):
    """RawOpportunity plus score, skill detail, category and a stable engine id."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Engine-assigned id: opp-{hash(source, provider id, title)}")
    provider_id: Optional[str] = None

    match_score: float = Field(..., ge=0, le=100)
    features: FeatureVector = Field(default_factory=FeatureVector)
    skill_match: SkillMatch = Field(default_factory=SkillMatch)
    monthly_income: float = 0.0
    time_to_first_revenue_days: int = 0
    skill_gap: SkillGapAnalysis = Field(default_factory=SkillGapAnalysis)
    learning_resources: list[Resource] = Field(default_factory=list)
    category: Category = Category.GROWTH
