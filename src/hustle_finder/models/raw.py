"""Raw opportunity representation as produced by provider adapters."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class OpportunityType(str, Enum):
    """Closed set of opportunity kinds."""

    FREELANCE = "freelance"
    DIGITAL_PRODUCT = "digital-product"
    CONTENT = "content"
    SERVICE = "service"
    PASSIVE_INCOME = "passive-income"
    INFO_PRODUCT = "info-product"


# Typical days until first income, by opportunity type
REVENUE_WINDOWS: dict[OpportunityType, tuple[int, int]] = {
    OpportunityType.FREELANCE: (7, 30),
    OpportunityType.SERVICE: (7, 30),
    OpportunityType.CONTENT: (14, 60),
    OpportunityType.DIGITAL_PRODUCT: (30, 90),
    OpportunityType.INFO_PRODUCT: (30, 90),
    OpportunityType.PASSIVE_INCOME: (30, 120),
}


def typical_days_to_revenue(opportunity_type: OpportunityType) -> int:
    """Midpoint of the type's revenue window."""
    lo, hi = REVENUE_WINDOWS.get(opportunity_type, (30, 90))
    return (lo + hi) // 2


class Level(str, Enum):
    """Coarse low/medium/high scale (entry barrier, competition, risk appetite)."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]


_LEVEL_RANK = {Level.LOW: 1, Level.MEDIUM: 2, Level.HIGH: 3}


class LocationMode(str, Enum):
    """Where the work happens; also used for the user's work preference."""

    REMOTE = "remote"
    LOCAL = "local"
    BOTH = "both"


class Timeframe(str, Enum):
    """Unit an income range is expressed in."""

    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ANNUAL = "annual"
    PER_PROJECT = "per-project"


# Multipliers to a monthly basis (40h x 4 weeks, 5 days x 4 weeks, 3-month projects)
MONTHLY_FACTORS: dict[Timeframe, float] = {
    Timeframe.HOURLY: 160.0,
    Timeframe.DAILY: 20.0,
    Timeframe.WEEKLY: 4.0,
    Timeframe.MONTHLY: 1.0,
    Timeframe.ANNUAL: 1.0 / 12.0,
    Timeframe.PER_PROJECT: 1.0 / 3.0,
}

_TIMEFRAME_ALIASES: list[tuple[str, Timeframe]] = [
    ("hour", Timeframe.HOURLY),
    ("day", Timeframe.DAILY),
    ("daily", Timeframe.DAILY),
    ("week", Timeframe.WEEKLY),
    ("month", Timeframe.MONTHLY),
    ("year", Timeframe.ANNUAL),
    ("annual", Timeframe.ANNUAL),
    ("project", Timeframe.PER_PROJECT),
]


def parse_timeframe(value: Any) -> Timeframe:
    """Map free-form timeframe spellings ("hour", "per month", "yearly") to Timeframe."""
    if isinstance(value, Timeframe):
        return value
    text = str(value or "").strip().lower()
    try:
        return Timeframe(text)
    except ValueError:
        pass
    for substr, timeframe in _TIMEFRAME_ALIASES:
        if substr in text:
            return timeframe
    return Timeframe.MONTHLY


def parse_level(value: Any, default: Level = Level.MEDIUM) -> Level:
    """Case-insensitive Level parsing; unknown values map to default."""
    if isinstance(value, Level):
        return value
    try:
        return Level(str(value or "").strip().lower())
    except ValueError:
        return default


def to_monthly(amount: float, timeframe: Timeframe) -> float:
    """Convert an amount in the given timeframe to a monthly figure."""
    return amount * MONTHLY_FACTORS[timeframe]


class ValueRange(BaseModel):
    """Closed numeric range. Inverted bounds are swapped, negatives clamped to 0."""

    model_config = ConfigDict(frozen=True)

    min: float = 0.0
    max: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def _coerce_bounds(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        data = dict(data)
        lo = _as_number(data.get("min"))
        hi = _as_number(data.get("max"), default=lo)
        if hi < lo:
            lo, hi = hi, lo
        data["min"], data["max"] = lo, hi
        return data

    @property
    def average(self) -> float:
        return (self.min + self.max) / 2

    @property
    def width(self) -> float:
        return self.max - self.min


class IncomeRange(ValueRange):
    """Estimated income with the timeframe it is expressed in."""

    timeframe: Timeframe = Timeframe.MONTHLY

    @field_validator("timeframe", mode="before")
    @classmethod
    def _parse_timeframe(cls, value: Any) -> Timeframe:
        return parse_timeframe(value)

    @property
    def monthly_average(self) -> float:
        return to_monthly(self.average, self.timeframe)

    @property
    def monthly_max(self) -> float:
        return to_monthly(self.max, self.timeframe)


class TimeRange(ValueRange):
    """Time commitment; unit is the period the hours are counted over."""

    unit: str = "week"

    @field_validator("unit", mode="before")
    @classmethod
    def _parse_unit(cls, value: Any) -> str:
        text = str(value or "").lower()
        if "day" in text or "daily" in text:
            return "day"
        if "month" in text:
            return "month"
        return "week"

    @property
    def weekly_average(self) -> float:
        """Average hours per week regardless of the unit the range uses."""
        if self.unit == "day":
            return self.average * 5
        if self.unit == "month":
            return self.average / 4
        return self.average


def _as_number(value: Any, default: float = 0.0) -> float:
    if value is None or value == "":
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if number != number or number in (float("inf"), float("-inf")):
        return default
    return max(0.0, number)


class RawOpportunity(BaseModel):
    """
    Unprocessed opportunity from one provider.
    Missing ranges default to zero-width; enum fields accept any casing.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, description="Provider-assigned identifier")
    title: str = "Untitled Opportunity"
    description: str = ""
    url: Optional[str] = None
    source: str = ""

    opportunity_type: OpportunityType = OpportunityType.FREELANCE
    required_skills: list[str] = Field(default_factory=list)
    nice_to_have_skills: list[str] = Field(default_factory=list)

    estimated_income: IncomeRange = Field(default_factory=IncomeRange)
    startup_cost: ValueRange = Field(default_factory=ValueRange)
    time_required: TimeRange = Field(default_factory=TimeRange)

    location: LocationMode = LocationMode.REMOTE
    entry_barrier: Level = Level.MEDIUM
    competition: Level = Level.MEDIUM

    steps_to_start: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)
    success_stories: list[str] = Field(default_factory=list)

    @field_validator("estimated_income", "startup_cost", "time_required", mode="before")
    @classmethod
    def _missing_range(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("entry_barrier", "competition", mode="before")
    @classmethod
    def _level(cls, value: Any) -> Level:
        return parse_level(value)

    @field_validator("opportunity_type", mode="before")
    @classmethod
    def _type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower().replace("_", "-")
        return value

    @field_validator("location", mode="before")
    @classmethod
    def _location(cls, value: Any) -> Any:
        if value is None:
            return LocationMode.REMOTE
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator(
        "required_skills", "nice_to_have_skills", "steps_to_start", "resources", "success_stories",
        mode="before",
    )
    @classmethod
    def _string_list(cls, value: Any) -> list[str]:
        if not value:
            return []
        if isinstance(value, str):
            value = [value]
        return [str(v).strip() for v in value if v is not None and str(v).strip()]
