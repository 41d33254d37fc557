"""User discovery input: skills and preferences for one discovery request."""

from pathlib import Path
from typing import Any, Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for profile loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, ConfigDict, Field, field_validator

from hustle_finder.models.raw import Level, LocationMode, parse_level


class UserDiscoveryInput(BaseModel):
    """Immutable user profile for a single discovery call."""

    model_config = ConfigDict(frozen=True)

    skills: tuple[str, ...] = Field(default=(), description="Free text; matched case-insensitively")
    time_availability: str = Field(default="any", description='e.g. "10-20 hours/week", "part-time"')
    risk_appetite: Level = Level.MEDIUM
    income_goal: float = Field(default=0.0, ge=0, description="Monthly, currency-agnostic")
    work_preference: LocationMode = LocationMode.BOTH
    context: Optional[str] = None

    @field_validator("skills", mode="before")
    @classmethod
    def _skills(cls, value: Any) -> tuple[str, ...]:
        if not value:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        return tuple(str(s).strip() for s in value if s is not None and str(s).strip())

    @field_validator("risk_appetite", mode="before")
    @classmethod
    def _risk(cls, value: Any) -> Level:
        return parse_level(value)

    @field_validator("work_preference", mode="before")
    @classmethod
    def _work(cls, value: Any) -> Any:
        if value is None or str(value).strip().lower() in ("", "any"):
            return LocationMode.BOTH
        return str(value).strip().lower() if isinstance(value, str) else value

    @field_validator("time_availability", mode="before")
    @classmethod
    def _time(cls, value: Any) -> str:
        return str(value).strip() if value else "any"

    def normalized(self) -> "UserDiscoveryInput":
        """Copy with lowercased, de-duplicated, sorted skills and a lowercased time band."""
        skills = tuple(sorted({s.strip().lower() for s in self.skills if s.strip()}))
        return self.model_copy(
            update={
                "skills": skills,
                "time_availability": self.time_availability.strip().lower(),
            }
        )

    def cache_key(self) -> str:
        """Canonical key: sorted lowercased skills plus time/risk/work bands."""
        norm = self.normalized()
        return "|".join(
            [
                ",".join(norm.skills),
                norm.time_availability,
                norm.risk_appetite.value,
                norm.work_preference.value,
            ]
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "UserDiscoveryInput":
        """Load from YAML. Supports a nested `preferences` block or a flat structure."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        prefs = data.get("preferences", {}) or {}

        def _get(*keys: str, default=None):
            for key in keys:
                if key in prefs:
                    return prefs[key]
                if key in data:
                    return data[key]
            return default

        flat: dict = {
            "skills": _get("skills", default=[]) or [],
            "time_availability": _get("time_availability", "timeAvailability", default="any"),
            "risk_appetite": _get("risk_appetite", "risk_tolerance", "riskAppetite", default="medium"),
            "income_goal": _get("income_goal", "income_goals", "incomeGoals", default=0) or 0,
            "work_preference": _get("work_preference", "workPreference"),
            "context": _get("context", "additional_details"),
        }
        return cls.model_validate(flat)
