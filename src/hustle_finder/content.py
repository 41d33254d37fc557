"""Optional external content: success stories by opportunity type and learning resources by skill."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from hustle_finder.matching import normalize_skill
from hustle_finder.models.opportunity import Resource
from hustle_finder.models.raw import OpportunityType

# Used when neither the content pool nor the candidate supplies stories
DEFAULT_SUCCESS_STORIES: dict[OpportunityType, list[str]] = {
    OpportunityType.FREELANCE: [
        "A graphic designer who learned HTML/CSS started with small Upwork projects "
        "and now runs a web design agency with five contractors.",
    ],
    OpportunityType.SERVICE: [
        "A marketing consultant turned one-off projects into three retainer clients within six months.",
    ],
    OpportunityType.CONTENT: [
        "A developer's weekly technical newsletter reached 1,000 paid subscribers in its second year.",
    ],
    OpportunityType.DIGITAL_PRODUCT: [
        "A designer's social media template bundle earns a steady $3,000 a month with no client work.",
    ],
    OpportunityType.INFO_PRODUCT: [
        "A bookkeeper's course for freelancers sold 400 seats in its first year.",
    ],
    OpportunityType.PASSIVE_INCOME: [
        "A solo developer grew a browser extension to $5,000 MRR over 18 months of evenings.",
    ],
}


class ContentPool(BaseModel):
    """
    Content supplied by the host application. Skill keys are normalized on load.
    Looked up before the built-in tables.
    """

    success_stories: dict[OpportunityType, list[str]] = Field(default_factory=dict)
    resources: dict[str, list[Resource]] = Field(default_factory=dict)

    @field_validator("resources", mode="before")
    @classmethod
    def _normalize_keys(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {normalize_skill(k): v for k, v in value.items() if normalize_skill(k)}
        return value

    def stories_for(self, opportunity_type: OpportunityType) -> list[str]:
        return list(self.success_stories.get(opportunity_type, []))

    def resources_for(self, skill: str) -> list[Resource]:
        return list(self.resources.get(normalize_skill(skill), []))

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ContentPool":
        """Load a pool file with top-level `success_stories` and `resources` mappings."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        return cls.model_validate(data)
