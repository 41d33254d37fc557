"""Substack: paid newsletters."""

from typing import Any

from hustle_finder.models.raw import OpportunityType
from hustle_finder.providers.catalog import CatalogProvider, entry

SOURCE_ID = "substack"
NAME = "Substack"
BASE_URL = "https://substack.com"

_STEPS = [
    "Pick a narrow topic you can write about every week",
    "Create a Substack publication and write a welcome post",
    "Publish free issues consistently for 8-12 weeks",
    "Turn on paid subscriptions once you have engaged readers",
    "Cross-promote with newsletters in adjacent niches",
]
_RESOURCES = ["https://on.substack.com/p/grow"]


def _newsletter(title: str, description: str, **fields: Any):
    fields.setdefault("steps_to_start", _STEPS)
    fields.setdefault("resources", _RESOURCES)
    fields.setdefault("startup_cost", {"min": 0, "max": 100})
    return entry(title, description, opportunity_type=OpportunityType.CONTENT, **fields)


ENTRIES = (
    _newsletter(
        "Technical Deep-Dive Newsletter",
        "Explain complex technical topics, tools and architectures in depth for practitioners "
        "who want more than news headlines.",
        triggers=("tech", "develop", "code", "program", "software"),
        required_skills=["writing", "programming"],
        nice_to_have_skills=["technical writing"],
        estimated_income={"min": 1000, "max": 5000, "timeframe": "monthly"},
        time_required={"min": 8, "max": 15},
        entry_barrier="medium",
        competition="medium",
    ),
    _newsletter(
        "Tech News Curation & Analysis",
        "Curate and comment on the week's most important technology news for a specific audience.",
        triggers=("tech", "develop", "software"),
        required_skills=["writing", "research"],
        estimated_income={"min": 500, "max": 3000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 50},
        time_required={"min": 5, "max": 10},
        entry_barrier="low",
        competition="high",
    ),
    _newsletter(
        "Creative Writing or Fiction Newsletter",
        "Serialize fiction, essays or poetry to readers who pay for a consistent creative voice.",
        triggers=("writ", "creat", "edit", "content", "journal"),
        required_skills=["creative writing"],
        nice_to_have_skills=["editing"],
        estimated_income={"min": 500, "max": 3000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 50},
        time_required={"min": 6, "max": 12},
        entry_barrier="low",
        competition="medium",
    ),
    _newsletter(
        "Specialized Financial Analysis Newsletter",
        "Publish research and analysis on a market segment, asset class or industry for investors.",
        triggers=("financ", "invest", "business", "econom", "market"),
        required_skills=["financial analysis", "writing", "research"],
        estimated_income={"min": 2000, "max": 10000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 200},
        time_required={"min": 10, "max": 20},
        entry_barrier="high",
        competition="high",
    ),
    _newsletter(
        "Science-Based Health & Wellness Newsletter",
        "Translate health and nutrition research into practical, evidence-based advice.",
        triggers=("health", "well", "fitness", "nutriti", "medic", "psycholog"),
        required_skills=["health expertise", "writing", "research"],
        estimated_income={"min": 1000, "max": 6000, "timeframe": "monthly"},
        time_required={"min": 8, "max": 16},
        entry_barrier="medium",
        competition="high",
    ),
    _newsletter(
        "Creative Industry Insider Newsletter",
        "Share industry insights, interviews and career advice for a creative field such as design, film or music.",
        triggers=("art", "design", "music", "film", "photo"),
        required_skills=["writing", "industry knowledge"],
        nice_to_have_skills=["interviewing"],
        estimated_income={"min": 800, "max": 5000, "timeframe": "monthly"},
        time_required={"min": 8, "max": 15},
        entry_barrier="medium",
        competition="medium",
    ),
)

FALLBACK = (
    _newsletter(
        "Niche Expertise Newsletter",
        "Share specialized knowledge from your field or passion; the narrower the niche, "
        "the easier it is to attract dedicated subscribers.",
        required_skills=["writing"],
        nice_to_have_skills=["audience building"],
        estimated_income={"min": 500, "max": 3000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 50},
        time_required={"min": 5, "max": 10},
        entry_barrier="low",
        competition="medium",
    ),
    _newsletter(
        "Curated Content & Commentary Newsletter",
        "Save readers time by finding, organizing and commenting on the best content in one area.",
        required_skills=["research", "writing"],
        estimated_income={"min": 300, "max": 2000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 50},
        time_required={"min": 4, "max": 8},
        entry_barrier="low",
        competition="medium",
    ),
)


def build(**options: Any) -> CatalogProvider:
    return CatalogProvider(
        SOURCE_ID,
        NAME,
        BASE_URL,
        ENTRIES,
        opportunity_type=OpportunityType.CONTENT,
        fallback=FALLBACK,
        min_results=2,
        **options,
    )
