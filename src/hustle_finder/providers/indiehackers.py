"""Indie Hackers: bootstrapped products and micro-SaaS."""

from typing import Any

from hustle_finder.models.raw import OpportunityType
from hustle_finder.providers.catalog import CatalogProvider, entry
from hustle_finder.providers.skill_groups import CONTENT

SOURCE_ID = "indiehackers"
NAME = "Indie Hackers"
BASE_URL = "https://www.indiehackers.com"

_PRODUCT_TRIGGERS = ("programming", "web development", "mobile development", "design", "product")
_FOUNDER_TRIGGERS = ("marketing", "sales", "business strategy", "entrepreneurship")

_STEPS = [
    "Browse Indie Hackers interviews for problems people pay to solve",
    "Validate the idea with 10 potential customers before building",
    "Ship a minimal version and charge from day one",
    "Share progress publicly in the community",
    "Iterate on pricing and retention",
]
_RESOURCES = ["https://www.indiehackers.com/start"]


def _venture(title: str, description: str, **fields: Any):
    fields.setdefault("steps_to_start", _STEPS)
    fields.setdefault("resources", _RESOURCES)
    fields.setdefault("opportunity_type", OpportunityType.PASSIVE_INCOME)
    return entry(title, description, **fields)


ENTRIES = (
    _venture(
        "Build a Profitable Side Project as an Indie Hacker",
        "Build a bootstrapped side project that solves a real problem and keep full ownership "
        "while revenue grows toward replacing a day job.",
        always=True,
        required_skills=["problem solving", "persistence"],
        nice_to_have_skills=["marketing", "programming"],
        estimated_income={"min": 1000, "max": 50000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 1000},
        time_required={"min": 10, "max": 30},
        entry_barrier="medium",
        competition="medium",
    ),
    _venture(
        "Build a Bootstrapped SaaS Business",
        "Turn technical skills into subscription software for a niche with a painful, recurring problem.",
        triggers=_PRODUCT_TRIGGERS,
        required_skills=["programming", "product design", "problem solving"],
        nice_to_have_skills=["marketing", "customer support"],
        estimated_income={"min": 5000, "max": 100000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 5000},
        time_required={"min": 20, "max": 60},
        entry_barrier="high",
        competition="high",
    ),
    _venture(
        "Launch a Micro-SaaS Product",
        "Build a small, focused tool (often a plugin or integration) that one person can run.",
        triggers=_PRODUCT_TRIGGERS,
        required_skills=["programming", "product focus"],
        nice_to_have_skills=["seo"],
        estimated_income={"min": 1000, "max": 20000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 1000},
        time_required={"min": 10, "max": 30},
        entry_barrier="medium",
        competition="medium",
    ),
    _venture(
        "Launch a Bootstrapped Startup",
        "Start a customer-funded business using sales and marketing skills, partnering for product work.",
        triggers=_FOUNDER_TRIGGERS,
        required_skills=["entrepreneurship", "resource management", "problem solving"],
        nice_to_have_skills=["sales"],
        estimated_income={"min": 5000, "max": 100000, "timeframe": "monthly"},
        startup_cost={"min": 1000, "max": 10000},
        time_required={"min": 20, "max": 60},
        entry_barrier="high",
        competition="high",
    ),
    _venture(
        "Build a Content-Based Business",
        "Grow an audience with a newsletter, podcast or video channel and monetize with sponsors and products.",
        triggers=CONTENT,
        required_skills=["content creation", "consistency", "audience building"],
        estimated_income={"min": 1000, "max": 50000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 1000},
        time_required={"min": 10, "max": 30},
        entry_barrier="low",
        competition="medium",
        opportunity_type=OpportunityType.CONTENT,
    ),
    _venture(
        "Acquire and Grow an Existing Indie Business",
        "Buy a small profitable product through a marketplace and grow it instead of starting from zero.",
        always=True,
        required_skills=["business analysis", "due diligence", "growth strategy"],
        estimated_income={"min": 2000, "max": 100000, "timeframe": "monthly"},
        startup_cost={"min": 10000, "max": 500000},
        time_required={"min": 10, "max": 40},
        entry_barrier="high",
        competition="medium",
    ),
)


def build(**options: Any) -> CatalogProvider:
    return CatalogProvider(
        SOURCE_ID,
        NAME,
        BASE_URL,
        ENTRIES,
        opportunity_type=OpportunityType.PASSIVE_INCOME,
        **options,
    )
