"""Kajabi: all-in-one knowledge commerce (courses, memberships, coaching)."""

from typing import Any

from hustle_finder.models.raw import OpportunityType
from hustle_finder.providers.catalog import CatalogProvider, entry
from hustle_finder.providers.skill_groups import BUSINESS, CREATIVE, TECH, WELLNESS

SOURCE_ID = "kajabi"
NAME = "Kajabi"
BASE_URL = "https://kajabi.com"

# Kajabi plans run roughly $124-199/month billed annually
_PLATFORM_COST = {"min": 1488, "max": 2388}
_STEPS = [
    "Start a Kajabi trial and pick a single flagship offer",
    "Outline the curriculum or program structure",
    "Record and upload the first modules",
    "Build a landing page and email sequence",
    "Launch to a waitlist and collect testimonials",
]
_RESOURCES = ["https://kajabi.com/blog", "https://help.kajabi.com"]


def _offer(title: str, description: str, **fields: Any):
    fields.setdefault("steps_to_start", _STEPS)
    fields.setdefault("resources", _RESOURCES)
    fields.setdefault("startup_cost", _PLATFORM_COST)
    fields.setdefault("opportunity_type", OpportunityType.INFO_PRODUCT)
    return entry(title, description, **fields)


ENTRIES = (
    _offer(
        "Build a Knowledge Commerce Business on Kajabi",
        "Package what you know into courses, coaching and community on one platform you control.",
        always=True,
        required_skills=["subject expertise", "content creation", "marketing"],
        estimated_income={"min": 2000, "max": 100000, "timeframe": "monthly"},
        time_required={"min": 15, "max": 40},
        entry_barrier="medium",
        competition="high",
    ),
    _offer(
        "Create a Premium Online Course on Kajabi",
        "Produce a high-ticket video course with a clear transformation for a specific audience.",
        always=True,
        required_skills=["teaching", "video production", "curriculum design"],
        estimated_income={"min": 3000, "max": 100000, "timeframe": "monthly"},
        time_required={"min": 15, "max": 40},
        entry_barrier="medium",
        competition="high",
    ),
    _offer(
        "Launch a Recurring Membership Business on Kajabi",
        "Run a paid membership with monthly content, live calls and community for recurring revenue.",
        always=True,
        required_skills=["community management", "content creation"],
        nice_to_have_skills=["live streaming"],
        estimated_income={"min": 5000, "max": 100000, "timeframe": "monthly"},
        time_required={"min": 20, "max": 40},
        entry_barrier="medium",
        competition="medium",
        opportunity_type=OpportunityType.PASSIVE_INCOME,
    ),
    _offer(
        "Build a Tech Education Business on Kajabi",
        "Teach programming, data or design skills through structured courses and cohort add-ons.",
        triggers=TECH,
        required_skills=["programming", "teaching"],
        nice_to_have_skills=["video production"],
        estimated_income={"min": 5000, "max": 100000, "timeframe": "monthly"},
        time_required={"min": 20, "max": 40},
        entry_barrier="high",
        competition="high",
    ),
    _offer(
        "Build a Coaching and Consulting Business on Kajabi",
        "Sell group and one-on-one coaching backed by course material and automated onboarding.",
        triggers=BUSINESS,
        required_skills=["coaching", "business expertise"],
        nice_to_have_skills=["sales"],
        estimated_income={"min": 5000, "max": 50000, "timeframe": "monthly"},
        time_required={"min": 20, "max": 40},
        entry_barrier="medium",
        competition="high",
        opportunity_type=OpportunityType.SERVICE,
    ),
    _offer(
        "Create a Digital Products Empire on Kajabi",
        "Combine downloadable guides, templates and mini-courses into a product ladder.",
        triggers=CREATIVE + WELLNESS,
        required_skills=["content creation", "product development", "marketing"],
        estimated_income={"min": 5000, "max": 100000, "timeframe": "monthly"},
        time_required={"min": 20, "max": 40},
        entry_barrier="medium",
        competition="high",
        opportunity_type=OpportunityType.DIGITAL_PRODUCT,
    ),
)


def build(**options: Any) -> CatalogProvider:
    return CatalogProvider(
        SOURCE_ID,
        NAME,
        BASE_URL,
        ENTRIES,
        opportunity_type=OpportunityType.INFO_PRODUCT,
        **options,
    )
