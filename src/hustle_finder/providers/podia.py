"""Podia: courses, downloads and memberships for creators."""

from typing import Any

from hustle_finder.models.raw import OpportunityType
from hustle_finder.providers.catalog import CatalogProvider, entry
from hustle_finder.providers.skill_groups import BUSINESS, CREATIVE, TECH, WELLNESS

SOURCE_ID = "podia"
NAME = "Podia"
BASE_URL = "https://www.podia.com"

_PLAN_COST = {"min": 390, "max": 790}
_STEPS = [
    "Create a Podia storefront",
    "Publish one product you can finish in two weeks",
    "Set up an email list and a free lead magnet",
    "Launch to your audience and gather reviews",
    "Bundle products as the catalog grows",
]
_RESOURCES = ["https://www.podia.com/articles"]


def _product(title: str, description: str, **fields: Any):
    fields.setdefault("steps_to_start", _STEPS)
    fields.setdefault("resources", _RESOURCES)
    fields.setdefault("startup_cost", _PLAN_COST)
    fields.setdefault("opportunity_type", OpportunityType.DIGITAL_PRODUCT)
    return entry(title, description, **fields)


ENTRIES = (
    _product(
        "Create and Sell an Online Course on Podia",
        "Turn subject expertise into a self-paced course with quizzes and downloadable worksheets.",
        always=True,
        required_skills=["subject expertise", "content creation"],
        estimated_income={"min": 1000, "max": 50000, "timeframe": "monthly"},
        time_required={"min": 10, "max": 30},
        entry_barrier="medium",
        competition="high",
        opportunity_type=OpportunityType.INFO_PRODUCT,
    ),
    _product(
        "Sell Digital Downloads on Podia",
        "Sell templates, checklists, ebooks or presets as instant downloads.",
        always=True,
        required_skills=["digital content creation", "basic design"],
        estimated_income={"min": 500, "max": 10000, "timeframe": "monthly"},
        time_required={"min": 5, "max": 15},
        entry_barrier="low",
        competition="medium",
    ),
    _product(
        "Launch a Membership Site on Podia",
        "Offer members-only content and community for a monthly fee.",
        always=True,
        required_skills=["content creation", "community management"],
        estimated_income={"min": 1000, "max": 30000, "timeframe": "monthly"},
        startup_cost={"min": 790, "max": 1500},
        time_required={"min": 10, "max": 25},
        entry_barrier="medium",
        competition="medium",
        opportunity_type=OpportunityType.PASSIVE_INCOME,
    ),
    _product(
        "Create a Tech Skills Course on Podia",
        "Teach programming, data or design tooling to beginners through project-based lessons.",
        triggers=TECH,
        required_skills=["teaching ability", "programming"],
        estimated_income={"min": 2000, "max": 80000, "timeframe": "monthly"},
        time_required={"min": 15, "max": 40},
        entry_barrier="medium",
        competition="high",
        opportunity_type=OpportunityType.INFO_PRODUCT,
    ),
    _product(
        "Sell Creative Digital Products on Podia",
        "Sell design assets, photo presets, music loops or writing templates to other creators.",
        triggers=CREATIVE,
        required_skills=["design"],
        nice_to_have_skills=["photography", "illustration"],
        estimated_income={"min": 1000, "max": 15000, "timeframe": "monthly"},
        time_required={"min": 10, "max": 25},
        entry_barrier="low",
        competition="high",
    ),
    _product(
        "Launch a Business Coaching Program on Podia",
        "Package coaching calls with course content for founders and freelancers.",
        triggers=BUSINESS,
        required_skills=["coaching", "business expertise"],
        nice_to_have_skills=["sales"],
        estimated_income={"min": 3000, "max": 50000, "timeframe": "monthly"},
        startup_cost={"min": 790, "max": 1500},
        time_required={"min": 15, "max": 30},
        entry_barrier="medium",
        competition="high",
        opportunity_type=OpportunityType.SERVICE,
    ),
    _product(
        "Create Wellness Programs on Podia",
        "Sell fitness plans, nutrition guides or meditation series as structured programs.",
        triggers=WELLNESS,
        required_skills=["wellness expertise", "program design"],
        estimated_income={"min": 1500, "max": 25000, "timeframe": "monthly"},
        time_required={"min": 10, "max": 25},
        entry_barrier="medium",
        competition="high",
        opportunity_type=OpportunityType.INFO_PRODUCT,
    ),
)


def build(**options: Any) -> CatalogProvider:
    return CatalogProvider(
        SOURCE_ID,
        NAME,
        BASE_URL,
        ENTRIES,
        opportunity_type=OpportunityType.DIGITAL_PRODUCT,
        **options,
    )
