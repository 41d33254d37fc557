"""Teachable: self-paced online courses and coaching."""

from typing import Any

from hustle_finder.models.raw import OpportunityType
from hustle_finder.providers.catalog import CatalogProvider, entry
from hustle_finder.providers.skill_groups import BUSINESS, CREATIVE, TECH, WELLNESS

SOURCE_ID = "teachable"
NAME = "Teachable"
BASE_URL = "https://teachable.com"

_PLAN_COST = {"min": 348, "max": 2988}
_STEPS = [
    "Create a Teachable school",
    "Validate the course topic with a short free lesson",
    "Record the core modules",
    "Set pricing and a sales page",
    "Drive traffic with content and email",
]
_RESOURCES = ["https://teachable.com/blog"]


def _course(title: str, description: str, **fields: Any):
    fields.setdefault("steps_to_start", _STEPS)
    fields.setdefault("resources", _RESOURCES)
    fields.setdefault("startup_cost", _PLAN_COST)
    fields.setdefault("opportunity_type", OpportunityType.INFO_PRODUCT)
    return entry(title, description, **fields)


ENTRIES = (
    _course(
        "Create and Sell an Online Course on Teachable",
        "Package expertise into a self-paced course and sell it from your own branded school.",
        always=True,
        required_skills=["subject expertise", "teaching ability", "content creation"],
        estimated_income={"min": 1000, "max": 50000, "timeframe": "monthly"},
        time_required={"min": 10, "max": 30},
        entry_barrier="medium",
        competition="high",
    ),
    _course(
        "Create a Tech Skills Course on Teachable",
        "Teach a practical technical skill with exercises and downloadable code.",
        triggers=TECH,
        required_skills=["technical expertise", "teaching ability", "curriculum design"],
        estimated_income={"min": 2000, "max": 80000, "timeframe": "monthly"},
        time_required={"min": 15, "max": 40},
        entry_barrier="medium",
        competition="high",
    ),
    _course(
        "Create a Business Skills Course on Teachable",
        "Teach marketing, sales, finance or management skills professionals can apply at work.",
        triggers=BUSINESS,
        required_skills=["business expertise", "teaching ability"],
        estimated_income={"min": 2000, "max": 60000, "timeframe": "monthly"},
        time_required={"min": 10, "max": 30},
        entry_barrier="medium",
        competition="high",
    ),
    _course(
        "Create a Creative Skills Course on Teachable",
        "Break a creative process (writing, design, photography, music) into repeatable lessons.",
        triggers=CREATIVE,
        required_skills=["creative expertise", "teaching ability"],
        estimated_income={"min": 1000, "max": 40000, "timeframe": "monthly"},
        time_required={"min": 10, "max": 30},
        entry_barrier="low",
        competition="medium",
    ),
    _course(
        "Create a Wellness or Personal Development Course",
        "Design a program for fitness, nutrition, mindfulness or habit change.",
        triggers=WELLNESS,
        required_skills=["wellness expertise", "program design"],
        estimated_income={"min": 1000, "max": 30000, "timeframe": "monthly"},
        time_required={"min": 10, "max": 25},
        entry_barrier="low",
        competition="medium",
    ),
    _course(
        "Create a Course + Coaching Bundle on Teachable",
        "Pair a course with paid coaching calls to raise price and completion rates.",
        always=True,
        required_skills=["coaching ability", "course creation"],
        estimated_income={"min": 3000, "max": 50000, "timeframe": "monthly"},
        startup_cost={"min": 828, "max": 2988},
        time_required={"min": 15, "max": 30},
        entry_barrier="medium",
        competition="medium",
        opportunity_type=OpportunityType.SERVICE,
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
