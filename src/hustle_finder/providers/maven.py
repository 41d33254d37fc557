"""Maven: live cohort-based courses."""

from typing import Any

from hustle_finder.models.raw import OpportunityType
from hustle_finder.providers.catalog import CatalogProvider, entry
from hustle_finder.providers.skill_groups import BUSINESS, CREATIVE, TECH, WELLNESS

SOURCE_ID = "maven"
NAME = "Maven"
BASE_URL = "https://maven.com"

_STEPS = [
    "Apply as a Maven instructor with a course outline",
    "Define the outcome students get by the end of the cohort",
    "Plan live sessions, projects and office hours",
    "Pre-sell seats to your network before the first cohort",
    "Use first-cohort feedback to raise the price",
]
_RESOURCES = ["https://maven.com/course-accelerator"]


def _cohort(title: str, description: str, **fields: Any):
    fields.setdefault("steps_to_start", _STEPS)
    fields.setdefault("resources", _RESOURCES)
    fields.setdefault("opportunity_type", OpportunityType.INFO_PRODUCT)
    return entry(title, description, **fields)


# Cohort revenue is earned per course run
ENTRIES = (
    _cohort(
        "Create a Cohort-Based Tech Course on Maven",
        "Teach a hands-on technical skill in a live, project-driven cohort.",
        triggers=TECH,
        required_skills=["teaching", "curriculum development", "programming"],
        nice_to_have_skills=["public speaking"],
        estimated_income={"min": 5000, "max": 50000, "timeframe": "per-project"},
        startup_cost={"min": 0, "max": 500},
        time_required={"min": 15, "max": 25},
        entry_barrier="medium",
        competition="medium",
    ),
    _cohort(
        "Teach Business Skills Through a Maven Cohort Course",
        "Run a live course on marketing, sales, leadership or operations for working professionals.",
        triggers=BUSINESS,
        required_skills=["teaching", "business expertise"],
        nice_to_have_skills=["public speaking", "facilitation"],
        estimated_income={"min": 10000, "max": 60000, "timeframe": "per-project"},
        startup_cost={"min": 0, "max": 500},
        time_required={"min": 10, "max": 20},
        entry_barrier="medium",
        competition="high",
    ),
    _cohort(
        "Launch a Creative Skills Maven Course",
        "Teach writing, design or media craft with portfolio projects and live critique.",
        triggers=CREATIVE,
        required_skills=["teaching", "portfolio creation"],
        estimated_income={"min": 3000, "max": 30000, "timeframe": "per-project"},
        startup_cost={"min": 0, "max": 300},
        time_required={"min": 8, "max": 15},
        entry_barrier="medium",
        competition="medium",
    ),
    _cohort(
        "Teach Wellness & Personal Development on Maven",
        "Guide a cohort through a structured program for habits, health or personal growth.",
        triggers=WELLNESS,
        required_skills=["teaching", "coaching"],
        estimated_income={"min": 4000, "max": 25000, "timeframe": "per-project"},
        startup_cost={"min": 0, "max": 200},
        time_required={"min": 10, "max": 20},
        entry_barrier="medium",
        competition="medium",
    ),
    _cohort(
        "Create Your First Maven Cohort Course",
        "Turn your professional experience into a short live course for people a few steps behind you.",
        always=True,
        required_skills=["teaching", "subject expertise"],
        nice_to_have_skills=["community building"],
        estimated_income={"min": 3000, "max": 30000, "timeframe": "per-project"},
        startup_cost={"min": 0, "max": 500},
        time_required={"min": 10, "max": 25},
        entry_barrier="medium",
        competition="medium",
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
