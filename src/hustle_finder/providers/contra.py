"""Contra: commission-free freelance marketplace."""

from typing import Any

from hustle_finder.models.raw import OpportunityType
from hustle_finder.providers.catalog import CatalogProvider, entry

SOURCE_ID = "contra"
NAME = "Contra"
BASE_URL = "https://contra.com"

TECH_SKILLS = ("programming", "web development", "design", "data science", "ai", "mobile development")
CREATIVE_SKILLS = ("writing", "design", "video editing", "content creation", "copywriting")
MARKETING_SKILLS = ("marketing", "social media", "seo", "advertising", "email marketing")
BUSINESS_SKILLS = ("consulting", "project management", "strategy", "business analysis")

_STEPS = [
    "Create a Contra account and complete your profile",
    "Add your skills, experience, and portfolio samples",
    "Set up service offerings with clear deliverables",
    "Set your rates and availability",
    "Apply to relevant projects and collect reviews",
]
_RESOURCES = ["https://contra.com/getting-started"]


def _gig(title: str, description: str, **fields: Any):
    fields.setdefault("steps_to_start", _STEPS)
    fields.setdefault("resources", _RESOURCES)
    fields.setdefault("opportunity_type", OpportunityType.FREELANCE)
    return entry(title, description, **fields)


ENTRIES = (
    _gig(
        "Start Freelancing on Contra (0% Commission Platform)",
        "Launch a freelance practice on a curated marketplace that takes no commission, "
        "so you keep everything you earn from design, development, marketing or business work.",
        always=True,
        required_skills=["communication", "time management"],
        nice_to_have_skills=["portfolio creation", "client management", "proposal writing"],
        estimated_income={"min": 1000, "max": 10000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 100},
        time_required={"min": 10, "max": 40},
        entry_barrier="low",
        competition="medium",
        success_stories=["A copywriter built an $8,000/month practice from Contra clients."],
    ),
    _gig(
        "Offer Tech Services on Contra",
        "Provide project-based development, data or design engineering work to companies "
        "looking for specialized technical skills.",
        triggers=TECH_SKILLS,
        required_skills=list(TECH_SKILLS[:2]),
        nice_to_have_skills=["api integration", "cloud deployment"],
        estimated_income={"min": 3000, "max": 20000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 500},
        time_required={"min": 15, "max": 40},
        entry_barrier="low",
        competition="high",
    ),
    _gig(
        "Creative Freelancing on Contra",
        "Sell writing, design, video or content creation work to startups and creators.",
        triggers=CREATIVE_SKILLS,
        required_skills=["content creation", "portfolio"],
        nice_to_have_skills=list(CREATIVE_SKILLS),
        estimated_income={"min": 2000, "max": 15000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 300},
        time_required={"min": 10, "max": 35},
        entry_barrier="low",
        competition="medium",
    ),
    _gig(
        "Marketing Services on Contra",
        "Run social, SEO, email or paid acquisition programs for small companies on retainer.",
        triggers=MARKETING_SKILLS,
        required_skills=["marketing"],
        nice_to_have_skills=["seo", "social media", "email marketing"],
        estimated_income={"min": 2500, "max": 15000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 200},
        time_required={"min": 10, "max": 40},
        entry_barrier="low",
        competition="medium",
    ),
    _gig(
        "Business Consulting on Contra",
        "Offer strategy, project management or analysis engagements to founders and small teams.",
        triggers=BUSINESS_SKILLS,
        required_skills=["consulting", "strategy"],
        nice_to_have_skills=["project management", "business analysis"],
        estimated_income={"min": 4000, "max": 20000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 300},
        time_required={"min": 15, "max": 40},
        entry_barrier="medium",
        competition="high",
        opportunity_type=OpportunityType.SERVICE,
    ),
    _gig(
        "Create Packaged Services on Contra",
        "Turn your expertise into fixed-scope, fixed-price service packages clients can buy directly.",
        always=True,
        required_skills=["service design"],
        nice_to_have_skills=["copywriting"],
        estimated_income={"min": 2000, "max": 15000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 100},
        time_required={"min": 15, "max": 35},
        entry_barrier="low",
        competition="medium",
        opportunity_type=OpportunityType.SERVICE,
    ),
)


def build(**options: Any) -> CatalogProvider:
    return CatalogProvider(SOURCE_ID, NAME, BASE_URL, ENTRIES, **options)
