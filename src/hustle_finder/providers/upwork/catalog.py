"""Curated Upwork job templates used when the search API is not configured or unavailable."""

from typing import Any

from hustle_finder.models.raw import OpportunityType, RawOpportunity
from hustle_finder.providers.catalog import CatalogEntry, entry

from .parsers import DEFAULT_STEPS

_WEB = ("web", "develop", "javascript", "react", "html", "css")
_WRITING = ("writ", "content", "blog", "edit", "copywr")
_DESIGN = ("design", "ui", "ux", "figma", "sketch", "graphic")
_MARKETING = ("market", "seo", "social media", "advert")


def _job(title: str, description: str, **fields: Any) -> CatalogEntry:
    fields.setdefault("steps_to_start", DEFAULT_STEPS)
    fields.setdefault("startup_cost", {"min": 0, "max": 100})
    return entry(title, description, opportunity_type=OpportunityType.FREELANCE, **fields)


ENTRIES = (
    _job(
        "Website Development for Small Business",
        "Build a professional, responsive website for a growing small business using modern web technologies.",
        triggers=_WEB,
        required_skills=["web development", "html", "css", "javascript"],
        nice_to_have_skills=["responsive design"],
        estimated_income={"min": 35, "max": 50, "timeframe": "hourly"},
        time_required={"min": 15, "max": 25},
        entry_barrier="medium",
        competition="high",
    ),
    _job(
        "React Developer for E-commerce Platform",
        "Build new features for an e-commerce platform; experience with state management and API integration required.",
        triggers=_WEB,
        required_skills=["react", "javascript", "api integration"],
        nice_to_have_skills=["redux", "e-commerce"],
        estimated_income={"min": 45, "max": 65, "timeframe": "hourly"},
        time_required={"min": 20, "max": 40},
        entry_barrier="high",
        competition="medium",
    ),
    _job(
        "Blog Content Writer for SaaS Company",
        "Write engaging blog content about productivity, remote work and technology trends for a software company.",
        triggers=_WRITING,
        required_skills=["content writing", "blog writing", "seo", "research"],
        estimated_income={"min": 25, "max": 40, "timeframe": "hourly"},
        time_required={"min": 10, "max": 20},
        entry_barrier="low",
        competition="medium",
    ),
    _job(
        "Technical Content Creator for Developer Platform",
        "Create tutorials, guides and documentation for developer tools.",
        triggers=_WRITING,
        required_skills=["technical writing", "documentation"],
        nice_to_have_skills=["tutorials", "developer content"],
        estimated_income={"min": 35, "max": 55, "timeframe": "hourly"},
        time_required={"min": 15, "max": 25},
        entry_barrier="medium",
        competition="low",
    ),
    _job(
        "UI/UX Designer for Mobile App",
        "Design intuitive interfaces for an iOS and Android health app, including user testing.",
        triggers=_DESIGN,
        required_skills=["ui design", "ux design", "figma"],
        nice_to_have_skills=["mobile design", "user testing"],
        estimated_income={"min": 40, "max": 65, "timeframe": "hourly"},
        time_required={"min": 15, "max": 30},
        entry_barrier="medium",
        competition="medium",
    ),
    _job(
        "Brand Identity Designer for Startup",
        "Create a cohesive brand identity (logo, color palette and basic style guide) for a tech startup.",
        triggers=_DESIGN,
        required_skills=["brand design", "logo design"],
        nice_to_have_skills=["typography", "color theory"],
        estimated_income={"min": 35, "max": 60, "timeframe": "hourly"},
        time_required={"min": 10, "max": 20},
        entry_barrier="medium",
        competition="high",
    ),
    _job(
        "Social Media Marketing Specialist",
        "Manage and grow a brand's social presence, create content and report on performance.",
        triggers=_MARKETING,
        required_skills=["social media marketing", "content creation"],
        nice_to_have_skills=["analytics", "copywriting"],
        estimated_income={"min": 25, "max": 45, "timeframe": "hourly"},
        time_required={"min": 10, "max": 20},
        entry_barrier="low",
        competition="high",
    ),
    _job(
        "SEO Consultant for E-commerce Store",
        "Improve organic rankings with keyword research, on-page optimization and link building.",
        triggers=_MARKETING,
        required_skills=["seo", "keyword research"],
        nice_to_have_skills=["link building", "content optimization"],
        estimated_income={"min": 35, "max": 60, "timeframe": "hourly"},
        time_required={"min": 10, "max": 15},
        entry_barrier="medium",
        competition="medium",
    ),
)

FALLBACK = (
    _job(
        "Entry-Level Virtual Assistant",
        "Support a busy professional with email management, scheduling and basic administrative tasks.",
        required_skills=["organization", "communication", "time management"],
        nice_to_have_skills=["attention to detail"],
        estimated_income={"min": 15, "max": 25, "timeframe": "hourly"},
        time_required={"min": 10, "max": 20},
        entry_barrier="low",
        competition="medium",
    ),
)


def specialist_job(skill: str) -> RawOpportunity:
    """Generic posting for a skill no curated template covers."""
    label = skill.strip()
    return RawOpportunity(
        title=f"{label.title()} Specialist Needed",
        description=f"Ongoing projects for a professional with expertise in {label}.",
        opportunity_type=OpportunityType.FREELANCE,
        required_skills=[label],
        estimated_income={"min": 30, "max": 50, "timeframe": "hourly"},
        startup_cost={"min": 0, "max": 100},
        time_required={"min": 10, "max": 20},
        entry_barrier="medium",
        competition="medium",
        steps_to_start=DEFAULT_STEPS,
    )
