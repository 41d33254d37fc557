"""Gumroad: digital products sold directly to an audience."""

from typing import Any

from hustle_finder.models.raw import OpportunityType
from hustle_finder.providers.catalog import CatalogProvider, entry

SOURCE_ID = "gumroad"
NAME = "Gumroad"
BASE_URL = "https://gumroad.com"

_STEPS = [
    "Create a Gumroad account",
    "Develop your digital product",
    "Design an attractive product page",
    "Set pricing and publish your product",
    "Market your product through social media and email",
]
_RESOURCES = ["https://help.gumroad.com/article/2-gumroad-creator-guide"]

_DESIGN = ("design", "graphic", "illustrat", "photoshop", "adobe")
_CODE = ("develop", "code", "program", "javascript", "python", "web")
_WRITING = ("writ", "content", "blog", "journal", "copywr")
_MEDIA = ("photo", "video", "film", "edit", "camera")
_AUDIO = ("music", "audio", "sound", "record", "mix", "produc")


def _product(title: str, description: str, **fields: Any):
    fields.setdefault("steps_to_start", _STEPS)
    fields.setdefault("resources", _RESOURCES)
    return entry(title, description, opportunity_type=OpportunityType.DIGITAL_PRODUCT, **fields)


ENTRIES = (
    _product(
        "Premium Design Template Bundle",
        "Design and sell template bundles (social media kits, pitch decks, brand boards) "
        "for creators and small businesses who want a professional look without hiring a designer.",
        triggers=_DESIGN,
        required_skills=["graphic design", "template design", "canva or figma"],
        nice_to_have_skills=["marketing"],
        estimated_income={"min": 3000, "max": 10000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 200},
        time_required={"min": 40, "max": 100, "unit": "month"},
        entry_barrier="medium",
        competition="high",
    ),
    _product(
        "Digital Illustration Pack or Font",
        "Sell illustration packs, icon sets or custom fonts to designers and content creators.",
        triggers=_DESIGN,
        required_skills=["illustration", "digital art"],
        nice_to_have_skills=["typography"],
        estimated_income={"min": 1000, "max": 5000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 100},
        time_required={"min": 30, "max": 80, "unit": "month"},
        entry_barrier="medium",
        competition="medium",
    ),
    _product(
        "Premium Code Snippet Library or Plugin",
        "Package reusable components, plugins or boilerplates that save other developers time.",
        triggers=_CODE,
        required_skills=["programming", "documentation"],
        nice_to_have_skills=["javascript", "python"],
        estimated_income={"min": 2000, "max": 8000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 100},
        time_required={"min": 60, "max": 120, "unit": "month"},
        entry_barrier="high",
        competition="medium",
    ),
    _product(
        "Website Theme or Template",
        "Build and sell website themes or landing page templates for popular site builders.",
        triggers=_CODE,
        required_skills=["web development", "html", "css"],
        nice_to_have_skills=["ui design"],
        estimated_income={"min": 1500, "max": 7000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 200},
        time_required={"min": 40, "max": 100, "unit": "month"},
        entry_barrier="medium",
        competition="high",
    ),
    _product(
        "Digital Guide or Ebook",
        "Write a focused guide or ebook that solves a specific problem for a well-defined audience.",
        triggers=_WRITING,
        required_skills=["writing", "research"],
        nice_to_have_skills=["copywriting", "content marketing"],
        estimated_income={"min": 500, "max": 3000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 300},
        time_required={"min": 40, "max": 100, "unit": "month"},
        entry_barrier="low",
        competition="high",
    ),
    _product(
        "Template Bundle for Writers and Content Creators",
        "Sell content calendars, pitch templates and editorial workflows to other writers.",
        triggers=_WRITING,
        required_skills=["content creation", "writing"],
        estimated_income={"min": 800, "max": 2500, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 100},
        time_required={"min": 30, "max": 80, "unit": "month"},
        entry_barrier="low",
        competition="medium",
    ),
    _product(
        "Premium Photo or Video Preset Pack",
        "Create presets for Lightroom, Photoshop or Premiere Pro targeting a niche such as "
        "wedding, travel or food photography.",
        triggers=_MEDIA,
        required_skills=["photography", "photo editing"],
        nice_to_have_skills=["preset creation"],
        estimated_income={"min": 1000, "max": 5000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 100},
        time_required={"min": 30, "max": 60, "unit": "month"},
        entry_barrier="medium",
        competition="high",
    ),
    _product(
        "Sound Effect or Sample Pack",
        "Produce a library of sound effects or samples for producers, filmmakers, game developers and podcasters.",
        triggers=_AUDIO,
        required_skills=["audio production", "sound design"],
        nice_to_have_skills=["recording"],
        estimated_income={"min": 800, "max": 4000, "timeframe": "monthly"},
        startup_cost={"min": 100, "max": 500},
        time_required={"min": 40, "max": 80, "unit": "month"},
        entry_barrier="medium",
        competition="medium",
    ),
)

FALLBACK = (
    _product(
        "Digital Planner or Organizational Tool",
        "Create a digital planner or tracker that helps people manage time, projects, habits or finances.",
        required_skills=["digital design", "organization"],
        estimated_income={"min": 500, "max": 3000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 100},
        time_required={"min": 30, "max": 60, "unit": "month"},
        entry_barrier="low",
        competition="high",
    ),
    _product(
        "Niche Knowledge Product",
        "Package specialized knowledge into a guide, tutorial series or reference that solves one problem well.",
        required_skills=["content creation"],
        nice_to_have_skills=["digital product design"],
        estimated_income={"min": 300, "max": 2000, "timeframe": "monthly"},
        startup_cost={"min": 0, "max": 100},
        time_required={"min": 20, "max": 60, "unit": "month"},
        entry_barrier="low",
        competition="medium",
    ),
)


def build(**options: Any) -> CatalogProvider:
    """Gumroad provider; options are passed to CatalogProvider (feed_url, client, cache_ttl...)."""
    return CatalogProvider(
        SOURCE_ID,
        NAME,
        BASE_URL,
        ENTRIES,
        opportunity_type=OpportunityType.DIGITAL_PRODUCT,
        fallback=FALLBACK,
        min_results=1,
        **options,
    )
