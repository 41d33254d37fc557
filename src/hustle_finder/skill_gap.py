"""Learning plan for the skills a candidate requires but the user lacks."""

import logging
from typing import Iterable, Optional
from urllib.parse import quote_plus

from hustle_finder.content import ContentPool
from hustle_finder.matching import has_word, has_word_prefix, normalize_skill, skills_overlap
from hustle_finder.models.opportunity import Difficulty, Resource, SkillGapAnalysis

logger = logging.getLogger(__name__)

MAX_SKILLS = 3
EXACT_RESOURCES_PER_SKILL = 2
FUZZY_RESOURCES_PER_SKILL = 1
MAX_RESOURCES = 5

DAYS_PER_REQUIRED_SKILL = 14
DAYS_PER_NICE_TO_HAVE_SKILL = 5

ADVANCED_KEYWORDS = (
    "machine learning", "data science", "ai", "deep learning",
    "blockchain", "algorithm", "architecture", "system design",
)
INTERMEDIATE_KEYWORDS = (
    "javascript", "python", "react", "node", "sql", "database",
    "ui design", "ux design", "marketing", "copywriting", "analytics",
)


def _r(title: str, url: str, kind: str, paid: bool, duration: str, source: str, description: str) -> Resource:
    return Resource(
        title=title, url=url, type=kind, is_paid=paid, duration=duration, source=source, description=description
    )


LEARNING_RESOURCES: dict[str, list[Resource]] = {
    "javascript": [
        _r("JavaScript - The Complete Guide", "https://www.udemy.com/course/javascript-the-complete-guide-2020-beginner-advanced/",
           "course", True, "52 hours", "Udemy", "Modern JavaScript from the beginning to expert level"),
        _r("JavaScript.info", "https://javascript.info/", "article", False, "Self-paced", "JavaScript.info",
           "The Modern JavaScript Tutorial"),
    ],
    "react": [
        _r("React - The Complete Guide", "https://www.udemy.com/course/react-the-complete-guide-incl-redux/",
           "course", True, "48 hours", "Udemy", "Learn React from scratch"),
        _r("React Documentation", "https://react.dev/learn", "article", False, "Self-paced", "react.dev",
           "Official React documentation"),
    ],
    "python": [
        _r("Complete Python Bootcamp From Zero to Hero", "https://www.udemy.com/course/complete-python-bootcamp/",
           "course", True, "24 hours", "Udemy", "Learn Python like a professional"),
        _r("Python for Everybody Specialization", "https://www.coursera.org/specializations/python",
           "course", True, "8 months", "Coursera", "Program and analyze data with Python"),
    ],
    "ui design": [
        _r("UI Design Fundamentals", "https://www.youtube.com/watch?v=tRpoI6vkqLs", "video", False, "2 hours",
           "YouTube", "UI design fundamentals"),
        _r("The UI Design Bootcamp", "https://scrimba.com/learn/designbootcamp", "course", True, "9 hours",
           "Scrimba", "UI design with hands-on projects"),
    ],
    "ux design": [
        _r("Google UX Design Professional Certificate", "https://www.coursera.org/professional-certificates/google-ux-design",
           "course", True, "6 months", "Coursera", "Start a career in UX design"),
    ],
    "content marketing": [
        _r("Content Marketing Masterclass", "https://www.udemy.com/course/content-marketing-masterclass/",
           "course", True, "12 hours", "Udemy", "Grow a business with content marketing"),
    ],
    "seo": [
        _r("Complete SEO Training", "https://www.udemy.com/course/seo-training-2021/", "course", True, "16 hours",
           "Udemy", "Rank higher and drive organic traffic"),
        _r("SEO Starter Guide", "https://developers.google.com/search/docs/fundamentals/seo-starter-guide",
           "article", False, "Self-paced", "Google", "Google's official SEO starter guide"),
    ],
    "entrepreneurship": [
        _r("How to Build a Startup", "https://www.udacity.com/course/how-to-build-a-startup--ep245",
           "course", False, "1 month", "Udacity", "The Lean LaunchPad approach to building startups"),
    ],
    "sales": [
        _r("B2B Consultative Selling", "https://www.udemy.com/course/consultative-selling/", "course", True,
           "7 hours", "Udemy", "Sell high-ticket products and services"),
    ],
    "copywriting": [
        _r("The Complete Copywriting Course", "https://www.udemy.com/course/the-complete-copywriting-course/",
           "course", True, "7 hours", "Udemy", "Write effective copy that sells"),
    ],
    "content creation": [
        _r("Content Creation Master Guide", "https://www.udemy.com/course/content-creation-viral-marketing-master-guide/",
           "course", True, "11 hours", "Udemy", "Create content that drives engagement"),
    ],
    "teaching": [
        _r("How to Create and Teach Online Courses", "https://www.udemy.com/course/how-to-teach-online/",
           "course", True, "4 hours", "Udemy", "Create and teach online courses"),
    ],
    "coaching": [
        _r("Life Coaching Certificate Course", "https://www.udemy.com/course/life-coaching-online-certification/",
           "course", True, "31 hours", "Udemy", "Become a certified coach"),
    ],
    "communication": [
        _r("Effective Communication Skills",
           "https://www.linkedin.com/learning/effective-communication-skills-with-deborah-grayson-riegel",
           "course", True, "3 hours", "LinkedIn Learning", "Effective communication techniques"),
    ],
    "time management": [
        _r("Productivity and Time Management for the Overwhelmed",
           "https://www.udemy.com/course/productivity-time-management-for-the-overwhelmed/",
           "course", True, "6 hours", "Udemy", "Master time management and productivity"),
    ],
}


def generic_resource(skill: str) -> Resource:
    """Search placeholder for skills with no curated resources."""
    return Resource(
        title=f"Learn {skill} - Online Resources",
        url=f"https://www.google.com/search?q=learn+{quote_plus(skill)}+course",
        type="other",
        is_paid=False,
        duration="Varies",
        source="Various",
        description=f"Find the best resources to learn {skill}",
    )


def estimate_time_label(missing_count: int) -> str:
    if missing_count <= 0:
        return "0 days"
    if missing_count == 1:
        return "2 weeks"
    if missing_count == 2:
        return "1 month"
    if missing_count == 3:
        return "2 months"
    if missing_count <= 5:
        return "3-4 months"
    return "6+ months"


# Keywords this short must match a whole word ("ai" never matches "airtable")
_SHORT_KEYWORD = 3


def _mentions(skill: str, keyword: str) -> bool:
    if len(keyword) <= _SHORT_KEYWORD:
        return has_word(skill, keyword)
    return has_word_prefix(skill, keyword)


def classify_difficulty(skills: Iterable[str]) -> Difficulty:
    skills = [normalize_skill(s) for s in skills]
    if any(_mentions(s, k) for s in skills for k in ADVANCED_KEYWORDS):
        return Difficulty.ADVANCED
    if any(_mentions(s, k) for s in skills for k in INTERMEDIATE_KEYWORDS):
        return Difficulty.INTERMEDIATE
    return Difficulty.BEGINNER


class SkillGapResolver:
    """Resolves learning resources and effort for missing skills. Never raises."""

    def __init__(
        self,
        pool: Optional[ContentPool] = None,
        catalog: Optional[dict[str, list[Resource]]] = None,
    ):
        self._pool = pool
        self._catalog = catalog if catalog is not None else LEARNING_RESOURCES

    def resources_for(self, skill: str) -> list[Resource]:
        """Pool resources, else up to 2 exact or 1 similar catalog resource, else a search placeholder."""
        if self._pool is not None:
            try:
                pooled = self._pool.resources_for(skill)
            except Exception as e:
                logger.warning("Content pool lookup failed for %r: %s", skill, e)
                pooled = []
            if pooled:
                return pooled[:EXACT_RESOURCES_PER_SKILL]

        key = normalize_skill(skill)
        exact = self._catalog.get(key)
        if exact:
            return exact[:EXACT_RESOURCES_PER_SKILL]
        for known, resources in self._catalog.items():
            if skills_overlap(known, key) and resources:
                return resources[:FUZZY_RESOURCES_PER_SKILL]
        return [generic_resource(skill)]

    def resolve(
        self,
        missing_skills: Iterable[str],
        *,
        nice_to_have_missing: Iterable[str] = (),
    ) -> SkillGapAnalysis:
        missing = list(dict.fromkeys(s for s in (normalize_skill(m) for m in missing_skills) if s))
        optional = list(dict.fromkeys(s for s in (normalize_skill(m) for m in nice_to_have_missing) if s))

        resources: list[Resource] = []
        for skill in missing[:MAX_SKILLS]:
            resources.extend(self.resources_for(skill))

        return SkillGapAnalysis(
            missing_skills=missing,
            resources=resources[:MAX_RESOURCES],
            estimated_days=DAYS_PER_REQUIRED_SKILL * len(missing) + DAYS_PER_NICE_TO_HAVE_SKILL * len(optional),
            estimated_time=estimate_time_label(len(missing)),
            difficulty=classify_difficulty(missing),
        )
