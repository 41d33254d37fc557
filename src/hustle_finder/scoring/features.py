"""Per-feature fit functions. Each returns a value in [0, 1]."""

import math
import re
from typing import Iterable, Optional

from hustle_finder.matching import has_skill, normalize_skill
from hustle_finder.models.raw import IncomeRange, Level, TimeRange, ValueRange

NEUTRAL = 0.5
NO_USER_SKILLS = 0.25

# Keyword -> hours/week, checked before numeric parsing
_AVAILABILITY_KEYWORDS: list[tuple[str, float]] = [
    ("full", 40.0),
    ("part", 20.0),
    ("evening", 10.0),
    ("weekend", 16.0),
]
_RANGE_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(?:-|to|–)\s*(\d+(?:\.\d+)?)")
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
# "2 hours a day", "3h/day", "daily" but not "weekdays"
_PER_DAY_RE = re.compile(r"(?:\b(?:a|per|each|every)\s+|/\s*)day\b|\bdaily\b")
_PER_MONTH_RE = re.compile(r"(?:\b(?:a|per|each|every)\s+|/\s*)month\b|\bmonthly\b")

# (upper bound of required/available ratio, fit)
_TIME_STEPS: list[tuple[float, float]] = [(0.3, 0.9), (0.6, 0.8), (0.9, 0.7), (1.0, 0.6), (1.5, 0.4)]
_TIME_FLOOR = 0.2

# (lower bound of monthly income/goal ratio, fit)
_INCOME_STEPS: list[tuple[float, float]] = [(2.0, 1.0), (1.0, 0.9), (0.7, 0.8), (0.5, 0.7), (0.3, 0.5)]
_INCOME_FLOOR = 0.3

# user risk rank - barrier rank -> fit
_RISK_FIT: dict[int, float] = {0: 1.0, 1: 0.8, -1: 0.5}


def parse_weekly_hours(availability: Optional[str]) -> Optional[float]:
    """
    Hours per week from a free-text availability band.
    "full-time" 40, "part-time" 20, "evenings" 10, "weekends" 16,
    "10-20 hours/week" 15, "2 hours a day" 10. None if unparseable or "any".
    """
    text = (availability or "").strip().lower()
    if not text or text == "any":
        return None
    for keyword, hours in _AVAILABILITY_KEYWORDS:
        if keyword in text:
            return hours

    m = _RANGE_RE.search(text)
    if m:
        hours = (float(m.group(1)) + float(m.group(2))) / 2
    else:
        m = _NUMBER_RE.search(text)
        if not m:
            return None
        hours = float(m.group(0))

    if _PER_DAY_RE.search(text):
        hours *= 5
    elif _PER_MONTH_RE.search(text):
        hours /= 4
    return hours if hours > 0 else None


def skill_fit(required: Iterable[str], user_skills: Iterable[str]) -> float:
    """Share of required skills the user holds (substring-aware)."""
    req = [normalize_skill(s) for s in required if normalize_skill(s)]
    if not req:
        return NEUTRAL
    user = [normalize_skill(s) for s in user_skills if normalize_skill(s)]
    if not user:
        return NO_USER_SKILLS
    matched = sum(1 for s in req if has_skill(user, s))
    return matched / len(req)


def time_fit(time_required: TimeRange, availability: Optional[str]) -> float:
    available = parse_weekly_hours(availability)
    if available is None:
        return NEUTRAL
    ratio = time_required.weekly_average / available
    for bound, fit in _TIME_STEPS:
        if ratio <= bound:
            return fit
    return _TIME_FLOOR


def risk_fit(entry_barrier: Level, risk_appetite: Level) -> float:
    diff = risk_appetite.rank - entry_barrier.rank
    if diff in _RISK_FIT:
        return _RISK_FIT[diff]
    return 0.6 if diff >= 2 else 0.2


def income_fit(income: IncomeRange, income_goal: float) -> float:
    if not income_goal or income_goal <= 0:
        return NEUTRAL
    ratio = income.monthly_average / income_goal
    for bound, fit in _INCOME_STEPS:
        if ratio >= bound:
            return fit
    return _INCOME_FLOOR


def content_quality(description: Optional[str]) -> float:
    """Longer descriptions read as more complete, up to 5000 characters."""
    if not description:
        return NEUTRAL
    return NEUTRAL + NEUTRAL * min(1.0, len(description) / 5000)


def roi(
    monthly_income: float,
    startup_cost: ValueRange,
    time_required: TimeRange,
    *,
    cost_floor: float = 1.0,
    cap: float = 100.0,
) -> float:
    """
    Monthly income per unit of effort (startup cost in thousands plus weekly hours),
    normalized to [0, 1] against cap. A zero-cost, zero-time candidate uses the cost floor.
    """
    effort = max(startup_cost.average, cost_floor) / 1000 + time_required.weekly_average
    value = monthly_income / effort
    if not math.isfinite(value) or value <= 0:
        return 0.0
    return min(1.0, value / cap)


def clamp01(value: float) -> float:
    if not math.isfinite(value):
        return 0.0
    return max(0.0, min(1.0, value))
