"""Category assignment and final ordering of scored opportunities."""

import functools
from typing import Iterable, Optional

from hustle_finder.config import CategoryThresholds
from hustle_finder.models.opportunity import CATEGORY_DISPLAY_ORDER, Category, EnrichedOpportunity
from hustle_finder.models.raw import Level, OpportunityType, RawOpportunity

_DISPLAY_RANK = {c: i for i, c in enumerate(CATEGORY_DISPLAY_ORDER)}
_PASSIVE_TYPES = (OpportunityType.PASSIVE_INCOME, OpportunityType.DIGITAL_PRODUCT)


def assign_category(
    candidate: RawOpportunity,
    score: float,
    income_goal: float,
    thresholds: Optional[CategoryThresholds] = None,
) -> Category:
    """
    First match wins: quick win, passive, aspirational, growth.
    Aspirational needs a positive income goal to compare against.
    """
    t = thresholds or CategoryThresholds()
    if score > t.quick_win_score and candidate.entry_barrier == Level.LOW:
        return Category.QUICK_WIN
    if candidate.opportunity_type in _PASSIVE_TYPES:
        return Category.PASSIVE
    if (
        income_goal > 0
        and candidate.estimated_income.monthly_max > t.aspirational_income_multiple * income_goal
        and (candidate.entry_barrier == Level.HIGH or score < t.aspirational_score_ceiling)
    ):
        return Category.ASPIRATIONAL
    return Category.GROWTH


def compare(a: EnrichedOpportunity, b: EnrichedOpportunity, score_noise: float = 10.0) -> int:
    """
    Display rank, then score when the gap exceeds score_noise,
    then monthly income, then id. Negative means a sorts first.
    """
    rank_a, rank_b = _DISPLAY_RANK[a.category], _DISPLAY_RANK[b.category]
    if rank_a != rank_b:
        return -1 if rank_a < rank_b else 1
    if abs(a.match_score - b.match_score) > score_noise:
        return -1 if a.match_score > b.match_score else 1
    if a.monthly_income != b.monthly_income:
        return -1 if a.monthly_income > b.monthly_income else 1
    if a.id != b.id:
        return -1 if a.id < b.id else 1
    return 0


def rank(
    opportunities: Iterable[EnrichedOpportunity],
    thresholds: Optional[CategoryThresholds] = None,
) -> list[EnrichedOpportunity]:
    """Sorted copy. Input is pre-ordered by id so the result never depends on arrival order."""
    t = thresholds or CategoryThresholds()
    ordered = sorted(opportunities, key=lambda o: o.id)
    return sorted(ordered, key=functools.cmp_to_key(lambda a, b: compare(a, b, t.score_noise)))


def group_ids(opportunities: Iterable[EnrichedOpportunity]) -> dict[Category, list[str]]:
    """Category -> ids in ranked order; every category is present."""
    groups: dict[Category, list[str]] = {c: [] for c in CATEGORY_DISPLAY_ORDER}
    for opp in opportunities:
        groups[opp.category].append(opp.id)
    return groups
