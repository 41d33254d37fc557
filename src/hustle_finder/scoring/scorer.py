"""Weighted-feature scorer with ROI adjustment and a skill-only fallback."""

import logging
import math
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from hustle_finder.config import ScoringWeights
from hustle_finder.matching import jaccard_similarity, partition_skills
from hustle_finder.models.opportunity import FeatureVector, SkillMatch
from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.raw import RawOpportunity
from hustle_finder.scoring import features as fx

logger = logging.getLogger(__name__)


class ScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0, le=100)
    features: FeatureVector
    skill_match: SkillMatch
    monthly_income: float = 0.0
    fallback: bool = False


class Scorer:
    """
    Scores one candidate against one user profile on a 0-100 scale.

    score = 100 * ((1 - roi_weight) * weighted_features + roi_weight * roi)
    If the weighted model raises for a candidate, the Jaccard overlap of
    required and user skills is used instead and a warning is logged.
    """

    def __init__(
        self,
        weights: Optional[ScoringWeights] = None,
        engagement: Optional[Mapping[str, float]] = None,
    ):
        self.weights = weights or ScoringWeights()
        self._weight_map = self.weights.normalized()
        self._engagement = dict(engagement or {})

    def popularity(self, *keys: Optional[str]) -> float:
        """Externally supplied engagement (0-1) for the first known key; 0.5 if none."""
        for key in keys:
            if key and key in self._engagement:
                return fx.clamp01(float(self._engagement[key]))
        return fx.NEUTRAL

    def features(
        self,
        candidate: RawOpportunity,
        user_input: UserDiscoveryInput,
        *,
        opportunity_id: Optional[str] = None,
    ) -> FeatureVector:
        monthly = candidate.estimated_income.monthly_average
        return FeatureVector(
            skill_match=fx.skill_fit(candidate.required_skills, user_input.skills),
            time_fit=fx.time_fit(candidate.time_required, user_input.time_availability),
            risk_fit=fx.risk_fit(candidate.entry_barrier, user_input.risk_appetite),
            income_fit=fx.income_fit(candidate.estimated_income, user_input.income_goal),
            content_quality=fx.content_quality(candidate.description),
            popularity=self.popularity(opportunity_id, candidate.id),
            roi=fx.roi(
                monthly,
                candidate.startup_cost,
                candidate.time_required,
                cost_floor=self.weights.startup_cost_floor,
                cap=self.weights.roi_cap,
            ),
        )

    def _weighted(self, features: FeatureVector) -> float:
        total = sum(getattr(features, name) * weight for name, weight in self._weight_map.items())
        roi_weight = self.weights.roi_weight
        final = (1 - roi_weight) * total + roi_weight * features.roi
        if not math.isfinite(final):
            raise ValueError(f"non-finite score {final!r}")
        return final

    def score(
        self,
        candidate: RawOpportunity,
        user_input: UserDiscoveryInput,
        *,
        opportunity_id: Optional[str] = None,
    ) -> ScoreResult:
        skill_match = partition_skills(
            candidate.required_skills,
            candidate.nice_to_have_skills,
            user_input.skills,
        )
        monthly = candidate.estimated_income.monthly_average
        try:
            vector = self.features(candidate, user_input, opportunity_id=opportunity_id)
            value = self._weighted(vector)
            fallback = False
        except Exception as e:
            logger.warning("Weighted scoring failed for %r, using skill-only fallback: %s", candidate.title, e)
            similarity = jaccard_similarity(candidate.required_skills, user_input.skills)
            vector = FeatureVector(skill_match=similarity)
            value = similarity
            fallback = True

        return ScoreResult(
            score=round(fx.clamp01(value) * 100, 2),
            features=vector,
            skill_match=skill_match,
            monthly_income=monthly if math.isfinite(monthly) else 0.0,
            fallback=fallback,
        )
