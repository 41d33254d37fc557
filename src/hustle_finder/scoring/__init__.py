"""Candidate scoring against a user profile."""

from hustle_finder.scoring.features import parse_weekly_hours
from hustle_finder.scoring.scorer import ScoreResult, Scorer

__all__ = ["ScoreResult", "Scorer", "parse_weekly_hours"]
