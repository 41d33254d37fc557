"""Upwork provider."""

from hustle_finder.providers.upwork.adapter import UpworkProvider

__all__ = ["UpworkProvider"]
