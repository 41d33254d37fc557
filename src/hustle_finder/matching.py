"""Shared skill matching utilities for providers, scoring and skill-gap analysis."""

import re
from typing import Iterable

from hustle_finder.models.opportunity import SkillMatch


def normalize_skill(skill: str) -> str:
    """Lowercase, strip, collapse inner whitespace."""
    return re.sub(r"\s+", " ", (skill or "").strip().lower())


def skills_overlap(a: str, b: str) -> bool:
    """
    Substring-aware skill match: true if either normalized string contains the other.
    Handles phrasing variance ("react" vs "react native", "writing" vs "copywriting").
    Empty strings never match.
    """
    a, b = normalize_skill(a), normalize_skill(b)
    if not a or not b:
        return False
    return a in b or b in a


def has_skill(user_skills: Iterable[str], skill: str) -> bool:
    """True if any user skill overlaps the given skill."""
    return any(skills_overlap(u, skill) for u in user_skills)


def _dedupe(skills: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for s in skills:
        n = normalize_skill(s)
        if n and n not in seen:
            seen.add(n)
            out.append(n)
    return out


def partition_skills(
    required: Iterable[str],
    nice_to_have: Iterable[str],
    user_skills: Iterable[str],
) -> SkillMatch:
    """
    Split a candidate's skills into matched / missing (required) and related
    (nice-to-have the user holds). Groups are disjoint; required wins over nice-to-have.
    """
    user = _dedupe(user_skills)
    req = _dedupe(required)
    req_set = set(req)
    nice = [s for s in _dedupe(nice_to_have) if s not in req_set]

    matched = [s for s in req if has_skill(user, s)]
    missing = [s for s in req if not has_skill(user, s)]
    related = [s for s in nice if has_skill(user, s)]
    missing_nice = [s for s in nice if not has_skill(user, s)]
    return SkillMatch(
        matched=matched,
        missing=missing,
        related=related,
        missing_nice_to_have=missing_nice,
    )


def jaccard_similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """Exact-token Jaccard index of two skill lists (0 when either is empty)."""
    set_a = {normalize_skill(s) for s in a if normalize_skill(s)}
    set_b = {normalize_skill(s) for s in b if normalize_skill(s)}
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / len(set_a | set_b)


def has_word_prefix(text: str, prefix: str) -> bool:
    """True if some word in text starts with prefix ("develop" in "web development", not "ui" in "build")."""
    if not prefix or not text:
        return False
    pattern = rf"\b{re.escape(normalize_skill(prefix))}"
    return bool(re.search(pattern, normalize_skill(text)))


def has_word(text: str, word: str) -> bool:
    """True if word appears as a whole word in text ("ai" in "ai ethics", not in "airtable")."""
    if not word or not text:
        return False
    pattern = rf"\b{re.escape(normalize_skill(word))}\b"
    return bool(re.search(pattern, normalize_skill(text)))
