"""Parsers for Upwork job-search API responses."""

from typing import Any, Optional

from hustle_finder.models.raw import Level, LocationMode, OpportunityType, RawOpportunity

JOB_URL_TEMPLATE = "https://www.upwork.com/jobs/{job_id}"

DEFAULT_STEPS = [
    "Create an Upwork account",
    "Complete your profile with portfolio samples",
    "Apply for the job with a tailored proposal",
]

# Upwork experience tier -> entry barrier
_EXPERIENCE_LEVELS: dict[str, Level] = {
    "entry": Level.LOW,
    "entry level": Level.LOW,
    "intermediate": Level.MEDIUM,
    "expert": Level.HIGH,
}


def extract_jobs(payload: Any) -> list[dict]:
    """
    Pull the job list out of a search response.
    Accepts {"jobs": [...]}, {"data": {"jobs": [...]}} or a bare list.
    """
    if isinstance(payload, list):
        jobs = payload
    elif isinstance(payload, dict):
        jobs = payload.get("jobs")
        if jobs is None and isinstance(payload.get("data"), dict):
            jobs = payload["data"].get("jobs")
    else:
        jobs = None
    return [j for j in (jobs or []) if isinstance(j, dict)]


def _skill_names(skills: Any) -> list[str]:
    """Skills arrive as strings or {"name": ...} / {"prettyName": ...} objects."""
    if not isinstance(skills, list):
        return []
    names: list[str] = []
    for s in skills:
        if isinstance(s, dict):
            name = s.get("prettyName") or s.get("name")
        else:
            name = s
        if name and str(name).strip():
            names.append(str(name).strip())
    return names


def _number(value: Any) -> Optional[float]:
    try:
        return float(value) if value not in (None, "") else None
    except (TypeError, ValueError):
        return None


def competition_from_proposals(count: Any) -> Level:
    """More than 20 proposals is high competition, more than 10 medium."""
    n = _number(count) or 0
    if n > 20:
        return Level.HIGH
    if n > 10:
        return Level.MEDIUM
    return Level.LOW


def income_from_job(job: dict) -> dict[str, Any]:
    """
    Hourly jobs use the posted rate range (max defaults to 1.5x min);
    fixed-price jobs use the budget as a per-project amount.
    """
    rate_min = _number(job.get("hourly_rate_min") or job.get("hourlyBudgetMin"))
    rate_max = _number(job.get("hourly_rate_max") or job.get("hourlyBudgetMax"))
    if rate_min is not None or rate_max is not None:
        lo = rate_min if rate_min is not None else rate_max
        hi = rate_max if rate_max is not None else lo * 1.5
        return {"min": lo, "max": hi, "timeframe": "hourly"}

    budget = job.get("budget")
    if isinstance(budget, dict):
        budget = budget.get("amount")
    amount = _number(budget)
    if amount is not None:
        return {"min": amount, "max": amount, "timeframe": "per-project"}
    return {"min": 0, "max": 0, "timeframe": "hourly"}


def parse_job(job: dict) -> RawOpportunity:
    """Map one API job to RawOpportunity."""
    job_id = str(job.get("id") or job.get("ciphertext") or "").strip()
    workload = str(job.get("workload") or "").lower()
    full_time = "full" in workload or "30+" in workload
    category = job.get("category")
    category_name = category.get("name") if isinstance(category, dict) else category

    experience = str(job.get("experience_level") or job.get("contractorTier") or "").strip().lower()
    barrier = _EXPERIENCE_LEVELS.get(experience, Level.MEDIUM)

    description = (job.get("description") or job.get("snippet") or "").strip()
    if category_name and not description:
        description = f"{category_name} project on Upwork."

    return RawOpportunity(
        id=f"upwork-{job_id}" if job_id else None,
        title=(job.get("title") or "").strip() or "Freelance Opportunity",
        description=description,
        url=job.get("url") or (JOB_URL_TEMPLATE.format(job_id=job_id) if job_id else None),
        source="upwork",
        opportunity_type=OpportunityType.FREELANCE,
        required_skills=_skill_names(job.get("skills")),
        estimated_income=income_from_job(job),
        # Connects to submit proposals
        startup_cost={"min": 0, "max": 100},
        time_required={"min": 30, "max": 40} if full_time else {"min": 10, "max": 20},
        location=LocationMode.REMOTE,
        entry_barrier=barrier,
        competition=competition_from_proposals(job.get("proposals_count") or job.get("totalApplicants")),
        steps_to_start=DEFAULT_STEPS,
    )
