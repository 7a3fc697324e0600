"""Pure domain logic for ATS (Applicant Tracking System) resume scoring.

All functions operate on :class:`ResumeContent` values -- no I/O.  The total
score is the sum of five bounded sub-scores (20 + 25 + 20 + 20 + 15 = 100).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from .keywords import extract_keywords
from .models import ATSScore, ResumeContent

logger = logging.getLogger("resume_builder.domain")

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SUB_SCORE_MAXIMUMS: Dict[str, int] = {
    "contact_info": 20,
    "keywords": 25,
    "format": 20,
    "experience": 20,
    "skills": 15,
}

GITHUB_HINT_SKILLS = ("javascript", "python", "java", "react", "node")

MIN_SUMMARY_LENGTH = 100
MIN_DESCRIPTION_LENGTH = 100
MIN_FORMAT_SKILLS = 5
RECOMMENDED_SKILLS = 8
RECOMMENDED_KEYWORDS = 10

# (lower bound, category, percentile), checked top down.
BENCHMARK_BANDS: List[Tuple[int, str, int]] = [
    (90, "Excellent", 95),
    (80, "Very Good", 80),
    (70, "Good", 65),
    (60, "Fair", 40),
]
BENCHMARK_FLOOR = ("Needs Improvement", 20)


@dataclass(frozen=True)
class ScoringResult:
    """Keyword list and score computed together in one scoring pass."""

    keywords: Tuple[str, ...]
    ats_score: ATSScore


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_ats_score(resume: ResumeContent, keywords: Optional[Sequence[str]] = None) -> ATSScore:
    """Score *resume* for ATS compatibility.

    *keywords* defaults to :func:`extract_keywords` of the same resume.  Each
    sub-score is rounded on its own before summing, so the total always
    equals the sum of the reported sub-scores.
    """
    if keywords is None:
        keywords = extract_keywords(resume)

    contact, contact_tips = _score_contact_info(resume)
    kw, kw_tips = _score_keywords(keywords)
    fmt, fmt_tips = _score_format(resume)
    exp, exp_tips = _score_experience(resume)
    skills, skills_tips = _score_skills(resume)

    sub_scores = [_round_half_up(value) for value in (contact, kw, fmt, exp, skills)]
    suggestions: List[str] = []
    for tips in [contact_tips, kw_tips, fmt_tips, exp_tips, skills_tips]:
        suggestions.extend(tips)

    score = ATSScore(
        contact_info_score=sub_scores[0],
        keywords_score=sub_scores[1],
        format_score=sub_scores[2],
        experience_score=sub_scores[3],
        skills_score=sub_scores[4],
        total_score=sum(sub_scores),
        suggestions=tuple(suggestions),
        last_updated=_utc_now_iso(),
    )
    logger.debug("ats_scored total=%s sub_scores=%s keywords=%s", score.total_score, sub_scores, len(keywords))
    return score


def score_resume(resume: ResumeContent) -> ScoringResult:
    """Extract keywords and score *resume* in one pass."""
    keywords = extract_keywords(resume)
    return ScoringResult(keywords=tuple(keywords), ats_score=calculate_ats_score(resume, keywords))


# ---------------------------------------------------------------------------
# Formatting report (pure string output)
# ---------------------------------------------------------------------------


def format_ats_report(score: ATSScore) -> str:
    """Render an :class:`ATSScore` as a human-readable report."""
    grade, _ = benchmark_band(score.total_score)
    bar = _score_bar(score.total_score)

    lines = [
        f"## ATS Score: {score.total_score}/100 {grade}",
        bar,
        "",
        "| Category     | Score | Max |",
        "|--------------|-------|-----|",
    ]
    labels = {
        "contact_info": "Contact Info",
        "keywords": "Keywords",
        "format": "Format",
        "experience": "Experience",
        "skills": "Skills",
    }
    for key, value in score.sub_scores().items():
        lines.append(f"| {labels[key]:<12} | {value:3d}   | {SUB_SCORE_MAXIMUMS[key]:3d} |")

    if score.suggestions:
        lines.append("")
        lines.append("### Suggestions")
        for i, s in enumerate(score.suggestions, 1):
            lines.append(f"{i}. {s}")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Private scoring helpers
# ---------------------------------------------------------------------------


def _score_contact_info(resume: ResumeContent) -> Tuple[float, List[str]]:
    info = resume.personal_info
    score = 5 * sum(1 for value in (info.full_name, info.email, info.phone, info.location) if value)
    tips: List[str] = []

    if not info.linkedin:
        tips.append("Add LinkedIn profile for better visibility")
    if not info.github and any(skill.lower() in GITHUB_HINT_SKILLS for skill in resume.skills):
        tips.append("Add GitHub profile to showcase your technical projects")

    return min(score, SUB_SCORE_MAXIMUMS["contact_info"]), tips


def _score_keywords(keywords: Sequence[str]) -> Tuple[float, List[str]]:
    count = len(keywords)
    tips: List[str] = []
    if count < RECOMMENDED_KEYWORDS:
        tips.append("Add more relevant keywords to improve ATS visibility")
    return min(count * 2, SUB_SCORE_MAXIMUMS["keywords"]), tips


def _score_format(resume: ResumeContent) -> Tuple[float, List[str]]:
    score = 0
    tips: List[str] = []

    if len(resume.professional_summary) >= MIN_SUMMARY_LENGTH:
        score += 5
    else:
        tips.append("Add a professional summary of at least 100 characters")

    if resume.work_experience:
        score += 5
    else:
        tips.append("Add work experience to strengthen your resume")

    if resume.education:
        score += 5
    else:
        tips.append("Add education information")

    if len(resume.skills) >= MIN_FORMAT_SKILLS:
        score += 5
    else:
        tips.append("Add at least 5 relevant skills")

    return score, tips


def _score_experience(resume: ResumeContent) -> Tuple[float, List[str]]:
    total = 0
    for exp in resume.work_experience:
        points = 0
        if len(exp.description) >= MIN_DESCRIPTION_LENGTH:
            points += 3
        if exp.position and exp.company:
            points += 2
        total += min(points, 5)

    tips: List[str] = []
    if any(len(exp.description) < MIN_DESCRIPTION_LENGTH for exp in resume.work_experience):
        tips.append("Provide detailed job descriptions with quantifiable achievements")

    return min(total, SUB_SCORE_MAXIMUMS["experience"]), tips


def _score_skills(resume: ResumeContent) -> Tuple[float, List[str]]:
    count = len(resume.skills)
    tips: List[str] = []
    if count < RECOMMENDED_SKILLS:
        tips.append("Add more relevant skills (aim for 8-12 skills)")
    return min(count * 1.5, SUB_SCORE_MAXIMUMS["skills"]), tips


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _round_half_up(value: float) -> int:
    # round() is banker's rounding; 4.5 must become 5 here.
    return int(math.floor(value + 0.5))


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def benchmark_band(total_score: int) -> Tuple[str, int]:
    """Return the (category, percentile) band that *total_score* falls in."""
    for lower_bound, category, percentile in BENCHMARK_BANDS:
        if total_score >= lower_bound:
            return category, percentile
    return BENCHMARK_FLOOR


def _score_bar(score: int, width: int = 20) -> str:
    filled = round(score / 100 * width)
    return f"[{'=' * filled}{' ' * (width - filled)}]"
