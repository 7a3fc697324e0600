"""Pure domain logic for resume keyword extraction.

All functions operate on :class:`ResumeContent` values -- no I/O.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Set

from .models import ResumeContent

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

STOP_WORDS: Set[str] = {"the", "and", "for", "with", "was", "were", "are", "have", "has"}

MAX_KEYWORDS = 50

TECH_KEYWORDS: List[str] = ["javascript", "python", "react", "node", "sql", "aws", "docker", "kubernetes"]

SOFT_SKILL_KEYWORDS: List[str] = ["leadership", "communication", "teamwork", "management", "collaboration"]

_WORD_RE = re.compile(r"\b\w{3,}\b", re.ASCII)


@dataclass
class KeywordAnalysis:
    """Descriptive keyword report for the analysis endpoint."""

    total_keywords: int
    keywords: List[str] = field(default_factory=list)
    tech_keywords: List[str] = field(default_factory=list)
    soft_skill_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalKeywords": self.total_keywords,
            "keywords": list(self.keywords),
            "techKeywords": list(self.tech_keywords),
            "softSkillKeywords": list(self.soft_skill_keywords),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def tokenize(text: str) -> List[str]:
    """Lowercase *text* and return its 3+ character words minus stop words."""
    return [word for word in _WORD_RE.findall((text or "").lower()) if word not in STOP_WORDS]


def extract_keywords(resume: ResumeContent, limit: int = MAX_KEYWORDS) -> List[str]:
    """Return the de-duplicated keyword list for *resume*.

    Order is first occurrence: skills (case-folded, not tokenized), then each
    work experience description, then the professional summary.  Only the
    first *limit* keywords are kept.
    """
    seen: Dict[str, None] = {}

    def _add(words: Iterable[str]) -> None:
        for word in words:
            seen.setdefault(word, None)

    _add(skill.lower() for skill in resume.skills)
    for exp in resume.work_experience:
        if exp.description:
            _add(tokenize(exp.description))
    if resume.professional_summary:
        _add(tokenize(resume.professional_summary))

    return list(seen)[:limit]


def analyze_keywords(resume: ResumeContent) -> KeywordAnalysis:
    """Summarize the extracted keyword set of *resume*."""
    keywords = extract_keywords(resume)
    return KeywordAnalysis(
        total_keywords=len(keywords),
        keywords=keywords[:20],
        tech_keywords=[k for k in keywords if k in TECH_KEYWORDS],
        soft_skill_keywords=[k for k in keywords if k in SOFT_SKILL_KEYWORDS],
    )
