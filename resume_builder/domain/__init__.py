"""Resume Builder Domain - Pure ATS scoring logic.

This package contains pure functions with no file system, network or
database dependencies.  The web and CLI layers hand it resume content and
receive scores and reports back.
"""

from .ats_scorer import (
    BENCHMARK_BANDS,
    SUB_SCORE_MAXIMUMS,
    ScoringResult,
    benchmark_band,
    calculate_ats_score,
    format_ats_report,
    score_resume,
)
from .keywords import MAX_KEYWORDS, STOP_WORDS, KeywordAnalysis, analyze_keywords, extract_keywords, tokenize
from .models import ATSScore, Education, PersonalInfo, Project, ResumeContent, WorkExperience
from .recommendations import (
    DetailedImprovements,
    FormatAnalysis,
    IndustryBenchmark,
    ResumeAnalysis,
    analyze_format,
    analyze_resume,
    generate_detailed_improvements,
    generate_recommendations,
    get_industry_benchmark,
    get_industry_keywords,
)

__all__ = [
    # Models
    "ATSScore",
    "Education",
    "PersonalInfo",
    "Project",
    "ResumeContent",
    "WorkExperience",
    # Keywords
    "MAX_KEYWORDS",
    "STOP_WORDS",
    "KeywordAnalysis",
    "analyze_keywords",
    "extract_keywords",
    "tokenize",
    # Scoring
    "BENCHMARK_BANDS",
    "SUB_SCORE_MAXIMUMS",
    "ScoringResult",
    "benchmark_band",
    "calculate_ats_score",
    "format_ats_report",
    "score_resume",
    # Recommendations
    "DetailedImprovements",
    "FormatAnalysis",
    "IndustryBenchmark",
    "ResumeAnalysis",
    "analyze_format",
    "analyze_resume",
    "generate_detailed_improvements",
    "generate_recommendations",
    "get_industry_benchmark",
    "get_industry_keywords",
]
