"""Advisory output derived from a resume and its ATS score.

Recommendations, format checks, industry benchmarks, industry keyword lookup
and staged improvement plans.  Nothing here feeds back into the score.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .ats_scorer import benchmark_band, calculate_ats_score
from .keywords import KeywordAnalysis, analyze_keywords, extract_keywords
from .models import ATSScore, ResumeContent

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

INDUSTRY_KEYWORDS: Dict[str, List[str]] = {
    "technology": [
        "JavaScript",
        "Python",
        "React",
        "Node.js",
        "AWS",
        "Docker",
        "Kubernetes",
        "Microservices",
        "REST API",
        "GraphQL",
        "MongoDB",
        "PostgreSQL",
        "Redis",
        "Git",
        "CI/CD",
        "Agile",
        "Scrum",
        "TDD",
        "DevOps",
        "Cloud Computing",
    ],
    "marketing": [
        "Digital Marketing",
        "SEO",
        "SEM",
        "Google Analytics",
        "Social Media",
        "Content Marketing",
        "Email Marketing",
        "PPC",
        "Conversion Rate",
        "Marketing Automation",
        "Brand Management",
        "Campaign Management",
    ],
    "finance": [
        "Financial Analysis",
        "Financial Modeling",
        "Excel",
        "PowerBI",
        "Tableau",
        "Risk Management",
        "Portfolio Management",
        "Investment Analysis",
        "Financial Reporting",
        "Budgeting",
        "Forecasting",
        "Accounting",
    ],
    "sales": [
        "Lead Generation",
        "CRM",
        "Salesforce",
        "HubSpot",
        "Sales Funnel",
        "Cold Calling",
        "Relationship Building",
        "Negotiation",
        "Closing",
        "Pipeline Management",
        "Account Management",
        "Territory Management",
    ],
}

ROLE_KEYWORDS: Dict[str, List[str]] = {
    "frontend": ["React", "Vue.js", "Angular", "HTML", "CSS", "TypeScript", "Webpack", "SASS"],
    "backend": ["Node.js", "Python", "Java", "Express", "Django", "Spring", "API", "Database"],
    "fullstack": ["MEAN", "MERN", "Full Stack", "Frontend", "Backend", "Database", "API"],
    "manager": ["Leadership", "Team Management", "Project Management", "Strategy", "Planning"],
    "senior": ["Mentoring", "Architecture", "System Design", "Technical Leadership", "Code Review"],
}

GENERAL_KEYWORDS: List[str] = [
    "Communication",
    "Teamwork",
    "Problem Solving",
    "Leadership",
    "Project Management",
    "Time Management",
    "Critical Thinking",
    "Adaptability",
    "Innovation",
    "Collaboration",
]

FORMAT_RECOMMENDATIONS: List[str] = [
    "Use standard section headers (Experience, Education, Skills)",
    "Keep formatting consistent throughout the resume",
    "Use bullet points for easy scanning",
    "Ensure dates are in a consistent format",
]

FORMAT_SUGGESTIONS: List[str] = [
    "Use consistent date formats throughout",
    "Start bullet points with action verbs",
    "Quantify achievements with numbers and percentages",
    "Keep sections in a logical order",
    "Use standard section headers",
]

LONG_TERM_IMPROVEMENTS: List[str] = [
    "Regularly update with new skills and experiences",
    "Customize keywords for each job application",
    "Seek additional certifications relevant to your field",
]

KEYWORD_EXPANSIONS: Dict[str, List[str]] = {
    "javascript": ["React", "Node.js", "TypeScript", "Express"],
    "python": ["Django", "Flask", "Pandas", "NumPy", "Machine Learning"],
}

_GITHUB_IMPROVEMENT_SKILLS = ("javascript", "python", "java", "react")


@dataclass
class FormatAnalysis:
    score: int
    issues: List[str] = field(default_factory=list)
    strengths: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": list(self.issues),
            "strengths": list(self.strengths),
            "recommendations": list(self.recommendations),
        }


@dataclass
class IndustryBenchmark:
    category: str
    percentile: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"category": self.category, "percentile": self.percentile, "message": self.message}


@dataclass
class DetailedImprovements:
    """Improvement plan bucketed by how soon each item can be addressed."""

    immediate: List[str] = field(default_factory=list)
    short_term: List[str] = field(default_factory=list)
    long_term: List[str] = field(default_factory=list)
    keyword_suggestions: List[str] = field(default_factory=list)
    format_suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "immediate": list(self.immediate),
            "shortTerm": list(self.short_term),
            "longTerm": list(self.long_term),
            "keywordSuggestions": list(self.keyword_suggestions),
            "formatSuggestions": list(self.format_suggestions),
        }


@dataclass
class ResumeAnalysis:
    """Full analysis payload: score plus every advisory report."""

    ats_score: ATSScore
    recommendations: List[str]
    keyword_analysis: KeywordAnalysis
    format_analysis: FormatAnalysis
    industry_benchmark: IndustryBenchmark

    def to_dict(self) -> Dict[str, Any]:
        return {
            "atsScore": self.ats_score.to_dict(),
            "recommendations": list(self.recommendations),
            "keywordAnalysis": self.keyword_analysis.to_dict(),
            "formatAnalysis": self.format_analysis.to_dict(),
            "industryBenchmark": self.industry_benchmark.to_dict(),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_resume(resume: ResumeContent) -> ResumeAnalysis:
    """Score *resume* and attach all advisory reports."""
    score = calculate_ats_score(resume)
    return ResumeAnalysis(
        ats_score=score,
        recommendations=generate_recommendations(score),
        keyword_analysis=analyze_keywords(resume),
        format_analysis=analyze_format(resume),
        industry_benchmark=get_industry_benchmark(score.total_score),
    )


def generate_recommendations(score: ATSScore) -> List[str]:
    """Map sub-scores below fixed thresholds to advisory strings."""
    recommendations: List[str] = []

    if score.contact_info_score < 15:
        recommendations.append("Ensure all contact information is complete and properly formatted")

    if score.keywords_score < 20:
        recommendations.append("Include more industry-specific keywords and technical skills")
        recommendations.append("Use keywords from the job description you're applying for")

    if score.format_score < 15:
        recommendations.append("Use a clean, simple format that ATS systems can easily parse")
        recommendations.append("Avoid complex layouts, graphics, and unusual fonts")

    if score.experience_score < 15:
        recommendations.append("Provide more detailed job descriptions with quantifiable achievements")
        recommendations.append("Use action verbs and specific metrics in your experience section")

    if score.skills_score < 10:
        recommendations.append("Add more relevant technical and soft skills")
        recommendations.append("Include both hard and soft skills relevant to your target role")

    return recommendations


def analyze_format(resume: ResumeContent) -> FormatAnalysis:
    """Structural presence checks, 20 points off per issue."""
    issues: List[str] = []
    strengths: List[str] = []

    if not resume.personal_info.full_name:
        issues.append("Missing or incomplete personal information")
    else:
        strengths.append("Complete personal information section")

    if len(resume.professional_summary) < 50:
        issues.append("Professional summary is missing or too short")
    else:
        strengths.append("Professional summary present")

    if not resume.work_experience:
        issues.append("No work experience provided")
    else:
        strengths.append("Work experience section included")

    if len(resume.skills) < 5:
        issues.append("Insufficient skills listed (aim for 8-12)")
    else:
        strengths.append("Good variety of skills listed")

    return FormatAnalysis(
        score=max(0, 100 - len(issues) * 20),
        issues=issues,
        strengths=strengths,
        recommendations=list(FORMAT_RECOMMENDATIONS),
    )


def get_industry_benchmark(total_score: int) -> IndustryBenchmark:
    category, percentile = benchmark_band(total_score)
    return IndustryBenchmark(
        category=category,
        percentile=percentile,
        message=f"Your resume scores in the {percentile}th percentile of resumes we've analyzed.",
    )


def get_industry_keywords(industry: Optional[str] = None, role: Optional[str] = None) -> List[str]:
    """Look up ATS keywords for *industry* and/or *role*.

    Industry terms come first, then role terms, duplicates dropped.  Falls
    back to :data:`GENERAL_KEYWORDS` when neither is recognized.
    """
    keywords: List[str] = []
    if industry:
        keywords.extend(INDUSTRY_KEYWORDS.get(industry.strip().lower(), []))
    if role:
        keywords.extend(ROLE_KEYWORDS.get(role.strip().lower(), []))

    if not keywords:
        keywords = list(GENERAL_KEYWORDS)

    return list(dict.fromkeys(keywords))


def generate_detailed_improvements(
    resume: ResumeContent,
    keywords: Optional[Sequence[str]] = None,
) -> DetailedImprovements:
    """Bucket improvement advice into immediate / short-term / long-term tiers.

    *keywords* should be the stored keyword set of a persisted resume; it is
    re-extracted when omitted.
    """
    if keywords is None:
        keywords = extract_keywords(resume)

    improvements = DetailedImprovements()
    info = resume.personal_info
    lowered_skills = [skill.lower() for skill in resume.skills]

    if not info.linkedin:
        improvements.immediate.append("Add LinkedIn profile URL")
    if not info.github and any(skill in _GITHUB_IMPROVEMENT_SKILLS for skill in lowered_skills):
        improvements.immediate.append("Add GitHub profile URL")
    if len(resume.skills) < 8:
        improvements.immediate.append("Add more relevant skills (aim for 8-12)")

    if len(resume.professional_summary) < 100:
        improvements.short_term.append("Write a compelling professional summary (100-150 words)")
    if any(len(exp.description) < 100 for exp in resume.work_experience):
        improvements.short_term.append("Enhance job descriptions with specific achievements and metrics")

    improvements.long_term.extend(LONG_TERM_IMPROVEMENTS)

    for keyword, expansions in KEYWORD_EXPANSIONS.items():
        if keyword in keywords:
            improvements.keyword_suggestions.extend(expansions)

    improvements.format_suggestions = list(FORMAT_SUGGESTIONS)
    return improvements
