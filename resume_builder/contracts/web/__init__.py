"""Web API request/response contracts."""

from .ats import AnalysisResponse, ImprovementsResponse, IndustryKeywordsData, IndustryKeywordsResponse
from .resumes import (
    ATSScoreData,
    ATSScoreResponse,
    DeleteResumeResponse,
    ResumeListResponse,
    ResumeResponse,
    ResumeWriteRequest,
    TemplateName,
)

__all__ = [
    "ATSScoreData",
    "ATSScoreResponse",
    "AnalysisResponse",
    "DeleteResumeResponse",
    "ImprovementsResponse",
    "IndustryKeywordsData",
    "IndustryKeywordsResponse",
    "ResumeListResponse",
    "ResumeResponse",
    "ResumeWriteRequest",
    "TemplateName",
]
