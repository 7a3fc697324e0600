"""ATS analysis endpoint response contracts."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel

from .resumes import CamelModel


class AnalysisResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]


class IndustryKeywordsData(CamelModel):
    industry: str
    role: str
    keywords: List[str]
    total_count: int


class IndustryKeywordsResponse(BaseModel):
    success: bool = True
    data: IndustryKeywordsData


class ImprovementsResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]
