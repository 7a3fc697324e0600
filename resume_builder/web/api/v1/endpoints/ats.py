"""ATS analysis endpoints for Web API v1."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from .....contracts.web import AnalysisResponse, ImprovementsResponse, IndustryKeywordsData, IndustryKeywordsResponse
from .....domain import ResumeContent, analyze_resume, generate_detailed_improvements, get_industry_keywords
from ....store_protocol import ResumeStore
from ..deps import get_store

logger = logging.getLogger("resume_builder.web.api")

router = APIRouter(prefix="/ats", tags=["ats"])


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(
    resume: Dict[str, Any] = Body(...),
) -> AnalysisResponse:
    analysis = analyze_resume(ResumeContent.from_dict(resume))
    logger.info(
        "ats_analyzed total_score=%s benchmark=%s",
        analysis.ats_score.total_score,
        analysis.industry_benchmark.category,
    )
    return AnalysisResponse(data=analysis.to_dict())


@router.get("/keywords", response_model=IndustryKeywordsResponse)
async def industry_keywords(
    industry: Optional[str] = Query(default=None),
    role: Optional[str] = Query(default=None),
) -> IndustryKeywordsResponse:
    keywords = get_industry_keywords(industry, role)
    return IndustryKeywordsResponse(
        data=IndustryKeywordsData(
            industry=industry or "general",
            role=role or "general",
            keywords=keywords,
            total_count=len(keywords),
        )
    )


@router.get("/improvements/{resume_id}", response_model=ImprovementsResponse)
async def improvements(
    resume_id: str,
    store: ResumeStore = Depends(get_store),
) -> ImprovementsResponse:
    record = await store.get_resume(resume_id)
    plan = generate_detailed_improvements(record.content, keywords=record.keywords)
    return ImprovementsResponse(data=plan.to_dict())
