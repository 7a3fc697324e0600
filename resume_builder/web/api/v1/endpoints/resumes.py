"""Resume CRUD endpoints for Web API v1."""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status

from .....contracts.web import (
    ATSScoreData,
    ATSScoreResponse,
    DeleteResumeResponse,
    ResumeListResponse,
    ResumeResponse,
    ResumeWriteRequest,
)
from .....domain import calculate_ats_score
from ....errors import APIError
from ....store_protocol import ResumeStore
from ..deps import get_store

router = APIRouter(prefix="/resumes", tags=["resumes"])

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _validate_personal_info(payload: Dict[str, Any], required: bool) -> None:
    """Reject missing identity fields (on create, or when a write clears them) and malformed emails."""
    info = payload.get("personalInfo")
    if info is None:
        if required or "personalInfo" in payload:
            raise APIError(400, "BAD_REQUEST", "Personal information with name and email is required")
        return
    full_name = (info.get("fullName") or "").strip()
    email = (info.get("email") or "").strip()
    if not full_name or not email:
        raise APIError(400, "BAD_REQUEST", "Personal information with name and email is required")
    if not EMAIL_RE.match(email):
        raise APIError(400, "BAD_REQUEST", "Invalid email format", {"field": "personalInfo.email"})


@router.get("", response_model=ResumeListResponse)
async def list_resumes(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    store: ResumeStore = Depends(get_store),
) -> ResumeListResponse:
    records = await store.list_resumes(user_id=user_id)
    return ResumeListResponse(data=[r.to_dict() for r in records], count=len(records))


@router.get("/search", response_model=ResumeListResponse)
async def search_resumes(
    q: Optional[str] = Query(default=None),
    user_id: Optional[str] = Query(default=None, alias="userId"),
    template: Optional[str] = Query(default=None),
    min_score: Optional[int] = Query(default=None, alias="minScore", ge=0, le=100),
    store: ResumeStore = Depends(get_store),
) -> ResumeListResponse:
    records = await store.search_resumes(query=q, user_id=user_id, template=template, min_score=min_score)
    summaries = [
        {
            "id": r.resume_id,
            "personalInfo": {
                "fullName": r.content.personal_info.full_name,
                "email": r.content.personal_info.email,
            },
            "template": r.template,
            "atsScore": {"totalScore": r.ats_score.total_score if r.ats_score else 0},
            "updatedAt": r.updated_at,
        }
        for r in records
    ]
    return ResumeListResponse(data=summaries, count=len(summaries))


@router.get("/{resume_id}", response_model=ResumeResponse)
async def get_resume(
    resume_id: str,
    store: ResumeStore = Depends(get_store),
) -> ResumeResponse:
    record = await store.get_resume(resume_id)
    return ResumeResponse(data=record.to_dict())


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
async def create_resume(
    request: ResumeWriteRequest,
    store: ResumeStore = Depends(get_store),
) -> ResumeResponse:
    payload = request.to_payload()
    _validate_personal_info(payload, required=True)
    record = await store.create_resume(payload)
    return ResumeResponse(data=record.to_dict(), message="Resume created successfully")


@router.put("/{resume_id}", response_model=ResumeResponse)
async def update_resume(
    resume_id: str,
    request: ResumeWriteRequest,
    store: ResumeStore = Depends(get_store),
) -> ResumeResponse:
    payload = request.to_payload()
    _validate_personal_info(payload, required=False)
    record = await store.update_resume(resume_id, payload)
    return ResumeResponse(data=record.to_dict(), message="Resume updated successfully")


@router.delete("/{resume_id}", response_model=DeleteResumeResponse)
async def delete_resume(
    resume_id: str,
    store: ResumeStore = Depends(get_store),
) -> DeleteResumeResponse:
    await store.delete_resume(resume_id)
    return DeleteResumeResponse(message="Resume deleted successfully")


@router.get("/{resume_id}/ats-score", response_model=ATSScoreResponse)
async def get_ats_score(
    resume_id: str,
    store: ResumeStore = Depends(get_store),
) -> ATSScoreResponse:
    # Explicit request: recompute instead of returning the stored score.
    record = await store.get_resume(resume_id)
    score = calculate_ats_score(record.content)
    return ATSScoreResponse(
        data=ATSScoreData(
            resume_id=record.resume_id,
            resume_name=record.content.personal_info.full_name,
            ats_score=score.to_dict(),
        )
    )


@router.post("/{resume_id}/duplicate", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
async def duplicate_resume(
    resume_id: str,
    store: ResumeStore = Depends(get_store),
) -> ResumeResponse:
    record = await store.duplicate_resume(resume_id)
    return ResumeResponse(data=record.to_dict(), message="Resume duplicated successfully")
