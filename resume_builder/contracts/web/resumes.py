"""Resume endpoint request/response contracts.

Wire fields are camelCase; Python attributes are snake_case.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TemplateName = Literal["modern", "classic", "creative", "minimal", "professional"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfoPayload(CamelModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: Optional[str] = None
    website: Optional[str] = None
    github: Optional[str] = None


class EducationPayload(CamelModel):
    school: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: Optional[str] = None


class WorkExperiencePayload(CamelModel):
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    location: Optional[str] = None


class ProjectPayload(CamelModel):
    name: str = ""
    description: str = ""
    technologies: Union[str, List[str]] = ""
    link: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class SectionOrderItem(CamelModel):
    id: str
    name: str
    visible: bool = True


class ResumeWriteRequest(CamelModel):
    """Body of resume create/update calls; unset fields are left untouched on update."""

    user_id: Optional[str] = None
    personal_info: Optional[PersonalInfoPayload] = None
    professional_summary: Optional[str] = None
    education: Optional[List[EducationPayload]] = None
    work_experience: Optional[List[WorkExperiencePayload]] = None
    skills: Optional[List[str]] = None
    certifications: Optional[List[str]] = None
    projects: Optional[List[ProjectPayload]] = None
    profile_picture: Optional[str] = None
    template: Optional[TemplateName] = None
    section_order: Optional[List[SectionOrderItem]] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class ResumeResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]
    message: Optional[str] = None


class ResumeListResponse(BaseModel):
    success: bool = True
    data: List[Dict[str, Any]] = Field(default_factory=list)
    count: int


class DeleteResumeResponse(BaseModel):
    success: bool = True
    message: str


class ATSScoreData(CamelModel):
    resume_id: str
    resume_name: str
    ats_score: Dict[str, Any]


class ATSScoreResponse(BaseModel):
    success: bool = True
    data: ATSScoreData