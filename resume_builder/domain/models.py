"""Resume content data model.

Pure dataclasses with tolerant dict conversion -- no I/O.  The wire shape is
camelCase (``personalInfo``, ``workExperience`` ...); attribute names are
snake_case.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


def _text(value: Any) -> str:
    """Coerce a scalar to a stripped string; anything else becomes empty."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _optional_text(value: Any) -> Optional[str]:
    text = _text(value)
    return text or None


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _items(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def _strings(value: Any) -> List[str]:
    return [item.strip() for item in _items(value) if isinstance(item, str) and item.strip()]


def _score(value: Any) -> int:
    """Coerce a stored sub-score to int; unreadable values count as 0."""
    if isinstance(value, bool):
        return 0
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


@dataclass
class PersonalInfo:
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: Optional[str] = None
    website: Optional[str] = None
    github: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "PersonalInfo":
        raw = _mapping(data)
        return cls(
            full_name=_text(raw.get("fullName")),
            email=_text(raw.get("email")).lower(),
            phone=_text(raw.get("phone")),
            location=_text(raw.get("location")),
            linkedin=_optional_text(raw.get("linkedin")),
            website=_optional_text(raw.get("website")),
            github=_optional_text(raw.get("github")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "fullName": self.full_name,
                "email": self.email,
                "phone": self.phone,
                "location": self.location,
                "linkedin": self.linkedin,
                "website": self.website,
                "github": self.github,
            }
        )


@dataclass
class Education:
    school: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Education":
        return cls(
            school=_text(data.get("school")),
            degree=_text(data.get("degree")),
            field=_text(data.get("field")),
            start_date=_text(data.get("startDate")),
            end_date=_text(data.get("endDate")),
            gpa=_optional_text(data.get("gpa")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "school": self.school,
                "degree": self.degree,
                "field": self.field,
                "startDate": self.start_date,
                "endDate": self.end_date,
                "gpa": self.gpa,
            }
        )


@dataclass
class WorkExperience:
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    location: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkExperience":
        return cls(
            company=_text(data.get("company")),
            position=_text(data.get("position")),
            start_date=_text(data.get("startDate")),
            end_date=_text(data.get("endDate")),
            description=_text(data.get("description")),
            location=_optional_text(data.get("location")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "company": self.company,
                "position": self.position,
                "startDate": self.start_date,
                "endDate": self.end_date,
                "description": self.description,
                "location": self.location,
            }
        )


@dataclass
class Project:
    name: str = ""
    description: str = ""
    technologies: str = ""
    link: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        technologies = data.get("technologies")
        if isinstance(technologies, (list, tuple)):
            technologies = ", ".join(_strings(technologies))
        return cls(
            name=_text(data.get("name")),
            description=_text(data.get("description")),
            technologies=_text(technologies),
            link=_optional_text(data.get("link")),
            start_date=_optional_text(data.get("startDate")),
            end_date=_optional_text(data.get("endDate")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "name": self.name,
                "description": self.description,
                "technologies": self.technologies,
                "link": self.link,
                "startDate": self.start_date,
                "endDate": self.end_date,
            }
        )


@dataclass
class ResumeContent:
    """Everything the scoring engine reads from a resume."""

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    professional_summary: str = ""
    education: List[Education] = field(default_factory=list)
    work_experience: List[WorkExperience] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    certifications: List[str] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "ResumeContent":
        """Build content from the camelCase wire shape.

        Never raises: absent or malformed fields are treated as empty, so a
        half-filled form still produces a (low) score.
        """
        raw = _mapping(data)
        return cls(
            personal_info=PersonalInfo.from_dict(raw.get("personalInfo")),
            professional_summary=_text(raw.get("professionalSummary")),
            education=[Education.from_dict(e) for e in _items(raw.get("education")) if isinstance(e, dict)],
            work_experience=[
                WorkExperience.from_dict(e) for e in _items(raw.get("workExperience")) if isinstance(e, dict)
            ],
            skills=_strings(raw.get("skills")),
            certifications=_strings(raw.get("certifications")),
            projects=[Project.from_dict(p) for p in _items(raw.get("projects")) if isinstance(p, dict)],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "personalInfo": self.personal_info.to_dict(),
            "professionalSummary": self.professional_summary,
            "education": [e.to_dict() for e in self.education],
            "workExperience": [e.to_dict() for e in self.work_experience],
            "skills": list(self.skills),
            "certifications": list(self.certifications),
            "projects": [p.to_dict() for p in self.projects],
        }


@dataclass(frozen=True)
class ATSScore:
    """Immutable score record; ``total_score`` is the sum of the sub-scores."""

    contact_info_score: int
    keywords_score: int
    format_score: int
    experience_score: int
    skills_score: int
    total_score: int
    suggestions: Tuple[str, ...] = ()
    last_updated: str = ""

    def sub_scores(self) -> Dict[str, int]:
        return {
            "contact_info": self.contact_info_score,
            "keywords": self.keywords_score,
            "format": self.format_score,
            "experience": self.experience_score,
            "skills": self.skills_score,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "contactInfoScore": self.contact_info_score,
            "keywordsScore": self.keywords_score,
            "formatScore": self.format_score,
            "experienceScore": self.experience_score,
            "skillsScore": self.skills_score,
            "suggestions": list(self.suggestions),
            "lastUpdated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ATSScore":
        contact = _score(data.get("contactInfoScore"))
        keywords = _score(data.get("keywordsScore"))
        fmt = _score(data.get("formatScore"))
        experience = _score(data.get("experienceScore"))
        skills = _score(data.get("skillsScore"))
        return cls(
            contact_info_score=contact,
            keywords_score=keywords,
            format_score=fmt,
            experience_score=experience,
            skills_score=skills,
            total_score=contact + keywords + fmt + experience + skills,
            suggestions=tuple(_strings(data.get("suggestions"))),
            last_updated=_text(data.get("lastUpdated")),
        )
