"""Global pytest fixtures for deterministic test environment."""

from __future__ import annotations

import copy
from typing import Any, Dict

import pytest

SUMMARY_120 = (
    "Backend engineer focused on reliable payment platforms, observability tooling "
    "and mentoring teams through large migrations."
)[:120]

DESCRIPTION_110 = (
    "Built checkout services in python, cutting latency by forty percent while "
    "leading teamwork across three product squads."
)[:110]

SAMPLE_RESUME: Dict[str, Any] = {
    "personalInfo": {
        "fullName": "Jane Smith",
        "email": "Jane.Smith@Example.com",
        "phone": "+1 555 123 4567",
        "location": "Berlin",
    },
    "professionalSummary": SUMMARY_120,
    "workExperience": [
        {
            "company": "Acme Corp",
            "position": "Senior Engineer",
            "startDate": "2020-01",
            "endDate": "2024-06",
            "description": DESCRIPTION_110,
        }
    ],
    "education": [
        {
            "school": "State University",
            "degree": "B.S.",
            "field": "Computer Science",
            "startDate": "2012",
            "endDate": "2016",
        }
    ],
    "skills": ["JavaScript", "React", "Node.js", "Python", "SQL"],
}


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear local runtime env that can leak into tests on developer machines."""
    for key in (
        "RESUME_BUILDER_STORE",
        "RESUME_BUILDER_DB_PATH",
        "RESUME_BUILDER_STATE_FILE",
        "RESUME_BUILDER_LOG_LEVEL",
        "RESUME_BUILDER_CONFIG",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def resume_payload() -> Dict[str, Any]:
    """A complete resume in wire shape; each test gets its own copy."""
    return copy.deepcopy(SAMPLE_RESUME)
