"""Request logging, audit redaction and error-envelope tests for the Web API."""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from resume_builder.web.app import create_app
from resume_builder.web.redaction import redact_for_log, redact_text


class _BrokenStore:
    backend_name = "broken"

    async def get_resume(self, resume_id: str):
        raise OSError("disk unavailable")


def test_request_log_line(caplog: pytest.LogCaptureFixture, resume_payload) -> None:
    caplog.set_level(logging.INFO, logger="resume_builder.web.api")
    with TestClient(create_app()) as client:
        resume_id = client.post("/api/v1/resumes", json=resume_payload).json()["data"]["id"]
        client.get(f"/api/v1/resumes/{resume_id}")

    messages = [r.getMessage() for r in caplog.records if r.name == "resume_builder.web.api"]
    assert any(
        m.startswith("api_request method=GET") and f"resume_id={resume_id}" in m and "store=memory" in m
        for m in messages
    )
    assert any("status=201" in m for m in messages)


def test_audit_log_redacts_contact_details(caplog: pytest.LogCaptureFixture, resume_payload) -> None:
    caplog.set_level(logging.INFO, logger="resume_builder.web.audit")
    with TestClient(create_app()) as client:
        client.post("/api/v1/resumes", json=resume_payload)

    audit = [r.getMessage() for r in caplog.records if r.name == "resume_builder.web.audit"]
    assert len(audit) == 1
    assert "action=resume_created" in audit[0]
    assert "[REDACTED_EMAIL]" in audit[0]
    assert "jane.smith@example.com" not in caplog.text


def test_unexpected_errors_use_error_envelope(caplog: pytest.LogCaptureFixture) -> None:
    app = create_app()
    with TestClient(app, raise_server_exceptions=False) as client:
        app.state.resume_store = _BrokenStore()
        response = client.get("/api/v1/resumes/resume_1")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_redact_text_masks_emails_profiles_and_phones() -> None:
    text = "Reach jane@example.com, +1 (555) 123-4567 or linkedin.com/in/jane"
    redacted = redact_text(text)
    assert "jane@example.com" not in redacted
    assert "555" not in redacted
    assert "linkedin.com" not in redacted
    assert "[REDACTED_EMAIL]" in redacted
    assert "[REDACTED_PHONE]" in redacted
    assert "[REDACTED_PROFILE]" in redacted


def test_redact_for_log_walks_containers() -> None:
    payload = {"email": "a@b.io", "fields": ["skills", "x@y.org"], "count": 3}
    assert redact_for_log(payload) == {
        "email": "[REDACTED_EMAIL]",
        "fields": ["skills", "[REDACTED_EMAIL]"],
        "count": 3,
    }


def test_redact_text_masks_portfolio_links() -> None:
    redacted = redact_text("Portfolio at https://janesmith.dev/work and github.com/jane")
    assert redacted == "Portfolio at [REDACTED_WEBSITE] and [REDACTED_PROFILE]"


def test_redact_for_log_masks_personal_info_fields() -> None:
    details = {
        "personalInfo": {
            "fullName": "Jane Smith",
            "location": "San Francisco, CA",
            "phone": "",
            "website": "janesmith.dev",
        },
        "template": "modern",
    }
    assert redact_for_log(details) == {
        "personalInfo": {
            "fullName": "[REDACTED_NAME]",
            "location": "[REDACTED_LOCATION]",
            "phone": "",
            "website": "[REDACTED_WEBSITE]",
        },
        "template": "modern",
    }
