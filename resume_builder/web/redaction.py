"""Masking of resume contact details before they reach the audit log.

Audit entries carry the resume owner's email plus whatever the caller
adds, which can include ``personalInfo`` fragments. Values stored under a
contact key are masked outright. Free text is scanned for emails, phone
numbers and profile or portfolio links.
"""

from __future__ import annotations

import re
from typing import Any

# personalInfo keys whose values are masked whatever they contain.
CONTACT_FIELDS = {
    "fullName": "[REDACTED_NAME]",
    "phone": "[REDACTED_PHONE]",
    "location": "[REDACTED_LOCATION]",
    "linkedin": "[REDACTED_PROFILE]",
    "github": "[REDACTED_PROFILE]",
    "website": "[REDACTED_WEBSITE]",
}

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"\+?\d[\d\s().-]{7,}\d")
PROFILE_URL_RE = re.compile(r"\b(?:https?://)?(?:www\.)?(?:linkedin\.com|github\.com)/\S+", re.IGNORECASE)
WEBSITE_RE = re.compile(r"\bhttps?://\S+", re.IGNORECASE)


def redact_text(value: str, max_length: int = 200) -> str:
    redacted = EMAIL_RE.sub("[REDACTED_EMAIL]", value or "")
    redacted = PROFILE_URL_RE.sub("[REDACTED_PROFILE]", redacted)
    redacted = WEBSITE_RE.sub("[REDACTED_WEBSITE]", redacted)
    redacted = PHONE_RE.sub("[REDACTED_PHONE]", redacted)
    if len(redacted) > max_length:
        return f"{redacted[:max_length]}..."
    return redacted


def redact_for_log(value: Any) -> Any:
    """Return a copy of *value* that is safe to write to the audit log."""
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, dict):
        return {str(k): _redact_item(str(k), v) for k, v in value.items()}
    if isinstance(value, list):
        return [redact_for_log(item) for item in value]
    if isinstance(value, tuple):
        return tuple(redact_for_log(item) for item in value)
    return value


def _redact_item(key: str, value: Any) -> Any:
    if key in CONTACT_FIELDS and isinstance(value, str) and value:
        return CONTACT_FIELDS[key]
    return redact_for_log(value)
