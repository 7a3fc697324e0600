"""In-memory resume store for the Web API, plus the record type both stores share."""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..domain import ATSScore, ResumeContent, score_resume
from .errors import resume_not_found
from .redaction import redact_for_log

TEMPLATES = ("modern", "classic", "creative", "minimal", "professional")
DEFAULT_TEMPLATE = "modern"
DEFAULT_LIST_LIMIT = 20
DEFAULT_SEARCH_LIMIT = 10
STATE_SCHEMA_VERSION = 1
logger = logging.getLogger("resume_builder.web.api")
audit_logger = logging.getLogger("resume_builder.web.audit")


def utc_now_iso() -> str:
    """Return current UTC time in ISO-8601 format (millisecond precision)."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def make_id(prefix: str) -> str:
    """Create opaque id matching the documented prefix style."""
    return f"{prefix}_{uuid.uuid4().hex[:10]}"


@dataclass
class ResumeRecord:
    resume_id: str
    content: ResumeContent
    created_at: str
    updated_at: str
    user_id: Optional[str] = None
    template: str = DEFAULT_TEMPLATE
    section_order: List[Dict[str, Any]] = field(default_factory=list)
    profile_picture: Optional[str] = None
    keywords: List[str] = field(default_factory=list)
    ats_score: Optional[ATSScore] = None

    def to_payload(self) -> Dict[str, Any]:
        """Editable fields in wire shape (what a client would PUT back)."""
        payload = self.content.to_dict()
        payload.update(
            {
                "userId": self.user_id,
                "template": self.template,
                "sectionOrder": [dict(item) for item in self.section_order],
                "profilePicture": self.profile_picture,
            }
        )
        return payload

    def to_dict(self) -> Dict[str, Any]:
        data = {"id": self.resume_id}
        data.update(self.to_payload())
        data.update(
            {
                "keywords": list(self.keywords),
                "atsScore": self.ats_score.to_dict() if self.ats_score else None,
                "createdAt": self.created_at,
                "updatedAt": self.updated_at,
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["ResumeRecord"]:
        """Rebuild a stored record; returns None when it has no id."""
        resume_id = str(data.get("id", "")).strip()
        if not resume_id:
            return None
        raw_score = data.get("atsScore")
        raw_keywords = data.get("keywords")
        now = utc_now_iso()
        return cls(
            resume_id=resume_id,
            content=ResumeContent.from_dict(data),
            created_at=str(data.get("createdAt") or now),
            updated_at=str(data.get("updatedAt") or now),
            user_id=data.get("userId") or None,
            template=normalize_template(data.get("template")),
            section_order=normalize_section_order(data.get("sectionOrder")),
            profile_picture=data.get("profilePicture") or None,
            keywords=[k for k in raw_keywords if isinstance(k, str)] if isinstance(raw_keywords, list) else [],
            ats_score=ATSScore.from_dict(raw_score) if isinstance(raw_score, dict) else None,
        )


# ---------------------------------------------------------------------------
# Record helpers shared by both store implementations
# ---------------------------------------------------------------------------


def normalize_template(value: Any) -> str:
    template = str(value or "").strip().lower()
    return template if template in TEMPLATES else DEFAULT_TEMPLATE


def normalize_section_order(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    items: List[Dict[str, Any]] = []
    for raw in value:
        if not isinstance(raw, dict):
            continue
        section_id = str(raw.get("id", "")).strip()
        name = str(raw.get("name", "")).strip()
        if not section_id or not name:
            continue
        items.append({"id": section_id, "name": name, "visible": bool(raw.get("visible", True))})
    return items


def build_record(
    payload: Dict[str, Any],
    resume_id: Optional[str] = None,
    created_at: Optional[str] = None,
) -> ResumeRecord:
    """Create a scored record from a wire payload."""
    now = utc_now_iso()
    record = ResumeRecord(
        resume_id=resume_id or make_id("resume"),
        content=ResumeContent.from_dict(payload),
        created_at=created_at or now,
        updated_at=now,
        user_id=payload.get("userId") or None,
        template=normalize_template(payload.get("template")),
        section_order=normalize_section_order(payload.get("sectionOrder")),
        profile_picture=payload.get("profilePicture") or None,
    )
    rescore(record)
    return record


def rescore(record: ResumeRecord) -> ResumeRecord:
    """Recompute the derived keywords and ATS score of *record* in place."""
    result = score_resume(record.content)
    record.keywords = list(result.keywords)
    record.ats_score = result.ats_score
    return record


def merge_record(record: ResumeRecord, updates: Dict[str, Any]) -> ResumeRecord:
    """Apply a partial update (top-level fields replace stored ones)."""
    payload = record.to_payload()
    payload.update(updates)
    return build_record(payload, resume_id=record.resume_id, created_at=record.created_at)


def duplicate_record(record: ResumeRecord) -> ResumeRecord:
    payload = record.to_payload()
    payload["personalInfo"] = dict(payload.get("personalInfo") or {})
    payload["personalInfo"]["fullName"] = f"{record.content.personal_info.full_name} (Copy)"
    return build_record(payload)


def matches_search(
    record: ResumeRecord,
    query: Optional[str] = None,
    user_id: Optional[str] = None,
    template: Optional[str] = None,
    min_score: Optional[int] = None,
) -> bool:
    if user_id and record.user_id != user_id:
        return False
    if template and record.template != template.strip().lower():
        return False
    if min_score is not None:
        total = record.ats_score.total_score if record.ats_score else 0
        if total < min_score:
            return False
    if query:
        needle = query.strip().lower()
        info = record.content.personal_info
        haystack = [info.full_name.lower(), info.email.lower(), *record.keywords]
        if not any(needle in value for value in haystack):
            return False
    return True


class InMemoryResumeStore:
    """Process-local resume storage with an optional JSON snapshot file."""

    backend_name = "memory"

    def __init__(self, state_file: Optional[Path] = None) -> None:
        # Insertion order doubles as recency: writes move a record to the end.
        self._resumes: Dict[str, ResumeRecord] = {}
        self._lock = asyncio.Lock()
        self._persist_lock = asyncio.Lock()
        self.state_file = state_file.resolve() if state_file else None

    async def start(self) -> None:
        await self._load_state()

    async def stop(self) -> None:
        await self._persist_state()

    # -- resumes -------------------------------------------------------------

    async def create_resume(self, payload: Dict[str, Any]) -> ResumeRecord:
        record = build_record(payload)
        async with self._lock:
            self._resumes[record.resume_id] = record
        await self._persist_state()
        await self._audit("resume_created", record)
        return record

    async def get_resume(self, resume_id: str) -> ResumeRecord:
        async with self._lock:
            return self._get_locked(resume_id)

    async def list_resumes(self, user_id: Optional[str] = None, limit: int = DEFAULT_LIST_LIMIT) -> List[ResumeRecord]:
        async with self._lock:
            records = [r for r in reversed(self._resumes.values()) if not user_id or r.user_id == user_id]
        return records[: max(limit, 0)]

    async def update_resume(self, resume_id: str, updates: Dict[str, Any]) -> ResumeRecord:
        async with self._lock:
            current = self._get_locked(resume_id)
            record = merge_record(current, updates)
            del self._resumes[resume_id]
            self._resumes[resume_id] = record
        await self._persist_state()
        await self._audit("resume_updated", record, {"fields": sorted(updates)})
        return record

    async def delete_resume(self, resume_id: str) -> None:
        async with self._lock:
            record = self._get_locked(resume_id)
            del self._resumes[resume_id]
        await self._persist_state()
        await self._audit("resume_deleted", record)

    async def search_resumes(
        self,
        query: Optional[str] = None,
        user_id: Optional[str] = None,
        template: Optional[str] = None,
        min_score: Optional[int] = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> List[ResumeRecord]:
        async with self._lock:
            records = [
                r
                for r in reversed(self._resumes.values())
                if matches_search(r, query=query, user_id=user_id, template=template, min_score=min_score)
            ]
        return records[: max(limit, 0)]

    async def duplicate_resume(self, resume_id: str) -> ResumeRecord:
        async with self._lock:
            record = duplicate_record(self._get_locked(resume_id))
            self._resumes[record.resume_id] = record
        await self._persist_state()
        await self._audit("resume_duplicated", record, {"source_id": resume_id})
        return record

    # -- internals -----------------------------------------------------------

    def _get_locked(self, resume_id: str) -> ResumeRecord:
        record = self._resumes.get(resume_id)
        if record is None:
            raise resume_not_found(resume_id)
        return record

    async def _audit(self, action: str, record: ResumeRecord, details: Optional[Dict[str, Any]] = None) -> None:
        info = record.content.personal_info
        safe_details = redact_for_log({"email": info.email, **(details or {})})
        audit_logger.info(
            "audit action=%s resume_id=%s user_id=%s total_score=%s details=%s",
            action,
            record.resume_id,
            record.user_id or "-",
            record.ats_score.total_score if record.ats_score else "-",
            safe_details,
        )

    async def _persist_state(self) -> None:
        if not self.state_file:
            return
        try:
            async with self._persist_lock:
                async with self._lock:
                    payload = self._serialize_state_locked()
                await asyncio.to_thread(self._write_state_file, payload)
        except Exception as exc:
            logger.warning("state_persist_failed path=%s error=%s", self.state_file, exc)

    def _serialize_state_locked(self) -> Dict[str, Any]:
        return {
            "schema_version": STATE_SCHEMA_VERSION,
            "saved_at": utc_now_iso(),
            "resumes": [record.to_dict() for record in self._resumes.values()],
        }

    def _write_state_file(self, payload: Dict[str, Any]) -> None:
        if not self.state_file:
            return
        self.state_file.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.state_file.with_suffix(self.state_file.suffix + ".tmp")
        temp_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        temp_path.replace(self.state_file)

    async def _load_state(self) -> None:
        if not self.state_file or not self.state_file.exists():
            return
        try:
            raw = await asyncio.to_thread(self.state_file.read_text, "utf-8")
            payload = json.loads(raw)
        except Exception as exc:
            logger.warning("state_load_failed path=%s error=%s", self.state_file, exc)
            return

        resumes = self._deserialize_resumes(payload)
        async with self._lock:
            self._resumes = resumes

    def _deserialize_resumes(self, payload: Any) -> Dict[str, ResumeRecord]:
        if not isinstance(payload, dict):
            return {}
        try:
            schema_version = int(payload.get("schema_version", 1))
        except (TypeError, ValueError):
            logger.warning("state_schema_invalid value=%r", payload.get("schema_version"))
            return {}
        if schema_version > STATE_SCHEMA_VERSION:
            logger.warning(
                "state_schema_unsupported file_schema=%s current_schema=%s",
                schema_version,
                STATE_SCHEMA_VERSION,
            )
            return {}

        raw_resumes = payload.get("resumes", [])
        if not isinstance(raw_resumes, list):
            return {}

        loaded: Dict[str, ResumeRecord] = {}
        for raw in raw_resumes:
            if not isinstance(raw, dict):
                continue
            try:
                record = ResumeRecord.from_dict(raw)
            except (TypeError, ValueError) as exc:
                logger.warning("state_record_skipped resume_id=%s error=%s", raw.get("id", "-"), exc)
                continue
            if record:
                loaded[record.resume_id] = record
        return loaded
