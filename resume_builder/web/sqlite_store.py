"""SQLite-backed resume store for the Web API -- durable across restarts."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import aiosqlite

from ..domain import ATSScore, ResumeContent
from .errors import resume_not_found
from .redaction import redact_for_log
from .store import (
    DEFAULT_LIST_LIMIT,
    DEFAULT_SEARCH_LIMIT,
    ResumeRecord,
    build_record,
    duplicate_record,
    matches_search,
    merge_record,
    normalize_section_order,
    normalize_template,
)

logger = logging.getLogger("resume_builder.web.api")
audit_logger = logging.getLogger("resume_builder.web.audit")

_SCHEMA_SQL = """\
CREATE TABLE IF NOT EXISTS resumes (
    resume_id TEXT PRIMARY KEY,
    user_id TEXT,
    template TEXT NOT NULL DEFAULT 'modern',
    content_json TEXT NOT NULL,
    section_order_json TEXT NOT NULL DEFAULT '[]',
    profile_picture TEXT,
    keywords_json TEXT NOT NULL DEFAULT '[]',
    ats_score_json TEXT,
    total_score INTEGER NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    revision INTEGER NOT NULL DEFAULT 0
);
CREATE INDEX IF NOT EXISTS idx_resumes_user ON resumes(user_id, revision);
CREATE INDEX IF NOT EXISTS idx_resumes_total_score ON resumes(total_score);
"""

_UPSERT_SQL = """\
INSERT OR REPLACE INTO resumes (
    resume_id, user_id, template, content_json, section_order_json, profile_picture,
    keywords_json, ats_score_json, total_score, created_at, updated_at, revision
) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, (SELECT COALESCE(MAX(revision), 0) + 1 FROM resumes))
"""

# ---------------------------------------------------------------------------
# Helper: row <-> record
# ---------------------------------------------------------------------------


def _row_to_record(row: aiosqlite.Row) -> ResumeRecord:
    content = json.loads(row["content_json"]) if row["content_json"] else {}
    section_order = json.loads(row["section_order_json"]) if row["section_order_json"] else []
    keywords = json.loads(row["keywords_json"]) if row["keywords_json"] else []
    ats_score = json.loads(row["ats_score_json"]) if row["ats_score_json"] else None
    return ResumeRecord(
        resume_id=row["resume_id"],
        content=ResumeContent.from_dict(content),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        user_id=row["user_id"],
        template=normalize_template(row["template"]),
        section_order=normalize_section_order(section_order),
        profile_picture=row["profile_picture"],
        keywords=[k for k in keywords if isinstance(k, str)],
        ats_score=ATSScore.from_dict(ats_score) if isinstance(ats_score, dict) else None,
    )


def _record_params(record: ResumeRecord) -> Tuple[Any, ...]:
    return (
        record.resume_id,
        record.user_id,
        record.template,
        json.dumps(record.content.to_dict(), ensure_ascii=False),
        json.dumps(record.section_order, ensure_ascii=False),
        record.profile_picture,
        json.dumps(record.keywords, ensure_ascii=False),
        json.dumps(record.ats_score.to_dict()) if record.ats_score else None,
        record.ats_score.total_score if record.ats_score else 0,
        record.created_at,
        record.updated_at,
    )


class SQLiteResumeStore:
    """SQLite-backed resume store -- survives process restarts."""

    backend_name = "sqlite"

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        self._db: Optional[aiosqlite.Connection] = None

    # -- lifecycle -----------------------------------------------------------

    async def start(self) -> None:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._db = await aiosqlite.connect(str(self._db_path))
        self._db.row_factory = aiosqlite.Row
        await self._db.execute("PRAGMA journal_mode=WAL")
        await self._db.executescript(_SCHEMA_SQL)
        await self._db.commit()

    async def stop(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    # -- resumes -------------------------------------------------------------

    async def create_resume(self, payload: Dict[str, Any]) -> ResumeRecord:
        record = build_record(payload)
        await self._save(record)
        await self._audit("resume_created", record)
        return record

    async def get_resume(self, resume_id: str) -> ResumeRecord:
        async with self._conn.execute("SELECT * FROM resumes WHERE resume_id = ?", (resume_id,)) as cursor:
            row = await cursor.fetchone()
        if not row:
            raise resume_not_found(resume_id)
        return _row_to_record(row)

    async def list_resumes(self, user_id: Optional[str] = None, limit: int = DEFAULT_LIST_LIMIT) -> List[ResumeRecord]:
        if user_id:
            sql = "SELECT * FROM resumes WHERE user_id = ? ORDER BY revision DESC LIMIT ?"
            params: Tuple[Any, ...] = (user_id, max(limit, 0))
        else:
            sql = "SELECT * FROM resumes ORDER BY revision DESC LIMIT ?"
            params = (max(limit, 0),)
        async with self._conn.execute(sql, params) as cursor:
            rows = await cursor.fetchall()
        return [_row_to_record(row) for row in rows]

    async def update_resume(self, resume_id: str, updates: Dict[str, Any]) -> ResumeRecord:
        current = await self.get_resume(resume_id)
        record = merge_record(current, updates)
        await self._save(record)
        await self._audit("resume_updated", record, {"fields": sorted(updates)})
        return record

    async def delete_resume(self, resume_id: str) -> None:
        record = await self.get_resume(resume_id)
        await self._conn.execute("DELETE FROM resumes WHERE resume_id = ?", (resume_id,))
        await self._conn.commit()
        await self._audit("resume_deleted", record)

    async def search_resumes(
        self,
        query: Optional[str] = None,
        user_id: Optional[str] = None,
        template: Optional[str] = None,
        min_score: Optional[int] = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> List[ResumeRecord]:
        clauses: List[str] = []
        params: List[Any] = []
        if user_id:
            clauses.append("user_id = ?")
            params.append(user_id)
        if template:
            clauses.append("template = ?")
            params.append(template.strip().lower())
        if min_score is not None:
            clauses.append("total_score >= ?")
            params.append(min_score)
        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        async with self._conn.execute(f"SELECT * FROM resumes{where} ORDER BY revision DESC", params) as cursor:
            rows = await cursor.fetchall()

        # Text matching spans JSON columns, so it runs in Python.
        results: List[ResumeRecord] = []
        for row in rows:
            record = _row_to_record(row)
            if matches_search(record, query=query):
                results.append(record)
                if len(results) >= limit:
                    break
        return results

    async def duplicate_resume(self, resume_id: str) -> ResumeRecord:
        record = duplicate_record(await self.get_resume(resume_id))
        await self._save(record)
        await self._audit("resume_duplicated", record, {"source_id": resume_id})
        return record

    # -- internals -----------------------------------------------------------

    @property
    def _conn(self) -> aiosqlite.Connection:
        if self._db is None:
            raise RuntimeError("SQLiteResumeStore is not started")
        return self._db

    async def _save(self, record: ResumeRecord) -> None:
        await self._conn.execute(_UPSERT_SQL, _record_params(record))
        await self._conn.commit()

    async def _audit(self, action: str, record: ResumeRecord, details: Optional[Dict[str, Any]] = None) -> None:
        safe_details = redact_for_log({"email": record.content.personal_info.email, **(details or {})})
        audit_logger.info(
            "audit action=%s resume_id=%s user_id=%s total_score=%s details=%s",
            action,
            record.resume_id,
            record.user_id or "-",
            record.ats_score.total_score if record.ats_score else "-",
            safe_details,
        )
