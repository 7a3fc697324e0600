"""ResumeStore protocol -- the contract both InMemory and SQLite stores implement."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from typing_extensions import Protocol, runtime_checkable

# ---------------------------------------------------------------------------
# Re-export the record type so endpoint code can import from one place.
# ---------------------------------------------------------------------------
from .store import ResumeRecord  # noqa: F401


@runtime_checkable
class ResumeStore(Protocol):
    """Public surface consumed by API endpoints.

    Writes recompute keywords and the ATS score before storing; reads return
    the stored score as-is.
    """

    backend_name: str

    # -- lifecycle -----------------------------------------------------------
    async def start(self) -> None: ...
    async def stop(self) -> None: ...

    # -- resumes -------------------------------------------------------------
    async def create_resume(self, payload: Dict[str, Any]) -> ResumeRecord: ...

    async def get_resume(self, resume_id: str) -> ResumeRecord: ...

    async def list_resumes(self, user_id: Optional[str] = None, limit: int = 20) -> List[ResumeRecord]: ...

    async def update_resume(self, resume_id: str, updates: Dict[str, Any]) -> ResumeRecord: ...

    async def delete_resume(self, resume_id: str) -> None: ...

    async def search_resumes(
        self,
        query: Optional[str] = None,
        user_id: Optional[str] = None,
        template: Optional[str] = None,
        min_score: Optional[int] = None,
        limit: int = 10,
    ) -> List[ResumeRecord]: ...

    async def duplicate_resume(self, resume_id: str) -> ResumeRecord: ...
