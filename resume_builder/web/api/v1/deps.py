"""Dependency providers for v1 API."""

from __future__ import annotations

from fastapi import Request

from ...store_protocol import ResumeStore


def get_store(request: Request) -> ResumeStore:
    """Access shared resume store from app state."""
    return request.app.state.resume_store
