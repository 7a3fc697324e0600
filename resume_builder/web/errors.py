"""API error helpers and exception handlers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("resume_builder.web.api")


class APIError(Exception):
    """Application-level API error with status/code mapping."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            },
        }


def resume_not_found(resume_id: str) -> APIError:
    return APIError(404, "RESUME_NOT_FOUND", f"Resume '{resume_id}' not found")


async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
    """Render contract-compliant error response."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI validation errors to API contract shape."""
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": {
                "code": "BAD_REQUEST",
                "message": "Invalid request payload",
                "details": {"errors": jsonable_encoder(exc.errors())},
            },
        },
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures (storage I/O and the like) and return a 500."""
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    err = APIError(500, "INTERNAL_ERROR", "Internal server error", {"reason": str(exc) or type(exc).__name__})
    return JSONResponse(status_code=err.status_code, content=err.to_dict())
