"""FastAPI app entrypoint for the Resume Builder web API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import asdict
from pathlib import Path
from time import perf_counter
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from .. import __version__
from ..config import AppConfig, build_config, configure_logging, load_raw_config
from ..config_validator import Severity, has_errors, validate_config
from .api.v1.router import api_v1_router
from .errors import APIError, api_error_handler, internal_error_handler, validation_error_handler
from .sqlite_store import SQLiteResumeStore
from .store import InMemoryResumeStore
from .store_protocol import ResumeStore

logger = logging.getLogger("resume_builder.web.api")


def _resolve_config(config: Optional[AppConfig]) -> AppConfig:
    raw = asdict(config) if config is not None else load_raw_config()
    issues = validate_config(raw)
    for issue in issues:
        if issue.severity == Severity.WARNING:
            logger.warning("config_warning field=%s message=%s", issue.field, issue.message)
    if has_errors(issues):
        summary = "; ".join(f"{e.field}: {e.message}" for e in issues if e.severity == Severity.ERROR)
        raise ValueError(f"Invalid configuration: {summary}")
    return config if config is not None else build_config(raw)


def build_store(config: AppConfig) -> ResumeStore:
    """Select the repository implementation named by *config.store*."""
    if config.store == "sqlite":
        return SQLiteResumeStore(Path(config.db_path).resolve())
    state_file = Path(config.state_file).resolve() if config.state_file else None
    return InMemoryResumeStore(state_file=state_file)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = _resolve_config(config)
    store = build_store(config)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        await store.start()
        logger.info("store_started backend=%s", store.backend_name)
        try:
            yield
        finally:
            await store.stop()

    app = FastAPI(title="Resume Builder API", version=__version__, lifespan=lifespan)
    app.state.resume_store = store
    app.state.config = config
    app.include_router(api_v1_router)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = (perf_counter() - start) * 1000
            path_params = request.scope.get("path_params", {})
            logger.info(
                "api_request method=%s path=%s status=%s duration_ms=%.2f resume_id=%s store=%s",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
                path_params.get("resume_id", "-"),
                store.backend_name,
            )

    @app.get("/healthz", tags=["system"])
    async def healthz() -> dict:
        return {"status": "ok", "store": store.backend_name}

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
    return app


def main(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run development API server."""
    import uvicorn

    raw = load_raw_config()
    configure_logging(str(raw.get("log_level") or "INFO"))
    uvicorn.run("resume_builder.web.app:create_app", factory=True, host=host, port=port)
