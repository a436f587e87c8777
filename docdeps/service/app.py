"""FastAPI application exposing the build-event hook over HTTP."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import BuildEnvironment, ConfigError
from ..hook import IncludeCheckHook
from ..models import StatusUpdate
from ..report.sinks import CollectingStatusSink


class BuildEventRequest(BaseModel):
    path: str
    base_ref: Optional[str] = None
    head_ref: Optional[str] = None
    deploy_url: Optional[str] = None
    mode: Optional[str] = None
    enabled: Optional[bool] = None
    modified_files: Optional[List[str]] = None


class StatusResponse(BaseModel):
    status: str
    title: Optional[str] = None
    summary: Optional[str] = None
    text: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_hook() -> IncludeCheckHook:
    return IncludeCheckHook(sink=CollectingStatusSink())


def create_app(
    hook_factory: Callable[[], IncludeCheckHook] = _default_hook,
) -> FastAPI:
    """Create the FastAPI application serving build events."""
    app = FastAPI(title="Documentation Include Dependency Check", version="1.0.0")

    async def get_hook() -> IncludeCheckHook:
        return hook_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/events/on-success", response_model=StatusResponse)
    async def on_success(
        payload: BuildEventRequest,
        hook: IncludeCheckHook = Depends(get_hook),
    ) -> StatusResponse:
        environment = BuildEnvironment(
            base_ref=payload.base_ref,
            head_ref=payload.head_ref,
            deploy_url=payload.deploy_url,
            enabled=payload.enabled,
            mode=payload.mode,
            modified_files=payload.modified_files,
        )

        def _run() -> Optional[StatusUpdate]:
            return hook.on_success(payload.path, environment)

        loop = asyncio.get_running_loop()
        update = await loop.run_in_executor(None, _run)

        if update is None:
            return StatusResponse(status="skipped")
        return StatusResponse(
            status="ok",
            title=update.title,
            summary=update.summary,
            text=update.text,
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    """Serve the build-event application with uvicorn."""
    uvicorn.run(create_app(), host=host, port=port)
