"""FastAPI application exposing the analysis pipeline over HTTP."""

from __future__ import annotations

import asyncio
import json
from datetime import UTC, datetime
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import AnalyzerSettings
from ..logging import get_logger
from ..models import AnalysisReport
from ..orchestrator import AnalysisError, Orchestrator, format_timestamp
from .auth import (
    AuthenticationError,
    Identity,
    TokenVerifier,
    authenticate,
    authenticate_optional,
)

logger = get_logger("service")


class AnalyzeRequest(BaseModel):
    codebase: Any = None


class RootResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str


def _is_missing(codebase: Any) -> bool:
    # Empty lists and objects are valid submissions; only absent or falsy scalars are rejected.
    if codebase is None or codebase is False:
        return True
    if isinstance(codebase, (int, float)) and codebase == 0:
        return True
    return codebase == ""


def _payload_too_large(limit: int) -> JSONResponse:
    return JSONResponse(
        status_code=413,
        content={
            "success": False,
            "error": "Payload too large",
            "message": f"Request body exceeds {limit} bytes",
        },
    )


async def _read_body(request: Request, limit: int) -> Optional[bytes]:
    """Read the request body, or return None once it grows past *limit* bytes."""
    chunks: List[bytes] = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > limit:
            return None
        chunks.append(chunk)
    return b"".join(chunks)


def _parse_codebase(raw: bytes) -> Any:
    # Bodies that are empty, not JSON, or not a JSON object carry no codebase.
    if not raw.strip():
        return None
    try:
        data = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    return AnalyzeRequest.model_validate(data).codebase


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] | None = None,
    settings: AnalyzerSettings | None = None,
    verifier: TokenVerifier | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing the analyze endpoint."""

    settings = settings or AnalyzerSettings()
    service_settings = settings.service

    def _default_orchestrator() -> Orchestrator:
        return Orchestrator(settings=settings)

    factory = orchestrator_factory or _default_orchestrator

    app = FastAPI(title="Codebase Analyzer Service", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=service_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def limit_payload_size(request: Request, call_next: Callable[..., Any]) -> Any:
        length = request.headers.get("content-length")
        if length is not None and length.isdigit():
            if int(length) > service_settings.max_payload_bytes:
                return _payload_too_large(service_settings.max_payload_bytes)
        return await call_next(request)

    async def get_orchestrator() -> Orchestrator:
        return factory()

    async def get_identity(
        authorization: Optional[str] = Header(default=None),
    ) -> Optional[Identity]:
        if verifier is None:
            if service_settings.require_auth:
                raise AuthenticationError(
                    "Authentication failed", "No token verifier is configured"
                )
            return None

        def _verify() -> Optional[Identity]:
            if service_settings.require_auth:
                return authenticate(authorization, verifier)
            return authenticate_optional(authorization, verifier)

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, _verify)

    @app.get("/", response_model=RootResponse)
    async def root() -> RootResponse:
        return RootResponse(message="Codebase Analyzer API is running")

    @app.get("/api/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(
            status="healthy", timestamp=format_timestamp(datetime.now(UTC))
        )

    @app.post("/api/analyze")
    async def analyze_codebase(
        request: Request,
        orchestrator: Orchestrator = Depends(get_orchestrator),
        identity: Optional[Identity] = Depends(get_identity),
    ) -> JSONResponse:
        # Chunked bodies carry no Content-Length, so the limit is enforced while reading.
        raw = await _read_body(request, service_settings.max_payload_bytes)
        if raw is None:
            return _payload_too_large(service_settings.max_payload_bytes)

        codebase = _parse_codebase(raw)
        if _is_missing(codebase):
            return JSONResponse(
                status_code=400,
                content={
                    "error": "Codebase is required",
                    "message": "Please provide a codebase in the request body",
                },
            )

        def _run_analysis() -> AnalysisReport:
            return orchestrator.analyze(codebase)

        loop = asyncio.get_running_loop()
        report = await loop.run_in_executor(None, _run_analysis)

        content: Dict[str, Any] = {"success": True, "data": report.to_dict()}
        if identity is not None:
            content["user"] = identity.to_dict()
        return JSONResponse(content=content)

    @app.exception_handler(AnalysisError)
    async def analysis_error_handler(_: Any, exc: AnalysisError) -> JSONResponse:
        logger.error("Analysis error: %s", exc, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "Internal server error",
                "message": str(exc),
            },
        )

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(
        _: Any, exc: AuthenticationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content={"success": False, "error": exc.error, "message": exc.message},
        )

    return app


def run_service(
    settings: AnalyzerSettings | None = None,
    *,
    host: str | None = None,
    port: int | None = None,
    verifier: TokenVerifier | None = None,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    settings = settings or AnalyzerSettings()
    app = create_app(settings=settings, verifier=verifier)
    uvicorn.run(
        app,
        host=host or settings.service.host,
        port=port or settings.service.port,
    )
