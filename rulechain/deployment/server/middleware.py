"""
rulechain/deployment/server/middleware.py
=========================================
Cross-cutting HTTP concerns: CORS, request timing, and mapping
RuleChain exceptions onto HTTP status codes.
"""
from __future__ import annotations
import time
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rulechain.core.exceptions import InvalidFactError, InvalidRuleError, KnowledgeBaseError, RuleChainError

logger = logging.getLogger(__name__)

# Most specific first; the RuleChainError root catches anything else.
STATUS_BY_ERROR = (
    (InvalidRuleError,   422),
    (InvalidFactError,   422),
    (KnowledgeBaseError, 404),
    (RuleChainError,     400),
)


def status_for(exc: RuleChainError) -> int:
    for error_type, status in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


def setup_middleware(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RuleChainError)
    async def rulechain_error(request: Request, exc: RuleChainError):
        status = status_for(exc)
        logger.info(f"{request.method} {request.url.path} rejected ({status}): {exc}")
        return JSONResponse(
            status_code=status,
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    @app.middleware("http")
    async def time_requests(request: Request, call_next):
        t0 = time.perf_counter()
        response = await call_next(request)
        ms = (time.perf_counter() - t0) * 1000
        logger.info(f"{request.method} {request.url.path} → {response.status_code} ({ms:.1f}ms)")
        response.headers["X-Process-Time-Ms"] = f"{ms:.1f}"
        return response
