"""
Blog List API

FastAPI backend storing blogs and the users who own them.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bloglist.config import get_settings
from bloglist.errors import BlogListError
from bloglist.middleware import (
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
)
from bloglist.routers import blogs, users
from bloglist.services.storage import get_blog_store, get_user_store

logger = logging.getLogger(__name__)

settings = get_settings()

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    storage = get_settings().data_dir or "memory"
    logger.info("Blog List API starting (storage: %s)", storage)
    yield


app = FastAPI(
    title="Blog List API",
    description="Blogs with like counts, and the users who own them",
    version=VERSION,
    lifespan=lifespan,
)

# Last added runs first: the access log sees the final headers
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestContextMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
)

# Routers
app.include_router(blogs.router, prefix="/api")
app.include_router(users.router, prefix="/api")


@app.exception_handler(BlogListError)
async def blog_list_error_handler(request: Request, exc: BlogListError) -> JSONResponse:
    """Turn domain errors into ``{"error", "kind", "field"}`` JSON responses."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(content=exc.to_dict(), status_code=exc.status_code)


def _run_health_checks() -> dict[str, Any]:
    """Run all health checks, returning the full response body."""
    checks = {
        "blogs": "ok" if get_blog_store().check() else "fail",
        "users": "ok" if get_user_store().check() else "fail",
    }
    failed = [k for k, v in checks.items() if v != "ok"]

    if failed:
        overall = "degraded"
        logger.warning("Health check degraded, failed: %s", ", ".join(failed))
    else:
        overall = "ok"

    return {
        "status": overall,
        "service": "bloglist-api",
        "version": VERSION,
        "environment": get_settings().environment,
        "checks": checks,
    }


@app.get("/api/health")
async def health_check() -> JSONResponse:
    """Health check verifying storage is usable."""
    return JSONResponse(content=_run_health_checks())
