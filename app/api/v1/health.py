# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# This file provides health check endpoints that tell the hosting platform whether the service
# is running and whether it has what it needs (article database, LINE credentials).
# 🧪 Purpose (Technical Summary):
# Liveness and readiness endpoints. Readiness reports configuration of the Supabase store
# and the LINE channel without performing outbound calls.
# 🔗 Dependencies:
# FastAPI, app.shared.config (settings, SupabaseManager), datetime
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, load balancers, hosting platform probes

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.shared.config.settings import Settings, get_settings
from app.shared.config.supabase import SupabaseManager, get_supabase_manager

logger = logging.getLogger(__name__)

health_router = APIRouter()

SERVICE_NAME = "petskub-share-api"


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Basic health check endpoint for load balancers and monitoring")
async def health_check(settings: Settings = Depends(get_settings)) -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": SERVICE_NAME,
            "version": settings.APP_VERSION,
        }
    )


@health_router.get("/health/ready",
                   summary="Readiness Check",
                   description="Reports whether the article store and LINE Login are configured")
async def readiness_check(
    settings: Settings = Depends(get_settings),
    manager: SupabaseManager = Depends(get_supabase_manager),
) -> JSONResponse:
    """
    Readiness probe.

    The share page degrades to a fallback without the article store, so
    a missing store marks the service not ready. Missing LINE credentials
    are reported but only affect sign-in.
    """
    checks = {
        "supabase": "configured" if manager.is_configured else "missing",
        "line_login": "configured" if settings.line_configured else "missing",
    }
    ready = manager.is_configured

    if not ready:
        logger.warning(f"Readiness check failed: {checks}")

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": checks,
        }
    )
