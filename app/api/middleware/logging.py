# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# This file keeps a short diary of every request made to the service, recording what was asked for,
# how long it took to respond, and whether something went wrong.
# 🧪 Purpose (Technical Summary):
# Request logging middleware that assigns a correlation id, exposes it to the logging
# context, and emits one structured record per request with timing information.
# 🔗 Dependencies:
# FastAPI, starlette, logging, time, uuid, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import request_id_var

logger = logging.getLogger(__name__)

EXCLUDED_PATHS = {"/api/v1/health", "/favicon.ico"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring.

    Query strings are never logged since the OAuth bridge and share
    links carry identifiers and codes in them.
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold
        self.request_id_header = "X-Request-ID"

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(self.request_id_header) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        # The context var stays set until the access line below is written
        try:
            start_time = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.exception(
                    f"HTTP {request.method} {request.url.path} failed after {duration_ms:.2f}ms"
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            response.headers[self.request_id_header] = request_id

            if request.url.path not in EXCLUDED_PATHS:
                level = logging.WARNING if duration_ms / 1000 > self.slow_request_threshold else logging.INFO
                logger.log(
                    level,
                    f"HTTP {request.method} {request.url.path} - {response.status_code} - {duration_ms:.2f}ms",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "status_code": response.status_code,
                        "duration_ms": round(duration_ms, 2),
                    },
                )
            return response
        finally:
            request_id_var.reset(token)
