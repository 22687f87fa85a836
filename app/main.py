# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the Petskub share and sign-in service, connects its parts
# together, and makes sure everything is ready to answer social crawlers and the website.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with logging setup, middleware, router
# registration, exception handlers, and process-wide resource cleanup.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings, app.shared.config.supabase
# - app.shared.utils.logging
# - Module routers (knowledge share pages, user_management LINE bridge)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Container entry point

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.v1.router import api_v1_router
from app.modules.knowledge.presentation.api.v1.share import router as share_router
from app.modules.user_management.presentation.api.v1.auth import auth_router
from app.shared.config.settings import get_settings
from app.shared.config.supabase import cleanup_supabase
from app.shared.core.exceptions import PetskubException
from app.shared.utils.logging import setup_logging

# Get application settings
settings = get_settings()

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    The Supabase client is created lazily on the first share request and
    released here on shutdown.
    """
    logger.info(f"{settings.APP_NAME} starting up ({settings.ENVIRONMENT})")
    if not settings.supabase_configured:
        logger.warning("Supabase is not configured; share pages will use fallback content")
    if not settings.line_configured:
        logger.warning("LINE credentials are not configured; LINE sign-in will fail")

    try:
        yield
    finally:
        logger.info(f"{settings.APP_NAME} shutting down...")
        cleanup_supabase()


def create_application() -> FastAPI:
    """
    Application factory function.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(RequestLoggingMiddleware)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    # Public paths the web client and crawlers already use
    app.include_router(share_router)
    app.include_router(auth_router)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(PetskubException)
    async def petskub_exception_handler(
        request: Request,
        exc: PetskubException
    ) -> JSONResponse:
        """Handle application exceptions that escape a route."""
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(getattr(request.state, "request_id", None)),
        )

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
