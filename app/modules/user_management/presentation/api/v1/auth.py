# 📄 File: app/modules/user_management/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints the website calls to sign people in with LINE:
# one to get the LINE sign-in link, and one to finish the sign-in after LINE sends them back.
#
# 🧪 Purpose (Technical Summary):
# FastAPI endpoints for the LINE OAuth token bridge: CORS preflight, method guarding,
# authorization-code exchange with profile normalization, and authorization URL generation.
# Every response allows any origin since the browser client runs on another host.
#
# 🔗 Dependencies:
# - FastAPI router and responses
# - app.modules.user_management.infrastructure.external.oauth_providers
# - app.modules.user_management.presentation.api.schemas.auth_schemas
# - app.shared.core.exceptions
#
# 🔄 Connected Modules / Calls From:
# - app.main (router inclusion)
# - Web client LINE callback page

"""
Authentication API Endpoints

Endpoints:
- OPTIONS /api/line-oauth-callback: CORS preflight
- POST /api/line-oauth-callback: exchange code for tokens and profile
- GET /api/line-oauth-url: LINE authorization URL
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from app.modules.user_management.infrastructure.external.oauth_providers import OAuthProvider
from app.modules.user_management.presentation.api.schemas.auth_schemas import (
    LineAuthorizationUrlResponse,
    LineCallbackRequest,
)
from app.modules.user_management.presentation.dependencies import get_line_provider
from app.shared.core.exceptions import (
    ConfigurationError,
    ExternalServiceError,
    MissingParameterError,
)

logger = logging.getLogger(__name__)

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}
PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "Content-Type",
}

GENERIC_ERROR_MESSAGE = "An error occurred"

auth_router = APIRouter(prefix="/api", tags=["Auth"])


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message or GENERIC_ERROR_MESSAGE},
        headers=CORS_HEADERS,
    )


@auth_router.options("/line-oauth-callback", include_in_schema=False)
async def line_oauth_callback_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK, headers=PREFLIGHT_HEADERS)


@auth_router.api_route(
    "/line-oauth-callback",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT"],
    include_in_schema=False,
)
async def line_oauth_callback_method_not_allowed() -> PlainTextResponse:
    return PlainTextResponse(
        "Method not allowed",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={**CORS_HEADERS, "Allow": "POST, OPTIONS"},
    )


@auth_router.post(
    "/line-oauth-callback",
    response_model=None,
    summary="Complete LINE sign-in",
    description="Exchange a LINE authorization code for tokens and the user's LINE profile",
    responses={
        200: {"description": "Tokens and normalized profile"},
        400: {"description": "Missing parameters or LINE rejected the request"},
        500: {"description": "LINE credentials not configured"},
    },
)
async def line_oauth_callback(
    request: Request,
    provider: OAuthProvider = Depends(get_line_provider),
) -> Response:
    """
    Exchange the authorization code with LINE and return the profile.

    Missing parameters and missing credentials are answered before any
    call to LINE. A failed token exchange ends the request; the profile
    endpoint is not called.
    """
    try:
        body = await request.json()
        callback = LineCallbackRequest.model_validate(body)

        if not callback.code or not callback.redirect_uri:
            raise MissingParameterError(
                "Missing code or redirectUri", parameters=["code", "redirectUri"]
            )

        result = await provider.handle_oauth_callback(callback.code, callback.redirect_uri)

    except MissingParameterError as e:
        return PlainTextResponse(e.message, status_code=e.status_code, headers=CORS_HEADERS)
    except ConfigurationError as e:
        logger.error(e.message)
        return PlainTextResponse(e.message, status_code=e.status_code, headers=CORS_HEADERS)
    except ExternalServiceError as e:
        logger.error(f"Error in LINE OAuth callback: {e.message}")
        return _error_response(e.message)
    except Exception as e:
        logger.exception("Unexpected error in LINE OAuth callback")
        return _error_response(str(e))

    return JSONResponse(content=result.model_dump(by_alias=True), headers=CORS_HEADERS)


@auth_router.get(
    "/line-oauth-url",
    response_model=LineAuthorizationUrlResponse,
    summary="LINE sign-in URL",
    description="Build the LINE Login authorization URL for the given redirect URI and state",
)
async def line_authorization_url(
    redirect_uri: Optional[str] = Query(None, alias="redirectUri"),
    state: Optional[str] = Query(None),
    provider: OAuthProvider = Depends(get_line_provider),
) -> Response:
    if not redirect_uri or not state:
        return PlainTextResponse(
            "Missing redirectUri or state",
            status_code=status.HTTP_400_BAD_REQUEST,
            headers=CORS_HEADERS,
        )

    try:
        url = provider.get_authorization_url(state, redirect_uri)
    except ConfigurationError as e:
        logger.error(e.message)
        return PlainTextResponse(e.message, status_code=e.status_code, headers=CORS_HEADERS)

    return JSONResponse(
        content=LineAuthorizationUrlResponse(url=url).model_dump(),
        headers=CORS_HEADERS,
    )
