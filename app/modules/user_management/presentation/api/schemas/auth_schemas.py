# 📄 File: app/modules/user_management/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the shape of the messages the website sends when finishing a LINE sign-in
# and what it gets back.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the LINE OAuth bridge, using the camelCase
# field names the web client already sends.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - app.modules.user_management.domain.models.oauth (response payload)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.auth (LINE endpoints)

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LineCallbackRequest(BaseModel):
    """
    Body posted by the web client after LINE redirects back with a code.

    Both fields are optional at the schema level so that a missing value
    is reported as a missing parameter rather than a validation error.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "code": "abcd1234",
                "redirectUri": "https://baanpets.netlify.app/auth/line/callback",
            }
        },
    )

    code: Optional[str] = Field(None, description="Authorization code from LINE")
    redirect_uri: Optional[str] = Field(
        None,
        alias="redirectUri",
        description="Redirect URI used in the authorization request",
    )


class LineAuthorizationUrlResponse(BaseModel):
    """LINE Login authorization URL for the web client to redirect to."""

    url: str

