# 📄 File: app/modules/user_management/domain/models/oauth.py
# 🧭 Purpose (Layman Explanation):
# Describes what we keep from a LINE sign-in: the tokens LINE gave us and a short,
# tidy version of the person's LINE profile.
# 🧪 Purpose (Technical Summary):
# Domain models for the request-scoped OAuth exchange result. The normalized profile
# carries exactly four fields; unrecognized provider fields are dropped.
# 🔗 Dependencies:
# pydantic, typing
# 🔄 Connected Modules / Calls From:
# oauth_providers.py, auth.py (LINE callback route)

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OAuthUserInfo(BaseModel):
    """Normalized provider profile as sent to the web client."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: Optional[str] = Field(None, alias="userId")
    display_name: Optional[str] = Field(None, alias="displayName")
    picture_url: Optional[str] = Field(None, alias="pictureUrl")
    status_message: Optional[str] = Field(None, alias="statusMessage")


class OAuthExchangeResult(BaseModel):
    """Tokens from the code exchange plus the normalized profile."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str
    id_token: Optional[str] = None
    user_info: OAuthUserInfo = Field(alias="userInfo")
