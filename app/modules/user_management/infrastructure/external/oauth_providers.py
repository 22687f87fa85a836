# 📄 File: app/modules/user_management/infrastructure/external/oauth_providers.py
# 🧭 Purpose (Layman Explanation):
# This file handles "Sign in with LINE": it trades the one-time code LINE gives the browser
# for real login tokens, then asks LINE who the person is.
#
# 🧪 Purpose (Technical Summary):
# OAuth provider integration for LINE Login v2.1, implementing the authorization-code
# exchange and profile fetch as two strictly ordered calls, with profile normalization.
#
# 🔗 Dependencies:
# - httpx for OAuth API calls
# - app.shared.config.settings (LINE channel configuration)
# - app.modules.user_management.domain.models.oauth (exchange result models)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.auth (LINE callback and URL routes)

"""
OAuth Providers Service

This module provides the LINE Login integration used by the web client.

Features:
- Authorization URL generation
- Authorization code exchange (single attempt, no retry)
- Profile retrieval with the issued access token
- User data normalization to a fixed set of fields
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional
from urllib.parse import urlencode

import httpx

from app.modules.user_management.domain.models.oauth import OAuthExchangeResult, OAuthUserInfo
from app.shared.config.settings import Settings
from app.shared.core.exceptions import ConfigurationError, ExternalServiceError

logger = logging.getLogger(__name__)


class OAuthProvider(ABC):
    """Abstract base class for OAuth providers."""

    name: str = "oauth"

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether client credentials are available."""
        pass

    @abstractmethod
    def get_authorization_url(self, state: str, redirect_uri: str) -> str:
        """Get the authorization URL for OAuth flow."""
        pass

    @abstractmethod
    async def exchange_code_for_token(self, code: str, redirect_uri: str) -> Dict:
        """Exchange authorization code for access token."""
        pass

    @abstractmethod
    async def get_user_info(self, access_token: str) -> Dict:
        """Get user information using access token."""
        pass

    @abstractmethod
    def normalize_user_data(self, provider_data: Dict) -> OAuthUserInfo:
        """Normalize provider-specific user data to standard format."""
        pass

    async def handle_oauth_callback(self, code: str, redirect_uri: str) -> OAuthExchangeResult:
        """
        Exchange the code and fetch the profile.

        The profile call is only made after a successful exchange, since it
        needs the access token from it.

        Raises:
            ConfigurationError: If client credentials are missing
            ExternalServiceError: If either upstream call fails
        """
        if not self.is_configured:
            raise ConfigurationError(f"{self.name.upper()} credentials not configured")

        token_data = await self.exchange_code_for_token(code, redirect_uri)

        access_token = token_data.get("access_token")
        if not access_token:
            raise ExternalServiceError(
                f"No access token received from {self.name.upper()}", service=self.name
            )

        profile = await self.get_user_info(access_token)
        user_info = self.normalize_user_data(profile)

        logger.info(f"Successfully handled OAuth callback for {self.name}")
        return OAuthExchangeResult(
            access_token=access_token,
            id_token=token_data.get("id_token"),
            user_info=user_info,
        )


class LineOAuthProvider(OAuthProvider):
    """
    LINE Login provider implementation.

    Uses the LINE Login v2.1 token endpoint and the v2 profile endpoint.
    An HTTP transport may be injected; otherwise httpx's default is used.
    """

    name = "line"

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        auth_url: str = "https://access.line.me/oauth2/v2.1/authorize",
        token_url: str = "https://api.line.me/oauth2/v2.1/token",
        profile_url: str = "https://api.line.me/v2/profile",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.auth_url = auth_url
        self.token_url = token_url
        self.profile_url = profile_url
        self._transport = transport

        # Scopes needed for profile and ID token
        self.scopes = ["profile", "openid"]

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "LineOAuthProvider":
        return cls(
            client_id=settings.LINE_CHANNEL_ID,
            client_secret=settings.LINE_CHANNEL_SECRET,
            auth_url=settings.LINE_AUTHORIZE_URL,
            token_url=settings.LINE_TOKEN_URL,
            profile_url=settings.LINE_PROFILE_URL,
            transport=transport,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport)

    def get_authorization_url(self, state: str, redirect_uri: str) -> str:
        """
        Generate LINE Login authorization URL.

        Args:
            state: State parameter for CSRF protection
            redirect_uri: Callback URL registered on the LINE channel

        Returns:
            str: Authorization URL for LINE Login
        """
        if not self.client_id:
            raise ConfigurationError("LINE credentials not configured", setting="LINE_CHANNEL_ID")

        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": redirect_uri,
            "state": state,
            "scope": " ".join(self.scopes),
        }

        logger.debug("Generated LINE authorization URL")
        return f"{self.auth_url}?{urlencode(params)}"

    async def exchange_code_for_token(self, code: str, redirect_uri: str) -> Dict:
        """
        Exchange authorization code for LINE tokens.

        Args:
            code: Authorization code from LINE
            redirect_uri: Redirect URI used in the authorization request

        Returns:
            Dict: Token response (access_token, id_token, ...)
        """
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": redirect_uri,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }

        async with self._client() as client:
            response = await client.post(self.token_url, data=data)

        if response.is_error:
            logger.error(f"LINE token exchange error: {response.text}")
            raise ExternalServiceError(
                f"Failed to exchange code for token: {response.status_code}",
                service=self.name,
                service_status=response.status_code,
            )

        logger.debug("Successfully exchanged LINE authorization code for token")
        return response.json()

    async def get_user_info(self, access_token: str) -> Dict:
        """
        Get the LINE profile of the token's owner.

        Args:
            access_token: LINE access token

        Returns:
            Dict: Raw profile response
        """
        headers = {"Authorization": f"Bearer {access_token}"}

        async with self._client() as client:
            response = await client.get(self.profile_url, headers=headers)

        if response.is_error:
            logger.error(f"LINE profile fetch error: {response.status_code} {response.text}")
            raise ExternalServiceError(
                "Failed to fetch LINE user profile",
                service=self.name,
                service_status=response.status_code,
            )

        profile = response.json()
        logger.debug(f"Retrieved LINE profile for: {profile.get('userId')}")
        return profile

    def normalize_user_data(self, provider_data: Dict) -> OAuthUserInfo:
        """
        Normalize LINE profile data, keeping only the four known fields.

        Args:
            provider_data: Raw profile from LINE

        Returns:
            OAuthUserInfo: Normalized profile
        """
        return OAuthUserInfo(
            user_id=provider_data.get("userId"),
            display_name=provider_data.get("displayName"),
            picture_url=provider_data.get("pictureUrl"),
            status_message=provider_data.get("statusMessage"),
        )
