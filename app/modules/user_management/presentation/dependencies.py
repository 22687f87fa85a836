# 📄 File: app/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands the LINE sign-in routes a ready-to-use LINE client built from the app settings,
# so tests can swap it for a fake one.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependency providing the OAuth provider for the LINE bridge.
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, app.modules.user_management.infrastructure.external
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.auth, tests (dependency_overrides)

from fastapi import Depends

from app.modules.user_management.infrastructure.external.oauth_providers import (
    LineOAuthProvider,
    OAuthProvider,
)
from app.shared.config.settings import Settings, get_settings


def get_line_provider(settings: Settings = Depends(get_settings)) -> OAuthProvider:
    return LineOAuthProvider.from_settings(settings)
