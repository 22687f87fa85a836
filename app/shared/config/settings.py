# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and hands them to the share pages and the LINE sign-in bridge.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and the fallback chains used by the Netlify-era deployment
# (VITE_* names are still accepted).
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - app.shared.config.supabase (data-store client)
# - app.modules.knowledge (site origin for canonical URLs)
# - app.modules.user_management (LINE channel credentials)

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SITE_URL = "https://baanpets.netlify.app"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Petskub Share API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Social share pages and LINE sign-in bridge for Petskub",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log format (json or text)")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=False, description="Auto-reload on changes")

    # =========================================================================
    # SUPABASE (DATA STORE)
    # =========================================================================

    SUPABASE_URL: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_URL", "VITE_SUPABASE_URL"),
        description="Supabase project URL",
    )
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = Field(None, description="Supabase service role key")
    SUPABASE_ANON_KEY: Optional[str] = Field(None, description="Supabase anonymous key")
    SUPABASE_PUBLISHABLE_KEY: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("SUPABASE_PUBLISHABLE_KEY", "VITE_SUPABASE_PUBLISHABLE_KEY"),
        description="Supabase publishable key",
    )
    SUPABASE_ARTICLES_TABLE: str = Field(
        default="knowledge_articles",
        description="Table holding knowledge articles"
    )

    # =========================================================================
    # SITE
    # =========================================================================

    SITE_URL: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("SITE_URL", "VITE_SITE_URL"),
        description="Public origin of the web app",
    )
    DEPLOY_URL: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("DEPLOY_URL", "URL"),
        description="Origin reported by the hosting platform",
    )

    # =========================================================================
    # LINE LOGIN
    # =========================================================================

    LINE_CHANNEL_ID: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("LINE_CHANNEL_ID", "VITE_LINE_CHANNEL_ID"),
        description="LINE Login channel ID",
    )
    LINE_CHANNEL_SECRET: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("LINE_CHANNEL_SECRET", "VITE_LINE_CHANNEL_SECRET"),
        description="LINE Login channel secret",
    )
    LINE_AUTHORIZE_URL: str = Field(
        default="https://access.line.me/oauth2/v2.1/authorize",
        description="LINE authorization endpoint"
    )
    LINE_TOKEN_URL: str = Field(
        default="https://api.line.me/oauth2/v2.1/token",
        description="LINE token endpoint"
    )
    LINE_PROFILE_URL: str = Field(
        default="https://api.line.me/v2/profile",
        description="LINE profile endpoint"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def supabase_key(self) -> str:
        """Data-store key, preferring the service role key."""
        return (
            self.SUPABASE_SERVICE_ROLE_KEY
            or self.SUPABASE_ANON_KEY
            or self.SUPABASE_PUBLISHABLE_KEY
            or ""
        )

    @property
    def supabase_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.supabase_key)

    @property
    def site_url(self) -> str:
        """Public site origin without a trailing slash."""
        site = (self.SITE_URL or self.DEPLOY_URL or "").rstrip("/")
        return site or DEFAULT_SITE_URL

    @property
    def line_configured(self) -> bool:
        return bool(self.LINE_CHANNEL_ID and self.LINE_CHANNEL_SECRET)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
