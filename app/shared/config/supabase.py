"""
Supabase client configuration for the knowledge article store.
Handles lazy Supabase initialization with error handling and per-process reuse.
"""

import logging
from functools import lru_cache
from typing import Optional

from supabase import Client, ClientOptions, create_client

from app.shared.core.exceptions import ConfigurationError, DataStoreError
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


class SupabaseManager:
    """
    Supabase client manager with lazy connection handling.

    The client is built on first use and then reused for every request
    handled by this process. It never carries request-specific state.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._client: Optional[Client] = None
        self.settings = settings or get_settings()

    @property
    def is_configured(self) -> bool:
        return self.settings.supabase_configured

    @property
    def client(self) -> Client:
        """Get or create Supabase client with lazy initialization."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self) -> Client:
        """Create Supabase client with server-side options."""
        if not self.is_configured:
            raise ConfigurationError(
                "Supabase URL or key is not configured",
                setting="SUPABASE_URL",
            )

        try:
            client_options = ClientOptions(
                schema="public",
                headers={
                    "User-Agent": f"PetskubShare/{self.settings.APP_VERSION}",
                },
                auto_refresh_token=False,
                persist_session=False,
            )

            client = create_client(
                self.settings.SUPABASE_URL,
                self.settings.supabase_key,
                options=client_options,
            )

            logger.info("Supabase client initialized successfully")
            return client

        except Exception as e:
            logger.error(f"Failed to initialize Supabase client: {e}")
            raise DataStoreError(f"Supabase initialization failed: {e}") from e

    def close(self) -> None:
        """Drop the cached client."""
        if self._client:
            self._client = None
            logger.info("Supabase client released")


@lru_cache()
def get_supabase_manager() -> SupabaseManager:
    """
    Get cached Supabase manager instance.

    Returns:
        SupabaseManager: Singleton Supabase manager
    """
    return SupabaseManager()


def cleanup_supabase() -> None:
    """Release the Supabase client on application shutdown."""
    get_supabase_manager().close()
    logger.info("Supabase cleanup completed")
