# 📄 File: app/modules/knowledge/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands the share routes the tools they need (the article lookup and the preview builder),
# so tests can swap them for fakes.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers wiring the process-wide Supabase client into the
# ArticleRepository and ShareService for each request.
# 🔗 Dependencies:
# FastAPI, app.shared.config (settings, SupabaseManager), knowledge domain/infrastructure
# 🔄 Connected Modules / Calls From:
# app.modules.knowledge.presentation.api.v1.share, tests (dependency_overrides)

import logging

from fastapi import Depends

from app.modules.knowledge.domain.models.article import ArticleSummary
from app.modules.knowledge.domain.repositories.article_repository import ArticleRepository
from app.modules.knowledge.domain.services.share_service import ShareService
from app.modules.knowledge.infrastructure.database.article_repository_impl import (
    SupabaseArticleRepository,
)
from app.shared.config.settings import Settings, get_settings
from app.shared.config.supabase import SupabaseManager, get_supabase_manager
from app.shared.core.exceptions import DataStoreError, PetskubException

logger = logging.getLogger(__name__)


class UnavailableArticleRepository(ArticleRepository):
    """Stands in when the Supabase client cannot be built; every lookup fails."""

    def __init__(self, reason: str):
        self._reason = reason

    def get_published_summary(self, article_id: str) -> ArticleSummary:
        raise DataStoreError(self._reason)


def get_article_repository(
    settings: Settings = Depends(get_settings),
    manager: SupabaseManager = Depends(get_supabase_manager),
) -> ArticleRepository:
    try:
        client = manager.client
    except PetskubException as e:
        logger.error(f"Article store unavailable: {e.message}")
        return UnavailableArticleRepository(e.message)
    return SupabaseArticleRepository(client, table=settings.SUPABASE_ARTICLES_TABLE)


def get_share_service(
    repository: ArticleRepository = Depends(get_article_repository),
    settings: Settings = Depends(get_settings),
) -> ShareService:
    return ShareService(repository, settings.site_url)
