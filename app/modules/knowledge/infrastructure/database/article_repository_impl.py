# 📄 File: app/modules/knowledge/infrastructure/database/article_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Looks up a published knowledge article in the Supabase database so its preview card can be built.
#
# 🧪 Purpose (Technical Summary):
# Concrete ArticleRepository backed by the Supabase PostgREST client. Runs a single
# filtered select per call and maps the row to the ArticleSummary domain model.
#
# 🔗 Dependencies:
# - supabase (Client), postgrest (APIError), httpx (transport errors)
# - app.modules.knowledge.domain (interface and models)
# - app.shared.core.exceptions (DataStoreError)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.knowledge.presentation.dependencies (repository wiring)

import logging
from typing import Optional

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import Client

from app.modules.knowledge.domain.models.article import ARTICLE_SUMMARY_COLUMNS, ArticleSummary
from app.modules.knowledge.domain.repositories.article_repository import ArticleRepository
from app.shared.core.exceptions import DataStoreError

logger = logging.getLogger(__name__)


class SupabaseArticleRepository(ArticleRepository):
    """
    Supabase implementation of the ArticleRepository interface.

    The client is shared across requests; nothing request-specific is
    stored on the repository.
    """

    def __init__(self, client: Client, table: str = "knowledge_articles"):
        """
        Initialize the article repository.

        Args:
            client: Supabase client owned by SupabaseManager
            table: Name of the articles table
        """
        self._client = client
        self._table = table

    def get_published_summary(self, article_id: str) -> Optional[ArticleSummary]:
        try:
            response = (
                self._client.table(self._table)
                .select(",".join(ARTICLE_SUMMARY_COLUMNS))
                .eq("id", article_id)
                .eq("published", True)
                .limit(1)
                .execute()
            )
        except APIError as e:
            logger.warning(f"Article query rejected for id={article_id!r}: {e.message}")
            raise DataStoreError(f"Article query failed: {e.message}", table=self._table) from e
        except httpx.HTTPError as e:
            logger.error(f"Article store unreachable: {e}")
            raise DataStoreError(f"Article store unreachable: {e}", table=self._table) from e
        except Exception as e:
            logger.exception(f"Unexpected article store error for id={article_id!r}")
            raise DataStoreError(f"Article query failed: {e}", table=self._table) from e

        rows = response.data or []
        if not rows:
            logger.debug(f"No published article for id={article_id!r}")
            return None

        try:
            return ArticleSummary.model_validate(rows[0])
        except ValidationError as e:
            logger.error(f"Malformed article row for id={article_id!r}: {e.error_count()} invalid field(s)")
            raise DataStoreError("Article row does not match the expected shape", table=self._table) from e
