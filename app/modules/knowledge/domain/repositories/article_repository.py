# 📄 File: app/modules/knowledge/domain/repositories/article_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for looking up a published knowledge article without saying which database is used
# 🧪 Purpose (Technical Summary):
# Repository interface for read-only ArticleSummary access following the Repository pattern
# 🔗 Dependencies:
# Domain models (ArticleSummary), typing, abc
# 🔄 Connected Modules / Calls From:
# share_service.py, infrastructure implementations, presentation dependencies

from abc import ABC, abstractmethod
from typing import Optional

from ..models.article import ArticleSummary


class ArticleRepository(ABC):
    """
    Repository interface for knowledge article lookups.

    Implementations return ``None`` when no published article matches
    and raise ``DataStoreError`` when the store cannot answer.
    """

    @abstractmethod
    def get_published_summary(self, article_id: str) -> Optional[ArticleSummary]:
        """
        Get the share summary of a published article.

        Args:
            article_id: Article identifier as it appears in share links

        Returns:
            ArticleSummary if a published article matches, None otherwise

        Raises:
            DataStoreError: If the query fails
        """
        pass
