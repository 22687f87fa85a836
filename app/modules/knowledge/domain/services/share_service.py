# 📄 File: app/modules/knowledge/domain/services/share_service.py
# 🧭 Purpose (Layman Explanation):
# Decides what a shared article link should look like on social media: which title, description
# and picture to show, and which page on the website the visitor should land on.
#
# 🧪 Purpose (Technical Summary):
# Domain service resolving a SharePayload for an article id. Applies the ordered field
# fallback, canonical URL derivation, cache policy selection, and the degrade-to-fallback
# rule for missing articles or data-store failures. Also builds per-platform share links.
#
# 🔗 Dependencies:
# - app.modules.knowledge.domain (models, repository interface)
# - app.shared.utils.helpers (first_present, encode_uri_component)
# - app.shared.core.exceptions (DataStoreError)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.knowledge.presentation.api.v1.share (share routes)

import logging
from typing import Optional

from app.modules.knowledge.domain.models.article import (
    ArticleSummary,
    ShareResolution,
    SharePayload,
    ShareTargets,
)
from app.modules.knowledge.domain.repositories.article_repository import ArticleRepository
from app.shared.core.exceptions import DataStoreError
from app.shared.utils.helpers import encode_uri_component, first_present

logger = logging.getLogger(__name__)

FALLBACK_TITLE = "Petskub - บทความ"
FALLBACK_DESCRIPTION = (
    "อ่านบทความจากชุมชนคนรักแมว Petskub รวมเทคนิคและความรู้ในการดูแลน้องแมว"
)
FALLBACK_IMAGE = (
    "https://images.unsplash.com/photo-1543852786-1cf6624b9987"
    "?auto=format&fit=crop&w=1200&q=80"
)
FALLBACK_IMAGE_ALT = "Petskub Article"

FALLBACK_CACHE_CONTROL = "public, max-age=120, stale-while-revalidate=600"
ARTICLE_CACHE_CONTROL = "public, max-age=300, stale-while-revalidate=1200"

KNOWLEDGE_PATH = "/knowledge"
SHARE_PATH = "/share/article"


class ShareService:
    """
    Resolves share previews for knowledge articles.

    One instance may serve many requests; it only holds the repository
    and the site origin.
    """

    def __init__(self, repository: ArticleRepository, site_url: str):
        self._repository = repository
        self._site_url = site_url.rstrip("/")

    @property
    def site_url(self) -> str:
        return self._site_url

    def canonical_url(self, article_id: str, slug: Optional[str] = None) -> str:
        """Public article URL, preferring the slug over the encoded id."""
        if slug:
            return f"{self._site_url}{KNOWLEDGE_PATH}/{slug}"
        return f"{self._site_url}{KNOWLEDGE_PATH}/{encode_uri_component(article_id)}"

    def resolve(self, article_id: str) -> ShareResolution:
        """
        Build the share payload for ``article_id``.

        Never raises for a missing article or a store failure; both produce
        the fallback payload with the short cache policy.
        """
        try:
            article = self._repository.get_published_summary(article_id)
        except DataStoreError as e:
            logger.warning(f"Serving fallback share page for id={article_id!r}: {e.message}")
            article = None

        if article is None:
            return ShareResolution(
                payload=self._fallback_payload(article_id),
                cache_control=FALLBACK_CACHE_CONTROL,
                from_fallback=True,
            )

        return ShareResolution(
            payload=self._article_payload(article),
            cache_control=ARTICLE_CACHE_CONTROL,
        )

    def _fallback_payload(self, article_id: str) -> SharePayload:
        return SharePayload(
            title=FALLBACK_TITLE,
            description=FALLBACK_DESCRIPTION,
            image=FALLBACK_IMAGE,
            image_alt=FALLBACK_TITLE,
            article_url=self.canonical_url(article_id),
        )

    def _article_payload(self, article: ArticleSummary) -> SharePayload:
        title = first_present(
            (article.og_title, article.meta_title, article.title), FALLBACK_TITLE
        )
        description = first_present(
            (article.og_description, article.meta_description), FALLBACK_DESCRIPTION
        )
        image = first_present((article.og_image, article.image_url), FALLBACK_IMAGE)
        image_alt = first_present((article.image_alt, title), FALLBACK_IMAGE_ALT)

        return SharePayload(
            title=title,
            description=description,
            image=image,
            image_alt=image_alt,
            article_url=self.canonical_url(article.id, article.slug),
        )

    def share_targets(self, article_id: str, title: Optional[str] = None) -> ShareTargets:
        """Social share links pointing at this service's share page for the article."""
        share_url = f"{self._site_url}{SHARE_PATH}?id={encode_uri_component(article_id)}"
        encoded_url = encode_uri_component(share_url)
        encoded_title = encode_uri_component(title or "")

        return ShareTargets(
            share_url=share_url,
            facebook=f"https://www.facebook.com/sharer/sharer.php?u={encoded_url}",
            twitter=f"https://twitter.com/intent/tweet?url={encoded_url}&text={encoded_title}",
            line=f"https://social-plugins.line.me/lineit/share?url={encoded_url}",
        )
