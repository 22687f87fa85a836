from app.modules.knowledge.domain.models.article import ArticleSummary
from app.modules.knowledge.domain.services.share_service import (
    ARTICLE_CACHE_CONTROL,
    FALLBACK_CACHE_CONTROL,
    FALLBACK_DESCRIPTION,
    FALLBACK_IMAGE,
    FALLBACK_IMAGE_ALT,
    FALLBACK_TITLE,
    ShareService,
)

from conftest import FakeArticleRepository


def make_service(*articles: ArticleSummary, fail: bool = False) -> ShareService:
    return ShareService(FakeArticleRepository(list(articles), fail=fail), "https://example.com/")


def test_canonical_url_prefers_slug() -> None:
    service = make_service()

    assert service.site_url == "https://example.com"
    assert service.canonical_url("7", "litter-training") == "https://example.com/knowledge/litter-training"
    assert service.canonical_url("7", "") == "https://example.com/knowledge/7"


def test_missing_article_resolves_to_fallback() -> None:
    resolution = make_service().resolve("abc123")

    assert resolution.from_fallback
    assert resolution.cache_control == FALLBACK_CACHE_CONTROL
    assert resolution.payload.title == FALLBACK_TITLE
    assert resolution.payload.description == FALLBACK_DESCRIPTION
    assert resolution.payload.image == FALLBACK_IMAGE
    assert resolution.payload.image_alt == FALLBACK_TITLE
    assert resolution.payload.article_url == "https://example.com/knowledge/abc123"


def test_store_failure_resolves_to_fallback() -> None:
    resolution = make_service(fail=True).resolve("abc123")

    assert resolution.from_fallback
    assert resolution.cache_control == FALLBACK_CACHE_CONTROL


def test_meta_fields_fill_in_for_missing_open_graph_fields() -> None:
    article = ArticleSummary(
        id="1",
        title="Plain title",
        meta_title="Meta title",
        meta_description="Meta description",
        og_title="",
        image_url="https://cdn.example.com/cover.jpg",
    )

    resolution = make_service(article).resolve("1")
    payload = resolution.payload

    assert not resolution.from_fallback
    assert resolution.cache_control == ARTICLE_CACHE_CONTROL
    assert payload.title == "Meta title"
    assert payload.description == "Meta description"
    assert payload.image == "https://cdn.example.com/cover.jpg"
    assert payload.image_alt == "Meta title"
    assert payload.article_url == "https://example.com/knowledge/1"


def test_article_without_any_optional_fields() -> None:
    payload = make_service(ArticleSummary(id="2")).resolve("2").payload

    assert payload.title == FALLBACK_TITLE
    assert payload.description == FALLBACK_DESCRIPTION
    assert payload.image == FALLBACK_IMAGE
    assert payload.image_alt == FALLBACK_TITLE


def test_image_alt_default_is_never_empty() -> None:
    assert FALLBACK_IMAGE_ALT == "Petskub Article"
    payload = make_service(ArticleSummary(id="3", title="Kitten food", image_alt="")).resolve("3").payload

    assert payload.image_alt == "Kitten food"


def test_share_targets_without_title() -> None:
    targets = make_service().share_targets("abc")

    assert targets.share_url == "https://example.com/share/article?id=abc"
    assert targets.twitter.endswith("&text=")
