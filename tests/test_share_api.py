import html
import json
import re
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.main import app
from app.modules.knowledge.domain.models.article import ArticleSummary
from app.modules.knowledge.domain.services.share_service import (
    ARTICLE_CACHE_CONTROL,
    FALLBACK_CACHE_CONTROL,
    FALLBACK_DESCRIPTION,
    FALLBACK_IMAGE,
    FALLBACK_TITLE,
)
from app.modules.knowledge.infrastructure.database.article_repository_impl import (
    SupabaseArticleRepository,
)
from app.modules.knowledge.presentation.dependencies import get_article_repository


def meta_content(page: str, attribute: str, name: str) -> str:
    match = re.search(rf'<meta {attribute}="{re.escape(name)}" content="([^"]*)"', page)
    assert match, f"missing meta {name}"
    return html.unescape(match.group(1))


def canonical_href(page: str) -> str:
    match = re.search(r'<link rel="canonical" href="([^"]*)"', page)
    assert match
    return html.unescape(match.group(1))


def page_title(page: str) -> str:
    match = re.search(r"<title>(.*?)</title>", page, re.S)
    assert match
    return html.unescape(match.group(1))


def test_unknown_article_serves_fallback_preview(client, article_repository) -> None:
    resp = client.get("/share/article", params={"id": "abc123"})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.headers["cache-control"] == FALLBACK_CACHE_CONTROL

    page = resp.text
    assert page_title(page) == FALLBACK_TITLE
    assert meta_content(page, "property", "og:description") == FALLBACK_DESCRIPTION
    assert meta_content(page, "property", "og:image") == FALLBACK_IMAGE
    assert meta_content(page, "property", "og:image:alt") == FALLBACK_TITLE
    assert canonical_href(page) == "https://example.com/knowledge/abc123"
    assert meta_content(page, "property", "og:url") == "https://example.com/knowledge/abc123"
    assert article_repository.lookups == ["abc123"]


def test_fallback_canonical_url_encodes_id(client) -> None:
    resp = client.get("/share/article", params={"id": "a b/c?d"})

    assert resp.status_code == 200
    assert canonical_href(resp.text) == "https://example.com/knowledge/a%20b%2Fc%3Fd"


def test_published_article_uses_open_graph_fields(client, article_repository) -> None:
    article_repository.articles["42"] = ArticleSummary(
        id=42,
        slug="cat-grooming-basics",
        title="Grooming",
        meta_title="Grooming | Petskub",
        og_title="How to groom a long-haired cat",
        meta_description="Meta description",
        og_description="Brush daily and trim claws weekly.",
        og_image="https://cdn.example.com/og.jpg",
        image_url="https://cdn.example.com/cover.jpg",
        image_alt="A cat being brushed",
    )

    resp = client.get("/share/article", params={"id": "42"})

    assert resp.status_code == 200
    assert resp.headers["cache-control"] == ARTICLE_CACHE_CONTROL

    page = resp.text
    assert page_title(page) == "How to groom a long-haired cat"
    assert meta_content(page, "property", "og:title") == "How to groom a long-haired cat"
    assert meta_content(page, "name", "twitter:title") == "How to groom a long-haired cat"
    assert meta_content(page, "property", "og:description") == "Brush daily and trim claws weekly."
    assert meta_content(page, "property", "og:image") == "https://cdn.example.com/og.jpg"
    assert meta_content(page, "property", "og:image:alt") == "A cat being brushed"
    assert canonical_href(page) == "https://example.com/knowledge/cat-grooming-basics"
    assert 'window.location.replace("https://example.com/knowledge/cat-grooming-basics")' in page


def test_unpublished_article_is_treated_as_missing(client, article_repository) -> None:
    article_repository.articles["draft"] = ArticleSummary(
        id="draft", title="Secret draft", published=False
    )

    resp = client.get("/share/article", params={"id": "draft"})

    assert resp.status_code == 200
    assert "Secret draft" not in resp.text
    assert page_title(resp.text) == FALLBACK_TITLE


def test_article_text_is_escaped(client, article_repository) -> None:
    title = '<script>alert("x")</script> & \'quotes\''
    description = '"><img src=x onerror=alert(1)>'
    article_repository.articles["xss"] = ArticleSummary(
        id="xss", title=title, og_description=description
    )

    resp = client.get("/share/article", params={"id": "xss"})
    page = resp.text

    assert resp.status_code == 200
    assert title not in page
    assert description not in page
    assert "<script>alert" not in page
    assert "<img src=x" not in page
    assert "&lt;script&gt;" in page
    assert page_title(page) == title
    assert meta_content(page, "property", "og:description") == description


@pytest.mark.parametrize("query", ["", "?id="])
def test_missing_id_is_rejected(client, article_repository, query) -> None:
    resp = client.get(f"/share/article{query}")

    assert resp.status_code == 400
    assert resp.text == "Missing article id"
    assert article_repository.lookups == []


def test_store_failure_degrades_to_fallback(client, article_repository) -> None:
    article_repository.fail = True

    resp = client.get("/share/article", params={"id": "abc123"})

    assert resp.status_code == 200
    assert resp.headers["cache-control"] == FALLBACK_CACHE_CONTROL
    assert page_title(resp.text) == FALLBACK_TITLE


def test_share_links(client) -> None:
    resp = client.get("/share/article/links", params={"id": "abc 123", "title": "Cat care"})

    assert resp.status_code == 200
    encoded = "https%3A%2F%2Fexample.com%2Fshare%2Farticle%3Fid%3Dabc%2520123"
    assert resp.json() == {
        "shareUrl": "https://example.com/share/article?id=abc%20123",
        "facebook": f"https://www.facebook.com/sharer/sharer.php?u={encoded}",
        "twitter": f"https://twitter.com/intent/tweet?url={encoded}&text=Cat%20care",
        "line": f"https://social-plugins.line.me/lineit/share?url={encoded}",
    }


def test_share_links_require_id(client) -> None:
    resp = client.get("/share/article/links")

    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing article id"}


def test_malformed_store_row_serves_fallback(client) -> None:
    supabase = MagicMock()
    query = supabase.table.return_value.select.return_value
    query.eq.return_value = query
    query.limit.return_value = query
    query.execute.return_value = SimpleNamespace(
        data=[{"id": 1, "title": {"th": "x"}, "published": True}]
    )
    app.dependency_overrides[get_article_repository] = lambda: SupabaseArticleRepository(supabase)

    resp = client.get("/share/article", params={"id": "1"})

    assert resp.status_code == 200
    assert resp.headers["cache-control"] == FALLBACK_CACHE_CONTROL
    assert page_title(resp.text) == FALLBACK_TITLE


def test_script_redirect_is_a_valid_string_literal(client, article_repository) -> None:
    article_repository.articles["7"] = ArticleSummary(id="7", title="Q&A", slug='a&b\\"</script>')

    resp = client.get("/share/article", params={"id": "7"})
    page = resp.text

    match = re.search(r"window\.location\.replace\((.*)\);", page)
    assert match
    assert json.loads(match.group(1)) == 'https://example.com/knowledge/a&b\\"</script>'
    assert "&amp;" not in match.group(1)
    assert "</script>\");" not in page
