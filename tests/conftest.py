# 📄 File: tests/conftest.py
# 🧭 Purpose (Layman Explanation):
# Shared test setup: a quiet test configuration, a pretend article database, and a pretend
# LINE server so tests never touch the real ones.
# 🧪 Purpose (Technical Summary):
# Pytest fixtures for settings, a fake ArticleRepository, an httpx.MockTransport-backed
# LINE provider, and a TestClient wired through FastAPI dependency_overrides.
# 🔗 Dependencies:
# pytest, httpx, fastapi.testclient
# 🔄 Connected Modules / Calls From:
# tests/*

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_FORMAT"] = "text"

from typing import Callable, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.modules.knowledge.domain.models.article import ArticleSummary
from app.modules.knowledge.domain.repositories.article_repository import ArticleRepository
from app.modules.knowledge.presentation.dependencies import get_article_repository
from app.modules.user_management.infrastructure.external.oauth_providers import LineOAuthProvider
from app.modules.user_management.presentation.dependencies import get_line_provider
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import DataStoreError

SITE_URL = "https://example.com"
LINE_TOKEN_URL = "https://api.line.me/oauth2/v2.1/token"
LINE_PROFILE_URL = "https://api.line.me/v2/profile"


def make_settings(**overrides) -> Settings:
    values = {
        "ENVIRONMENT": "test",
        "LOG_FORMAT": "text",
        "SITE_URL": SITE_URL,
        "DEPLOY_URL": None,
        "SUPABASE_URL": "",
        "SUPABASE_SERVICE_ROLE_KEY": None,
        "SUPABASE_ANON_KEY": None,
        "SUPABASE_PUBLISHABLE_KEY": None,
        "LINE_CHANNEL_ID": "1234567890",
        "LINE_CHANNEL_SECRET": "channel-secret",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeArticleRepository(ArticleRepository):
    """In-memory store keyed by id; only published rows are visible."""

    def __init__(self, articles: Optional[List[ArticleSummary]] = None, fail: bool = False):
        self.articles: Dict[str, ArticleSummary] = {a.id: a for a in (articles or [])}
        self.fail = fail
        self.lookups: List[str] = []

    def get_published_summary(self, article_id: str) -> Optional[ArticleSummary]:
        self.lookups.append(article_id)
        if self.fail:
            raise DataStoreError("connection refused", table="knowledge_articles")
        article = self.articles.get(article_id)
        if article is None or not article.published:
            return None
        return article


class LineStub:
    """Records calls made to the fake LINE endpoints."""

    def __init__(self, token_response: httpx.Response, profile_response: httpx.Response):
        self.token_response = token_response
        self.profile_response = profile_response
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if str(request.url) == LINE_TOKEN_URL:
            return self.token_response
        if str(request.url) == LINE_PROFILE_URL:
            return self.profile_response
        return httpx.Response(404)

    @property
    def urls(self) -> List[str]:
        return [str(r.url) for r in self.requests]


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def article_repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def line_stub() -> LineStub:
    return LineStub(
        token_response=httpx.Response(
            200, json={"access_token": "access-123", "id_token": "id-456", "expires_in": 2592000}
        ),
        profile_response=httpx.Response(
            200,
            json={
                "userId": "U4af4980629",
                "displayName": "Mochi",
                "pictureUrl": "https://profile.line-scdn.net/mochi",
                "statusMessage": "meow",
                "language": "th",
            },
        ),
    )


@pytest.fixture
def make_line_provider(line_stub: LineStub) -> Callable[..., LineOAuthProvider]:
    def _make(client_id: Optional[str] = "1234567890", client_secret: Optional[str] = "channel-secret"):
        return LineOAuthProvider(
            client_id=client_id,
            client_secret=client_secret,
            token_url=LINE_TOKEN_URL,
            profile_url=LINE_PROFILE_URL,
            transport=httpx.MockTransport(line_stub),
        )

    return _make


@pytest.fixture
def client(settings, article_repository, make_line_provider):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_article_repository] = lambda: article_repository
    app.dependency_overrides[get_line_provider] = lambda: make_line_provider()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
