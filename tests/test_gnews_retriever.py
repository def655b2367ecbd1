"""Tests for GNewsRetriever."""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest

from claimcheck.data import Article
from claimcheck.exceptions import RetrievalError
from claimcheck.search.gnews import GNEWS_API_URL, GNewsRetriever


class TestGNewsRetriever:
    """Tests for GNewsRetriever."""

    @pytest.fixture
    def mock_response_data(self) -> dict:
        """Sample GNews API response."""
        return {
            "totalArticles": 2,
            "articles": [
                {
                    "title": "Article 1",
                    "url": "https://www.bbc.com/news/article1",
                    "source": {"name": "BBC News", "url": "https://www.bbc.com"},
                    "publishedAt": "2026-02-01T10:00:00Z",
                    "description": "Description 1",
                    "content": "Content 1",
                },
                {
                    "title": "Article 2",
                    "url": "https://example.com/article2",
                    "source": {"name": "Other News"},
                    "publishedAt": "2026-02-01T11:00:00Z",
                    "description": "Description 2",
                },
            ],
        }

    @pytest.fixture
    def retriever(self) -> GNewsRetriever:
        """Create a retriever with test API key."""
        return GNewsRetriever(api_key="test-key")

    @pytest.fixture
    def mock_response(self, mock_response_data: dict) -> MagicMock:
        response = MagicMock()
        response.json.return_value = mock_response_data
        response.raise_for_status = MagicMock()
        return response

    def test_init_requires_api_key(self, monkeypatch: pytest.MonkeyPatch):
        """Should raise if no API key provided."""
        monkeypatch.delenv("GNEWS_API_KEY", raising=False)
        with pytest.raises(ValueError, match="API key required"):
            GNewsRetriever()

    def test_init_uses_env_var(self, monkeypatch: pytest.MonkeyPatch):
        """Should use GNEWS_API_KEY env var if no key passed."""
        monkeypatch.setenv("GNEWS_API_KEY", "env-key")
        retriever = GNewsRetriever()
        assert retriever._api_key == "env-key"

    async def test_retrieve_returns_articles(
        self,
        retriever: GNewsRetriever,
        mock_response: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """Should map GNews items to Article objects."""

        async def mock_get(*args, **kwargs):
            return mock_response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        articles = await retriever.retrieve("test claim")

        assert len(articles) == 2
        assert all(isinstance(a, Article) for a in articles)
        assert articles[0].title == "Article 1"
        assert articles[0].site == "bbc.com"
        assert articles[0].body == "Content 1"
        assert articles[0].published_at == "2026-02-01T10:00:00Z"

    async def test_site_falls_back_to_article_domain(
        self,
        retriever: GNewsRetriever,
        mock_response: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """Should use the article URL's domain when the outlet has no URL."""

        async def mock_get(*args, **kwargs):
            return mock_response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        articles = await retriever.retrieve("test claim")

        assert articles[1].site == "example.com"
        assert articles[1].body == "Description 2"

    async def test_retrieve_passes_params(
        self,
        retriever: GNewsRetriever,
        mock_response: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """Should pass query, language and key to the API."""
        captured_params: dict = {}

        async def mock_get(self, url, params=None):
            captured_params.update(params or {})
            return mock_response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        await retriever.retrieve("test", max_results=10)

        assert captured_params["q"] == "test"
        assert captured_params["lang"] == "en"
        assert captured_params["max"] == 10
        assert captured_params["apikey"] == "test-key"

    async def test_retrieve_caps_max_results(
        self,
        retriever: GNewsRetriever,
        mock_response: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """Should cap max_results at 100 (GNews limit)."""
        captured_params: dict = {}

        async def mock_get(self, url, params=None):
            captured_params.update(params or {})
            return mock_response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        await retriever.retrieve("test", max_results=200)

        assert captured_params["max"] == 100  # Capped at 100

    async def test_retrieve_raises_on_http_error(
        self,
        retriever: GNewsRetriever,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """Should surface provider failures as RetrievalError."""

        async def mock_get(self, url, params=None):
            raise httpx.HTTPError("API error")

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(RetrievalError, match="API error"):
            await retriever.retrieve("failing claim")

    async def test_retrieve_raises_on_malformed_payload(
        self,
        retriever: GNewsRetriever,
        monkeypatch: pytest.MonkeyPatch,
    ):
        response = MagicMock()
        response.json.return_value = {"articles": "nope"}
        response.raise_for_status = MagicMock()

        async def mock_get(*args, **kwargs):
            return response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(RetrievalError):
            await retriever.retrieve("claim")

    async def test_retrieve_raises_on_non_json_body(
        self,
        retriever: GNewsRetriever,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """An HTML error page with a 200 status is still a retrieval failure."""

        async def mock_get(*args, **kwargs):
            return httpx.Response(
                200,
                text="<html>oops</html>",
                request=httpx.Request("GET", GNEWS_API_URL),
            )

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(RetrievalError, match="non-JSON"):
            await retriever.retrieve("claim")
