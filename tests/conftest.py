import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from newsdesk.config import Settings
from newsdesk.services.news import _parse_result_set


# --- Canned API responses ---

NEWS_API_ARTICLE = {
    "source": {"id": "the-verge", "name": "The Verge"},
    "author": "Jane Doe",
    "title": "Go 1.16 ships with embedded files",
    "description": "The new release adds the embed package.",
    "url": "https://example.com/go-116",
    "urlToImage": "https://example.com/go-116.png",
    "publishedAt": "2021-03-05T23:30:00Z",
    "content": "Go 1.16 is out...",
}

NEWS_API_ARTICLE_NO_SOURCE_ID = {
    "source": {"id": None, "name": "Dev Blog"},
    "author": None,
    "title": "Writing web servers",
    "description": None,
    "url": "https://example.com/web-servers",
    "urlToImage": None,
    "publishedAt": "2021-01-09T08:00:00Z",
    "content": None,
}


def news_api_page(total_results: int = 45, count: int = 20) -> dict:
    articles = [dict(NEWS_API_ARTICLE, url=f"https://example.com/go-{i}") for i in range(count)]
    return {"status": "ok", "totalResults": total_results, "articles": articles}


NEWS_API_EVERYTHING = news_api_page()


@pytest.fixture
def settings():
    return Settings(news_api_key="test-key", news_api_base="https://news.test/v2")


@pytest.fixture
def result_set():
    return _parse_result_set(NEWS_API_EVERYTHING)


@pytest.fixture
def mock_session(mocker):
    session = MagicMock()
    mocker.patch("newsdesk.services.news.get_session", return_value=session)
    return session


@pytest.fixture
def api_client(settings):
    """FastAPI TestClient for router tests."""
    from newsdesk.main import create_app
    return TestClient(create_app(settings))
