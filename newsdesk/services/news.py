import logging

import requests
from pydantic import ValidationError

from newsdesk.config import get_settings
from newsdesk.exceptions import DecodeError, UpstreamError, UpstreamUnavailable
from newsdesk.http_client import get_session
from newsdesk.models.news import Article, ArticleSource, ResultSet

logger = logging.getLogger(__name__)


def _handle_response(resp: requests.Response) -> dict:
    """Check the HTTP status, return parsed JSON."""
    if resp.status_code != 200:
        logger.warning("News API returned HTTP %s", resp.status_code)
        raise UpstreamError(resp.status_code)
    try:
        data = resp.json()
    except ValueError as exc:
        logger.warning("News API body is not JSON: %s", exc)
        raise DecodeError("News API returned a non-JSON body") from exc
    if not isinstance(data, dict):
        raise DecodeError(f"News API returned {type(data).__name__}, expected an object")
    return data


def _parse_result_set(data: dict) -> ResultSet:
    raw_articles = data.get("articles") or []
    if not isinstance(raw_articles, list):
        logger.warning("News API articles field is %s, expected a list", type(raw_articles).__name__)
        raise DecodeError("News API returned an unexpected result shape")
    try:
        articles = []
        for item in raw_articles:
            source = item.get("source") or {}
            articles.append(Article(
                source=ArticleSource(id=source.get("id"), name=source.get("name")),
                author=item.get("author"),
                title=item.get("title"),
                description=item.get("description"),
                url=item.get("url"),
                image_url=item.get("urlToImage"),
                published_at=item.get("publishedAt"),
                content=item.get("content"),
            ))
        return ResultSet(
            status=data.get("status") or "",
            total_results=data.get("totalResults") or 0,
            articles=articles,
        )
    except (AttributeError, TypeError, ValidationError) as exc:
        logger.warning("News API body could not be decoded: %s", exc)
        raise DecodeError("News API returned an unexpected result shape") from exc


def search_everything(
    search_key: str,
    page: int,
    page_size: int,
    api_key: str,
    base_url: str | None = None,
) -> ResultSet:
    """Search all articles, newest first, English only. One attempt, no caching."""
    params = {
        "q": search_key,
        "pageSize": page_size,
        "page": page,
        "apiKey": api_key,
        "sortBy": "publishedAt",
        "language": "en",
    }
    base = base_url or get_settings().news_api_base
    try:
        resp = get_session().get(f"{base}/everything", params=params)
    except requests.RequestException as exc:
        logger.warning("News API unreachable: %s", type(exc).__name__)
        raise UpstreamUnavailable(str(exc)) from exc
    return _parse_result_set(_handle_response(resp))
