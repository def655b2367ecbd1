"""Conversion of raw provider payloads into Article objects."""

import logging
from collections.abc import Mapping
from typing import Any

from claimcheck.data import Article
from claimcheck.exceptions import RetrievalError

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def article_from_post(post: Mapping[str, Any]) -> Article:
    """Build an Article from a news-API post, treating missing fields as empty.

    Recognizes the webz.io field names (``site``, ``text``, ``published``).
    """
    published = post.get("published")
    return Article(
        title=_text(post.get("title")),
        url=_text(post.get("url")),
        site=_text(post.get("site")),
        body=_text(post.get("text")),
        published_at=_text(published) if published is not None else None,
    )


def articles_from_payload(payload: Any, *, key: str = "posts") -> list[Article]:
    """Extract articles from a provider response body.

    Args:
        payload: Decoded JSON, either an object holding ``key`` or a bare list.
        key: Name of the field holding the posts.

    Returns:
        Articles in payload order. Non-object entries are skipped.

    Raises:
        RetrievalError: If the posts container is not a list.
    """
    if isinstance(payload, Mapping):
        posts = payload.get(key) or []
    else:
        posts = payload

    if not isinstance(posts, list):
        msg = f"Expected a list of {key}, got {type(posts).__name__}"
        raise RetrievalError(msg)

    articles: list[Article] = []
    for i, post in enumerate(posts):
        if not isinstance(post, Mapping):
            logger.warning("Skipping malformed post at index %d: %r", i, post)
            continue
        articles.append(article_from_post(post))
    return articles
