"""
RSS article fetcher.

Downloads an RSS 2.0 feed and turns its items into articles for startup
ingestion. Any network or parse failure falls back to a small static
corpus so the service can always start with some documents.

Dependencies: httpx, xml.etree (stdlib), rag_backend.core.exceptions
System role: Document source for the initial corpus
"""

import html
import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

import httpx

from rag_backend.core.exceptions import FeedFetchError

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Article:
    """Single feed item."""

    title: str
    content: str
    link: str | None = None


FALLBACK_ARTICLES: tuple[Article, ...] = (
    Article(title="Sample Article 1", content="This is a fallback article."),
    Article(title="Sample Article 2", content="Another offline article."),
)


def strip_markup(value: str | None) -> str:
    """Return plain text from an HTML snippet."""
    if not value:
        return ""
    text = html.unescape(_TAG_RE.sub(" ", value))
    return _WHITESPACE_RE.sub(" ", text).strip()


def parse_rss(payload: str | bytes, limit: int) -> list[Article]:
    """
    Parse RSS 2.0 items.

    Args:
        payload: Raw feed XML
        limit: Maximum number of items returned

    Returns:
        list[Article]: Items in feed order

    Raises:
        FeedFetchError: If the payload is not well-formed XML
    """
    try:
        root = ET.fromstring(payload)
    except ET.ParseError as e:
        raise FeedFetchError(f"Invalid feed XML: {e}") from e

    articles: list[Article] = []
    for item in root.iter("item"):
        if len(articles) >= limit:
            break
        title = strip_markup(item.findtext("title"))
        content = strip_markup(item.findtext("description"))
        link = (item.findtext("link") or "").strip() or None
        if not title and not content:
            continue
        articles.append(Article(title=title, content=content, link=link))
    return articles


class RSSFeedFetcher:
    """Fetches articles from an RSS feed with a static fallback."""

    def __init__(self, url: str, timeout: float = 10.0, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """
        Initialize fetcher.

        Args:
            url: RSS 2.0 feed URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._url = url
        self._timeout = timeout
        self._transport = transport

    async def fetch(self, limit: int = 50) -> list[Article]:
        """
        Fetch up to limit articles, or the fallback articles on failure.

        Args:
            limit: Maximum number of articles

        Returns:
            list[Article]: Feed articles, never empty
        """
        logger.info(f"{__name__}:fetch - Fetching {limit} news articles from {self._url}")
        try:
            articles = await self._fetch_feed(limit)
        except FeedFetchError as e:
            logger.error(f"{__name__}:fetch - RSS fetch failed, using fallback articles: {e}")
            return list(FALLBACK_ARTICLES)

        if not articles:
            logger.warning(f"{__name__}:fetch - Feed contained no items, using fallback articles")
            return list(FALLBACK_ARTICLES)
        return articles

    async def _fetch_feed(self, limit: int) -> list[Article]:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport, follow_redirects=True
            ) as client:
                response = await client.get(self._url)
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FeedFetchError(f"{type(e).__name__}: {e}", details={"url": self._url}) from e
        return parse_rss(response.content, limit)
