"""
Article feed sources.

Dependencies: httpx
System role: Startup document source
"""

from rag_backend.boundary.feeds.rss_fetcher import FALLBACK_ARTICLES, Article, RSSFeedFetcher

__all__ = ["FALLBACK_ARTICLES", "Article", "RSSFeedFetcher"]
