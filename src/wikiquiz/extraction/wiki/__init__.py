# ABOUTME: Wikipedia-specific fetching and URL handling
# ABOUTME: URL validation helpers and the httpx-backed article fetcher

from .base import BaseWikiFetcher, validate_article_url
from .fetcher import WikipediaFetcher

__all__ = [
    "BaseWikiFetcher",
    "WikipediaFetcher",
    "validate_article_url",
]
