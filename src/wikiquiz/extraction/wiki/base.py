import re
from abc import ABC, abstractmethod
from urllib.parse import unquote, urlsplit

import httpx

from wikiquiz.core.errors import ValidationError
from wikiquiz.utils.logging import get_logger

INVALID_URL_MESSAGE = "Please provide a valid Wikipedia article URL."


class BaseWikiFetcher(ABC):
    """Base class for fetching article markup from Wikipedia. Holds the httpx client
    and the URL rules shared by every fetcher."""

    def __init__(self, client: httpx.AsyncClient | None = None, user_agent: str | None = None):
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={
                "User-Agent": user_agent or "AI Wiki Quiz Generator (educational project)",
                "Accept": "text/html",
            }
        )
        self.logger = get_logger(__name__)

    @abstractmethod
    async def fetch(self, url: str) -> str:
        """Fetch raw markup for the given article URL."""
        pass

    async def close(self) -> None:
        await self.http_client.aclose()

    @staticmethod
    def is_article_url(url: str | None) -> bool:
        """Check that the URL points at an article on a wikipedia.org host."""
        if not url:
            return False
        try:
            parts = urlsplit(url)
            hostname = parts.hostname
        except ValueError:
            return False
        if parts.scheme not in ("http", "https") or not hostname:
            return False
        on_wikipedia = hostname == "en.wikipedia.org" or hostname.endswith(".wikipedia.org")
        return on_wikipedia and parts.path.startswith("/wiki/")

    @staticmethod
    def page_slug_from_url(url: str | None) -> str | None:
        """Extract the decoded page slug from an article URL."""
        # Example: "https://en.wikipedia.org/wiki/Alan_Turing#Early_life" -> "Alan_Turing"
        if not url:
            return None
        slug = re.search(r"/wiki/([^#?]+)", str(url))
        return unquote(slug.group(1)) if slug else None


def validate_article_url(url: str | None) -> str:
    """Return the trimmed URL, or raise ValidationError naming the ``url`` field."""
    candidate = (url or "").strip()
    if not BaseWikiFetcher.is_article_url(candidate):
        raise ValidationError(INVALID_URL_MESSAGE, field="url")
    return candidate
