# ABOUTME: httpx-based fetcher for Wikipedia article markup
# ABOUTME: Retries transport failures with tenacity; non-success statuses surface as FetchError

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from wikiquiz.core.errors import FetchError
from wikiquiz.extraction.wiki.base import BaseWikiFetcher
from wikiquiz.utils.logging import get_logger, log_api_call


class WikipediaFetcher(BaseWikiFetcher):
    """Fetch article markup over HTTP."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 20.0,
        user_agent: str | None = None,
        max_attempts: int = 3,
        min_wait: float = 0.5,
        max_wait: float = 5.0,
    ):
        """Initialize the fetcher.

        Args:
            client: HTTP client to use instead of a fresh one
            timeout: Per-request timeout in seconds
            user_agent: User-Agent header for the default client
            max_attempts: Attempts for requests that fail before any response arrives
            min_wait: Minimum backoff between attempts, in seconds
            max_wait: Maximum backoff between attempts, in seconds
        """
        super().__init__(client=client, user_agent=user_agent)
        self.logger = get_logger(__name__)
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.min_wait = min_wait
        self.max_wait = max_wait

    @log_api_call("wikipedia")
    async def fetch(self, url: str) -> str:
        """Fetch the page, following redirects.

        Only transport errors are retried. A response with a non-success status
        is reported immediately with the status embedded in the message.
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential(multiplier=self.min_wait, min=self.min_wait, max=self.max_wait),
                retry=retry_if_exception_type(httpx.TransportError),
                reraise=True,
            ):
                with attempt:
                    response = await self.http_client.get(url, follow_redirects=True, timeout=self.timeout)
        except httpx.TransportError as e:
            self.logger.error("Article fetch failed", url=url, error=str(e), attempts=self.max_attempts)
            raise FetchError(f"Failed to fetch page ({type(e).__name__})", status_code=None) from e

        if not response.is_success:
            self.logger.warning("Article fetch returned non-success status", url=url, status_code=response.status_code)
            raise FetchError(f"Failed to fetch page ({response.status_code})", status_code=response.status_code)

        self.logger.debug("Fetched article markup", url=url, markup_length=len(response.text))
        return response.text
