# ABOUTME: Protocol interface for retrieving raw article markup
# ABOUTME: Keeps the orchestrator independent of the HTTP client in use

from typing import Protocol


class ArticleFetcher(Protocol):
    """Protocol for fetching article markup by URL."""

    async def fetch(self, url: str) -> str:
        """Fetch the raw markup for the given article URL.

        Args:
            url: The article URL to fetch

        Returns:
            The response body as text

        Raises:
            FetchError: If the remote responds with a non-success status
        """
        ...

    async def close(self) -> None: ...
