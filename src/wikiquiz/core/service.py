# ABOUTME: High-level service API for turning Wikipedia URLs into stored quizzes
# ABOUTME: Handles URL validation, cache-first lookup, extraction, synthesis and persistence

from __future__ import annotations

import random

from wikiquiz.config import Config, get_config
from wikiquiz.core.errors import ConflictError, NotFoundError
from wikiquiz.core.models import (
    ArticlePreview,
    ExtractedArticle,
    HistoryEntry,
    NewQuizRecord,
    StoredQuizRecord,
)
from wikiquiz.extraction import extract_article
from wikiquiz.extraction.analysis import fingerprint, generate_quiz
from wikiquiz.extraction.base import ArticleFetcher
from wikiquiz.extraction.wiki import WikipediaFetcher, validate_article_url
from wikiquiz.persistence import QuizStorage, build_storage
from wikiquiz.utils.logging import get_logger, with_operation_context

DEFAULT_SECTIONS = ("Overview", "History", "References")


def _with_default_sections(article: ExtractedArticle) -> ExtractedArticle:
    if article.sections:
        return article
    return article.model_copy(update={"sections": DEFAULT_SECTIONS})


class QuizGenerationService:
    """Service for generating quizzes with cache-first logic."""

    def __init__(self, storage: QuizStorage, fetcher: ArticleFetcher, rng: random.Random | None = None):
        self.storage = storage
        self.fetcher = fetcher
        self.rng = rng
        self.logger = get_logger(__name__)

    @classmethod
    def from_config(cls, config: Config | None = None) -> QuizGenerationService:
        """Build a service with the storage and fetcher named by the configuration."""
        config = config or get_config()
        fetcher = WikipediaFetcher(
            timeout=config.request_timeout,
            user_agent=config.user_agent,
            max_attempts=config.fetch_max_attempts,
        )
        return cls(storage=build_storage(config), fetcher=fetcher)

    async def _fetch_and_extract(self, url: str) -> tuple[str, ExtractedArticle]:
        self.logger.info("Fetching article", url=url, page=WikipediaFetcher.page_slug_from_url(url))
        markup = await self.fetcher.fetch(url)
        article = _with_default_sections(extract_article(markup, url))
        return markup, article

    @with_operation_context("preview")
    async def preview(self, url: str) -> ArticlePreview:
        """Extract an article without generating or storing a quiz."""
        url = validate_article_url(url)
        _, article = await self._fetch_and_extract(url)
        return ArticlePreview(
            url=article.url,
            title=article.title,
            summary=article.summary,
            sections=list(article.sections),
            key_entities=article.key_entities,
        )

    @with_operation_context("generate_quiz")
    async def generate(
        self, url: str, force_regenerate: bool = False, store_raw_html: bool = False
    ) -> StoredQuizRecord:
        """Return the stored quiz for a URL, generating and storing one if needed.

        Args:
            url: Wikipedia article URL
            force_regenerate: Skip the cached lookup and extract again
            store_raw_html: Keep the fetched markup on the stored record

        Returns:
            The stored quiz record

        Raises:
            ValidationError: If the URL is not a Wikipedia article URL
            FetchError: If the article could not be fetched
        """
        url = validate_article_url(url)
        await self.storage.create_tables()

        if not force_regenerate:
            cached = await self.storage.find_by_url(url)
            if cached:
                self.logger.info("Using cached quiz", url=url, quiz_id=cached.id)
                return cached

        self.logger.info("Generating fresh quiz", url=url, force_regenerate=force_regenerate)

        markup, article = await self._fetch_and_extract(url)
        content_hash = fingerprint(article.plain_text)
        generated = generate_quiz(article, rng=self.rng)

        record = NewQuizRecord(
            url=url,
            title=article.title,
            summary=article.summary,
            sections=list(article.sections),
            key_entities=article.key_entities,
            quiz=generated.quiz,
            related_topics=generated.related_topics,
            content_hash=content_hash,
            raw_html=markup if store_raw_html else None,
        )

        try:
            stored = await self.storage.insert(record)
        except ConflictError:
            existing = await self.storage.find_by_url(url, content_hash)
            if existing is None:
                raise
            self.logger.info("Quiz for this content already stored", url=url, quiz_id=existing.id)
            return existing

        self.logger.info(
            "Quiz generated",
            url=url,
            quiz_id=stored.id,
            question_count=len(stored.quiz),
            content_hash=content_hash,
        )
        return stored

    async def get_quiz(self, quiz_id: str) -> StoredQuizRecord:
        """Look up one stored quiz.

        Raises:
            NotFoundError: If no quiz has that id
        """
        await self.storage.create_tables()
        record = await self.storage.find_by_id(quiz_id)
        if record is None:
            self.logger.warning("Quiz not found", quiz_id=quiz_id)
            raise NotFoundError(f"Quiz {quiz_id} not found")
        return record

    async def history(self, query: str | None = None) -> list[HistoryEntry]:
        await self.storage.create_tables()
        return await self.storage.list_history(query)

    async def close(self) -> None:
        """Release the fetcher and storage."""
        await self.fetcher.close()
        await self.storage.close()
