# ABOUTME: Database-backed quiz storage using SQLAlchemy async components
# ABOUTME: Handles persistence and url/content-hash caching of generated quizzes

from __future__ import annotations

import time
from collections.abc import Callable

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel, col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from wikiquiz.core.errors import ConflictError
from wikiquiz.core.models import HistoryEntry, NewQuizRecord, StoredQuizRecord
from wikiquiz.persistence.models import WikiQuizRecord, new_quiz_id
from wikiquiz.utils.logging import get_logger


class DatabaseManager:
    """Manages async database operations for generated quizzes."""

    def __init__(
        self,
        database_url: str = "sqlite+aiosqlite:///./wikiquiz.db",
        clock: Callable[[], float] = time.time,
    ):
        """Initialize the database manager.

        Args:
            database_url: SQLAlchemy async database URL (e.g. sqlite+aiosqlite:///./db.db)
            clock: Source of the current time in epoch seconds
        """
        self.database_url = database_url
        self.clock = clock
        self.logger = get_logger(__name__)
        self.engine = create_async_engine(
            database_url,
            echo=False,  # Set to True for SQL query logging
        )
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Allow access to attributes after commit
        )

    async def create_tables(self) -> None:
        """Create all database tables if they don't exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def find_by_url(self, url: str, content_hash: str | None = None) -> StoredQuizRecord | None:
        """Get the newest stored quiz for a URL.

        Args:
            url: Article URL exactly as it was stored
            content_hash: Restrict the lookup to one extraction fingerprint

        Returns:
            The stored quiz or None if not found
        """
        statement = select(WikiQuizRecord).where(WikiQuizRecord.url == url)
        if content_hash is not None:
            statement = statement.where(WikiQuizRecord.content_hash == content_hash)
        statement = statement.order_by(col(WikiQuizRecord.created_at).desc()).limit(1)

        async with self.async_session() as session:
            result = await session.exec(statement)
            row = result.first()
            return row.to_record() if row else None

    async def find_by_id(self, quiz_id: str) -> StoredQuizRecord | None:
        async with self.async_session() as session:
            row = await session.get(WikiQuizRecord, quiz_id)
            return row.to_record() if row else None

    async def insert(self, record: NewQuizRecord) -> StoredQuizRecord:
        """Save a new quiz to the database.

        Args:
            record: Quiz fields without id and creation time

        Returns:
            The stored quiz with its assigned id and timestamp

        Raises:
            ConflictError: If the same url and content hash are already stored
        """
        row = WikiQuizRecord.from_new_record(record, quiz_id=new_quiz_id(), created_at=int(self.clock()))

        async with self.async_session() as session:
            session.add(row)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                self.logger.warning(
                    "Quiz already stored for url and content hash", url=record.url, content_hash=record.content_hash
                )
                raise ConflictError(f"A quiz for {record.url} with this content is already stored") from e
            await session.refresh(row)

        self.logger.info("Stored quiz", quiz_id=row.id, url=row.url, question_count=len(record.quiz))
        return row.to_record()

    async def list_history(self, query: str | None = None) -> list[HistoryEntry]:
        """List stored quizzes, newest first.

        Args:
            query: Case-insensitive substring matched against title or url

        Returns:
            History rows with id, url, title and creation time
        """
        statement = select(
            WikiQuizRecord.id, WikiQuizRecord.url, WikiQuizRecord.title, WikiQuizRecord.created_at
        )
        q = (query or "").strip()
        if q:
            statement = statement.where(
                or_(
                    col(WikiQuizRecord.title).icontains(q, autoescape=True),
                    col(WikiQuizRecord.url).icontains(q, autoescape=True),
                )
            )
        statement = statement.order_by(col(WikiQuizRecord.created_at).desc())

        async with self.async_session() as session:
            result = await session.exec(statement)
            return [
                HistoryEntry(id=quiz_id, url=url, title=title, created_at=created_at)
                for quiz_id, url, title, created_at in result.all()
            ]

    async def close(self) -> None:
        """Close the database connection."""
        await self.engine.dispose()
