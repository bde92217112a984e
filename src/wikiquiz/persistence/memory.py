# ABOUTME: In-process quiz storage for runs without a database
# ABOUTME: Same contract as DatabaseManager, including the url/content-hash conflict rule

import asyncio
import time
from collections.abc import Callable

from wikiquiz.core.errors import ConflictError
from wikiquiz.core.models import HistoryEntry, NewQuizRecord, StoredQuizRecord
from wikiquiz.persistence.models import new_quiz_id
from wikiquiz.utils.logging import get_logger


class InMemoryQuizStorage:
    """Keeps stored quizzes in a dict for the lifetime of the process."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self.logger = get_logger(__name__)
        self._records: dict[str, StoredQuizRecord] = {}
        self._lock = asyncio.Lock()

    async def create_tables(self) -> None:
        return None

    def _newest_first(self) -> list[StoredQuizRecord]:
        # Later inserts win ties on created_at
        return sorted(reversed(self._records.values()), key=lambda record: record.created_at, reverse=True)

    async def find_by_url(self, url: str, content_hash: str | None = None) -> StoredQuizRecord | None:
        for record in self._newest_first():
            if record.url == url and (content_hash is None or record.content_hash == content_hash):
                return record
        return None

    async def find_by_id(self, quiz_id: str) -> StoredQuizRecord | None:
        return self._records.get(quiz_id)

    async def insert(self, record: NewQuizRecord) -> StoredQuizRecord:
        async with self._lock:
            if any(
                existing.url == record.url and existing.content_hash == record.content_hash
                for existing in self._records.values()
            ):
                raise ConflictError(f"A quiz for {record.url} with this content is already stored")

            stored = StoredQuizRecord(
                **record.model_dump(exclude={"key_entities", "quiz"}),
                key_entities=record.key_entities,
                quiz=record.quiz,
                id=new_quiz_id(),
                created_at=int(self.clock()),
            )
            self._records[stored.id] = stored

        self.logger.info("Stored quiz in memory", quiz_id=stored.id, url=stored.url)
        return stored

    async def list_history(self, query: str | None = None) -> list[HistoryEntry]:
        q = (query or "").strip().casefold()
        return [
            HistoryEntry(id=record.id, url=record.url, title=record.title, created_at=record.created_at)
            for record in self._newest_first()
            if not q or q in record.title.casefold() or q in record.url.casefold()
        ]

    async def close(self) -> None:
        self._records.clear()
