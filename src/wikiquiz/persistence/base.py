# ABOUTME: Storage contract consumed by the quiz orchestrator
# ABOUTME: Lookup by url or id, insert-once records and a filtered history listing

from typing import Protocol

from wikiquiz.core.models import HistoryEntry, NewQuizRecord, StoredQuizRecord


class QuizStorage(Protocol):
    """Protocol for persisting generated quizzes.

    Records are created once and never updated or deleted through this
    interface. Implementations raise ConflictError when a record with the
    same url and content hash already exists.
    """

    async def create_tables(self) -> None: ...

    async def find_by_url(self, url: str, content_hash: str | None = None) -> StoredQuizRecord | None:
        """Return the newest record for ``url``, optionally restricted to one content hash."""
        ...

    async def find_by_id(self, quiz_id: str) -> StoredQuizRecord | None: ...

    async def insert(self, record: NewQuizRecord) -> StoredQuizRecord:
        """Persist a new record, assigning its id and creation timestamp."""
        ...

    async def list_history(self, query: str | None = None) -> list[HistoryEntry]:
        """List records newest first, filtered by a case-insensitive title or url substring."""
        ...

    async def close(self) -> None: ...
