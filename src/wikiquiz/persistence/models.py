# ABOUTME: SQLModel table for persisted quizzes
# ABOUTME: One row per generated quiz, unique per url and content hash

from __future__ import annotations

import time
import uuid

from sqlalchemy import Text, UniqueConstraint
from sqlmodel import JSON, Column, Field, SQLModel

from wikiquiz.core.models import KeyEntities, NewQuizRecord, QuizQuestion, StoredQuizRecord
from wikiquiz.persistence.json_types import PydanticJson


def new_quiz_id() -> str:
    return str(uuid.uuid4())


def epoch_seconds() -> int:
    return int(time.time())


class WikiQuizRecord(SQLModel, table=True):
    """A generated quiz together with the extraction it was built from."""

    __tablename__ = "wiki_quiz"  # type: ignore[assignment]
    __table_args__ = (UniqueConstraint("url", "content_hash", name="uq_wiki_quiz_url_content_hash"),)

    id: str = Field(default_factory=new_quiz_id, primary_key=True, description="Random UUID")
    url: str = Field(index=True, description="Source article URL")
    title: str = Field(description="Extracted article title")
    summary: str = Field(description="Extracted summary")
    sections: list[str] = Field(default_factory=list, sa_column=Column(JSON), description="Section titles")
    key_entities: KeyEntities = Field(
        default_factory=KeyEntities,
        sa_column=Column(PydanticJson(KeyEntities)),
        description="People, organizations and locations",
    )
    quiz: list[QuizQuestion] = Field(
        default_factory=list,
        sa_column=Column(PydanticJson(list[QuizQuestion])),
        description="Generated questions",
    )
    related_topics: list[str] = Field(default_factory=list, sa_column=Column(JSON), description="Related topics")
    content_hash: str = Field(index=True, description="SHA-256 of the extracted plain text")
    raw_html: str | None = Field(default=None, sa_column=Column(Text, nullable=True), description="Fetched markup")
    created_at: int = Field(default_factory=epoch_seconds, index=True, description="Creation time, epoch seconds")

    @classmethod
    def from_new_record(cls, record: NewQuizRecord, *, quiz_id: str, created_at: int) -> WikiQuizRecord:
        return cls(
            id=quiz_id,
            url=record.url,
            title=record.title,
            summary=record.summary,
            sections=list(record.sections),
            key_entities=record.key_entities,
            quiz=list(record.quiz),
            related_topics=list(record.related_topics),
            content_hash=record.content_hash,
            raw_html=record.raw_html,
            created_at=created_at,
        )

    def to_record(self) -> StoredQuizRecord:
        return StoredQuizRecord(
            id=self.id,
            url=self.url,
            title=self.title,
            summary=self.summary,
            sections=list(self.sections or []),
            key_entities=self.key_entities or KeyEntities(),
            quiz=list(self.quiz or []),
            related_topics=list(self.related_topics or []),
            content_hash=self.content_hash,
            raw_html=self.raw_html,
            created_at=self.created_at,
        )
