# ABOUTME: Tests for the database-backed quiz storage
# ABOUTME: Validates inserts, url/content-hash conflicts, lookups and history filtering

from __future__ import annotations

import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool

from wikiquiz.core.errors import ConflictError
from wikiquiz.core.models import Difficulty, KeyEntities, NewQuizRecord, QuizQuestion
from wikiquiz.persistence.manager import DatabaseManager


@pytest_asyncio.fixture
async def temp_db(step_clock) -> DatabaseManager:
    """Provide an in-memory database manager for async tests."""
    from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
    from sqlmodel.ext.asyncio.session import AsyncSession

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    db = DatabaseManager("sqlite+aiosqlite:///:memory:", clock=step_clock)
    db.engine = engine
    db.async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await db.create_tables()
    yield db
    await db.close()


def _record(url: str = "https://en.wikipedia.org/wiki/Alan_Turing", **overrides) -> NewQuizRecord:
    fields = {
        "url": url,
        "title": "Alan Turing",
        "summary": "Alan Mathison Turing was an English mathematician.",
        "sections": ["Early life", "Career"],
        "key_entities": KeyEntities(people=["Alonzo Church"], organizations=["Bletchley Park"]),
        "quiz": [
            QuizQuestion(
                question='Which section is present in the article "Alan Turing"?',
                options=["Timeline", "Early life", "Overview", "References"],
                answer="Early life",
                difficulty=Difficulty.EASY,
                explanation='The section list extracted from the page includes "Early life".',
            )
        ],
        "related_topics": ["Alonzo Church", "Bletchley Park", "Early life"],
        "content_hash": "a" * 64,
    }
    fields.update(overrides)
    return NewQuizRecord(**fields)


@pytest.mark.asyncio
async def test_insert_assigns_id_and_timestamp(temp_db: DatabaseManager):
    stored = await temp_db.insert(_record())

    assert stored.id
    assert stored.created_at == 1_700_000_000
    assert stored.raw_html is None


@pytest.mark.asyncio
async def test_find_by_id_round_trips_json_columns(temp_db: DatabaseManager):
    stored = await temp_db.insert(_record(raw_html="<html></html>"))

    loaded = await temp_db.find_by_id(stored.id)

    assert loaded == stored
    assert isinstance(loaded.quiz[0], QuizQuestion)
    assert loaded.quiz[0].difficulty is Difficulty.EASY
    assert loaded.key_entities.organizations == ["Bletchley Park"]
    assert loaded.raw_html == "<html></html>"


@pytest.mark.asyncio
async def test_find_by_id_missing(temp_db: DatabaseManager):
    assert await temp_db.find_by_id("does-not-exist") is None


@pytest.mark.asyncio
async def test_duplicate_url_and_hash_conflicts(temp_db: DatabaseManager):
    await temp_db.insert(_record())

    with pytest.raises(ConflictError):
        await temp_db.insert(_record())

    # The session recovers after the rollback
    other = await temp_db.insert(_record(content_hash="b" * 64))
    assert other.content_hash == "b" * 64


@pytest.mark.asyncio
async def test_find_by_url_returns_newest(temp_db: DatabaseManager):
    older = await temp_db.insert(_record(content_hash="a" * 64))
    newer = await temp_db.insert(_record(content_hash="b" * 64))

    assert (await temp_db.find_by_url(older.url)).id == newer.id
    assert (await temp_db.find_by_url(older.url, "a" * 64)).id == older.id
    assert await temp_db.find_by_url("https://en.wikipedia.org/wiki/Nobody") is None


@pytest.mark.asyncio
async def test_history_is_newest_first_and_filterable(temp_db: DatabaseManager):
    turing = await temp_db.insert(_record())
    lovelace = await temp_db.insert(
        _record(url="https://en.wikipedia.org/wiki/Ada_Lovelace", title="Ada Lovelace", content_hash="c" * 64)
    )

    history = await temp_db.list_history()
    assert [entry.id for entry in history] == [lovelace.id, turing.id]
    assert history[0].created_at > history[1].created_at

    by_title = await temp_db.list_history("TURING")
    assert [entry.id for entry in by_title] == [turing.id]

    by_url = await temp_db.list_history("ada_love")
    assert [entry.title for entry in by_url] == ["Ada Lovelace"]

    assert await temp_db.list_history("   ") == history


@pytest.mark.asyncio
async def test_history_query_wildcards_are_literal(temp_db: DatabaseManager):
    await temp_db.insert(_record())

    assert await temp_db.list_history("%") == []
    assert await temp_db.list_history("_") != []  # "_" appears literally in the url
