# ABOUTME: Domain models for extracted articles, generated quizzes and stored records
# ABOUTME: Pydantic models with camelCase JSON aliases matching the public output shape

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


def normalize_option(value: str) -> str:
    """Comparison key for options: case-insensitive and trim-insensitive."""
    return value.strip().casefold()


class WikiQuizModel(BaseModel):
    """Base model: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Difficulty(str, Enum):
    """Difficulty tag carried by every quiz question."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class KeyEntities(WikiQuizModel):
    """Heuristically classified link text, each list in first-seen order."""

    people: list[str] = Field(default_factory=list)
    organizations: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)


class ExtractedArticle(WikiQuizModel):
    """Structured content pulled from one article's markup.

    Built once per extraction call and never mutated afterwards.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    url: str
    title: str
    summary: str
    sections: tuple[str, ...] = ()
    paragraphs: tuple[str, ...] = ()
    key_entities: KeyEntities = Field(default_factory=KeyEntities)
    plain_text: str = ""


class QuizQuestion(WikiQuizModel):
    """One multiple-choice question with exactly four options."""

    question: str = Field(min_length=1)
    options: list[str] = Field(min_length=4, max_length=4)
    answer: str = Field(min_length=1)
    difficulty: Difficulty
    explanation: str = Field(min_length=1)

    @model_validator(mode="after")
    def _answer_among_options(self) -> "QuizQuestion":
        if any(not option.strip() for option in self.options):
            raise ValueError("Quiz options must be non-empty")
        if normalize_option(self.answer) not in {normalize_option(option) for option in self.options}:
            raise ValueError(f"Answer {self.answer!r} is not one of the options")
        return self


class GeneratedQuiz(WikiQuizModel):
    """Synthesizer output: the questions plus topics worth reading next."""

    quiz: list[QuizQuestion] = Field(default_factory=list, max_length=8)
    related_topics: list[str] = Field(default_factory=list, max_length=12)


class ArticlePreview(WikiQuizModel):
    """Extraction-only view returned by the preview path."""

    url: str
    title: str
    summary: str
    sections: list[str]
    key_entities: KeyEntities


class NewQuizRecord(ArticlePreview):
    """Everything persisted for a generated quiz except the storage-assigned fields."""

    quiz: list[QuizQuestion]
    related_topics: list[str]
    content_hash: str
    raw_html: str | None = None


class StoredQuizRecord(NewQuizRecord):
    """A persisted quiz. Created once, immutable thereafter."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    created_at: int = Field(description="Creation time in epoch seconds")


class HistoryEntry(WikiQuizModel):
    """Row of the generation history listing."""

    id: str
    url: str
    title: str
    created_at: int
