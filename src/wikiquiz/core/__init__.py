# ABOUTME: Business logic and orchestration layer
# ABOUTME: Pipeline Stage 2: URL -> fetched markup -> extracted article -> stored quiz

"""
Core Layer: Domain models, error taxonomy and workflow orchestration

This layer handles:
- Article, quiz and stored-record models with their camelCase output shape
- The typed errors raised across the pipeline
- The generation service that wires fetcher, extraction and storage together

Data Flow: extraction/ output -> QuizGenerationService -> persistence/
"""

from .errors import ConflictError, FetchError, NotFoundError, ValidationError, WikiQuizError
from .models import (
    ArticlePreview,
    Difficulty,
    ExtractedArticle,
    GeneratedQuiz,
    HistoryEntry,
    KeyEntities,
    NewQuizRecord,
    QuizQuestion,
    StoredQuizRecord,
)

# Import service on-demand to avoid circular imports
# Use: from wikiquiz.core.service import QuizGenerationService

__all__ = [
    "ArticlePreview",
    "ConflictError",
    "Difficulty",
    "ExtractedArticle",
    "FetchError",
    "GeneratedQuiz",
    "HistoryEntry",
    "KeyEntities",
    "NewQuizRecord",
    "NotFoundError",
    "QuizQuestion",
    "StoredQuizRecord",
    "ValidationError",
    "WikiQuizError",
]
