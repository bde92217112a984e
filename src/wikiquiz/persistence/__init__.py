# ABOUTME: Database operations and data persistence layer
# ABOUTME: Pipeline Stage 3: generated quizzes -> storage with url/content-hash caching

"""
Persistence Layer: Save and retrieve generated quizzes

This layer handles:
- The storage contract consumed by the orchestrator
- SQLModel tables with Pydantic-validated JSON columns
- A database-backed store and an in-memory store
- Explicit backend selection at process start

Data Flow: core/ orchestrator -> QuizStorage -> Database or memory
"""

from .base import QuizStorage
from .factory import build_storage
from .json_types import PydanticJson
from .manager import DatabaseManager
from .memory import InMemoryQuizStorage
from .models import WikiQuizRecord

__all__ = [
    "DatabaseManager",
    "InMemoryQuizStorage",
    "PydanticJson",
    "QuizStorage",
    "WikiQuizRecord",
    "build_storage",
]
