# ABOUTME: Explicit storage selection at process start
# ABOUTME: Builds the configured QuizStorage implementation; callers pass it along by reference

from wikiquiz.config import Config, get_config
from wikiquiz.persistence.base import QuizStorage
from wikiquiz.persistence.manager import DatabaseManager
from wikiquiz.persistence.memory import InMemoryQuizStorage
from wikiquiz.utils.logging import get_logger

logger = get_logger(__name__)


def build_storage(config: Config | None = None) -> QuizStorage:
    """Construct the storage backend named by ``config.storage_backend``."""
    config = config or get_config()
    if config.storage_backend == "memory":
        logger.info("Using in-memory quiz storage")
        return InMemoryQuizStorage()

    logger.info("Using database quiz storage", database_url=config.database_url)
    return DatabaseManager(config.database_url)
