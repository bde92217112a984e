# ABOUTME: Logging configuration and structured logger helpers
# ABOUTME: loguru sinks for interactive/production modes, structlog loggers for call sites

from .config import LoggingMode, configure_logging, get_logging_status
from .utils import (
    get_logger,
    log_api_call,
    log_extraction_step,
    with_operation_context,
    with_pipeline_context,
    with_quiz_context,
)

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "get_logging_status",
    # Utilities
    "get_logger",
    "log_api_call",
    "log_extraction_step",
    "with_operation_context",
    "with_pipeline_context",
    "with_quiz_context",
]
