# ABOUTME: Cross-cutting utilities and shared infrastructure
# ABOUTME: Supporting services: logging configuration, context binding and rich output

from . import logging

__all__ = [
    "logging",
]
