# ABOUTME: Heuristic analysis of extracted article content
# ABOUTME: Entity buckets, content fingerprints and multiple-choice quiz synthesis

from .entities import classify_entities
from .fingerprint import fingerprint
from .synthesizer import build_related_topics, generate_quiz, make_options

__all__ = [
    "build_related_topics",
    "classify_entities",
    "fingerprint",
    "generate_quiz",
    "make_options",
]
