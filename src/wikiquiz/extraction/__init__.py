# ABOUTME: Data extraction from Wikipedia article markup
# ABOUTME: Pipeline Stage 1: raw markup -> title, summary, sections, paragraphs, entities

"""
Extraction Layer: Turn raw article markup into structured content

This layer handles:
- Fetching article markup over HTTP
- Normalizing text fragments and isolating the content region
- Section, paragraph and internal-link extraction with ordered fallbacks
- Heuristic entity buckets, content fingerprints and quiz synthesis

Data Flow: Wikipedia markup -> ExtractedArticle -> GeneratedQuiz
"""

from .article import extract_article
from .text import clean_fragment, strip_and_collapse, strip_tags, truncate_with_ellipsis

__all__ = [
    "clean_fragment",
    "extract_article",
    "strip_and_collapse",
    "strip_tags",
    "truncate_with_ellipsis",
]
