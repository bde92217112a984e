# ABOUTME: Regex-driven extraction of title, sections, paragraphs and links from article markup
# ABOUTME: Every stage is an ordered list of strategies with a safe default, so it never raises

import re
from urllib.parse import unquote

from wikiquiz.core.models import ExtractedArticle
from wikiquiz.extraction.analysis.entities import classify_entities
from wikiquiz.extraction.strategies import Strategy, first_success
from wikiquiz.extraction.text import clean_fragment, truncate_with_ellipsis
from wikiquiz.utils.logging import get_logger, log_extraction_step

logger = get_logger(__name__)

DEFAULT_TITLE = "Wikipedia Article"
DEFAULT_SUMMARY = "A Wikipedia article"

MAX_SECTIONS = 20
MIN_PARAGRAPH_CHARS = 50
SUMMARY_PARAGRAPHS = 3
SUMMARY_MAX_CHARS = 500
MAX_LINK_CANDIDATES = 80
MAX_LINK_CHARS = 100

_FLAGS = re.IGNORECASE | re.DOTALL

TITLE_RE = re.compile(r'<h1[^>]*id="firstHeading"[^>]*>(.*?)</h1>', _FLAGS)
CONTENT_TEXT_RE = re.compile(
    r'<div[^>]*id="mw-content-text"[^>]*>(.*?)(?:<div[^>]*id="mw-navigation"|</div>\s*</div>)', _FLAGS
)
MAIN_RE = re.compile(r"<main[^>]*>(.*?)</main>", _FLAGS)
HEADLINE_RE = re.compile(
    r'<h2[^>]*>\s*(?:<span[^>]*>\s*)?<span[^>]*class="mw-headline"[^>]*id="[^"]*"[^>]*>(.*?)</span>', _FLAGS
)
HEADING_RE = re.compile(r"<h[23][^>]*>(.*?)</h[23]>", _FLAGS)
PARAGRAPH_RE = re.compile(r"<p\b[^>]*>(.*?)</p>", _FLAGS)
LINK_RE = re.compile(r'<a\b[^>]*href="/wiki/([^"]+)"[^>]*title="[^"]*"[^>]*>(.*?)</a>', _FLAGS)


# --- Title -----------------------------------------------------------------------


def _first_heading(markup: str) -> str | None:
    match = TITLE_RE.search(markup)
    if not match:
        return None
    return clean_fragment(match.group(1)) or None


TITLE_STRATEGIES: tuple[Strategy[str], ...] = (Strategy("firstHeading", _first_heading),)


def extract_title(markup: str) -> str:
    result = first_success(TITLE_STRATEGIES, markup)
    return result.value if result.succeeded else DEFAULT_TITLE


# --- Content region --------------------------------------------------------------


def _content_text_region(markup: str) -> str | None:
    match = CONTENT_TEXT_RE.search(markup)
    return match.group(1) if match else None


def _main_region(markup: str) -> str | None:
    match = MAIN_RE.search(markup)
    return match.group(1) if match else None


REGION_STRATEGIES: tuple[Strategy[str], ...] = (
    Strategy("mw-content-text", _content_text_region),
    Strategy("main", _main_region),
    Strategy("document", lambda markup: markup),
)


def isolate_content_region(markup: str) -> str:
    """Return the substantive-prose part of the markup, or the whole document as a last resort."""
    result = first_success(REGION_STRATEGIES, markup)
    if result.strategy == "document":
        logger.debug("No content region marker found, using whole document", markup_length=len(markup))
    return result.value if result.succeeded else markup


# --- Sections --------------------------------------------------------------------


def _clean_headings(pattern: re.Pattern[str], region: str) -> list[str] | None:
    headings = [text for text in (clean_fragment(m.group(1)) for m in pattern.finditer(region)) if text]
    return headings[:MAX_SECTIONS] or None


SECTION_STRATEGIES: tuple[Strategy[list[str]], ...] = (
    Strategy("mw-headline", lambda region: _clean_headings(HEADLINE_RE, region)),
    Strategy("heading-levels", lambda region: _clean_headings(HEADING_RE, region)),
)


def extract_sections(region: str) -> list[str]:
    """Section titles in document order, at most 20.

    An empty list means neither strategy matched; no default list is applied
    here.
    """
    result = first_success(SECTION_STRATEGIES, region)
    if not result.succeeded:
        return []
    logger.debug("Extracted sections", strategy=result.strategy, section_count=len(result.value))
    return list(result.value)


# --- Paragraphs and summary ------------------------------------------------------


def extract_paragraphs(region: str) -> list[str]:
    """Paragraph texts longer than 50 characters, which drops captions and stubs."""
    paragraphs = (clean_fragment(m.group(1)) for m in PARAGRAPH_RE.finditer(region))
    return [paragraph for paragraph in paragraphs if len(paragraph) > MIN_PARAGRAPH_CHARS]


def build_summary(paragraphs: list[str]) -> str:
    summary = truncate_with_ellipsis(" ".join(paragraphs[:SUMMARY_PARAGRAPHS]), SUMMARY_MAX_CHARS)
    return summary or DEFAULT_SUMMARY


# --- Links -----------------------------------------------------------------------


def _link_text(slug: str, inner: str) -> str:
    text = clean_fragment(inner)
    return text or unquote(slug).replace("_", " ")


def extract_link_candidates(region: str) -> list[str]:
    """Visible text of internal article links, namespace pages excluded.

    At most 80 candidates are taken in document order before duplicates are
    removed, so the result may be shorter than 80 even on link-heavy pages.
    """
    candidates = [_link_text(m.group(1), m.group(2)) for m in LINK_RE.finditer(region)]
    kept = [text for text in candidates if ":" not in text and 1 < len(text) < MAX_LINK_CHARS]
    return list(dict.fromkeys(kept[:MAX_LINK_CANDIDATES]))


# --- Article ---------------------------------------------------------------------


@log_extraction_step("extract_article")
def extract_article(markup: str, url: str) -> ExtractedArticle:
    """Build an :class:`ExtractedArticle` from raw article markup.

    Structurally broken input degrades to defaults instead of raising.

    Args:
        markup: Raw HTML of the article page
        url: Source URL, carried through unchanged

    Returns:
        The extracted article
    """
    title = extract_title(markup)
    region = isolate_content_region(markup)
    sections = extract_sections(region)
    paragraphs = extract_paragraphs(region)
    candidates = extract_link_candidates(region)
    key_entities = classify_entities(candidates)

    plain_text = "\n\n".join(paragraphs) or title

    logger.info(
        "Extracted article content",
        url=url,
        title=title,
        section_count=len(sections),
        paragraph_count=len(paragraphs),
        link_candidates=len(candidates),
        people=len(key_entities.people),
        organizations=len(key_entities.organizations),
        locations=len(key_entities.locations),
    )

    return ExtractedArticle(
        url=url,
        title=title,
        summary=build_summary(paragraphs),
        sections=tuple(sections),
        paragraphs=tuple(paragraphs),
        key_entities=key_entities,
        plain_text=plain_text,
    )
