# ABOUTME: Markup normalizer for text fragments cut out of article markup
# ABOUTME: Citation stripping, tag removal, whitespace collapsing and ellipsis truncation

import re

CITATION_RE = re.compile(r"\[\d+\]")
WHITESPACE_RE = re.compile(r"\s+")
TAG_RE = re.compile(r"<[^>]+>")

ELLIPSIS = "…"


def strip_and_collapse(raw: str) -> str:
    """Remove ``[12]``-style citation markers and collapse whitespace runs to one space."""
    return WHITESPACE_RE.sub(" ", CITATION_RE.sub("", raw)).strip()


def strip_tags(raw: str) -> str:
    """Replace every markup tag with a space so adjacent words stay separated."""
    return TAG_RE.sub(" ", raw)


def clean_fragment(raw: str) -> str:
    return strip_and_collapse(strip_tags(raw))


def truncate_with_ellipsis(text: str, max_chars: int) -> str:
    """Normalize ``text`` and cut it down to at most ``max_chars`` characters.

    Text that already fits is returned unchanged. Longer text keeps its first
    ``max_chars - 1`` characters, right-trimmed, followed by a single ellipsis
    character. A non-positive ``max_chars`` leaves no room at all and yields
    an empty string.
    """
    normalized = strip_and_collapse(text)
    if len(normalized) <= max_chars:
        return normalized
    if max_chars <= 0:
        return ""
    return normalized[: max_chars - 1].rstrip() + ELLIPSIS
