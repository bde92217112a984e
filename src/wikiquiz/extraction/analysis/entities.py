# ABOUTME: Lexical entity classifier for internal-link candidates
# ABOUTME: Buckets link text into people, organizations and locations with crude word rules

import re
from collections.abc import Iterable

from wikiquiz.core.models import KeyEntities

MAX_PER_CATEGORY = 10

ORGANIZATION_WORDS = (
    "University",
    "Institute",
    "Company",
    "Corporation",
    "Agency",
    "Committee",
    "Organization",
    "Park",
    "Laboratory",
    "Museum",
    "Library",
    "Foundation",
    "Trust",
    "School",
    "College",
)

LOCATION_WORDS = (
    "Kingdom",
    "United States",
    "England",
    "London",
    "France",
    "Germany",
    "Italy",
    "India",
    "China",
    "Japan",
    "City",
    "County",
    "Province",
    "State",
    "Region",
    "District",
    "Borough",
)

CAPITALIZED_WORD_RE = re.compile(r"\b[A-Z][a-z]+\b")


def _vocabulary_pattern(words: Iterable[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(word) for word in words)
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)


ORGANIZATION_RE = _vocabulary_pattern(ORGANIZATION_WORDS)
LOCATION_RE = _vocabulary_pattern(LOCATION_WORDS)


def looks_like_person(candidate: str) -> bool:
    # A capitalized word plus at least two space-separated tokens.
    return bool(CAPITALIZED_WORD_RE.search(candidate)) and len(candidate.split(" ")) >= 2


def looks_like_organization(candidate: str) -> bool:
    return bool(ORGANIZATION_RE.search(candidate))


def looks_like_location(candidate: str) -> bool:
    return bool(LOCATION_RE.search(candidate))


def _first_matching(candidates: list[str], predicate) -> list[str]:
    return [candidate for candidate in candidates if predicate(candidate)][:MAX_PER_CATEGORY]


def classify_entities(candidates: Iterable[str]) -> KeyEntities:
    """Partition link candidates into heuristic entity buckets.

    Categories are evaluated independently, so one candidate can appear in
    several of them. Duplicates are removed first and each bucket keeps at
    most ten entries in first-seen order. These are lexical guesses, not
    named-entity recognition.
    """
    unique = list(dict.fromkeys(candidates))
    return KeyEntities(
        people=_first_matching(unique, looks_like_person),
        organizations=_first_matching(unique, looks_like_organization),
        locations=_first_matching(unique, looks_like_location),
    )
