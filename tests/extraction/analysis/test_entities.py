# ABOUTME: Tests for the lexical entity classifier
# ABOUTME: Covers bucket rules, first-seen ordering, deduplication and the per-category cap

import pytest

from wikiquiz.extraction.analysis.entities import (
    MAX_PER_CATEGORY,
    classify_entities,
    looks_like_location,
    looks_like_organization,
    looks_like_person,
)


class TestRules:
    @pytest.mark.parametrize(
        "candidate,expected",
        [
            ("Ada Lovelace", True),
            ("John von Neumann", True),
            ("Paris", False),
            ("computer science", False),
            ("IBM", False),
        ],
    )
    def test_person_rule(self, candidate, expected):
        assert looks_like_person(candidate) is expected

    @pytest.mark.parametrize(
        "candidate,expected",
        [
            ("University of Cambridge", True),
            ("national park", True),
            ("Bletchley Park", True),
            ("Parkinson's disease", False),
            ("Schooling", False),
        ],
    )
    def test_organization_rule_matches_whole_words(self, candidate, expected):
        assert looks_like_organization(candidate) is expected

    @pytest.mark.parametrize(
        "candidate,expected",
        [
            ("United Kingdom", True),
            ("New York City", True),
            ("london", True),
            ("Kingdomware", False),
            ("Alan Turing", False),
        ],
    )
    def test_location_rule(self, candidate, expected):
        assert looks_like_location(candidate) is expected


class TestClassifyEntities:
    def test_categories_are_independent(self):
        entities = classify_entities(["University of Manchester", "Paris"])

        assert entities.people == ["University of Manchester"]
        assert entities.organizations == ["University of Manchester"]
        assert entities.locations == []

    def test_duplicates_are_removed(self):
        entities = classify_entities(["Ada Lovelace", "Ada Lovelace", "Charles Babbage"])
        assert entities.people == ["Ada Lovelace", "Charles Babbage"]

    def test_cap_keeps_first_seen_order(self):
        candidates = [f"Person Number{chr(ord('a') + i)}" for i in range(15)]
        entities = classify_entities(candidates)

        assert len(entities.people) == MAX_PER_CATEGORY
        assert entities.people == candidates[:MAX_PER_CATEGORY]

    def test_empty_input(self):
        entities = classify_entities([])
        assert entities.people == entities.organizations == entities.locations == []
