# ABOUTME: Tests for heuristic quiz synthesis
# ABOUTME: Option assembly, padding, fallback answers and structural quiz properties

import random

import pytest
from pydantic import ValidationError as PydanticValidationError

from wikiquiz.core.models import Difficulty, ExtractedArticle, KeyEntities, QuizQuestion, normalize_option
from wikiquiz.extraction.analysis.synthesizer import (
    DESCRIPTION_ANSWER,
    build_related_topics,
    generate_quiz,
    make_options,
)


def _article(**overrides) -> ExtractedArticle:
    fields = {
        "url": "https://en.wikipedia.org/wiki/Alan_Turing",
        "title": "Alan Turing",
        "summary": "Alan Mathison Turing was an English mathematician.",
        "sections": ("Early life", "Career"),
        "paragraphs": ("Alan Mathison Turing was an English mathematician.",),
        "key_entities": KeyEntities(
            people=["Alonzo Church"],
            organizations=["Princeton University"],
            locations=["United Kingdom"],
        ),
        "plain_text": "Alan Mathison Turing was an English mathematician.",
    }
    fields.update(overrides)
    return ExtractedArticle(**fields)


class TestMakeOptions:
    def test_empty_pool_pads_with_alternatives(self):
        options = make_options("Paris", [])

        assert len(options) == 4
        assert sorted(options) == ["Paris", "Paris (alternative)", "Paris (alternative)", "Paris (alternative)"]

    def test_takes_first_three_usable_distractors(self):
        options = make_options("Berlin", ["", "  ", "berlin", "Rome", "Madrid", "Vienna", "Oslo"])

        assert sorted(options) == ["Berlin", "Madrid", "Rome", "Vienna"]

    def test_partial_pool_is_padded(self):
        options = make_options("Wikipedia", ["NASA"])
        assert sorted(options) == ["NASA", "Wikipedia", "Wikipedia (alternative)", "Wikipedia (alternative)"]

    def test_seeded_rng_is_reproducible(self):
        pool = ["Overview", "Timeline", "References", "Appendix"]
        first = make_options("Career", pool, rng=random.Random(42))
        second = make_options("Career", pool, rng=random.Random(42))
        assert first == second


class TestGenerateQuiz:
    def test_structural_properties(self):
        generated = generate_quiz(_article())

        assert 1 <= len(generated.quiz) <= 8
        for question in generated.quiz:
            assert len(question.options) == 4
            assert all(option.strip() for option in question.options)
            assert normalize_option(question.answer) in {normalize_option(o) for o in question.options}

    def test_answers_come_from_the_article(self):
        quiz = generate_quiz(_article()).quiz

        assert [q.answer for q in quiz] == [
            "Early life",
            "Alonzo Church",
            "Princeton University",
            "United Kingdom",
            DESCRIPTION_ANSWER,
        ]
        assert [q.difficulty for q in quiz] == [
            Difficulty.EASY,
            Difficulty.EASY,
            Difficulty.MEDIUM,
            Difficulty.MEDIUM,
            Difficulty.HARD,
        ]
        assert quiz[0].question == 'Which section is present in the article "Alan Turing"?'
        assert quiz[0].explanation == 'The section list extracted from the page includes "Early life".'

    def test_fallback_answers_when_nothing_was_extracted(self):
        quiz = generate_quiz(_article(sections=(), key_entities=KeyEntities())).quiz

        assert [q.answer for q in quiz] == [
            "Introduction",
            "Alan Turing",
            "Wikipedia",
            "United Kingdom",
            DESCRIPTION_ANSWER,
        ]

    def test_description_question_has_three_real_distractors(self):
        quiz = generate_quiz(_article()).quiz
        assert sorted(quiz[-1].options) == sorted(
            [DESCRIPTION_ANSWER, "A news report", "A research paper", "A product manual"]
        )

    def test_related_topics(self):
        generated = generate_quiz(_article())
        assert generated.related_topics == [
            "Alonzo Church",
            "Princeton University",
            "United Kingdom",
            "Early life",
            "Career",
        ]


class TestRelatedTopics:
    def test_deduplicated_and_capped(self):
        entities = KeyEntities(
            people=[f"Person {i}" for i in range(10)],
            organizations=["Person 1", "Museum A"],
            locations=["City B"],
        )
        topics = build_related_topics(entities, ["History", "Legacy"])

        assert len(topics) == 12
        assert topics[:10] == [f"Person {i}" for i in range(10)]
        assert topics[10:] == ["Museum A", "City B"]


class TestQuizQuestionModel:
    def test_answer_must_be_an_option(self):
        with pytest.raises(PydanticValidationError):
            QuizQuestion(
                question="Q?",
                options=["a", "b", "c", "d"],
                answer="e",
                difficulty=Difficulty.EASY,
                explanation="x",
            )

    def test_answer_comparison_ignores_case_and_whitespace(self):
        question = QuizQuestion(
            question="Q?",
            options=["Paris", "b", "c", "d"],
            answer="  paris ",
            difficulty="easy",
            explanation="x",
        )
        assert question.difficulty is Difficulty.EASY

    def test_exactly_four_options(self):
        with pytest.raises(PydanticValidationError):
            QuizQuestion(question="Q?", options=["a", "b", "c"], answer="a", difficulty="easy", explanation="x")
