# ABOUTME: Heuristic multiple-choice quiz synthesis from an extracted article
# ABOUTME: Fixed question slots, answer plus distractor assembly, shuffled options

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from wikiquiz.core.models import Difficulty, ExtractedArticle, GeneratedQuiz, KeyEntities, QuizQuestion, normalize_option
from wikiquiz.utils.logging import get_logger

logger = get_logger(__name__)

OPTION_COUNT = 4
MAX_QUESTIONS = 8
MAX_RELATED_TOPICS = 12


@dataclass(frozen=True, slots=True)
class QuestionTemplate:
    """One fixed question slot: prompt, difficulty, distractors and explanation."""

    prompt: str
    difficulty: Difficulty
    distractors: tuple[str, ...]
    explanation: str


SECTION_QUESTION = QuestionTemplate(
    prompt='Which section is present in the article "{title}"?',
    difficulty=Difficulty.EASY,
    distractors=("Overview", "Timeline", "References", "Appendix"),
    explanation='The section list extracted from the page includes "{answer}".',
)
PERSON_QUESTION = QuestionTemplate(
    prompt='Which of the following is mentioned as a key person related to "{title}"?',
    difficulty=Difficulty.EASY,
    distractors=("Ada Lovelace", "Isaac Newton", "Marie Curie", "Nikola Tesla"),
    explanation="Extracted from linked entities on the article page.",
)
ORGANIZATION_QUESTION = QuestionTemplate(
    prompt='Which organization is associated with the article content about "{title}"?',
    difficulty=Difficulty.MEDIUM,
    distractors=("NASA", "UNESCO", "World Bank", "CERN"),
    explanation="Derived from entities/links found on the page.",
)
LOCATION_QUESTION = QuestionTemplate(
    prompt='Which location is connected to "{title}" according to the extracted entities?',
    difficulty=Difficulty.MEDIUM,
    distractors=("Canada", "Australia", "Brazil", "South Africa"),
    explanation="Derived from entities/links found on the page.",
)
DESCRIPTION_QUESTION = QuestionTemplate(
    prompt='What best describes the article "{title}"?',
    difficulty=Difficulty.HARD,
    distractors=("A news report", "A research paper", "A product manual"),
    explanation="This quiz is generated from the article's extracted summary text.",
)

DEFAULT_SECTION = "Introduction"
DEFAULT_ORGANIZATION = "Wikipedia"
DEFAULT_LOCATION = "United Kingdom"
DESCRIPTION_ANSWER = "A Wikipedia article summary"


def build_related_topics(key_entities: KeyEntities, sections: Iterable[str]) -> list[str]:
    """People, organizations, locations, then sections; deduplicated, at most 12."""
    combined = [*key_entities.people, *key_entities.organizations, *key_entities.locations, *sections]
    return list(dict.fromkeys(topic for topic in combined if topic))[:MAX_RELATED_TOPICS]


def make_options(
    correct: str, distractor_pool: Sequence[str], rng: random.Random | None = None
) -> list[str]:
    """Assemble exactly four shuffled options containing ``correct``.

    Up to three distractors are taken from the pool in order, skipping empty
    values and anything equal to the answer. When the pool runs short the
    list is padded with ``"<correct> (alternative)"``, which can repeat; that
    is the inherited padding rule, not a bug to paper over here.

    Args:
        correct: The right answer
        distractor_pool: Candidate wrong answers, in preference order
        rng: Random source for the shuffle; the module-level source when None

    Returns:
        Four options in random order
    """
    correct_key = normalize_option(correct)
    pool = [d for d in distractor_pool if d and d.strip() and normalize_option(d) != correct_key]
    options = [correct, *pool[: OPTION_COUNT - 1]]
    while len(options) < OPTION_COUNT:
        options.append(f"{correct} (alternative)")

    # random.shuffle is a Fisher-Yates permutation
    (rng or random).shuffle(options)
    return options


def _question(template: QuestionTemplate, title: str, answer: str, rng: random.Random | None) -> QuizQuestion:
    return QuizQuestion(
        question=template.prompt.format(title=title),
        options=make_options(answer, template.distractors, rng),
        answer=answer,
        difficulty=template.difficulty,
        explanation=template.explanation.format(answer=answer),
    )


def generate_quiz(article: ExtractedArticle, rng: random.Random | None = None) -> GeneratedQuiz:
    """Synthesize the fixed question set and related topics for an article.

    Fact selection is deterministic; only option order is random. Every slot
    has a fallback answer, so a well-formed article always yields five
    questions.

    Args:
        article: Extracted article content
        rng: Optional random source, injectable for reproducible tests

    Returns:
        The generated quiz with at most eight questions
    """
    title = article.title
    entities = article.key_entities

    section = article.sections[0] if article.sections else DEFAULT_SECTION
    person = entities.people[0] if entities.people else title
    organization = entities.organizations[0] if entities.organizations else DEFAULT_ORGANIZATION
    location = entities.locations[0] if entities.locations else DEFAULT_LOCATION

    quiz = [
        _question(SECTION_QUESTION, title, section, rng),
        _question(PERSON_QUESTION, title, person, rng),
        _question(ORGANIZATION_QUESTION, title, organization, rng),
        _question(LOCATION_QUESTION, title, location, rng),
        _question(DESCRIPTION_QUESTION, title, DESCRIPTION_ANSWER, rng),
    ]

    related_topics = build_related_topics(entities, article.sections)

    logger.debug(
        "Synthesized quiz",
        title=title,
        question_count=len(quiz),
        related_topics=len(related_topics),
    )

    return GeneratedQuiz(quiz=quiz[:MAX_QUESTIONS], related_topics=related_topics)
