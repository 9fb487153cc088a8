# src/querypdf/quiz/extractor.py

"""Quiz scaffolding built from document sentences.

Every generated question is a statement check whose correct option is
always "A" and whose distractors are fixed text.
"""

import logging
import re
from dataclasses import dataclass, replace

from querypdf.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")

SEGMENT_SIZE = 800
MAX_SEGMENTS = 3
QUIZ_LENGTH = 3
MIN_SENTENCE_CHARS = 50
MAX_SENTENCE_CHARS = 200
STATEMENT_PREVIEW_CHARS = 80

LETTERS = ("A", "B", "C", "D")

STATEMENT_OPTIONS = (
    "Yes, this is stated in the document",
    "No, the document contradicts this",
    "The document does not discuss this topic",
    "This is only partially mentioned",
)


@dataclass(frozen=True)
class QuizQuestion:
    question: str
    options: tuple[str, str, str, str]
    correct_answer_letter: str = "A"

    def __post_init__(self) -> None:
        if len(self.options) != len(LETTERS):
            raise InvalidArgumentError("a quiz question needs exactly 4 options")
        if self.correct_answer_letter not in LETTERS:
            raise InvalidArgumentError(
                f"correct_answer_letter must be one of {', '.join(LETTERS)}"
            )


GENERIC_QUESTIONS = (
    QuizQuestion(
        question="Based on the document, what is the main topic discussed?",
        options=(
            "Topic A (from document)",
            "Unrelated topic B",
            "Unrelated topic C",
            "Unrelated topic D",
        ),
    ),
    QuizQuestion(
        question="What key information is presented in the document?",
        options=(
            "Key information from text",
            "Incorrect option B",
            "Incorrect option C",
            "Incorrect option D",
        ),
    ),
    QuizQuestion(
        question="Which statement best describes the document content?",
        options=(
            "Accurate description",
            "Inaccurate option B",
            "Inaccurate option C",
            "Inaccurate option D",
        ),
    ),
)


def text_segments(full_text: str) -> list[str]:
    """Up to three 800-char windows starting at multiples of len/4.

    Windows may overlap or leave gaps.
    """
    if not full_text:
        return []
    step = max(1, len(full_text) // 4)
    starts = range(0, len(full_text), step)[:MAX_SEGMENTS]
    return [full_text[i : i + SEGMENT_SIZE] for i in starts]


def meaningful_sentences(text: str, count: int = QUIZ_LENGTH) -> list[str]:
    sentences = (s.strip() for s in SENTENCE_PATTERN.findall(text))
    kept = [s for s in sentences if MIN_SENTENCE_CHARS < len(s) < MAX_SENTENCE_CHARS]
    return kept[:count]


def statement_question(sentence: str) -> QuizQuestion:
    preview = sentence[:STATEMENT_PREVIEW_CHARS]
    return QuizQuestion(
        question=f'According to the document: "{preview}..." - Is this statement accurate?',
        options=STATEMENT_OPTIONS,
    )


def build_quiz(full_text: str) -> list[QuizQuestion]:
    """Three questions drawn from the first segment of the document.

    Falls back to the generic questions when the segment has fewer than
    three usable sentences.
    """
    segments = text_segments(full_text)
    sentences = meaningful_sentences(segments[0]) if segments else []
    questions = [statement_question(s) for s in sentences]

    if len(questions) < QUIZ_LENGTH:
        logger.debug(
            "Only %d usable sentences, using generic questions", len(questions)
        )
        return list(GENERIC_QUESTIONS)
    return questions


def grade_answer(question: QuizQuestion, letter: str) -> bool:
    return letter.strip().upper() == question.correct_answer_letter


@dataclass(frozen=True)
class QuizAttempt:
    """Progress through one pass over a quiz. Immutable; answer() returns a new attempt."""

    questions: tuple[QuizQuestion, ...]
    index: int = 0
    score: int = 0

    @property
    def is_complete(self) -> bool:
        return self.index >= len(self.questions)

    @property
    def current(self) -> QuizQuestion | None:
        return None if self.is_complete else self.questions[self.index]

    def answer(self, letter: str) -> tuple["QuizAttempt", bool]:
        question = self.current
        if question is None:
            raise InvalidArgumentError("quiz is already complete")
        correct = grade_answer(question, letter)
        return (
            replace(self, index=self.index + 1, score=self.score + int(correct)),
            correct,
        )

    def retake(self) -> "QuizAttempt":
        return QuizAttempt(questions=self.questions)
