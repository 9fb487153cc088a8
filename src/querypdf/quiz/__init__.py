from .extractor import (
    GENERIC_QUESTIONS,
    QuizAttempt,
    QuizQuestion,
    build_quiz,
    grade_answer,
    meaningful_sentences,
    text_segments,
)

__all__ = [
    "GENERIC_QUESTIONS",
    "QuizAttempt",
    "QuizQuestion",
    "build_quiz",
    "grade_answer",
    "meaningful_sentences",
    "text_segments",
]
