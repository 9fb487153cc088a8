import logging

logger = logging.getLogger(__name__)


def normalize_question(question: str) -> str:
    return question.strip().lower()


class AnswerCache:
    """Answers keyed by normalized question text.

    Entries live until clear(); there is no individual eviction.
    """

    def __init__(self) -> None:
        self._answers: dict[str, str] = {}

    def get(self, question: str) -> str | None:
        return self._answers.get(normalize_question(question))

    def put(self, question: str, answer: str) -> None:
        self._answers[normalize_question(question)] = answer
        logger.debug("Cached answer for %r", normalize_question(question))

    def clear(self) -> None:
        if self._answers:
            logger.debug("Clearing %d cached answers", len(self._answers))
        self._answers.clear()

    def __contains__(self, question: str) -> bool:
        return normalize_question(question) in self._answers

    def __len__(self) -> int:
        return len(self._answers)
