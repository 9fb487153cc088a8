import logging
from dataclasses import dataclass, field

from querypdf.loaders.models import Document
from querypdf.quiz.extractor import QuizQuestion

from .arbiter import RequestArbiter
from .cache import AnswerCache

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """All mutable state of one interactive session.

    Mutated only from the event loop thread. Async continuations capture
    tokens from the two arbiters and compare them on completion instead of
    taking locks.
    """

    document: Document | None = None
    ask_arbiter: RequestArbiter = field(default_factory=lambda: RequestArbiter("ask"))
    load_arbiter: RequestArbiter = field(
        default_factory=lambda: RequestArbiter("processing")
    )
    answers: AnswerCache = field(default_factory=AnswerCache)
    summary_text: str | None = None
    quiz_questions: list[QuizQuestion] = field(default_factory=list)

    @property
    def has_document(self) -> bool:
        return self.document is not None and not self.document.is_empty

    def begin_load(self) -> int:
        """Start a document load and drop everything derived from the old one.

        In-flight asks are superseded so they cannot write into the fresh
        cache.
        """
        processing_id = self.load_arbiter.issue()
        self.document = None
        self.summary_text = None
        self.quiz_questions = []
        self.answers.clear()
        self.ask_arbiter.invalidate()
        logger.debug("Session reset for processing id %d", processing_id)
        return processing_id
