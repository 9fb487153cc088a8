# src/querypdf/session/service.py

"""Ask, summarize and quiz operations over one loaded document.

Concurrency model:
- Single event loop, no locks; state lives in SessionState
- Overlapping generator calls are allowed; only visible results are arbitrated
- The latest ask wins; older asks report SUPERSEDED and never touch the cache
- A newer document load supersedes an older one still extracting text
"""

import asyncio
import logging
import re
from time import monotonic

from querypdf.config import PipelineConfig
from querypdf.errors import (
    AnswerTooShortError,
    ModelError,
    ModelNotReadyError,
    NoDocumentError,
    NoRelevantContextError,
    QueryPDFError,
    TooShortError,
)
from querypdf.generation.base import ANSWER_OPTIONS, SUMMARY_OPTIONS, Generator
from querypdf.loaders.base import DocumentLoader, Source
from querypdf.loaders.models import Document
from querypdf.observability import names
from querypdf.observability.base import MetricsHook, NoOpMetricsHook
from querypdf.observability.progress import (
    NoOpProgressSink,
    ProgressEvent,
    ProgressSink,
    Stage,
)
from querypdf.prompts.prompts_library import PromptsLibrary
from querypdf.quiz.extractor import QuizQuestion, build_quiz
from querypdf.retrieval.relevance import find_context
from querypdf.summarization.sampler import build_summary, extract_key_sentences

from .results import AskResult, LoadResult, Outcome
from .state import SessionState

logger = logging.getLogger(__name__)

ANSWER_PROMPT = ("answer", "1.0")
SUMMARIZE_PROMPT = ("summarize", "1.0")

ANSWER_LABEL = re.compile(r"^Answer:\s*", re.IGNORECASE)
SUMMARIZE_ECHO = re.compile(r"^summarize:\s*", re.IGNORECASE)
WHITESPACE = re.compile(r"\s+")

REFUSAL_MARKERS = ("i cannot", "i don't know")
REFUSAL_PREFIX = "Based on the available content in the document: "


def clean_answer(raw: str) -> str:
    """Drop a leading "Answer:" label and collapse whitespace."""
    answer = ANSWER_LABEL.sub("", raw.strip())
    return WHITESPACE.sub(" ", answer).strip()


class QueryService:
    """Orchestrates the three user-facing operations over a session.

    Example:
        >>> service = QueryService(generator)
        >>> await service.load_document(PdfLoader(), "paper.pdf")
        >>> result = await service.ask("What is the main finding?")
        >>> if result.outcome is Outcome.APPLIED:
        ...     print(result.answer)
    """

    def __init__(
        self,
        generator: Generator,
        *,
        config: PipelineConfig = PipelineConfig(),
        prompts: PromptsLibrary | None = None,
        state: SessionState | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
        progress: ProgressSink = NoOpProgressSink(),
    ) -> None:
        self.generator = generator
        self.config = config
        self.prompts = prompts or PromptsLibrary()
        self.state = state or SessionState()
        self.metrics_hook = metrics_hook
        self.progress = progress

    # ------------------------------------------------------------------
    # Document loading
    # ------------------------------------------------------------------

    async def load_document(self, loader: DocumentLoader, source: Source) -> LoadResult:
        """Load a new document, replacing the current one.

        The blocking loader runs in a worker thread. If another load starts
        before this one finishes, this one returns SUPERSEDED and leaves the
        session alone.

        Raises:
            DocumentLoadError: The loader could not read the file.
        """
        processing_id = self.state.begin_load()
        self._report("load", "Reading document...", percent=0)
        start = monotonic()

        try:
            document = await asyncio.to_thread(loader.load, source)
        except QueryPDFError:
            if not self.state.load_arbiter.is_current(processing_id):
                logger.info("Failed document load %d was superseded", processing_id)
                return LoadResult(outcome=Outcome.SUPERSEDED)
            self._report("load", "Error processing document", is_error=True)
            raise

        if not self.state.load_arbiter.is_current(processing_id):
            logger.info("Document load %d superseded, discarding", processing_id)
            self.metrics_hook.increment(names.DOCUMENT_LOADS_SUPERSEDED_TOTAL)
            return LoadResult(outcome=Outcome.SUPERSEDED)

        self.state.document = document
        self.metrics_hook.record_latency(
            names.DOCUMENT_LOAD_DURATION, 1000 * (monotonic() - start)
        )
        logger.info(
            "Document ready: pages=%d, characters=%d, words=%d",
            document.page_count,
            document.char_count,
            document.word_count,
        )
        self._report(
            "load",
            f"Document ready: {document.page_count} pages, "
            f"{document.char_count} characters, {document.word_count} words",
            percent=100,
        )
        if document.char_count < self.config.min_document_chars:
            logger.warning(
                "Very little text extracted (%d chars). "
                "Document might be image-based or encrypted.",
                document.char_count,
            )
            self._report(
                "load",
                "Warning: Limited text found. Document may contain mostly images.",
                is_error=True,
            )
        return LoadResult(outcome=Outcome.APPLIED, document=document)

    # ------------------------------------------------------------------
    # Ask
    # ------------------------------------------------------------------

    async def ask(self, question: str) -> AskResult:
        """Answer a question about the loaded document.

        Returns:
            APPLIED with the answer (``cached=True`` on a cache hit),
            SUPERSEDED if a newer ask started meanwhile, or FAILED with the
            error if this ask is still the latest.

        Raises:
            TooShortError: Question shorter than 3 chars after trimming.
            NoDocumentError: No document loaded.
            ModelNotReadyError: Generator not ready.
        """
        question = question.strip()
        if len(question) < self.config.min_question_chars:
            raise TooShortError("Please ask a question (at least 3 characters).")
        self._document()
        self._require_generator()

        self.metrics_hook.increment(names.ASK_REQUESTS_TOTAL)
        cached = self.state.answers.get(question)
        if cached is not None:
            logger.debug("Answer retrieved from cache")
            self.metrics_hook.increment(names.ASK_CACHE_HITS_TOTAL)
            self._report("ask", "Answer retrieved from cache")
            return AskResult.applied(cached, cached=True)

        token = self.state.ask_arbiter.issue()
        start = monotonic()
        try:
            answer = await self._answer(question)
        except QueryPDFError as e:
            return self._finish_failed_ask(token, e)
        except Exception as e:
            return self._finish_failed_ask(token, ModelError(str(e)))

        if not self.state.ask_arbiter.is_current(token):
            return self._superseded(token)

        self.state.answers.put(question, answer)
        self.metrics_hook.record_latency(
            names.ASK_DURATION, 1000 * (monotonic() - start)
        )
        self._report("ask", "Answer complete! Ask another question.")
        return AskResult.applied(answer)

    async def _answer(self, question: str) -> str:
        document = self._document()

        self._report("ask", "Searching document for relevant information...")
        context = find_context(
            document.raw_text,
            question,
            self.config.ask_context_chars,
            chunk_size=document.chunk_size_default,
            metrics_hook=self.metrics_hook,
        )
        if len(context) < self.config.min_context_chars:
            raise NoRelevantContextError(
                "Could not find relevant information in the document for this question."
            )

        self._report(
            "ask",
            f"Found relevant content, generating answer from {len(context)} characters...",
        )
        prompt = self.prompts.render(
            *ANSWER_PROMPT,
            question=question,
            context=context[: self.config.prompt_context_chars],
        )
        answer = clean_answer(await self.generator.generate(prompt, ANSWER_OPTIONS))

        if len(answer) < self.config.min_answer_chars:
            raise AnswerTooShortError("Generated answer is too short or empty.")
        lowered = answer.lower()
        if any(marker in lowered for marker in REFUSAL_MARKERS):
            answer = REFUSAL_PREFIX + answer
        return answer

    def _finish_failed_ask(self, token: int, error: QueryPDFError) -> AskResult:
        if not self.state.ask_arbiter.is_current(token):
            return self._superseded(token)
        logger.warning("Q&A failed: %s", error)
        self.metrics_hook.increment(names.ASK_FAILED_TOTAL)
        message = error.user_message if isinstance(error, ModelError) else str(error)
        self._report("ask", f"Failed to generate answer: {message}", is_error=True)
        return AskResult.failed(error)

    def _superseded(self, token: int) -> AskResult:
        logger.debug("Ask %d superseded, discarding result", token)
        self.metrics_hook.increment(names.ASK_SUPERSEDED_TOTAL)
        return AskResult.superseded()

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    async def summarize(self) -> str:
        """Summarize the whole document, reusing a previous summary.

        Raises:
            NoDocumentError: No document loaded.
            ModelNotReadyError: Generator not ready.
            InsufficientContentError: Document text too short.
            NoSummarizableContentError: Nothing summarizable was found.
        """
        if self.state.summary_text is not None:
            logger.debug("Returning cached summary")
            return self.state.summary_text
        document = self._document()
        self._require_generator()
        processing_id = self.state.load_arbiter.current

        self._report("summary", "Generating comprehensive summary...", percent=0)
        summary = await build_summary(
            document.raw_text,
            extract_key_sentences,
            self._summarize_section,
            config=self.config,
            metrics_hook=self.metrics_hook,
            progress=self.progress,
        )

        if self.state.load_arbiter.is_current(processing_id):
            self.state.summary_text = summary
            self._report("summary", "Document summary generated", percent=100)
        else:
            logger.info("Document reloaded during summary, not storing it")
        return summary

    async def _summarize_section(self, text: str) -> str:
        prompt = self.prompts.render(
            *SUMMARIZE_PROMPT, text=text[: self.config.summary_prompt_chars]
        )
        generated = (await self.generator.generate(prompt, SUMMARY_OPTIONS)).strip()
        return SUMMARIZE_ECHO.sub("", generated).strip()

    # ------------------------------------------------------------------
    # Quiz
    # ------------------------------------------------------------------

    def quiz(self, regenerate: bool = False) -> list[QuizQuestion]:
        """Quiz questions for the document, built once and then reused.

        Raises:
            NoDocumentError: No document loaded.
        """
        if self.state.quiz_questions and not regenerate:
            return list(self.state.quiz_questions)
        document = self._document()
        self._report("quiz", "Generating quiz questions...")
        self.state.quiz_questions = build_quiz(document.raw_text)
        self._report("quiz", "Quiz ready.")
        return list(self.state.quiz_questions)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _document(self) -> Document:
        document = self.state.document
        if document is None or document.is_empty:
            raise NoDocumentError("Please upload and process a document first.")
        return document

    def _require_generator(self) -> None:
        if not self.generator.is_ready():
            raise ModelNotReadyError(
                "AI model not ready. Please wait for initialization to complete."
            )

    def _report(
        self,
        stage: Stage,
        message: str,
        percent: int | None = None,
        is_error: bool = False,
    ) -> None:
        self.progress.report(
            ProgressEvent(
                stage=stage,
                message=message,
                percent=percent,
                is_error=is_error,
            )
        )
