# Chunking
from .chunking import Chunk, chunk_text

# Config
from .config import PipelineConfig

# Errors
from .errors import (
    AnswerTooShortError,
    DocumentLoadError,
    InsufficientContentError,
    InvalidArgumentError,
    ModelError,
    ModelNotReadyError,
    NoDocumentError,
    NoRelevantContextError,
    NoSummarizableContentError,
    QueryPDFError,
    TooShortError,
)

# Generation
from .generation import (
    ANSWER_OPTIONS,
    SUMMARY_OPTIONS,
    GenerationOptions,
    Generator,
    GeneratorConfig,
    create_generator,
)

# Loaders
from .loaders import Document, DocumentLoader, PdfLoader, TextLoader

# Observability
from .observability import (
    InMemoryMetricsHook,
    MetricsHook,
    NoOpMetricsHook,
    NoOpProgressSink,
    ProgressEvent,
    ProgressSink,
)

# Prompts
from .prompts import Prompt, PromptsLibrary

# Quiz
from .quiz import QuizAttempt, QuizQuestion, build_quiz

# Retrieval
from .retrieval import ScoredChunk, find_context

# Session
from .session import (
    AnswerCache,
    AskResult,
    LoadResult,
    Outcome,
    QueryService,
    RequestArbiter,
    SessionState,
)

# Summarization
from .summarization import build_summary

__all__ = [
    # Chunking
    "Chunk",
    "chunk_text",
    # Config
    "PipelineConfig",
    # Errors
    "AnswerTooShortError",
    "DocumentLoadError",
    "InsufficientContentError",
    "InvalidArgumentError",
    "ModelError",
    "ModelNotReadyError",
    "NoDocumentError",
    "NoRelevantContextError",
    "NoSummarizableContentError",
    "QueryPDFError",
    "TooShortError",
    # Generation
    "ANSWER_OPTIONS",
    "SUMMARY_OPTIONS",
    "GenerationOptions",
    "Generator",
    "GeneratorConfig",
    "create_generator",
    # Loaders
    "Document",
    "DocumentLoader",
    "PdfLoader",
    "TextLoader",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    "NoOpProgressSink",
    "ProgressEvent",
    "ProgressSink",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    # Quiz
    "QuizAttempt",
    "QuizQuestion",
    "build_quiz",
    # Retrieval
    "ScoredChunk",
    "find_context",
    # Session
    "AnswerCache",
    "AskResult",
    "LoadResult",
    "Outcome",
    "QueryService",
    "RequestArbiter",
    "SessionState",
    # Summarization
    "build_summary",
]
