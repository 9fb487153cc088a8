# src/querypdf/errors.py

"""Error taxonomy for querypdf.

Validation errors are raised before any generator call. Generator failures
are wrapped in ModelError at the orchestration boundary. Supersession is
never raised: it is reported as an Outcome value.
"""


class QueryPDFError(Exception):
    """Base class for all querypdf errors."""


class InvalidArgumentError(QueryPDFError, ValueError):
    """Malformed argument, e.g. a non-positive chunk size."""


class InsufficientContentError(QueryPDFError):
    """Document text is too small to work with."""


class NoSummarizableContentError(QueryPDFError):
    """No chunk of the document produced a usable summary."""


class NoRelevantContextError(QueryPDFError):
    """No usable context could be found for a question."""


class AnswerTooShortError(QueryPDFError):
    """Generated answer is empty or too short after cleanup."""


class TooShortError(QueryPDFError):
    """Question is too short to be asked."""


class NoDocumentError(QueryPDFError):
    """Operation requires a loaded document."""


class ModelNotReadyError(QueryPDFError):
    """Generator has not finished loading."""


class DocumentLoadError(QueryPDFError):
    """Document could not be read or its text extracted."""


class ModelError(QueryPDFError):
    """Generator call failed.

    The original exception is kept as ``__cause__``; ``user_message`` is the
    wrapper text to show to a user.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.user_message = f"Text generation failed: {message}"
