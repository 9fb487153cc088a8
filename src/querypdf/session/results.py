from dataclasses import dataclass
from enum import Enum

from querypdf.errors import QueryPDFError
from querypdf.loaders.models import Document


class Outcome(str, Enum):
    """What happened to the result of an arbitrated operation."""

    APPLIED = "applied"
    SUPERSEDED = "superseded"  # a newer operation started; result dropped
    FAILED = "failed"


@dataclass(frozen=True)
class AskResult:
    outcome: Outcome
    answer: str | None = None
    error: QueryPDFError | None = None
    cached: bool = False

    @classmethod
    def applied(cls, answer: str, cached: bool = False) -> "AskResult":
        return cls(outcome=Outcome.APPLIED, answer=answer, cached=cached)

    @classmethod
    def superseded(cls) -> "AskResult":
        return cls(outcome=Outcome.SUPERSEDED)

    @classmethod
    def failed(cls, error: QueryPDFError) -> "AskResult":
        return cls(outcome=Outcome.FAILED, error=error)


@dataclass(frozen=True)
class LoadResult:
    outcome: Outcome
    document: Document | None = None
