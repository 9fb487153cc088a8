from dataclasses import dataclass
from typing import Literal, Protocol

Stage = Literal["load", "ask", "summary", "quiz"]


@dataclass(frozen=True)
class ProgressEvent:
    """A checkpoint reached by a long-running operation.

    ``percent`` is None when the stage has no meaningful completion ratio.
    """

    stage: Stage
    message: str
    percent: int | None = None
    is_error: bool = False


class ProgressSink(Protocol):
    def report(self, event: ProgressEvent) -> None: ...


class NoOpProgressSink:
    def report(self, event: ProgressEvent) -> None:
        pass
