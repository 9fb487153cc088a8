from .arbiter import RequestArbiter
from .cache import AnswerCache, normalize_question
from .controls import ControlEvent, ControlState, Effect, transition
from .results import AskResult, LoadResult, Outcome
from .service import QueryService, clean_answer
from .state import SessionState

__all__ = [
    "AnswerCache",
    "AskResult",
    "ControlEvent",
    "ControlState",
    "Effect",
    "LoadResult",
    "Outcome",
    "QueryService",
    "RequestArbiter",
    "SessionState",
    "clean_answer",
    "normalize_question",
    "transition",
]
