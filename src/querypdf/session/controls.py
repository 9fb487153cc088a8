# src/querypdf/session/controls.py

"""Control state of an interactive front end as a pure transition function.

``transition(state, event)`` returns the next state and the effects a thin
adapter should apply (status messages). Nothing here touches a UI.
"""

from dataclasses import dataclass, replace
from enum import Enum


class ControlEvent(str, Enum):
    MODEL_READY = "model_ready"
    LOAD_STARTED = "load_started"
    LOAD_FINISHED = "load_finished"
    LOAD_FAILED = "load_failed"
    ASK_STARTED = "ask_started"
    ASK_FINISHED = "ask_finished"
    SUMMARY_STARTED = "summary_started"
    SUMMARY_FINISHED = "summary_finished"
    QUIZ_STARTED = "quiz_started"
    QUIZ_FINISHED = "quiz_finished"


@dataclass(frozen=True)
class Effect:
    """A status message for the adapter to show."""

    message: str
    is_error: bool = False


@dataclass(frozen=True)
class ControlState:
    model_ready: bool = False
    document_loaded: bool = False
    loading: bool = False
    asking: bool = False
    summarizing: bool = False
    quiz_generating: bool = False

    @property
    def can_upload(self) -> bool:
        return self.model_ready and not self.loading

    @property
    def can_ask(self) -> bool:
        return self.model_ready and self.document_loaded and not self.asking

    @property
    def can_summarize(self) -> bool:
        return self.model_ready and self.document_loaded and not self.summarizing

    @property
    def can_quiz(self) -> bool:
        return self.document_loaded and not self.quiz_generating


_STATUS = {
    ControlEvent.MODEL_READY: "AI Model Loaded. Please upload a PDF.",
    ControlEvent.LOAD_STARTED: "Reading PDF...",
    ControlEvent.LOAD_FINISHED: "PDF Ready!",
    ControlEvent.ASK_STARTED: "Searching document for relevant information...",
    ControlEvent.SUMMARY_STARTED: "Generating comprehensive summary...",
    ControlEvent.QUIZ_STARTED: "Generating quiz...",
    ControlEvent.QUIZ_FINISHED: "Quiz ready.",
}


def transition(
    state: ControlState, event: ControlEvent
) -> tuple[ControlState, tuple[Effect, ...]]:
    if event is ControlEvent.MODEL_READY:
        new_state = replace(state, model_ready=True)
    elif event is ControlEvent.LOAD_STARTED:
        # A new upload discards the old document and every running operation
        new_state = replace(
            state,
            loading=True,
            document_loaded=False,
            asking=False,
            summarizing=False,
            quiz_generating=False,
        )
    elif event is ControlEvent.LOAD_FINISHED:
        new_state = replace(state, loading=False, document_loaded=True)
    elif event is ControlEvent.LOAD_FAILED:
        return (
            replace(state, loading=False, document_loaded=False),
            (Effect("Error processing PDF", is_error=True),),
        )
    elif event is ControlEvent.ASK_STARTED:
        new_state = replace(state, asking=True)
    elif event is ControlEvent.ASK_FINISHED:
        new_state = replace(state, asking=False)
    elif event is ControlEvent.SUMMARY_STARTED:
        new_state = replace(state, summarizing=True)
    elif event is ControlEvent.SUMMARY_FINISHED:
        new_state = replace(state, summarizing=False)
    elif event is ControlEvent.QUIZ_STARTED:
        new_state = replace(state, quiz_generating=True)
    elif event is ControlEvent.QUIZ_FINISHED:
        new_state = replace(state, quiz_generating=False)
    else:
        raise ValueError(f"Unknown control event: {event}")

    status = _STATUS.get(event)
    effects = (Effect(status),) if status else ()
    return new_state, effects
