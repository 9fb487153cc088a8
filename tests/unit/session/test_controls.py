import pytest

from querypdf.session.controls import (
    ControlEvent,
    ControlState,
    Effect,
    transition,
)


def run(*events: ControlEvent) -> ControlState:
    state = ControlState()
    for event in events:
        state, _ = transition(state, event)
    return state


class TestTransition:
    def test_upload_enabled_once_model_ready(self) -> None:
        assert not ControlState().can_upload

        state, effects = transition(ControlState(), ControlEvent.MODEL_READY)

        assert state.can_upload
        assert effects == (Effect("AI Model Loaded. Please upload a PDF."),)

    def test_ask_needs_model_and_document(self) -> None:
        assert not run(ControlEvent.MODEL_READY).can_ask
        assert run(
            ControlEvent.MODEL_READY,
            ControlEvent.LOAD_STARTED,
            ControlEvent.LOAD_FINISHED,
        ).can_ask

    def test_ask_disabled_while_asking(self) -> None:
        state = run(
            ControlEvent.MODEL_READY,
            ControlEvent.LOAD_STARTED,
            ControlEvent.LOAD_FINISHED,
            ControlEvent.ASK_STARTED,
        )

        assert not state.can_ask
        assert state.can_summarize

        state, _ = transition(state, ControlEvent.ASK_FINISHED)
        assert state.can_ask

    def test_new_upload_clears_running_operations(self) -> None:
        state = run(
            ControlEvent.MODEL_READY,
            ControlEvent.LOAD_STARTED,
            ControlEvent.LOAD_FINISHED,
            ControlEvent.SUMMARY_STARTED,
            ControlEvent.LOAD_STARTED,
        )

        assert state.loading
        assert not state.summarizing
        assert not state.document_loaded
        assert not state.can_upload

    def test_load_failure_reports_error(self) -> None:
        state = run(ControlEvent.MODEL_READY, ControlEvent.LOAD_STARTED)

        state, effects = transition(state, ControlEvent.LOAD_FAILED)

        assert state.can_upload
        assert not state.document_loaded
        assert effects[0].is_error

    def test_quiz_does_not_need_model(self) -> None:
        state = run(ControlEvent.LOAD_STARTED, ControlEvent.LOAD_FINISHED)

        assert state.can_quiz
        assert not state.can_summarize

    def test_transition_does_not_mutate_input(self) -> None:
        state = ControlState()

        transition(state, ControlEvent.MODEL_READY)

        assert not state.model_ready

    def test_unknown_event_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown control event"):
            transition(ControlState(), "bogus")  # type: ignore[arg-type]
