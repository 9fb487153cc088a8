# tests/unit/generation/test_generation_options.py

from querypdf.generation.base import ANSWER_OPTIONS, SUMMARY_OPTIONS, GenerationOptions


def test_to_dict_drops_unset_fields() -> None:
    assert SUMMARY_OPTIONS.to_dict() == {
        "max_new_tokens": 150,
        "temperature": 0.7,
        "repetition_penalty": 1.5,
        "do_sample": True,
    }


def test_answer_preset() -> None:
    assert ANSWER_OPTIONS.to_dict() == {
        "max_new_tokens": 200,
        "temperature": 0.7,
        "top_k": 50,
        "top_p": 0.95,
        "repetition_penalty": 1.2,
        "do_sample": True,
    }


def test_greedy_options_have_zero_effective_temperature() -> None:
    assert GenerationOptions(do_sample=False).effective_temperature == 0.0
    assert GenerationOptions(temperature=0.3).effective_temperature == 0.3
