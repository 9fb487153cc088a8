# tests/unit/generation/test_generator_factory.py

from unittest.mock import patch

import pytest

from querypdf.generation import GeneratorConfig, create_generator
from querypdf.generation.anthropic import AnthropicGenerator
from querypdf.generation.local import LocalGenerator
from querypdf.generation.openai import OpenAIGenerator


class TestFactory:
    def test_create_openai_generator(self) -> None:
        with patch("querypdf.generation.openai.AsyncOpenAI"):
            config = GeneratorConfig(provider="openai", model="gpt-4o", api_key="test")
            generator = create_generator(config)
            assert isinstance(generator, OpenAIGenerator)

    def test_create_anthropic_generator(self) -> None:
        with patch("querypdf.generation.anthropic.AsyncAnthropic"):
            config = GeneratorConfig(
                provider="anthropic", model="claude-3-5-haiku-latest", api_key="test"
            )
            generator = create_generator(config)
            assert isinstance(generator, AnthropicGenerator)

    def test_create_local_generator_is_not_loaded(self) -> None:
        config = GeneratorConfig(provider="local", model="google/flan-t5-small")

        generator = create_generator(config)

        assert isinstance(generator, LocalGenerator)
        assert not generator.is_ready()

    def test_unknown_provider_raises(self) -> None:
        config = GeneratorConfig(provider="unknown", model="model")  # type: ignore
        with pytest.raises(ValueError, match="Unknown generator provider"):
            create_generator(config)

    def test_config_values_passed_through(self) -> None:
        with patch("querypdf.generation.openai.AsyncOpenAI") as mock_openai:
            config = GeneratorConfig(
                provider="openai",
                model="gpt-4-turbo",
                api_key="my-key",
                timeout=60.0,
                max_retries=5,
            )
            generator = create_generator(config)

            assert generator._model == "gpt-4-turbo"
            assert generator._max_retries == 5
            mock_openai.assert_called_once_with(api_key="my-key", timeout=60.0)
