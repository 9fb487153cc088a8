# src/querypdf/generation/openai.py

import logging
from time import monotonic
from typing import Any

from openai import NOT_GIVEN, AsyncOpenAI, OpenAIError
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from querypdf.errors import ModelError
from querypdf.observability import names
from querypdf.observability.base import MetricsHook, NoOpMetricsHook

from .base import GenerationOptions, Generator

logger = logging.getLogger(__name__)


class OpenAIGenerator(Generator):
    """OpenAI chat-completions generator.

    Sends the prompt as a single user message. Transport-only retries.
    top_k and repetition_penalty have no OpenAI equivalent and are ignored.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o-mini",
        timeout: float = 30.0,
        max_retries: int = 3,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout)
        self._model = model
        self._max_retries = max_retries
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized OpenAIGenerator with model=%s, timeout=%s",
            model,
            timeout,
        )

    def is_ready(self) -> bool:
        return True

    async def generate(
        self,
        prompt: str,
        options: GenerationOptions = GenerationOptions(),
    ) -> str:
        start = monotonic()
        labels = {"provider": "openai", "model": self._model}

        logger.debug(
            "Calling OpenAI: model=%s, prompt_chars=%d, max_new_tokens=%d",
            self._model,
            len(prompt),
            options.max_new_tokens,
        )

        try:
            raw = await self._call_api(prompt=prompt, options=options)
        except OpenAIError as e:
            self.metrics_hook.increment(names.GENERATION_ERRORS_TOTAL, labels=labels)
            logger.error("OpenAI generation failed: %s", e)
            raise ModelError(str(e)) from e

        elapsed_ms = 1000 * (monotonic() - start)
        text = raw.choices[0].message.content or ""

        self.metrics_hook.record_latency(names.GENERATION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.GENERATION_REQUESTS_TOTAL, labels=labels)

        logger.info(
            "OpenAI generation: finish=%s, chars=%d, latency=%.0fms",
            raw.choices[0].finish_reason,
            len(text),
            elapsed_ms,
        )
        return text

    async def _call_api(self, *, prompt: str, options: GenerationOptions) -> Any:
        """Call OpenAI API with transport-only retries."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=retry_if_exception_type(OpenAIError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._client.chat.completions.create(
                    model=self._model,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=options.effective_temperature,
                    top_p=options.top_p if options.top_p is not None else NOT_GIVEN,
                    max_tokens=options.max_new_tokens,
                )
