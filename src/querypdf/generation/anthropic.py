# src/querypdf/generation/anthropic.py

import logging
from time import monotonic
from typing import Any

from anthropic import NOT_GIVEN, APIError, AsyncAnthropic
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


class AnthropicGenerator(Generator):
    """Anthropic messages generator.

    Sends the prompt as a single user message. Transport-only retries.
    repetition_penalty has no Anthropic equivalent and is ignored.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "claude-3-5-haiku-latest",
        timeout: float = 30.0,
        max_retries: int = 3,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._client = AsyncAnthropic(api_key=api_key, timeout=timeout)
        self._model = model
        self._max_retries = max_retries
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized AnthropicGenerator with model=%s, timeout=%s",
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
        labels = {"provider": "anthropic", "model": self._model}

        logger.debug(
            "Calling Anthropic: model=%s, prompt_chars=%d, max_new_tokens=%d",
            self._model,
            len(prompt),
            options.max_new_tokens,
        )

        try:
            raw = await self._call_api(prompt=prompt, options=options)
        except APIError as e:
            self.metrics_hook.increment(names.GENERATION_ERRORS_TOTAL, labels=labels)
            logger.error("Anthropic generation failed: %s", e)
            raise ModelError(str(e)) from e

        elapsed_ms = 1000 * (monotonic() - start)
        # Content is a list of blocks; only text blocks carry output
        text = "".join(block.text for block in raw.content if block.type == "text")

        self.metrics_hook.record_latency(names.GENERATION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.GENERATION_REQUESTS_TOTAL, labels=labels)

        logger.info(
            "Anthropic generation: stop=%s, chars=%d, latency=%.0fms",
            raw.stop_reason,
            len(text),
            elapsed_ms,
        )
        return text

    async def _call_api(self, *, prompt: str, options: GenerationOptions) -> Any:
        """Call Anthropic API with transport-only retries."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=retry_if_exception_type(APIError),  # Transport only
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._client.messages.create(
                    model=self._model,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=options.effective_temperature,
                    top_k=options.top_k if options.top_k is not None else NOT_GIVEN,
                    top_p=options.top_p if options.top_p is not None else NOT_GIVEN,
                    max_tokens=options.max_new_tokens,
                )
