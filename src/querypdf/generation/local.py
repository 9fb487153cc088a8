# src/querypdf/generation/local.py

from __future__ import annotations

import asyncio
import logging
from time import monotonic
from typing import Any

from transformers import AutoModelForSeq2SeqLM, AutoTokenizer

from querypdf.errors import ModelError, ModelNotReadyError
from querypdf.observability import names
from querypdf.observability.base import MetricsHook, NoOpMetricsHook

from .base import GenerationOptions, Generator

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "google/flan-t5-small"

WARMUP_PROMPT = "Test warmup"
WARMUP_OPTIONS = GenerationOptions(max_new_tokens=5, do_sample=False)


class LocalGenerator(Generator):
    """
    Local seq2seq generator using transformers.

    This is a thin wrapper:
    - weights are loaded by load(), not in the constructor
    - blocking model calls run in a worker thread
    - no caching
    - no locking; concurrent calls run concurrently
    """

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL,
        device: int | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._model_name = model_name
        self._device = device
        self._tokenizer: Any = None
        self._model: Any = None
        self.metrics_hook = metrics_hook

    def is_ready(self) -> bool:
        return self._model is not None and self._tokenizer is not None

    async def load(self) -> None:
        """Load weights, then run one warmup generation.

        A failed warmup is logged and does not prevent use.
        """
        if self.is_ready():
            logger.debug("Model %s already loaded", self._model_name)
            return

        start = monotonic()
        logger.info("Loading local model %s", self._model_name)
        tokenizer, model = await asyncio.to_thread(self._load_weights)
        self._tokenizer = tokenizer
        self._model = model
        logger.info(
            "Loaded local model %s in %.0fms",
            self._model_name,
            1000 * (monotonic() - start),
        )

        try:
            await self.generate(WARMUP_PROMPT, WARMUP_OPTIONS)
        except ModelError:
            logger.warning("Warmup inference failed, but continuing", exc_info=True)

    async def generate(
        self,
        prompt: str,
        options: GenerationOptions = GenerationOptions(),
    ) -> str:
        if not self.is_ready():
            raise ModelNotReadyError(
                "AI model not initialized. Please wait for the model to load."
            )

        start = monotonic()
        labels = {"provider": "local", "model": self._model_name}
        logger.debug("Generating locally: prompt_chars=%d", len(prompt))

        try:
            # Use to_thread to avoid blocking event loop with CPU-bound work
            text = await asyncio.to_thread(self._generate_sync, prompt, options)
        except Exception as e:
            self.metrics_hook.increment(names.GENERATION_ERRORS_TOTAL, labels=labels)
            logger.error("Local generation failed: %s", e)
            raise ModelError(str(e)) from e

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.GENERATION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.GENERATION_REQUESTS_TOTAL, labels=labels)
        logger.info(
            "Local generation: chars=%d, latency=%.0fms", len(text), elapsed_ms
        )
        return text

    def _load_weights(self) -> tuple[Any, Any]:
        tokenizer = AutoTokenizer.from_pretrained(self._model_name)
        model = AutoModelForSeq2SeqLM.from_pretrained(self._model_name)
        if self._device is not None:
            model = model.to(self._device)
        return tokenizer, model

    def _generate_sync(self, prompt: str, options: GenerationOptions) -> str:
        inputs = self._tokenizer(prompt, return_tensors="pt", truncation=True)
        if self._device is not None:
            inputs = inputs.to(self._device)
        kwargs = options.to_dict()
        if not options.do_sample:
            # Sampling-only parameters trigger warnings under greedy decoding
            kwargs.pop("temperature", None)
            kwargs.pop("top_k", None)
            kwargs.pop("top_p", None)
        output = self._model.generate(**inputs, **kwargs)
        return self._tokenizer.decode(output[0], skip_special_tokens=True)
