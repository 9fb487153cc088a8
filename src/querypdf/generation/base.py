# src/querypdf/generation/base.py

from dataclasses import asdict, dataclass
from typing import Any, Protocol

from querypdf.observability.base import MetricsHook


@dataclass(frozen=True)
class GenerationOptions:
    """Sampling parameters for one generation call.

    Immutable. Fields set to None are left to the backend's default.
    Backends that lack a parameter (e.g. top_k on OpenAI) ignore it.
    """

    max_new_tokens: int = 200
    temperature: float = 0.7
    top_k: int | None = None
    top_p: float | None = None
    repetition_penalty: float | None = None
    do_sample: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    @property
    def effective_temperature(self) -> float:
        """Temperature for backends without a do_sample switch."""
        return self.temperature if self.do_sample else 0.0


ANSWER_OPTIONS = GenerationOptions(
    max_new_tokens=200,
    temperature=0.7,
    top_k=50,
    top_p=0.95,
    repetition_penalty=1.2,
    do_sample=True,
)

SUMMARY_OPTIONS = GenerationOptions(
    max_new_tokens=150,
    temperature=0.7,
    repetition_penalty=1.5,
    do_sample=True,
)


class Generator(Protocol):
    """Protocol for text generators.

    Design principles:
    - Prompt in, text out: no chat history, no tools
    - Transport only: Retries only on network/rate-limit errors
    - No coordination: may be called concurrently; callers arbitrate results
    - Failures surface as ModelError
    """

    metrics_hook: MetricsHook

    def is_ready(self) -> bool:
        """Whether generate() can be called now."""
        ...

    async def generate(
        self,
        prompt: str,
        options: GenerationOptions = GenerationOptions(),
    ) -> str:
        """Generate text for a prompt.

        Args:
            prompt: Complete prompt text.
            options: Sampling parameters.

        Returns:
            The generated text, unstripped.

        Raises:
            ModelError: Generation failed after retry exhaustion.
        """
        ...
