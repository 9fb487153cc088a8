# src/querypdf/generation/factory.py

from querypdf.observability.base import MetricsHook, NoOpMetricsHook

from .base import Generator
from .config import GeneratorConfig


def create_generator(
    config: GeneratorConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Generator:
    """Create a generator from config.

    Args:
        config: Generator configuration specifying provider, model, etc.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured Generator implementation. Local generators still need
        ``await generator.load()`` before they report ready.

    Raises:
        ValueError: If provider is unknown.

    Example:
        >>> config = GeneratorConfig(provider="openai", model="gpt-4o-mini")
        >>> generator = create_generator(config)
        >>> text = await generator.generate("summarize: ...")
    """
    if config.provider == "openai":
        from .openai import OpenAIGenerator

        return OpenAIGenerator(
            api_key=config.api_key,
            model=config.model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    if config.provider == "anthropic":
        from .anthropic import AnthropicGenerator

        return AnthropicGenerator(
            api_key=config.api_key,
            model=config.model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    if config.provider == "local":
        from .local import LocalGenerator

        return LocalGenerator(
            model_name=config.model,
            device=config.device,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown generator provider: {config.provider}")
