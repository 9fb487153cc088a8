# src/querypdf/generation/__init__.py

"""Generator layer for querypdf.

Provides a thin prompt-to-text abstraction over remote and local models.

Design principles:
- Prompt in, text out
- Transport only: Retries only on network/rate-limit errors
- No coordination: callers decide which results to keep
- No leakage: Provider objects never escape the adapter

Example:
    >>> from querypdf.generation import GeneratorConfig, create_generator
    >>>
    >>> config = GeneratorConfig(provider="local", model="google/flan-t5-small")
    >>> generator = create_generator(config)
    >>> await generator.load()
    >>> print(await generator.generate("summarize: ..."))
"""

from .base import ANSWER_OPTIONS, SUMMARY_OPTIONS, GenerationOptions, Generator
from .config import GeneratorConfig
from .factory import create_generator

__all__ = [
    # Factory
    "create_generator",
    # Protocol
    "Generator",
    # Config
    "GeneratorConfig",
    # Options
    "GenerationOptions",
    "ANSWER_OPTIONS",
    "SUMMARY_OPTIONS",
]
