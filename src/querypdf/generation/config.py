# src/querypdf/generation/config.py

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration for generators.

    Immutable. Explicit. No magic defaults from environment.
    """

    provider: Literal["openai", "anthropic", "local"]
    model: str
    api_key: str | None = None  # Falls back to provider's env var
    timeout: float = 30.0
    max_retries: int = 3
    device: int | None = None  # local only; None lets transformers decide
