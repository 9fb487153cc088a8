# src/querypdf/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineConfig:
    """Sizes and thresholds of the retrieval and summarization pipeline.

    Immutable. Explicit. No magic defaults from environment.
    """

    # Question answering
    ask_context_chars: int = 2500
    prompt_context_chars: int = 1500
    min_question_chars: int = 3
    min_context_chars: int = 50
    min_answer_chars: int = 10

    # Summarization
    min_document_chars: int = 100
    summary_chunk_size: int = 5000
    min_summary_chunk_chars: int = 300
    summary_prompt_chars: int = 2000
