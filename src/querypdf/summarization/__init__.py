from .sampler import (
    build_summary,
    combine_summaries,
    extract_key_sentences,
    sample_chunks,
    summary_chunks,
)

__all__ = [
    "build_summary",
    "combine_summaries",
    "extract_key_sentences",
    "sample_chunks",
    "summary_chunks",
]
