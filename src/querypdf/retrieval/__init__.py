from .relevance import (
    STOP_WORDS,
    ScoredChunk,
    extract_keywords,
    find_context,
    score_chunks,
)

__all__ = [
    "STOP_WORDS",
    "ScoredChunk",
    "extract_keywords",
    "find_context",
    "score_chunks",
]
