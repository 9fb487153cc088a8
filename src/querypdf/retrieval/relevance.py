# src/querypdf/retrieval/relevance.py

"""Keyword relevance scoring.

A best-effort heuristic, not a search engine:
- Keywords are counted as case-insensitive substrings, not whole words
- Scoring is per fixed-size chunk; a keyword split across two chunks is missed
- Ties keep document order
"""

import logging
import string
from dataclasses import dataclass

from querypdf.chunking import Chunk, chunk_text
from querypdf.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

STOP_WORDS = frozenset(
    {
        "what",
        "where",
        "when",
        "which",
        "whom",
        "whose",
        "this",
        "that",
        "these",
        "those",
        "from",
        "with",
        "about",
    }
)

CONTEXT_CHUNK_SIZE = 500
MAX_CONTEXT_CHUNKS = 3
KEYWORD_WEIGHT = 2


@dataclass(frozen=True)
class ScoredChunk:
    chunk: Chunk
    score: int

    @property
    def text(self) -> str:
        return self.chunk.text


def extract_keywords(question: str) -> list[str]:
    """Lower-cased whitespace tokens longer than 3 chars, minus stop words.

    Punctuation at either end of a token is dropped, so "capital?" counts
    as "capital".
    """
    keywords = []
    for token in question.lower().split():
        token = token.strip(string.punctuation)
        if len(token) > 3 and token not in STOP_WORDS:
            keywords.append(token)
    return keywords


def score_chunks(chunks: list[Chunk], keywords: list[str]) -> list[ScoredChunk]:
    """Score each chunk by keyword occurrences, best first.

    ``sorted`` is stable, so equal scores keep their document order.
    """
    scored = []
    for chunk in chunks:
        lower_text = chunk.text.lower()
        occurrences = sum(lower_text.count(keyword) for keyword in keywords)
        scored.append(ScoredChunk(chunk=chunk, score=KEYWORD_WEIGHT * occurrences))
    return sorted(scored, key=lambda s: s.score, reverse=True)


def find_context(
    full_text: str,
    question: str,
    max_chars: int,
    *,
    chunk_size: int = CONTEXT_CHUNK_SIZE,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Return at most ``max_chars`` of the text most relevant to ``question``.

    Falls back to the start of the document when the question has no
    keywords or no keyword occurs anywhere.
    """
    if not full_text:
        return ""

    keywords = extract_keywords(question)
    if not keywords:
        logger.debug("No keywords in question, using document start")
        return full_text[:max_chars]

    chunks = chunk_text(full_text, chunk_size=chunk_size, metrics_hook=metrics_hook)
    scored = score_chunks(chunks, keywords)

    if scored[0].score == 0:
        logger.debug("No keyword matched (keywords=%s), using document start", keywords)
        return full_text[:max_chars]

    context = ""
    for candidate in scored[:MAX_CONTEXT_CHUNKS]:
        if candidate.score > 0:
            context += candidate.text + "\n\n"
        if len(context) >= max_chars:
            break

    logger.debug(
        "Selected context: keywords=%s, top_score=%d, offsets=%s",
        keywords,
        scored[0].score,
        [s.chunk.start_offset for s in scored[:MAX_CONTEXT_CHUNKS] if s.score > 0],
    )
    return context[:max_chars]
