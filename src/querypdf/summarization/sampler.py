# src/querypdf/summarization/sampler.py

"""Whole-document summarization by chunk sampling.

Cost stays bounded on arbitrarily long documents:
- Large chunks, sampled in three size tiers (all, every other, strided)
- Extractive summary (leading sentences) for every sampled chunk
- Generator refinement only for the first and last sampled chunk
"""

import logging
import re
from collections.abc import Awaitable, Callable
from time import monotonic

from querypdf.chunking import chunk_text
from querypdf.config import PipelineConfig
from querypdf.errors import InsufficientContentError, NoSummarizableContentError
from querypdf.observability import names
from querypdf.observability.base import MetricsHook, NoOpMetricsHook
from querypdf.observability.progress import (
    NoOpProgressSink,
    ProgressEvent,
    ProgressSink,
)

logger = logging.getLogger(__name__)

SentenceExtractor = Callable[[str], str]
SectionSummarizer = Callable[[str], Awaitable[str]]

SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")
REPEATED_PERIODS = re.compile(r"\.\s*\.")

FULL_TIER_MAX = 10
HALF_TIER_MAX = 30
STRIDED_SAMPLE_SIZE = 20

MAX_KEY_SENTENCES = 6
MIN_SENTENCE_CHARS = 30
MIN_SECTION_SUMMARY_CHARS = 50
SECTION_GROUPS = 5

# Share of the progress bar spent on per-chunk work.
CHUNK_PROGRESS_SHARE = 70


def extract_key_sentences(text: str) -> str:
    """Join the first sentences of ``text`` that are longer than 30 chars."""
    sentences = SENTENCE_PATTERN.findall(text)
    kept = [s.strip() for s in sentences if len(s.strip()) > MIN_SENTENCE_CHARS]
    return " ".join(kept[:MAX_KEY_SENTENCES]).strip()


def summary_chunks(full_text: str, config: PipelineConfig) -> list[str]:
    """Stripped summary-sized chunks with enough text to be worth reading."""
    chunks = chunk_text(full_text, chunk_size=config.summary_chunk_size)
    stripped = (c.text.strip() for c in chunks)
    return [text for text in stripped if len(text) > config.min_summary_chunk_chars]


def sample_chunks(chunks: list[str]) -> list[str]:
    """Pick the chunks to summarize according to the document size tier."""
    total = len(chunks)
    if total <= FULL_TIER_MAX:
        return list(chunks)
    if total <= HALF_TIER_MAX:
        return chunks[::2]
    step = total // STRIDED_SAMPLE_SIZE
    return chunks[::step][:STRIDED_SAMPLE_SIZE]


def combine_summaries(summaries: list[str]) -> str:
    if not summaries:
        raise NoSummarizableContentError(
            "Failed to generate any summaries from the document. "
            "The document might be too complex or contain unsupported content."
        )
    if len(summaries) == 1:
        combined = summaries[0]
    elif len(summaries) <= SECTION_GROUPS:
        combined = "\n\n".join(f"{i}. {s}" for i, s in enumerate(summaries, start=1))
    else:
        groups = _split_evenly(summaries, SECTION_GROUPS)
        combined = "\n\n".join(
            f"Section {i}/{len(groups)}:\n{' '.join(group)}"
            for i, group in enumerate(groups, start=1)
        )
    return REPEATED_PERIODS.sub(".", combined).strip()


async def build_summary(
    full_text: str,
    sentence_extractor: SentenceExtractor = extract_key_sentences,
    section_summarizer: SectionSummarizer | None = None,
    *,
    config: PipelineConfig = PipelineConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
    progress: ProgressSink = NoOpProgressSink(),
) -> str:
    """Summarize the whole document.

    Args:
        full_text: Normalized document text.
        sentence_extractor: Extractive summary of one chunk.
        section_summarizer: Optional generator-backed summary, tried on the
            first and last sampled chunk only. Its failures are logged and
            never abort the summary.
        config: Pipeline sizes and thresholds.
        metrics_hook: Optional metrics hook for observability.
        progress: Receives one event per sampled chunk.

    Raises:
        InsufficientContentError: Text shorter than the minimum document size.
        NoSummarizableContentError: No chunk produced a usable summary.
    """
    if len(full_text) < config.min_document_chars:
        raise InsufficientContentError(
            "No text content found in document. "
            "The document might be image-based or empty."
        )

    start = monotonic()
    chunks = summary_chunks(full_text, config)
    sampled = sample_chunks(chunks)
    metrics_hook.record_gauge(names.SUMMARY_CHUNKS_TOTAL, len(chunks))
    metrics_hook.record_gauge(names.SUMMARY_CHUNKS_SAMPLED, len(sampled))
    logger.info("Summarizing %d of %d chunks", len(sampled), len(chunks))

    summaries: list[str] = []
    last_index = len(sampled) - 1
    for i, chunk in enumerate(sampled):
        percent = round((i + 1) / len(sampled) * CHUNK_PROGRESS_SHARE)
        progress.report(
            ProgressEvent(
                stage="summary",
                message=f"Summarizing section {i + 1}/{len(sampled)}...",
                percent=percent,
            )
        )

        try:
            extracted = sentence_extractor(chunk)
        except Exception:
            logger.warning("Failed to process chunk %d", i + 1, exc_info=True)
            continue

        if len(extracted) <= MIN_SECTION_SUMMARY_CHARS:
            logger.debug("Chunk %d has no usable sentences, skipping", i + 1)
            continue
        summaries.append(extracted)

        if section_summarizer is not None and i in (0, last_index):
            refined = await _refine(section_summarizer, chunk, i, metrics_hook)
            if refined is not None:
                summaries[-1] = refined

    progress.report(
        ProgressEvent(
            stage="summary",
            message=f"Combining {len(summaries)} sections...",
            percent=85,
        )
    )
    result = combine_summaries(summaries)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.SUMMARY_DURATION, elapsed_ms)
    logger.info(
        "Summary built: sections=%d, chars=%d, latency=%.0fms",
        len(summaries),
        len(result),
        elapsed_ms,
    )
    return result


async def _refine(
    section_summarizer: SectionSummarizer,
    chunk: str,
    index: int,
    metrics_hook: MetricsHook,
) -> str | None:
    """Generator summary of a chunk, or None if it failed or is unusable."""
    try:
        refined = (await section_summarizer(chunk)).strip()
    except Exception:
        logger.warning(
            "Section refinement failed for chunk %d, keeping extraction",
            index + 1,
            exc_info=True,
        )
        metrics_hook.increment(names.SUMMARY_REFINEMENT_ERRORS_TOTAL)
        return None

    if MIN_SECTION_SUMMARY_CHARS < len(refined) < len(chunk) * 0.5:
        logger.debug("Using refined summary for chunk %d", index + 1)
        return refined
    return None


def _split_evenly(items: list[str], parts: int) -> list[list[str]]:
    size, remainder = divmod(len(items), parts)
    groups = []
    start = 0
    for i in range(parts):
        end = start + size + (1 if i < remainder else 0)
        groups.append(items[start:end])
        start = end
    return groups
