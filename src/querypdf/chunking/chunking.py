from dataclasses import dataclass
from querypdf.errors import InvalidArgumentError
from querypdf.observability import names
from querypdf.observability.base import MetricsHook, NoOpMetricsHook, measure


@dataclass(frozen=True)
class Chunk:
    text: str
    start_offset: int

    @property
    def end_offset(self) -> int:
        return self.start_offset + len(self.text)


def chunk_text(
    text: str,
    *,
    chunk_size: int,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Chunk]:
    """Split text into consecutive fixed-size chunks.

    The chunks partition ``text`` left to right; only the last one may be
    shorter than ``chunk_size``. No filtering is done here.
    """
    if chunk_size <= 0:
        raise InvalidArgumentError("chunk_size must be > 0")

    with measure(metrics_hook, names.CHUNKING_DURATION):
        chunks = [
            Chunk(text=text[offset : offset + chunk_size], start_offset=offset)
            for offset in range(0, len(text), chunk_size)
        ]

    metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(chunks))
    return chunks
