import pytest

from querypdf.chunking.chunking import Chunk, chunk_text
from querypdf.errors import InvalidArgumentError
from querypdf.observability.base import InMemoryMetricsHook


class TestChunkText:
    def test_single_chunk_when_text_fits(self) -> None:
        """Text smaller than chunk_size produces one chunk."""
        result = chunk_text("A" * 150, chunk_size=500)

        assert len(result) == 1
        assert result[0].start_offset == 0
        assert len(result[0].text) == 150

    def test_multiple_chunks_last_is_shorter(self) -> None:
        result = chunk_text("abcdefghij", chunk_size=4)

        assert [c.text for c in result] == ["abcd", "efgh", "ij"]
        assert [c.start_offset for c in result] == [0, 4, 8]
        assert [c.end_offset for c in result] == [4, 8, 10]

    def test_exact_multiple_has_no_empty_tail(self) -> None:
        result = chunk_text("abcdefgh", chunk_size=4)

        assert [c.text for c in result] == ["abcd", "efgh"]

    def test_empty_text_gives_no_chunks(self) -> None:
        assert chunk_text("", chunk_size=10) == []

    @pytest.mark.parametrize("chunk_size", [1, 3, 7, 500])
    def test_chunks_reassemble_original_text(self, chunk_size: int) -> None:
        text = "The quick brown fox jumps over the lazy dog. " * 13

        result = chunk_text(text, chunk_size=chunk_size)

        assert "".join(c.text for c in result) == text

    def test_offsets_strictly_increase_without_gaps(self) -> None:
        result = chunk_text("x" * 1234, chunk_size=100)

        for previous, current in zip(result, result[1:]):
            assert current.start_offset > previous.start_offset
            assert current.start_offset == previous.end_offset

    def test_metrics_hook_receives_chunk_count(self) -> None:
        hook = InMemoryMetricsHook()

        chunk_text("abcdefghij", chunk_size=4, metrics_hook=hook)

        assert hook.counters["chunking_chunks_created"] == 3
        assert len(hook.latencies["chunking_duration"]) == 1


class TestChunkTextValidation:
    def test_raises_on_zero_chunk_size(self) -> None:
        with pytest.raises(InvalidArgumentError, match="chunk_size must be > 0"):
            chunk_text("text", chunk_size=0)

    def test_raises_on_negative_chunk_size(self) -> None:
        with pytest.raises(InvalidArgumentError, match="chunk_size must be > 0"):
            chunk_text("text", chunk_size=-1)

    def test_invalid_argument_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            chunk_text("", chunk_size=0)


class TestChunkDataclass:
    def test_chunk_is_frozen(self) -> None:
        """Chunk instances are immutable."""
        chunk = Chunk(text="text", start_offset=0)

        with pytest.raises(AttributeError):
            chunk.text = "modified"  # type: ignore
