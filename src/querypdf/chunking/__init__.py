from .chunking import Chunk, chunk_text

__all__ = [
    "Chunk",
    "chunk_text",
]
