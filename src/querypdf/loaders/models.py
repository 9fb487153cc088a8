# loaders/models.py

import re
from collections.abc import Iterable
from dataclasses import dataclass

_WHITESPACE = re.compile(r"\s+")

DEFAULT_CHUNK_SIZE = 500


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


@dataclass(frozen=True)
class Document:
    """Text of one loaded file.

    ``raw_text`` is whitespace-collapsed and trimmed. A new upload replaces
    the whole document; it is never edited in place.
    """

    raw_text: str
    page_count: int
    chunk_size_default: int = DEFAULT_CHUNK_SIZE

    @classmethod
    def from_pages(
        cls, pages: Iterable[str], chunk_size_default: int = DEFAULT_CHUNK_SIZE
    ) -> "Document":
        """Concatenate per-page text in page order and normalize it."""
        page_texts = list(pages)
        normalized = (normalize_whitespace(p) for p in page_texts)
        raw_text = " ".join(p for p in normalized if p)
        return cls(
            raw_text=raw_text,
            page_count=len(page_texts),
            chunk_size_default=chunk_size_default,
        )

    @property
    def char_count(self) -> int:
        return len(self.raw_text)

    @property
    def word_count(self) -> int:
        return len(self.raw_text.split())

    @property
    def is_empty(self) -> bool:
        return not self.raw_text
