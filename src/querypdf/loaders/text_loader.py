# loaders/text_loader.py

import logging
from pathlib import Path

from querypdf.errors import DocumentLoadError

from .base import DocumentLoader, Source
from .models import DEFAULT_CHUNK_SIZE, Document

logger = logging.getLogger(__name__)

PAGE_BREAK = "\f"


class TextLoader(DocumentLoader):
    """Plain text loader. Form feeds separate pages."""

    def __init__(
        self, encoding: str = "utf-8", chunk_size_default: int = DEFAULT_CHUNK_SIZE
    ) -> None:
        self._encoding = encoding
        self._chunk_size_default = chunk_size_default

    def load(self, source: Source) -> Document:
        try:
            if isinstance(source, (str, Path)):
                content = Path(source).read_text(encoding=self._encoding)
            else:
                content = source.read().decode(self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Text loading error: %s", e)
            raise DocumentLoadError(f"Failed to load text: {e}") from e

        document = Document.from_pages(
            content.split(PAGE_BREAK), self._chunk_size_default
        )
        logger.info(
            "Text loaded: pages=%d, characters=%d",
            document.page_count,
            document.char_count,
        )
        return document
