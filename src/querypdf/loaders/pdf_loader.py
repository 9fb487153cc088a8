# loaders/pdf_loader.py

import logging
from typing import Any, cast

import pdfplumber

from querypdf.errors import DocumentLoadError

from .base import DocumentLoader, Source
from .models import DEFAULT_CHUNK_SIZE, Document

logger = logging.getLogger(__name__)


class PdfLoader(DocumentLoader):
    """
    PDF text loader.
    - Uses page order
    - A page that fails to extract is skipped, not fatal
    - Whitespace collapsed across the whole document
    """

    def __init__(self, chunk_size_default: int = DEFAULT_CHUNK_SIZE) -> None:
        self._chunk_size_default = chunk_size_default

    def load(self, source: Source) -> Document:
        try:
            # pdfplumber.open accepts path-like or buffer objects; cast to Any
            with pdfplumber.open(cast(Any, source)) as pdf:
                pages = [
                    self._extract_page(page, number)
                    for number, page in enumerate(pdf.pages, start=1)
                ]
        except Exception as e:
            logger.error("PDF loading error: %s", e)
            raise DocumentLoadError(f"Failed to load PDF: {e}") from e

        document = Document.from_pages(pages, self._chunk_size_default)
        logger.info(
            "PDF extraction complete: pages=%d, characters=%d, words=%d",
            document.page_count,
            document.char_count,
            document.word_count,
        )
        return document

    def _extract_page(self, page: Any, number: int) -> str:
        try:
            return page.extract_text() or ""
        except Exception:
            logger.warning("Error processing page %d", number, exc_info=True)
            return ""
