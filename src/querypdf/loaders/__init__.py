from .base import DocumentLoader
from .models import Document, normalize_whitespace
from .pdf_loader import PdfLoader
from .text_loader import TextLoader

__all__ = [
    "Document",
    "DocumentLoader",
    "PdfLoader",
    "TextLoader",
    "normalize_whitespace",
]
