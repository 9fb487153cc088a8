# loaders/base.py

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from .models import Document

Source = str | Path | BinaryIO


class DocumentLoader(ABC):
    @abstractmethod
    def load(self, source: Source) -> Document:
        """
        Read a file and return its normalized text.

        Requirements:
        - Deterministic output for same input
        - Page text concatenated in page order
        - Blocking; callers move it off the event loop
        """
        raise NotImplementedError
