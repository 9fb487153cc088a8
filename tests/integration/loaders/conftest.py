from pathlib import Path

import pytest
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from querypdf.loaders.models import Document
from querypdf.loaders.pdf_loader import PdfLoader


def _draw_page(c: canvas.Canvas, lines: list[str]) -> None:
    _, height = LETTER
    text = c.beginText(40, height - 50)
    for line in lines:
        text.textLine(line)
    c.drawText(text)
    c.showPage()


def _create_multipage_pdf(path: Path) -> None:
    """Creates a deterministic three-page PDF for integration testing."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    _draw_page(
        c,
        [
            "ANNUAL REPORT",
            "",
            "Revenue grew    strongly during the year.",
            "The company opened offices in Lisbon and Madrid.",
        ],
    )
    _draw_page(
        c,
        [
            "Operating costs were kept flat compared to last year.",
            "Headcount increased by twelve percent.",
        ],
    )
    _draw_page(c, ["The outlook for next year remains positive."])
    c.save()


def _create_blank_page_pdf(path: Path) -> None:
    """Creates a PDF whose middle page has no extractable text."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    _draw_page(c, ["First page text."])
    c.rect(100, 100, 200, 200, fill=1)
    c.showPage()
    _draw_page(c, ["Last page text."])
    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _create_multipage_pdf(dir_path / "multipage.pdf")
    _create_blank_page_pdf(dir_path / "blank_page.pdf")
    (dir_path / "broken.pdf").write_bytes(b"this is not a pdf")

    return dir_path


@pytest.fixture(scope="module")
def loaded_multipage(pdf_dir: Path) -> Document:
    """Load multipage PDF once, reuse across tests."""
    with open(pdf_dir / "multipage.pdf", "rb") as f:
        return PdfLoader().load(f)
