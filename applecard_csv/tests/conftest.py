"""
Shared fixtures and fakes for the statement parser tests.
"""
import pytest
from typing import Dict, List, Optional

from ..core.loader import Fragment

STATEMENT_HEADER = [
    {7: "Statement"},
    {7: "Apple Card Customer"},
    {7: "Transactions", 83: "Daily Cash", 107: "Amount"},
]
STATEMENT_FOOTER = [
    {7: "Apple Card is issued by Goldman Sachs Bank USA, Salt Lake City Branch."},
    {7: "Page 2 /3"},
]


def frag(text: str, bucket: float, y: float) -> Fragment:
    """Fragment whose x lands in ``bucket``."""
    return Fragment(text, (1, 0, 0, 1, bucket * 5, y))


def page_fragments(rows: List[Dict[int, str]], top: int = 700, step: int = 12) -> List[Fragment]:
    """Lay out rows top to bottom as fragments (y decreasing down the page)."""
    fragments = []
    for i, row in enumerate(rows):
        for bucket, text in row.items():
            fragments.append(frag(text, bucket, top - i * step))
    return fragments


def statement_page(body: List[Dict[int, str]],
                   header: Optional[List[Dict[int, str]]] = None,
                   footer: Optional[List[Dict[int, str]]] = None) -> List[Fragment]:
    header = STATEMENT_HEADER if header is None else header
    footer = STATEMENT_FOOTER if footer is None else footer
    return page_fragments(header + body + footer)


class FakePage:
    def __init__(self, fragments=None, error: Exception = None):
        self.fragments = fragments or []
        self.error = error

    def get_text_content(self):
        if self.error:
            raise self.error
        return list(self.fragments)


class FakeDocument:
    """Stand-in for PDFDocument built from pages of fragments."""

    def __init__(self, pages: List[FakePage]):
        self.pages = pages
        self.requested = []
        self.closed = False

    @property
    def num_pages(self):
        return len(self.pages)

    def get_page(self, index):
        self.requested.append(index)
        return self.pages[index]

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


COVER_PAGE = FakePage(page_fragments([{7: "Statement"}, {7: "Apple Card Customer"}, {7: "Summary"}]))


@pytest.fixture
def purchases_page():
    """Statement page with one purchase and a continuation line."""
    return statement_page([
        {7: "Purchases"},
        {9: "03/01/2024", 21: "Coffee Shop", 85: "2%", 89: "$0.09", 111: "4.50"},
        {21: "Store #1234"},
    ])


def build_pdf(pages: List[List[Dict[int, str]]], sizes: Optional[Dict[int, float]] = None) -> bytes:
    """Render pages of rows into a PDF with text at ``bucket * 5`` points.

    ``sizes`` sets the font size per bucket (default 9pt); all cells of a row
    share one baseline.
    """
    sizes = sizes or {}
    fpdf = pytest.importorskip("fpdf")
    pdf = fpdf.FPDF(unit="pt", format="letter")
    pdf.set_auto_page_break(False)
    for rows in pages:
        pdf.add_page()
        for i, row in enumerate(rows):
            for bucket, text in row.items():
                pdf.set_font("Helvetica", size=sizes.get(bucket, 9))
                pdf.text(bucket * 5, 60 + i * 14, text)
    return bytes(pdf.output())


COVER_ROWS = [{7: "Statement"}, {7: "Apple Card Customer"}, {7: "Your balance is $0.00"}]


@pytest.fixture
def statement_pdf():
    """Two-page statement PDF: cover page and one transactions page."""
    return build_pdf([
        COVER_ROWS,
        STATEMENT_HEADER + [
            {7: "Payments"},
            {9: "03/05/2024", 21: "ACH Deposit Internet transfer", 109: "-$250.00"},
            {7: "Transactions"},
            {9: "03/01/2024", 21: "Coffee Shop", 85: "2%", 89: "$0.09", 111: "$4.50"},
            {21: "Store #1234"},
        ] + STATEMENT_FOOTER,
    ])
