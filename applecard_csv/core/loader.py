"""
PDF loading and positioned text extraction using pdfplumber.
"""
import io
import pdfplumber
from typing import List, Tuple
import logging

from .normalize import normalize_text

logger = logging.getLogger(__name__)


class Fragment:
    """A run of text with the affine transform that places it on the page.

    The transform is ``(a, b, c, d, e, f)``; ``e``/``f`` are the origin of the
    run in PDF user space, where y grows towards the top of the page.
    """
    def __init__(self, text: str, transform: Tuple[float, ...]):
        self.text = text
        self.transform = tuple(transform)

    @property
    def x(self) -> float:
        return self.transform[4]

    @property
    def y(self) -> float:
        return self.transform[5]

    def __repr__(self):
        return f"Fragment('{self.text}', x={self.x:.1f}, y={self.y:.1f})"


class StatementPage:
    """One page of a loaded statement."""
    def __init__(self, page, page_number: int):
        self._page = page
        self.page_number = page_number

    def get_text_content(self) -> List[Fragment]:
        """Extract the page's text runs as fragments."""
        # keep_blank_chars keeps phrases such as "Apple Card Customer" in a
        # single run rather than one fragment per word.
        words = self._page.extract_words(
            x_tolerance=1.5,
            y_tolerance=2,
            keep_blank_chars=True,
            use_text_flow=True,
            return_chars=True
        )

        height = self._page.height
        fragments = []
        for word in words:
            text = normalize_text(word.get('text', ''))
            if not text:
                continue
            fragments.append(Fragment(text=text, transform=self._word_transform(word, height)))

        logger.debug(f"Page {self.page_number}: {len(fragments)} fragments extracted")
        return fragments

    @staticmethod
    def _word_transform(word, height: float) -> Tuple[float, ...]:
        """Text matrix of the word's first glyph; its origin is on the baseline."""
        chars = word.get('chars') or []
        matrix = chars[0].get('matrix') if chars else None
        if matrix:
            return tuple(matrix)
        # pdfplumber measures from the top; flip to the upward PDF axis.
        return (1, 0, 0, 1, word['x0'], height - word['bottom'])


class PDFDocument:
    """A statement PDF opened from an in-memory buffer."""

    def __init__(self, pdf):
        self._pdf = pdf

    @property
    def num_pages(self) -> int:
        return len(self._pdf.pages)

    def get_page(self, index: int) -> StatementPage:
        """Get a page by 0-based index."""
        if not 0 <= index < self.num_pages:
            raise IndexError(f"Page index out of range: {index} (document has {self.num_pages} pages)")
        return StatementPage(self._pdf.pages[index], index + 1)

    def close(self):
        """Close the PDF file."""
        if self._pdf:
            self._pdf.close()
            self._pdf = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def load_document(data: bytes) -> PDFDocument:
    """
    Decode a PDF from raw bytes.

    Args:
        data: PDF file contents

    Returns:
        PDFDocument wrapping the opened PDF
    """
    try:
        pdf = pdfplumber.open(io.BytesIO(bytes(data)))
        logger.info(f"Loaded PDF with {len(pdf.pages)} pages")
        return PDFDocument(pdf)
    except Exception as e:
        logger.error(f"Error loading PDF: {e}")
        raise
