"""
End-to-end parsing orchestration.
"""
from datetime import date
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Union
import logging

from .loader import PDFDocument, load_document
from .layout import reconstruct_rows
from .normalize import parse_date
from .tables import StatementPageParser
from ..models.schema import Transaction, StatementLayout, DEFAULT_LAYOUT

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview]
BUFFER_TYPES = (bytes, bytearray, memoryview)


class DocumentParser:
    """Parses every statement page of a loaded document."""

    def __init__(self, layout: StatementLayout = DEFAULT_LAYOUT,
                 logger: Optional[logging.Logger] = None):
        self.layout = layout
        self.logger = logger or logging.getLogger(__name__)
        self.page_parser = StatementPageParser(layout, self.logger)

    def parse(self, doc: PDFDocument) -> List[Transaction]:
        """
        Parse a document into transactions.

        The first page is a cover page and is skipped. Any failure while
        reading a page aborts the whole document.

        Args:
            doc: Loaded document

        Returns:
            List of Transaction objects in page order
        """
        results = []
        num_pages = doc.num_pages
        self.logger.debug(f"Number of pages: {num_pages}")

        for index in range(1, num_pages):
            page_number = index + 1
            try:
                page = doc.get_page(index)
                fragments = page.get_text_content()
                rows = reconstruct_rows(fragments, self.layout.x_scale)
                page_results = self.page_parser.parse(rows, page_number)
            except Exception as e:
                self.logger.error(f"Error processing page {page_number}: {e}")
                raise

            results.extend(page_results)
            self.logger.debug(f"Finished page {page_number} of {num_pages}: {len(page_results)} transactions")

        return results


def _validate_input(src) -> Sequence[Buffer]:
    if isinstance(src, BUFFER_TYPES):
        return [src]
    if isinstance(src, (list, tuple)):
        if not all(isinstance(item, BUFFER_TYPES) for item in src):
            raise TypeError("Invalid argument. Sequence must contain only byte buffers.")
        return src
    raise TypeError("Invalid argument. Must be either a byte buffer or a list of byte buffers.")


def sort_transactions(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Sort by date, keeping input order for equal dates.

    Dates that do not parse sort after every dated transaction.
    """
    def _key(t):
        d = parse_date(t.date)
        return (d is None, d or date.min)

    return sorted(transactions, key=_key)


def parse_statements(src: Union[Buffer, Sequence[Buffer]],
                     layout: StatementLayout = DEFAULT_LAYOUT,
                     loader: Callable[[Buffer], PDFDocument] = load_document) -> List[Transaction]:
    """
    Parse one or more Apple Card statements.

    Statements are decoded and parsed one at a time; the first failure
    aborts the call.

    Args:
        src: PDF bytes, or a list of PDF bytes
        layout: Statement layout
        loader: Decodes bytes into a document

    Returns:
        Transactions from all statements, sorted by date
    """
    statements = _validate_input(src)
    total = len(statements)
    logger.info(f"Number of statements: {total}")

    parser = DocumentParser(layout)
    results = []
    for i, data in enumerate(statements, 1):
        logger.debug(f"Loading statement {i} of {total}...")
        try:
            with loader(data) as doc:
                transactions = parser.parse(doc)
        except Exception as e:
            logger.error(f"Error processing statement {i} of {total}: {e}")
            raise
        logger.info(f"Statement {i} of {total}: {len(transactions)} transactions")
        results.extend(transactions)

    return sort_transactions(results)


def parse_statement_files(paths: Iterable[Path],
                          layout: StatementLayout = DEFAULT_LAYOUT) -> List[Transaction]:
    """
    Parse Apple Card statement PDF files.

    Args:
        paths: Paths to PDF files
        layout: Statement layout

    Returns:
        Transactions from all files, sorted by date
    """
    statements = []
    for path in paths:
        path = Path(path)
        logger.debug(f"Reading file: {path}")
        statements.append(path.read_bytes())
    return parse_statements(statements, layout)
