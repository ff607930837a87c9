"""
Statement page detection and layout template loading.
"""
import yaml
from pathlib import Path
from typing import List
import logging

from .layout import Row
from ..models.schema import StatementLayout, DEFAULT_LAYOUT

logger = logging.getLogger(__name__)


def _matches(row: Row, identifier: str) -> bool:
    text = row.primary
    if not text:
        return False
    return text.strip().lower() == identifier.strip().lower()


def is_statement_page(header_rows: List[Row], layout: StatementLayout = DEFAULT_LAYOUT,
                      page_number: int = None) -> bool:
    """
    Check whether header rows identify a statement page.

    The first header row must read "Statement" and the second
    "Apple Card Customer" (case-insensitive) in their leftmost column.

    Args:
        header_rows: Header rows at the top of the page
        layout: Layout holding the identifiers
        page_number: Page number, for diagnostics

    Returns:
        True if the page is a statement page, False otherwise
    """
    if len(header_rows) < 2:
        logger.debug(f"Page {page_number}: header too short to identify")
        return False

    if not _matches(header_rows[0], layout.statement_identifier):
        logger.debug(
            f'Unable to confirm page {page_number} is a statement. '
            f'Missing "{layout.statement_identifier}" identifier.'
        )
        return False

    if not _matches(header_rows[1], layout.customer_identifier):
        logger.debug(
            f'Unable to confirm page {page_number} is a statement. '
            f'Missing "{layout.customer_identifier}" identifier.'
        )
        return False

    return True


def load_layout(path: Path) -> StatementLayout:
    """
    Load a layout template from YAML.

    Keys not present in the file keep their Apple Card defaults.

    Args:
        path: Path to YAML file

    Returns:
        StatementLayout object
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Layout file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Layout file must contain a mapping: {path}")

    layout = StatementLayout.model_validate(data)
    logger.debug(f"Loaded layout: {path}")
    return layout
