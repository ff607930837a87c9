"""
Data normalization and cleaning functions.
"""
import math
import re
from datetime import datetime, date
from typing import Optional


# Statement dates are US style; the rest cover summary text and ISO input.
DATE_FORMATS = [
    "%m/%d/%Y",
    "%m/%d/%y",
    "%Y-%m-%d",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
]

LIGATURES = {
    'ﬁ': 'fi',
    'ﬂ': 'fl',
    'ﬀ': 'ff',
    'ﬃ': 'ffi',
    'ﬄ': 'ffl',
    'ﬆ': 'st',
    'ﬅ': 'st'
}


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a date string using the known statement formats.

    Args:
        value: Raw date string

    Returns:
        Date object or None if parsing fails
    """
    if not value or not value.strip():
        return None

    cleaned = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue

    return None


def is_date(value: Optional[str]) -> bool:
    return parse_date(value) is not None


def normalize_text(value: str) -> str:
    """
    Normalize text by replacing ligatures and collapsing whitespace.

    Args:
        value: Raw text string

    Returns:
        Cleaned text string
    """
    if not value:
        return ""

    for ligature, replacement in LIGATURES.items():
        value = value.replace(ligature, replacement)

    return re.sub(r'\s+', ' ', value).strip()


def round_half_up(value: float) -> int:
    """Round like the statement grid was measured (0.5 goes up, not to even)."""
    return int(math.floor(value + 0.5))
