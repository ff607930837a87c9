"""
Row reconstruction from positioned text fragments.
"""
from typing import Dict, Iterable, List, Optional
import logging

from .loader import Fragment
from .normalize import round_half_up
from ..models.schema import X_SCALE

logger = logging.getLogger(__name__)


class Row:
    """A visual row: column bucket -> text."""
    def __init__(self, cells: Dict[int, str], y: Optional[int] = None):
        self.cells = cells
        self.y = y

    def get(self, bucket: int, default=None):
        return self.cells.get(bucket, default)

    def first(self, buckets: Iterable[int]) -> Optional[str]:
        """Text of the first bucket in ``buckets`` that has any."""
        for bucket in buckets:
            value = self.cells.get(bucket)
            if value:
                return value
        return None

    @property
    def buckets(self) -> List[int]:
        return sorted(self.cells)

    @property
    def primary(self) -> Optional[str]:
        """Text in the leftmost column."""
        if not self.cells:
            return None
        return self.cells[min(self.cells)]

    @property
    def sole(self) -> Optional[str]:
        if len(self.cells) != 1:
            return None
        return self.primary

    def __len__(self):
        return len(self.cells)

    def __eq__(self, other):
        return isinstance(other, Row) and self.cells == other.cells

    def __repr__(self):
        return f"Row({self.cells})"


def reconstruct_rows(fragments: Iterable[Fragment], x_scale: float = X_SCALE) -> List[Row]:
    """
    Group fragments into rows in top-to-bottom reading order.

    Args:
        fragments: Positioned text fragments of one page
        x_scale: Width of a column bucket in points

    Returns:
        List of Row objects
    """
    grouped: Dict[int, Dict[int, str]] = {}

    for fragment in fragments:
        text = fragment.text.strip() if fragment.text else ''
        if not text:
            continue

        bucket = round_half_up(fragment.x / x_scale)
        key = round_half_up(fragment.y)
        # Later fragments overwrite earlier ones in the same cell.
        grouped.setdefault(key, {})[bucket] = text

    # y grows upwards, so the highest row key is the top of the page.
    keys = sorted(grouped)
    keys.reverse()

    rows = [Row(grouped[key], y=key) for key in keys]
    logger.debug(f"Reconstructed {len(rows)} rows")
    return rows
