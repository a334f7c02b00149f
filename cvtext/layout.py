import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import Settings, settings
from .fragments import TextFragment

logger = logging.getLogger("cvtext.layout")


@dataclass(frozen=True)
class ColumnLayout:
    columns: int
    divider_x: Optional[float] = None

    @property
    def is_multi_column(self) -> bool:
        return self.columns > 1


SINGLE_COLUMN = ColumnLayout(columns=1)


def find_divider(fragments: Sequence[TextFragment], page_width: float, config: Optional[Settings] = None) -> float:
    """
    Places the divider in the middle of the widest horizontal gap between
    neighbouring fragment x positions that straddles the left part of the page.
    """
    config = config or settings
    mid = page_width / 2
    fallback = mid * config.DEFAULT_DIVIDER_RATIO

    if len(fragments) < 2:
        return fallback

    xs = np.sort(np.array([f.x for f in fragments], dtype=float))
    lefts, rights = xs[:-1], xs[1:]
    candidates = (lefts < mid) & (rights > mid * config.DIVIDER_SEARCH_RATIO)
    if not candidates.any():
        return fallback

    gaps = np.where(candidates, rights - lefts, -np.inf)
    best = int(np.argmax(gaps))
    return float((lefts[best] + rights[best]) / 2)


def classify(fragments: Sequence[TextFragment], page_width: float, config: Optional[Settings] = None) -> ColumnLayout:
    """
    Decides between a single column and a main column with a sidebar.

    A sidebar only needs a small share of the main column's fragment count.
    """
    config = config or settings
    if len(fragments) < config.MIN_LAYOUT_FRAGMENTS:
        return SINGLE_COLUMN

    mid = page_width / 2
    left_count = sum(1 for f in fragments if f.x < mid * config.LEFT_REGION_RATIO)
    right_count = sum(1 for f in fragments if f.x > mid * config.RIGHT_REGION_RATIO)

    if left_count <= config.MIN_COLUMN_FRAGMENTS or right_count <= config.MIN_COLUMN_FRAGMENTS:
        return SINGLE_COLUMN
    if min(left_count, right_count) / max(left_count, right_count) <= config.COLUMN_BALANCE_RATIO:
        return SINGLE_COLUMN

    divider = find_divider(fragments, page_width, config)
    logger.debug(f"Multi-column page: left={left_count} right={right_count} divider={divider:.2f}")
    return ColumnLayout(columns=2, divider_x=divider)


def split_columns(fragments: Sequence[TextFragment], divider_x: float) -> Tuple[List[TextFragment], List[TextFragment]]:
    """Returns (left, right). Every fragment lands in exactly one side."""
    left, right = [], []
    for f in fragments:
        (left if f.x < divider_x else right).append(f)
    return left, right
