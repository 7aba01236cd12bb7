"""Two-stage chunking of asset names into rows and pages."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

ROW_SIZE = 5
ROWS_PER_PAGE = 4

Row = list[str]
Page = list[Row]


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split ``items`` into consecutive groups of at most ``size``."""

    if size < 1:
        raise ValueError("size must be at least 1")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def paginate(
    names: Sequence[str],
    row_size: int = ROW_SIZE,
    rows_per_page: int = ROWS_PER_PAGE,
) -> list[Page]:
    """Group ``names`` into rows of ``row_size`` and rows into pages.

    Only the last row and the last page may be short. No names means no pages.
    """

    rows = chunk(names, row_size)
    return chunk(rows, rows_per_page)
