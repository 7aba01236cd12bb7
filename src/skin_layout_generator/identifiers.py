"""Run-wide identifier counters for pages and row layouts."""


class IdentifierAllocator:
    """Hands out strictly increasing page and layout identifiers.

    One allocator is shared by every folder in a run so identifiers never
    collide once the generated fragments end up in the same application.
    It is not thread-safe; pages and rows must be rendered sequentially.
    """

    def __init__(self) -> None:
        self._page_id = 0
        self._layout_id = 0

    @property
    def page_id(self) -> int:
        """Last page identifier handed out, ``0`` before the first page."""
        return self._page_id

    @property
    def layout_id(self) -> int:
        """Last layout identifier handed out, ``0`` before the first row."""
        return self._layout_id

    def next_page_id(self) -> int:
        self._page_id += 1
        return self._page_id

    def next_layout_id(self) -> int:
        self._layout_id += 1
        return self._layout_id
