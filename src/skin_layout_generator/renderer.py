"""Rendering of paginated asset rows into layout XML files."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from . import templates
from .identifiers import IdentifierAllocator
from .paginator import Page
from .status import StatusReporter

LAYOUT_PREFIX = "fragment_skin_shop_"
LAYOUT_SUFFIX = ".xml"

_LAYOUT_RE = re.compile(
    rf"^{re.escape(LAYOUT_PREFIX)}(\d+){re.escape(LAYOUT_SUFFIX)}$"
)


@dataclass
class WrittenPage:
    """A generated layout file and the identifiers it consumed."""

    page_id: int
    path: Path
    layout_ids: list[int] = field(default_factory=list)


def layout_filename(page_id: int) -> str:
    return f"{LAYOUT_PREFIX}{page_id}{LAYOUT_SUFFIX}"


def existing_layouts(output_dir: str | Path) -> list[Path]:
    """Return generated layout files already in ``output_dir`` by page id."""

    path = Path(output_dir)
    if not path.is_dir():
        return []
    found = []
    for child in path.iterdir():
        match = _LAYOUT_RE.match(child.name)
        if match and child.is_file():
            found.append((int(match.group(1)), child))
    return [child for _page_id, child in sorted(found)]


def assign_layout_ids(
    page: Sequence[Sequence[str]], allocator: IdentifierAllocator
) -> list[int]:
    """Reserve layout ids for ``page``: one for each row's buttons, one for its labels."""

    return [allocator.next_layout_id() for _row in page for _block in range(2)]


def allocate_page(
    page: Sequence[Sequence[str]],
    output_dir: str | Path,
    allocator: IdentifierAllocator,
) -> WrittenPage:
    """Claim the page id, file path and layout ids for ``page``."""

    page_id = allocator.next_page_id()
    return WrittenPage(
        page_id=page_id,
        path=Path(output_dir) / layout_filename(page_id),
        layout_ids=assign_layout_ids(page, allocator),
    )


def render_page(
    page: Sequence[Sequence[str]], page_id: int, layout_ids: Sequence[int]
) -> str:
    """Return the XML text for ``page``.

    Every row is emitted twice: once as buttons and once as labels, each in
    its own container taking the next id from ``layout_ids``.
    """

    if len(layout_ids) != 2 * len(page):
        raise ValueError("need exactly two layout ids per row")
    ids = iter(layout_ids)
    lines = [templates.header()]
    for row in page:
        for fragment in (templates.image_button, templates.text_label):
            lines.append(templates.row_open(page_id, next(ids)))
            lines.extend(fragment(name) for name in row)
            lines.append(templates.row_close())
    lines.append(templates.footer())
    return "".join(f"{line}\n" for line in lines)


def write_layouts(
    pages: Iterable[Page],
    output_dir: str | Path,
    allocator: IdentifierAllocator,
    *,
    reporter: StatusReporter | None = None,
) -> list[WrittenPage]:
    """Write one layout file per page into ``output_dir``."""

    written: list[WrittenPage] = []
    for page in pages:
        placed = allocate_page(page, output_dir, allocator)
        text = render_page(page, placed.page_id, placed.layout_ids)
        try:
            with open(placed.path, "w", encoding="utf-8", newline="\n") as fh:
                fh.write(text)
        except OSError as exc:
            raise RuntimeError(
                f"Failed to write layout {placed.path}: {exc}"
            ) from exc
        if reporter is not None:
            reporter.log_status("Wrote", placed.path.name)
        written.append(placed)
    return written
