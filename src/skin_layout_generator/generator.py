"""Run coordinator: folders -> names -> pages -> layout files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .collector import collect_names, discover_folders
from .identifiers import IdentifierAllocator
from .ordering import OrderingStrategy, ordering_for_folder
from .paginator import ROW_SIZE, ROWS_PER_PAGE, Page, paginate
from .renderer import WrittenPage, allocate_page, write_layouts
from .status import StatusReporter

DEFAULT_SKINS_DIR = "Skins"
DEFAULT_OUTPUT_DIR = "XMLOutput"


@dataclass
class FolderResult:
    """Layouts produced for one asset folder."""

    name: str
    asset_count: int
    ordering: OrderingStrategy
    pages: list[WrittenPage] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return sum(len(page.layout_ids) for page in self.pages) // 2


@dataclass
class GenerationSummary:
    folders: list[FolderResult] = field(default_factory=list)

    @property
    def pages(self) -> list[WrittenPage]:
        return [page for folder in self.folders for page in folder.pages]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def layout_count(self) -> int:
        return sum(len(page.layout_ids) for page in self.pages)


def prepare_folder(
    folder: str | Path,
    *,
    row_size: int = ROW_SIZE,
    rows_per_page: int = ROWS_PER_PAGE,
) -> tuple[FolderResult, list[Page]]:
    """Collect, order and paginate one folder's assets.

    The returned result has no pages yet; ids are only claimed when the pages
    are allocated or written.
    """

    folder = Path(folder)
    ordering = ordering_for_folder(folder.name)
    names = ordering.apply(collect_names(folder))
    result = FolderResult(name=folder.name, asset_count=len(names), ordering=ordering)
    return result, paginate(names, row_size=row_size, rows_per_page=rows_per_page)


def generate_folder(
    folder: str | Path,
    output_dir: str | Path,
    allocator: IdentifierAllocator,
    *,
    reporter: StatusReporter | None = None,
    row_size: int = ROW_SIZE,
    rows_per_page: int = ROWS_PER_PAGE,
) -> FolderResult:
    """Collect, order, paginate and render the assets of a single folder."""

    result, pages = prepare_folder(
        folder, row_size=row_size, rows_per_page=rows_per_page
    )
    if not pages:
        if reporter is not None:
            reporter.log_status("Skipped empty folder", result.name)
        return result
    if reporter is not None:
        reporter.log_status(
            "Processing folder", f"{result.name} ({result.asset_count} assets)"
        )
    result.pages = write_layouts(pages, output_dir, allocator, reporter=reporter)
    return result


def generate_layouts(
    skins_root: str | Path = DEFAULT_SKINS_DIR,
    output_root: str | Path = DEFAULT_OUTPUT_DIR,
    *,
    allocator: IdentifierAllocator | None = None,
    reporter: StatusReporter | None = None,
    row_size: int = ROW_SIZE,
    rows_per_page: int = ROWS_PER_PAGE,
) -> GenerationSummary:
    """Generate layout files for every folder under ``skins_root``.

    Folders are handled one at a time in name order and share ``allocator``,
    so page and layout ids keep counting up across folder boundaries. Any
    error aborts the run; files written before it are left in place.
    """

    folders = discover_folders(skins_root)
    os.makedirs(output_root, exist_ok=True)
    if allocator is None:
        allocator = IdentifierAllocator()
    if reporter is not None:
        reporter.set_total(len(folders))

    summary = GenerationSummary()
    for folder in folders:
        summary.folders.append(
            generate_folder(
                folder,
                output_root,
                allocator,
                reporter=reporter,
                row_size=row_size,
                rows_per_page=rows_per_page,
            )
        )
        if reporter is not None:
            reporter.advance()
    return summary


def plan_layouts(
    skins_root: str | Path = DEFAULT_SKINS_DIR,
    output_root: str | Path = DEFAULT_OUTPUT_DIR,
    *,
    row_size: int = ROW_SIZE,
    rows_per_page: int = ROWS_PER_PAGE,
) -> GenerationSummary:
    """Return what :func:`generate_layouts` would produce without writing files."""

    allocator = IdentifierAllocator()
    summary = GenerationSummary()
    for folder in discover_folders(skins_root):
        result, pages = prepare_folder(
            folder, row_size=row_size, rows_per_page=rows_per_page
        )
        result.pages = [allocate_page(page, output_root, allocator) for page in pages]
        summary.folders.append(result)
    return summary
