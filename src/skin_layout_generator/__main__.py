"""Command-line interface for the skin layout generator.

By default the ``Skins`` folder in the working directory is scanned and one
``fragment_skin_shop_<n>.xml`` layout per page is written to ``XMLOutput``.
The ``plan`` subcommand reports what would be generated without writing.

The ``-y/--yes`` flag can be used to automatically answer ``yes`` to any
interactive prompts.
"""

import argparse
import os

from . import generator, renderer
from .status import StatusReporter
from .utils import ASSUME_YES_ENV, confirm_layout_removal


def _add_path_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--skins",
        default=generator.DEFAULT_SKINS_DIR,
        help="Directory holding one sub-folder of images per skin group",
    )
    parser.add_argument(
        "--output",
        default=generator.DEFAULT_OUTPUT_DIR,
        help="Directory the layout XML files are written to",
    )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Skin layout generator")
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Automatically answer yes to confirmation prompts.",
    )

    sub = parser.add_subparsers(dest="command")
    gen = sub.add_parser(
        "generate",
        help="Write layout files for every skin folder (default)",
    )
    _add_path_arguments(gen)
    gen.add_argument(
        "--clean",
        action="store_true",
        help="Remove previously generated layouts from the output first",
    )
    gen.add_argument(
        "--quiet", action="store_true", help="Suppress progress output"
    )
    plan = sub.add_parser(
        "plan",
        help="Show the pages each folder would produce without writing files",
    )
    _add_path_arguments(plan)

    return parser.parse_args(argv)


def clean_output(output_dir: str) -> int:
    """Delete generated layouts in ``output_dir`` after confirmation."""

    stale = renderer.existing_layouts(output_dir)
    if not confirm_layout_removal(stale, output_dir):
        return 0
    for path in stale:
        path.unlink()
    return len(stale)


def run_generate(args: argparse.Namespace) -> int:
    skins = getattr(args, "skins", generator.DEFAULT_SKINS_DIR)
    output = getattr(args, "output", generator.DEFAULT_OUTPUT_DIR)
    if getattr(args, "clean", False):
        removed = clean_output(output)
        if removed:
            print(f"Removed {removed} old layouts.")

    with StatusReporter(quiet=getattr(args, "quiet", False)) as reporter:
        summary = generator.generate_layouts(skins, output, reporter=reporter)

    if summary.page_count:
        print(
            f"Generated {summary.page_count} layouts "
            f"from {len(summary.folders)} folders."
        )
    else:
        print("No layouts generated (no images found).")
    return summary.page_count


def run_plan(args: argparse.Namespace) -> int:
    summary = generator.plan_layouts(args.skins, args.output)
    for folder in summary.folders:
        if folder.pages:
            first, last = folder.pages[0].page_id, folder.pages[-1].page_id
            ids = f"pages {first}-{last}" if first != last else f"page {first}"
        else:
            ids = "no pages"
        print(
            f"{folder.name}: {folder.asset_count} assets, {folder.row_count} rows, "
            f"{len(folder.pages)} pages ({ids}, {folder.ordering.name} order)"
        )
    print(f"Total: {summary.page_count} layouts.")
    return summary.page_count


def main(argv=None) -> None:
    args = parse_args(argv)
    if args.yes:
        os.environ[ASSUME_YES_ENV] = "1"

    if args.command == "plan":
        run_plan(args)
    else:
        run_generate(args)


if __name__ == "__main__":
    main()
