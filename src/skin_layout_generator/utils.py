"""Confirmation before deleting layouts left over from an earlier run."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

# Environment variable that answers yes to the removal prompt
ASSUME_YES_ENV = "SKIN_LAYOUTS_ASSUME_YES"

_YES = {"y", "yes"}
_NO = {"n", "no"}


def assume_yes() -> bool:
    return os.environ.get(ASSUME_YES_ENV, "").lower() in {"1", "true", "yes"}


def confirm_layout_removal(
    stale: Sequence[Path], output_dir: str | Path, default: bool = True
) -> bool:
    """List ``stale`` layout files and ask whether to delete them.

    Each file name is printed before the question so the user sees exactly
    what will go. Nothing is asked when ``stale`` is empty. When
    ``SKIN_LAYOUTS_ASSUME_YES`` is truthy the answer is yes without reading
    input.
    """

    if not stale:
        return False
    print(f"Generated layouts already in {output_dir}:")
    for path in stale:
        print(f"  {path.name}")

    question = f"Remove these {len(stale)} layout file(s)?"
    if assume_yes():
        print(f"{question} [Y/n]: y (auto)")
        return True

    prompt = f"{question} [{'Y/n' if default else 'y/N'}]: "
    while True:
        choice = input(prompt).strip().lower()
        if not choice:
            return default
        if choice in _YES:
            return True
        if choice in _NO:
            return False
        print("Please enter 'y' or 'n'.")
