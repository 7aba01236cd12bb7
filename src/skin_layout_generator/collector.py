"""Discovery of skin folders and the asset names they contain."""

from __future__ import annotations

import re
from pathlib import Path

IMAGE_EXTENSIONS = {".png"}

# Names end up in android:id and @drawable references unescaped.
_RESOURCE_NAME_RE = re.compile(r"^[A-Za-z0-9_]+$")


def _is_image_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS


def asset_name(filename: str) -> str:
    """Return the drawable name for ``filename`` (everything before the first dot).

    Raises ``ValueError`` when the name is not made of letters, digits and
    underscores, since it could not be used as a resource identifier.
    """

    name = filename.split(".")[0]
    if not _RESOURCE_NAME_RE.match(name):
        raise ValueError(
            f"Image {filename!r} does not give a valid resource name: {name!r}"
        )
    return name


def discover_folders(skins_root: str | Path) -> list[Path]:
    """Return every asset folder under ``skins_root`` sorted by name."""

    root = Path(skins_root)
    if not root.is_dir():
        raise FileNotFoundError(f"Skins directory not found: {root}")
    return sorted(child for child in root.iterdir() if child.is_dir())


def collect_names(folder: str | Path) -> list[str]:
    """Return asset names for the images in ``folder``.

    Names come back in file name order, which callers should treat as
    unordered unless an ordering strategy applies to the folder. A missing
    or unreadable folder raises instead of returning a partial list.
    """

    path = Path(folder)
    return [
        asset_name(child.name)
        for child in sorted(path.iterdir(), key=lambda p: p.name)
        if _is_image_file(child)
    ]
