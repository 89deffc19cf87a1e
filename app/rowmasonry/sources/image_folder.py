"""Build layout items from a folder of images.

Only image headers are read (Pillow opens lazily), so large folders are cheap
to scan. Files Pillow cannot identify still become items; they just take a
fallback aspect ratio.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image

from app.rowmasonry.layout.items import MasonryItem
from app.rowmasonry.utils.pathing import is_hidden, relative_item_id

logger = logging.getLogger(__name__)

IMAGE_EXTS = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".tif", ".tiff"}

# EXIF orientations that rotate the image a quarter turn.
_EXIF_ORIENTATION = 0x0112
_QUARTER_TURNS = {5, 6, 7, 8}


def list_image_paths(folder: str | Path, *, recursive: bool = False) -> List[Path]:
    root = Path(folder)
    if not root.exists():
        raise FileNotFoundError(f"folder not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"not a folder: {root}")

    candidates = root.rglob("*") if recursive else root.iterdir()
    paths = [
        p
        for p in candidates
        if p.is_file() and p.suffix.lower() in IMAGE_EXTS and not is_hidden(p, root)
    ]
    return sorted(paths, key=lambda p: p.relative_to(root).as_posix().casefold())


def read_image_size(path: str | Path, *, respect_orientation: bool = True) -> Optional[Tuple[int, int]]:
    """Return the displayed (width, height) of an image, or None if unreadable."""
    try:
        with Image.open(path) as img:
            width, height = img.size
            if respect_orientation and img.getexif().get(_EXIF_ORIENTATION) in _QUARTER_TURNS:
                width, height = height, width
    except (OSError, Image.DecompressionBombError) as exc:
        logger.warning("Could not read image size for %s: %s", path, exc)
        return None
    return width, height


def scan_image_items(
    folder: str | Path,
    *,
    recursive: bool = False,
    respect_orientation: bool = True,
) -> List[MasonryItem[dict]]:
    root = Path(folder)
    items: List[MasonryItem[dict]] = []
    for path in list_image_paths(root, recursive=recursive):
        size = read_image_size(path, respect_orientation=respect_orientation)
        width, height = size if size is not None else (None, None)
        items.append(
            MasonryItem(
                id=relative_item_id(path, root),
                width=width,
                height=height,
                payload={"path": str(path.resolve())},
            )
        )
    logger.debug("Scanned %d images in %s", len(items), root)
    return items
