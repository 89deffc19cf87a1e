from __future__ import annotations

from pathlib import PurePath


def relative_item_id(path: str | PurePath, root: str | PurePath) -> str:
    """Build a stable item id for a file under ``root``.

    - Relative to root, so moving the whole folder keeps ids
    - Forward slashes on every platform
    - Lexical only: symlinks keep the name they have inside root
    """
    return PurePath(path).relative_to(PurePath(root)).as_posix()


def is_hidden(path: str | PurePath, root: str | PurePath) -> bool:
    rel = PurePath(path).relative_to(PurePath(root))
    return any(part.startswith(".") for part in rel.parts)
