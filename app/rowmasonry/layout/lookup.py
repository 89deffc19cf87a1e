"""Read-side queries over a computed layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

from app.rowmasonry.layout.items import MasonryItem
from app.rowmasonry.layout.rows import MasonryLayout, MasonryRow, PositionedItem

# (item, sequence index) -> render key. Used by renderers and export only.
KeyFn = Callable[[MasonryItem, int], str]


@dataclass(frozen=True)
class ItemGeometry:
    width: float
    height: float
    left: float
    top: float


def find_item_dimensions(
    item: Union[str, MasonryItem], layout: MasonryLayout
) -> Optional[ItemGeometry]:
    """Return absolute geometry for the first tile with a matching id.

    ``top`` is measured from the top of the content area (row top plus the
    in-row centering offset). Returns None if the id is not in the layout.
    """

    item_id = item.id if isinstance(item, MasonryItem) else item
    for row in layout.rows:
        for placed in row.items:
            if placed.id == item_id:
                return ItemGeometry(
                    width=placed.width,
                    height=placed.height,
                    left=placed.left,
                    top=row.top + placed.top,
                )
    return None


def item_key(placed: PositionedItem, key_fn: Optional[KeyFn] = None) -> str:
    """Stable render key for a tile: custom key, else id, else sequence index."""
    if key_fn is not None:
        return key_fn(placed.item, placed.index)
    if placed.id:
        return str(placed.id)
    return str(placed.index)


def row_key(row: MasonryRow) -> str:
    return f"row-{row.row_index}"
