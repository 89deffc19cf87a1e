"""Plain-data export of a layout, for JSON consumers (web views, scripts)."""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from app.rowmasonry.layout.lookup import KeyFn, item_key, row_key
from app.rowmasonry.layout.rows import MasonryLayout, PositionedItem


def _item_to_dict(placed: PositionedItem, key_fn: Optional[KeyFn]) -> dict:
    out: dict[str, Any] = {}
    if isinstance(placed.payload, Mapping):
        out.update(placed.payload)
    # Geometry wins over payload keys with the same name.
    out.update(
        {
            "id": placed.id,
            "key": item_key(placed, key_fn),
            "masonryIndex": placed.index,
            "aspectRatio": placed.aspect_ratio,
            "width": placed.width,
            "height": placed.height,
            "left": placed.left,
            "top": placed.top,
        }
    )
    if placed.preserved:
        out["preserveDimensions"] = True
    return out


def layout_to_dict(layout: MasonryLayout, key_fn: Optional[KeyFn] = None) -> dict:
    return {
        "rows": [
            {
                "key": row_key(row),
                "rowIndex": row.row_index,
                "top": row.top,
                "height": row.height,
                "items": [_item_to_dict(p, key_fn) for p in row.items],
            }
            for row in layout.rows
        ],
        "totalHeight": layout.total_height,
    }


def layout_to_json(layout: MasonryLayout, key_fn: Optional[KeyFn] = None, indent: int | None = 2) -> str:
    return json.dumps(layout_to_dict(layout, key_fn), indent=indent)
