"""Pick ``max_items_per_row`` from a minimum tile width.

A justified row pads both viewport edges and puts one gutter between tiles,
so N tiles need ``N*min_tile + (N+1)*spacing`` pixels. The cap is the largest
N that still fits, never below one tile. Feed the result into
``LayoutOptions.max_items_per_row``.
"""

from __future__ import annotations


def choose_max_items_per_row(
    *,
    viewport_width_px: int,
    min_tile_width_px: int,
    spacing_px: int,
    max_items: int = 12,
) -> int:
    checks = (
        (viewport_width_px > 0, "viewport_width_px must be > 0"),
        (min_tile_width_px > 0, "min_tile_width_px must be > 0"),
        (spacing_px >= 0, "spacing_px must be >= 0"),
        (max_items > 0, "max_items must be > 0"),
    )
    for ok, message in checks:
        if not ok:
            raise ValueError(message)

    fits = (viewport_width_px - spacing_px) // (min_tile_width_px + spacing_px)
    return min(max(fits, 1), max_items)
