"""Justified row masonry layout.

This module is intentionally UI-framework agnostic.

Goal: given a *known* viewport width and an ordered list of items, compute
rows of tiles that fill the width edge to edge, with absolute pixel geometry,
so a renderer can draw them without measuring anything.

Algorithm per row:
1. greedy fill at base height until the next tile would overflow or the
   per-row cap is hit (always at least one tile)
2. normalize heights to the tallest tile
3. scale the row to the available width
4. position tiles left to right, vertically centered

Rows holding a preserved-size tile skip steps 2 and 3 and may overflow.
All sizes are floored after each scaling step.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from app.rowmasonry.layout.aspect import ResolvedDimensions, resolve_dimensions
from app.rowmasonry.layout.items import MasonryItem
from app.rowmasonry.layout.options import LayoutOptions


@dataclass(frozen=True)
class PositionedItem:
    """An item after layout. ``left`` is from the viewport edge, ``top`` is
    from the top of its row."""

    item: MasonryItem
    index: int
    aspect_ratio: float
    width: float
    height: float
    left: float
    top: float
    preserved: bool = False

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def payload(self) -> Any:
        return self.item.payload


@dataclass(frozen=True)
class MasonryRow:
    items: Tuple[PositionedItem, ...]
    height: float
    top: float
    row_index: int


@dataclass(frozen=True)
class MasonryLayout:
    rows: Tuple[MasonryRow, ...]
    total_height: float

    def items(self) -> List[PositionedItem]:
        """All positioned items in render order."""
        return [placed for row in self.rows for placed in row.items]


@dataclass
class _Draft:
    item: MasonryItem
    index: int
    aspect_ratio: float
    width: float
    height: float
    preserved: bool


class _RowBuilder:
    """Accumulates tiles for a single row. Never reused across rows."""

    def __init__(self, available_width: float, spacing: float, max_items: int) -> None:
        self.available_width = available_width
        self.spacing = spacing
        self.max_items = max_items
        self.drafts: List[_Draft] = []
        self.used_width: float = 0

    def is_full(self) -> bool:
        return len(self.drafts) >= self.max_items

    def try_add(self, draft: _Draft) -> bool:
        if self.is_full():
            return False
        gap = self.spacing if self.drafts else 0
        if self.used_width + draft.width + gap > self.available_width:
            return False
        self.drafts.append(draft)
        self.used_width += draft.width + gap
        return True

    def force(self, draft: _Draft) -> None:
        self.drafts.append(draft)
        self.used_width += draft.width


def _draft(item: MasonryItem, index: int, dims: ResolvedDimensions) -> _Draft:
    return _Draft(
        item=item,
        index=index,
        aspect_ratio=dims.aspect_ratio,
        width=dims.width,
        height=dims.height,
        preserved=dims.preserved,
    )


def _fill_row(
    resolved: Sequence[Tuple[MasonryItem, ResolvedDimensions]],
    start: int,
    opts: LayoutOptions,
    available_width: float,
) -> List[_Draft]:
    builder = _RowBuilder(available_width, opts.spacing, opts.max_items_per_row)
    for index in range(start, len(resolved)):
        item, dims = resolved[index]
        if not builder.try_add(_draft(item, index, dims)):
            break

    # A tile wider than the row on its own still has to go somewhere.
    if not builder.drafts:
        item, dims = resolved[start]
        builder.force(_draft(item, start, dims))

    return builder.drafts


def _scale_row(drafts: List[_Draft], available_width: float, spacing: float) -> None:
    if any(d.preserved for d in drafts):
        return

    tallest = max(d.height for d in drafts)
    for d in drafts:
        if d.height != tallest:
            factor = tallest / d.height
            d.width = math.floor(d.width * factor)
            d.height = tallest

    used = sum(d.width for d in drafts) + (len(drafts) - 1) * spacing
    # Non-positive available width would flip signs; let the row overflow instead.
    if used > 0 and available_width > 0:
        ratio = available_width / used
        for d in drafts:
            d.width = math.floor(d.width * ratio)
            d.height = math.floor(d.height * ratio)


def _place_row(drafts: Sequence[_Draft], spacing: float) -> Tuple[Tuple[PositionedItem, ...], float]:
    row_height = max(d.height for d in drafts)
    placed: List[PositionedItem] = []
    left = spacing
    for d in drafts:
        placed.append(
            PositionedItem(
                item=d.item,
                index=d.index,
                aspect_ratio=d.aspect_ratio,
                width=d.width,
                height=d.height,
                left=left,
                top=(row_height - d.height) / 2,
                preserved=d.preserved,
            )
        )
        left += d.width + spacing
    return tuple(placed), row_height


def layout_rows(
    items: Iterable[MasonryItem],
    viewport_width: float,
    options: Optional[LayoutOptions] = None,
    **overrides: Any,
) -> MasonryLayout:
    """Compute justified rows and total content height.

    ``overrides`` replace individual ``LayoutOptions`` fields, e.g.
    ``layout_rows(items, 320, spacing=0)``.

    Every input item appears exactly once in the result, in input order.
    """

    opts = options if options is not None else LayoutOptions()
    if overrides:
        opts = replace(opts, **overrides)
    opts.validate()

    spacing = opts.spacing
    available_width = viewport_width - spacing * 2

    # Each item is sized exactly once per pass.
    resolved = [
        (
            item,
            resolve_dimensions(
                item,
                index,
                base_height=opts.base_height,
                fallbacks=opts.aspect_ratio_fallbacks,
                preserve_dimensions=opts.preserve_dimensions,
                dimensions_fn=opts.dimensions_fn,
            ),
        )
        for index, item in enumerate(items)
    ]

    built: List[Tuple[Tuple[PositionedItem, ...], float]] = []
    start = 0
    while start < len(resolved):
        row_drafts = _fill_row(resolved, start, opts, available_width)
        _scale_row(row_drafts, available_width, spacing)
        built.append(_place_row(row_drafts, spacing))
        start += len(row_drafts)

    rows: List[MasonryRow] = []
    total_height: float = 0
    for row_index, (placed, height) in enumerate(built):
        rows.append(MasonryRow(items=placed, height=height, top=total_height, row_index=row_index))
        # Trailing spacing follows every row, the last one included.
        total_height += height + spacing

    return MasonryLayout(rows=tuple(rows), total_height=total_height)
