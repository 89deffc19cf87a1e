from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from app.rowmasonry.layout.aspect import (
    DEFAULT_ASPECT_RATIOS,
    DimensionsFn,
    check_fallbacks,
    is_positive_number,
)


@dataclass(frozen=True)
class LayoutOptions:
    """Knobs for one layout pass.

    Defaults match the stock grid: 6px gutters, 100px base rows, at most
    six tiles per row.
    """

    spacing: int = 6
    base_height: int = 100
    max_items_per_row: int = 6
    aspect_ratio_fallbacks: Sequence[float] = DEFAULT_ASPECT_RATIOS
    preserve_dimensions: bool = False
    dimensions_fn: Optional[DimensionsFn] = None

    def validate(self) -> None:
        if self.spacing < 0:
            raise ValueError("spacing must be >= 0")
        if not is_positive_number(self.base_height):
            raise ValueError("base_height must be > 0")
        if self.max_items_per_row <= 0:
            raise ValueError("max_items_per_row must be > 0")
        check_fallbacks(self.aspect_ratio_fallbacks)
        if not all(is_positive_number(r) for r in self.aspect_ratio_fallbacks):
            raise ValueError("aspect_ratio_fallbacks must all be > 0")
