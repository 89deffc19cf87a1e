"""Aspect ratio and per-item size resolution.

Both functions are pure: same item, same index, same parameters give the same
answer, so a layout pass can be recomputed at any time without drift.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple

from app.rowmasonry.layout.items import ItemDimensions, MasonryItem

# Common photo ratios, portrait to landscape.
DEFAULT_ASPECT_RATIOS: Tuple[float, ...] = (
    0.56,  # 9:16
    0.67,  # 2:3
    0.75,  # 3:4
    1.0,  # 1:1
    1.33,  # 4:3
    1.5,  # 3:2
    1.78,  # 16:9
)

# (item, sequence index) -> ItemDimensions | (w, h) | {"width", "height"} | None
DimensionsFn = Callable[[MasonryItem, int], Any]


@dataclass(frozen=True)
class ResolvedDimensions:
    width: float
    height: float
    aspect_ratio: float
    preserved: bool = False


def is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def has_intrinsic_size(item: MasonryItem) -> bool:
    return is_positive_number(item.width) and is_positive_number(item.height)


def id_seed(item_id: str) -> int:
    """Sum of the character codes of ``item_id``."""
    return sum(ord(ch) for ch in item_id)


def check_fallbacks(fallbacks: Sequence[float]) -> None:
    if len(fallbacks) == 0:
        raise ValueError("aspect_ratio_fallbacks must not be empty")


def resolve_aspect_ratio(
    item: MasonryItem,
    index: int,
    fallbacks: Sequence[float] = DEFAULT_ASPECT_RATIOS,
) -> float:
    """Return width / height for ``item``.

    Priority:
    - intrinsic width/height when both are positive
    - a fallback picked by the id's character-code sum (stable across reorders)
    - a fallback picked by sequence index
    """

    check_fallbacks(fallbacks)

    if has_intrinsic_size(item):
        return item.width / item.height

    if item.id:
        return fallbacks[id_seed(str(item.id)) % len(fallbacks)]

    return fallbacks[index % len(fallbacks)]


def _coerce_custom(result: Any) -> Optional[Tuple[float, float]]:
    if result is None:
        return None
    if isinstance(result, ItemDimensions):
        width, height = result.width, result.height
    elif isinstance(result, Mapping):
        width, height = result.get("width"), result.get("height")
    elif isinstance(result, (tuple, list)) and len(result) == 2:
        width, height = result
    else:
        return None

    if is_positive_number(width) and is_positive_number(height):
        return width, height
    return None


def resolve_dimensions(
    item: MasonryItem,
    index: int,
    *,
    base_height: float = 100,
    fallbacks: Sequence[float] = DEFAULT_ASPECT_RATIOS,
    preserve_dimensions: bool = False,
    dimensions_fn: Optional[DimensionsFn] = None,
) -> ResolvedDimensions:
    """Size an item before it is placed into a row.

    A usable ``dimensions_fn`` result is taken verbatim and beats everything,
    including preservation flags. Otherwise preserved items with an intrinsic
    size keep it exactly; the rest get ``base_height`` and a width derived
    from their aspect ratio (floored).
    """

    if dimensions_fn is not None:
        custom = _coerce_custom(dimensions_fn(item, index))
        if custom is not None:
            width, height = custom
            return ResolvedDimensions(width, height, width / height)

    if (preserve_dimensions or item.preserve_dimensions) and has_intrinsic_size(item):
        return ResolvedDimensions(
            item.width, item.height, item.width / item.height, preserved=True
        )

    ratio = resolve_aspect_ratio(item, index, fallbacks)
    return ResolvedDimensions(math.floor(base_height * ratio), base_height, ratio)
