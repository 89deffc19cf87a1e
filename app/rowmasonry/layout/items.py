"""Item records consumed by the row masonry engine.

The engine only reads ``id``, ``width``, ``height`` and ``preserve_dimensions``.
Anything else the caller wants to carry along lives in ``payload`` and is
handed back untouched on the positioned output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

P = TypeVar("P")


@dataclass(frozen=True)
class MasonryItem(Generic[P]):
    """Input item for layout.

    width/height: intrinsic size, if known. Missing or non-positive values
    make the engine fall back to a deterministic aspect ratio.
    """

    id: str
    width: Optional[float] = None
    height: Optional[float] = None
    preserve_dimensions: bool = False
    payload: Optional[P] = None


@dataclass(frozen=True)
class ItemDimensions:
    width: float
    height: float
