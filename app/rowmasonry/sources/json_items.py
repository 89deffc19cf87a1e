"""Load layout items from JSON.

Accepted document shapes:
- a list of item objects
- an object with an ``items`` list

Item objects use ``id``, ``width``, ``height`` and ``preserveDimensions``
(``preserve_dimensions`` also works). Every other key is kept as payload.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping

from app.rowmasonry.layout.items import MasonryItem

_RESERVED = {"id", "width", "height", "preserveDimensions", "preserve_dimensions"}


def _number_or_none(value: Any) -> float | None:
    # Bad sizes are not an error; the engine falls back to a ratio.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def item_from_record(record: Mapping[str, Any]) -> MasonryItem[dict]:
    if not isinstance(record, Mapping):
        raise ValueError(f"item must be an object, got {type(record).__name__}")

    raw_id = record.get("id")
    if raw_id is None:
        item_id = ""
    elif isinstance(raw_id, (str, int)) and not isinstance(raw_id, bool):
        item_id = str(raw_id)
    else:
        raise ValueError(f"item id must be a string or integer, got {raw_id!r}")

    # Only a JSON boolean true enables preservation.
    preserve = record.get("preserveDimensions", record.get("preserve_dimensions", False))
    payload = {k: v for k, v in record.items() if k not in _RESERVED}

    return MasonryItem(
        id=item_id,
        width=_number_or_none(record.get("width")),
        height=_number_or_none(record.get("height")),
        preserve_dimensions=preserve is True,
        payload=payload,
    )


def items_from_records(records: Iterable[Mapping[str, Any]]) -> List[MasonryItem[dict]]:
    return [item_from_record(r) for r in records]


def parse_items(document: Any) -> List[MasonryItem[dict]]:
    if isinstance(document, Mapping):
        document = document.get("items")
    if not isinstance(document, list):
        raise ValueError("expected a list of items or an object with an 'items' list")
    return items_from_records(document)


def load_items(path: str | Path) -> List[MasonryItem[dict]]:
    p = Path(path)
    with open(p, "r", encoding="utf-8") as f:
        document = json.load(f)
    return parse_items(document)
