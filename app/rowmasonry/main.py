from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from app.rowmasonry.export import layout_to_json
from app.rowmasonry.layout.aspect import DEFAULT_ASPECT_RATIOS
from app.rowmasonry.layout.items import MasonryItem
from app.rowmasonry.layout.lookup import find_item_dimensions
from app.rowmasonry.layout.options import LayoutOptions
from app.rowmasonry.layout.row_cap import choose_max_items_per_row
from app.rowmasonry.layout.rows import MasonryLayout, layout_rows
from app.rowmasonry.sources.image_folder import scan_image_items
from app.rowmasonry.sources.json_items import load_items


def _parse_ratios(text: str) -> tuple[float, ...]:
    try:
        ratios = tuple(float(part) for part in text.split(",") if part.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ratio list: {text!r}")
    return ratios


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute a justified row masonry layout")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--items", help="JSON file with a list of items")
    source.add_argument("--images", help="Folder of images to lay out")
    parser.add_argument("--recursive", action="store_true", help="Include images in subfolders")
    parser.add_argument("--width", type=int, required=True, help="Viewport width in px")
    parser.add_argument("--spacing", type=int, default=6)
    parser.add_argument("--base-height", type=int, default=100)
    cap = parser.add_mutually_exclusive_group()
    cap.add_argument("--max-items-per-row", type=int, default=None)
    cap.add_argument("--min-tile-width", type=int, default=None, help="Derive the row cap from a minimum tile width")
    parser.add_argument(
        "--fallback-ratios",
        type=_parse_ratios,
        default=DEFAULT_ASPECT_RATIOS,
        help="Comma-separated aspect ratios for items without a size",
    )
    parser.add_argument("--preserve-dimensions", action="store_true", help="Keep intrinsic sizes exactly")
    parser.add_argument("--find", metavar="ID", help="Print geometry for one item id")
    parser.add_argument("--json", action="store_true", help="Print the full layout as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def options_from_args(args: argparse.Namespace) -> LayoutOptions:
    if args.min_tile_width is not None:
        max_items = choose_max_items_per_row(
            viewport_width_px=args.width,
            min_tile_width_px=args.min_tile_width,
            spacing_px=args.spacing,
        )
    elif args.max_items_per_row is not None:
        max_items = args.max_items_per_row
    else:
        max_items = LayoutOptions.max_items_per_row

    return LayoutOptions(
        spacing=args.spacing,
        base_height=args.base_height,
        max_items_per_row=max_items,
        aspect_ratio_fallbacks=args.fallback_ratios,
        preserve_dimensions=args.preserve_dimensions,
    )


def load_source(args: argparse.Namespace) -> List[MasonryItem]:
    if args.items:
        return load_items(args.items)
    return scan_image_items(args.images, recursive=args.recursive)


def print_summary(layout: MasonryLayout, viewport_width: int) -> None:
    print(f"Viewport: {viewport_width}px")
    print(f"Rows: {len(layout.rows)}")
    print(f"Items: {len(layout.items())}")
    print(f"Total height: {layout.total_height}px")
    for row in layout.rows[:20]:
        ids = ", ".join(p.id or f"#{p.index}" for p in row.items)
        print(f"- row {row.row_index} @ {row.top}px, h={row.height}: {ids}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = options_from_args(args)
        items = load_source(args)
        layout = layout_rows(items, args.width, options)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.find is not None:
        geometry = find_item_dimensions(args.find, layout)
        if geometry is None:
            print(f"error: item not found: {args.find}", file=sys.stderr)
            return 1
        print(f"{args.find}: {geometry.width}x{geometry.height} at ({geometry.left}, {geometry.top})")
        return 0

    if args.json:
        print(layout_to_json(layout))
    else:
        print_summary(layout, args.width)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
