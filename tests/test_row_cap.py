import unittest

from app.rowmasonry.layout.items import MasonryItem
from app.rowmasonry.layout.row_cap import choose_max_items_per_row
from app.rowmasonry.layout.rows import layout_rows


class TestRowCap(unittest.TestCase):
    def test_edge_padding_counts_against_the_cap(self):
        # three 100px tiles need 3*100 + 4*10 = 340px
        self.assertEqual(choose_max_items_per_row(viewport_width_px=340, min_tile_width_px=100, spacing_px=10), 3)
        self.assertEqual(choose_max_items_per_row(viewport_width_px=339, min_tile_width_px=100, spacing_px=10), 2)

    def test_narrow_viewport_still_gets_one_tile(self):
        self.assertEqual(choose_max_items_per_row(viewport_width_px=50, min_tile_width_px=400, spacing_px=6), 1)

    def test_wide_viewport_hits_the_ceiling(self):
        self.assertEqual(
            choose_max_items_per_row(viewport_width_px=5000, min_tile_width_px=20, spacing_px=2, max_items=4),
            4,
        )

    def test_cap_keeps_justified_tiles_above_minimum(self):
        cap = choose_max_items_per_row(viewport_width_px=1000, min_tile_width_px=300, spacing_px=10)
        self.assertEqual(cap, 3)

        items = [MasonryItem(f"sq{i}", 100, 100) for i in range(7)]
        layout = layout_rows(items, 1000, spacing=10, base_height=100, max_items_per_row=cap)

        self.assertEqual([len(r.items) for r in layout.rows], [3, 3, 1])
        for placed in layout.rows[0].items + layout.rows[1].items:
            self.assertGreaterEqual(placed.width, 300)

    def test_small_tiles_are_held_back_by_the_cap(self):
        # 10px-wide tiles would pack 100 to a row without a cap
        cap = choose_max_items_per_row(viewport_width_px=1000, min_tile_width_px=400, spacing_px=0)
        items = [MasonryItem(f"t{i}", 10, 100) for i in range(5)]
        layout = layout_rows(items, 1000, spacing=0, base_height=100, max_items_per_row=cap)

        self.assertEqual([len(r.items) for r in layout.rows], [2, 2, 1])
        self.assertEqual([p.width for p in layout.rows[0].items], [500, 500])

    def test_rejects_bad_arguments(self):
        bad = [
            dict(viewport_width_px=0, min_tile_width_px=100, spacing_px=0),
            dict(viewport_width_px=100, min_tile_width_px=-5, spacing_px=0),
            dict(viewport_width_px=100, min_tile_width_px=100, spacing_px=-1),
            dict(viewport_width_px=100, min_tile_width_px=100, spacing_px=0, max_items=0),
        ]
        for kwargs in bad:
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    choose_max_items_per_row(**kwargs)


if __name__ == "__main__":
    unittest.main()
