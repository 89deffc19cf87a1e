import json
import unittest
from pathlib import Path

from app.rowmasonry.sources.json_items import item_from_record, load_items, parse_items


class TestJsonItems(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp_dir = Path('.tmp-tests')
        self.tmp_dir.mkdir(exist_ok=True)

    def test_load_items_list(self) -> None:
        path = self.tmp_dir / 'items.json'
        path.write_text(
            json.dumps(
                [
                    {"id": "1", "width": 300, "height": 200, "preserveDimensions": True, "title": "Featured"},
                    {"id": 2, "width": 400, "height": 300, "imageUrl": "https://picsum.photos/400/300"},
                    {"id": "3"},
                ]
            ),
            encoding="utf-8",
        )

        items = load_items(path)
        self.assertEqual([it.id for it in items], ["1", "2", "3"])
        self.assertTrue(items[0].preserve_dimensions)
        self.assertEqual(items[0].payload, {"title": "Featured"})
        self.assertEqual((items[1].width, items[1].height), (400, 300))
        self.assertFalse(items[1].preserve_dimensions)
        self.assertEqual(items[1].payload, {"imageUrl": "https://picsum.photos/400/300"})
        self.assertIsNone(items[2].width)

    def test_items_key_and_snake_case_flag(self) -> None:
        items = parse_items({"items": [{"id": "a", "width": 1, "height": 2, "preserve_dimensions": True}]})
        self.assertEqual(len(items), 1)
        self.assertTrue(items[0].preserve_dimensions)
        self.assertEqual(items[0].payload, {})

    def test_bad_sizes_become_none(self) -> None:
        item = item_from_record({"id": "x", "width": "wide", "height": True})
        self.assertIsNone(item.width)
        self.assertIsNone(item.height)

    def test_preserve_flag_must_be_boolean(self) -> None:
        for raw in ("false", "true", 1, "yes", None):
            with self.subTest(raw=raw):
                item = item_from_record({"id": "x", "width": 10, "height": 10, "preserveDimensions": raw})
                self.assertFalse(item.preserve_dimensions)
        self.assertTrue(item_from_record({"id": "x", "preserveDimensions": True}).preserve_dimensions)
        self.assertFalse(item_from_record({"id": "x", "preserve_dimensions": False}).preserve_dimensions)

    def test_missing_id_is_empty(self) -> None:
        self.assertEqual(item_from_record({"width": 10, "height": 10}).id, "")

    def test_invalid_documents(self) -> None:
        with self.assertRaises(ValueError):
            parse_items("nope")
        with self.assertRaises(ValueError):
            parse_items({"rows": []})
        with self.assertRaises(ValueError):
            parse_items([1, 2])
        with self.assertRaises(ValueError):
            parse_items([{"id": True}])
        with self.assertRaises(ValueError):
            parse_items([{"id": ["x"]}])


if __name__ == '__main__':
    unittest.main()
