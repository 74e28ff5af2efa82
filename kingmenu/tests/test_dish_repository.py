import json
import os
import tempfile
import unittest
from kingmenu.infra.Dish_Repository import find_dish, reading_from_dishes


class TestDishRepository(unittest.TestCase):

    def test_reads_bundled_catalog(self):
        dishes = reading_from_dishes()
        self.assertEqual(len(dishes), 6)
        self.assertEqual(find_dish(dishes, "2").title, "Chicken Teriyaki Bowl")
        self.assertIsNone(find_dish(dishes, "999"))

    def test_missing_file_returns_empty(self):
        with self.assertLogs("kingmenu.infra.Dish_Repository", level="WARNING"):
            self.assertEqual(reading_from_dishes("/nonexistent/dishes.json"), [])

    def test_invalid_json_returns_empty(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "dishes.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("{not json")
            with self.assertLogs("kingmenu.infra.Dish_Repository", level="ERROR"):
                self.assertEqual(reading_from_dishes(path), [])

    def test_skips_non_object_records(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "dishes.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump([{"id": "1", "title": "Soup"}, 3], f)
            self.assertEqual([d.title for d in reading_from_dishes(path)], ["Soup"])
