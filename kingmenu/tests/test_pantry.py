import unittest
from kingmenu.domain.OwnedIngredient import OwnedIngredient
from kingmenu.domain.Pantry import Pantry
from kingmenu.events.Event_Bus import EventBus, PANTRY_CHANGED


class TestPantry(unittest.TestCase):

    def setUp(self):
        self.events = []
        bus = EventBus()
        bus.subscribe(PANTRY_CHANGED, lambda name, payload: self.events.append(payload))
        self.pantry = Pantry().set_event_bus(bus)

    def test_add_item(self):
        ingredient = OwnedIngredient(name="Rice", quantity=500, unit="g")
        self.pantry.add_item(ingredient)
        self.assertIn(ingredient, self.pantry.get_items())
        self.assertTrue(ingredient.id.startswith("owned-"))
        self.assertEqual(self.events[-1], {"action": "added", "name": "Rice", "count": 1})

    def test_remove_item(self):
        ingredient = self.pantry.add_item(OwnedIngredient(id="r1", name="Rice"))
        self.pantry.remove_item("r1")
        self.assertNotIn(ingredient, self.pantry.get_items())
        self.assertEqual(self.events[-1]["action"], "removed")

    def test_remove_unknown_raises(self):
        with self.assertRaises(ValueError):
            self.pantry.remove_item("missing")

    def test_get_items(self):
        ingredient1 = OwnedIngredient(name="Rice")
        ingredient2 = OwnedIngredient(name="Soy sauce")
        self.pantry.add_item(ingredient1)
        self.pantry.add_item(ingredient2)
        self.assertEqual(self.pantry.get_items(), [ingredient1, ingredient2])

    def test_from_dict_and_clear(self):
        self.pantry.from_dict([{"id": "1", "name": "Eggs", "quantity": 6}, "junk"])
        self.assertEqual([i.name for i in self.pantry.get_items()], ["Eggs"])
        self.assertEqual(self.pantry.to_dict()[0]["quantity"], 6)
        self.pantry.clear()
        self.assertEqual(self.pantry.get_items(), [])
