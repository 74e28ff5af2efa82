import unittest
from datetime import date
from kingmenu.domain.Dish import Dish
from kingmenu.domain.MealPlan import MealPlan
from kingmenu.domain.MealPlanEntry import MealPlanEntry
from kingmenu.events.Event_Bus import EventBus, MEAL_PLAN_ADDED, MEAL_PLAN_REMOVED, MEAL_PLAN_UPDATED


class TestMealPlan(unittest.TestCase):

    def setUp(self):
        self.events = []
        bus = EventBus()
        for name in (MEAL_PLAN_ADDED, MEAL_PLAN_REMOVED, MEAL_PLAN_UPDATED):
            bus.subscribe(name, lambda n, payload: self.events.append(n))
        self.plan = MealPlan().set_event_bus(bus)
        self.dish = Dish(id="1", title="Spaghetti Carbonara", cooking_time=25, servings=4)

    def _entry(self, day=date(2025, 3, 10), meal_type="dinner"):
        return MealPlanEntry(date=day, meal_type=meal_type, dish=self.dish, servings=2)

    def test_add_assigns_unique_ids(self):
        first = self.plan.add(self._entry())
        second = self.plan.add(self._entry())
        self.assertTrue(first.id.startswith("meal-"))
        self.assertNotEqual(first.id, second.id)
        self.assertEqual(len(self.plan.get_entries()), 2)
        self.assertEqual(self.events, [MEAL_PLAN_ADDED, MEAL_PLAN_ADDED])

    def test_remove(self):
        entry = self.plan.add(self._entry())
        self.plan.remove(entry.id)
        self.assertEqual(self.plan.get_entries(), [])
        self.assertIsNone(self.plan.get(entry.id))
        with self.assertRaises(ValueError):
            self.plan.remove(entry.id)

    def test_update_replaces_whole_record(self):
        entry = self.plan.add(self._entry())
        replacement = MealPlanEntry(id=entry.id, date=date(2025, 3, 11), meal_type="lunch",
                                    dish=self.dish, servings=5, notes="double batch")
        self.plan.update(replacement)
        stored = self.plan.get(entry.id)
        self.assertIs(stored, replacement)
        self.assertEqual(stored.meal_type, "lunch")
        self.assertEqual(self.events[-1], MEAL_PLAN_UPDATED)

    def test_update_unknown_raises(self):
        with self.assertRaises(ValueError):
            self.plan.update(MealPlanEntry(id="meal-nope", dish=self.dish))

    def test_entry_from_dict(self):
        entry = MealPlanEntry.from_dict({
            "id": "x", "userId": "u1", "date": "2025-03-10", "mealType": "lunch",
            "dish": {"id": "1", "title": "Soup"}, "servings": 2,
        })
        self.assertEqual(entry.date, date(2025, 3, 10))
        self.assertEqual(entry.meal_type, "lunch")
        self.assertEqual(entry.to_dict()["date"], "2025-03-10")
        self.assertIsNone(MealPlanEntry.from_dict({"date": "10/03/2025"}).date)
