import unittest
from datetime import date
from kingmenu.domain.Dish import Dish
from kingmenu.domain.MealPlanEntry import MealPlanEntry
from kingmenu.logic.reporting.plan_stats import compute_meal_plan_stats, compute_selection_totals, upcoming_meals


class TestPlanStats(unittest.TestCase):

    def setUp(self):
        self.curry = Dish(id="5", title="Chicken Curry", cooking_time=45, servings=6)
        self.salad = Dish(id="6", title="Caesar Salad", cooking_time=15, servings=2)
        self.entries = [
            MealPlanEntry(id="a", date=date(2025, 3, 12), dish=self.curry, servings=4),
            MealPlanEntry(id="b", date=date(2025, 3, 10), dish=self.salad, servings=2),
            MealPlanEntry(id="c", date=date(2025, 3, 10), dish=self.curry, servings=3),
            MealPlanEntry(id="d", date=date(2025, 4, 30), dish=self.salad, servings=1),
            MealPlanEntry(id="e", date=date(2025, 3, 1), dish=self.salad, servings=1),
        ]

    def test_compute_meal_plan_stats(self):
        stats = compute_meal_plan_stats(self.entries)
        self.assertEqual(stats, {
            "total_meals": 5,
            "unique_dishes": 2,
            "total_cooking_time": 45 + 15 + 45 + 15 + 15,
            "total_servings": 11,
        })

    def test_empty_stats(self):
        self.assertEqual(compute_meal_plan_stats([]), {
            "total_meals": 0, "unique_dishes": 0, "total_cooking_time": 0, "total_servings": 0,
        })

    def test_upcoming_meals(self):
        upcoming = upcoming_meals(self.entries, today=date(2025, 3, 10), days=7)
        self.assertEqual([e.id for e in upcoming], ["b", "c", "a"])
        limited = upcoming_meals(self.entries, today=date(2025, 3, 10), days=7, limit=1)
        self.assertEqual([e.id for e in limited], ["b"])

    def test_selection_totals(self):
        totals = compute_selection_totals([self.curry, self.salad])
        self.assertEqual(totals, {"count": 2, "total_cooking_time": 60, "total_servings": 8})
        self.assertEqual(compute_selection_totals([]), {"count": 0, "total_cooking_time": 0, "total_servings": 0})
