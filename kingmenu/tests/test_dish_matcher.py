import unittest
from kingmenu.domain.Dish import Dish
from kingmenu.domain.OwnedIngredient import OwnedIngredient
from kingmenu.infra.Dish_Repository import reading_from_dishes
from kingmenu.logic.matching.dish_matcher import (
    classify_score, filter_matches, match_dishes, summarize_matches,
)


def _dish(dish_id, *names):
    return Dish.from_dict({
        "id": dish_id,
        "title": f"Dish {dish_id}",
        "ingredients": [{"id": f"{dish_id}-{i}", "name": n, "amount": "1"} for i, n in enumerate(names)],
    })


def _owned(*names):
    return [OwnedIngredient(name=n) for n in names]


class TestClassifyScore(unittest.TestCase):

    def test_tiers(self):
        self.assertEqual(classify_score(100), "perfect")
        self.assertEqual(classify_score(70), "near")
        self.assertEqual(classify_score(99.9), "near")
        self.assertEqual(classify_score(69.9), "creative")
        self.assertEqual(classify_score(30), "creative")


class TestMatchDishes(unittest.TestCase):

    def setUp(self):
        self.catalog = reading_from_dishes()

    def test_teriyaki_bowl_scenario(self):
        matches = match_dishes(_owned("Rice", "Chicken breast", "Soy sauce"), self.catalog)
        by_title = {m.dish.title: m for m in matches}
        self.assertIn("Chicken Teriyaki Bowl", by_title)
        bowl = by_title["Chicken Teriyaki Bowl"]
        self.assertEqual(bowl.compatibility_score, 60)
        self.assertEqual(bowl.match_type, "creative")
        self.assertEqual([i.name for i in bowl.missing_ingredients], ["Honey", "Broccoli"])
        self.assertNotIn("Spaghetti Carbonara", by_title)

    def test_never_below_threshold(self):
        owned = _owned("Eggs", "Rice", "Onions", "Tomatoes", "Parmesan cheese", "Lettuce")
        for m in match_dishes(owned, self.catalog):
            self.assertGreaterEqual(m.compatibility_score, 30)

    def test_all_owned_is_perfect(self):
        dish = _dish("a", "Salt", "Pepper")
        matches = match_dishes(_owned("salt", "PEPPER"), [dish])
        self.assertEqual(len(matches), 1)
        self.assertEqual(matches[0].match_type, "perfect")
        self.assertEqual(matches[0].compatibility_score, 100)

    def test_exact_boundaries(self):
        ten = _dish("ten", *[f"i{n}" for n in range(10)])
        near = match_dishes(_owned(*[f"i{n}" for n in range(7)]), [ten])
        self.assertEqual(near[0].match_type, "near")
        creative = match_dishes(_owned(*[f"i{n}" for n in range(3)]), [ten])
        self.assertEqual(creative[0].compatibility_score, 30)
        self.assertEqual(match_dishes(_owned("i0", "i1"), [ten]), [])

    def test_sorted_desc_and_stable(self):
        a = _dish("a", "x", "y")
        b = _dish("b", "x", "z")
        c = _dish("c", "x")
        matches = match_dishes(_owned("x"), [a, b, c])
        self.assertEqual([m.dish.id for m in matches], ["c", "a", "b"])

    def test_empty_inputs(self):
        self.assertEqual(match_dishes([], self.catalog), [])
        self.assertEqual(match_dishes(_owned("Rice"), []), [])
        self.assertEqual(match_dishes(_owned("Rice"), [_dish("empty")]), [])

    def test_malformed_names_count_as_missing(self):
        dish = Dish.from_dict({"id": "m", "ingredients": [{"name": None}, {"name": "Salt"}]})
        matches = match_dishes(_owned("Salt", None), [dish])
        self.assertEqual(matches[0].compatibility_score, 50)
        self.assertEqual(len(matches[0].missing_ingredients), 1)

    def test_custom_normalizer(self):
        dish = _dish("t", "Tomatoes")
        self.assertEqual(match_dishes(_owned("Tomato"), [dish]), [])
        strip_s = lambda name: name.lower().rstrip("s")
        self.assertEqual(len(match_dishes(_owned("Tomato"), [dish], normalize=strip_s)), 1)

    def test_owned_records_may_be_dicts(self):
        matches = match_dishes([{"name": "Salt"}], [_dish("d", "Salt")])
        self.assertEqual(matches[0].match_type, "perfect")


class TestSummaries(unittest.TestCase):

    def test_summarize_and_filter(self):
        dishes = [_dish("p", "a"), _dish("n", "a", "b", "c", "d"), _dish("c", "a", "b")]
        matches = match_dishes(_owned("a", "b", "c"), dishes)
        summary = summarize_matches(matches)
        self.assertEqual(summary, {"total": 3, "perfect": 2, "near": 1, "creative": 0})
        self.assertEqual([m.dish.id for m in filter_matches(matches, "near")], ["n"])
        self.assertEqual(len(filter_matches(matches, "all")), 3)
        self.assertEqual(filter_matches(matches, "unknown"), [])


class TestPlainDictIngredients(unittest.TestCase):

    def test_dict_ingredients_serialize(self):
        dish = Dish(id="a", title="A", ingredients=[{"name": "Salt", "amount": "1"}, {"name": "Rice"}])
        matches = match_dishes(_owned("salt"), [dish])
        self.assertEqual(matches[0].compatibility_score, 50)
        data = matches[0].to_dict()
        self.assertEqual(data["available_ingredients"][0]["name"], "Salt")
        self.assertEqual(data["missing_ingredients"][0]["name"], "Rice")
