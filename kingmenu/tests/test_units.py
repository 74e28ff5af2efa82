import unittest
from kingmenu.logic.ingredients.units import convert_measurement, format_measurement, preferred_units


class TestUnits(unittest.TestCase):

    def test_weight(self):
        self.assertAlmostEqual(convert_measurement(1, "kg", "g"), 1000)
        self.assertAlmostEqual(convert_measurement(1, "lb", "oz"), 453.59 / 28.35)

    def test_volume_depends_on_system(self):
        self.assertAlmostEqual(convert_measurement(1, "cup", "ml"), 250)
        self.assertAlmostEqual(convert_measurement(1, "cup", "ml", "imperial"), 236.59)
        self.assertAlmostEqual(convert_measurement(3, "tsp", "tbsp"), 1)

    def test_temperature(self):
        self.assertAlmostEqual(convert_measurement(100, "celsius", "fahrenheit"), 212)
        self.assertAlmostEqual(convert_measurement(32, "fahrenheit", "celsius"), 0)

    def test_unknown_or_cross_family_unchanged(self):
        self.assertEqual(convert_measurement(2, "g", "ml"), 2)
        self.assertEqual(convert_measurement(2, "pieces", "pieces"), 2)

    def test_format_and_preferred(self):
        self.assertEqual(format_measurement(2.5, "kg"), "2.5 kg")
        self.assertEqual(format_measurement(3.0, "g"), "3 g")
        self.assertEqual(preferred_units("en-US")["temperature"], "fahrenheit")
        self.assertEqual(preferred_units("ro-RO")["weight"], ["g", "kg"])
