"""Core business logic layer.

Subpackages:
- ingredients: name keys, amount parsing, unit conversion
- matching: dish match engine (owned ingredients vs. catalog)
- shopping: shopping list consolidation and ownership ticks
- calendar: month grid and date-range grouping for the meal plan
- reporting: meal plan and selection totals

Everything here is pure: inputs are never mutated and nothing raises on
malformed records.
"""
__all__ = ["ingredients", "matching", "shopping", "calendar", "reporting"]
