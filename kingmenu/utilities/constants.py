from typing import Final

ISO_DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Dish matching tiers (percent of a dish's ingredients already owned)
MATCH_THRESHOLD: Final[int] = 30
NEAR_MATCH_THRESHOLD: Final[int] = 70
PERFECT_SCORE: Final[int] = 100
MATCH_PERFECT: Final[str] = "perfect"
MATCH_NEAR: Final[str] = "near"
MATCH_CREATIVE: Final[str] = "creative"
MATCH_TYPES: Final[tuple] = (MATCH_PERFECT, MATCH_NEAR, MATCH_CREATIVE)

# Meal slots, in display order
MEAL_TYPES: Final[tuple] = ("breakfast", "lunch", "dinner", "snack")
DEFAULT_MEAL_TYPE: Final[str] = "dinner"

# Month view is always 6 rows x 7 days, starting on Sunday
DAYS_PER_WEEK: Final[int] = 7
CALENDAR_WEEKS: Final[int] = 6
CALENDAR_CELLS: Final[int] = DAYS_PER_WEEK * CALENDAR_WEEKS
