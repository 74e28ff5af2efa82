"""
Input validation schemas using Pydantic for better data integrity.
"""
from datetime import date as _date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from kingmenu.utilities.constants import DEFAULT_MEAL_TYPE, MEAL_TYPES

MEAL_TYPE_PATTERN = r'^(' + '|'.join(MEAL_TYPES) + r')$'


class OwnedIngredientInput(BaseModel):
    """Schema for declaring an owned ingredient."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(0, ge=0)
    unit: str = Field('', max_length=20)
    category: str = Field('', max_length=50)
    expiry_date: Optional[_date] = None

    @field_validator('name', 'unit', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v:
            raise ValueError('Ingredient name cannot be empty')
        return v


class MatchRequest(BaseModel):
    """Schema for a dish match request; owned=None means use the pantry."""
    owned: Optional[List[OwnedIngredientInput]] = None
    match_type: str = Field('all', pattern=r'^(all|perfect|near|creative)$')


class SelectionRequest(BaseModel):
    """Schema for adding a dish to the selection."""
    dish_id: str = Field(..., min_length=1)


class OwnedFlagInput(BaseModel):
    owned: bool = True


class MealPlanEntryInput(BaseModel):
    """Schema for scheduling a dish (also used for whole-record updates)."""
    dish_id: str = Field(..., min_length=1)
    date: _date
    meal_type: str = Field(DEFAULT_MEAL_TYPE, pattern=MEAL_TYPE_PATTERN)
    servings: int = Field(..., ge=1, le=50)
    notes: Optional[str] = Field(None, max_length=500)
    user_id: Optional[str] = None

    @field_validator('notes')
    @classmethod
    def blank_notes_to_none(cls, v):
        """Treat whitespace-only notes as no notes."""
        if v is not None and not v.strip():
            return None
        return v
