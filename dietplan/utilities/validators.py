"""
Input validation schemas using Pydantic for the bundled recipe catalog and
plan requests.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date
from dietplan.domain.DietaryPreference import DietaryPreference
from dietplan.domain.MealSlot import MealSlot
from dietplan.domain.Recipe import Recipe
from dietplan.utilities.config import DEFAULT_PREFERENCE


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    name: str = Field(..., min_length=1, max_length=100)
    unit: str = Field(..., min_length=1, max_length=20)
    quantity: float = Field(..., gt=0, allow_inf_nan=False)

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class RecipeInput(BaseModel):
    """Schema for a catalog recipe entry."""
    name: str = Field(..., min_length=1, max_length=200)
    slot: MealSlot
    ingredients: List[IngredientInput] = Field(default_factory=list)
    calories: int = Field(0, ge=0)
    tags: List[DietaryPreference] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('tags')
    @classmethod
    def dedupe_tags(cls, v):
        """Drop repeated tags, keeping first occurrence."""
        return list(dict.fromkeys(v))

    def to_domain(self) -> Recipe:
        return Recipe.from_dict(self.model_dump(mode="json"))


class PlanRequest(BaseModel):
    """Schema for a plan generation request."""
    preference: DietaryPreference = DietaryPreference(DEFAULT_PREFERENCE)
    start: Optional[date] = None
    offset: int = Field(0, ge=0, le=1000)
