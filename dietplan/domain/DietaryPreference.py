"""DietaryPreference enum: filter key used to narrow eligible recipes."""
from enum import Enum


class DietaryPreference(str, Enum):
    BALANCED = "balanced"
    HIGH_PROTEIN = "highProtein"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    DietaryPreference.BALANCED: "Balanced",
    DietaryPreference.HIGH_PROTEIN: "High Protein",
    DietaryPreference.VEGETARIAN: "Vegetarian",
    DietaryPreference.VEGAN: "Vegan",
}
