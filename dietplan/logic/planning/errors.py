"""Planning failures."""
from dietplan.domain.DietaryPreference import DietaryPreference
from dietplan.domain.MealSlot import MealSlot


class CatalogGap(Exception):
    """No eligible recipe for a (day, slot), even after the balanced fallback."""

    def __init__(self, day_index: int, slot: MealSlot, preference: DietaryPreference):
        self.day_index = day_index
        self.slot = slot
        self.preference = preference
        super().__init__(
            f"No eligible recipe for day {day_index}, slot '{slot.value}' "
            f"(preference '{preference.value}')"
        )

    def to_dict(self):
        return {
            "error": "catalog_gap",
            "day_index": self.day_index,
            "slot": self.slot.value,
            "preference": self.preference.value,
        }


__all__ = ["CatalogGap"]
