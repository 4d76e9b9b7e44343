"""MealSlot enum: the fixed, ordered meal occasions of a planned day."""
from enum import Enum


class MealSlot(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @property
    def ordinal(self) -> int:
        '''Position of the slot within a day (breakfast = 0).'''
        return list(MealSlot).index(self)

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def ordered(cls):
        return list(cls)
