"""Plan domain values: a planned meal, one day of meals, and a seven-day plan."""
from dataclasses import dataclass
from datetime import date as _date
from typing import Optional, Tuple
from dietplan.domain.DietaryPreference import DietaryPreference
from dietplan.domain.MealSlot import MealSlot
from dietplan.domain.Recipe import Recipe


@dataclass(frozen=True)
class PlannedMeal:
    slot: MealSlot
    recipe: Recipe

    def to_dict(self):
        return {
            "slot": self.slot.value,
            "recipe": self.recipe.to_dict(),
        }


@dataclass(frozen=True)
class DayMealPlan:
    date: _date
    meals: Tuple[PlannedMeal, ...]

    def __post_init__(self):
        object.__setattr__(self, "meals", tuple(self.meals))

    @property
    def total_calories(self) -> int:
        return sum(m.recipe.calories for m in self.meals)

    def meal_for(self, slot: MealSlot) -> Optional[PlannedMeal]:
        for meal in self.meals:
            if meal.slot == slot:
                return meal
        return None

    def to_dict(self):
        return {
            "date": self.date.isoformat(),
            "weekday": self.date.strftime("%A"),
            "meals": [m.to_dict() for m in self.meals],
            "calories": self.total_calories,
        }


@dataclass(frozen=True)
class WeeklyMealPlan:
    start_date: _date
    days: Tuple[DayMealPlan, ...]
    preference: DietaryPreference = DietaryPreference.BALANCED

    def __post_init__(self):
        object.__setattr__(self, "days", tuple(self.days))

    @property
    def end_date(self) -> Optional[_date]:
        return self.days[-1].date if self.days else None

    @property
    def total_calories(self) -> int:
        return sum(d.total_calories for d in self.days)

    def meals(self):
        '''Yields every PlannedMeal of the week, day by day, in slot order.'''
        for day in self.days:
            yield from day.meals

    def to_dict(self):
        end = self.end_date
        return {
            "start_date": self.start_date.isoformat(),
            "end_date": end.isoformat() if end else None,
            "preference": self.preference.value,
            "days": [d.to_dict() for d in self.days],
            "calories": self.total_calories,
        }
